import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BLOG_SERVER_",
        env_file=os.getenv("SETTINGS_ENV_FILE", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")

    database_path: str = Field(default="blog.db", description="SQLite database file")
    alembic_config: str = Field(default="alembic.ini", description="Alembic config file")

    default_page_size: int = Field(default=20, ge=1, description="Index page size when no limit is given")
    max_page_size: int = Field(default=100, ge=1, description="Largest accepted index page size")

    @property
    def database_url(self) -> str:
        return f"sqlite+aiosqlite:///{self.database_path}"

    @property
    def log_format(self) -> str:
        return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
