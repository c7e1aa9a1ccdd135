import logging

from alembic import command
from alembic.config import Config

from blog_server.settings import Settings

logger = logging.getLogger(__name__)


def alembic_config(settings: Settings) -> Config:
    config = Config(settings.alembic_config)
    config.set_main_option("sqlalchemy.url", f"sqlite:///{settings.database_path}")
    config.attributes["configure_logger"] = False
    return config


def upgrade_database(settings: Settings) -> None:
    logger.info(f"Applying migrations to {settings.database_path}")
    command.upgrade(alembic_config(settings), "head")
