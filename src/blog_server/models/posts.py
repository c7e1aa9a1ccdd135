import time

from sqlalchemy import Index
from sqlmodel import Field, SQLModel


class Post(SQLModel, table=True):
    __tablename__ = "posts"
    __table_args__ = (Index("ix_posts_author_id_created_at", "author_id", "created_at"),)

    id: int | None = Field(default=None, primary_key=True)
    author_id: int = Field(foreign_key="authors.id", index=True)
    title: str
    body: str
    created_at: int = Field(default_factory=lambda: int(time.time()), index=True)
    updated_at: int = Field(default_factory=lambda: int(time.time()))
