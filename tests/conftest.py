import time
import uuid
from typing import AsyncGenerator, Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from alembic import command
from alembic.config import Config
from blog_server import database
from blog_server.dependencies import get_readonly_db_session
from blog_server.models import Author, Post


@pytest.fixture
def shared_memory_uri() -> str:
    db_name = f"blog_test_{uuid.uuid4().hex}"
    return f"file:{db_name}?mode=memory&cache=shared&uri=true"


@pytest.fixture
def sync_engine(shared_memory_uri: str) -> Generator[Engine, None, None]:
    engine = create_engine(f"sqlite+pysqlite:///{shared_memory_uri}", poolclass=StaticPool)

    alembic_cfg = Config("alembic.ini")
    alembic_cfg.attributes["configure_logger"] = False
    with engine.begin() as connection:
        alembic_cfg.attributes["connection"] = connection
        command.upgrade(alembic_cfg, "head")

    yield engine
    engine.dispose()


@pytest.fixture
def db(sync_engine: Engine) -> Generator[Session, None, None]:
    with Session(sync_engine) as session:
        yield session


@pytest.fixture
def make_author(db: Session) -> Callable[..., Author]:
    def _make_author(name: str, *, email: str | None = None, bio: str | None = None) -> Author:
        author = Author(name=name, email=email, bio=bio)
        db.add(author)
        db.commit()
        db.refresh(author)
        return author

    return _make_author


@pytest.fixture
def make_post(db: Session) -> Callable[..., Post]:
    def _make_post(author: Author, title: str, body: str = "Body text.", *, created_at: int | None = None) -> Post:
        created_at = created_at if created_at is not None else int(time.time())
        post = Post(author_id=author.id, title=title, body=body, created_at=created_at, updated_at=created_at)
        db.add(post)
        db.commit()
        db.refresh(post)
        return post

    return _make_post


@pytest.fixture
def client(shared_memory_uri: str, sync_engine: Engine) -> Generator[TestClient, None, None]:
    from starlette.routing import _DefaultLifespan

    from blog_server.app import create_app

    engine = create_async_engine(f"sqlite+aiosqlite:///{shared_memory_uri}", echo=False, poolclass=StaticPool)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_readonly_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with database.get_session(session_maker, read_only=True) as session:
            yield session

    app = create_app()

    app.router.lifespan_context = _DefaultLifespan(app.router)

    app.dependency_overrides[get_readonly_db_session] = override_readonly_db_session

    with TestClient(app) as test_client:
        yield test_client
