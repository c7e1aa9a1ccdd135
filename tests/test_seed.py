import pytest
from sqlalchemy import Engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blog_server import database
from blog_server.seed import SAMPLE_AUTHORS, SAMPLE_POSTS, seed_sample_data
from blog_server.services.authors import count_authors, list_authors
from blog_server.services.posts import count_posts, get_post, list_posts


@pytest.mark.asyncio
async def test_seed_inserts_sample_rows_once(shared_memory_uri: str, sync_engine: Engine) -> None:
    engine = create_async_engine(f"sqlite+aiosqlite:///{shared_memory_uri}", poolclass=StaticPool)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with database.get_session(session_maker) as session:
        inserted = await seed_sample_data(session)
    assert inserted == len(SAMPLE_POSTS)

    async with database.get_session(session_maker) as session:
        assert await seed_sample_data(session) == 0

    async with database.get_session(session_maker, read_only=True) as session:
        assert await count_authors(session) == len(SAMPLE_AUTHORS)
        assert await count_posts(session) == len(SAMPLE_POSTS)

        authors = await list_authors(session, offset=0, limit=10)
        assert {author.name: count for author, count in authors} == {"Ada Lovelace": 2, "Grace Hopper": 1}

        newest_post, newest_author = (await list_posts(session, offset=0, limit=1))[0]
        assert newest_post.title == SAMPLE_POSTS[-1][1]
        assert newest_author.email == SAMPLE_POSTS[-1][0]

        assert await get_post(session, 999) is None

    await engine.dispose()
