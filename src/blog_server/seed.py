"""Populate an empty database with a few authors and posts."""

import argparse
import asyncio
import logging
import time
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from blog_server.database import create_session_maker, get_session
from blog_server.migrations import upgrade_database
from blog_server.models.authors import Author
from blog_server.models.posts import Post
from blog_server.services.authors import count_authors
from blog_server.settings import Settings

logger = logging.getLogger(__name__)

SAMPLE_AUTHORS: list[dict[str, str]] = [
    {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "bio": "Writes about analytical engines and the poetry of numbers.",
    },
    {
        "name": "Grace Hopper",
        "email": "grace@example.com",
        "bio": "Compilers, nanoseconds and the occasional moth.",
    },
]

SAMPLE_POSTS: list[tuple[str, str, str]] = [
    (
        "ada@example.com",
        "Notes on the Analytical Engine",
        "The engine weaves algebraic patterns just as the Jacquard loom weaves flowers and leaves.\n\n"
        "It can do whatever we know how to order it to perform.",
    ),
    (
        "ada@example.com",
        "On Bernoulli numbers",
        "A worked example of a program for computing Bernoulli numbers, step by step.",
    ),
    (
        "grace@example.com",
        "A nanosecond, in wire",
        "Hold up eleven point eight inches of wire: that is how far light travels in a nanosecond.",
    ),
]


async def seed_sample_data(session: AsyncSession) -> int:
    """Insert sample rows when no authors exist. Returns the number of posts added."""
    if await count_authors(session) > 0:
        logger.info("Authors already present, skipping seed")
        return 0

    authors = {data["email"]: Author(**data) for data in SAMPLE_AUTHORS}
    session.add_all(authors.values())
    await session.flush()

    now = int(time.time())
    posts = [
        Post(
            author_id=authors[email].id,
            title=title,
            body=body,
            created_at=now - (len(SAMPLE_POSTS) - index) * 3600,
            updated_at=now - (len(SAMPLE_POSTS) - index) * 3600,
        )
        for index, (email, title, body) in enumerate(SAMPLE_POSTS)
    ]
    session.add_all(posts)
    await session.flush()

    logger.info(f"Seeded {len(authors)} authors and {len(posts)} posts")
    return len(posts)


async def _seed(settings: Settings) -> int:
    engine, session_maker = create_session_maker(settings.database_url)
    try:
        async with get_session(session_maker) as session:
            return await seed_sample_data(session)
    finally:
        await engine.dispose()


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = Settings()

    parser = argparse.ArgumentParser(prog="blog-seed")
    parser.add_argument("--log-level", "-l", default=settings.log_level, help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=settings.log_format,
    )

    upgrade_database(settings)
    asyncio.run(_seed(settings))


if __name__ == "__main__":
    main()
