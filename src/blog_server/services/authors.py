from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from blog_server.models.authors import Author
from blog_server.models.posts import Post
from blog_server.utils import fits_sqlite_integer


async def count_authors(session: AsyncSession) -> int:
    result = await session.execute(select(func.count()).select_from(Author))
    return result.scalar_one()


async def list_authors(session: AsyncSession, *, offset: int, limit: int) -> list[tuple[Author, int]]:
    """Authors ordered by name, each paired with the number of posts they wrote."""
    post_counts = (
        select(col(Post.author_id).label("author_id"), func.count(col(Post.id)).label("post_count"))
        .group_by(col(Post.author_id))
        .subquery()
    )
    result = await session.execute(
        select(Author, func.coalesce(post_counts.c.post_count, 0))
        .outerjoin(post_counts, post_counts.c.author_id == col(Author.id))
        .order_by(col(Author.name).asc(), col(Author.id).asc())
        .offset(offset)
        .limit(limit)
    )
    return [(author, int(post_count)) for author, post_count in result.all()]


async def get_author(session: AsyncSession, author_id: int) -> Author | None:
    if not fits_sqlite_integer(author_id):
        return None
    return await session.get(Author, author_id)


async def list_posts_for_author(session: AsyncSession, author_id: int) -> list[Post]:
    result = await session.execute(
        select(Post)
        .where(col(Post.author_id) == author_id)
        .order_by(col(Post.created_at).desc(), col(Post.id).desc())
    )
    return list(result.scalars().all())
