from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from blog_server.models.authors import Author
from blog_server.models.posts import Post
from blog_server.utils import fits_sqlite_integer


async def count_posts(session: AsyncSession) -> int:
    result = await session.execute(select(func.count()).select_from(Post))
    return result.scalar_one()


async def list_posts(session: AsyncSession, *, offset: int, limit: int) -> list[tuple[Post, Author]]:
    """Newest posts first, each paired with its author."""
    result = await session.execute(
        select(Post, Author)
        .join(Author, col(Author.id) == col(Post.author_id))
        .order_by(col(Post.created_at).desc(), col(Post.id).desc())
        .offset(offset)
        .limit(limit)
    )
    return [(post, author) for post, author in result.all()]


async def get_post(session: AsyncSession, post_id: int) -> tuple[Post, Author] | None:
    if not fits_sqlite_integer(post_id):
        return None
    result = await session.execute(
        select(Post, Author).join(Author, col(Author.id) == col(Post.author_id)).where(col(Post.id) == post_id)
    )
    row = result.first()
    if row is None:
        return None
    post, author = row
    return post, author
