import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from htpy.starlette import HtpyResponse
from sqlalchemy.ext.asyncio import AsyncSession

from blog_server.dependencies import get_readonly_db_session, get_settings
from blog_server.models.authors import Author
from blog_server.models.posts import Post
from blog_server.schemas.posts import PostAuthor, PostListItem, PostListResponse, PostResponse
from blog_server.services import posts as posts_service
from blog_server.settings import Settings
from blog_server.utils import MAX_PAGE, page_offset, snip
from blog_server.views.pages.post import render_post
from blog_server.views.pages.posts_list import render_posts_list

logger = logging.getLogger(__name__)
router = APIRouter(tags=["posts"])


def _post_author(author: Author) -> PostAuthor:
    return PostAuthor(id=author.id, name=author.name)


def _list_item(post: Post, author: Author) -> PostListItem:
    return PostListItem(
        id=post.id,
        title=post.title,
        excerpt=snip(post.body),
        author=_post_author(author),
        created_at=post.created_at,
    )


@router.get("/", response_model=None, include_in_schema=False)
@router.get("/posts", response_model=None)
async def list_posts(
    request: Request,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int | None = Query(None, ge=1),
    settings: Settings = Depends(get_settings),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> Any:
    limit = min(limit or settings.default_page_size, settings.max_page_size)

    rows = await posts_service.list_posts(session, offset=page_offset(page, limit), limit=limit)
    total = await posts_service.count_posts(session)
    posts = [_list_item(post, author) for post, author in rows]

    if "text/html" in request.headers.get("accept", ""):
        return HtpyResponse(render_posts_list(posts=posts, total=total, page=page, limit=limit))

    return PostListResponse(posts=posts, total=total, page=page, limit=limit)


@router.get("/posts/{post_id}", response_model=None)
async def get_post(
    request: Request,
    post_id: int,
    session: AsyncSession = Depends(get_readonly_db_session),
) -> Any:
    row = await posts_service.get_post(session, post_id)
    if row is None:
        logger.info(f"Post {post_id} not found")
        raise HTTPException(status_code=404, detail="Post not found")

    post, author = row
    response = PostResponse(
        id=post.id,
        title=post.title,
        body=post.body,
        author=_post_author(author),
        created_at=post.created_at,
        updated_at=post.updated_at,
    )

    if "text/html" in request.headers.get("accept", ""):
        return HtpyResponse(render_post(post=response))

    return response
