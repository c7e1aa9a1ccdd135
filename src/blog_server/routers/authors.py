import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from htpy.starlette import HtpyResponse
from sqlalchemy.ext.asyncio import AsyncSession

from blog_server.dependencies import get_readonly_db_session, get_settings
from blog_server.schemas.authors import AuthorListItem, AuthorListResponse, AuthorPostItem, AuthorResponse
from blog_server.services import authors as authors_service
from blog_server.settings import Settings
from blog_server.utils import MAX_PAGE, page_offset
from blog_server.views.pages.author import render_author
from blog_server.views.pages.authors_list import render_authors_list

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/authors", tags=["authors"])


@router.get("", response_model=None)
async def list_authors(
    request: Request,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int | None = Query(None, ge=1),
    settings: Settings = Depends(get_settings),
    session: AsyncSession = Depends(get_readonly_db_session),
) -> Any:
    limit = min(limit or settings.default_page_size, settings.max_page_size)

    rows = await authors_service.list_authors(session, offset=page_offset(page, limit), limit=limit)
    total = await authors_service.count_authors(session)
    authors = [
        AuthorListItem(
            id=author.id,
            name=author.name,
            email=author.email,
            post_count=post_count,
            created_at=author.created_at,
        )
        for author, post_count in rows
    ]

    if "text/html" in request.headers.get("accept", ""):
        return HtpyResponse(render_authors_list(authors=authors, total=total, page=page, limit=limit))

    return AuthorListResponse(authors=authors, total=total, page=page, limit=limit)


@router.get("/{author_id}", response_model=None)
async def get_author(
    request: Request,
    author_id: int,
    session: AsyncSession = Depends(get_readonly_db_session),
) -> Any:
    author = await authors_service.get_author(session, author_id)
    if author is None:
        logger.info(f"Author {author_id} not found")
        raise HTTPException(status_code=404, detail="Author not found")

    posts = await authors_service.list_posts_for_author(session, author_id)
    response = AuthorResponse(
        id=author.id,
        name=author.name,
        email=author.email,
        bio=author.bio,
        created_at=author.created_at,
        updated_at=author.updated_at,
        posts=[AuthorPostItem(id=post.id, title=post.title, created_at=post.created_at) for post in posts],
    )

    if "text/html" in request.headers.get("accept", ""):
        return HtpyResponse(render_author(author=response))

    return response
