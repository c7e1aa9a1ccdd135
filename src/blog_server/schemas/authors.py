from pydantic import BaseModel


class AuthorListItem(BaseModel):
    id: int
    name: str
    email: str | None
    post_count: int
    created_at: int


class AuthorListResponse(BaseModel):
    authors: list[AuthorListItem]
    total: int
    page: int
    limit: int


class AuthorPostItem(BaseModel):
    id: int
    title: str
    created_at: int


class AuthorResponse(BaseModel):
    id: int
    name: str
    email: str | None
    bio: str | None
    created_at: int
    updated_at: int
    posts: list[AuthorPostItem]
