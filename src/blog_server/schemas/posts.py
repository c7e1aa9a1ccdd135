from pydantic import BaseModel


class PostAuthor(BaseModel):
    id: int
    name: str


class PostListItem(BaseModel):
    id: int
    title: str
    excerpt: str
    author: PostAuthor
    created_at: int


class PostListResponse(BaseModel):
    posts: list[PostListItem]
    total: int
    page: int
    limit: int


class PostResponse(BaseModel):
    id: int
    title: str
    body: str
    author: PostAuthor
    created_at: int
    updated_at: int
