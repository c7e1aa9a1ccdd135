from blog_server.models.authors import Author
from blog_server.models.posts import Post

__all__ = [
    "Author",
    "Post",
]
