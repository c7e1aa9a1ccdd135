from fastapi import APIRouter

from blog_server.routers.authors import router as authors_router
from blog_server.routers.posts import router as posts_router

router = APIRouter()
router.include_router(authors_router)
router.include_router(posts_router)
