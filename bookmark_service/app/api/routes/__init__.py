from fastapi import APIRouter

from .bookmarks import router as bookmarks_router
from .users import router as users_router

api_router = APIRouter()
api_router.include_router(bookmarks_router, prefix="/bookmarks", tags=["bookmarks"])
api_router.include_router(users_router, prefix="/users", tags=["users"])
