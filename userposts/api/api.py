from fastapi import APIRouter

from userposts.api.routes.routes_misc import router as misc_router
from userposts.api.routes.routes_posts import router as posts_router
from userposts.api.routes.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(misc_router)
api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(posts_router, prefix="/posts", tags=["posts"])
