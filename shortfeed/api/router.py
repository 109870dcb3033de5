# ============================================================================
# FILE: shortfeed/api/router.py
# ============================================================================
from fastapi import APIRouter
from shortfeed.api.endpoints import auth, feed, videos, account

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(feed.router, tags=["feed"])
api_router.include_router(videos.router, prefix="/videos", tags=["videos"])
api_router.include_router(account.router, tags=["account"])
