# ============================================================================
# FILE: shortfeed/api/endpoints/feed.py
# ============================================================================
from typing import List
from fastapi import APIRouter, Depends
from shortfeed.core.errors import Internal
from shortfeed.schemas.video import VideoPublic
from shortfeed.services.video_service import video_service
from shortfeed.storage import StorageBackend, get_store
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/health")
async def health_check(store: StorageBackend = Depends(get_store)):
    return {"ok": True, "backend": store.name}

@router.get("/feed", response_model=List[VideoPublic])
async def get_feed(store: StorageBackend = Depends(get_store)):
    """
    List every video in the feed
    Available to all users (authenticated and anonymous)
    """
    try:
        video_service.ensure_seeded(store)
        return video_service.list_feed(store)
    except Exception as e:
        logger.error(f"Feed error: {e}")
        raise Internal("feed_failed")
