# ============================================================================
# FILE: shortfeed/api/endpoints/videos.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from shortfeed.api.dependencies import require_current_user
from shortfeed.config import settings
from shortfeed.core.errors import AppError, InvalidInput, Internal, NotFound
from shortfeed.schemas.user import SessionUser
from shortfeed.schemas.video import LikeResponse, CommentCreate, CommentList, CommentCreated
from shortfeed.services.video_service import video_service
from shortfeed.storage import StorageBackend, get_store
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def _parse_video_id(raw: str) -> int:
    """Video ids are integers; anything else names no video"""
    try:
        return int(raw)
    except ValueError:
        raise NotFound("not_found")

@router.post("/{video_id}/like", response_model=LikeResponse)
async def like_video(
    video_id: str,
    store: StorageBackend = Depends(get_store),
    current_user: SessionUser = Depends(require_current_user)
):
    """
    Like a video; repeat likes by the same user are not counted again
    Requires authentication
    """
    video_id = _parse_video_id(video_id)
    try:
        like_count = video_service.like_video(store, video_id, current_user.id)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Like error on video {video_id}: {e}")
        raise Internal("like_failed")
    return {"id": video_id, "likeCount": like_count}

@router.get("/{video_id}/comments", response_model=CommentList)
async def get_comments(
    video_id: str,
    store: StorageBackend = Depends(get_store)
):
    """
    Get the comment thread of a video, oldest first
    Available to all users (authenticated and anonymous)
    """
    video_id = _parse_video_id(video_id)
    try:
        comments = video_service.get_comments(store, video_id)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Comments read error on video {video_id}: {e}")
        raise Internal("comments_failed")
    return {"id": video_id, "comments": comments}

@router.post("/{video_id}/comments", response_model=CommentCreated, status_code=status.HTTP_201_CREATED)
async def add_comment(
    video_id: str,
    payload: CommentCreate,
    store: StorageBackend = Depends(get_store),
    current_user: SessionUser = Depends(require_current_user)
):
    """
    Post a comment as the logged-in user
    Requires authentication
    """
    text = (payload.text or "").strip()
    if not text:
        raise InvalidInput("empty_comment")
    if len(text) > settings.COMMENT_MAX_LENGTH:
        raise InvalidInput("too_long")
    video_id = _parse_video_id(video_id)
    
    try:
        comment = video_service.add_comment(store, video_id, current_user.username, text)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Comment error on video {video_id}: {e}")
        raise Internal("comment_failed")
    return {"ok": True, "comment": comment}
