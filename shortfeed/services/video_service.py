# ============================================================================
# FILE: shortfeed/services/video_service.py
# ============================================================================
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from shortfeed.core.errors import NotFound
from shortfeed.storage import StorageBackend, AlreadyLiked
from shortfeed.storage.seed import SEED_VIDEOS
import logging

logger = logging.getLogger(__name__)

def utc_timestamp() -> str:
    """ISO-8601 UTC time with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

class VideoService:
    """Service layer for the feed, likes and comments"""
    
    def ensure_seeded(self, store: StorageBackend) -> int:
        """
        Populate an empty video collection with the seed feed
        Safe to call on every request; a no-op once any video exists
        """
        if store.count_videos() > 0:
            return 0
        inserted = store.insert_seed_videos(SEED_VIDEOS)
        if inserted:
            logger.info(f"Seeded {inserted} videos into {store.name} storage")
        return inserted
    
    def list_feed(self, store: StorageBackend) -> List[Dict[str, Any]]:
        """Public projections of all videos"""
        return store.list_videos()
    
    def get_video(self, store: StorageBackend, video_id: int) -> Optional[Dict[str, Any]]:
        return store.get_video(video_id)
    
    def like_video(self, store: StorageBackend, video_id: int, user_id: int) -> int:
        """
        Count a user's like at most once and return the current like count
        A rejected conditional update means the user already liked the video;
        that is answered with the unchanged count, not an error
        """
        try:
            like_count = store.like_video(video_id, str(user_id))
        except AlreadyLiked:
            like_count = store.get_like_count(video_id)
            if like_count is None:
                raise NotFound("not_found")
            logger.info(f"Repeat like ignored: video {video_id} by user {user_id}")
            return like_count
        
        if like_count is None:
            raise NotFound("not_found")
        logger.info(f"Like recorded: video {video_id} by user {user_id} (now {like_count})")
        return like_count
    
    def add_comment(self, store: StorageBackend, video_id: int, username: str, text: str) -> Dict[str, Any]:
        """Append a comment authored by username; returns the stored comment"""
        comment = store.add_comment(video_id, username, text, utc_timestamp())
        if comment is None:
            raise NotFound("not_found")
        logger.info(f"Comment {comment['id']} added to video {video_id} by {username}")
        return comment
    
    def get_comments(self, store: StorageBackend, video_id: int) -> List[Dict[str, Any]]:
        comments = store.get_comments(video_id)
        if comments is None:
            raise NotFound("not_found")
        return comments

# Create singleton instance
video_service = VideoService()
