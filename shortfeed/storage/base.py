# ============================================================================
# FILE: shortfeed/storage/base.py
# Storage backend interface with Strategy Pattern
# Supports: SQL tables (SQLAlchemy), locked JSON documents
# ============================================================================
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

# Record shapes exchanged with the service layer (camelCase, as serialized):
#   user:    {"id", "username", "passwordHash", "courses"}
#   video:   {"id", "src", "username", "caption", "music", "likeCount", "commentCount"}
#   comment: {"id", "user", "text", "at"}


class ConditionFailed(Exception):
    """A conditional write was rejected because its precondition did not hold"""


class UsernameTaken(ConditionFailed):
    pass


class AlreadyLiked(ConditionFailed):
    pass


class StaleWrite(ConditionFailed):
    pass


# ============================================================================
# STRATEGY PATTERN: Storage Backend Interface
# ============================================================================

class StorageBackend(ABC):
    """
    Abstract base class for storage backends

    Every mutating method is a single atomic step against the backend.
    Methods addressing a video or user that does not exist return None.
    """

    name = "abstract"

    # ------------------------------------------------------------------ users

    @abstractmethod
    def get_user(self, username: str) -> Optional[Dict[str, Any]]:
        """Fetch a user record by exact username"""
        pass

    @abstractmethod
    def create_user(self, username: str, password_hash: str) -> Dict[str, Any]:
        """Insert a user only if the username is free, else raise UsernameTaken"""
        pass

    @abstractmethod
    def replace_password_hash(self, username: str, expected_hash: str, new_hash: str) -> None:
        """Swap the hash only if it still equals expected_hash, else raise StaleWrite"""
        pass

    @abstractmethod
    def get_courses(self, username: str) -> Optional[List[str]]:
        pass

    @abstractmethod
    def add_course(self, username: str, name: str) -> Optional[List[str]]:
        """Append a course name unless already present; returns the updated list"""
        pass

    @abstractmethod
    def remove_course(self, username: str, name: str) -> Optional[List[str]]:
        pass

    # ----------------------------------------------------------------- videos

    @abstractmethod
    def count_videos(self) -> int:
        pass

    @abstractmethod
    def insert_seed_videos(self, videos: List[Dict[str, Any]]) -> int:
        """Insert the seed set if the collection is empty; returns rows inserted"""
        pass

    @abstractmethod
    def list_videos(self) -> List[Dict[str, Any]]:
        """Public projections of every video, ordered by id"""
        pass

    @abstractmethod
    def get_video(self, video_id: int) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def like_video(self, video_id: int, user_id: str) -> Optional[int]:
        """
        Record user_id in the video's like witness set and bump likeCount by one,
        as one conditional update. Raises AlreadyLiked if user_id is already a
        witness. Returns the new likeCount.
        """
        pass

    @abstractmethod
    def get_like_count(self, video_id: int) -> Optional[int]:
        pass

    @abstractmethod
    def add_comment(self, video_id: int, username: str, text: str, at: str) -> Optional[Dict[str, Any]]:
        """Append a comment and bump the comment counter in the same write"""
        pass

    @abstractmethod
    def get_comments(self, video_id: int) -> Optional[List[Dict[str, Any]]]:
        """Comments in append order"""
        pass
