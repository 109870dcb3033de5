# ============================================================================
# FILE: shortfeed/storage/file_store.py
# Document backend: users.json and feed.json under DATA_DIR
# Each document has a single writer at a time; writes replace the file atomically
# ============================================================================
import copy
import json
import os
import threading
from contextlib import contextmanager
from typing import Any, Dict, List, Optional
from shortfeed.storage.base import StorageBackend, UsernameTaken, AlreadyLiked, StaleWrite
import logging

logger = logging.getLogger(__name__)

# One lock per document path, shared by every FileStorage in the process
_locks: Dict[str, threading.RLock] = {}
_locks_guard = threading.Lock()

def _lock_for(path: str) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonDocument:
    """A JSON file whose read-modify-write cycles are serialized by a lock"""

    def __init__(self, path: str, default: Dict[str, Any]):
        self.path = os.path.abspath(path)
        self.lock = _lock_for(self.path)
        with self.lock:
            if not os.path.exists(self.path):
                self._write(copy.deepcopy(default))

    def read(self) -> Dict[str, Any]:
        with self.lock:
            return self._read()

    @contextmanager
    def edit(self):
        """
        Yield the parsed document for mutation and write it back on exit
        Nothing is written if the block raises
        """
        with self.lock:
            data = self._read()
            yield data
            self._write(data)

    def _read(self) -> Dict[str, Any]:
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write(self, data: Dict[str, Any]):
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, self.path)


class FileStorage(StorageBackend):
    """Local JSON backend for development"""

    name = "file"

    def __init__(self, data_dir: str):
        os.makedirs(data_dir, exist_ok=True)
        self.users = JsonDocument(os.path.join(data_dir, "users.json"), {"users": []})
        self.feed = JsonDocument(os.path.join(data_dir, "feed.json"), {"videos": []})
        logger.info(f"File storage ready: {os.path.abspath(data_dir)}")

    # ------------------------------------------------------------- helpers

    @staticmethod
    def _find_user(doc: Dict[str, Any], username: str) -> Optional[Dict[str, Any]]:
        for user in doc["users"]:
            if user["username"] == username:
                return user
        return None

    @staticmethod
    def _find_video(doc: Dict[str, Any], video_id: int) -> Optional[Dict[str, Any]]:
        for video in doc["videos"]:
            if video["id"] == video_id:
                return video
        return None

    @staticmethod
    def _next_id(doc: Dict[str, Any], seq_key: str, existing: List[int]) -> int:
        """Monotonic per-document counter, initialised from the ids already stored"""
        current = doc.get(seq_key) or max(existing, default=0)
        doc[seq_key] = current + 1
        return doc[seq_key]

    @staticmethod
    def _public_video(video: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": video["id"],
            "src": video["src"],
            "username": video["username"],
            "caption": video.get("caption", ""),
            "music": video.get("music", ""),
            "likeCount": video.get("likeCount") or 0,
            "commentCount": len(video.get("comments") or []),
        }

    @staticmethod
    def _user_record(user: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": user["id"],
            "username": user["username"],
            "passwordHash": user["passwordHash"],
            "courses": list(user.get("courses") or []),
        }

    # --------------------------------------------------------------- users

    def get_user(self, username: str) -> Optional[Dict[str, Any]]:
        user = self._find_user(self.users.read(), username)
        return self._user_record(user) if user else None

    def create_user(self, username: str, password_hash: str) -> Dict[str, Any]:
        with self.users.edit() as doc:
            if self._find_user(doc, username):
                raise UsernameTaken(username)
            user = {
                "id": self._next_id(doc, "userSeq", [u["id"] for u in doc["users"]]),
                "username": username,
                "passwordHash": password_hash,
                "courses": [],
            }
            doc["users"].append(user)
            return self._user_record(user)

    def replace_password_hash(self, username: str, expected_hash: str, new_hash: str) -> None:
        with self.users.edit() as doc:
            user = self._find_user(doc, username)
            if not user or user["passwordHash"] != expected_hash:
                raise StaleWrite(username)
            user["passwordHash"] = new_hash

    def get_courses(self, username: str) -> Optional[List[str]]:
        user = self._find_user(self.users.read(), username)
        return list(user.get("courses") or []) if user else None

    def add_course(self, username: str, name: str) -> Optional[List[str]]:
        with self.users.edit() as doc:
            user = self._find_user(doc, username)
            if not user:
                return None
            courses = user.setdefault("courses", [])
            if name not in courses:
                courses.append(name)
            return list(courses)

    def remove_course(self, username: str, name: str) -> Optional[List[str]]:
        with self.users.edit() as doc:
            user = self._find_user(doc, username)
            if not user:
                return None
            user["courses"] = [c for c in user.get("courses") or [] if c != name]
            return list(user["courses"])

    # -------------------------------------------------------------- videos

    def count_videos(self) -> int:
        return len(self.feed.read()["videos"])

    def insert_seed_videos(self, videos: List[Dict[str, Any]]) -> int:
        with self.feed.edit() as doc:
            if doc["videos"]:
                return 0
            for item in videos:
                doc["videos"].append({
                    "id": item["id"],
                    "src": item["src"],
                    "username": item["username"],
                    "caption": item.get("caption", ""),
                    "music": item.get("music", ""),
                    "likeCount": 0,
                    "comments": [],
                    "likesByUser": {},
                })
            return len(videos)

    def list_videos(self) -> List[Dict[str, Any]]:
        videos = sorted(self.feed.read()["videos"], key=lambda v: v["id"])
        return [self._public_video(v) for v in videos]

    def get_video(self, video_id: int) -> Optional[Dict[str, Any]]:
        video = self._find_video(self.feed.read(), video_id)
        return self._public_video(video) if video else None

    def like_video(self, video_id: int, user_id: str) -> Optional[int]:
        with self.feed.edit() as doc:
            video = self._find_video(doc, video_id)
            if not video:
                return None
            likes_by_user = video.setdefault("likesByUser", {})
            if likes_by_user.get(user_id):
                raise AlreadyLiked(f"user {user_id} already liked video {video_id}")
            likes_by_user[user_id] = True
            video["likeCount"] = (video.get("likeCount") or 0) + 1
            return video["likeCount"]

    def get_like_count(self, video_id: int) -> Optional[int]:
        video = self._find_video(self.feed.read(), video_id)
        return (video.get("likeCount") or 0) if video else None

    def add_comment(self, video_id: int, username: str, text: str, at: str) -> Optional[Dict[str, Any]]:
        with self.feed.edit() as doc:
            video = self._find_video(doc, video_id)
            if not video:
                return None
            existing = [c["id"] for v in doc["videos"] for c in v.get("comments") or []]
            comment = {
                "id": self._next_id(doc, "commentSeq", existing),
                "user": username,
                "text": text,
                "at": at,
            }
            video.setdefault("comments", []).append(comment)
            return dict(comment)

    def get_comments(self, video_id: int) -> Optional[List[Dict[str, Any]]]:
        video = self._find_video(self.feed.read(), video_id)
        if not video:
            return None
        return [dict(c) for c in video.get("comments") or []]
