# ============================================================================
# FILE: shortfeed/storage/sql_store.py
# Table backend: uniqueness and counters enforced by the database itself
# ============================================================================
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from shortfeed.db.base import Base
from shortfeed.db.models import User, UserCourse, Video, VideoLike, Comment
from shortfeed.db.session import create_session_factory
from shortfeed.storage.base import StorageBackend, UsernameTaken, AlreadyLiked, StaleWrite
import logging

logger = logging.getLogger(__name__)


class SqlStorage(StorageBackend):
    """SQLAlchemy backend; every mutation is one transaction"""

    name = "sql"

    def __init__(self, database_url: str):
        self.engine, self.SessionLocal = create_session_factory(database_url)
        Base.metadata.create_all(bind=self.engine)
        logger.info(f"SQL storage ready: {self.engine.url.render_as_string(hide_password=True)}")

    # ------------------------------------------------------------- helpers

    @staticmethod
    def _user_to_dict(user: User) -> Dict[str, Any]:
        return {
            "id": user.id,
            "username": user.username,
            "passwordHash": user.password_hash,
            "courses": [c.name for c in user.courses],
        }

    @staticmethod
    def _video_to_dict(video: Video) -> Dict[str, Any]:
        return {
            "id": video.id,
            "src": video.src,
            "username": video.username,
            "caption": video.caption,
            "music": video.music,
            "likeCount": video.like_count or 0,
            "commentCount": video.comment_count or 0,
        }

    @staticmethod
    def _comment_to_dict(comment: Comment) -> Dict[str, Any]:
        return {"id": comment.id, "user": comment.user, "text": comment.text, "at": comment.at}

    @staticmethod
    def _video_exists(db, video_id: int) -> bool:
        return db.query(Video.id).filter(Video.id == video_id).first() is not None

    # --------------------------------------------------------------- users

    def get_user(self, username: str) -> Optional[Dict[str, Any]]:
        with self.SessionLocal() as db:
            user = db.query(User).filter(User.username == username).first()
            return self._user_to_dict(user) if user else None

    def create_user(self, username: str, password_hash: str) -> Dict[str, Any]:
        with self.SessionLocal() as db:
            user = User(username=username, password_hash=password_hash)
            db.add(user)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                raise UsernameTaken(username)
            db.refresh(user)
            return self._user_to_dict(user)

    def replace_password_hash(self, username: str, expected_hash: str, new_hash: str) -> None:
        with self.SessionLocal() as db:
            updated = db.query(User).filter(
                User.username == username,
                User.password_hash == expected_hash
            ).update({User.password_hash: new_hash}, synchronize_session=False)
            if updated != 1:
                db.rollback()
                raise StaleWrite(username)
            db.commit()

    def get_courses(self, username: str) -> Optional[List[str]]:
        with self.SessionLocal() as db:
            user = db.query(User).filter(User.username == username).first()
            if not user:
                return None
            return [c.name for c in user.courses]

    def add_course(self, username: str, name: str) -> Optional[List[str]]:
        with self.SessionLocal() as db:
            user = db.query(User).filter(User.username == username).first()
            if not user:
                return None
            if name not in [c.name for c in user.courses]:
                user.courses.append(UserCourse(name=name))
                db.commit()
            return [c.name for c in user.courses]

    def remove_course(self, username: str, name: str) -> Optional[List[str]]:
        with self.SessionLocal() as db:
            user = db.query(User).filter(User.username == username).first()
            if not user:
                return None
            matches = [c for c in user.courses if c.name == name]
            if matches:
                for course in matches:
                    user.courses.remove(course)
                db.commit()
            return [c.name for c in user.courses]

    # -------------------------------------------------------------- videos

    def count_videos(self) -> int:
        with self.SessionLocal() as db:
            return db.query(Video).count()

    def insert_seed_videos(self, videos: List[Dict[str, Any]]) -> int:
        with self.SessionLocal() as db:
            if db.query(Video).count() > 0:
                return 0
            for item in videos:
                db.add(Video(
                    id=item["id"],
                    src=item["src"],
                    username=item["username"],
                    caption=item.get("caption", ""),
                    music=item.get("music", ""),
                    like_count=0,
                    comment_count=0
                ))
            try:
                db.commit()
            except IntegrityError:
                # another caller seeded between the count and the insert
                db.rollback()
                return 0
            return len(videos)

    def list_videos(self) -> List[Dict[str, Any]]:
        with self.SessionLocal() as db:
            return [self._video_to_dict(v) for v in db.query(Video).order_by(Video.id).all()]

    def get_video(self, video_id: int) -> Optional[Dict[str, Any]]:
        with self.SessionLocal() as db:
            video = db.query(Video).filter(Video.id == video_id).first()
            return self._video_to_dict(video) if video else None

    def like_video(self, video_id: int, user_id: str) -> Optional[int]:
        with self.SessionLocal() as db:
            if not self._video_exists(db, video_id):
                return None
            try:
                # the (video_id, user_id) primary key is the witness set
                db.add(VideoLike(video_id=video_id, user_id=user_id))
                db.flush()
                db.query(Video).filter(Video.id == video_id).update(
                    {Video.like_count: Video.like_count + 1}, synchronize_session=False
                )
                db.commit()
            except IntegrityError:
                db.rollback()
                raise AlreadyLiked(f"user {user_id} already liked video {video_id}")
            return db.query(Video.like_count).filter(Video.id == video_id).scalar()

    def get_like_count(self, video_id: int) -> Optional[int]:
        with self.SessionLocal() as db:
            row = db.query(Video.like_count).filter(Video.id == video_id).first()
            return (row[0] or 0) if row else None

    def add_comment(self, video_id: int, username: str, text: str, at: str) -> Optional[Dict[str, Any]]:
        with self.SessionLocal() as db:
            if not self._video_exists(db, video_id):
                return None
            comment = Comment(video_id=video_id, user=username, text=text, at=at)
            db.add(comment)
            db.flush()
            created = self._comment_to_dict(comment)
            db.query(Video).filter(Video.id == video_id).update(
                {Video.comment_count: Video.comment_count + 1}, synchronize_session=False
            )
            db.commit()
            return created

    def get_comments(self, video_id: int) -> Optional[List[Dict[str, Any]]]:
        with self.SessionLocal() as db:
            if not self._video_exists(db, video_id):
                return None
            comments = db.query(Comment).filter(Comment.video_id == video_id).order_by(Comment.id).all()
            return [self._comment_to_dict(c) for c in comments]
