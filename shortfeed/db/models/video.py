# ============================================================================
# FILE: shortfeed/db/models/video.py
# ============================================================================
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from shortfeed.db.base import Base

class Video(Base):
    """Feed video with denormalized like and comment counters"""
    __tablename__ = "videos"
    
    id = Column(Integer, primary_key=True, autoincrement=False)
    src = Column(String, nullable=False)
    username = Column(String, nullable=False)  # author handle
    caption = Column(Text, nullable=False, default="")
    music = Column(String, nullable=False, default="")
    like_count = Column(Integer, nullable=False, default=0)
    comment_count = Column(Integer, nullable=False, default=0)
    
    # Relationships
    comments = relationship(
        "Comment",
        back_populates="video",
        cascade="all, delete-orphan",
        order_by="Comment.id",
    )

class VideoLike(Base):
    """Like witness: one row per (video, user) pair"""
    __tablename__ = "video_likes"
    
    video_id = Column(Integer, ForeignKey("videos.id"), primary_key=True)
    user_id = Column(String, primary_key=True)

class Comment(Base):
    """Append-only comment; id order is chronological order"""
    __tablename__ = "comments"
    
    id = Column(Integer, primary_key=True, index=True)
    video_id = Column(Integer, ForeignKey("videos.id"), nullable=False, index=True)
    user = Column(String, nullable=False)
    text = Column(Text, nullable=False)
    at = Column(String, nullable=False)  # ISO-8601 UTC timestamp
    
    # Relationships
    video = relationship("Video", back_populates="comments")
