# ============================================================================
# FILE: shortfeed/db/models/user.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from shortfeed.db.base import Base

def _utcnow():
    return datetime.now(timezone.utc)

class User(Base):
    """User account; username is the case-sensitive unique key"""
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=_utcnow)
    
    # Relationships
    courses = relationship(
        "UserCourse",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserCourse.id",
    )

class UserCourse(Base):
    """Ordered course list entry for a user"""
    __tablename__ = "user_courses"
    
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    
    # Relationships
    user = relationship("User", back_populates="courses")
