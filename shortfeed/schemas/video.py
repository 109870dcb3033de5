# ============================================================================
# FILE: shortfeed/schemas/video.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import List, Optional

class VideoPublic(BaseModel):
    """Feed projection of a video (like witnesses are never exposed)"""
    id: int
    src: str
    username: str
    caption: str = ""
    music: str = ""
    like_count: int = Field(0, alias="likeCount")
    comment_count: int = Field(0, alias="commentCount")
    
    class Config:
        populate_by_name = True

class LikeResponse(BaseModel):
    id: int
    like_count: int = Field(0, alias="likeCount")
    
    class Config:
        populate_by_name = True

class CommentCreate(BaseModel):
    """Schema for posting a comment; the author comes from the session"""
    text: Optional[str] = None

class CommentResponse(BaseModel):
    id: int
    user: str
    text: str
    at: str

class CommentList(BaseModel):
    id: int
    comments: List[CommentResponse] = []

class CommentCreated(BaseModel):
    ok: bool = True
    comment: CommentResponse
