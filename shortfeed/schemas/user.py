# ============================================================================
# FILE: shortfeed/schemas/user.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import List, Optional

class Credentials(BaseModel):
    """Schema for signup and login (fields checked in the route)"""
    username: Optional[str] = None
    password: Optional[str] = None

class AuthResponse(BaseModel):
    """Schema for a successful signup or login"""
    ok: bool = True
    username: str

class SessionUser(BaseModel):
    """Identity carried by the session cookie"""
    id: int
    username: str

class OkResponse(BaseModel):
    ok: bool = True

class PasswordChange(BaseModel):
    """Schema for changing the account password"""
    old_password: Optional[str] = Field(None, alias="oldPassword")
    new_password: Optional[str] = Field(None, alias="newPassword")
    
    class Config:
        populate_by_name = True

class CourseRequest(BaseModel):
    """Schema for adding or removing a course"""
    name: Optional[str] = None

class CoursesResponse(BaseModel):
    courses: List[str] = []
