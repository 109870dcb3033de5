# ============================================================================
# FILE: shortfeed/api/endpoints/account.py
# ============================================================================
from typing import Optional
from fastapi import APIRouter, Depends, status
from shortfeed.api.dependencies import get_current_user, require_current_user
from shortfeed.config import settings
from shortfeed.core.errors import AppError, InvalidInput, Unauthorized, Internal
from shortfeed.schemas.user import SessionUser, CourseRequest, CoursesResponse, PasswordChange, OkResponse
from shortfeed.services.user_service import user_service
from shortfeed.storage import StorageBackend, get_store
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def _course_name(payload: CourseRequest) -> str:
    name = (payload.name or "").strip()
    if not name:
        raise InvalidInput("empty_course")
    return name

@router.get("/me")
async def get_me(current_user: Optional[SessionUser] = Depends(get_current_user)):
    """Current session identity, or {} when anonymous"""
    if current_user is None:
        return {}
    return current_user.model_dump()

@router.get("/account/courses", response_model=CoursesResponse)
async def get_courses(
    store: StorageBackend = Depends(get_store),
    current_user: SessionUser = Depends(require_current_user)
):
    try:
        courses = user_service.get_courses(store, current_user.username)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Courses read error: {e}")
        raise Internal("account_failed")
    return {"courses": courses}

@router.post("/account/courses", response_model=CoursesResponse, status_code=status.HTTP_201_CREATED)
async def add_course(
    payload: CourseRequest,
    store: StorageBackend = Depends(get_store),
    current_user: SessionUser = Depends(require_current_user)
):
    """
    Add a course to the user's list (no-op if already present)
    Requires authentication
    """
    name = _course_name(payload)
    try:
        courses = user_service.add_course(store, current_user.username, name)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Add course error: {e}")
        raise Internal("account_failed")
    return {"courses": courses}

@router.delete("/account/courses", response_model=CoursesResponse)
async def remove_course(
    payload: CourseRequest,
    store: StorageBackend = Depends(get_store),
    current_user: SessionUser = Depends(require_current_user)
):
    """
    Remove a course from the user's list
    Requires authentication
    """
    name = _course_name(payload)
    try:
        courses = user_service.remove_course(store, current_user.username, name)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Remove course error: {e}")
        raise Internal("account_failed")
    return {"courses": courses}

@router.post("/account/password", response_model=OkResponse)
async def change_password(
    payload: PasswordChange,
    store: StorageBackend = Depends(get_store),
    current_user: SessionUser = Depends(require_current_user)
):
    """
    Change the password after re-checking the old one
    Requires authentication
    """
    new_password = payload.new_password or ""
    if len(new_password) < settings.PASSWORD_MIN_LENGTH:
        raise InvalidInput("too_short")
    
    try:
        changed = user_service.change_password(
            store, current_user.username, payload.old_password or "", new_password
        )
    except Exception as e:
        logger.error(f"Password change error: {e}")
        raise Internal("account_failed")
    
    if not changed:
        raise Unauthorized("invalid_old_password")
    return {"ok": True}
