# ============================================================================
# FILE: shortfeed/api/dependencies.py
# Session/auth gate: signed session cookie <-> authenticated identity
# ============================================================================
from datetime import timedelta
from typing import Any, Dict, Optional
from fastapi import Depends, Response
from fastapi.security import APIKeyCookie
from shortfeed.config import settings
from shortfeed.core.errors import Unauthorized
from shortfeed.core.security import create_session_token, decode_session_token
from shortfeed.schemas.user import SessionUser

session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)

def get_current_user(
    token: Optional[str] = Depends(session_cookie)
) -> Optional[SessionUser]:
    """
    Get current identity from the session cookie
    Returns None if there is no cookie or it is expired or tampered with
    (allows anonymous access)
    """
    if not token:
        return None
    
    payload = decode_session_token(token)
    if not payload:
        return None
    
    username = payload.get("sub")
    user_id = payload.get("uid")
    if username is None or user_id is None:
        return None
    return SessionUser(id=user_id, username=username)

def require_current_user(
    current_user: Optional[SessionUser] = Depends(get_current_user)
) -> SessionUser:
    """
    Require authenticated user (raises 401 if not authenticated)
    Use this dependency for protected endpoints
    """
    if current_user is None:
        raise Unauthorized("unauthorized")
    return current_user

def start_session(response: Response, user: Dict[str, Any]) -> None:
    """Issue the session cookie for a freshly authenticated user"""
    max_age = timedelta(days=settings.SESSION_EXPIRE_DAYS)
    token = create_session_token({"sub": user["username"], "uid": user["id"]}, expires_delta=max_age)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=int(max_age.total_seconds()),
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )

def end_session(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
