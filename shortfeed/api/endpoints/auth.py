# ============================================================================
# FILE: shortfeed/api/endpoints/auth.py
# ============================================================================
from fastapi import APIRouter, Depends, Response, status
from shortfeed.api.dependencies import start_session, end_session
from shortfeed.config import settings
from shortfeed.core.errors import AppError, InvalidInput, Unauthorized, Internal
from shortfeed.schemas.user import Credentials, AuthResponse, OkResponse
from shortfeed.services.user_service import user_service
from shortfeed.storage import StorageBackend, get_store
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    credentials: Credentials,
    response: Response,
    store: StorageBackend = Depends(get_store)
):
    """
    Register a new user account and start a session
    """
    username = credentials.username or ""
    password = credentials.password or ""
    if not username or not password:
        raise InvalidInput("missing_credentials")
    if len(username) < settings.USERNAME_MIN_LENGTH:
        raise InvalidInput("username_too_short")
    if len(password) < settings.PASSWORD_MIN_LENGTH:
        raise InvalidInput("password_too_short")
    
    try:
        user = user_service.create_user(store, username, password)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Signup error: {e}")
        raise Internal("signup_failed")
    
    start_session(response, user)
    return {"ok": True, "username": user["username"]}

@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: Credentials,
    response: Response,
    store: StorageBackend = Depends(get_store)
):
    """
    Login with username and password
    Sets the session cookie
    """
    try:
        user = user_service.authenticate_user(store, credentials.username or "", credentials.password or "")
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise Internal("login_failed")
    
    if not user:
        logger.warning(f"Failed login for: {credentials.username}")
        raise Unauthorized("invalid_login")
    
    start_session(response, user)
    return {"ok": True, "username": user["username"]}

@router.post("/logout", response_model=OkResponse)
async def logout(response: Response):
    """Drop the session cookie"""
    end_session(response)
    return {"ok": True}
