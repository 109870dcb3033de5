# ============================================================================
# FILE: shortfeed/services/user_service.py
# ============================================================================
from typing import Any, Dict, List, Optional
from shortfeed.core.errors import Conflict, NotFound
from shortfeed.core.security import get_password_hash, verify_password
from shortfeed.storage import StorageBackend, UsernameTaken, StaleWrite
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service layer for accounts, passwords and course lists"""
    
    def create_user(self, store: StorageBackend, username: str, password: str) -> Dict[str, Any]:
        """
        Create a new user account
        The backend inserts only if the username is free, so two concurrent
        signups for one name yield one user and one Conflict
        """
        password_hash = get_password_hash(password)
        try:
            user = store.create_user(username, password_hash)
        except UsernameTaken:
            logger.warning(f"Signup rejected, username taken: {username}")
            raise Conflict("username_taken")
        logger.info(f"User created: {username} (id={user['id']})")
        return user
    
    def get_user_by_username(self, store: StorageBackend, username: str) -> Optional[Dict[str, Any]]:
        """Get user by username"""
        return store.get_user(username)
    
    def authenticate_user(self, store: StorageBackend, username: str, password: str) -> Optional[Dict[str, Any]]:
        """Authenticate user with username and password"""
        user = store.get_user(username)
        if not user:
            return None
        if not verify_password(password, user["passwordHash"]):
            return None
        return user
    
    def change_password(self, store: StorageBackend, username: str, old_password: str, new_password: str) -> bool:
        """
        Replace the password hash after checking the old password
        Returns False without touching stored state when the user is missing,
        the old password is wrong, or the hash changed underneath us
        """
        user = store.get_user(username)
        if not user:
            return False
        if not verify_password(old_password, user["passwordHash"]):
            return False
        try:
            store.replace_password_hash(username, user["passwordHash"], get_password_hash(new_password))
        except StaleWrite:
            logger.warning(f"Password change raced with another update: {username}")
            return False
        logger.info(f"Password changed: {username}")
        return True
    
    def get_courses(self, store: StorageBackend, username: str) -> List[str]:
        courses = store.get_courses(username)
        if courses is None:
            raise NotFound("user_not_found")
        return courses
    
    def add_course(self, store: StorageBackend, username: str, name: str) -> List[str]:
        courses = store.add_course(username, name)
        if courses is None:
            raise NotFound("user_not_found")
        logger.info(f"Course added for {username}: {name}")
        return courses
    
    def remove_course(self, store: StorageBackend, username: str, name: str) -> List[str]:
        courses = store.remove_course(username, name)
        if courses is None:
            raise NotFound("user_not_found")
        logger.info(f"Course removed for {username}: {name}")
        return courses

# Create singleton instance
user_service = UserService()
