# ============================================================================
# FILE: shortfeed/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""
    
    # App settings
    APP_NAME: str = "Shortfeed"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Storage: "sql" (atomic conditional updates) or "file" (locked JSON documents)
    STORAGE_BACKEND: str = "sql"
    DATABASE_URL: str = "sqlite:///./shortfeed.db"  # Change to PostgreSQL in production
    DATA_DIR: str = "./data"
    
    # Security
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "sess"
    SESSION_EXPIRE_DAYS: int = 7
    SESSION_COOKIE_SECURE: bool = False  # True behind HTTPS in production
    
    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    
    # Validation limits
    USERNAME_MIN_LENGTH: int = 3
    PASSWORD_MIN_LENGTH: int = 6
    COMMENT_MAX_LENGTH: int = 300
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
