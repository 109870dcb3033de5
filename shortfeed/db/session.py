# ============================================================================
# FILE: shortfeed/db/session.py
# ============================================================================
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

def create_session_factory(database_url: str):
    """Build an engine and a session factory for the given URL"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sessions are opened from worker threads as well as the event loop
        connect_args = {"check_same_thread": False, "timeout": 30}
    engine = create_engine(database_url, connect_args=connect_args)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return engine, SessionLocal
