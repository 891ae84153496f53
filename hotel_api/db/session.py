"""Database engine and session management."""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from hotel_api.core.config import settings
import os


def build_engine(database_url: str) -> Engine:
    """
    Create an engine for the given database URL.

    File-backed SQLite databases get their parent directory created and
    share a single connection across threads.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=False)

    db_path = database_url.replace("sqlite:///", "")
    if db_path != ":memory:":
        os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)

    return create_engine(
        database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for FastAPI to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
