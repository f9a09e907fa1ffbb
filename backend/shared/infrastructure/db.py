"""
Database configuration and session management.
Uses SQLAlchemy 2.0 patterns with one session per request.
"""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from shared.config.settings import DATABASE_URL, settings


def _engine_options(url: str) -> dict[str, Any]:
    """
    Build engine keyword arguments for the configured backend.

    SQLite (local development and tests) needs cross-thread access because
    FastAPI runs sync endpoints in a threadpool; server databases get
    pooling and timeouts.
    """
    if url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "echo": settings.sql_echo,
        }

    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": 5,
        "max_overflow": 10,
        "pool_timeout": 30,  # Wait max 30s for connection from pool
        "pool_recycle": 1800,  # Recycle connections after 30 minutes
        "connect_args": {"connect_timeout": 10},
        "echo": settings.sql_echo,
    }


engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL))

# Session factory
SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency for database sessions.

    Usage:
        @router.get("/api/Branch")
        def list_branches(db: Session = Depends(get_db)):
            return EntityService(BRANCH, db).get_all()

    The session is automatically closed after the request completes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def safe_commit(db: Session) -> None:
    """
    Commit with automatic rollback on failure.

    Re-raises the exception after rolling back.
    """
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
