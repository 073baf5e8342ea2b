"""Database configuration and session management."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.config import Settings, get_settings

settings = get_settings()


def build_engine(settings: Settings) -> Engine:
    """Create the pooled engine shared by all requests."""
    url = settings.sqlalchemy_url
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})

    connect_args = {}
    if settings.db_statement_timeout_ms > 0:
        # Per-statement deadline; expiry surfaces as a store error
        connect_args["options"] = f"-c statement_timeout={settings.db_statement_timeout_ms}"

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        connect_args=connect_args,
    )


engine = build_engine(settings)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

