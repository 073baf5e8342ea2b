"""FastAPI dependencies for the database and user services."""

import re
from typing import Annotated

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.database import get_db
from src.repositories.user_repository import UserRepository
from src.services.user_service import UserService

_USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_MAX_USER_ID = 2**63 - 1
_MIN_USER_ID = -(2**63)


def parse_user_id(user_id: str) -> int:
    """Parse the ``{user_id}`` path segment as a base-10 64-bit integer."""
    if not _USER_ID_PATTERN.fullmatch(user_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user ID")

    value = int(user_id)
    if not _MIN_USER_ID <= value <= _MAX_USER_ID:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user ID")
    return value


def get_user_repository(
    db: Annotated[Session, Depends(get_db)],
) -> UserRepository:
    """Get user repository bound to the request's session."""
    return UserRepository(db)


def get_user_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(repository)
