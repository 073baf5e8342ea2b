"""User persistence against the relational store."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.user import User
from src.schemas.user import UserCreate, UserUpdate
from src.services.errors import StoreError

logger = logging.getLogger(__name__)


class UserRepository:
    """Runs user queries on a request-scoped session.

    Lookups return ``None`` when no row matches; that is not an error.
    Every database failure is rolled back and re-raised as ``StoreError``.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.warning("User %s failed: %s", operation, exc)
            raise StoreError(f"User {operation} failed") from exc

    def create(self, data: UserCreate) -> User:
        """Insert a user stamped with the current time and return the stored row."""
        user = User(name=data.name, email=data.email, created_at=datetime.now(UTC))
        with self._store_errors("create"):
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> User | None:
        with self._store_errors("lookup"):
            return self.db.execute(select(User).where(User.id == user_id)).scalar_one_or_none()

    def get_all(self) -> list[User]:
        """Return every user ordered by id."""
        with self._store_errors("listing"):
            return list(self.db.execute(select(User).order_by(User.id.asc())).scalars().all())

    def update(self, user_id: int, data: UserUpdate) -> User | None:
        """Overwrite only the non-empty fields of ``data`` in a single statement.

        Returns the row as written, or ``None`` when ``user_id`` does not exist.
        """
        values = data.changed_fields()
        if not values:
            return self.get_by_id(user_id)

        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(**values)
            .returning(User)
            .execution_options(populate_existing=True)
        )
        with self._store_errors("update"):
            # The RETURNING row is the result; the session does not expire it on commit
            user = self.db.execute(stmt).scalar_one_or_none()
            self.db.commit()
        return user

    def delete(self, user_id: int) -> bool:
        """Delete a user. Returns whether a row was actually removed."""
        with self._store_errors("delete"):
            result = self.db.execute(delete(User).where(User.id == user_id))
            self.db.commit()
        return result.rowcount > 0
