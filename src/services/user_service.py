"""User business rules between the API and the repository."""

import logging

from src.models.user import User
from src.repositories.user_repository import UserRepository
from src.schemas.user import UserCreate, UserUpdate
from src.services.errors import InvalidInputError, UserNotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related operations."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def create(self, data: UserCreate) -> User:
        """Create a user. Name and email must both be non-empty."""
        if not data.name or not data.email:
            raise InvalidInputError()

        user = self.repository.create(data)
        logger.info("Created user %s", user.id)
        return user

    def get_by_id(self, user_id: int) -> User:
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    def get_all(self) -> list[User]:
        return self.repository.get_all()

    def update(self, user_id: int, data: UserUpdate) -> User:
        """Update a user's name and/or email.

        At least one field must be non-empty; empty fields are left untouched.
        """
        if not data.name and not data.email:
            # A missing user is reported as such even when the payload is empty
            if self.repository.get_by_id(user_id) is None:
                raise UserNotFoundError()
            raise InvalidInputError()

        user = self.repository.update(user_id, data)
        if user is None:
            raise UserNotFoundError()
        logger.info("Updated user %s", user_id)
        return user

    def delete(self, user_id: int) -> None:
        """Delete a user, failing with UserNotFoundError if nothing was removed."""
        if not self.repository.delete(user_id):
            raise UserNotFoundError()
        logger.info("Deleted user %s", user_id)
