"""Tests for the user service."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from src.models.user import User
from src.schemas.user import UserCreate, UserUpdate
from src.services.errors import InvalidInputError, StoreError, UserNotFoundError
from src.services.user_service import UserService


@pytest.fixture
def repository():
    return MagicMock()


@pytest.fixture
def service(repository):
    return UserService(repository)


def make_user(user_id: int = 1, name: str = "Alice", email: str = "alice@example.com") -> User:
    return User(id=user_id, name=name, email=email, created_at=datetime.now(UTC))


class TestCreate:
    """Tests for UserService.create."""

    def test_delegates_valid_input(self, service, repository):
        """Test that valid input reaches the repository."""
        repository.create.return_value = make_user()
        data = UserCreate(name="Alice", email="alice@example.com")

        result = service.create(data)

        assert result.id == 1
        repository.create.assert_called_once_with(data)

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "", "email": "a@example.com"},
            {"name": "Alice", "email": ""},
            {"name": "Alice"},
            {"email": "a@example.com"},
            {},
        ],
    )
    def test_rejects_empty_fields(self, service, repository, payload):
        """Test that a missing name or email never touches the store."""
        with pytest.raises(InvalidInputError):
            service.create(UserCreate(**payload))
        repository.create.assert_not_called()

    def test_propagates_store_error(self, service, repository):
        """Test that store failures are not translated."""
        repository.create.side_effect = StoreError()
        with pytest.raises(StoreError):
            service.create(UserCreate(name="Alice", email="alice@example.com"))


class TestGetByID:
    """Tests for UserService.get_by_id."""

    def test_returns_user(self, service, repository):
        """Test that a found user is returned."""
        user = make_user(7)
        repository.get_by_id.return_value = user
        assert service.get_by_id(7) is user

    def test_absent_raises_not_found(self, service, repository):
        """Test that the absent sentinel becomes UserNotFoundError."""
        repository.get_by_id.return_value = None
        with pytest.raises(UserNotFoundError):
            service.get_by_id(7)


def test_get_all_delegates(service, repository):
    """Test that listing is a plain pass-through."""
    repository.get_all.return_value = []
    assert service.get_all() == []
    repository.get_all.assert_called_once_with()


class TestUpdate:
    """Tests for UserService.update."""

    def test_updates_user(self, service, repository):
        """Test that a partial update is passed to the repository."""
        repository.update.return_value = make_user(name="Alicia")
        data = UserUpdate(name="Alicia")

        result = service.update(1, data)

        assert result.name == "Alicia"
        repository.update.assert_called_once_with(1, data)

    def test_absent_raises_not_found(self, service, repository):
        """Test that updating a missing user raises UserNotFoundError."""
        repository.update.return_value = None
        with pytest.raises(UserNotFoundError):
            service.update(1, UserUpdate(email="new@example.com"))

    def test_both_empty_raises_invalid_input(self, service, repository):
        """Test that an empty update of an existing user is invalid."""
        repository.get_by_id.return_value = make_user()
        with pytest.raises(InvalidInputError):
            service.update(1, UserUpdate(name="", email=""))
        repository.update.assert_not_called()

    def test_both_empty_on_missing_user_raises_not_found(self, service, repository):
        """Test that a missing user wins over an empty payload."""
        repository.get_by_id.return_value = None
        with pytest.raises(UserNotFoundError):
            service.update(1, UserUpdate())
        repository.update.assert_not_called()


class TestDelete:
    """Tests for UserService.delete."""

    def test_deletes_user(self, service, repository):
        """Test that a removed row is a success."""
        repository.delete.return_value = True
        service.delete(3)
        repository.delete.assert_called_once_with(3)

    def test_nothing_removed_raises_not_found(self, service, repository):
        """Test that deleting a missing user raises UserNotFoundError."""
        repository.delete.return_value = False
        with pytest.raises(UserNotFoundError):
            service.delete(3)
        repository.get_by_id.assert_not_called()
