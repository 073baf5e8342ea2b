"""Errors raised by the user service and the store beneath it."""


class UserServiceError(Exception):
    """Base class for errors the API maps to a response."""

    message = "User service error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidInputError(UserServiceError):
    """The client sent data that fails validation policy."""

    message = "Invalid input data"


class UserNotFoundError(UserServiceError):
    """The referenced user does not exist."""

    message = "User not found"


class StoreError(UserServiceError):
    """Any failure reported by the database: connectivity, constraints, timeouts."""

    message = "Store operation failed"
