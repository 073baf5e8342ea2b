"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    """Create a new user. Both fields are required by the service, not here."""

    name: str | None = None
    email: str | None = None


class UserUpdate(BaseModel):
    """Update a user. Empty or missing fields keep their stored value."""

    name: str | None = None
    email: str | None = None

    def changed_fields(self) -> dict[str, str]:
        """Return only the fields that should overwrite the stored record."""
        return {key: value for key, value in self.model_dump().items() if value}


class UserResponse(BaseModel):
    """User response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
