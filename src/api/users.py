"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_user_service, parse_user_id
from src.schemas.user import UserCreate, UserResponse, UserUpdate
from src.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
def get_users(service: Annotated[UserService, Depends(get_user_service)]):
    """Get all users ordered by id."""
    return service.get_all()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: Annotated[int, Depends(parse_user_id)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get a single user."""
    return service.get_by_id(user_id)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Create a new user."""
    return service.create(user_data)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: Annotated[int, Depends(parse_user_id)],
    user_data: UserUpdate,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Update a user's name and/or email."""
    return service.update(user_id, user_data)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: Annotated[int, Depends(parse_user_id)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Delete a user."""
    service.delete(user_id)
