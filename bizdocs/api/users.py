"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from bizdocs.api.dependencies import get_current_user, get_user_service
from bizdocs.models.user import User
from bizdocs.schemas.user import UserResponse, UserUpdate
from bizdocs.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("/username/{username}", response_model=UserResponse)
def find_by_username(
    username: str,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Find a user by exact name."""
    return users.find_by_username(username)


@router.get("/email/{email}", response_model=UserResponse)
def find_by_email(
    email: str,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Find a user by exact email."""
    return users.find_by_email(email)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user."""
    return users.find_by_id(user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    user_data: UserUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's own account."""
    return users.update(user_id, user_data, current_user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Delete the current user's own account with everything it owns."""
    users.delete(user_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
