"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from bizdocs.api.dependencies import get_auth_service, get_current_user, get_user_service
from bizdocs.models.user import User
from bizdocs.schemas.auth import MessageResponse, Token, UserLogin
from bizdocs.schemas.user import UserRegister, UserResponse
from bizdocs.services.auth import AuthService
from bizdocs.services.user_service import UserService

router = APIRouter(prefix="/api/v1", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Register a new user."""
    return users.register(user_data)


@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    return Token(token=auth.login(credentials.email, credentials.password))


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.post("/logout", response_model=MessageResponse)
def logout(
    current_user: Annotated[User, Depends(get_current_user)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Logout, revoking every token of the current user."""
    auth.logout(current_user)
    return MessageResponse(message="Successfully logged out.")
