"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)


class Token(BaseModel):
    """Bearer token response."""

    token: str
    token_type: str = "bearer"  # noqa: S105


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str
