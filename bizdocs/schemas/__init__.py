"""Pydantic schemas for API requests and responses."""

from bizdocs.schemas.auth import MessageResponse, Token, UserLogin
from bizdocs.schemas.company import CompanyCreate, CompanyResponse, CompanyUpdate
from bizdocs.schemas.file import FileDeleteResponse, FileResponse, FileUpdateResponse
from bizdocs.schemas.user import UserRegister, UserResponse, UserUpdate

__all__ = [
    "UserLogin",
    "Token",
    "MessageResponse",
    "UserRegister",
    "UserUpdate",
    "UserResponse",
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyResponse",
    "FileResponse",
    "FileUpdateResponse",
    "FileDeleteResponse",
]
