"""FastAPI dependencies for authentication, storage and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from bizdocs.database import get_db
from bizdocs.exceptions import AuthenticationFailure
from bizdocs.models.user import User
from bizdocs.services.auth import AuthService
from bizdocs.services.company_service import CompanyService
from bizdocs.services.file_service import FileService
from bizdocs.services.storage import ObjectStorage, get_object_storage
from bizdocs.services.user_service import UserService

security = HTTPBearer(auto_error=False)


def get_auth_service(db: Annotated[Session, Depends(get_db)]) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    if credentials is None:
        raise AuthenticationFailure()
    return auth.authenticate(credentials.credentials)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
    storage: Annotated[ObjectStorage, Depends(get_object_storage)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db, storage)


def get_company_service(
    db: Annotated[Session, Depends(get_db)],
    storage: Annotated[ObjectStorage, Depends(get_object_storage)],
) -> CompanyService:
    """Get company service with dependencies."""
    return CompanyService(db, storage)


def get_file_service(
    db: Annotated[Session, Depends(get_db)],
    storage: Annotated[ObjectStorage, Depends(get_object_storage)],
) -> FileService:
    """Get file service with dependencies."""
    return FileService(db, storage)
