"""SQLAlchemy models."""

from bizdocs.models.access_token import PersonalAccessToken
from bizdocs.models.company import Company
from bizdocs.models.file import File
from bizdocs.models.service_request import ServiceRequest
from bizdocs.models.user import User

__all__ = [
    "User",
    "Company",
    "File",
    "PersonalAccessToken",
    "ServiceRequest",
]
