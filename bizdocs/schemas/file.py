"""File schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class FileResponse(BaseModel):
    """Stored file metadata with a freshly resolved access URL."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    user_id: int
    name: str
    hash_name: str
    path: str
    mime_type: str
    size: int
    url: str | None = None
    created_at: datetime
    updated_at: datetime


class FileUpdateResponse(BaseModel):
    updated: bool


class FileDeleteResponse(BaseModel):
    deleted: bool
