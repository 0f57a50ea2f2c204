"""File API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from bizdocs.api.dependencies import get_current_user, get_file_service
from bizdocs.config import get_settings
from bizdocs.exceptions import ValidationFailure
from bizdocs.models.user import User
from bizdocs.schemas.file import FileDeleteResponse, FileResponse, FileUpdateResponse
from bizdocs.services.file_service import FileService, UploadedFile

router = APIRouter(prefix="/api/v1/files", tags=["files"])

CurrentUser = Annotated[User, Depends(get_current_user)]
Files = Annotated[FileService, Depends(get_file_service)]


def read_upload(upload: UploadFile) -> UploadedFile:
    """Read an upload and check it against the allowed types and size."""
    settings = get_settings()
    # One byte past the limit is enough to reject; larger bodies are never buffered.
    content = upload.file.read(settings.upload_max_bytes + 1)
    received = UploadedFile(
        content=content,
        original_name=upload.filename or "",
        mime_type=upload.content_type or "application/octet-stream",
    )

    allowed = settings.upload_allowed_extensions
    if received.extension not in allowed:
        raise ValidationFailure.for_field(
            "file", f"The file must be a file of type: {', '.join(allowed)}."
        )
    if received.size > settings.upload_max_bytes:
        raise ValidationFailure.for_field(
            "file", f"The file may not be greater than {settings.upload_max_kb} kilobytes."
        )
    return received


# File routes are sync so the lifecycle (and its per-file locks) runs in the threadpool.


@router.get("", response_model=list[FileResponse])
def list_files(current_user: CurrentUser, files: Files):
    """List the files of every company the current user owns."""
    return files.find_all_for_caller(current_user)


@router.post("", response_model=FileResponse, status_code=status.HTTP_201_CREATED)
def upload_file(
    file: Annotated[UploadFile, File(description="Document (jpg, jpeg, png, pdf, doc, docx)")],
    company_id: Annotated[int, Form()],
    current_user: CurrentUser,
    files: Files,
):
    """Upload a document for one of the current user's companies."""
    record = files.create(read_upload(file), company_id, current_user)
    return files.present(record)


@router.get("/{file_id}", response_model=FileResponse)
def get_file(file_id: int, current_user: CurrentUser, files: Files):
    """Get a file with a freshly resolved access URL."""
    return files.find_by_id(file_id, current_user)


@router.put("/{file_id}", response_model=FileUpdateResponse)
def replace_file(
    file_id: int,
    file: Annotated[UploadFile, File()],
    company_id: Annotated[int, Form()],
    current_user: CurrentUser,
    files: Files,
):
    """Replace the content of a file."""
    updated = files.update(file_id, read_upload(file), company_id, current_user)
    return FileUpdateResponse(updated=updated)


@router.delete("/{file_id}", response_model=FileDeleteResponse)
def delete_file(file_id: int, current_user: CurrentUser, files: Files):
    """Delete a file and its stored blob."""
    return FileDeleteResponse(deleted=files.delete(file_id, current_user))
