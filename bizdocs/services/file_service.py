"""File lifecycle: keeps object storage and file metadata paired."""

import logging
import secrets
import string
from dataclasses import dataclass
from pathlib import PurePath

from sqlalchemy.orm import Session

from bizdocs.config import get_settings
from bizdocs.exceptions import NotFound, StorageFailure, ValidationFailure
from bizdocs.models.file import File
from bizdocs.models.user import User
from bizdocs.repositories.file import FileRepository
from bizdocs.schemas.file import FileResponse
from bizdocs.services.locks import company_locks, file_locks
from bizdocs.services.ownership import get_owned_company, get_owned_file, owned_company_ids
from bizdocs.services.storage import ObjectStorage

logger = logging.getLogger(__name__)

SAFE_NAME_LENGTH = 40
SAFE_NAME_ALPHABET = string.ascii_letters + string.digits


@dataclass
class UploadedFile:
    """An upload as received at the boundary."""

    content: bytes
    original_name: str
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def extension(self) -> str:
        """Lowercased extension of the client name, without the dot."""
        return PurePath(self.original_name).suffix.lstrip(".").lower()


def generate_safe_name(original_name: str) -> str:
    """Random storage name that keeps only the extension of the client name.

    The result never depends on the original name or on row ids.
    """
    token = "".join(secrets.choice(SAFE_NAME_ALPHABET) for _ in range(SAFE_NAME_LENGTH))
    return f"{token}{PurePath(original_name).suffix.lower()}"


class FileService:
    """Create, replace, list and delete documents owned through a company.

    Blob writes happen before the metadata that points at them, and blob
    deletes happen before the metadata row goes away, so a row never points
    at a blob that was never written.
    """

    def __init__(self, db: Session, storage: ObjectStorage):
        self.db = db
        self.storage = storage
        self.files = FileRepository(db)
        self.prefix = get_settings().storage_prefix.strip("/")

    def create(self, upload: UploadedFile, company_id: int, caller: User) -> File:
        """Store the blob, then record it. A failed record removes the blob again."""
        with company_locks.hold(company_id):
            self._target_company(company_id, caller)

            hash_name = generate_safe_name(upload.original_name)
            path = self.storage.put(self._path_for(hash_name), upload.content)

            try:
                record = self.files.create(
                    self._metadata(upload, hash_name, path, company_id, caller.id)
                )
            except Exception:
                logger.error(f"Recording {path} failed, removing the blob")
                self._discard(path)
                raise

        logger.info(f"File {record.id} stored at {path} for company {company_id}")
        return record

    def update(self, file_id: int, upload: UploadedFile, company_id: int, caller: User) -> bool:
        """Replace the content of a file.

        The new blob is written and recorded first; the old blob is deleted
        only once the row points at the new one. If recording fails the new
        blob is removed and the file is left exactly as it was.
        """
        with company_locks.hold(company_id), file_locks.hold(file_id):
            existing = get_owned_file(self.db, file_id, caller, lock=True)
            self._target_company(company_id, caller)
            old_path = existing.path

            hash_name = generate_safe_name(upload.original_name)
            new_path = self.storage.put(self._path_for(hash_name), upload.content)

            try:
                updated = self.files.update(
                    file_id, self._metadata(upload, hash_name, new_path, company_id, caller.id)
                )
            except Exception:
                logger.error(f"Updating file {file_id} failed, removing new blob {new_path}")
                self._discard(new_path)
                raise

            if not updated:
                self._discard(new_path)
                return False

            try:
                self.storage.delete(old_path)
            except StorageFailure as e:
                # The row already points at the new blob; only the old blob is stranded.
                logger.error(f"File {file_id} updated but old blob {old_path} remains: {e}")

        logger.info(f"File {file_id} replaced: {old_path} -> {new_path}")
        return True

    def find_by_id(self, file_id: int, caller: User) -> FileResponse:
        record = get_owned_file(self.db, file_id, caller)
        return self.present(record)

    def find_all_for_caller(self, caller: User) -> list[FileResponse]:
        """Files of every company the caller owns, and nothing else."""
        company_ids = owned_company_ids(self.db, caller.id)
        records = self.files.find_all_by_company_ids(company_ids)
        return [self.present(record) for record in records]

    def delete(self, file_id: int, caller: User) -> bool:
        """Delete the blob, then the row.

        When the blob cannot be deleted the row is kept and the error propagates.
        """
        with file_locks.hold(file_id):
            record = get_owned_file(self.db, file_id, caller, lock=True)
            path = record.path
            try:
                self.storage.delete(path)
            except StorageFailure:
                self.db.rollback()
                logger.error(f"Keeping file {file_id}: blob {path} could not be deleted")
                raise
            deleted = self.files.delete(file_id)

        logger.info(f"File {file_id} deleted ({path})")
        return deleted

    def delete_all_for_company(self, company_id: int) -> int:
        """Remove every file of a company, one blob and row at a time.

        Ownership of the company must already have been checked and the caller
        must hold ``company_locks`` for it, so no upload can slip in meanwhile.
        """
        file_ids = [record.id for record in self.files.find_all_by_company_ids([company_id])]
        removed = 0
        for file_id in file_ids:
            with file_locks.hold(file_id):
                # Re-read under the lock: the file may have been replaced or moved away.
                record = self.files.find_by_id(file_id, lock=True)
                if record is None or record.company_id != company_id:
                    continue
                self.storage.delete(record.path)
                self.files.delete(file_id)
                removed += 1
        return removed

    def present(self, record: File) -> FileResponse:
        """Metadata plus an access URL resolved now, never stored."""
        response = FileResponse.model_validate(record)
        response.url = self.storage.url(record.path)
        return response

    def _target_company(self, company_id: int, caller: User) -> None:
        # Missing and foreign companies are rejected alike so existence never leaks.
        try:
            get_owned_company(self.db, company_id, caller)
        except NotFound:
            raise ValidationFailure.for_field(
                "company_id", "The selected company id is invalid."
            ) from None

    def _path_for(self, hash_name: str) -> str:
        return f"{self.prefix}/{hash_name}" if self.prefix else hash_name

    def _discard(self, path: str) -> None:
        try:
            self.storage.delete(path)
        except StorageFailure as e:
            logger.error(f"Could not remove orphaned blob {path}: {e}")

    @staticmethod
    def _metadata(
        upload: UploadedFile, hash_name: str, path: str, company_id: int, user_id: int
    ) -> dict:
        return {
            "name": upload.original_name,
            "hash_name": hash_name,
            "mime_type": upload.mime_type,
            "size": upload.size,
            "path": path,
            "user_id": user_id,
            "company_id": company_id,
        }
