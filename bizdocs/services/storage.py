"""Object storage for uploaded documents."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from urllib.parse import quote

from bizdocs.config import get_settings
from bizdocs.exceptions import StorageFailure

logger = logging.getLogger(__name__)


class ObjectStorage(ABC):
    """Blob store addressed by relative POSIX paths."""

    @abstractmethod
    def put(self, path: str, content: bytes) -> str:
        """Write ``content`` at ``path`` and return the stored path."""

    @abstractmethod
    def url(self, path: str) -> str:
        """Public URL for the blob at ``path``."""

    @abstractmethod
    def delete(self, path: str) -> None:
        """Remove the blob at ``path``. Removing a missing blob is not an error."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def read(self, path: str) -> bytes:
        pass


class LocalObjectStorage(ObjectStorage):
    """Stores blobs as files under a root directory."""

    def __init__(self, root: str | Path, base_url: str):
        self.root = Path(root).resolve()
        self.base_url = base_url.rstrip("/")

    def _resolve(self, path: str) -> Path:
        relative = PurePosixPath(path)
        if relative.is_absolute() or ".." in relative.parts or not relative.parts:
            raise StorageFailure(f"refusing storage path outside the root: {path!r}")
        return self.root.joinpath(*relative.parts)

    def put(self, path: str, content: bytes) -> str:
        target = self._resolve(path)
        tmp = target.with_name(f".{target.name}.part")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(content)
            os.replace(tmp, target)
        except OSError as e:
            logger.error(f"Failed to write blob {path}: {e}")
            tmp.unlink(missing_ok=True)
            raise StorageFailure(f"write of {path} failed: {e}") from e
        logger.debug(f"Stored blob {path} ({len(content)} bytes)")
        return path

    def url(self, path: str) -> str:
        self._resolve(path)
        return f"{self.base_url}/{quote(path)}"

    def delete(self, path: str) -> None:
        target = self._resolve(path)
        try:
            target.unlink()
        except FileNotFoundError:
            logger.warning(f"Blob {path} was already gone")
        except OSError as e:
            logger.error(f"Failed to delete blob {path}: {e}")
            raise StorageFailure(f"delete of {path} failed: {e}") from e
        else:
            logger.debug(f"Deleted blob {path}")

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def read(self, path: str) -> bytes:
        try:
            return self._resolve(path).read_bytes()
        except OSError as e:
            raise StorageFailure(f"read of {path} failed: {e}") from e


def get_object_storage() -> ObjectStorage:
    """Dependency that provides the configured object storage."""
    settings = get_settings()
    return LocalObjectStorage(settings.storage_root, settings.storage_url)
