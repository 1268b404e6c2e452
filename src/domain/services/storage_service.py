"""Storage resolver: turns opaque file references into URLs."""

import structlog

from core.exceptions import StorageError, StoredFileNotFoundError
from domain.entities.stored_file import UploadTarget
from domain.repositories.file_storage import IFileStorage

logger = structlog.get_logger()


class StorageService:
    """Service layer over the file store used by the content services."""

    def __init__(self, storage: IFileStorage) -> None:
        self._storage = storage

    async def resolve_url(self, file_id: str | None) -> str | None:
        """Resolve a file reference to a URL, or None.

        A reference that no longer resolves (deleted object, backend
        failure) degrades to None so one broken file never fails the
        record it belongs to.
        """
        if not file_id:
            return None
        try:
            return await self._storage.get_url(file_id)
        except StorageError as exc:
            logger.warning(
                "storage_url_unresolved",
                file_id=file_id,
                error_code=exc.error_code.value,
                error=exc.message,
            )
            return None

    async def delete(self, file_id: str) -> None:
        """Delete a stored file; missing files are ignored."""
        try:
            await self._storage.delete(file_id)
        except StoredFileNotFoundError:
            logger.debug("stored_file_already_absent", file_id=file_id)
            return
        logger.info("stored_file_deleted", file_id=file_id)

    async def begin_upload(self) -> UploadTarget:
        """Create a short-lived upload target for a new file."""
        target = await self._storage.create_upload_target()
        logger.info("upload_target_created", file_id=target.file_id)
        return target
