"""File storage protocol."""

from typing import Protocol

from domain.entities.stored_file import UploadTarget


class IFileStorage(Protocol):
    """Interface to the object store holding uploaded files.

    Implementations raise ``StoredFileNotFoundError`` when a reference no
    longer exists and ``StorageError`` for any other backend failure.
    """

    async def get_url(self, file_id: str) -> str:
        """Return a fetchable URL for a stored file."""
        ...

    async def delete(self, file_id: str) -> None:
        """Delete a stored file. May raise ``StoredFileNotFoundError`` if it is already gone."""
        ...

    async def create_upload_target(self) -> UploadTarget:
        """Allocate a new file reference and a signed URL to upload it to."""
        ...
