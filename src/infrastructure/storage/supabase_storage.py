"""Supabase Storage implementation of the file storage protocol.

Talks to the Storage REST API with the service role key:

- ``POST /storage/v1/object/sign/{bucket}/{path}`` signs a download URL
- ``DELETE /storage/v1/object/{bucket}`` removes objects by prefix list
- ``POST /storage/v1/object/upload/sign/{bucket}/{path}`` signs an upload URL

File references are object paths inside the configured bucket.
"""

from datetime import datetime, timedelta
from typing import Any
from uuid import uuid4

import httpx
import structlog

from core.config import settings
from core.exceptions import StorageError, StoredFileNotFoundError
from domain.entities.stored_file import UploadTarget

logger = structlog.get_logger()

# Supabase signed upload URLs are valid for two hours
UPLOAD_URL_TTL = timedelta(hours=2)
REQUEST_TIMEOUT_SECONDS = 10.0


class SupabaseFileStorage:
    """IFileStorage backed by a Supabase Storage bucket."""

    def __init__(
        self,
        base_url: str = settings.supabase_url,
        service_key: str = settings.supabase_service_role_key,
        bucket: str = settings.storage_bucket,
        signed_url_expire_seconds: int = settings.storage_signed_url_expire_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._storage_url = f"{base_url.rstrip('/')}/storage/v1"
        self._service_key = service_key
        self._bucket = bucket
        self._expires_in = signed_url_expire_seconds
        self._transport = transport

    async def get_url(self, file_id: str) -> str:
        """Sign a time-limited download URL for a stored object."""
        body = await self._request(
            "POST",
            f"/object/sign/{self._bucket}/{file_id}",
            file_id,
            json={"expiresIn": self._expires_in},
        )
        if not isinstance(body, dict):
            body = {}
        signed_path = body.get("signedURL") or body.get("signedUrl")
        if not signed_path:
            raise StorageError("Storage did not return a signed URL", details={"file_id": file_id})
        return self._absolute(signed_path)

    async def delete(self, file_id: str) -> None:
        """Remove an object. Supabase reports missing objects as an empty result."""
        await self._request(
            "DELETE",
            f"/object/{self._bucket}",
            file_id,
            json={"prefixes": [file_id]},
        )

    async def create_upload_target(self) -> UploadTarget:
        """Reserve a fresh object path and sign an upload URL for it."""
        file_id = uuid4().hex
        body = await self._request("POST", f"/object/upload/sign/{self._bucket}/{file_id}", file_id)
        signed_path = body.get("url") if isinstance(body, dict) else None
        if not signed_path:
            raise StorageError("Storage did not return an upload URL", details={"file_id": file_id})
        return UploadTarget(
            file_id=file_id,
            upload_url=self._absolute(signed_path),
            expires_at=datetime.utcnow() + UPLOAD_URL_TTL,
            method="PUT",
        )

    async def _request(
        self,
        method: str,
        path: str,
        file_id: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        headers = {
            "Authorization": f"Bearer {self._service_key}",
            "apikey": self._service_key,
        }
        try:
            async with httpx.AsyncClient(
                base_url=self._storage_url,
                transport=self._transport,
                timeout=REQUEST_TIMEOUT_SECONDS,
            ) as client:
                response = await client.request(method, path, headers=headers, json=json)
        except httpx.HTTPError as exc:
            logger.error("storage_request_failed", method=method, path=path, error=str(exc))
            raise StorageError(details={"file_id": file_id}) from exc

        if self._is_not_found(response):
            raise StoredFileNotFoundError(file_id)
        if response.is_error:
            logger.error(
                "storage_request_rejected",
                method=method,
                path=path,
                status_code=response.status_code,
                body=response.text[:200],
            )
            raise StorageError(
                f"Storage responded with HTTP {response.status_code}",
                details={"file_id": file_id},
            )
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            logger.error(
                "storage_response_unreadable",
                method=method,
                path=path,
                body=response.text[:200],
            )
            raise StorageError(
                "Storage returned a malformed response",
                details={"file_id": file_id},
            ) from exc

    @staticmethod
    def _is_not_found(response: httpx.Response) -> bool:
        if response.status_code == 404:
            return True
        # The Storage API wraps missing objects in a 400 with a nested status
        if response.status_code == 400:
            try:
                body = response.json()
            except ValueError:
                return False
            return isinstance(body, dict) and (
                str(body.get("statusCode")) == "404" or body.get("error") == "not_found"
            )
        return False

    def _absolute(self, signed_path: str) -> str:
        if signed_path.startswith("http"):
            return signed_path
        return f"{self._storage_url}/{signed_path.lstrip('/')}"
