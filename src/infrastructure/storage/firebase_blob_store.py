"""BlobStore: Firebase Cloud Storage 구현.

객체 경로: {namespace}/{asset_id}
firebase-admin의 기본 버킷(또는 지정 버킷)을 사용한다.
"""

from __future__ import annotations

import asyncio
import mimetypes
import uuid

from google.api_core import exceptions as gcp_exceptions

from src.domain.exceptions import AssetNotFoundError, StorageError


class FirebaseBlobStore:
    def __init__(self, bucket):
        self._bucket = bucket

    def _blob(self, asset_id: str, namespace: str):
        return self._bucket.blob(f"{namespace}/{asset_id}")

    async def store(self, data: bytes, namespace: str, extension: str) -> str:
        asset_id = f"{uuid.uuid4().hex}{extension}"
        content_type = mimetypes.guess_type(asset_id)[0] or "application/octet-stream"

        def _upload():
            self._blob(asset_id, namespace).upload_from_string(data, content_type=content_type)

        try:
            await asyncio.to_thread(_upload)
        except gcp_exceptions.GoogleAPICallError as e:
            raise StorageError("store", f"{namespace}/{asset_id}: {e}") from e
        return asset_id

    async def delete(self, asset_id: str, namespace: str) -> None:
        try:
            await asyncio.to_thread(self._blob(asset_id, namespace).delete)
        except gcp_exceptions.NotFound as e:
            raise AssetNotFoundError(asset_id, namespace) from e
        except gcp_exceptions.GoogleAPICallError as e:
            raise StorageError("delete", f"{namespace}/{asset_id}: {e}") from e

    async def retrieve(self, asset_id: str, namespace: str) -> bytes:
        try:
            return await asyncio.to_thread(self._blob(asset_id, namespace).download_as_bytes)
        except gcp_exceptions.NotFound as e:
            raise AssetNotFoundError(asset_id, namespace) from e
        except gcp_exceptions.GoogleAPICallError as e:
            raise StorageError("retrieve", f"{namespace}/{asset_id}: {e}") from e

    async def exists(self, asset_id: str, namespace: str) -> bool:
        try:
            return await asyncio.to_thread(self._blob(asset_id, namespace).exists)
        except gcp_exceptions.GoogleAPICallError as e:
            raise StorageError("exists", f"{namespace}/{asset_id}: {e}") from e
