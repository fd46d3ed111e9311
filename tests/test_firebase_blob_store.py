from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from google.api_core import exceptions as gcp_exceptions

from src.domain.exceptions import AssetNotFoundError, StorageError
from src.infrastructure.storage.firebase_blob_store import FirebaseBlobStore


@pytest.fixture
def bucket() -> MagicMock:
    return MagicMock()


@pytest.fixture
def store(bucket) -> FirebaseBlobStore:
    return FirebaseBlobStore(bucket)


class TestFirebaseBlobStore:
    @pytest.mark.asyncio
    async def test_store_uploads_under_namespace(self, store, bucket):
        asset_id = await store.store(b"image", "category", ".jpg")

        assert asset_id.endswith(".jpg")
        bucket.blob.assert_called_once_with(f"category/{asset_id}")
        bucket.blob.return_value.upload_from_string.assert_called_once_with(
            b"image", content_type="image/jpeg"
        )

    @pytest.mark.asyncio
    async def test_delete(self, store, bucket):
        await store.delete("abc.jpg", "category")

        bucket.blob.assert_called_once_with("category/abc.jpg")
        bucket.blob.return_value.delete.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_delete_missing(self, store, bucket):
        bucket.blob.return_value.delete.side_effect = gcp_exceptions.NotFound("gone")
        with pytest.raises(AssetNotFoundError):
            await store.delete("abc.jpg", "category")

    @pytest.mark.asyncio
    async def test_upload_failure(self, store, bucket):
        bucket.blob.return_value.upload_from_string.side_effect = (
            gcp_exceptions.ServiceUnavailable("down")
        )
        with pytest.raises(StorageError) as exc_info:
            await store.store(b"image", "category", ".jpg")
        assert exc_info.value.operation == "store"

    @pytest.mark.asyncio
    async def test_retrieve_and_exists(self, store, bucket):
        bucket.blob.return_value.download_as_bytes.return_value = b"image"
        bucket.blob.return_value.exists.return_value = True

        assert await store.retrieve("abc.jpg", "category") == b"image"
        assert await store.exists("abc.jpg", "category")

    @pytest.mark.asyncio
    async def test_retrieve_missing(self, store, bucket):
        bucket.blob.return_value.download_as_bytes.side_effect = gcp_exceptions.NotFound("gone")
        with pytest.raises(AssetNotFoundError):
            await store.retrieve("abc.jpg", "category")
