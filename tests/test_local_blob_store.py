from __future__ import annotations

import pytest

from src.domain.exceptions import AssetNotFoundError, StorageError
from src.infrastructure.storage.local_blob_store import LocalBlobStore


@pytest.fixture
def store(tmp_path) -> LocalBlobStore:
    return LocalBlobStore(tmp_path)


class TestLocalBlobStore:
    @pytest.mark.asyncio
    async def test_store_writes_under_namespace(self, store, tmp_path):
        asset_id = await store.store(b"image", "category", ".jpg")

        assert asset_id.endswith(".jpg")
        assert (tmp_path / "category" / asset_id).read_bytes() == b"image"
        assert await store.exists(asset_id, "category")
        assert await store.retrieve(asset_id, "category") == b"image"

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, store):
        first = await store.store(b"a", "category", ".jpg")
        second = await store.store(b"a", "category", ".jpg")
        assert first != second

    @pytest.mark.asyncio
    async def test_delete(self, store):
        asset_id = await store.store(b"image", "category", ".jpg")
        await store.delete(asset_id, "category")

        assert not await store.exists(asset_id, "category")
        with pytest.raises(AssetNotFoundError):
            await store.retrieve(asset_id, "category")

    @pytest.mark.asyncio
    async def test_delete_missing(self, store):
        with pytest.raises(AssetNotFoundError) as exc_info:
            await store.delete("nope.jpg", "category")
        assert exc_info.value.namespace == "category"

    @pytest.mark.asyncio
    async def test_namespaces_are_isolated(self, store):
        asset_id = await store.store(b"image", "category", ".jpg")
        assert not await store.exists(asset_id, "product")

    @pytest.mark.asyncio
    async def test_rejects_path_traversal(self, store):
        with pytest.raises(StorageError):
            await store.retrieve("../secret", "category")

    @pytest.mark.asyncio
    async def test_write_failure_is_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_bytes(b"")
        store = LocalBlobStore(blocker)

        with pytest.raises(StorageError) as exc_info:
            await store.store(b"image", "category", ".jpg")
        assert exc_info.value.operation == "store"
