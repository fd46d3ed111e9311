from __future__ import annotations

import uuid

import pytest

from src.application.use_cases.category_service import CategoryService
from src.domain.exceptions import AssetNotFoundError, StorageError
from src.domain.services.category_validator import CategoryValidator
from src.infrastructure.config.container import Container
from src.infrastructure.config.settings import AppConfig, Settings
from src.infrastructure.database.repositories.memory_category_repo import (
    InMemoryCategoryRepository,
)

JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 12 * 1024 + b"\xff\xd9"


class FakeBlobStore:
    """호출 순서를 기록하는 인메모리 Blob Store."""

    def __init__(self, calls: list[str] | None = None):
        self.assets: dict[tuple[str, str], bytes] = {}
        self.calls = calls if calls is not None else []
        self.fail_on: set[str] = set()

    async def store(self, data: bytes, namespace: str, extension: str) -> str:
        self.calls.append("blob.store")
        if "store" in self.fail_on:
            raise StorageError("store", "boom")
        asset_id = f"{uuid.uuid4().hex}{extension}"
        self.assets[(namespace, asset_id)] = data
        return asset_id

    async def delete(self, asset_id: str, namespace: str) -> None:
        self.calls.append("blob.delete")
        if "delete" in self.fail_on:
            raise StorageError("delete", "boom")
        if self.assets.pop((namespace, asset_id), None) is None:
            raise AssetNotFoundError(asset_id, namespace)

    async def retrieve(self, asset_id: str, namespace: str) -> bytes:
        try:
            return self.assets[(namespace, asset_id)]
        except KeyError as e:
            raise AssetNotFoundError(asset_id, namespace) from e

    async def exists(self, asset_id: str, namespace: str) -> bool:
        return (namespace, asset_id) in self.assets


class RecordingRepository(InMemoryCategoryRepository):
    """InMemoryCategoryRepository + 호출 기록 + 실패 주입."""

    def __init__(self, calls: list[str] | None = None):
        super().__init__()
        self.calls = calls if calls is not None else []
        self.fail_on: set[str] = set()

    def _record(self, name: str) -> None:
        self.calls.append(f"repo.{name}")
        if name in self.fail_on:
            raise RuntimeError(f"{name} failed")

    async def get_by_id(self, category_id):
        self._record("get_by_id")
        return await super().get_by_id(category_id)

    async def get_page(self, page_number, page_size):
        self._record("get_page")
        return await super().get_page(page_number, page_size)

    async def save(self, category):
        self._record("save")
        return await super().save(category)

    async def delete_by_id(self, category_id):
        self._record("delete_by_id")
        return await super().delete_by_id(category_id)


@pytest.fixture
def calls() -> list[str]:
    return []


@pytest.fixture
def blob_store(calls) -> FakeBlobStore:
    return FakeBlobStore(calls)


@pytest.fixture
def repo(calls) -> RecordingRepository:
    return RecordingRepository(calls)


@pytest.fixture
def validator() -> CategoryValidator:
    return CategoryValidator()


@pytest.fixture
def service(repo, blob_store, validator) -> CategoryService:
    return CategoryService(
        repository=repo,
        blob_store=blob_store,
        validator=validator,
        page_size=3,
    )


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    return AppConfig({
        "catalog": {"page_size": 2},
        "storage": {"backend": "local", "local_root": str(tmp_path / "uploads")},
    })


@pytest.fixture
def container(app_config) -> Container:
    return Container(settings=Settings(), app_config=app_config)
