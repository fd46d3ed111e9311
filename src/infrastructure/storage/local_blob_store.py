"""BlobStore: 로컬 파일시스템 구현.

경로: {root}/{namespace}/{asset_id}
asset_id: uuid4 hex + 확장자 (예: '3f2a...9c.jpg')
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from pathlib import Path

from src.domain.exceptions import AssetNotFoundError, StorageError

logger = logging.getLogger(__name__)


class LocalBlobStore:
    def __init__(self, root: str | Path):
        self._root = Path(root)

    def _path(self, asset_id: str, namespace: str) -> Path:
        # 경로 탈출 방지
        if Path(asset_id).name != asset_id or Path(namespace).name != namespace:
            raise StorageError("resolve", f"잘못된 에셋 경로: {namespace}/{asset_id}")
        return self._root / namespace / asset_id

    async def store(self, data: bytes, namespace: str, extension: str) -> str:
        asset_id = f"{uuid.uuid4().hex}{extension}"
        path = self._path(asset_id, namespace)

        def _write():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)

        try:
            await asyncio.to_thread(_write)
        except OSError as e:
            raise StorageError("store", f"{namespace}/{asset_id}: {e}") from e
        logger.debug(f"에셋 저장: {path}")
        return asset_id

    async def delete(self, asset_id: str, namespace: str) -> None:
        path = self._path(asset_id, namespace)
        try:
            await asyncio.to_thread(path.unlink)
        except FileNotFoundError as e:
            raise AssetNotFoundError(asset_id, namespace) from e
        except OSError as e:
            raise StorageError("delete", f"{namespace}/{asset_id}: {e}") from e
        logger.debug(f"에셋 삭제: {path}")

    async def retrieve(self, asset_id: str, namespace: str) -> bytes:
        path = self._path(asset_id, namespace)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError as e:
            raise AssetNotFoundError(asset_id, namespace) from e
        except OSError as e:
            raise StorageError("retrieve", f"{namespace}/{asset_id}: {e}") from e

    async def exists(self, asset_id: str, namespace: str) -> bool:
        return await asyncio.to_thread(self._path(asset_id, namespace).is_file)
