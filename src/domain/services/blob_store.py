from __future__ import annotations

from typing import Protocol


class BlobStore(Protocol):
    """바이너리 에셋 저장소 인터페이스.

    에셋은 네임스페이스(예: 'category') 안에서 불투명한 id로 식별된다.
    실패 시 StorageError, 없는 에셋은 AssetNotFoundError를 발생시킨다.
    """

    async def store(self, data: bytes, namespace: str, extension: str) -> str:
        """에셋을 저장하고 id를 반환."""
        ...

    async def delete(self, asset_id: str, namespace: str) -> None: ...

    async def retrieve(self, asset_id: str, namespace: str) -> bytes: ...

    async def exists(self, asset_id: str, namespace: str) -> bool: ...
