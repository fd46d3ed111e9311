from __future__ import annotations

from typing import Protocol

from src.domain.entities import Category, Page


class CategoryRepository(Protocol):
    """카테고리 저장소 인터페이스."""

    async def get_by_id(self, category_id: int) -> Category | None: ...

    async def get_page(self, page_number: int, page_size: int) -> Page[Category]:
        """id 오름차순 페이지 조회. page_number는 1부터 시작."""
        ...

    async def save(self, category: Category) -> Category:
        """id가 없으면 새로 발급해 생성, 있으면 기존 레코드를 갱신한다.

        id가 있는데 레코드가 없으면 CategoryNotFoundError.
        """
        ...

    async def delete_by_id(self, category_id: int) -> None: ...

    async def exists(self, category_id: int) -> bool: ...
