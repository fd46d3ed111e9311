"""CategoryRepository: 인메모리 구현.

로컬 개발/테스트용. 프로세스가 끝나면 데이터는 사라진다.
id는 단조 증가하며 삭제 후에도 재사용하지 않는다.
"""

from __future__ import annotations

import asyncio
from dataclasses import replace

from src.domain.entities import Category, Page
from src.domain.exceptions import CategoryNotFoundError


class InMemoryCategoryRepository:
    def __init__(self):
        self._rows: dict[int, Category] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def get_by_id(self, category_id: int) -> Category | None:
        row = self._rows.get(category_id)
        return replace(row) if row else None

    async def get_page(self, page_number: int, page_size: int) -> Page[Category]:
        ids = sorted(self._rows)
        start = (page_number - 1) * page_size
        items = [replace(self._rows[i]) for i in ids[start : start + page_size]]
        return Page(page_number=page_number, page_size=page_size, total=len(ids), items=items)

    async def save(self, category: Category) -> Category:
        async with self._lock:
            if category.id is None:
                category.id = self._next_id
                self._next_id += 1
            elif category.id not in self._rows:
                # 조회 후 삭제된 레코드를 되살리지 않는다
                raise CategoryNotFoundError(category.id)
            self._rows[category.id] = replace(category)
            return replace(category)

    async def delete_by_id(self, category_id: int) -> None:
        async with self._lock:
            self._rows.pop(category_id, None)

    async def exists(self, category_id: int) -> bool:
        return category_id in self._rows
