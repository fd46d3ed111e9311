"""CategoryRepository: Firebase Firestore 구현.

Firestore 컬렉션: 'categories'
문서 ID: 정수 id의 문자열 (예: '1', '2')
id 발급: '_sequences/categories' 카운터 문서를 트랜잭션으로 증가시킨다.
삭제해도 카운터는 줄지 않으므로 id는 재사용되지 않는다.
"""

from __future__ import annotations

import asyncio
from typing import Any

from firebase_admin import firestore
from google.api_core import exceptions as gcp_exceptions

from src.domain.entities import Category, Page
from src.domain.exceptions import CategoryNotFoundError, RepositoryError


def _category_to_dict(category: Category) -> dict[str, Any]:
    return {
        "id": category.id,
        "title": category.title,
        "description": category.description,
        "image_id": category.image_id,
    }


def _category_from_doc(doc) -> Category:
    d = doc.to_dict()
    return Category(
        id=d.get("id", int(doc.id)),
        title=d.get("title", ""),
        description=d.get("description", ""),
        image_id=d.get("image_id", ""),
    )


class FirestoreCategoryRepository:
    COLLECTION = "categories"
    SEQUENCE_COLLECTION = "_sequences"

    def __init__(self, db):
        self._db = db

    def _col(self):
        return self._db.collection(self.COLLECTION)

    def _counter_ref(self):
        return self._db.collection(self.SEQUENCE_COLLECTION).document(self.COLLECTION)

    def _allocate_id(self) -> int:
        counter_ref = self._counter_ref()

        @firestore.transactional
        def _next(transaction) -> int:
            snapshot = counter_ref.get(transaction=transaction)
            value = (snapshot.to_dict() or {}).get("value", 0) + 1 if snapshot.exists else 1
            transaction.set(counter_ref, {"value": value})
            return value

        return _next(self._db.transaction())

    async def get_by_id(self, category_id: int) -> Category | None:
        def _get():
            doc = self._col().document(str(category_id)).get()
            return _category_from_doc(doc) if doc.exists else None

        return await self._run("get_by_id", _get)

    async def get_page(self, page_number: int, page_size: int) -> Page[Category]:
        def _get():
            total = self._col().count().get()[0][0].value
            query = (
                self._col()
                .order_by("id")
                .offset((page_number - 1) * page_size)
                .limit(page_size)
            )
            items = [_category_from_doc(d) for d in query.stream()]
            return Page(
                page_number=page_number,
                page_size=page_size,
                total=int(total),
                items=items,
            )

        return await self._run("get_page", _get)

    async def save(self, category: Category) -> Category:
        def _save():
            data = _category_to_dict(category)
            if category.id is None:
                category.id = data["id"] = self._allocate_id()
                self._col().document(str(category.id)).set(data)
                return category
            # 기존 문서만 갱신. 그 사이 삭제됐으면 NotFound
            try:
                self._col().document(str(category.id)).update(data)
            except gcp_exceptions.NotFound as e:
                raise CategoryNotFoundError(category.id) from e
            return category

        return await self._run("save", _save)

    async def delete_by_id(self, category_id: int) -> None:
        def _delete():
            self._col().document(str(category_id)).delete()

        await self._run("delete_by_id", _delete)

    async def exists(self, category_id: int) -> bool:
        def _exists():
            return self._col().document(str(category_id)).get().exists

        return await self._run("exists", _exists)

    @staticmethod
    async def _run(operation: str, fn):
        try:
            return await asyncio.to_thread(fn)
        except gcp_exceptions.GoogleAPICallError as e:
            raise RepositoryError(operation, str(e)) from e
