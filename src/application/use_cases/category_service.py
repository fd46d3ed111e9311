"""유즈케이스: 카테고리 생명주기.

카테고리 레코드(저장소)와 이미지 에셋(Blob Store)은 서로 독립적으로 실패한다.
두 저장소를 묶는 트랜잭션이 없으므로 각 단계의 순서로 일관성을 지킨다.

- 생성: 에셋 저장 → 레코드 저장. 실패 시 고아 에셋은 남을 수 있지만
  존재하지 않는 에셋을 가리키는 레코드는 생기지 않는다.
- 삭제: 에셋 삭제 → 레코드 삭제. 두 번째 단계가 실패하면 레코드가
  사라진 에셋을 가리키게 되며, PartialDeleteError로 드러낸다.
"""

from __future__ import annotations

import logging
from typing import Any

from src.domain.entities import Category, Page
from src.domain.exceptions import (
    AssetNotFoundError,
    CategoryNotFoundError,
    PartialDeleteError,
    ValidationFailedError,
)
from src.domain.repositories.category_repository import CategoryRepository
from src.domain.services.blob_store import BlobStore
from src.domain.services.category_validator import CategoryValidator
from src.domain.value_objects.field_violation import FieldViolation

logger = logging.getLogger(__name__)

IMAGE_NAMESPACE = "category"


class CategoryService:
    """카테고리 CRUD를 저장소와 Blob Store에 걸쳐 조율한다."""

    def __init__(
        self,
        repository: CategoryRepository,
        blob_store: BlobStore,
        validator: CategoryValidator,
        page_size: int = 10,
        image_extension: str = ".jpg",
    ):
        self._repo = repository
        self._blobs = blob_store
        self._validator = validator
        self._page_size = page_size
        self._image_extension = image_extension

    # ─── 조회 ───

    async def list_page(self, page_number: int) -> Page[Category]:
        """1부터 시작하는 페이지 조회. 1 미만은 1로 보정한다."""
        if page_number < 1:
            page_number = 1
        return await self._repo.get_page(page_number, self._page_size)

    async def get_by_id(self, category_id: int) -> Category:
        category = await self._repo.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def get_image(self, category_id: int) -> tuple[Category, bytes]:
        """카테고리와 이미지 바이트를 함께 반환. 레코드는 한 번만 조회한다."""
        category = await self.get_by_id(category_id)
        data = await self._blobs.retrieve(category.image_id, IMAGE_NAMESPACE)
        return category, data

    # ─── 변경 ───

    async def create(self, title: str, description: str, image: bytes) -> Category:
        """이미지를 먼저 저장한 뒤 카테고리를 저장한다."""
        candidate = Category(title=title, description=description, image_id="")

        if image_violations := self._validator.validate_image(image):
            raise ValidationFailedError(
                image_violations + self._validator.validate(candidate)
            )

        image_id = await self._blobs.store(image, IMAGE_NAMESPACE, self._image_extension)
        candidate.image_id = image_id
        logger.info(f"카테고리 이미지 저장: {IMAGE_NAMESPACE}/{image_id} ({len(image)} bytes)")

        if violations := self._validator.validate(candidate):
            logger.warning(
                f"카테고리 검증 실패, 고아 에셋 남음: {IMAGE_NAMESPACE}/{image_id} "
                f"({', '.join(v.field for v in violations)})"
            )
            raise ValidationFailedError(violations)

        try:
            saved = await self._repo.save(candidate)
        except Exception:
            logger.warning(f"카테고리 저장 실패, 고아 에셋 남음: {IMAGE_NAMESPACE}/{image_id}")
            raise

        logger.info(f"카테고리 생성: id={saved.id}, title='{saved.title}'")
        return saved

    async def update(self, candidate: Any, violations: list[FieldViolation]) -> Category:
        """제목/설명만 갱신한다. image_id와 id는 바뀌지 않는다.

        violations는 호출자가 candidate 전체 형태에 대해 미리 수행한 검증 결과.
        비어 있지 않으면 저장소를 건드리기 전에 실패한다.
        """
        if violations:
            raise ValidationFailedError(violations)

        existing = await self.get_by_id(candidate.id)
        existing.title = candidate.title
        existing.description = candidate.description

        try:
            saved = await self._repo.save(existing)
        except CategoryNotFoundError:
            logger.warning(f"카테고리 수정 중 삭제됨: id={existing.id}")
            raise
        logger.info(f"카테고리 수정: id={saved.id}")
        return saved

    async def delete(self, category_id: int) -> None:
        """에셋 삭제 → 레코드 삭제 순으로 진행한다. 보상 동작은 없다."""
        category = await self.get_by_id(category_id)

        try:
            await self._blobs.delete(category.image_id, IMAGE_NAMESPACE)
        except AssetNotFoundError:
            logger.warning(
                f"카테고리 id={category_id}의 에셋이 이미 없음: "
                f"{IMAGE_NAMESPACE}/{category.image_id}. 레코드 삭제는 계속 진행"
            )

        try:
            await self._repo.delete_by_id(category_id)
        except Exception as e:
            logger.error(
                f"부분 삭제: 에셋 {IMAGE_NAMESPACE}/{category.image_id} 삭제 후 "
                f"카테고리 id={category_id} 삭제 실패. 수동 정리 필요: {e}"
            )
            raise PartialDeleteError(category_id, category.image_id, str(e)) from e

        logger.info(f"카테고리 삭제: id={category_id}")

    # ─── 정합성 점검 ───

    async def find_dangling(self) -> list[Category]:
        """에셋이 Blob Store에 없는 카테고리를 모두 찾는다."""
        dangling: list[Category] = []
        page_number = 1
        while True:
            page = await self._repo.get_page(page_number, self._page_size)
            for category in page.items:
                if not await self._blobs.exists(category.image_id, IMAGE_NAMESPACE):
                    dangling.append(category)
            if not page.has_next:
                break
            page_number += 1

        if dangling:
            logger.warning(f"에셋이 없는 카테고리 {len(dangling)}건 발견")
        return dangling
