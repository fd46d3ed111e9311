"""도메인 엔티티 ↔ 외부 표현(DTO) 변환.

순수 함수만 둔다. I/O 없음.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import Category, Page


class CategoryDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image_id: Optional[str] = Field(default=None, alias="imageId")


class PageDto(BaseModel):
    items: list[CategoryDto]
    total: int
    page: int
    size: int
    total_pages: int


def entity_to_dto(category: Category) -> CategoryDto:
    return CategoryDto(
        id=category.id,
        title=category.title,
        description=category.description,
        image_id=category.image_id,
    )


def dto_to_entity(dto: CategoryDto) -> Category:
    return Category(
        id=dto.id,
        title=dto.title or "",
        description=dto.description or "",
        image_id=dto.image_id or "",
    )


def page_to_dto(page: Page[Category]) -> PageDto:
    return PageDto(
        items=[entity_to_dto(c) for c in page.items],
        total=page.total,
        page=page.page_number,
        size=page.page_size,
        total_pages=page.total_pages,
    )
