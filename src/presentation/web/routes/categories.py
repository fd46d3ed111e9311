"""카테고리 REST API 라우트.

요청 바인딩과 응답 변환만 담당한다. 도메인 예외의 HTTP 변환은 app.py의 핸들러가 맡는다.
"""

from __future__ import annotations

import mimetypes

from fastapi import APIRouter, File, Form, Request, UploadFile, status
from fastapi.responses import Response

from src.application.converters.category_converter import (
    CategoryDto,
    PageDto,
    entity_to_dto,
    page_to_dto,
)

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


def _get_container(request: Request):
    return request.app.state.container


@router.get("", response_model=PageDto)
async def list_categories(request: Request, p: int = 1):
    """카테고리 페이지 조회. p가 1 미만이면 1페이지."""
    service = _get_container(request).category_service()
    page = await service.list_page(p)
    return page_to_dto(page)


@router.get("/{category_id}", response_model=CategoryDto, response_model_by_alias=True)
async def get_category(request: Request, category_id: int):
    service = _get_container(request).category_service()
    return entity_to_dto(await service.get_by_id(category_id))


@router.get("/{category_id}/image")
async def get_category_image(request: Request, category_id: int):
    """카테고리 이미지 원본 바이트."""
    service = _get_container(request).category_service()
    category, data = await service.get_image(category_id)
    media_type = mimetypes.guess_type(category.image_id)[0] or "application/octet-stream"
    return Response(content=data, media_type=media_type)


@router.post(
    "",
    response_model=CategoryDto,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    file: UploadFile | None = File(None),
):
    """multipart 폼(title, description, file)으로 카테고리 생성."""
    service = _get_container(request).category_service()
    image = await file.read() if file is not None else b""
    category = await service.create(title, description, image)
    return entity_to_dto(category)


@router.patch("", response_model=CategoryDto, response_model_by_alias=True)
async def update_category(request: Request, dto: CategoryDto):
    """제목/설명 수정. 이미지는 바꿀 수 없다."""
    c = _get_container(request)
    violations = c.category_validator.validate(dto, require_id=True)
    category = await c.category_service().update(dto, violations)
    return entity_to_dto(category)


@router.delete("/{category_id}")
async def delete_category(request: Request, category_id: int):
    service = _get_container(request).category_service()
    await service.delete(category_id)
    return {"status": "deleted", "id": category_id}
