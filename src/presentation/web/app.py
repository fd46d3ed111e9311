"""FastAPI 웹 애플리케이션 팩토리."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.domain.exceptions import (
    AssetNotFoundError,
    CategoryNotFoundError,
    PartialDeleteError,
    RepositoryError,
    StorageError,
    ValidationFailedError,
)
from src.infrastructure.config.container import Container
from src.presentation.web.routes import categories

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CategoryNotFoundError)
    async def _not_found(request: Request, exc: CategoryNotFoundError):
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(AssetNotFoundError)
    async def _asset_not_found(request: Request, exc: AssetNotFoundError):
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(ValidationFailedError)
    async def _validation_failed(request: Request, exc: ValidationFailedError):
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "violations": [v.to_dict() for v in exc.violations],
            },
        )

    @app.exception_handler(PartialDeleteError)
    async def _partial_delete(request: Request, exc: PartialDeleteError):
        return JSONResponse(
            status_code=500,
            content={
                "error": str(exc),
                "category_id": exc.category_id,
                "image_id": exc.image_id,
            },
        )

    @app.exception_handler(StorageError)
    async def _storage_error(request: Request, exc: StorageError):
        logger.error(f"{request.method} {request.url.path} 스토리지 오류: {exc}")
        return JSONResponse(status_code=502, content={"error": str(exc)})

    @app.exception_handler(RepositoryError)
    async def _repository_error(request: Request, exc: RepositoryError):
        logger.error(f"{request.method} {request.url.path} 저장소 오류: {exc}")
        return JSONResponse(status_code=502, content={"error": str(exc)})


def create_app(container: Container) -> FastAPI:
    app = FastAPI(title=container.config.name, version="0.1.0")

    # 컨테이너를 앱 state에 저장
    app.state.container = container

    _register_error_handlers(app)

    # 라우터 등록
    app.include_router(categories.router)

    return app
