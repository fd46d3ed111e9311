"""의존성 주입 컨테이너.

클린 아키텍처에서 모든 의존성 조립은 최외곽(Composition Root)에서 이루어진다.
이 컨테이너가 설정에 따라 구체 구현을 생성하고 유즈케이스에 주입한다.
"""

from __future__ import annotations

from src.application.use_cases.category_service import CategoryService
from src.domain.services.category_validator import CategoryValidator
from src.infrastructure.config.settings import AppConfig, Settings
from src.infrastructure.database.firebase_client import (
    get_firestore_client,
    get_storage_bucket,
    init_firebase,
)
from src.infrastructure.database.repositories.category_repo import FirestoreCategoryRepository
from src.infrastructure.database.repositories.memory_category_repo import (
    InMemoryCategoryRepository,
)
from src.infrastructure.storage.firebase_blob_store import FirebaseBlobStore
from src.infrastructure.storage.local_blob_store import LocalBlobStore


class Container:
    """애플리케이션 의존성 컨테이너."""

    def __init__(
        self,
        settings: Settings,
        app_config: AppConfig,
        category_repo=None,
        blob_store=None,
    ):
        self.settings = settings
        self.config = app_config

        # ─── Repository ───
        self.category_repo = category_repo or self._build_category_repo()

        # ─── Blob Store ───
        self.blob_store = blob_store or self._build_blob_store()

        # ─── Domain Services ───
        self.category_validator = CategoryValidator(
            title_max_length=app_config.validation.title_max_length,
            description_max_length=app_config.validation.description_max_length,
        )

    def _init_firebase(self) -> None:
        init_firebase(
            credential_path=self.settings.firebase_credential_path,
            project_id=self.settings.firebase_project_id or None,
            storage_bucket=self.settings.firebase_storage_bucket or None,
        )

    def _build_category_repo(self):
        backend = self.config.database.backend
        if backend == "memory":
            return InMemoryCategoryRepository()
        if backend == "firestore":
            self._init_firebase()
            return FirestoreCategoryRepository(get_firestore_client())
        raise ValueError(f"알 수 없는 database.backend: '{backend}'")

    def _build_blob_store(self):
        backend = self.config.storage.backend
        if backend == "local":
            return LocalBlobStore(self.config.storage.local_root)
        if backend == "firebase":
            self._init_firebase()
            return FirebaseBlobStore(get_storage_bucket(self.settings.firebase_storage_bucket))
        raise ValueError(f"알 수 없는 storage.backend: '{backend}'")

    # ─── Use Case 팩토리 ───

    def category_service(self) -> CategoryService:
        return CategoryService(
            repository=self.category_repo,
            blob_store=self.blob_store,
            validator=self.category_validator,
            page_size=self.config.catalog.page_size,
            image_extension=self.config.catalog.image_extension,
        )
