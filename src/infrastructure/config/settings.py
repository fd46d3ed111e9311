from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings


# ──────────────────────────────────────────
# 환경변수 기반 시크릿 설정 (.env)
# ──────────────────────────────────────────
class Settings(BaseSettings):
    # Firebase
    firebase_credential_path: str = "firebase-service-account.json"
    firebase_project_id: str = ""
    firebase_storage_bucket: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


# ──────────────────────────────────────────
# YAML 기반 앱 설정 (config/settings.yaml)
# ──────────────────────────────────────────
class CatalogConfig:
    def __init__(self, data: dict[str, Any]):
        self.page_size: int = data.get("page_size", 10)
        # 업로드 내용과 무관하게 고정 확장자로 저장
        self.image_extension: str = data.get("image_extension", ".jpg")
        if self.page_size < 1:
            raise ValueError(f"catalog.page_size는 1 이상이어야 합니다: {self.page_size}")
        if not self.image_extension.startswith("."):
            self.image_extension = f".{self.image_extension}"


class ValidationConfig:
    def __init__(self, data: dict[str, Any]):
        self.title_max_length: int = data.get("title_max_length", 255)
        self.description_max_length: int = data.get("description_max_length", 2000)


class DatabaseConfig:
    def __init__(self, data: dict[str, Any]):
        self.backend: str = data.get("backend", "memory")  # memory, firestore


class StorageConfig:
    def __init__(self, data: dict[str, Any]):
        self.backend: str = data.get("backend", "local")  # local, firebase
        self.local_root: str = data.get("local_root", "uploads")


class WebConfig:
    def __init__(self, data: dict[str, Any]):
        self.host: str = data.get("host", "0.0.0.0")
        self.port: int = data.get("port", 8000)


class AppConfig:
    """YAML에서 로드된 전체 앱 설정."""

    def __init__(self, data: dict[str, Any]):
        self.name: str = data.get("app", {}).get("name", "Category Catalog")

        self.catalog = CatalogConfig(data.get("catalog", {}))
        self.validation = ValidationConfig(data.get("validation", {}))
        self.database = DatabaseConfig(data.get("database", {}))
        self.storage = StorageConfig(data.get("storage", {}))
        self.web = WebConfig(data.get("web", {}))


def load_app_config(path: str = "config/settings.yaml") -> AppConfig:
    """YAML 설정 파일을 로드하여 AppConfig를 반환."""
    config_path = Path(path)
    if not config_path.exists():
        return AppConfig({})
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return AppConfig(data)
