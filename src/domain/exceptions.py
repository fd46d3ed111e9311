"""도메인 레이어 예외 정의."""

from __future__ import annotations

from src.domain.value_objects.field_violation import FieldViolation


class DomainError(Exception):
    """도메인 레이어 최상위 예외."""


class CategoryNotFoundError(DomainError):
    """요청한 id의 카테고리가 없을 때."""

    def __init__(self, category_id):
        self.category_id = category_id
        super().__init__(f"카테고리를 찾을 수 없습니다. id={category_id}")


class ValidationFailedError(DomainError):
    """필드 검증 실패. 모든 위반 사항을 함께 담는다."""

    def __init__(self, violations: list[FieldViolation]):
        self.violations = list(violations)
        fields = ", ".join(v.field for v in self.violations)
        super().__init__(f"검증 실패: {fields}")


class StorageError(DomainError):
    """Blob Store 오류 (연결 불가, 쓰기/삭제 거부 등)."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"스토리지 오류 [{operation}]: {detail}")


class PartialDeleteError(StorageError):
    """에셋은 삭제됐지만 카테고리 레코드 삭제에 실패했을 때.

    레코드의 image_id가 존재하지 않는 에셋을 가리키는 상태로 남는다.
    운영자가 수동으로 정리해야 한다.
    """

    def __init__(self, category_id, image_id: str, detail: str):
        self.category_id = category_id
        self.image_id = image_id
        super().__init__(
            "delete",
            f"에셋 '{image_id}' 삭제 후 카테고리 id={category_id} 삭제 실패: {detail}",
        )


class AssetNotFoundError(DomainError):
    """Blob Store에 요청한 에셋이 없을 때."""

    def __init__(self, asset_id: str, namespace: str):
        self.asset_id = asset_id
        self.namespace = namespace
        super().__init__(f"에셋을 찾을 수 없습니다: {namespace}/{asset_id}")


class RepositoryError(DomainError):
    """카테고리 저장소 오류."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"저장소 오류 [{operation}]: {detail}")
