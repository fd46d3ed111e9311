"""카테고리 필드 검증기.

규칙을 모두 평가해 위반 사항 전체를 반환한다. 첫 위반에서 멈추지 않으므로
호출자는 한 번에 모든 오류를 보고할 수 있다.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from src.domain.value_objects.field_violation import FieldViolation

Rule = Callable[[Any], Optional[FieldViolation]]


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


class CategoryValidator:
    """제목/설명 필드 제약을 검사한다. 부수 효과 없음."""

    def __init__(self, title_max_length: int = 255, description_max_length: int = 2000):
        self._title_max = title_max_length
        self._description_max = description_max_length
        self._rules: list[Rule] = [
            self._title_not_blank,
            self._title_length,
            self._description_not_blank,
            self._description_length,
        ]

    def validate(self, candidate: Any, *, require_id: bool = False) -> list[FieldViolation]:
        """candidate(title, description, id 속성)를 검증해 위반 목록을 반환.

        빈 리스트면 유효하다.
        """
        violations: list[FieldViolation] = []
        if require_id:
            if v := self._id_present(candidate):
                violations.append(v)
        for rule in self._rules:
            if v := rule(candidate):
                violations.append(v)
        return violations

    def validate_image(self, data: bytes | None) -> list[FieldViolation]:
        if not data:
            return [FieldViolation("file", "이미지 파일이 필요합니다")]
        return []

    # ─── 규칙 ───

    @staticmethod
    def _id_present(candidate: Any) -> FieldViolation | None:
        category_id = getattr(candidate, "id", None)
        if category_id is None:
            return FieldViolation("id", "필수 값입니다")
        if category_id < 1:
            return FieldViolation("id", "양수여야 합니다")
        return None

    @staticmethod
    def _title_not_blank(candidate: Any) -> FieldViolation | None:
        if _is_blank(getattr(candidate, "title", None)):
            return FieldViolation("title", "비어 있을 수 없습니다")
        return None

    def _title_length(self, candidate: Any) -> FieldViolation | None:
        title = getattr(candidate, "title", None) or ""
        if len(title) > self._title_max:
            return FieldViolation("title", f"최대 {self._title_max}자까지 허용됩니다")
        return None

    @staticmethod
    def _description_not_blank(candidate: Any) -> FieldViolation | None:
        if _is_blank(getattr(candidate, "description", None)):
            return FieldViolation("description", "비어 있을 수 없습니다")
        return None

    def _description_length(self, candidate: Any) -> FieldViolation | None:
        description = getattr(candidate, "description", None) or ""
        if len(description) > self._description_max:
            return FieldViolation(
                "description", f"최대 {self._description_max}자까지 허용됩니다"
            )
        return None
