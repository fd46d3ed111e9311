from __future__ import annotations

from src.application.converters.category_converter import CategoryDto
from src.domain.services.category_validator import CategoryValidator
from src.domain.value_objects.field_violation import FieldViolation


def _fields(violations: list[FieldViolation]) -> list[str]:
    return [v.field for v in violations]


class TestCategoryValidator:
    def test_valid_candidate_has_no_violations(self, validator):
        dto = CategoryDto(title="Fruits", description="Fresh produce")
        assert validator.validate(dto) == []

    def test_reports_every_blank_field(self, validator):
        dto = CategoryDto(title="  ", description="")
        assert _fields(validator.validate(dto)) == ["title", "description"]

    def test_none_fields_are_blank(self, validator):
        class Candidate:
            title = None
            description = None

        assert _fields(validator.validate(Candidate())) == ["title", "description"]

    def test_length_limits(self):
        validator = CategoryValidator(title_max_length=5, description_max_length=3)
        dto = CategoryDto(title="abcdef", description="abcd")
        assert _fields(validator.validate(dto)) == ["title", "description"]

    def test_require_id(self, validator):
        missing = CategoryDto(title="a", description="b")
        negative = CategoryDto(id=0, title="a", description="b")
        present = CategoryDto(id=7, title="a", description="b")

        assert _fields(validator.validate(missing, require_id=True)) == ["id"]
        assert _fields(validator.validate(negative, require_id=True)) == ["id"]
        assert validator.validate(present, require_id=True) == []
        assert validator.validate(missing) == []

    def test_require_id_combines_with_field_rules(self, validator):
        dto = CategoryDto(title="", description="")
        assert _fields(validator.validate(dto, require_id=True)) == [
            "id",
            "title",
            "description",
        ]

    def test_validate_image(self, validator):
        assert _fields(validator.validate_image(b"")) == ["file"]
        assert _fields(validator.validate_image(None)) == ["file"]
        assert validator.validate_image(b"\xff\xd8") == []
