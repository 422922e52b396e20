"""
Tests for conversation template domain models
"""

import pytest

from devinsights.domain.conversation import ConversationTemplate, FieldType, TemplateField, ValidationResult


class TestTemplateField:
    def test_from_dict(self):
        template_field = TemplateField.from_dict(
            {"id": "area", "label": "Area", "type": "select", "required": True, "order": 2, "options": ["A", "B"]}
        )

        assert template_field.type is FieldType.SELECT
        assert template_field.required is True
        assert template_field.options == ("A", "B")

    def test_defaults(self):
        template_field = TemplateField.from_dict({"id": "notes"})

        assert template_field.label == "notes"
        assert template_field.type is FieldType.TEXT
        assert template_field.required is False

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            TemplateField.from_dict({"id": "x", "type": "slider"})


class TestConversationTemplate:
    def test_ordered_fields(self, template_fields):
        template = ConversationTemplate(id="tpl-1", name="1:1", fields=tuple(template_fields))
        assert [f.id for f in template.ordered_fields()] == [
            "topic",
            "mood",
            "notes",
            "area",
            "followup",
            "due",
            "hours",
        ]

    def test_duplicate_field_ids_rejected(self):
        duplicate = TemplateField(id="x", label="X", type=FieldType.TEXT)
        with pytest.raises(ValueError, match="Duplicate field id"):
            ConversationTemplate(id="tpl", name="Broken", fields=(duplicate, duplicate))

    def test_from_dict(self):
        template = ConversationTemplate.from_dict(
            {
                "id": "tpl-1",
                "name": "Weekly 1:1",
                "is_active": False,
                "template_fields": [{"id": "mood", "label": "Mood", "type": "rating", "required": True}],
            }
        )

        assert template.name == "Weekly 1:1"
        assert template.is_active is False
        assert template.fields[0].type is FieldType.RATING


class TestValidationResult:
    def test_messages_title_first(self):
        result = ValidationResult(is_valid=False, field_errors={"a": "A is required"}, title_error="Title is required")
        assert result.messages() == ["Title is required", "A is required"]
        assert result.error_for("a") == "A is required"
        assert result.error_for("b") is None
