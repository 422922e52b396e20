"""
Conversation template domain models

Represents the schema-driven forms used to record 1:1 conversations:
    - FieldType: closed set of field kinds a template can declare
    - TemplateField: one question in a template
    - ConversationTemplate: ordered set of fields owned by an organization
    - ValidationResult: outcome of validating a set of answers
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Answers keyed by field id; a missing key means "never answered"
AnswerValue = str | int | float | bool | None
AnswerRecord = dict[str, AnswerValue]


class FieldType(Enum):
    """
    Kinds of template fields.

    Attributes:
        TEXT: Single-line free text
        TEXTAREA: Multi-line free text
        SELECT: One of the field's options
        CHECKBOX: Boolean toggle
        RATING: 1-5 rating slider
        DATE: ISO date
        NUMBER: Numeric value
    """

    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RATING = "rating"
    DATE = "date"
    NUMBER = "number"


@dataclass(frozen=True)
class TemplateField:
    """
    One field of a conversation template.

    Attributes:
        id: Identifier, unique within its template
        label: Question shown to the user (used in error messages)
        type: Field kind
        required: Whether an answer must be given
        order: Display position
        options: Allowed answers for select fields
        placeholder: Hint text for text-like inputs
    """

    id: str
    label: str
    type: FieldType
    required: bool = False
    order: int = 0
    options: tuple[str, ...] = ()
    placeholder: str = ""

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "TemplateField":
        """
        Parse a template field.

        Raises:
            ValueError: If the field type is unknown
        """
        return cls(
            id=str(payload["id"]),
            label=str(payload.get("label", payload["id"])),
            type=FieldType(payload.get("type", "text")),
            required=bool(payload.get("required", False)),
            order=int(payload.get("order", 0)),
            options=tuple(str(option) for option in payload.get("options") or ()),
            placeholder=str(payload.get("placeholder") or ""),
        )


@dataclass(frozen=True)
class ConversationTemplate:
    """
    A conversation template.

    Attributes:
        id: Template id
        name: Template name
        fields: Template fields (any order; use ordered_fields() for display order)
        description: Optional description
        is_active: Inactive templates are hidden from the create-conversation form
    """

    id: str
    name: str
    fields: tuple[TemplateField, ...] = ()
    description: str = ""
    is_active: bool = True

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for template_field in self.fields:
            if template_field.id in seen:
                raise ValueError(f"Duplicate field id in template {self.name!r}: {template_field.id}")
            seen.add(template_field.id)

    def ordered_fields(self) -> list[TemplateField]:
        """Fields sorted by their order attribute (stable for ties)."""
        return sorted(self.fields, key=lambda f: f.order)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "ConversationTemplate":
        return cls(
            id=str(payload.get("id", "")),
            name=str(payload.get("name", "")),
            fields=tuple(TemplateField.from_dict(f) for f in payload.get("template_fields") or ()),
            description=str(payload.get("description") or ""),
            is_active=bool(payload.get("is_active", True)),
        )


@dataclass(frozen=True)
class ValidationResult:
    """
    Result of validating conversation answers.

    Attributes:
        is_valid: True when there are no errors at all
        field_errors: Error message per field id (only fields with errors)
        title_error: Error for the synthetic title field, if any
    """

    is_valid: bool
    field_errors: dict[str, str] = field(default_factory=dict)
    title_error: str | None = None

    def messages(self) -> list[str]:
        """All error messages, title first, then fields in display order."""
        messages = [self.title_error] if self.title_error else []
        messages.extend(self.field_errors.values())
        return messages

    def error_for(self, field_id: str) -> str | None:
        return self.field_errors.get(field_id)
