"""
Conversation answer validation

Validates the answers of a create-conversation form against its template:
- required fields must not be empty (None, missing, blank string)
- 0 and False are explicit answers, never "empty"
- the synthetic title is validated as a required text field

Validation is pure: inputs are never mutated and no state is kept between
calls, so it can run after every keystroke. Deciding when to show errors
(e.g. only after a first submit attempt) is the form's concern.

Usage:
    from devinsights.conversations.validation import validate

    result = validate(template.fields, answers, title_required=True, title_value=title)
    if not result.is_valid:
        show_errors(result.messages())
"""

import logging
from collections.abc import Mapping, Sequence

from devinsights.domain.conversation import AnswerValue, TemplateField, ValidationResult

logger = logging.getLogger(__name__)

TITLE_LABEL = "Title"


def is_empty(value: AnswerValue) -> bool:
    """
    Check whether an answer counts as not given.

    Examples:
        >>> is_empty(None), is_empty("   "), is_empty(0), is_empty(False)
        (True, True, False, False)
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def validate_field(template_field: TemplateField, value: AnswerValue) -> str | None:
    """
    Validate one answer.

    Returns:
        Error message, or None if the answer is acceptable
    """
    if template_field.required and is_empty(value):
        return f"{template_field.label} is required"
    return None


def validate(
    schema: Sequence[TemplateField],
    answers: Mapping[str, AnswerValue],
    title_required: bool = True,
    title_value: str | None = "",
) -> ValidationResult:
    """
    Validate a full set of answers.

    Args:
        schema: Template fields (validated in display order)
        answers: Answer per field id; a missing id means "never answered"
        title_required: Whether the conversation title must be given
        title_value: Current title text

    Returns:
        ValidationResult with per-field errors and the title error
    """
    title_error = None
    if title_required and is_empty(title_value):
        title_error = f"{TITLE_LABEL} is required"

    field_errors: dict[str, str] = {}
    for template_field in sorted(schema, key=lambda f: f.order):
        error = validate_field(template_field, answers.get(template_field.id))
        if error:
            field_errors[template_field.id] = error

    unknown = set(answers) - {f.id for f in schema}
    if unknown:
        logger.debug(f"Ignoring answers for unknown fields: {sorted(unknown)}")

    return ValidationResult(
        is_valid=title_error is None and not field_errors,
        field_errors=field_errors,
        title_error=title_error,
    )
