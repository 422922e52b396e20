"""Conversation template answer validation"""

from devinsights.conversations.validation import is_empty, validate, validate_field

__all__ = ["is_empty", "validate", "validate_field"]
