"""Text field rules: required, length-bounded and letters-only values."""

from __future__ import annotations

import re
from typing import Any

from recordkeeper.core.utils import as_text, is_blank
from ..models import ValidationResult

_LETTERS_AND_SPACES_RE = re.compile(r"^[a-zA-Z\s]+$")


def check_required(value: Any, *, label: str) -> ValidationResult:
    """Fail if the value is missing or whitespace only.

    Examples:
        >>> check_required("  ", label="Name").message
        'Name is required'
    """
    if is_blank(value):
        return ValidationResult.fail(f"{label} is required")
    return ValidationResult.ok()


def check_length(
    value: Any,
    *,
    label: str,
    min_len: int,
    max_len: int,
    required: bool = True,
) -> ValidationResult:
    """Check the trimmed length of a text value against inclusive bounds.

    Args:
        value: Raw field value.
        label: Field label used in messages.
        min_len: Minimum trimmed length.
        max_len: Maximum trimmed length.
        required: If False, a blank value passes.

    Returns:
        ValidationResult; blank required values fail with "<label> is required".
    """
    if is_blank(value):
        if required:
            return ValidationResult.fail(f"{label} is required")
        return ValidationResult.ok()

    length = len(as_text(value).strip())
    if length < min_len:
        return ValidationResult.fail(f"{label} must be at least {min_len} characters")
    if length > max_len:
        return ValidationResult.fail(f"{label} must not exceed {max_len} characters")
    return ValidationResult.ok()


def check_max_length(value: Any, *, label: str, max_len: int) -> ValidationResult:
    """Optional free text; only the untrimmed length is bounded."""
    text = as_text(value)
    if text and len(text) > max_len:
        return ValidationResult.fail(f"{label} must not exceed {max_len} characters")
    return ValidationResult.ok()


def check_person_name(value: Any, *, label: str, min_len: int = 3) -> ValidationResult:
    """Required name made of letters and spaces, at least ``min_len`` long.

    Examples:
        >>> check_person_name("Jo", label="Full Name").message
        'Full Name must be at least 3 characters'
        >>> check_person_name("Ann-Marie", label="Full Name").message
        'Full Name can only contain letters and spaces'
    """
    if is_blank(value):
        return ValidationResult.fail(f"{label} is required")

    text = as_text(value)
    if len(text.strip()) < min_len:
        return ValidationResult.fail(f"{label} must be at least {min_len} characters")
    if not _LETTERS_AND_SPACES_RE.match(text):
        return ValidationResult.fail(f"{label} can only contain letters and spaces")
    return ValidationResult.ok()
