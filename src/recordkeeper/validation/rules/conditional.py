"""Requirements that depend on a companion field."""

from __future__ import annotations

from typing import Any

from recordkeeper.core.utils import as_text, is_blank
from ..models import ValidationResult


def check_required_when(
    value: Any,
    condition_value: Any,
    *,
    when: Any,
    required_message: str,
    min_len: int = 0,
    min_len_message: str = "",
) -> ValidationResult:
    """Require ``value`` only when the companion field equals ``when``.

    Args:
        value: Raw value of the conditionally required field.
        condition_value: Value of the companion field from the same snapshot.
        when: Companion value that makes the field required.
        required_message: Message for a blank value while required.
        min_len: Minimum trimmed length while required (0 disables).
        min_len_message: Message for a too-short value.

    Examples:
        >>> rule = dict(when="yes", required_message="Please provide details")
        >>> check_required_when("", "no", **rule).valid
        True
        >>> check_required_when("", "yes", **rule).valid
        False
    """
    if condition_value != when:
        return ValidationResult.ok()
    if is_blank(value):
        return ValidationResult.fail(required_message)
    if min_len and len(as_text(value).strip()) < min_len:
        return ValidationResult.fail(
            min_len_message or f"Must be at least {min_len} characters"
        )
    return ValidationResult.ok()
