"""Closed-vocabulary and checkbox rules."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from recordkeeper.core.utils import is_blank
from ..models import ValidationResult


def check_one_of(
    value: Any,
    *,
    choices: Iterable[Any],
    label: str,
    required: bool = True,
    required_message: Optional[str] = None,
    invalid_message: Optional[str] = None,
) -> ValidationResult:
    """Check that the value belongs to a closed set of allowed values.

    Matching is exact (case-sensitive, no trimming) since values come from
    select boxes and radio groups.

    Args:
        value: Raw field value.
        choices: Allowed values.
        label: Field label used in the default messages.
        required: If False, a blank value passes.
        required_message: Message for a blank required value.
        invalid_message: Message for a value outside ``choices``.

    Examples:
        >>> check_one_of("late", choices=("present", "absent"), label="Status").message
        'Invalid status'
    """
    if is_blank(value):
        if required:
            return ValidationResult.fail(required_message or f"{label} is required")
        return ValidationResult.ok()

    allowed = tuple(choices)
    try:
        found = value in allowed
    except TypeError:
        found = False
    if not found:
        return ValidationResult.fail(invalid_message or f"Invalid {label.lower()}")
    return ValidationResult.ok()


def check_accepted(value: Any, *, message: str) -> ValidationResult:
    """Checkbox that must be ticked (truthy, or the string "true"/"on")."""
    if isinstance(value, str):
        accepted = value.strip().lower() in ("true", "on", "yes", "1")
    else:
        accepted = bool(value)
    if not accepted:
        return ValidationResult.fail(message)
    return ValidationResult.ok()
