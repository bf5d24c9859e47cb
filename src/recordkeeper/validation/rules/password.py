"""Password rules."""

from __future__ import annotations

import re
from typing import Any

from recordkeeper.core.utils import as_text
from ..config import LOGIN_PASSWORD_MIN, PASSWORD_MIN
from ..models import ValidationResult

PASSWORD_SYMBOLS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

_SYMBOL_RE = re.compile("[" + re.escape(PASSWORD_SYMBOLS) + "]")

# (pattern, message) checked in order after the length check
_STRENGTH_RULES = (
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[0-9]"), "Password must contain at least one number"),
    (_SYMBOL_RE, "Password must contain at least one special character"),
)


def check_password_strength(value: Any, *, min_len: int = PASSWORD_MIN) -> ValidationResult:
    """Registration password policy.

    At least ``min_len`` characters with an uppercase letter, a lowercase
    letter, a digit and a symbol from `PASSWORD_SYMBOLS`. Whitespace is not
    trimmed. The first unmet requirement is reported.

    Examples:
        >>> check_password_strength("Passw0rd!").valid
        True
        >>> check_password_strength("P1!").message
        'Password must be at least 8 characters'
    """
    text = as_text(value)
    if not text:
        return ValidationResult.fail("Password is required")
    if len(text) < min_len:
        return ValidationResult.fail(f"Password must be at least {min_len} characters")
    for pattern, message in _STRENGTH_RULES:
        if not pattern.search(text):
            return ValidationResult.fail(message)
    return ValidationResult.ok()


def check_password_confirmation(confirm: Any, password: Any) -> ValidationResult:
    """Confirmation field must repeat the password exactly."""
    confirm_text = as_text(confirm)
    if not confirm_text:
        return ValidationResult.fail("Please confirm your password")
    if confirm_text != as_text(password):
        return ValidationResult.fail("Passwords do not match")
    return ValidationResult.ok()


def check_login_password(value: Any) -> ValidationResult:
    text = as_text(value)
    if not text:
        return ValidationResult.fail("Password is required")
    if len(text) < LOGIN_PASSWORD_MIN:
        return ValidationResult.fail(
            f"Password must be at least {LOGIN_PASSWORD_MIN} characters"
        )
    return ValidationResult.ok()
