"""Exceptions raised by the service and storage layers.

Field-level validation never raises: validators return `ValidationResult`
values and forms return a `FormErrors` mapping. The exceptions below belong
to the collaborators around that core (services deciding whether to persist,
repositories doing the persisting).
"""

from __future__ import annotations

from typing import Dict, Optional


class RecordkeeperError(Exception):
    """Base class for all recordkeeper exceptions."""


class FormRejectedError(RecordkeeperError):
    """Raised by a service when a submission fails form validation.

    Attributes:
        form: Name of the form that rejected the submission.
        errors: Field name to message mapping produced by the form.
    """

    def __init__(self, form: str, errors: Dict[str, str]) -> None:
        self.form = form
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"{form} submission rejected ({len(self.errors)} fields: {fields})")


class RecordNotFoundError(RecordkeeperError):
    """Raised when a record id does not exist in a repository."""

    def __init__(self, entity: str, record_id: object) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} record not found: {record_id}")


class ConflictError(RecordkeeperError):
    """Raised when a record would violate a uniqueness constraint."""

    def __init__(self, entity: str, field: str, value: object) -> None:
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"A {entity} record with this {field} already exists: {value}")


class PersistenceError(RecordkeeperError):
    """Generic storage failure; callers should report it as retryable.

    Kept distinct from validation failures so that a broken store never shows
    up as a field error.
    """

    retryable = True

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


__all__ = [
    "RecordkeeperError",
    "FormRejectedError",
    "RecordNotFoundError",
    "ConflictError",
    "PersistenceError",
]
