"""Shared plumbing for the record services."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Optional, TypeVar

from recordkeeper.core.enums import FormKind
from recordkeeper.core.exceptions import FormRejectedError, PersistenceError, RecordkeeperError
from recordkeeper.validation.forms import FormOptions
from recordkeeper.validation.models import FormErrors
from recordkeeper.validation.registry import validate_record

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RecordService:
    """Base class: validate a submission, then hand it to the store.

    Subclasses call `_check` before any write. Storage failures that are not
    already recordkeeper errors surface as `PersistenceError`.
    """

    entity = "record"

    def __init__(self, *, today: Optional[date] = None) -> None:
        self._today = today

    def _options(self, **kwargs: Any) -> FormOptions:
        return FormOptions(today=self._today, **kwargs)

    def _errors(self, kind: FormKind, data: Any, **options: Any) -> FormErrors:
        return validate_record(kind, data, self._options(**options))

    def _reject_if_errors(self, kind: FormKind, errors: FormErrors) -> None:
        if errors:
            logger.warning(
                "Rejected %s submission: %s",
                kind.value,
                ", ".join(f"{k}={v!r}" for k, v in sorted(errors.items())),
            )
            raise FormRejectedError(kind.value, errors)

    def _check(self, kind: FormKind, data: Any, **options: Any) -> None:
        """Raise FormRejectedError if ``data`` fails the form."""
        self._reject_if_errors(kind, self._errors(kind, data, **options))

    def _store(self, operation: Callable[..., T], *args: Any) -> T:
        """Run a repository operation, wrapping unexpected failures."""
        try:
            return operation(*args)
        except RecordkeeperError:
            raise
        except Exception as e:
            action = getattr(operation, "__name__", "access")
            logger.error("Storage failure during %s %s: %s", self.entity, action, e)
            raise PersistenceError(
                f"Could not {action} {self.entity}; please try again", cause=e
            ) from e
