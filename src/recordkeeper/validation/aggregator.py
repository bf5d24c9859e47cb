"""Form validation aggregator.

Runs every declared field rule of a form against one submitted record and
collects the failures into a FormErrors mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List

from .models import FieldSpec, FormErrors, ValidationResult


class FormValidationAggregator:
    """Validate submitted records against a form's field specs.

    The aggregator holds only the immutable list of field specs. Every call to
    `validate` takes a shallow snapshot of the record and evaluates each spec
    against it, so cross-field rules always see companion values from the same
    submission and the result does not depend on evaluation order.

    Examples:
        >>> aggregator = FormValidationAggregator(build_fields())
        >>> aggregator.validate({"name": "", "email": "a@b.co"})
        {'name': 'Name is required', ...}
    """

    def __init__(self, fields: Iterable[FieldSpec], form: str = "") -> None:
        self.form = form
        self._fields: List[FieldSpec] = list(fields)
        names = [f.name for f in self._fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate field names in form {form!r}: {', '.join(duplicates)}")

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self._fields]

    def validate(self, record: Any) -> FormErrors:
        """Validate a record and return errors for every failing field.

        Args:
            record: Mapping of field name to raw value. Anything else is
                treated as an empty submission.

        Returns:
            New dict of field name to message. Passing fields are omitted.
        """
        snapshot = _snapshot(record)
        errors: FormErrors = {}
        for spec in self._fields:
            if spec.optional and spec.name not in snapshot:
                continue
            result = spec.evaluate(snapshot)
            if not result.valid:
                errors[spec.name] = result.message
        return errors

    def validate_field(self, name: str, record: Any) -> ValidationResult:
        """Run the rule of a single field, e.g. when an input loses focus.

        Raises:
            KeyError: If the form declares no such field.
        """
        for spec in self._fields:
            if spec.name == name:
                return spec.evaluate(_snapshot(record))
        raise KeyError(f"Form {self.form!r} has no field {name!r}")

    def is_valid(self, record: Any) -> bool:
        return not self.validate(record)


def _snapshot(record: Any) -> Dict[str, Any]:
    if isinstance(record, Mapping):
        return dict(record)
    return {}
