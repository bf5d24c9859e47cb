"""Field rules interface.

A field rule is a plain function that maps one raw value (plus, for
cross-field rules, the values of its companion fields) to a
`ValidationResult`. Rules are pure and total: they never raise for any input,
never read or write shared state, and build a fresh result on every call.

Rules take the checked value first and companion values after it, followed by
keyword-only options (labels, bounds, messages). Forms bind the options with
`functools.partial` and declare companions in `FieldSpec.depends_on`:

    ```python
    from functools import partial
    from recordkeeper.validation.models import FieldSpec
    from recordkeeper.validation.rules.dates import check_end_date
    from recordkeeper.validation.rules.text import check_length

    FieldSpec("endDate", check_end_date, depends_on=("startDate",))
    FieldSpec("companyName", partial(check_length, label="Company Name", min_len=2, max_len=100))
    ```

Modules:
    text: required / length-bounded / letters-only text
    choice: closed vocabularies and checkboxes
    contact: email, phone number, student id, login identifier
    numeric: integer ranges, stipend, working hours (derived bound)
    password: strength, confirmation, login password
    dates: ISO dates, start/end pairs, date windows
    conditional: requirement depending on a companion field
"""

from __future__ import annotations

from typing import Any, Protocol

from ..models import ValidationResult


class FieldRule(Protocol):
    """Protocol satisfied by every field rule once its options are bound."""

    def __call__(self, value: Any, *companions: Any) -> ValidationResult:
        """Check ``value`` (and companion values) and return a verdict."""
        ...


__all__ = ["FieldRule"]
