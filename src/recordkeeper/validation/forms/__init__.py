"""Declarative form rule tables.

Each module in this package describes one entity kind as a list of
`FieldSpec` entries: which field, which rule (with its options bound), and
which companion fields the rule reads. Builders take a `FormOptions` value so
that rules depending on the current day or on caller-provided choices stay
pure.

To add a form:

1. Create a module here exposing ``build_fields(options) -> List[FieldSpec]``
2. Add a `FormKind` member in `recordkeeper.core.enums`
3. Register the builder in `FORM_BUILDERS` in `recordkeeper.validation.registry`
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class FormOptions:
    """Inputs that form builders bind into their rules.

    Attributes:
        today: Reference day for relative date windows. Defaults to the
            current local date when the form is built.
        internship_ids: Internship ids the submitting student may report
            problems for. None disables the membership check.
    """

    today: Optional[date] = None
    internship_ids: Optional[Tuple[str, ...]] = None

    def reference_day(self) -> date:
        return self.today or date.today()


__all__ = ["FormOptions"]
