"""Validation data models.

This module defines core data structures for validation results:
- ValidationResult: Verdict of a single field rule
- FieldSpec: A form field bound to its rule and the companion fields it reads
- FormReport: Errors produced for one submitted record
- BatchReport: Aggregated FormReports for several submitted records
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

FormErrors = Dict[str, str]

Rule = Callable[..., "ValidationResult"]


@dataclass(frozen=True)
class ValidationResult:
    """Verdict of a single field rule.

    Attributes:
        valid: True if the value satisfies the rule.
        message: Human readable reason; empty if and only if ``valid``.

    Examples:
        >>> ValidationResult.ok()
        ValidationResult(valid=True, message='')
        >>> ValidationResult.fail("Email is required").valid
        False
    """

    valid: bool
    message: str = ""

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.valid and self.message:
            raise ValueError("valid=True requires an empty message")
        if not self.valid and not self.message:
            raise ValueError("valid=False requires a non-empty message")

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(True, "")

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(False, message)

    def __bool__(self) -> bool:
        return self.valid


@dataclass(frozen=True)
class FieldSpec:
    """A form field bound to the rule that checks it.

    The rule is called as ``rule(value, *dependency_values)`` where
    ``dependency_values`` are read from the same record snapshot, in the order
    given by ``depends_on``. Missing keys read as None.

    Attributes:
        name: Field name (key in the submitted record and in FormErrors).
        rule: Callable returning a ValidationResult.
        depends_on: Names of companion fields the rule reads.
        optional: When True the rule is skipped if the key is absent from the
            record (partial updates).
    """

    name: str
    rule: Rule
    depends_on: Tuple[str, ...] = ()
    optional: bool = False

    def evaluate(self, snapshot: Dict[str, Any]) -> ValidationResult:
        """Run the rule against a record snapshot."""
        value = snapshot.get(self.name)
        companions = [snapshot.get(dep) for dep in self.depends_on]
        return self.rule(value, *companions)


@dataclass
class FormReport:
    """Validation outcome for one submitted record.

    Attributes:
        form: Form kind value (e.g. "INTERNSHIP").
        errors: Field name to message mapping; empty when the record passed.
        record_index: Position of the record in a batch, if any.
        field_count: Number of fields the form declares.

    Examples:
        >>> report = FormReport(form="EMPLOYEE", errors={"email": "Invalid email format"})
        >>> report.passed
        False
    """

    form: str
    errors: FormErrors
    record_index: Optional[int] = None
    field_count: int = 0

    @property
    def passed(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        """Generate a concise text summary of this record's result."""
        where = f" #{self.record_index}" if self.record_index is not None else ""
        if self.passed:
            return f"{self.form}{where}: OK ({self.field_count} fields checked)"
        return (
            f"{self.form}{where}: {len(self.errors)} of {self.field_count} fields failed"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "form": self.form,
            "record_index": self.record_index,
            "passed": self.passed,
            "field_count": self.field_count,
            "errors": dict(sorted(self.errors.items())),
        }


@dataclass
class BatchReport:
    """Aggregated validation results for a batch of submitted records.

    Attributes:
        form: Form kind value shared by every record.
        reports: One FormReport per submitted record, in input order.
        source: Where the records came from (file name), for report headers.
    """

    form: str
    reports: List[FormReport] = field(default_factory=list)
    source: str = ""

    def has_errors(self) -> bool:
        """Return True if any record failed validation."""
        return any(not r.passed for r in self.reports)

    def get_error_count(self) -> int:
        """Count failing fields across all records."""
        return sum(len(r.errors) for r in self.reports)

    def get_failed_reports(self) -> List[FormReport]:
        return [r for r in self.reports if not r.passed]

    def summary(self) -> str:
        """Generate a concise text summary of validation results.

        Examples:
            >>> print(report.summary())
            Validation Summary:
              Form: INTERNSHIP (internships.json)
              Records: 3 checked (2 passed, 1 failed)
              Issues: 4 field errors
        """
        total = len(self.reports)
        failed = len(self.get_failed_reports())
        source = f" ({self.source})" if self.source else ""
        return (
            f"Validation Summary:\n"
            f"  Form: {self.form}{source}\n"
            f"  Records: {total} checked ({total - failed} passed, {failed} failed)\n"
            f"  Issues: {self.get_error_count()} field errors"
        )

    def to_markdown(self) -> str:
        """Generate a Markdown validation report.

        Returns:
            Markdown with a summary section followed by one section per
            failing record listing its field errors.
        """
        total = len(self.reports)
        failed_reports = self.get_failed_reports()
        lines = [
            f"# Validation Report: {self.form}",
            "",
            f"**Source:** {self.source or '-'}",
            f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            "## Summary",
            "",
            f"- **Records:** {total}",
            f"- **Passed:** {total - len(failed_reports)} ✅",
            f"- **Failed:** {len(failed_reports)} ❌",
            f"- **Field errors:** {self.get_error_count()}",
            "",
        ]

        if not failed_reports:
            lines.append("## ✅ All Records Passed")
            lines.append("")
        else:
            lines.append("## ❌ Errors")
            lines.append("")
            for report in failed_reports:
                index = report.record_index if report.record_index is not None else "-"
                lines.append(f"### ❌ Record {index} ({len(report.errors)} fields)")
                lines.append("")
                for name, message in sorted(report.errors.items()):
                    lines.append(f"- **{name}**: {message}")
                lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Generate a JSON validation report."""
        failed = len(self.get_failed_reports())
        report_data = {
            "metadata": {
                "form": self.form,
                "source": self.source,
                "generated_at": datetime.now().isoformat(),
            },
            "summary": {
                "records": len(self.reports),
                "passed": len(self.reports) - failed,
                "failed": failed,
                "field_errors": self.get_error_count(),
            },
            "records": [r.to_dict() for r in self.reports],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)

    def to_console_summary(self) -> str:
        """Generate the summary plus one line per failing field."""
        lines = [self.summary(), ""]
        failed = self.get_failed_reports()
        if not failed:
            lines.append("✅ All records passed validation!")
            return "\n".join(lines)
        lines.append("Record Details:")
        for report in failed:
            lines.append(f"❌ {report.summary()}")
            for name, message in sorted(report.errors.items()):
                lines.append(f"   - {name}: {message}")
        return "\n".join(lines)
