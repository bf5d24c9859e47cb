"""Form registry and runner.

This module orchestrates form validation:
- FORM_BUILDERS: Rule table builder for every FormKind
- build_aggregator(): FormValidationAggregator for a form kind
- validate_record(): FormErrors for one submitted record
- run_validation(): Validates a batch of records and returns a BatchReport
- print_report(): Displays validation results to console
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, List, Optional

from recordkeeper.core.enums import FormKind
from .aggregator import FormValidationAggregator
from .forms import FormOptions
from .forms import attendance, employee, internship, login, problem_report, registration
from .models import BatchReport, FieldSpec, FormErrors, FormReport

FormBuilder = Callable[[FormOptions], List[FieldSpec]]

# Registry of all known forms
FORM_BUILDERS: Dict[FormKind, FormBuilder] = {
    # HR employee / attendance system
    FormKind.EMPLOYEE: employee.build_fields,
    FormKind.EMPLOYEE_UPDATE: employee.build_update_fields,
    FormKind.ATTENDANCE: attendance.build_fields,
    FormKind.ATTENDANCE_UPDATE: attendance.build_update_fields,
    FormKind.ATTENDANCE_QUERY: attendance.build_query_fields,
    # Internship management
    FormKind.REGISTRATION: registration.build_fields,
    FormKind.LOGIN: login.build_fields,
    FormKind.INTERNSHIP: internship.build_fields,
    FormKind.PROBLEM_REPORT: problem_report.build_fields,
}


def get_fields(kind: FormKind, options: Optional[FormOptions] = None) -> List[FieldSpec]:
    """Build the field specs of a form.

    Raises:
        ValueError: If no builder is registered for ``kind``.
    """
    try:
        builder = FORM_BUILDERS[kind]
    except KeyError:
        raise ValueError(f"No form registered for kind: {kind}") from None
    return builder(options or FormOptions())


def build_aggregator(
    kind: FormKind, options: Optional[FormOptions] = None
) -> FormValidationAggregator:
    """Create a FormValidationAggregator for a form kind."""
    return FormValidationAggregator(get_fields(kind, options), form=kind.value)


def validate_record(
    kind: FormKind, record: Any, options: Optional[FormOptions] = None
) -> FormErrors:
    """Validate one submitted record.

    Examples:
        >>> validate_record(FormKind.ATTENDANCE, {"employeeId": 1, "date": "2024-03-01", "status": "late"})
        {'status': 'Invalid status'}
    """
    return build_aggregator(kind, options).validate(record)


def run_validation(
    kind: FormKind,
    records: Iterable[Any],
    options: Optional[FormOptions] = None,
    source: str = "",
) -> BatchReport:
    """Validate a batch of submitted records against one form.

    Args:
        kind: Form to validate against.
        records: Submitted records (mappings). A single mapping is treated as
            a batch of one.
        options: Form options (reference day, allowed internship ids).
        source: Label for report headers, typically the input file name.

    Returns:
        BatchReport with one FormReport per record, in input order.
    """
    if isinstance(records, Mapping):
        records = [records]
    aggregator = build_aggregator(kind, options)
    field_count = len(aggregator.field_names)
    reports = [
        FormReport(
            form=kind.value,
            errors=aggregator.validate(record),
            record_index=index,
            field_count=field_count,
        )
        for index, record in enumerate(records)
    ]
    return BatchReport(form=kind.value, reports=reports, source=source)


def print_report(report: BatchReport) -> None:
    """Print validation report to console.

    Displays a summary followed by the field errors of every failing record.
    """
    print(report.summary())
    print()

    failed = report.get_failed_reports()
    if not failed:
        print("✅ All records passed validation!")
        return

    print("Failed Records:")
    for result in failed:
        print(f"❌ {result.summary()}")
        for name, message in sorted(result.errors.items()):
            print(f"   - {name}: {message}")
