"""Validation system for recordkeeper.

This module provides the field and form validation layer shared by the HR
attendance system and the internship management prototype:

- **Models**: ValidationResult, FieldSpec, FormReport, BatchReport
- **Rules**: Pure field rules (see validation/rules/)
- **Forms**: Declarative rule tables per entity kind (see validation/forms/)
- **Config**: Field bounds and closed vocabularies (import from .config)
- **Registry**: run_validation(), validate_record(), print_report()

Public API:
    ValidationResult: Verdict of a single field rule
    FieldSpec: Field bound to its rule and companion fields
    FormValidationAggregator: Runs a form's rules against one record
    FormOptions: Reference day and caller-provided choices for form builders
    validate_record: FormErrors for one record of a given FormKind
    run_validation: BatchReport for several records
    print_report: Display validation results to console

Usage:
    >>> from recordkeeper.validation import FormKind, validate_record
    >>> validate_record(FormKind.EMPLOYEE, {"name": "A", "email": "a@b.co",
    ...                                     "department": "HR", "position": "Dev"})
    {'name': 'Name must be at least 2 characters'}
"""

from __future__ import annotations

from recordkeeper.core.enums import FormKind

from .aggregator import FormValidationAggregator
from .forms import FormOptions
from .models import BatchReport, FieldSpec, FormErrors, FormReport, ValidationResult
from .registry import print_report, run_validation, validate_record

__all__ = [
    # Data models
    "ValidationResult",
    "FieldSpec",
    "FormErrors",
    "FormReport",
    "BatchReport",
    # Aggregation
    "FormValidationAggregator",
    "FormOptions",
    # Runner functions
    "validate_record",
    "run_validation",
    "print_report",
    # Enums
    "FormKind",
]
