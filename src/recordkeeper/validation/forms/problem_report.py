"""Internship problem report form."""

from __future__ import annotations

from functools import partial
from typing import List

from ..config import (
    EVIDENCE_MAX,
    PREVIOUS_REPORT_DETAILS_MIN,
    PROBLEM_CATEGORIES,
    PROBLEM_DESCRIPTION_LENGTH,
    PROBLEM_TITLE_LENGTH,
    REPORTED_CHOICES,
    SEVERITIES,
    WITNESSES_MAX,
)
from ..models import FieldSpec
from ..rules.choice import check_accepted, check_one_of
from ..rules.conditional import check_required_when
from ..rules.dates import check_past_date
from ..rules.text import check_length, check_max_length, check_required
from . import FormOptions


def _internship_rule(options: FormOptions):
    if options.internship_ids is None:
        return partial(check_required, label="Internship")
    return partial(
        check_one_of,
        choices=options.internship_ids,
        label="Internship",
        required_message="Please select an internship",
        invalid_message="Selected internship is invalid",
    )


def build_fields(options: FormOptions) -> List[FieldSpec]:
    return [
        FieldSpec("internshipSelect", _internship_rule(options)),
        FieldSpec(
            "problemCategory",
            partial(
                check_one_of,
                choices=PROBLEM_CATEGORIES,
                label="Problem Category",
                required_message="Please select a problem category",
                invalid_message="Please select a valid category",
            ),
        ),
        FieldSpec(
            "problemTitle",
            partial(
                check_length,
                label="Problem Title",
                min_len=PROBLEM_TITLE_LENGTH[0],
                max_len=PROBLEM_TITLE_LENGTH[1],
            ),
        ),
        FieldSpec(
            "problemDescription",
            partial(
                check_length,
                label="Description",
                min_len=PROBLEM_DESCRIPTION_LENGTH[0],
                max_len=PROBLEM_DESCRIPTION_LENGTH[1],
            ),
        ),
        FieldSpec("problemDate", partial(check_past_date, today=options.reference_day())),
        FieldSpec(
            "severity",
            partial(
                check_one_of,
                choices=SEVERITIES,
                label="Severity",
                required_message="Please select severity level",
                invalid_message="Please select a valid severity level",
            ),
        ),
        FieldSpec(
            "reported",
            partial(
                check_one_of,
                choices=REPORTED_CHOICES,
                label="Reported",
                required_message="Please indicate if this was reported before",
                invalid_message="Invalid selection",
            ),
        ),
        FieldSpec(
            "previousReportDetails",
            partial(
                check_required_when,
                when="yes",
                required_message="Please provide details of previous report",
                min_len=PREVIOUS_REPORT_DETAILS_MIN,
                min_len_message=(
                    f"Previous report details must be at least "
                    f"{PREVIOUS_REPORT_DETAILS_MIN} characters"
                ),
            ),
            depends_on=("reported",),
        ),
        FieldSpec("witnesses", partial(check_max_length, label="Witnesses field", max_len=WITNESSES_MAX)),
        FieldSpec("evidence", partial(check_max_length, label="Evidence field", max_len=EVIDENCE_MAX)),
        FieldSpec(
            "acceptTerms",
            partial(check_accepted, message="You must accept the terms to submit"),
        ),
    ]
