"""Tests for InternshipService and ProblemReportService."""

# pylint: disable=redefined-outer-name

import pytest

from recordkeeper.core.exceptions import ConflictError, FormRejectedError
from recordkeeper.services import InternshipService, ProblemReportService
from recordkeeper.storage import InMemoryRepository


@pytest.fixture
def internships():
    return InMemoryRepository("internship")


@pytest.fixture
def reports():
    return InMemoryRepository("problem_report")


@pytest.fixture
def internship_service(internships, today):
    return InternshipService(internships, today=today)


@pytest.fixture
def report_service(reports, internships, today):
    return ProblemReportService(reports, internships, today=today)


def test_create_internship(internship_service, valid_internship):
    """Stored internships gain duration, numeric hours and a timestamp."""
    created = internship_service.create("STU123456", valid_internship)
    assert created["studentId"] == "STU123456"
    assert created["durationDays"] == 152
    assert created["workingHours"] == 800
    assert created["stipend"] == 15000
    assert created["submittedAt"]


def test_blank_optional_fields_stored_as_none(internship_service, valid_internship):
    """Optional fields left blank are stored as None."""
    created = internship_service.create("STU123456", {**valid_internship, "stipend": "", "companyCity": " "})
    assert created["stipend"] is None
    assert created["companyCity"] is None


def test_duplicate_company_conflicts_per_student(internship_service, valid_internship):
    """A student cannot submit the same company twice; other students can."""
    internship_service.create("STU123456", valid_internship)
    with pytest.raises(ConflictError):
        internship_service.create("STU123456", {**valid_internship, "companyName": "ACME ROBOTICS"})
    assert internship_service.create("STU999999", valid_internship)["id"] == 2


def test_invalid_internship_rejected(internship_service, valid_internship, internships):
    """Form failures are raised before anything is stored."""
    with pytest.raises(FormRejectedError) as excinfo:
        internship_service.create("STU123456", {**valid_internship, "endDate": "2023-12-01"})
    assert excinfo.value.errors == {
        "endDate": "End Date must be after Start Date",
        "workingHours": "Working Hours cannot exceed 248 hours for 31 days",
    }
    assert len(internships) == 0


def test_problem_report_for_own_internship(
    internship_service, report_service, valid_internship, valid_problem_report
):
    """Reports are accepted for the student's internships, by string or int id."""
    internship = internship_service.create("STU123456", valid_internship)
    created = report_service.create("STU123456", {**valid_problem_report, "internshipSelect": str(internship["id"])})
    assert created["internshipId"] == internship["id"]
    assert created["status"] == "Submitted"
    assert created["previousReportDetails"] is None
    assert "internshipSelect" not in created
    assert "acceptTerms" not in created

    again = report_service.create("STU123456", {**valid_problem_report, "internshipSelect": internship["id"]})
    assert again["id"] == 2


def test_problem_report_for_someone_elses_internship(
    internship_service, report_service, valid_internship, valid_problem_report, reports
):
    """Internships of other students are not selectable."""
    internship_service.create("STU999999", valid_internship)
    with pytest.raises(FormRejectedError) as excinfo:
        report_service.create("STU123456", valid_problem_report)
    assert excinfo.value.errors == {"internshipSelect": "Selected internship is invalid"}
    assert len(reports) == 0


def test_problem_report_keeps_previous_details_when_reported(
    internship_service, report_service, valid_internship, valid_problem_report
):
    """Details of an earlier report are stored when it was reported before."""
    internship_service.create("STU123456", valid_internship)
    created = report_service.create(
        "STU123456",
        {**valid_problem_report, "reported": "yes", "previousReportDetails": "Raised with HR on 2 July"},
    )
    assert created["previousReportDetails"] == "Raised with HR on 2 July"
    assert created["problemDate"] == "2024-07-01"
