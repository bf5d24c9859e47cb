"""Tests for AttendanceService."""

# pylint: disable=redefined-outer-name

import pytest

from recordkeeper.core.exceptions import FormRejectedError, RecordNotFoundError
from recordkeeper.services import AttendanceService


@pytest.fixture
def employees(employees_repo):
    employees_repo.insert({"name": "Ada", "email": "ada@example.com", "department": "Eng", "position": "Dev"})
    employees_repo.insert({"name": "Bob", "email": "bob@example.com", "department": "Ops", "position": "SRE"})
    return employees_repo


@pytest.fixture
def service(attendance_repo, employees, today):
    return AttendanceService(attendance_repo, employees, today=today)


@pytest.fixture
def seeded(service):
    service.create({"employeeId": 1, "date": "2024-07-01", "status": "present"})
    service.create({"employeeId": 1, "date": "2024-07-03", "status": "absent"})
    service.create({"employeeId": 2, "date": "2024-07-02", "status": "present"})
    service.create({"employeeId": 2, "date": "2024-07-05", "status": "half-day"})
    return service


def test_create_normalizes_values(service):
    """Dates are stored as ISO days and blank notes as None."""
    created = service.create(
        {"employeeId": "1", "date": "2024-07-01T10:30:00Z", "status": "leave", "notes": "  "}
    )
    assert created == {
        "id": 1,
        "employeeId": 1,
        "date": "2024-07-01",
        "status": "leave",
        "notes": None,
    }


def test_create_rejects_unknown_status(service, attendance_repo):
    """Statuses outside the vocabulary never reach storage."""
    with pytest.raises(FormRejectedError) as excinfo:
        service.create({"employeeId": 1, "date": "2024-07-01", "status": "late"})
    assert excinfo.value.errors == {"status": "Invalid status"}
    assert len(attendance_repo) == 0


def test_create_requires_existing_employee(service):
    """Attendance for an unknown employee is refused."""
    with pytest.raises(RecordNotFoundError):
        service.create({"employeeId": 9, "date": "2024-07-01", "status": "present"})


def test_list_newest_first_with_employee(seeded):
    """Entries come back newest day first with an employee summary."""
    entries = seeded.list()
    assert [e["date"] for e in entries] == ["2024-07-05", "2024-07-03", "2024-07-02", "2024-07-01"]
    assert entries[0]["employee"] == {
        "id": 2,
        "name": "Bob",
        "email": "bob@example.com",
        "department": "Ops",
        "position": "SRE",
    }


def test_list_filters(seeded):
    """Employee, status and an inclusive day range can be combined."""
    assert [e["id"] for e in seeded.list({"employeeId": "1"})] == [2, 1]
    assert [e["id"] for e in seeded.list({"status": "present"})] == [3, 1]
    window = seeded.list({"startDate": "2024-07-02", "endDate": "2024-07-03"})
    assert [e["date"] for e in window] == ["2024-07-03", "2024-07-02"]


def test_list_rejects_malformed_filters(seeded):
    """Filter values are validated like any other form."""
    with pytest.raises(FormRejectedError) as excinfo:
        seeded.list({"startDate": "last week"})
    assert excinfo.value.errors == {"startDate": "Invalid start date format"}


def test_update_and_delete(seeded):
    """Partial updates keep other fields; deleted entries are gone."""
    updated = seeded.update(1, {"status": "leave", "notes": "Sick"})
    assert updated["status"] == "leave"
    assert updated["notes"] == "Sick"
    assert updated["date"] == "2024-07-01"

    with pytest.raises(FormRejectedError):
        seeded.update(1, {"date": "not a date"})

    seeded.delete(1)
    with pytest.raises(RecordNotFoundError):
        seeded.get(1)


def test_stats_labels_and_range(seeded):
    """Statistics are labelled with employee names and honour the day range."""
    stats = seeded.stats()
    assert stats.overall.total == 4
    assert stats.buckets[1].subject_label == "Ada"
    assert stats.buckets[2].counts_by_status["half-day"] == 1

    ranged = seeded.stats(start_date="2024-07-02", end_date="2024-07-03")
    assert ranged.overall.total == 2
    assert ranged.overall.counts["present"] == 1
    assert ranged.overall.counts["absent"] == 1


def test_stats_counts_unrecognized_status(service, attendance_repo):
    """Entries stored outside the form keep their totals but no status column."""
    attendance_repo.insert({"employeeId": 1, "date": "2024-07-01", "status": "remote"})
    stats = service.stats()
    assert stats.overall.total == 1
    assert stats.overall.unrecognized == 1
