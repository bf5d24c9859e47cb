"""Tests for StudentService registration."""

# pylint: disable=redefined-outer-name

import pytest

from recordkeeper.core.exceptions import FormRejectedError
from recordkeeper.services import StudentService
from recordkeeper.services.students import verify_password
from recordkeeper.storage import InMemoryRepository


@pytest.fixture
def students():
    return InMemoryRepository("student")


@pytest.fixture
def service(students, today):
    return StudentService(students, today=today)


def test_register_stores_normalized_student(service, valid_registration):
    """The stored record is normalized and never holds the plain password."""
    created = service.register({**valid_registration, "studentId": "stu123456", "email": "Priya@College.edu"})
    assert created["studentId"] == "STU123456"
    assert created["email"] == "priya@college.edu"
    assert created["semester"] == 5
    assert created["phoneNumber"] == "9876543210"
    assert "password" not in created
    assert "confirmPassword" not in created
    assert verify_password("Secur3!Pass", created["passwordHash"])
    assert not verify_password("wrong", created["passwordHash"])


def test_register_duplicates_are_form_errors(service, valid_registration):
    """Taken email and student id are reported next to the other fields."""
    service.register(valid_registration)
    with pytest.raises(FormRejectedError) as excinfo:
        service.register({**valid_registration, "email": "PRIYA@college.edu", "fullName": "X"})
    assert excinfo.value.errors == {
        "fullName": "Full Name must be at least 3 characters",
        "email": "This email is already registered",
        "studentId": "This Student ID is already registered",
    }


def test_format_errors_take_precedence_over_uniqueness(service, valid_registration):
    """A malformed email is reported as such, not as a duplicate."""
    service.register(valid_registration)
    with pytest.raises(FormRejectedError) as excinfo:
        service.register({**valid_registration, "email": "not-an-email", "studentId": "STU654321"})
    assert excinfo.value.errors == {"email": "Please enter a valid email address"}


def test_register_rejects_weak_password(service, valid_registration, students):
    """Nothing is stored when the password policy fails."""
    with pytest.raises(FormRejectedError) as excinfo:
        service.register({**valid_registration, "password": "short", "confirmPassword": "short"})
    assert excinfo.value.errors == {"password": "Password must be at least 8 characters"}
    assert len(students) == 0
