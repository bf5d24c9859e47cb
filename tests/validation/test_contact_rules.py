"""Tests for email, phone, student id and login identifier rules."""

import pytest

from recordkeeper.validation.rules.contact import (
    check_email,
    check_login_identifier,
    check_phone,
    check_student_id,
)


@pytest.mark.parametrize("value", ["a@b.co", "first.last+tag@mail.example.org", "x@y.z"])
def test_check_email_valid(value):
    """Addresses of the local@domain.tld shape pass."""
    assert check_email(value).valid


@pytest.mark.parametrize("value", ["a@b", "a b@c.de", "@b.co", "a@.co", "plainaddress", "a@@b.co"])
def test_check_email_invalid(value):
    """Missing parts, whitespace or extra @ fail with the invalid message."""
    result = check_email(value)
    assert not result.valid
    assert result.message == "Please enter a valid email address"


def test_check_email_required_and_custom_messages():
    """Label and invalid message are configurable per form."""
    assert check_email("").message == "Email is required"
    assert check_email(None, label="Supervisor Email").message == "Supervisor Email is required"
    assert check_email("nope", invalid_message="Invalid email format").message == "Invalid email format"


@pytest.mark.parametrize("value", ["9876543210", "987-654-3210", "(987) 654 3210"])
def test_check_phone_ten_digits(value):
    """Separators are ignored; exactly ten digits must remain."""
    assert check_phone(value).valid


@pytest.mark.parametrize("value", ["12345", "98765432101", "phone"])
def test_check_phone_wrong_digit_count(value):
    """Anything other than ten digits fails."""
    assert check_phone(value).message == "Phone Number must be 10 digits"


def test_check_phone_required():
    """Blank phone numbers are reported as required."""
    assert check_phone("  ").message == "Phone Number is required"


@pytest.mark.parametrize("value", ["STU123456", "stu1234567", "STU12345678"])
def test_check_student_id_valid(value):
    """STU followed by six to eight digits, any case."""
    assert check_student_id(value).valid


@pytest.mark.parametrize("value", ["STU12345", "STU123456789", "ABC123456", "STU12345X"])
def test_check_student_id_invalid(value):
    """Other shapes fail with the format hint."""
    assert check_student_id(value).message == "Student ID must be in format STU000000"


def test_check_student_id_required():
    """Blank ids are reported as required."""
    assert check_student_id("").message == "Student ID is required"


def test_check_login_identifier():
    """Login accepts an email or a 6-12 character alphanumeric id."""
    assert check_login_identifier("STU123456").valid
    assert check_login_identifier("student@college.edu").valid
    assert check_login_identifier("").message == "Student ID or Email is required"
    assert check_login_identifier("ab1").message == "Please enter a valid Student ID or Email"
    assert check_login_identifier("has space1").message == "Please enter a valid Student ID or Email"
