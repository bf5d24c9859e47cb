"""Tests for the text field rules."""

import pytest

from recordkeeper.validation.rules.choice import check_accepted, check_one_of
from recordkeeper.validation.rules.text import (
    check_length,
    check_max_length,
    check_person_name,
    check_required,
)


def test_check_required_blank_values():
    """Missing, empty and whitespace-only values are all 'required' failures."""
    for value in (None, "", "   \t"):
        result = check_required(value, label="Internship")
        assert not result.valid
        assert result.message == "Internship is required"


def test_check_required_accepts_non_string_values():
    """Numbers are never blank, including zero."""
    assert check_required(0, label="Internship").valid
    assert check_required(7, label="Internship").valid


@pytest.mark.parametrize(
    "value,expected",
    [
        ("A", "Name must be at least 2 characters"),
        ("  A  ", "Name must be at least 2 characters"),
        ("Al", ""),
        ("x" * 100, ""),
        ("x" * 101, "Name must not exceed 100 characters"),
    ],
)
def test_check_length_bounds(value, expected):
    """Length is measured after trimming and both bounds are inclusive."""
    result = check_length(value, label="Name", min_len=2, max_len=100)
    assert result.message == expected
    assert result.valid is (expected == "")


def test_check_length_optional_blank_passes():
    """A blank value passes when the field is not required."""
    assert check_length("", label="Name", min_len=2, max_len=5, required=False).valid
    assert check_length(None, label="Name", min_len=2, max_len=5).message == "Name is required"


def test_check_max_length_counts_untrimmed_text():
    """Free-text limits include surrounding whitespace."""
    assert check_max_length("x" * 500, label="Notes", max_len=500).valid
    result = check_max_length(" " + "x" * 500, label="Notes", max_len=500)
    assert result.message == "Notes must not exceed 500 characters"
    assert check_max_length(None, label="Notes", max_len=500).valid


@pytest.mark.parametrize(
    "value,expected",
    [
        ("", "Full Name is required"),
        ("Jo", "Full Name must be at least 3 characters"),
        ("Ann-Marie", "Full Name can only contain letters and spaces"),
        ("R2D2 Unit", "Full Name can only contain letters and spaces"),
        ("Mary Ann", ""),
    ],
)
def test_check_person_name(value, expected):
    """Person names: required, min length, then letters and spaces only."""
    assert check_person_name(value, label="Full Name").message == expected


def test_check_one_of_messages():
    """Blank values use the required message, others the invalid message."""
    statuses = ("present", "absent")
    assert check_one_of("present", choices=statuses, label="Status").valid
    assert check_one_of("late", choices=statuses, label="Status").message == "Invalid status"
    assert check_one_of("", choices=statuses, label="Status").message == "Status is required"
    assert check_one_of("", choices=statuses, label="Status", required=False).valid
    custom = check_one_of(
        "Hacker", choices=("CSE",), label="Department", invalid_message="Please select a valid department"
    )
    assert custom.message == "Please select a valid department"


def test_check_one_of_is_case_sensitive():
    """Select values must match exactly."""
    assert not check_one_of("Present", choices=("present",), label="Status").valid


def test_check_one_of_unhashable_value():
    """Unhashable values are simply not in the vocabulary."""
    result = check_one_of(["present"], choices=frozenset({"present"}), label="Status")
    assert result.message == "Invalid status"


@pytest.mark.parametrize("value", [True, "true", "on", "yes", "1", "TRUE"])
def test_check_accepted_truthy(value):
    """Ticked checkboxes arrive as booleans or as strings."""
    assert check_accepted(value, message="You must accept the terms to submit").valid


@pytest.mark.parametrize("value", [False, None, "", "false", "off", 0])
def test_check_accepted_unticked(value):
    """Anything else means the box was not ticked."""
    result = check_accepted(value, message="You must accept the terms to submit")
    assert result.message == "You must accept the terms to submit"
