"""Shared pytest fixtures for form validation, statistics and service tests."""

from datetime import date
from typing import Any, Dict

import pytest

from recordkeeper.storage import InMemoryRepository

# Fixed reference day so relative date windows do not drift with the calendar
TODAY = date(2024, 7, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def valid_employee() -> Dict[str, Any]:
    return {
        "name": "Ada Lovelace",
        "email": "Ada@Example.com",
        "department": "Engineering",
        "position": "Analyst",
        "joinDate": "2023-03-01",
    }


@pytest.fixture
def valid_registration() -> Dict[str, Any]:
    return {
        "fullName": "Priya Sharma",
        "email": "priya@college.edu",
        "studentId": "STU123456",
        "department": "CSE",
        "semester": "5",
        "phoneNumber": "(987) 654-3210",
        "password": "Secur3!Pass",
        "confirmPassword": "Secur3!Pass",
    }


@pytest.fixture
def valid_internship() -> Dict[str, Any]:
    return {
        "companyName": "Acme Robotics",
        "companyCity": "Pune",
        "companyState": "Maharashtra",
        "companyType": "IT",
        "internshipType": "Technical",
        "startDate": "2024-01-01",
        "endDate": "2024-06-01",
        "workingHours": "800",
        "stipend": "15000",
        "supervisorName": "Ravi Kumar",
        "supervisorEmail": "ravi@acme.example",
        "projectTitle": "Warehouse path planning",
        "projectDescription": "Built a route planner for picking robots.",
        "performanceRating": "Very Good",
        "skillsAcquired": "Python, ROS",
    }


@pytest.fixture
def valid_problem_report() -> Dict[str, Any]:
    return {
        "internshipSelect": "1",
        "problemCategory": "Work Hours",
        "problemTitle": "Mandatory weekend shifts",
        "problemDescription": "Interns are asked to work every Saturday without notice.",
        "problemDate": "2024-07-01",
        "severity": "Medium",
        "reported": "no",
        "previousReportDetails": "",
        "witnesses": "",
        "evidence": "",
        "acceptTerms": True,
    }


@pytest.fixture
def employees_repo() -> InMemoryRepository:
    return InMemoryRepository("employee")


@pytest.fixture
def attendance_repo() -> InMemoryRepository:
    return InMemoryRepository("attendance")
