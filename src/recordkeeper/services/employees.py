"""Employee records."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Tuple

from recordkeeper.core.enums import FormKind
from recordkeeper.core.exceptions import ConflictError
from recordkeeper.core.utils import parse_date
from recordkeeper.stats.aggregator import aggregate_attendance
from recordkeeper.stats.models import AttendanceRecord, StatusCounts
from recordkeeper.storage.repository import Record, Repository
from .base import RecordService

logger = logging.getLogger(__name__)

EMPLOYEE_FIELDS = ("name", "email", "department", "position", "joinDate")


def normalize_email(value: Any) -> str:
    return str(value).strip().lower()


def employee_summary(employee: Record) -> Dict[str, Any]:
    """Fields of an employee embedded in attendance listings."""
    return {k: employee.get(k) for k in ("id", "name", "email", "department", "position")}


class EmployeeService(RecordService):
    """Create, read, update and delete employees."""

    entity = "employee"

    def __init__(
        self,
        employees: Repository,
        attendance: Repository,
        *,
        today: Optional[date] = None,
    ) -> None:
        super().__init__(today=today)
        self._employees = employees
        self._attendance = attendance

    def list(self, department: Optional[str] = None) -> List[Record]:
        """All employees, newest first, optionally limited to one department."""
        predicate = (lambda e: e.get("department") == department) if department else None
        employees = self._store(self._employees.find, predicate)
        return sorted(employees, key=lambda e: e["id"], reverse=True)

    def get(self, employee_id: int) -> Record:
        return self._store(self._employees.get, employee_id)

    def create(self, data: Mapping[str, Any]) -> Record:
        """Validate and store a new employee.

        Raises:
            FormRejectedError: If the submission fails the employee form.
            ConflictError: If another employee already uses the email.
        """
        self._check(FormKind.EMPLOYEE, data)
        record = {k: data.get(k) for k in EMPLOYEE_FIELDS}
        for key in ("name", "department", "position"):
            record[key] = str(record[key]).strip()
        record["email"] = normalize_email(record["email"])
        self._ensure_unique_email(record["email"])
        join = parse_date(record.get("joinDate")) or parse_date(self._options().reference_day())
        record["joinDate"] = join.date().isoformat()

        created = self._store(self._employees.insert, record)
        logger.info("Created employee %s (%s)", created["id"], created["email"])
        return created

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> Record:
        """Apply a partial update; only supplied fields are validated."""
        self.get(employee_id)
        self._check(FormKind.EMPLOYEE_UPDATE, changes)
        update = {k: changes[k] for k in EMPLOYEE_FIELDS if k in changes}
        for key in ("name", "department", "position"):
            if key in update:
                update[key] = str(update[key]).strip()
        if "email" in update:
            update["email"] = normalize_email(update["email"])
            self._ensure_unique_email(update["email"], exclude_id=employee_id)
        if "joinDate" in update:
            join = parse_date(update["joinDate"])
            update["joinDate"] = join.date().isoformat() if join else None

        updated = self._store(self._employees.update, employee_id, update)
        logger.info("Updated employee %s", employee_id)
        return updated

    def delete(self, employee_id: int) -> None:
        """Delete an employee together with their attendance records."""
        self._store(self._employees.delete, employee_id)
        for record in self._store(self._attendance.find, None):
            if record.get("employeeId") == employee_id:
                self._store(self._attendance.delete, record["id"])
        logger.info("Deleted employee %s", employee_id)

    def attendance_stats(self, employee_id: int) -> Tuple[Record, StatusCounts]:
        """An employee and the status counts over all of their attendance."""
        employee = self.get(employee_id)
        records = [
            AttendanceRecord(
                subject_id=employee_id,
                status=r.get("status", ""),
                date=r.get("date"),
                subject_label=employee.get("name"),
            )
            for r in self._store(self._attendance.find, None)
            if r.get("employeeId") == employee_id
        ]
        return employee, aggregate_attendance(records).overall

    def _ensure_unique_email(self, email: str, exclude_id: Optional[int] = None) -> None:
        for other in self._store(self._employees.find, None):
            if other.get("email") == email and other.get("id") != exclude_id:
                raise ConflictError(self.entity, "email", email)
