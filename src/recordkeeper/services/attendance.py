"""Attendance records and attendance statistics."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from recordkeeper.core.enums import ATTENDANCE_STATUSES, FormKind
from recordkeeper.core.utils import is_blank, parse_date, parse_leading_int, start_of_day
from recordkeeper.stats.aggregator import aggregate_attendance, filter_by_date
from recordkeeper.stats.models import AttendanceRecord, AttendanceStats
from recordkeeper.storage.repository import Record, Repository
from .base import RecordService
from .employees import employee_summary

logger = logging.getLogger(__name__)


def _iso_day(value: Any) -> str:
    return start_of_day(parse_date(value)).date().isoformat()


def _notes(value: Any) -> Optional[str]:
    return None if is_blank(value) else str(value).strip()


class AttendanceService(RecordService):
    """Attendance entries of employees.

    Every stored entry carries ``employeeId``, ``date`` (ISO day), ``status``
    and ``notes``.
    """

    entity = "attendance"

    def __init__(
        self,
        attendance: Repository,
        employees: Repository,
        *,
        statuses=ATTENDANCE_STATUSES,
        today: Optional[date] = None,
    ) -> None:
        super().__init__(today=today)
        self._attendance = attendance
        self._employees = employees
        self._statuses = tuple(statuses)

    def list(self, filters: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """Attendance entries matching the filters, newest day first.

        Args:
            filters: Optional ``employeeId``, ``startDate``, ``endDate`` and
                ``status``. Date bounds are inclusive.

        Returns:
            Entries, each with an ``employee`` summary (None if the employee
            no longer exists).

        Raises:
            FormRejectedError: If a filter value is malformed.
        """
        filters = dict(filters or {})
        self._check(FormKind.ATTENDANCE_QUERY, filters)

        employee_id = parse_leading_int(filters.get("employeeId"))
        status = None if is_blank(filters.get("status")) else filters["status"]
        start = parse_date(filters.get("startDate"))
        end = parse_date(filters.get("endDate"))
        start = start_of_day(start) if start is not None else None
        end = start_of_day(end) if end is not None else None

        def _matches(record: Record) -> bool:
            if employee_id is not None and record.get("employeeId") != employee_id:
                return False
            if status is not None and record.get("status") != status:
                return False
            day = parse_date(record.get("date"))
            if start is not None and (day is None or day < start):
                return False
            if end is not None and (day is None or day > end):
                return False
            return True

        entries = self._store(self._attendance.find, _matches)
        entries.sort(key=lambda r: (r.get("date") or "", r["id"]), reverse=True)

        employees = {e["id"]: e for e in self._store(self._employees.find, None)}
        for entry in entries:
            employee = employees.get(entry.get("employeeId"))
            entry["employee"] = employee_summary(employee) if employee else None
        return entries

    def get(self, attendance_id: int) -> Record:
        return self._store(self._attendance.get, attendance_id)

    def create(self, data: Mapping[str, Any]) -> Record:
        """Validate and store an attendance entry.

        Raises:
            FormRejectedError: If the submission fails the attendance form.
            RecordNotFoundError: If the employee does not exist.
        """
        self._check(FormKind.ATTENDANCE, data)
        employee_id = int(data["employeeId"])
        self._store(self._employees.get, employee_id)

        record = {
            "employeeId": employee_id,
            "date": _iso_day(data["date"]),
            "status": data["status"],
            "notes": _notes(data.get("notes")),
        }
        created = self._store(self._attendance.insert, record)
        logger.info(
            "Recorded %s for employee %s on %s", created["status"], employee_id, created["date"]
        )
        return created

    def update(self, attendance_id: int, changes: Mapping[str, Any]) -> Record:
        """Apply a partial update to date, status or notes."""
        self.get(attendance_id)
        self._check(FormKind.ATTENDANCE_UPDATE, changes)
        update: Dict[str, Any] = {}
        if not is_blank(changes.get("date")):
            update["date"] = _iso_day(changes["date"])
        if not is_blank(changes.get("status")):
            update["status"] = changes["status"]
        if "notes" in changes:
            update["notes"] = _notes(changes["notes"])

        updated = self._store(self._attendance.update, attendance_id, update)
        logger.info("Updated attendance %s", attendance_id)
        return updated

    def delete(self, attendance_id: int) -> None:
        self._store(self._attendance.delete, attendance_id)
        logger.info("Deleted attendance %s", attendance_id)

    def stats(self, start_date: Any = None, end_date: Any = None) -> AttendanceStats:
        """Status counts overall and per employee within an optional day range.

        Buckets are labelled with the employee's current name.
        """
        names = {e["id"]: e.get("name") for e in self._store(self._employees.find, None)}
        records = [
            AttendanceRecord(
                subject_id=r.get("employeeId"),
                status=r.get("status", ""),
                date=r.get("date"),
                notes=r.get("notes"),
                subject_label=names.get(r.get("employeeId")),
            )
            for r in self._store(self._attendance.find, None)
        ]
        records = filter_by_date(records, start_date, end_date)
        stats = aggregate_attendance(records, self._statuses)
        if stats.overall.unrecognized:
            logger.warning(
                "%d attendance records have an unrecognized status", stats.overall.unrecognized
            )
        return stats
