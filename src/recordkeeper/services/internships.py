"""Internship submissions and problem reports."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Tuple

from recordkeeper.core.enums import FormKind
from recordkeeper.core.exceptions import ConflictError
from recordkeeper.core.utils import is_blank, parse_date, parse_leading_int
from recordkeeper.storage.repository import Record, Repository
from recordkeeper.validation.rules.dates import internship_duration
from .base import RecordService

logger = logging.getLogger(__name__)

INTERNSHIP_FIELDS = (
    "companyName",
    "companyCity",
    "companyState",
    "companyType",
    "internshipType",
    "startDate",
    "endDate",
    "workingHours",
    "stipend",
    "supervisorName",
    "supervisorEmail",
    "projectTitle",
    "projectDescription",
    "performanceRating",
    "skillsAcquired",
)

PROBLEM_REPORT_FIELDS = (
    "internshipSelect",
    "problemCategory",
    "problemTitle",
    "problemDescription",
    "problemDate",
    "severity",
    "reported",
    "previousReportDetails",
    "witnesses",
    "evidence",
)

PROBLEM_REPORT_STATUS = "Submitted"


def _utcnow() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def _clean(data: Mapping[str, Any], fields: Tuple[str, ...]) -> Dict[str, Any]:
    cleaned: Dict[str, Any] = {}
    for key in fields:
        value = data.get(key)
        if is_blank(value):
            cleaned[key] = None
        elif isinstance(value, str):
            cleaned[key] = value.strip()
        else:
            cleaned[key] = value
    return cleaned


class InternshipService(RecordService):
    """Internship details submitted by students."""

    entity = "internship"

    def __init__(self, internships: Repository, *, today: Optional[date] = None) -> None:
        super().__init__(today=today)
        self._internships = internships

    def for_student(self, student_id: str) -> List[Record]:
        return self._store(self._internships.find, lambda r: r.get("studentId") == student_id)

    def exists(self, student_id: str, company_name: str) -> bool:
        """True if the student already submitted an internship at this company."""
        wanted = company_name.strip().lower()
        return any(
            str(r.get("companyName", "")).lower() == wanted for r in self.for_student(student_id)
        )

    def create(self, student_id: str, data: Mapping[str, Any]) -> Record:
        """Validate and store a student's internship.

        The stored record gains ``durationDays`` and a ``submittedAt``
        timestamp. Working hours and stipend are stored as integers.

        Raises:
            FormRejectedError: If the submission fails the internship form.
            ConflictError: If the student already has an internship at the
                same company (case-insensitive).
        """
        self._check(FormKind.INTERNSHIP, data)
        if self.exists(student_id, str(data["companyName"])):
            raise ConflictError(self.entity, "companyName", str(data["companyName"]).strip())

        record = _clean(data, INTERNSHIP_FIELDS)
        record["studentId"] = student_id
        record["workingHours"] = parse_leading_int(record["workingHours"])
        if record["stipend"] is not None:
            record["stipend"] = parse_leading_int(record["stipend"])
        record["durationDays"] = internship_duration(record["startDate"], record["endDate"])
        record["submittedAt"] = _utcnow()

        created = self._store(self._internships.insert, record)
        logger.info(
            "Student %s submitted internship %s at %s",
            student_id,
            created["id"],
            created["companyName"],
        )
        return created


class ProblemReportService(RecordService):
    """Problems students report about one of their internships."""

    entity = "problem_report"

    def __init__(
        self,
        reports: Repository,
        internships: Repository,
        *,
        today: Optional[date] = None,
    ) -> None:
        super().__init__(today=today)
        self._reports = reports
        self._internships = internships

    def _internship_ids(self, student_id: str) -> Tuple[Any, ...]:
        ids: List[Any] = []
        for internship in self._store(
            self._internships.find, lambda r: r.get("studentId") == student_id
        ):
            # select boxes submit strings, API callers may submit the int id
            ids.extend([internship["id"], str(internship["id"])])
        return tuple(ids)

    def create(self, student_id: str, data: Mapping[str, Any]) -> Record:
        """Validate and store a problem report.

        ``internshipSelect`` must name one of the student's own internships.

        Raises:
            FormRejectedError: If the submission fails the problem report form.
        """
        self._check(
            FormKind.PROBLEM_REPORT, data, internship_ids=self._internship_ids(student_id)
        )

        record = _clean(data, PROBLEM_REPORT_FIELDS)
        record["internshipId"] = int(record.pop("internshipSelect"))
        if record["reported"] != "yes":
            record["previousReportDetails"] = None
        record["problemDate"] = parse_date(record["problemDate"]).date().isoformat()
        record["studentId"] = student_id
        record["status"] = PROBLEM_REPORT_STATUS
        record["submittedAt"] = _utcnow()

        created = self._store(self._reports.insert, record)
        logger.info(
            "Student %s reported %s problem %s on internship %s",
            student_id,
            created["severity"],
            created["id"],
            created["internshipId"],
        )
        return created
