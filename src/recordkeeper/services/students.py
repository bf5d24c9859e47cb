"""Student accounts."""

from __future__ import annotations

import hashlib
import logging
import secrets
from datetime import date
from typing import Any, Mapping, Optional

from recordkeeper.core.enums import FormKind
from recordkeeper.core.utils import parse_leading_int
from recordkeeper.storage.repository import Record, Repository
from .base import RecordService

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 200_000


def hash_password(password: str, salt: Optional[str] = None) -> str:
    """Return ``salt$hexdigest`` for a PBKDF2-SHA256 hash of the password."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), PBKDF2_ITERATIONS
    )
    return f"{salt}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    salt, _, _ = stored.partition("$")
    return secrets.compare_digest(hash_password(password, salt), stored)


class StudentService(RecordService):
    """Registers students.

    Stored records hold ``fullName``, ``email`` (lowercase), ``studentId``
    (uppercase), ``department``, ``semester``, ``phoneNumber`` (digits only)
    and ``passwordHash``. The confirmation field is never stored.
    """

    entity = "student"

    def __init__(self, students: Repository, *, today: Optional[date] = None) -> None:
        super().__init__(today=today)
        self._students = students

    def email_exists(self, email: Any) -> bool:
        wanted = str(email).strip().lower()
        return any(s.get("email") == wanted for s in self._store(self._students.find, None))

    def student_id_exists(self, student_id: Any) -> bool:
        wanted = str(student_id).strip().upper()
        return any(s.get("studentId") == wanted for s in self._store(self._students.find, None))

    def register(self, data: Mapping[str, Any]) -> Record:
        """Validate a registration and create the student.

        Uniqueness failures are reported as form errors on ``email`` and
        ``studentId``, next to any format errors, unless that field already
        failed its format rule.

        Raises:
            FormRejectedError: If any field fails.
        """
        errors = self._errors(FormKind.REGISTRATION, data)
        if "email" not in errors and self.email_exists(data["email"]):
            errors["email"] = "This email is already registered"
        if "studentId" not in errors and self.student_id_exists(data["studentId"]):
            errors["studentId"] = "This Student ID is already registered"
        self._reject_if_errors(FormKind.REGISTRATION, errors)

        record = {
            "fullName": str(data["fullName"]).strip(),
            "email": str(data["email"]).strip().lower(),
            "studentId": str(data["studentId"]).strip().upper(),
            "department": data["department"],
            "semester": parse_leading_int(data["semester"]),
            "phoneNumber": "".join(ch for ch in str(data["phoneNumber"]) if ch.isdigit()),
            "passwordHash": hash_password(str(data["password"])),
        }
        created = self._store(self._students.insert, record)
        logger.info("Registered student %s", created["studentId"])
        return created
