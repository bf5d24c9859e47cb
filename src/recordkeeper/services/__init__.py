"""Record services.

Each service validates submissions with the registered forms and persists
them through injected repositories. Field failures abort a write with
`FormRejectedError`; storage failures surface as `PersistenceError`.
"""

from .attendance import AttendanceService
from .employees import EmployeeService
from .internships import InternshipService, ProblemReportService
from .students import StudentService

__all__ = [
    "AttendanceService",
    "EmployeeService",
    "InternshipService",
    "ProblemReportService",
    "StudentService",
]
