"""Attendance statistics data models.

- AttendanceRecord: One attendance entry fed to the aggregator
- StatsBucket: Per-subject status counts
- StatusCounts: Overall status counts
- AttendanceStats: Result of one aggregation pass
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class AttendanceRecord:
    """One attendance entry.

    Attributes:
        subject_id: Who the entry is about (employee id, student id).
        status: Status code, expected to be one of the caller's declared statuses.
        date: Day of the entry (ISO string, date or datetime).
        notes: Free text notes.
        subject_label: Display name of the subject, if known.
    """

    subject_id: Hashable
    status: str
    date: Any = None
    notes: Optional[str] = None
    subject_label: Optional[str] = None


@dataclass
class StatusCounts:
    """Counts per recognized status plus the records that matched none of them.

    Invariant: ``total == sum(counts.values()) + unrecognized``.
    """

    counts: Dict[str, int]
    total: int = 0
    unrecognized: int = 0

    def to_dict(self) -> Dict[str, int]:
        data = {"total": self.total}
        data.update(self.counts)
        data["unrecognized"] = self.unrecognized
        return data


@dataclass
class StatsBucket:
    """Status counts for one subject.

    Attributes:
        subject_id: Subject the bucket belongs to.
        subject_label: Display name (first non-empty label seen, else the id).
        total: Records of this subject, recognized or not.
        counts_by_status: Count per declared status, zero-filled.
        unrecognized: Records of this subject with an undeclared status.
    """

    subject_id: Hashable
    subject_label: str
    total: int = 0
    counts_by_status: Dict[str, int] = field(default_factory=dict)
    unrecognized: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.subject_id,
            "name": self.subject_label,
            "total": self.total,
        }
        data.update(self.counts_by_status)
        data["unrecognized"] = self.unrecognized
        return data


@dataclass
class AttendanceStats:
    """Result of aggregating a collection of attendance records.

    Attributes:
        statuses: Declared status codes, in declared order.
        overall: Counts over all records.
        buckets: One StatsBucket per distinct subject id. Iteration order is
            not meaningful; use `sorted_buckets` for display.
    """

    statuses: Tuple[str, ...]
    overall: StatusCounts
    buckets: Dict[Hashable, StatsBucket] = field(default_factory=dict)

    def sorted_buckets(self, key: str = "label") -> List[StatsBucket]:
        """Return buckets in a stable display order.

        Args:
            key: "label" (then id), "id", or "total" (descending, then label).

        Raises:
            ValueError: If ``key`` is not one of the supported orderings.
        """
        buckets = list(self.buckets.values())
        if key == "label":
            return sorted(buckets, key=lambda b: (b.subject_label.lower(), str(b.subject_id)))
        if key == "id":
            return sorted(buckets, key=lambda b: (str(type(b.subject_id)), b.subject_id))
        if key == "total":
            return sorted(buckets, key=lambda b: (-b.total, b.subject_label.lower()))
        raise ValueError(f"Unknown sort key: {key}. Valid keys: label, id, total")

    def to_dict(self, sort_by: str = "label") -> Dict[str, Any]:
        return {
            "statuses": list(self.statuses),
            "overall": self.overall.to_dict(),
            "by_subject": [b.to_dict() for b in self.sorted_buckets(sort_by)],
        }

    def to_json(self, sort_by: str = "label") -> str:
        return json.dumps(self.to_dict(sort_by), indent=2, ensure_ascii=False, default=str)

    def to_frame(self, sort_by: str = "label") -> pd.DataFrame:
        """Per-subject table with one column per declared status.

        Columns: ``subject_id``, ``subject_label``, each status, ``unrecognized``,
        ``total``.
        """
        columns = ["subject_id", "subject_label", *self.statuses, "unrecognized", "total"]
        rows = []
        for bucket in self.sorted_buckets(sort_by):
            row = {"subject_id": bucket.subject_id, "subject_label": bucket.subject_label}
            row.update(bucket.counts_by_status)
            row["unrecognized"] = bucket.unrecognized
            row["total"] = bucket.total
            rows.append(row)
        return pd.DataFrame(rows, columns=columns)

    def summary(self) -> str:
        """Generate a concise text summary of the overall counts.

        Examples:
            >>> print(stats.summary())
            Attendance Summary:
              Records: 3 across 2 subjects
              present: 2, absent: 1, leave: 0, half-day: 0
        """
        counts = ", ".join(f"{s}: {self.overall.counts.get(s, 0)}" for s in self.statuses)
        lines = [
            "Attendance Summary:",
            f"  Records: {self.overall.total} across {len(self.buckets)} subjects",
            f"  {counts}",
        ]
        if self.overall.unrecognized:
            lines.append(f"  Unrecognized status: {self.overall.unrecognized}")
        return "\n".join(lines)
