"""Attendance statistics aggregation.

Buckets attendance records by subject and status in a single pass. The
result is always recomputed from the full collection handed in; nothing is
maintained incrementally.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence

import pandas as pd

from recordkeeper.core.enums import ATTENDANCE_STATUSES
from recordkeeper.core.utils import parse_date, start_of_day
from .models import AttendanceRecord, AttendanceStats, StatsBucket, StatusCounts


def aggregate_attendance(
    records: Iterable[AttendanceRecord],
    statuses: Sequence[str] = ATTENDANCE_STATUSES,
) -> AttendanceStats:
    """Count attendance records per status, overall and per subject.

    Records whose status is not in ``statuses`` are counted in the overall and
    bucket ``total`` and in ``unrecognized``, but in no status column.

    Args:
        records: Attendance records. The iterable is consumed once; pass a
            copy if the source can change while aggregating.
        statuses: Closed set of recognized status codes.

    Returns:
        AttendanceStats with zero-filled counts for every declared status.

    Raises:
        ValueError: If ``statuses`` is empty or contains duplicates.

    Examples:
        >>> stats = aggregate_attendance([
        ...     AttendanceRecord(1, "present"),
        ...     AttendanceRecord(1, "absent"),
        ...     AttendanceRecord(2, "present"),
        ... ])
        >>> stats.overall.counts["present"], stats.overall.total
        (2, 3)
        >>> stats.buckets[1].total
        2
    """
    declared = tuple(statuses)
    if not declared:
        raise ValueError("At least one status must be declared")
    if len(set(declared)) != len(declared):
        raise ValueError(f"Duplicate statuses declared: {declared}")

    overall = StatusCounts(counts={s: 0 for s in declared})
    buckets: Dict[Hashable, StatsBucket] = {}

    for record in records:
        bucket = buckets.get(record.subject_id)
        if bucket is None:
            bucket = StatsBucket(
                subject_id=record.subject_id,
                subject_label="",
                counts_by_status={s: 0 for s in declared},
            )
            buckets[record.subject_id] = bucket
        if not bucket.subject_label and record.subject_label:
            bucket.subject_label = str(record.subject_label)

        bucket.total += 1
        overall.total += 1
        if record.status in bucket.counts_by_status:
            bucket.counts_by_status[record.status] += 1
            overall.counts[record.status] += 1
        else:
            bucket.unrecognized += 1
            overall.unrecognized += 1

    for bucket in buckets.values():
        if not bucket.subject_label:
            bucket.subject_label = str(bucket.subject_id)

    return AttendanceStats(statuses=declared, overall=overall, buckets=buckets)


def filter_by_date(
    records: Iterable[AttendanceRecord],
    start_date: Any = None,
    end_date: Any = None,
) -> List[AttendanceRecord]:
    """Keep records whose date lies within an inclusive day range.

    Bounds are compared at day granularity; records with a missing or
    unparseable date are dropped as soon as any bound is given.
    """
    start = parse_date(start_date)
    end = parse_date(end_date)
    if start is None and end is None:
        return list(records)
    start = start_of_day(start) if start is not None else None
    end = start_of_day(end) if end is not None else None

    kept = []
    for record in records:
        day = parse_date(record.date)
        if day is None:
            continue
        day = start_of_day(day)
        if start is not None and day < start:
            continue
        if end is not None and day > end:
            continue
        kept.append(record)
    return kept


def records_from_frame(
    df: pd.DataFrame,
    subject_column: str = "employee_id",
    status_column: str = "status",
    date_column: Optional[str] = "date",
    label_column: Optional[str] = "employee_name",
    notes_column: Optional[str] = "notes",
) -> List[AttendanceRecord]:
    """Convert a DataFrame of attendance rows into AttendanceRecords.

    Optional columns that are absent from the frame are ignored. Missing
    values become None.

    Raises:
        ValueError: If the subject or status column is missing.
    """
    missing = [c for c in (subject_column, status_column) if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(missing)}")

    def _cell(row: pd.Series, column: Optional[str]) -> Any:
        if column is None or column not in row.index:
            return None
        value = row[column]
        if pd.isna(value):
            return None
        # numpy scalars to plain Python values
        return value.item() if hasattr(value, "item") else value

    def _subject(row: pd.Series) -> Any:
        value = _cell(row, subject_column)
        # a blank cell turns an integer id column into float64
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    records = []
    for _, row in df.iterrows():
        status = _cell(row, status_column)
        records.append(
            AttendanceRecord(
                subject_id=_subject(row),
                status="" if status is None else str(status).strip(),
                date=_cell(row, date_column),
                notes=_cell(row, notes_column),
                subject_label=_cell(row, label_column),
            )
        )
    return records
