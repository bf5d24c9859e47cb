from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from recordkeeper.core.enums import ATTENDANCE_STATUSES


@dataclass(frozen=True)
class StatsSettings:
    """How attendance rows are read and which statuses are recognized.

    Example YAML:

        stats:
          statuses: [present, absent, leave, half-day]
          columns:
            subject: employee_id
            label: employee_name
            status: status
            date: date
    """

    statuses: Tuple[str, ...] = ATTENDANCE_STATUSES
    subject_column: str = "employee_id"
    label_column: Optional[str] = "employee_name"
    status_column: str = "status"
    date_column: Optional[str] = "date"
    notes_column: Optional[str] = "notes"
    extra: Dict[str, Any] = field(default_factory=dict)


_COLUMN_KEYS = {
    "subject": "subject_column",
    "label": "label_column",
    "status": "status_column",
    "date": "date_column",
    "notes": "notes_column",
}


def load_stats_settings(settings_file: Path) -> StatsSettings:
    """Load StatsSettings from the ``stats`` section of a YAML file.

    Missing keys keep their defaults.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the YAML cannot be parsed or has the wrong shape.
    """
    if not settings_file.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_file}")
    try:
        with settings_file.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse settings file {settings_file}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {settings_file} must contain a mapping")
    section = data.get("stats", {}) or {}
    if not isinstance(section, dict):
        raise ValueError("'stats' section must be a mapping")

    kwargs: Dict[str, Any] = {}
    statuses = section.get("statuses")
    if statuses is not None:
        if not isinstance(statuses, list) or not all(isinstance(s, str) for s in statuses):
            raise ValueError("'stats.statuses' must be a list of strings")
        if not statuses:
            raise ValueError("'stats.statuses' must not be empty")
        kwargs["statuses"] = tuple(statuses)

    columns = section.get("columns", {}) or {}
    if not isinstance(columns, dict):
        raise ValueError("'stats.columns' must be a mapping")
    for key, value in columns.items():
        if key not in _COLUMN_KEYS:
            raise ValueError(
                f"Unknown column key '{key}'. Valid keys: {', '.join(sorted(_COLUMN_KEYS))}"
            )
        kwargs[_COLUMN_KEYS[key]] = None if value is None else str(value)

    if kwargs.get("subject_column", "x") is None or kwargs.get("status_column", "x") is None:
        raise ValueError("'subject' and 'status' columns cannot be null")

    kwargs["extra"] = {k: v for k, v in section.items() if k not in ("statuses", "columns")}
    return StatsSettings(**kwargs)
