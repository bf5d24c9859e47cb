import argparse
import json
import logging
import re
from datetime import date
from pathlib import Path
from typing import Any, List, Optional, Tuple

import colorlog
import pandas as pd
import yaml

from recordkeeper import __version__ as _PACKAGE_VERSION
from recordkeeper.core.enums import FormKind

# Form kind choices for argparse
FORM_KIND_CHOICES = list(FormKind.__members__.keys())

SORT_KEY_CHOICES = ["label", "id", "total"]


class _RecordLoader(yaml.SafeLoader):
    """SafeLoader that reads only true/false as booleans.

    Form answers such as ``reported: no`` stay strings instead of becoming
    YAML 1.1 booleans.
    """


_RecordLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_RecordLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _parse_day_arg(value: Optional[str], flag: str) -> Tuple[bool, Optional[date]]:
    """Parse a YYYY-MM-DD argument. Returns (ok, day)."""
    if not value:
        return True, None
    try:
        return True, date.fromisoformat(value.strip())
    except ValueError:
        logging.error("Invalid %s '%s'. Expected YYYY-MM-DD.", flag, value)
        return False, None


def _parse_list_arg(value: Optional[str]) -> Optional[Tuple[str, ...]]:
    """Parse a comma-separated argument into a tuple of non-empty items."""
    if value is None:
        return None
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _load_records(path: Path) -> Any:
    """Read submitted records from a JSON or YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            return json.load(f)
        return yaml.load(f, Loader=_RecordLoader)


def _write_report(target: Any, default_path: Path, suffix: str, content: str) -> Path:
    """Write a report to ``default_path`` or into the directory ``target``."""
    if target is True:
        report_path = default_path
    else:
        report_dir = Path(target)
        report_dir.mkdir(parents=True, exist_ok=True)
        report_path = report_dir / f"{default_path.stem}{suffix}"
    report_path.parent.mkdir(parents=True, exist_ok=True)
    with open(report_path, "w", encoding="utf-8") as f:
        f.write(content)
    return report_path


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate submitted records from a file against one form.

    Returns:
        0 if every record passed
        1 if the input file does not exist
        2 if any record failed, or the arguments or input are malformed
    """
    from recordkeeper.validation import FormOptions
    from recordkeeper.validation.registry import print_report, run_validation

    try:
        kind = FormKind[args.form.upper()]
    except KeyError:
        logging.error(
            "Unknown form: '%s'. Valid forms: %s", args.form, ", ".join(FORM_KIND_CHOICES)
        )
        return 2

    ok, today = _parse_day_arg(getattr(args, "today", None), "--today")
    if not ok:
        return 2

    input_path = Path(args.input)
    if not input_path.exists():
        logging.error("Input file not found: %s", input_path)
        return 1

    try:
        data = _load_records(input_path)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        logging.error("Failed to parse %s: %s", input_path, e)
        return 2
    except (OSError, UnicodeDecodeError) as e:
        logging.error("Failed to read %s: %s", input_path, e)
        return 2

    if isinstance(data, dict):
        records: List[Any] = [data]
    elif isinstance(data, list) and all(isinstance(r, dict) for r in data):
        records = data
    else:
        logging.error("Input must contain a mapping or a list of mappings: %s", input_path)
        return 2
    if not records:
        logging.warning("No records found in %s", input_path)
        return 1

    options = FormOptions(
        today=today,
        internship_ids=_parse_list_arg(getattr(args, "internship_ids", None)),
    )
    logging.info("Validating %d %s record(s) from %s", len(records), kind.value, input_path)
    report = run_validation(kind, records, options, source=input_path.name)

    if report.has_errors():
        logging.warning(
            "Validation failed for %s: %d field errors in %d record(s)",
            input_path.name,
            report.get_error_count(),
            len(report.get_failed_reports()),
        )
    else:
        logging.info("Validation passed for %s", input_path.name)

    print_report(report)

    stem = f"{input_path.stem}_validation"
    if getattr(args, "report", False):
        path = _write_report(
            args.report, input_path.with_name(f"{stem}.md"), ".md", report.to_markdown()
        )
        logging.info("Markdown report saved: %s", path)
    if getattr(args, "report_json", False):
        path = _write_report(
            args.report_json, input_path.with_name(f"{stem}.json"), ".json", report.to_json()
        )
        logging.info("JSON report saved: %s", path)

    return 2 if report.has_errors() else 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Aggregate attendance statistics from a CSV file.

    Returns:
        0 on success
        1 if the input file is missing or no records remain after filtering
        2 if the arguments, settings or CSV columns are invalid
    """
    from recordkeeper.core.settings import StatsSettings, load_stats_settings
    from recordkeeper.stats import aggregate_attendance, filter_by_date, records_from_frame

    input_path = Path(args.input)
    if not input_path.exists():
        logging.error("Input file not found: %s", input_path)
        return 1

    settings = StatsSettings()
    if getattr(args, "config", None):
        try:
            settings = load_stats_settings(Path(args.config))
        except (FileNotFoundError, ValueError) as e:
            logging.error("Failed to load settings: %s", e)
            return 2

    statuses = _parse_list_arg(getattr(args, "statuses", None)) or settings.statuses

    ok_start, start = _parse_day_arg(getattr(args, "start_date", None), "--start-date")
    ok_end, end = _parse_day_arg(getattr(args, "end_date", None), "--end-date")
    if not (ok_start and ok_end):
        return 2
    if start and end and start > end:
        logging.error("--start-date %s is after --end-date %s", start, end)
        return 2

    try:
        df = pd.read_csv(input_path)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        logging.error("Failed to read %s: %s", input_path, e)
        return 2

    try:
        records = records_from_frame(
            df,
            subject_column=settings.subject_column,
            status_column=settings.status_column,
            date_column=settings.date_column,
            label_column=settings.label_column,
            notes_column=settings.notes_column,
        )
        records = filter_by_date(records, start, end)
        stats = aggregate_attendance(records, statuses)
    except ValueError as e:
        logging.error("Cannot aggregate %s: %s", input_path, e)
        return 2

    if not stats.overall.total:
        logging.warning("No attendance records to aggregate in %s", input_path)
        return 1
    if stats.overall.unrecognized:
        logging.warning(
            "%d record(s) have a status outside %s",
            stats.overall.unrecognized,
            ", ".join(statuses),
        )

    print(stats.summary())
    print()
    print(stats.to_frame(args.sort_by).to_string(index=False))

    if getattr(args, "report_json", False):
        default = input_path.with_name(f"{input_path.stem}_stats.json")
        path = _write_report(args.report_json, default, ".json", stats.to_json(args.sort_by))
        logging.info("JSON report saved: %s", path)

    return 0


def cmd_forms(args: argparse.Namespace) -> int:
    """List registered forms and the fields each one checks."""
    from recordkeeper.validation.registry import get_fields

    kinds = list(FormKind)
    if getattr(args, "form", None):
        try:
            kinds = [FormKind[args.form.upper()]]
        except KeyError:
            logging.error(
                "Unknown form: '%s'. Valid forms: %s", args.form, ", ".join(FORM_KIND_CHOICES)
            )
            return 2

    for kind in kinds:
        print(f"{kind.name}:")
        for spec in get_fields(kind):
            extras = []
            if spec.depends_on:
                extras.append(f"reads {', '.join(spec.depends_on)}")
            if spec.optional:
                extras.append("optional")
            suffix = f" ({'; '.join(extras)})" if extras else ""
            print(f"  - {spec.name}{suffix}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="recordkeeper",
        description=f"Recordkeeper form validation and attendance statistics (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate submitted records against a form")
    p_validate.add_argument(
        "--form",
        required=True,
        help=f"Form to validate against: {', '.join(FORM_KIND_CHOICES)}",
    )
    p_validate.add_argument(
        "--input", required=True, help="JSON or YAML file with a record or a list of records"
    )
    p_validate.add_argument(
        "--today",
        default=None,
        help="Reference day for relative date rules (YYYY-MM-DD, defaults to today)",
    )
    p_validate.add_argument(
        "--internship-ids",
        default=None,
        help="Comma-separated internship ids the problem report may refer to",
    )
    p_validate.add_argument(
        "--report",
        nargs="?",
        const=True,
        default=False,
        help="Write a Markdown report (next to the input, or into the given directory)",
    )
    p_validate.add_argument(
        "--report-json",
        nargs="?",
        const=True,
        default=False,
        help="Write a JSON report (next to the input, or into the given directory)",
    )
    p_validate.set_defaults(func=cmd_validate)

    p_stats = sub.add_parser("stats", help="Aggregate attendance statistics from a CSV file")
    p_stats.add_argument("--input", required=True, help="Attendance CSV file")
    p_stats.add_argument("--config", default=None, help="YAML settings file (stats section)")
    p_stats.add_argument(
        "--statuses",
        default=None,
        help="Comma-separated recognized statuses (overrides the settings file)",
    )
    p_stats.add_argument("--start-date", default=None, help="Inclusive start day (YYYY-MM-DD)")
    p_stats.add_argument("--end-date", default=None, help="Inclusive end day (YYYY-MM-DD)")
    p_stats.add_argument(
        "--sort-by",
        choices=SORT_KEY_CHOICES,
        default="label",
        help="Order of the per-subject table (default: label)",
    )
    p_stats.add_argument(
        "--report-json",
        nargs="?",
        const=True,
        default=False,
        help="Write the statistics as JSON (next to the input, or into the given directory)",
    )
    p_stats.set_defaults(func=cmd_stats)

    p_forms = sub.add_parser("forms", help="List forms and their fields")
    p_forms.add_argument("--form", default=None, help="Show a single form")
    p_forms.set_defaults(func=cmd_forms)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
