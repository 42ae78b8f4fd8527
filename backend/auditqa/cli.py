"""CLI entry point for AuditQA over a JSON dataset export.

Usage:
    cd backend && python -m auditqa.cli normalize --data export.json
    auditqa score --data export.json --generate-actions -o scored.json
    auditqa summary --data export.json --days 30
    auditqa ic-report --data export.json --months-back 1

The dataset is the browser client's backup shape:
``{"templates": [...], "sessions": [...], "qaActions": [...], "eduSessions": [...]}``.
Any key may be missing.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from auditqa.config import settings
from auditqa.dates import parse_ymd
from auditqa.engines.aggregators import (
    ALL_TIME_DAYS,
    compute_closed_loop_stats,
    compute_trend_series,
    filter_actions_by_range,
    filter_sessions_by_range,
    summarize_sessions,
)
from auditqa.engines.closed_loop import qa_actions_from_session
from auditqa.engines.ic_report import generate_ic_report
from auditqa.engines.sample_scorer import score_session
from auditqa.engines.template_normalizer import normalize_templates
from auditqa.errors import SchemaValidationError
from auditqa.models.audit import AuditSession
from auditqa.models.qa import EducationSession, QaAction

logger = logging.getLogger(__name__)

_sessions_adapter = TypeAdapter(list[AuditSession])
_actions_adapter = TypeAdapter(list[QaAction])
_edu_adapter = TypeAdapter(list[EducationSession])


def load_dataset(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object at the top level")
    return data


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_dump(v) for v in value]
    if isinstance(value, dict):
        return {k: _dump(v) for k, v in value.items()}
    return value


def run_normalize(data: dict[str, Any], skip_invalid: bool = False) -> list:
    return normalize_templates(data.get("templates") or [], skip_invalid=skip_invalid)


def run_score(data: dict[str, Any], generate_actions: bool = False) -> dict[str, Any]:
    """Re-score every session against its template; sessions with no template pass through."""
    templates = {t.id: t for t in normalize_templates(data.get("templates") or [], skip_invalid=True)}
    sessions = _sessions_adapter.validate_python(data.get("sessions") or [])

    scored, actions = [], []
    for session in sessions:
        template = templates.get(session.template_id)
        if template is None:
            logger.warning("Session %s: template %s not found, left unscored", session.id, session.template_id)
            scored.append(session)
            continue
        rescored = score_session(template, session)
        scored.append(rescored)
        if generate_actions and rescored.is_complete:
            actions.extend(qa_actions_from_session(rescored, template, due_days=settings.qa_action_due_days))
    return {"sessions": scored, "qaActions": actions}


def run_summary(data: dict[str, Any], days: int = ALL_TIME_DAYS, today: str | None = None) -> dict[str, Any]:
    sessions = filter_sessions_by_range(_sessions_adapter.validate_python(data.get("sessions") or []), days)
    actions = filter_actions_by_range(_actions_adapter.validate_python(data.get("qaActions") or []), days)
    return {
        "summary": summarize_sessions(sessions),
        "trend": compute_trend_series(sessions),
        "closedLoop": compute_closed_loop_stats([a for a in actions if not a.deleted_at], today=today),
    }


def run_ic_report(data: dict[str, Any], months_back: int = 0, today: str | None = None):
    return generate_ic_report(
        _sessions_adapter.validate_python(data.get("sessions") or []),
        _actions_adapter.validate_python(data.get("qaActions") or []),
        _edu_adapter.validate_python(data.get("eduSessions") or []),
        normalize_templates(data.get("templates") or [], skip_invalid=True),
        months_back=months_back,
        today=today,
    )


def _ymd(value: str) -> str:
    if parse_ymd(value) is None:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="auditqa", description="AuditQA scoring and analytics")
    parser.add_argument("--log-level", default=settings.log_level, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    def add_command(name: str, help_text: str) -> argparse.ArgumentParser:
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--data", "-d", required=True, help="Dataset JSON file")
        cmd.add_argument("--output", "-o", help="Output JSON file path (default: stdout)")
        return cmd

    normalize = add_command("normalize", "Normalize templates")
    normalize.add_argument("--skip-invalid", action="store_true", help="Skip templates that fail validation")

    score = add_command("score", "Re-score every session against its template")
    score.add_argument("--generate-actions", action="store_true", help="Build QA actions for failing samples")

    summary = add_command("summary", "Dashboard summary, trend and closed-loop stats")
    summary.add_argument("--days", type=int, default=ALL_TIME_DAYS, help="Only records created in the last N days")
    summary.add_argument("--today", type=_ymd, help="Reference date YYYY-MM-DD (default: today, UTC)")

    ic = add_command("ic-report", "Monthly Infection Prevention & Control report")
    ic.add_argument("--months-back", type=int, default=0, help="0 = current month")
    ic.add_argument("--today", type=_ymd, help="Reference date YYYY-MM-DD (default: today, UTC)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        data = load_dataset(args.data)
    except (OSError, ValueError) as e:
        logger.error("Cannot read dataset %s: %s", args.data, e)
        return 1

    try:
        if args.command == "normalize":
            result = run_normalize(data, skip_invalid=args.skip_invalid)
        elif args.command == "score":
            result = run_score(data, generate_actions=args.generate_actions)
        elif args.command == "summary":
            result = run_summary(data, days=args.days, today=args.today)
        else:
            result = run_ic_report(data, months_back=args.months_back, today=args.today)
    except SchemaValidationError as e:
        logger.error("%s", e)
        return 1
    except ValidationError as e:
        logger.error("Dataset does not match the expected shape: %s", e)
        return 1

    payload = json.dumps(_dump(result), indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(payload)
        logger.info("Results written to %s", args.output)
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
