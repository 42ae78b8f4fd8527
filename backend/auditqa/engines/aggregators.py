"""Session/Action Aggregators: dashboard and analytics rollups.

Pure reducers over already-scored sessions and QA actions. Nothing here
mutates its inputs or raises on empty or partial data: missing units,
owners and titles fall into ``Unknown`` / ``Unassigned`` buckets and empty
denominators produce 0%.

Only sessions whose header status is ``complete`` count toward compliance.
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, timezone

from auditqa.dates import date_add_days, days_between, parse_timestamp, percent, round_to, today_ymd
from auditqa.engines.classifiers import detect_education_category
from auditqa.engines.closed_loop import is_overdue
from auditqa.models.analytics import (
    ActionSummaryItem,
    ClosedLoopStats,
    ComplianceStatus,
    CritItem,
    DeltaIndicator,
    EducationSummary,
    Heatmap,
    HeatmapCell,
    OwnerStats,
    SessionSummary,
    StaffPerformance,
    TopicCount,
    ToolSummary,
    TrendDataPoint,
    UnitSummary,
)
from auditqa.models.audit import AuditSession
from auditqa.models.qa import EducationSession, QaAction

logger = logging.getLogger(__name__)

RECURRENCE_THRESHOLD = 3
ALL_TIME_DAYS = 9999
RECENT_ISSUE_LIMIT = 5
TOP_TOPIC_LIMIT = 5

UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"


def _complete(sessions: Iterable[AuditSession]) -> list[AuditSession]:
    return [s for s in sessions if s.is_complete]


def _tool_of(session: AuditSession) -> str:
    return session.template_title or UNKNOWN


def _unit_of(session: AuditSession) -> str:
    return session.header.unit or UNKNOWN


def _action_day(action: QaAction) -> str:
    return (action.audit_date or action.created_at or "")[:10]


# === Trend & summary ===


def compute_trend_series(sessions: Sequence[AuditSession]) -> list[TrendDataPoint]:
    """Per-day sample counts and compliance over completed sessions, oldest first."""
    buckets: dict[str, dict[str, int]] = {}
    for session in _complete(sessions):
        day = session.audit_day
        if not day:
            continue
        bucket = buckets.setdefault(day, {"samples": 0, "passing": 0, "critical": 0})
        for sample in session.samples:
            bucket["samples"] += 1
            if sample.passed:
                bucket["passing"] += 1
            bucket["critical"] += sample.critical_count

    return [
        TrendDataPoint(
            date=day,
            samples=b["samples"],
            critical=b["critical"],
            compliance=percent(b["passing"], b["samples"]),
        )
        for day, b in sorted(buckets.items())
    ]


def summarize_sessions(sessions: Sequence[AuditSession]) -> SessionSummary:
    """Facility-wide totals plus by-tool, by-unit, critical-item and action-item rollups.

    ``byTool`` and ``byUnit`` are ordered worst rate first; ``critItems`` and
    ``actionItems`` most frequent first.
    """
    completed = _complete(sessions)
    samples = passing = critical_fails = 0
    by_tool: dict[str, list[int]] = {}
    by_unit: dict[str, list[int]] = {}
    crit_counts: Counter[str] = Counter()
    action_counts: dict[tuple[str, str], int] = {}

    for session in completed:
        tool = _tool_of(session)
        unit = _unit_of(session)
        tool_row = by_tool.setdefault(tool, [0, 0, 0])  # total, passing, criticals
        unit_row = by_unit.setdefault(unit, [0, 0])  # total, passing

        for sample in session.samples:
            samples += 1
            tool_row[0] += 1
            unit_row[0] += 1
            if sample.passed:
                passing += 1
                tool_row[1] += 1
                unit_row[1] += 1
            if sample.result is None:
                continue
            for key in sample.result.critical_fails:
                critical_fails += 1
                tool_row[2] += 1
                crit_counts[key] += 1
            for item in sample.result.action_needed:
                pair = (tool, item.label)
                action_counts[pair] = action_counts.get(pair, 0) + 1

    tools = sorted(
        (
            ToolSummary(title=title, total=t, passing=p, rate=percent(p, t), criticals=c)
            for title, (t, p, c) in by_tool.items()
        ),
        key=lambda row: row.rate,
    )
    units = sorted(
        (UnitSummary(unit=unit, total=t, passed=p, rate=percent(p, t)) for unit, (t, p) in by_unit.items()),
        key=lambda row: row.rate,
    )
    crit_items = sorted(
        (CritItem(key=key, label=key, count=count) for key, count in crit_counts.items()),
        key=lambda row: -row.count,
    )
    action_items = sorted(
        (
            ActionSummaryItem(issue=label, template=tool, count=count)
            for (tool, label), count in action_counts.items()
        ),
        key=lambda row: -row.count,
    )

    return SessionSummary(
        sessions=len(completed),
        samples=samples,
        passing=passing,
        compliance=percent(passing, samples),
        critical_fails=critical_fails,
        critical_rate=percent(critical_fails, samples),
        by_tool=tools,
        by_unit=units,
        crit_items=crit_items,
        action_items=action_items,
    )


# === Closed-loop QA ===


def compute_closed_loop_stats(actions: Sequence[QaAction], today: str | None = None) -> ClosedLoopStats:
    """Status counts, per-owner / per-unit breakdown, overdue and time-to-close."""
    today = today or today_ymd()
    counts = Counter(action.status for action in actions)
    by_owner: dict[str, OwnerStats] = defaultdict(OwnerStats)
    by_unit: dict[str, OwnerStats] = defaultdict(OwnerStats)
    close_days: list[int] = []
    overdue_count = 0

    for action in actions:
        overdue = is_overdue(action, today)
        overdue_count += overdue
        for stats in (
            by_owner[(action.owner or "").strip() or UNASSIGNED],
            by_unit[(action.unit or "").strip() or UNKNOWN],
        ):
            setattr(stats, action.status, getattr(stats, action.status) + 1)
            stats.overdue += overdue

        if action.status == "complete" and action.completed_at:
            created = (action.created_at or "")[:10]
            completed = action.completed_at[:10]
            if created and completed:
                close_days.append(days_between(created, completed))

    total = len(actions)
    return ClosedLoopStats(
        total=total,
        open=counts["open"],
        prog=counts["in_progress"],
        done=counts["complete"],
        closure_rate=percent(counts["complete"], total),
        closed7=sum(1 for d in close_days if d <= 7),
        closed14=sum(1 for d in close_days if d <= 14),
        closed30=sum(1 for d in close_days if d <= 30),
        overdue_count=overdue_count,
        avg_close_days=round_to(sum(close_days) / len(close_days), 1) if close_days else 0,
        by_owner=dict(by_owner),
        by_unit=dict(by_unit),
    )


def find_recurring_issues(
    actions: Sequence[QaAction],
    window_days: int = 30,
    today: str | None = None,
) -> list[QaAction]:
    """Actions whose ``issue`` + ``unit`` pair occurs at least three times in the window.

    Returns the original records, in input order.
    """
    cutoff = date_add_days(today or today_ymd(), -window_days)
    in_window = [
        action
        for action in actions
        if not action.deleted_at and action.issue.strip() and _action_day(action) >= cutoff
    ]
    groups = Counter(f"{a.issue}::{a.unit}" for a in in_window)
    return [a for a in in_window if groups[f"{a.issue}::{a.unit}"] >= RECURRENCE_THRESHOLD]


# === Heatmap & staff ===


def compute_heatmap(sessions: Sequence[AuditSession]) -> Heatmap:
    """Tool x unit grid of completed-session results."""
    data: dict[str, dict[str, HeatmapCell]] = {}
    for session in _complete(sessions):
        cell = data.setdefault(_tool_of(session), {}).setdefault(_unit_of(session), HeatmapCell())
        for sample in session.samples:
            cell.total += 1
            cell.passing += sample.passed
            cell.critical += sample.critical_count

    for row in data.values():
        for cell in row.values():
            cell.rate = percent(cell.passing, cell.total)

    return Heatmap(
        tools=sorted(data),
        units=sorted({unit for row in data.values() for unit in row}),
        data=data,
    )


def _in_range(day: str, start: str, end: str) -> bool:
    if not day:
        return False
    if start and day < start:
        return False
    if end and day > end:
        return False
    return True


def _trend_from_pass_rate(audits: int, pass_rate: float) -> str:
    if not audits:
        return "stable"
    if pass_rate >= 90:
        return "improving"
    if pass_rate < 70:
        return "declining"
    return "stable"


def compute_staff_performance(
    sessions: Sequence[AuditSession],
    actions: Sequence[QaAction],
    education: Sequence[EducationSession],
    date_range: tuple[str, str],
) -> list[StaffPerformance]:
    """Per-staff rollup within the inclusive ``(from, to)`` date range.

    Staff are keyed by the trimmed ``staffAudited`` name on samples and QA
    actions; education sessions count when the name appears among the
    attendees. Rows are ordered by audit count, most audited first.
    """
    start, end = date_range
    rows: dict[str, StaffPerformance] = {}
    issues: dict[str, list[tuple[str, str]]] = defaultdict(list)

    def row_for(name: str) -> StaffPerformance:
        if name not in rows:
            rows[name] = StaffPerformance(staff_name=name)
        return rows[name]

    for session in _complete(sessions):
        if not _in_range(session.audit_day, start, end):
            continue
        for sample in session.samples:
            name = (sample.staff_audited or "").strip()
            if not name:
                continue
            row = row_for(name)
            row.audits += 1
            row.passing += sample.passed
            row.critical_fails += sample.critical_count

    for action in actions:
        name = (action.staff_audited or "").strip()
        if not name or action.deleted_at or not _in_range(_action_day(action), start, end):
            continue
        row = row_for(name)
        if action.status == "complete":
            row.completed_actions += 1
        else:
            row.open_actions += 1
        if action.issue:
            issues[name].append((_action_day(action), action.issue))

    for edu in education:
        if not _in_range(edu.session_day, start, end):
            continue
        for attendee in {a.strip() for a in edu.attendees if a and a.strip()}:
            row_for(attendee).education_sessions += 1

    for name, row in rows.items():
        row.pass_rate = round_to(row.passing / row.audits * 100, 2) if row.audits else 0
        row.trend_direction = _trend_from_pass_rate(row.audits, row.pass_rate)
        recent = sorted(issues[name], key=lambda pair: pair[0], reverse=True)
        row.recent_issues = list(dict.fromkeys(issue for _, issue in recent))[:RECENT_ISSUE_LIMIT]

    return sorted(rows.values(), key=lambda row: (-row.audits, row.staff_name))


# === Education ===


def summarize_education(
    sessions: Sequence[EducationSession],
    from_ymd: str = "",
    to_ymd: str = "",
    unit: str = "",
) -> EducationSummary:
    """Completed education sessions in range, by category and top topics."""
    selected = []
    for session in sessions:
        if session.status != "completed":
            continue
        day = (session.completed_date or session.scheduled_date or session.created_at or "")[:10]
        if from_ymd and day < from_ymd:
            continue
        if to_ymd and day > to_ymd:
            continue
        if unit and session.unit != unit:
            continue
        selected.append(session)

    by_category: Counter[str] = Counter()
    by_topic: Counter[str] = Counter()
    for session in selected:
        category = session.category or detect_education_category(session.topic, session.summary)
        by_category[category] += 1
        by_topic[session.topic or UNKNOWN] += 1

    return EducationSummary(
        count=len(selected),
        by_category=dict(by_category),
        top_topics=[TopicCount(topic=t, count=c) for t, c in by_topic.most_common(TOP_TOPIC_LIMIT)],
    )


# === Range filters & display helpers ===


def _created_since(records: Sequence, days_ago: int, now: datetime | None) -> list:
    if days_ago >= ALL_TIME_DAYS:
        return list(records)
    cutoff = (now or datetime.now(timezone.utc)) - timedelta(days=days_ago)
    if cutoff.tzinfo is None:
        cutoff = cutoff.replace(tzinfo=timezone.utc)
    selected = []
    for record in records:
        created = parse_timestamp(record.created_at)
        if created is not None and created >= cutoff:
            selected.append(record)
    return selected


def filter_sessions_by_range(
    sessions: Sequence[AuditSession], days_ago: int, now: datetime | None = None
) -> list[AuditSession]:
    """Sessions created within the last ``days_ago`` days (9999 or more means all)."""
    return _created_since(sessions, days_ago, now)


def filter_actions_by_range(actions: Sequence[QaAction], days_ago: int, now: datetime | None = None) -> list[QaAction]:
    """QA actions created within the last ``days_ago`` days (9999 or more means all)."""
    return _created_since(actions, days_ago, now)


def compliance_status(rate: float) -> ComplianceStatus:
    if rate >= 90:
        return "success"
    if rate >= 70:
        return "warning"
    return "error"


def format_delta(current: float, previous: float) -> DeltaIndicator:
    delta = current - previous
    if delta == 0:
        return DeltaIndicator(text="0%", direction="neutral")
    sign = "+" if delta > 0 else ""
    return DeltaIndicator(text=f"{sign}{delta}%", direction="up" if delta > 0 else "down")
