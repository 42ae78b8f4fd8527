"""Infection Prevention & Control (IC) monthly report generator.

Builds a month-scoped report from completed audit sessions, QA actions
and education sessions: compliance summary against the prior 30 days,
per-template and per-F-Tag (F88x) rollups, education effectiveness,
corrective-action status, a fixed six-month trend and rule-based
recommendations. Deterministic for a given ``today``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from auditqa.dates import date_add_days, last_day_of_month, month_label, parse_timestamp, percent, round_half_up, today_ymd
from auditqa.engines.classifiers import is_ic_related
from auditqa.models.audit import AuditSession
from auditqa.models.qa import EducationSession, QaAction
from auditqa.models.report import (
    FTagCompliance,
    ICEducation,
    ICQaActions,
    ICReport,
    ICSummary,
    MonthlyTrendPoint,
    PriorMonthComparison,
    RecurringICIssue,
    ReportPeriod,
    TemplateCompliance,
)
from auditqa.models.template import Template
from auditqa.reference.infection_control import IC_FTAG_DEFINITIONS, IC_FTAG_PREFIX, IC_REGULATORY_REMINDERS

logger = logging.getLogger(__name__)

TREND_MONTHS = 6
DAYS_PER_MONTH = 30
TREND_DELTA_PP = 5
RECURRING_MIN_COUNT = 3
RECURRING_LIMIT = 5
LOW_COMPLIANCE = 85
ACCEPTABLE_COMPLIANCE = 90
EXCELLENT_COMPLIANCE = 95
FTAG_COMPLIANT = 90
FTAG_AT_RISK = 75

ALL_WITHIN_TARGET = "All IC metrics within target ranges - Continue current practices and scheduled monitoring"


@dataclass(frozen=True)
class _Window:
    start: str
    end: str

    def contains(self, day: str) -> bool:
        return bool(day) and self.start <= day <= self.end


@dataclass
class _Tally:
    samples: int = 0
    passing: int = 0
    criticals: int = 0

    def add(self, session: AuditSession) -> None:
        for sample in session.samples:
            self.samples += 1
            self.passing += sample.passed
            self.criticals += sample.critical_count

    @property
    def rate(self) -> int:
        return percent(self.passing, self.samples)

    @property
    def exact_rate(self) -> float:
        return self.passing * 100 / self.samples if self.samples else 0.0


def month_window(target_day: str) -> _Window:
    return _Window(start=target_day[:8] + "01", end=last_day_of_month(target_day))


def prior_window(month_start: str) -> _Window:
    """The 30 days immediately before ``month_start``."""
    return _Window(start=date_add_days(month_start, -DAYS_PER_MONTH), end=date_add_days(month_start, -1))


def _template_index(templates: Sequence[Template]) -> dict[str, Template]:
    index: dict[str, Template] = {}
    for template in templates:
        index.setdefault(template.id, template)
    return index


def _is_ic_template(template: Template | None) -> bool:
    if template is None:
        return False
    if is_ic_related(template.title):
        return True
    return any(tag.startswith(IC_FTAG_PREFIX) for tag in template.ftag_tags)


def _ic_sessions(sessions: Sequence[AuditSession], templates: dict[str, Template], window: _Window) -> list[AuditSession]:
    return [
        s
        for s in sessions
        if s.is_complete and window.contains(s.audit_day) and _is_ic_template(templates.get(s.template_id))
    ]


def _ic_actions(actions: Sequence[QaAction], window: _Window) -> list[QaAction]:
    return [
        a
        for a in actions
        if not a.deleted_at
        and window.contains((a.created_at or "")[:10])
        and (is_ic_related(a.template_title) or is_ic_related(a.issue))
    ]


def _has_education_link(action: QaAction) -> bool:
    return bool(action.linked_education_sessions or action.linked_edu_session_id)


def _template_trend(template_id: str, sessions: Sequence[AuditSession], window: _Window) -> str:
    previous = prior_window(window.start)
    current_tally, prior_tally = _Tally(), _Tally()
    for session in sessions:
        if session.template_id != template_id or not session.is_complete:
            continue
        if window.contains(session.audit_day):
            current_tally.add(session)
        elif previous.contains(session.audit_day):
            prior_tally.add(session)
    delta = current_tally.exact_rate - prior_tally.exact_rate
    if delta > TREND_DELTA_PP:
        return "improving"
    if delta < -TREND_DELTA_PP:
        return "declining"
    return "stable"


def _by_template(
    ic_sessions: Sequence[AuditSession],
    all_sessions: Sequence[AuditSession],
    templates: dict[str, Template],
    window: _Window,
) -> list[TemplateCompliance]:
    tallies: dict[str, _Tally] = {}
    for session in ic_sessions:
        tallies.setdefault(session.template_id, _Tally()).add(session)

    rows = []
    for template_id, tally in tallies.items():
        template = templates[template_id]
        rows.append(
            TemplateCompliance(
                template_title=template.title,
                template_id=template_id,
                samples=tally.samples,
                passing=tally.passing,
                rate=tally.rate,
                criticals=tally.criticals,
                ftags=list(template.ftag_tags),
                trend=_template_trend(template_id, all_sessions, window),
            )
        )
    return rows


def _ftag_status(compliance: int) -> str:
    if compliance >= FTAG_COMPLIANT:
        return "compliant"
    if compliance >= FTAG_AT_RISK:
        return "at-risk"
    return "non-compliant"


def _by_ftag(ic_sessions: Sequence[AuditSession], templates: dict[str, Template]) -> list[FTagCompliance]:
    tallies: dict[str, _Tally] = {}
    audits: dict[str, set[str]] = {}
    for session in ic_sessions:
        for ftag in templates[session.template_id].ftag_tags:
            if not ftag.startswith(IC_FTAG_PREFIX):
                continue
            tallies.setdefault(ftag, _Tally()).add(session)
            audits.setdefault(ftag, set()).add(session.id)

    return [
        FTagCompliance(
            ftag=ftag,
            description=IC_FTAG_DEFINITIONS.get(ftag, ftag),
            audits=len(audits[ftag]),
            compliance=tally.rate,
            status=_ftag_status(tally.rate),
        )
        for ftag, tally in sorted(tallies.items())
    ]


def _avg_days_to_close(actions: Sequence[QaAction]) -> int:
    durations = []
    for action in actions:
        if action.status != "complete" or not action.completed_at or not action.created_at:
            continue
        created = parse_timestamp(action.created_at)
        completed = parse_timestamp(action.completed_at)
        if created is None or completed is None:
            logger.debug("Skipping action %s with unparseable timestamps", action.id)
            continue
        durations.append(abs((completed - created).total_seconds()) / 86400)
    return round_half_up(sum(durations) / len(durations)) if durations else 0


def recurring_ic_issues(actions: Sequence[QaAction]) -> list[RecurringICIssue]:
    """Issues (case-insensitive) seen at least three times, most frequent first, top five."""
    groups: dict[str, RecurringICIssue] = {}
    for action in actions:
        display = (action.issue or "").strip()
        if not display:
            continue
        entry = groups.setdefault(display.lower(), RecurringICIssue(issue=display))
        entry.count += 1
        if action.template_title not in entry.templates:
            entry.templates.append(action.template_title)

    recurring = [entry for entry in groups.values() if entry.count >= RECURRING_MIN_COUNT]
    recurring.sort(key=lambda entry: entry.count, reverse=True)
    return recurring[:RECURRING_LIMIT]


def _trend_data(
    sessions: Sequence[AuditSession],
    actions: Sequence[QaAction],
    templates: dict[str, Template],
    today: str,
) -> list[MonthlyTrendPoint]:
    points = []
    for months_ago in range(TREND_MONTHS - 1, -1, -1):
        target = date_add_days(today, -DAYS_PER_MONTH * months_ago)
        window = month_window(target)
        tally = _Tally()
        for session in _ic_sessions(sessions, templates, window):
            tally.add(session)
        points.append(
            MonthlyTrendPoint(
                month=month_label(target)[:3],
                compliance=tally.rate,
                criticals=tally.criticals,
                actions=len(_ic_actions(actions, window)),
            )
        )
    return points


def build_recommendations(
    compliance: int,
    criticals: int,
    overdue: int,
    by_template: Sequence[TemplateCompliance],
    recurring: Sequence[RecurringICIssue],
) -> list[str]:
    """Rule-table recommendations followed by the standing regulatory reminders."""
    recs = []
    if compliance < LOW_COMPLIANCE:
        recs.append("IC compliance below threshold (85%) - Schedule focused re-education and competency validation")
    elif ACCEPTABLE_COMPLIANCE <= compliance < EXCELLENT_COMPLIANCE:
        recs.append("IC compliance within acceptable range - Continue monitoring and targeted interventions")
    elif compliance >= EXCELLENT_COMPLIANCE:
        recs.append("Excellent IC compliance - Recognize staff performance and maintain current practices")

    if criticals > 0:
        recs.append(
            f"Address {criticals} critical IC finding(s) immediately - "
            "Document corrective actions and re-audit within 72 hours"
        )
    if overdue > 0:
        recs.append(f"Clear {overdue} overdue IC action(s) - Assign owners and establish realistic completion dates")

    low = [row.template_title for row in by_template if row.rate < LOW_COMPLIANCE]
    if low:
        recs.append(f"Focus improvement efforts on: {', '.join(low)}")
    if recurring:
        top = recurring[0]
        recs.append(f"Investigate systemic causes for recurring issues: {top.issue} ({top.count}x occurrences)")

    if not recs:
        recs.append(ALL_WITHIN_TARGET)
    recs.extend(IC_REGULATORY_REMINDERS)
    return recs


def generate_ic_report(
    sessions: Sequence[AuditSession],
    qa_actions: Sequence[QaAction],
    edu_sessions: Sequence[EducationSession],
    templates: Sequence[Template],
    months_back: int = 0,
    today: str | None = None,
) -> ICReport:
    """Generate the IC report for the month ``months_back`` months before ``today``.

    Months are approximated as 30 days when stepping back; the report then
    covers the full calendar month containing the target day.
    """
    today = today or today_ymd()
    target = today if months_back == 0 else date_add_days(today, -DAYS_PER_MONTH * months_back)
    window = month_window(target)
    index = _template_index(templates)

    ic_sessions = _ic_sessions(sessions, index, window)
    prior_sessions = _ic_sessions(sessions, index, prior_window(window.start))
    ic_actions = _ic_actions(qa_actions, window)
    ic_edu = [
        e for e in edu_sessions if window.contains(e.session_day) and is_ic_related(e.topic)
    ]
    logger.debug(
        "IC report %s..%s: %d sessions, %d actions, %d education sessions",
        window.start,
        window.end,
        len(ic_sessions),
        len(ic_actions),
        len(ic_edu),
    )

    current, prior = _Tally(), _Tally()
    for session in ic_sessions:
        current.add(session)
    for session in prior_sessions:
        prior.add(session)

    by_template = _by_template(ic_sessions, sessions, index, window)

    linked = [a for a in ic_actions if _has_education_link(a)]
    linked_closed = [a for a in linked if a.status == "complete"]
    overdue = sum(1 for a in ic_actions if a.status != "complete" and a.due_date and a.due_date[:10] < today)
    recurring = recurring_ic_issues(ic_actions)

    return ICReport(
        period=ReportPeriod(start=window.start, end=window.end, label=month_label(target)),
        summary=ICSummary(
            total_audits=len(ic_sessions),
            total_samples=current.samples,
            passing_samples=current.passing,
            compliance_rate=current.rate,
            critical_fails=current.criticals,
            prior_month_comparison=PriorMonthComparison(
                compliance_change=current.rate - prior.rate,
                critical_fails_change=current.criticals - prior.criticals,
            ),
        ),
        by_template=by_template,
        by_f_tag=_by_ftag(ic_sessions, index),
        education=ICEducation(
            sessions_completed=sum(1 for e in ic_edu if e.status == "completed"),
            topics_count=len({e.topic for e in ic_edu}),
            attendance_total=sum(len(e.attendees) for e in ic_edu),
            linked_to_qa=len(linked),
            effectiveness=percent(len(linked_closed), len(linked)),
        ),
        qa_actions=ICQaActions(
            total=len(ic_actions),
            open=sum(1 for a in ic_actions if a.status in ("open", "in_progress")),
            overdue=overdue,
            closed=sum(1 for a in ic_actions if a.status == "complete"),
            avg_days_to_close=_avg_days_to_close(ic_actions),
            recurring_issues=recurring,
        ),
        trend_data=_trend_data(sessions, qa_actions, index, today),
        recommendations=build_recommendations(current.rate, current.criticals, overdue, by_template, recurring),
    )
