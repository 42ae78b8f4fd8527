"""Closed-loop QA workflow helpers.

Everything between an audit finding and a closed corrective action:
generating actions from failed samples, case bundles (QA action plus a
linked education draft), due/overdue status, closure validation,
escalation events, duplicate detection and the pick-list dictionaries
built from existing records.
"""

from __future__ import annotations

import logging
import re
import uuid
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from auditqa.dates import date_add_days, days_between, today_ymd
from auditqa.engines.sample_scorer import compute_sample_result
from auditqa.models.audit import AuditSession
from auditqa.models.qa import EducationSession, QaAction, Severity
from auditqa.models.template import Template
from auditqa.models.workflow import (
    ClosedLoopBundleInput,
    ClosedLoopBundleResult,
    ClosureValidation,
    DueStatus,
    EscalationEvent,
    StructuredDictionaries,
)

logger = logging.getLogger(__name__)

# Days until due, by severity
DUE_POLICY: dict[Severity, int] = {
    "critical": 2,
    "high": 7,
    "medium": 14,
    "low": 30,
}

MIN_EVIDENCE_ITEMS = 2
DUPLICATE_WINDOW_DAYS = 7

_WHITESPACE_RE = re.compile(r"\s+")


def _short_id() -> str:
    return uuid.uuid4().hex[:8]


def _utc(now: datetime | None) -> datetime:
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def _iso(moment: datetime) -> str:
    return moment.isoformat().replace("+00:00", "Z")


# === Due status ===


def get_due_status(today: str, due_date: str, due_soon_days: int = 7) -> DueStatus:
    overdue = due_date < today
    days_until = -days_between(due_date, today) if overdue else days_between(today, due_date)
    if overdue:
        status = "overdue"
    elif days_until <= due_soon_days:
        status = "due-soon"
    else:
        status = "upcoming"
    return DueStatus(status=status, days_until=days_until, is_overdue=overdue)


def is_overdue(action: QaAction, today: str | None = None) -> bool:
    """Overdue = past its due date and not complete. Never stored on the record."""
    today = today or today_ymd()
    due = (action.due_date or "")[:10]
    return bool(due) and due < today and action.status != "complete"


# === Action generation ===


def _sample_ref(template: Template, sample) -> str:
    for question in template.sample_questions:
        if question.type == "patientCode" and sample.answers.get(question.key):
            return sample.answers[question.key]
    return sample.answers.get("patient_code") or sample.id


def qa_actions_from_session(
    session: AuditSession,
    template: Template,
    owner: str = "",
    due_days: int = 14,
    now: datetime | None = None,
) -> list[QaAction]:
    """Corrective actions for a session being completed.

    Unscored samples are scored first; every action-needed item of each
    failing sample becomes one open QA action.
    """
    moment = _utc(now)
    due_date = (moment + timedelta(days=due_days)).date().isoformat()
    actions = []
    for sample in session.samples:
        result = sample.result or compute_sample_result(template, sample.answers)
        if result.passed:
            continue
        for item in result.action_needed:
            actions.append(
                QaAction(
                    id=f"qa_{_short_id()}",
                    severity="critical" if item.key in result.critical_fails else None,
                    created_at=_iso(moment),
                    status="open",
                    template_id=session.template_id or template.id,
                    template_title=session.template_title or template.title,
                    unit=session.header.unit,
                    audit_date=session.header.audit_date,
                    session_id=session.header.session_id,
                    sample=_sample_ref(template, sample),
                    issue=item.label,
                    reason=item.reason,
                    owner=owner,
                    due_date=due_date,
                    ftag_tags=list(template.ftag_tags),
                    nydoh_tags=list(template.nydoh_tags),
                    staff_audited=sample.staff_audited or "",
                )
            )
    logger.info("Generated %d QA action(s) from session %s", len(actions), session.id)
    return actions


def create_closed_loop_bundle(bundle: ClosedLoopBundleInput, now: datetime | None = None) -> ClosedLoopBundleResult:
    """Open a case for one finding: a QA action plus a linked education draft."""
    moment = _utc(now)
    created_at = _iso(moment)
    case_id = f"CASE-{moment.year}-{_short_id().upper()}"
    qa_id = f"qa_{_short_id()}"
    edu_id = f"edu_{_short_id()}"
    due_date = (moment + timedelta(days=DUE_POLICY[bundle.severity])).date().isoformat()
    topic = bundle.topic or bundle.finding_label

    qa_action = QaAction(
        id=qa_id,
        case_id=case_id,
        severity=bundle.severity,
        created_at=created_at,
        status="open",
        template_id=bundle.template_id,
        template_title=bundle.template_title,
        unit=bundle.unit,
        audit_date=bundle.audit_date,
        session_id=bundle.session_id,
        sample=bundle.sample_id,
        issue=bundle.finding_label,
        reason=bundle.finding_reason,
        topic=topic,
        summary=f"Closed-loop bundle created from finding: {bundle.finding_label}",
        owner=bundle.owner,
        due_date=due_date,
        ftag_tags=list(bundle.ftag_tags),
        nydoh_tags=list(bundle.nydoh_tags),
        re_audit_due_date=due_date,
        re_audit_template_id=bundle.template_id,
        linked_edu_session_id=edu_id,
        linked_education_sessions=[edu_id],
        staff_audited=bundle.staff_audited,
        staff_role=bundle.staff_role,
    )
    education_draft = EducationSession(
        id=edu_id,
        case_id=case_id,
        created_at=created_at,
        status="planned",
        topic=topic,
        summary=f"Education draft linked to case {case_id}",
        audience=bundle.staff_role or "Nursing",
        instructor=bundle.owner,
        unit=bundle.unit,
        scheduled_date=due_date,
        template_title=bundle.template_title,
        template_id=bundle.template_id,
        issue=bundle.finding_label,
        linked_qa_action_id=qa_id,
    )
    logger.info("Opened %s (%s severity) for finding %r", case_id, bundle.severity, bundle.finding_label)
    return ClosedLoopBundleResult(
        case_id=case_id,
        qa_action=qa_action,
        education_draft=education_draft,
        re_audit_due_date=due_date,
    )


# === Closure & escalation ===


def validate_qa_action_closure(action: QaAction) -> ClosureValidation:
    """Check whether an action carries enough evidence to be closed."""
    errors = []
    if action.evidence_count < MIN_EVIDENCE_ITEMS:
        errors.append("At least TWO evidence items must be documented for closure")
    if action.ev_education_provided and not action.linked_education_sessions:
        errors.append("Education checkbox marked but no education session linked")
    if action.re_audit_due_date and action.re_audit_results is None:
        errors.append("Re-audit scheduled but not completed")
    if action.re_audit_results is not None and not action.re_audit_results.passed:
        errors.append("Re-audit failed - action cannot be closed until re-audit passes")
    if "competency" in action.issue.lower() and not action.ev_competency_validated:
        errors.append("Competency-related issues require competency validation")
    if action.severity == "critical" and not action.ev_corrective_action:
        errors.append("Critical severity requires documented corrective action")
    return ClosureValidation(can_close=not errors, errors=errors)


def get_escalation_events(
    actions: Sequence[QaAction],
    inactivity_days: int = 5,
    today: str | None = None,
    now: datetime | None = None,
) -> list[EscalationEvent]:
    """Escalations for case-linked actions: critical overdue, missed re-audit, stale case.

    Every event is stamped with ``now`` (default: current UTC time); ``today``
    defaults to the date of ``now``.
    """
    moment = _utc(now)
    today = today or moment.date().isoformat()
    stale_cutoff = date_add_days(today, -inactivity_days)
    created_at = _iso(moment)
    events = []

    for action in actions:
        if not action.case_id:
            continue
        case_id = action.case_id
        open_action = action.status != "complete"

        if open_action and action.severity == "critical" and action.due_date and action.due_date < today:
            events.append(
                EscalationEvent(
                    id=f"esc-{action.id}-critical",
                    case_id=case_id,
                    type="critical_overdue",
                    message=f"Critical QA action overdue for case {case_id}",
                    recipients=[action.owner or "QAPI Coordinator"],
                    created_at=created_at,
                )
            )
        if action.re_audit_due_date and not action.re_audit_completed_at and action.re_audit_due_date < today:
            events.append(
                EscalationEvent(
                    id=f"esc-{action.id}-reaudit",
                    case_id=case_id,
                    type="reaudit_missed",
                    message=f"Re-audit missed due date for case {case_id}",
                    recipients=[action.owner or "Unit Manager"],
                    created_at=created_at,
                )
            )
        if open_action and action.created_at and action.created_at[:10] < stale_cutoff:
            events.append(
                EscalationEvent(
                    id=f"esc-{action.id}-stale",
                    case_id=case_id,
                    type="stale_case",
                    message=f"No progress for {inactivity_days}+ days on case {case_id}",
                    recipients=[action.owner or "Director of Nursing"],
                    created_at=created_at,
                )
            )
    return events


def find_duplicate_qa_action(
    new_action: QaAction,
    existing: Sequence[QaAction],
    today: str | None = None,
) -> QaAction | None:
    """An open action for the same issue, unit and staff member audited in the last week."""
    cutoff = date_add_days(today or today_ymd(), -DUPLICATE_WINDOW_DAYS)
    for action in existing:
        if (
            action.issue == new_action.issue
            and action.unit == new_action.unit
            and (action.staff_audited or "") == (new_action.staff_audited or "")
            and action.audit_date >= cutoff
            and action.status != "complete"
            and not action.deleted_at
        ):
            return action
    return None


# === Pick-list dictionaries ===


def _canonicalize(value: str) -> str:
    return _WHITESPACE_RE.sub(" ", value.strip()).lower()


def _dedupe_labels(values) -> list[str]:
    labels: dict[str, str] = {}
    for raw in values:
        if not raw or not raw.strip():
            continue
        label = raw.strip()
        key = _canonicalize(label)
        if key not in labels or len(labels[key]) > len(label):
            labels[key] = label
    return sorted(labels.values(), key=lambda label: (label.lower(), label))


def build_structured_dictionaries(
    actions: Sequence[QaAction],
    edu_sessions: Sequence[EducationSession],
) -> StructuredDictionaries:
    """Distinct units, owners, staff roles and topics seen across actions and education."""
    return StructuredDictionaries(
        units=_dedupe_labels([a.unit for a in actions] + [s.unit for s in edu_sessions]),
        owners=_dedupe_labels([a.owner for a in actions] + [s.instructor for s in edu_sessions]),
        staff_roles=_dedupe_labels([a.staff_role or "" for a in actions]),
        topics=_dedupe_labels(
            [a.topic for a in actions] + [a.issue for a in actions] + [s.topic for s in edu_sessions]
        ),
    )


def migrate_legacy_label(value: str, options: Sequence[str]) -> str:
    """Map a free-text label onto an existing option that differs only in case/spacing."""
    key = _canonicalize(value or "")
    if not key:
        return ""
    for option in options:
        if _canonicalize(option) == key:
            return option
    return value.strip()
