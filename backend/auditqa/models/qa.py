"""Corrective-action (QA) and education records."""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field

from auditqa.models.base import CamelModel

QaStatus = Literal["open", "in_progress", "complete"]
Severity = Literal["critical", "high", "medium", "low"]
EducationStatus = Literal["planned", "completed"]


class ReAuditResults(CamelModel):
    model_config = ConfigDict(extra="allow")

    passed: bool = False
    pct: int | None = None
    completed_at: str | None = None


class QaAction(CamelModel):
    """A corrective action, generated from a failed sample or created by hand.

    Overdue is derived from ``due_date`` and the status at read time; it is
    never stored on the record.
    """

    id: str = ""
    case_id: str | None = None
    severity: Severity | None = None
    created_at: str = ""
    status: QaStatus = "open"
    template_id: str = ""
    template_title: str = ""
    unit: str = ""
    audit_date: str = ""
    session_id: str = ""
    sample: str = ""
    issue: str = ""
    reason: str = ""
    topic: str = ""
    summary: str = ""
    owner: str = ""
    due_date: str = ""
    completed_at: str = ""
    notes: str = ""
    ftag_tags: list[str] = Field(default_factory=list)
    nydoh_tags: list[str] = Field(default_factory=list)

    # Re-audit
    re_audit_due_date: str = ""
    re_audit_completed_at: str = ""
    re_audit_session_ref: str = ""
    re_audit_template_id: str = ""
    re_audit_results: ReAuditResults | None = None

    # Evidence checklist (persisted with these exact keys)
    ev_policy_reviewed: bool = Field(default=False, alias="ev_policyReviewed")
    ev_education_provided: bool = Field(default=False, alias="ev_educationProvided")
    ev_competency_validated: bool = Field(default=False, alias="ev_competencyValidated")
    ev_corrective_action: bool = Field(default=False, alias="ev_correctiveAction")
    ev_monitoring_in_place: bool = Field(default=False, alias="ev_monitoringInPlace")

    # Linked education
    linked_edu_session_id: str = ""
    linked_education_sessions: list[str] = Field(default_factory=list)

    staff_audited: str | None = None
    staff_role: str | None = None
    deleted_at: str | None = None

    @property
    def evidence_count(self) -> int:
        return sum(
            [
                self.ev_policy_reviewed,
                self.ev_education_provided,
                self.ev_competency_validated,
                self.ev_corrective_action,
                self.ev_monitoring_in_place,
            ]
        )


class EducationSession(CamelModel):
    """An in-service / education session."""

    id: str = ""
    case_id: str | None = None
    created_at: str = ""
    status: EducationStatus = "planned"
    topic: str = ""
    summary: str = ""
    audience: str = ""
    instructor: str = ""
    unit: str = ""
    scheduled_date: str = ""
    completed_date: str = ""
    notes: str = ""
    template_title: str = ""
    template_id: str = ""
    issue: str = ""
    linked_qa_action_id: str = ""
    category: str | None = None
    attendees: list[str] = Field(default_factory=list)

    @property
    def session_day(self) -> str:
        return (self.completed_date or self.scheduled_date or "")[:10]
