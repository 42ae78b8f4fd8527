"""Closed-loop workflow records: due status, bundles, closure checks, escalations."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from auditqa.models.base import CamelModel
from auditqa.models.qa import EducationSession, QaAction, Severity

DueState = Literal["overdue", "due-soon", "upcoming"]
EscalationType = Literal["critical_overdue", "stale_case", "reaudit_missed"]


class DueStatus(CamelModel):
    status: DueState
    days_until: int
    is_overdue: bool


class ClosedLoopBundleInput(CamelModel):
    """One audit finding to turn into a linked QA action + education draft."""

    template_id: str
    template_title: str
    finding_label: str
    finding_reason: str = ""
    audit_date: str = ""
    session_id: str = ""
    sample_id: str = ""
    severity: Severity = "medium"
    unit: str = ""
    topic: str = ""
    staff_audited: str = ""
    staff_role: str = ""
    owner: str = ""
    ftag_tags: list[str] = Field(default_factory=list)
    nydoh_tags: list[str] = Field(default_factory=list)


class ClosedLoopBundleResult(CamelModel):
    case_id: str
    qa_action: QaAction
    education_draft: EducationSession
    re_audit_due_date: str


class ClosureValidation(CamelModel):
    can_close: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class EscalationEvent(CamelModel):
    id: str
    case_id: str
    type: EscalationType
    message: str
    recipients: list[str] = Field(default_factory=list)
    created_at: str


class StructuredDictionaries(CamelModel):
    units: list[str] = Field(default_factory=list)
    owners: list[str] = Field(default_factory=list)
    staff_roles: list[str] = Field(default_factory=list)
    topics: list[str] = Field(default_factory=list)
