"""Audit session models: sessions, samples and scored sample results."""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field, field_validator

from auditqa.models.base import CamelModel

SessionStatus = Literal["draft", "in_progress", "complete"]


class ActionItem(CamelModel):
    """Something on a sample that needs follow-up."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    reason: str


class SampleResult(CamelModel):
    """Scorer output for one sample. Re-scoring replaces it wholesale."""

    model_config = ConfigDict(frozen=True)

    pct: int = Field(ge=0, le=100)
    passed: bool = Field(alias="pass")
    critical_fails: list[str] = Field(default_factory=list)
    action_needed: list[ActionItem] = Field(default_factory=list)
    max: float = 0
    got: float = 0


class Sample(CamelModel):
    """One observation within an audit session."""

    id: str = ""
    answers: dict[str, str] = Field(default_factory=dict)
    result: SampleResult | None = None
    staff_audited: str | None = None
    immediate_action: str | None = None
    immediate_action_date: str | None = None
    follow_up_action: str | None = None
    follow_up_action_date: str | None = None

    @field_validator("answers", mode="before")
    @classmethod
    def _stringify_answers(cls, value):
        if isinstance(value, dict):
            return {str(k): "" if v is None else str(v) for k, v in value.items()}
        return value

    @property
    def passed(self) -> bool:
        return bool(self.result and self.result.passed)

    @property
    def critical_count(self) -> int:
        return len(self.result.critical_fails) if self.result else 0


class SessionHeader(CamelModel):
    """Audit header. Template-specific header fields are kept as extras."""

    model_config = ConfigDict(extra="allow")

    status: SessionStatus = "in_progress"
    session_id: str = ""
    audit_date: str = ""
    auditor: str = ""
    unit: str = ""
    immediate_action: str | None = None
    immediate_action_date: str | None = None
    follow_up_action: str | None = None
    follow_up_action_date: str | None = None


class AuditSession(CamelModel):
    """A completed or in-progress audit run against one template."""

    id: str = ""
    template_id: str = ""
    template_title: str = ""
    created_at: str = ""
    header: SessionHeader = Field(default_factory=SessionHeader)
    samples: list[Sample] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.header.status == "complete"

    @property
    def audit_day(self) -> str:
        """Audit date, falling back to the creation date."""
        return self.header.audit_date or (self.created_at or "")[:10]
