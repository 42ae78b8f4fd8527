"""Audit template models: the canonical, scorable template shape.

Every template is normalized (see ``auditqa.engines.template_normalizer``)
before it reaches the scorer; these models are the schema that step
validates against.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from auditqa.models.base import CamelModel

# === Type aliases ===

QuestionType = Literal["text", "select", "yn", "ynna", "patientCode", "number", "date", "datetime"]
QuestionScope = Literal["session", "sample"]
ReferenceFramework = Literal["CMS", "NYCRR", "CDC", "SSA", "Other"]
ScoringMode = Literal["sum", "weighted", "singleGate"]
NAPolicy = Literal["excludeFromDenominator", "fullCredit", "zero"]

YES_NO_TYPES: frozenset[str] = frozenset({"yn", "ynna"})


class TemplateReference(CamelModel):
    """A regulatory citation attached to a template or question."""

    framework: ReferenceFramework | None = None
    type: str | None = None
    id: str | None = None
    title: str | None = None
    system: str = "Other"
    code: str = ""
    why_it_matters: str | None = None


class TemplateQuestion(CamelModel):
    """One checklist item, scoped to the session header or to each sample."""

    scope: QuestionScope | None = None
    key: str = Field(min_length=1)
    label: str = Field(min_length=1)
    type: QuestionType
    options: list[str] | None = None
    required: bool = False
    affects_score: bool | None = None
    critical_fail: bool | None = None
    score: float | None = Field(default=None, ge=0)
    points: float | None = Field(default=None, ge=0)
    weight: float | None = None
    critical_fail_if: str | None = None
    subject_code: str | None = None
    room: str | None = None
    unit: str | None = None
    evidence_hint: str | None = None
    risk_if_noncompliant: str | None = None
    references: list[TemplateReference] | None = None

    @property
    def scoring_points(self) -> float:
        if self.points is not None:
            return self.points
        return self.score or 0

    @property
    def counts_toward_score(self) -> bool:
        if self.affects_score is not None:
            return self.affects_score
        return self.scoring_points > 0

    @property
    def critical_trigger(self) -> str:
        """Answer value that forces a critical fail, or ``""`` for none."""
        return self.critical_fail_if or ("no" if self.critical_fail else "")


class TemplatePurpose(CamelModel):
    summary: str = ""
    risk: str = ""
    evidence_to_show: str = ""


class ScoringPolicy(CamelModel):
    mode: ScoringMode = "sum"
    max_score: float = 100
    na_policy: NAPolicy = "excludeFromDenominator"


class SessionHeaderFields(CamelModel):
    """Which session-header fields the template maps onto."""

    facility: str | None = None
    unit: str | None = None
    date: str | None = None
    shift: str | None = None
    auditor_name: str | None = None
    auditor_role: str | None = None
    batch_label: str | None = None
    notes: str | None = None


class GatingRule(CamelModel):
    """Automatic-fail trigger independent of the question's own critical flag."""

    key: str
    fail_if: str
    reason: str | None = None


class Template(CamelModel):
    """A versioned, reusable checklist definition with scoring rules."""

    id: str = Field(min_length=1)
    template_id: str | None = None
    title: str = Field(min_length=1)
    version: str = "1.0.0"
    category: str = "Uncategorized"
    placement_tags: list[str] = Field(default_factory=list)
    ftag_tags: list[str] = Field(default_factory=list)
    nydoh_tags: list[str] = Field(default_factory=list)
    purpose: TemplatePurpose = Field(default_factory=TemplatePurpose)
    references: list[TemplateReference] = Field(default_factory=list)
    scoring: ScoringPolicy | None = None
    session_header: SessionHeaderFields | None = None
    gating_rules: list[GatingRule] | None = None
    passing_threshold: float = Field(default=100, ge=0, le=100)
    critical_fail_keys: list[str] = Field(default_factory=list)
    session_questions: list[TemplateQuestion] = Field(default_factory=list)
    sample_questions: list[TemplateQuestion] = Field(default_factory=list)
    archived: bool | None = None
    archived_at: str | None = None
    archived_by: str | None = None
    replaced_by_template_id: str | None = None

    @property
    def na_policy(self) -> NAPolicy:
        return self.scoring.na_policy if self.scoring else "excludeFromDenominator"

    def sample_question(self, key: str) -> TemplateQuestion | None:
        for question in self.sample_questions:
            if question.key == key:
                return question
        return None
