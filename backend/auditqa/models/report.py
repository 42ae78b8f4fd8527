"""Infection-control (IC) monthly report models."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from auditqa.models.analytics import TrendDirection
from auditqa.models.base import CamelModel

FTagStatus = Literal["compliant", "at-risk", "non-compliant"]


class ReportPeriod(CamelModel):
    start: str
    end: str
    label: str


class PriorMonthComparison(CamelModel):
    compliance_change: int = 0
    critical_fails_change: int = 0


class ICSummary(CamelModel):
    total_audits: int = 0
    total_samples: int = 0
    passing_samples: int = 0
    compliance_rate: int = 0
    critical_fails: int = 0
    prior_month_comparison: PriorMonthComparison = Field(default_factory=PriorMonthComparison)


class TemplateCompliance(CamelModel):
    template_title: str
    template_id: str
    samples: int = 0
    passing: int = 0
    rate: int = 0
    criticals: int = 0
    ftags: list[str] = Field(default_factory=list)
    trend: TrendDirection = "stable"


class FTagCompliance(CamelModel):
    ftag: str
    description: str
    audits: int = 0
    compliance: int = 0
    status: FTagStatus = "non-compliant"


class ICEducation(CamelModel):
    sessions_completed: int = 0
    topics_count: int = 0
    attendance_total: int = 0
    linked_to_qa: int = Field(default=0, alias="linkedToQA")
    effectiveness: int = 0


class RecurringICIssue(CamelModel):
    issue: str
    count: int = 0
    templates: list[str] = Field(default_factory=list)


class ICQaActions(CamelModel):
    total: int = 0
    open: int = 0
    overdue: int = 0
    closed: int = 0
    avg_days_to_close: int = 0
    recurring_issues: list[RecurringICIssue] = Field(default_factory=list)


class MonthlyTrendPoint(CamelModel):
    month: str
    compliance: int = 0
    criticals: int = 0
    actions: int = 0


class ICReport(CamelModel):
    """Month-scoped infection prevention & control report."""

    period: ReportPeriod
    summary: ICSummary = Field(default_factory=ICSummary)
    by_template: list[TemplateCompliance] = Field(default_factory=list)
    by_f_tag: list[FTagCompliance] = Field(default_factory=list, alias="byFTag")
    education: ICEducation = Field(default_factory=ICEducation)
    qa_actions: ICQaActions = Field(default_factory=ICQaActions)
    trend_data: list[MonthlyTrendPoint] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
