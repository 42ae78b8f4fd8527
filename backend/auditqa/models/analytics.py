"""Output records of the session/action aggregators."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from auditqa.models.base import CamelModel

TrendDirection = Literal["improving", "declining", "stable"]
ComplianceStatus = Literal["success", "warning", "error"]


class TrendDataPoint(CamelModel):
    date: str  # YYYY-MM-DD
    samples: int = 0
    critical: int = 0
    compliance: int = 0


class ToolSummary(CamelModel):
    title: str
    total: int = 0
    passing: int = 0
    rate: int = 0
    criticals: int = 0


class UnitSummary(CamelModel):
    unit: str
    total: int = 0
    passed: int = Field(default=0, alias="pass")
    rate: int = 0


class CritItem(CamelModel):
    key: str
    label: str
    count: int = 0


class ActionSummaryItem(CamelModel):
    issue: str
    template: str
    count: int = 0


class SessionSummary(CamelModel):
    """Facility-wide dashboard summary over completed sessions."""

    sessions: int = 0
    samples: int = 0
    passing: int = 0
    compliance: int = 0
    critical_fails: int = 0
    critical_rate: int = 0
    by_tool: list[ToolSummary] = Field(default_factory=list)
    by_unit: list[UnitSummary] = Field(default_factory=list)
    crit_items: list[CritItem] = Field(default_factory=list)
    action_items: list[ActionSummaryItem] = Field(default_factory=list)


class OwnerStats(CamelModel):
    open: int = 0
    in_progress: int = Field(default=0, alias="in_progress")
    complete: int = 0
    overdue: int = 0


class ClosedLoopStats(CamelModel):
    """Closed-loop QA statistics: status counts, overdue and time-to-close."""

    total: int = 0
    open: int = 0
    prog: int = 0
    done: int = 0
    closure_rate: int = 0
    closed7: int = 0
    closed14: int = 0
    closed30: int = 0
    overdue_count: int = 0
    avg_close_days: float = 0
    by_owner: dict[str, OwnerStats] = Field(default_factory=dict)
    by_unit: dict[str, OwnerStats] = Field(default_factory=dict)


class HeatmapCell(CamelModel):
    total: int = 0
    passing: int = 0
    rate: int = 0
    critical: int = 0


class Heatmap(CamelModel):
    tools: list[str] = Field(default_factory=list)
    units: list[str] = Field(default_factory=list)
    data: dict[str, dict[str, HeatmapCell]] = Field(default_factory=dict)


class StaffPerformance(CamelModel):
    """Per-staff rollup for one date range.

    ``trend_direction`` is bucketed from this period's pass rate alone; it
    is not a comparison against an earlier period.
    """

    staff_name: str
    audits: int = 0
    passing: int = 0
    pass_rate: float = 0
    critical_fails: int = 0
    open_actions: int = 0
    completed_actions: int = 0
    education_sessions: int = 0
    recent_issues: list[str] = Field(default_factory=list)
    trend_direction: TrendDirection = "stable"
    trend_method: Literal["single_period_pass_rate"] = "single_period_pass_rate"


class TopicCount(CamelModel):
    topic: str
    count: int = 0


class EducationSummary(CamelModel):
    count: int = 0
    by_category: dict[str, int] = Field(default_factory=dict)
    top_topics: list[TopicCount] = Field(default_factory=list)


class DeltaIndicator(CamelModel):
    text: str
    direction: Literal["up", "down", "neutral"]
