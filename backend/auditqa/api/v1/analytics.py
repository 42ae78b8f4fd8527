"""Analytics API: dashboard rollups over caller-supplied sessions and actions.

POST /api/v1/analytics/summary           : facility summary (complete sessions)
POST /api/v1/analytics/trend             : per-day compliance series
POST /api/v1/analytics/heatmap           : tool x unit grid
POST /api/v1/analytics/closed-loop       : QA action status / time-to-close
POST /api/v1/analytics/staff-performance : per-staff rollup for a date range
POST /api/v1/analytics/recurring-issues  : actions in recurring issue/unit groups
POST /api/v1/analytics/education         : education sessions by category/topic
"""

from __future__ import annotations

import logging

from auditqa.config import settings
from auditqa.engines.aggregators import (
    ALL_TIME_DAYS,
    compliance_status,
    compute_closed_loop_stats,
    compute_heatmap,
    compute_staff_performance,
    compute_trend_series,
    filter_actions_by_range,
    filter_sessions_by_range,
    find_recurring_issues,
    summarize_education,
    summarize_sessions,
)
from auditqa.models.analytics import (
    ClosedLoopStats,
    ComplianceStatus,
    EducationSummary,
    Heatmap,
    SessionSummary,
    StaffPerformance,
    TrendDataPoint,
)
from auditqa.models.audit import AuditSession
from auditqa.models.base import CamelModel
from auditqa.models.qa import EducationSession, QaAction
from fastapi import APIRouter
from pydantic import Field

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/analytics", tags=["analytics"])


# === Request / Response Models ===


class SessionsRequest(CamelModel):
    sessions: list[AuditSession] = Field(default_factory=list)
    days_ago: int = Field(default=ALL_TIME_DAYS, ge=0, description="Created within N days; 9999 = all")


class SummaryResponse(SessionSummary):
    status: ComplianceStatus = "error"


class ActionsRequest(CamelModel):
    actions: list[QaAction] = Field(default_factory=list)
    days_ago: int = Field(default=ALL_TIME_DAYS, ge=0)
    today: str | None = None


class StaffPerformanceRequest(CamelModel):
    sessions: list[AuditSession] = Field(default_factory=list)
    actions: list[QaAction] = Field(default_factory=list)
    education: list[EducationSession] = Field(default_factory=list)
    date_from: str = ""
    date_to: str = ""


class RecurringIssuesRequest(CamelModel):
    actions: list[QaAction] = Field(default_factory=list)
    window_days: int | None = Field(default=None, ge=1)
    today: str | None = None


class EducationRequest(CamelModel):
    sessions: list[EducationSession] = Field(default_factory=list)
    date_from: str = ""
    date_to: str = ""
    unit: str = ""


# === Endpoints ===


@router.post("/summary", response_model=SummaryResponse)
def summary(req: SessionsRequest) -> SummaryResponse:
    result = summarize_sessions(filter_sessions_by_range(req.sessions, req.days_ago))
    return SummaryResponse(**result.model_dump(), status=compliance_status(result.compliance))


@router.post("/trend", response_model=list[TrendDataPoint])
def trend(req: SessionsRequest) -> list[TrendDataPoint]:
    return compute_trend_series(filter_sessions_by_range(req.sessions, req.days_ago))


@router.post("/heatmap", response_model=Heatmap)
def heatmap(req: SessionsRequest) -> Heatmap:
    return compute_heatmap(filter_sessions_by_range(req.sessions, req.days_ago))


@router.post("/closed-loop", response_model=ClosedLoopStats)
def closed_loop(req: ActionsRequest) -> ClosedLoopStats:
    actions = [a for a in filter_actions_by_range(req.actions, req.days_ago) if not a.deleted_at]
    return compute_closed_loop_stats(actions, today=req.today)


@router.post("/staff-performance", response_model=list[StaffPerformance])
def staff_performance(req: StaffPerformanceRequest) -> list[StaffPerformance]:
    """Per-staff rollup. ``trendDirection`` reflects this period's pass rate only."""
    return compute_staff_performance(req.sessions, req.actions, req.education, (req.date_from, req.date_to))


@router.post("/recurring-issues", response_model=list[QaAction])
def recurring_issues(req: RecurringIssuesRequest) -> list[QaAction]:
    window = req.window_days or settings.recurring_issue_window_days
    return find_recurring_issues(req.actions, window_days=window, today=req.today)


@router.post("/education", response_model=EducationSummary)
def education(req: EducationRequest) -> EducationSummary:
    return summarize_education(req.sessions, req.date_from, req.date_to, req.unit)
