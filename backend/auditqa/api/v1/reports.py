"""Regulatory reports API.

POST /api/v1/reports/ic: monthly Infection Prevention & Control report
"""

from __future__ import annotations

import logging
from typing import Any

from auditqa.engines.ic_report import generate_ic_report
from auditqa.engines.template_normalizer import normalize_templates
from auditqa.models.audit import AuditSession
from auditqa.models.base import CamelModel
from auditqa.models.qa import EducationSession, QaAction
from auditqa.models.report import ICReport
from fastapi import APIRouter
from pydantic import Field

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


class ICReportRequest(CamelModel):
    sessions: list[AuditSession] = Field(default_factory=list)
    qa_actions: list[QaAction] = Field(default_factory=list)
    edu_sessions: list[EducationSession] = Field(default_factory=list)
    templates: list[dict[str, Any]] = Field(default_factory=list)
    months_back: int = Field(default=0, ge=0, le=24)
    today: str | None = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$")


@router.post("/ic", response_model=ICReport)
def ic_report(req: ICReportRequest) -> ICReport:
    """Generate the IC report. Templates failing validation are skipped, not fatal."""
    templates = normalize_templates(req.templates, skip_invalid=True)
    if len(templates) < len(req.templates):
        logger.warning("IC report: %d of %d templates skipped", len(req.templates) - len(templates), len(req.templates))
    return generate_ic_report(
        req.sessions,
        req.qa_actions,
        req.edu_sessions,
        templates,
        months_back=req.months_back,
        today=req.today,
    )
