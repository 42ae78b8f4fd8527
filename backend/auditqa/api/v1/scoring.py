"""Sample scoring API.

POST /api/v1/scoring/sample : score one answers map against a template
POST /api/v1/scoring/session: re-score every sample of a session

Templates are normalized before scoring, so legacy definitions are accepted.
"""

from __future__ import annotations

import logging
from typing import Any

from auditqa.config import settings
from auditqa.engines.closed_loop import qa_actions_from_session
from auditqa.engines.sample_scorer import CriticalFailTrigger, collect_critical_fail_triggers, compute_sample_result, score_session
from auditqa.engines.template_normalizer import normalize_template
from auditqa.models.audit import AuditSession, SampleResult
from auditqa.models.base import CamelModel
from auditqa.models.qa import QaAction
from fastapi import APIRouter
from pydantic import Field

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/scoring", tags=["scoring"])


# === Request / Response Models ===


class ScoreSampleRequest(CamelModel):
    template: dict[str, Any]
    answers: dict[str, Any] = Field(default_factory=dict)


class ScoreSampleResponse(CamelModel):
    template_id: str
    result: SampleResult
    triggers: list[CriticalFailTrigger] = Field(default_factory=list)


class ScoreSessionRequest(CamelModel):
    template: dict[str, Any]
    session: AuditSession
    generate_actions: bool = Field(default=False, description="Also build QA actions for failing samples")
    owner: str = ""


class ScoreSessionResponse(CamelModel):
    session: AuditSession
    passing: int
    samples: int
    qa_actions: list[QaAction] = Field(default_factory=list)


# === Endpoints ===


@router.post("/sample", response_model=ScoreSampleResponse)
def score_sample(req: ScoreSampleRequest) -> ScoreSampleResponse:
    """Score a single sample; ``triggers`` lists each critical fail with its source."""
    template = normalize_template(req.template)
    return ScoreSampleResponse(
        template_id=template.id,
        result=compute_sample_result(template, req.answers),
        triggers=collect_critical_fail_triggers(template, req.answers),
    )


@router.post("/session", response_model=ScoreSessionResponse)
def score_audit_session(req: ScoreSessionRequest) -> ScoreSessionResponse:
    """Re-score a session; optionally generate corrective actions from failures."""
    template = normalize_template(req.template)
    scored = score_session(template, req.session)
    actions: list[QaAction] = []
    if req.generate_actions:
        actions = qa_actions_from_session(
            scored,
            template,
            owner=req.owner,
            due_days=settings.qa_action_due_days,
        )
    return ScoreSessionResponse(
        session=scored,
        passing=sum(1 for s in scored.samples if s.passed),
        samples=len(scored.samples),
        qa_actions=actions,
    )
