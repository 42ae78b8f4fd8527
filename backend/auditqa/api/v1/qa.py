"""Closed-loop QA API.

POST /api/v1/qa/due-status    : due / overdue classification for a date
POST /api/v1/qa/closure-check : can this action be closed?
POST /api/v1/qa/escalations   : escalation events for case-linked actions
POST /api/v1/qa/bundle        : open a case: QA action + education draft
POST /api/v1/qa/competencies  : competencies matching an issue
POST /api/v1/qa/regulatory-category : CMS category and F-Tags for an education topic
POST /api/v1/qa/duplicate     : open duplicate of a new action, if any
POST /api/v1/qa/dictionaries  : distinct units / owners / roles / topics
"""

from __future__ import annotations

import logging

from auditqa.config import settings
from auditqa.engines.classifiers import (
    categorize_by_keywords,
    find_matching_competencies,
    format_competencies_for_notes,
    get_category_ftags,
    parse_ftags,
)
from auditqa.engines.closed_loop import (
    build_structured_dictionaries,
    create_closed_loop_bundle,
    find_duplicate_qa_action,
    get_due_status,
    get_escalation_events,
    validate_qa_action_closure,
)
from auditqa.models.base import CamelModel
from auditqa.models.qa import EducationSession, QaAction
from auditqa.models.workflow import (
    ClosedLoopBundleInput,
    ClosedLoopBundleResult,
    ClosureValidation,
    DueStatus,
    EscalationEvent,
    StructuredDictionaries,
)
from auditqa.reference.competencies import CompetencySkill
from fastapi import APIRouter
from pydantic import Field

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/qa", tags=["qa"])

_YMD = r"^\d{4}-\d{2}-\d{2}$"


# === Request / Response Models ===


class DueStatusRequest(CamelModel):
    today: str = Field(pattern=_YMD)
    due_date: str = Field(pattern=_YMD)
    due_soon_days: int | None = Field(default=None, ge=0)


class ClosureCheckRequest(CamelModel):
    action: QaAction


class EscalationsRequest(CamelModel):
    actions: list[QaAction] = Field(default_factory=list)
    inactivity_days: int | None = Field(default=None, ge=1)
    today: str | None = None


class CompetencyRequest(CamelModel):
    issue: str = Field(min_length=1, max_length=2000)
    topic: str = ""
    limit: int | None = Field(default=None, ge=1, le=50)


class CompetencyResponse(CamelModel):
    competencies: list[CompetencySkill]
    notes: str


class RegulatoryCategoryRequest(CamelModel):
    topic: str = Field(default="", max_length=2000)
    ftags: str = ""
    nysdoh_regs: str = ""
    purpose: str = ""


class RegulatoryCategoryResponse(CamelModel):
    category: str
    cited_ftags: list[str]
    category_ftags: list[str]


class DuplicateRequest(CamelModel):
    action: QaAction
    existing: list[QaAction] = Field(default_factory=list)
    today: str | None = None


class DuplicateResponse(CamelModel):
    duplicate: QaAction | None = None


class DictionariesRequest(CamelModel):
    actions: list[QaAction] = Field(default_factory=list)
    edu_sessions: list[EducationSession] = Field(default_factory=list)


# === Endpoints ===


@router.post("/due-status", response_model=DueStatus)
def due_status(req: DueStatusRequest) -> DueStatus:
    days = settings.due_soon_days if req.due_soon_days is None else req.due_soon_days
    return get_due_status(req.today, req.due_date, days)


@router.post("/closure-check", response_model=ClosureValidation)
def closure_check(req: ClosureCheckRequest) -> ClosureValidation:
    return validate_qa_action_closure(req.action)


@router.post("/escalations", response_model=list[EscalationEvent])
def escalations(req: EscalationsRequest) -> list[EscalationEvent]:
    days = req.inactivity_days or settings.escalation_inactivity_days
    return get_escalation_events(req.actions, inactivity_days=days, today=req.today)


@router.post("/bundle", response_model=ClosedLoopBundleResult)
def bundle(req: ClosedLoopBundleInput) -> ClosedLoopBundleResult:
    return create_closed_loop_bundle(req)


@router.post("/competencies", response_model=CompetencyResponse)
def competencies(req: CompetencyRequest) -> CompetencyResponse:
    matches = find_matching_competencies(req.issue, req.topic, limit=req.limit or settings.competency_match_limit)
    return CompetencyResponse(competencies=matches, notes=format_competencies_for_notes(matches))


@router.post("/regulatory-category", response_model=RegulatoryCategoryResponse)
def regulatory_category(req: RegulatoryCategoryRequest) -> RegulatoryCategoryResponse:
    category = categorize_by_keywords(req.topic, req.ftags, req.nysdoh_regs, req.purpose)
    return RegulatoryCategoryResponse(
        category=category,
        cited_ftags=parse_ftags(req.ftags),
        category_ftags=get_category_ftags(category),
    )


@router.post("/duplicate", response_model=DuplicateResponse)
def duplicate(req: DuplicateRequest) -> DuplicateResponse:
    return DuplicateResponse(duplicate=find_duplicate_qa_action(req.action, req.existing, today=req.today))


@router.post("/dictionaries", response_model=StructuredDictionaries)
def dictionaries(req: DictionariesRequest) -> StructuredDictionaries:
    return build_structured_dictionaries(req.actions, req.edu_sessions)
