"""Health check endpoint.

The service is stateless, so health reduces to: reference data loaded and
settings readable.
"""

from __future__ import annotations

from datetime import datetime, timezone

from auditqa.config import settings
from auditqa.reference.competencies import COMPETENCY_LIBRARY
from auditqa.reference.education import EDUCATION_CATEGORY_RULES
from auditqa.reference.infection_control import IC_FTAG_DEFINITIONS, IC_KEYWORDS
from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()

VERSION = "0.1.0"


class HealthStatus(BaseModel):
    status: str  # "healthy" | "degraded"
    version: str
    checks: dict[str, dict]
    timestamp: datetime


@router.get("/health", response_model=HealthStatus)
async def health_check() -> HealthStatus:
    """Report reference-data counts and the active workflow defaults."""
    checks: dict[str, dict] = {}
    has_warning = False

    reference = {
        "competency_library": len(COMPETENCY_LIBRARY),
        "education_categories": len(EDUCATION_CATEGORY_RULES),
        "ic_keywords": len(IC_KEYWORDS),
        "ic_ftags": len(IC_FTAG_DEFINITIONS),
    }
    for name, count in reference.items():
        if count:
            checks[name] = {"status": "ok", "detail": f"{count} entries"}
        else:
            checks[name] = {"status": "warning", "detail": "empty"}
            has_warning = True

    checks["settings"] = {
        "status": "ok",
        "detail": (
            f"due_soon_days={settings.due_soon_days}, "
            f"recurring_issue_window_days={settings.recurring_issue_window_days}, "
            f"escalation_inactivity_days={settings.escalation_inactivity_days}"
        ),
    }

    return HealthStatus(
        status="degraded" if has_warning else "healthy",
        version=VERSION,
        checks=checks,
        timestamp=datetime.now(timezone.utc),
    )
