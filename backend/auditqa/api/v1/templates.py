"""Template normalization API.

POST /api/v1/templates/normalize: normalize a batch of template definitions

Normalization is the only validation boundary: a template that cannot be
coerced raises ``SchemaValidationError`` (422) unless ``skipInvalid`` is set,
in which case it is dropped and reported by index.
"""

from __future__ import annotations

import logging
from typing import Any

from auditqa.engines.template_normalizer import normalize_template
from auditqa.errors import SchemaValidationError
from auditqa.models.base import CamelModel
from auditqa.models.template import Template
from fastapi import APIRouter
from pydantic import Field

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/templates", tags=["templates"])


# === Request / Response Models ===


class NormalizeRequest(CamelModel):
    templates: list[Any] = Field(min_length=1, max_length=500)
    skip_invalid: bool = False


class SkippedTemplate(CamelModel):
    index: int
    template_id: str
    message: str


class NormalizeResponse(CamelModel):
    templates: list[Template]
    count: int
    skipped: list[SkippedTemplate] = Field(default_factory=list)


# === Endpoints ===


@router.post("/normalize", response_model=NormalizeResponse)
def normalize(req: NormalizeRequest) -> NormalizeResponse:
    """Normalize template definitions into the canonical scorable shape."""
    templates: list[Template] = []
    skipped: list[SkippedTemplate] = []
    for index, raw in enumerate(req.templates):
        try:
            templates.append(normalize_template(raw, index))
        except SchemaValidationError as exc:
            if not req.skip_invalid:
                raise
            logger.warning("Skipping template %s at index %d: %s", exc.template_id, index, exc)
            skipped.append(SkippedTemplate(index=index, template_id=exc.template_id, message=str(exc)))
    return NormalizeResponse(templates=templates, count=len(templates), skipped=skipped)
