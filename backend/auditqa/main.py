"""AuditQA FastAPI Application.

Stateless compute service: every request carries the templates, sessions
and actions it needs, and nothing is persisted between calls.
"""

from __future__ import annotations

import logging

from auditqa.api.health import VERSION
from auditqa.api.health import router as health_router
from auditqa.api.v1.analytics import router as analytics_router
from auditqa.api.v1.qa import router as qa_router
from auditqa.api.v1.reports import router as reports_router
from auditqa.api.v1.scoring import router as scoring_router
from auditqa.api.v1.templates import router as templates_router
from auditqa.config import settings
from auditqa.errors import SchemaValidationError
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

logging.getLogger("auditqa").setLevel(settings.log_level)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="AuditQA",
    description="Template-driven compliance audit scoring and analytics",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.exception_handler(SchemaValidationError)
async def schema_validation_handler(request: Request, exc: SchemaValidationError):
    logger.info("Rejected template %s on %s: %s", exc.template_id, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": exc.to_dict()})


# Global exception handler
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    if isinstance(exc, HTTPException):
        raise exc
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error."},
    )


# Routes
app.include_router(health_router)
app.include_router(templates_router)
app.include_router(scoring_router)
app.include_router(analytics_router)
app.include_router(reports_router)
app.include_router(qa_router)


@app.get("/")
async def root():
    return {"name": "AuditQA", "version": VERSION, "status": "running"}
