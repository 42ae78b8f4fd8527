"""Exception types raised by the AuditQA engines.

Only template normalization raises: scoring and aggregation degrade to
neutral values instead.
"""

from __future__ import annotations

from typing import Any


class AuditQAError(Exception):
    """Base class for AuditQA errors."""


class SchemaValidationError(AuditQAError):
    """A template could not be coerced into the canonical schema."""

    def __init__(self, template_id: str, errors: list[dict[str, Any]] | None = None, message: str = "") -> None:
        self.template_id = template_id
        self.errors = errors or []
        detail = message or f"{len(self.errors)} validation error(s)"
        super().__init__(f"Template '{template_id}' failed schema validation: {detail}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "templateId": self.template_id,
            "message": str(self),
            "errors": [
                {
                    "loc": list(err.get("loc", ())),
                    "msg": err.get("msg", ""),
                    "type": err.get("type", ""),
                }
                for err in self.errors
            ],
        }
