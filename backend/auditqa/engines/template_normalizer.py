"""Template Normalizer: coerce loosely-typed template definitions into ``Template``.

Legacy templates arrive in several shapes: ``score`` instead of ``points``,
F-Tag / NYCRR citations as bare tag lists, critical questions flagged only
through ``criticalFailKeys``. Normalization fills every default, derives the
structured references and the critical-fail key list, and validates the
result. It is idempotent: normalizing a normalized template is a no-op.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from auditqa.errors import SchemaValidationError
from auditqa.models.template import Template

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Audit Template"


def _as_dict(raw: Any) -> Any:
    if isinstance(raw, Template):
        return raw.model_dump(by_alias=True, exclude_none=True)
    return raw


def _list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


def _normalize_reference(reference: Any) -> Any:
    if not isinstance(reference, Mapping):
        return reference
    system = reference.get("system") or ""
    framework = reference.get("framework")
    if framework is None:
        if system == "CMS":
            framework = "CMS"
        elif "NY" in system:
            framework = "NYCRR"
        else:
            framework = "Other"
    # Blank ids normalize to None so a dumped template re-normalizes unchanged
    ref_id = reference.get("id") or reference.get("code") or None
    title = reference.get("title")
    return {
        **reference,
        "framework": framework,
        "id": ref_id,
        "title": title if title is not None else "",
        "system": system or framework,
        "code": reference.get("code") or ref_id or "",
    }


def _structured_references(raw: Mapping[str, Any]) -> list:
    """Merge explicit references with the legacy tag lists, first wins per (framework, id)."""
    merged = _list(raw.get("references"))
    for tag in _list(raw.get("ftagTags")):
        merged.append({"framework": "CMS", "system": "CMS", "code": tag, "id": tag, "title": "F-Tag"})
    for tag in _list(raw.get("nydohTags")):
        merged.append({"framework": "NYCRR", "system": "NYCRR", "code": tag, "id": tag, "title": "NYCRR"})

    references: list = []
    seen: set[tuple] = set()
    for reference in map(_normalize_reference, merged):
        if not isinstance(reference, Mapping):
            references.append(reference)
            continue
        dedupe_key = (reference["framework"], reference["id"])
        if dedupe_key in seen:
            continue
        seen.add(dedupe_key)
        references.append(reference)
    return references


def _tags_for(references: list, framework: str) -> list[str]:
    tags = []
    for ref in references:
        if isinstance(ref, Mapping) and ref.get("framework") == framework:
            tag = ref.get("id") or ref.get("code")
            if tag:
                tags.append(tag)
    return tags


def _normalize_question(question: Any, scope: str, critical_fail_keys: list) -> Any:
    if not isinstance(question, Mapping):
        return question

    points = question.get("points")
    if points is None:
        points = question.get("score")
    if points is None:
        points = 0

    q_type = question.get("type")
    if q_type == "yn" and "N/A" in _list(question.get("options")):
        q_type = "ynna"

    critical_fail_if = question.get("criticalFailIf")
    critical_fail = question.get("criticalFail")
    if critical_fail is None:
        critical_fail = question.get("key") in critical_fail_keys or critical_fail_if == "no"
    if critical_fail and critical_fail_if is None:
        critical_fail_if = "no"

    affects_score = question.get("affectsScore")
    if affects_score is None:
        affects_score = isinstance(points, (int, float)) and points > 0

    normalized = {
        **question,
        "scope": question.get("scope") or scope,
        "type": q_type,
        "score": points,
        "points": points,
        "affectsScore": affects_score,
        "criticalFail": critical_fail,
    }
    if critical_fail_if is not None:
        normalized["criticalFailIf"] = critical_fail_if
    if q_type == "patientCode" and not normalized.get("subjectCode"):
        normalized["subjectCode"] = question.get("key")
    return normalized


def _dedupe(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def normalize_template(raw: Any, index: int = 0) -> Template:
    """Normalize one template definition.

    Args:
        raw: A mapping in the persisted (camelCase) shape, or a ``Template``.
        index: Position in the batch, used to name templates that carry no id.

    Raises:
        SchemaValidationError: the assembled record fails schema validation.
    """
    raw = _as_dict(raw)
    if not isinstance(raw, Mapping):
        raise SchemaValidationError(
            f"legacy_template_{index + 1}",
            message=f"expected a mapping, got {type(raw).__name__}",
        )

    template_id = raw.get("templateId") or raw.get("id") or f"legacy_template_{index + 1}"
    references = _structured_references(raw)

    critical_fail_keys = _list(raw.get("criticalFailKeys"))
    session_questions = [
        _normalize_question(q, "session", critical_fail_keys) for q in _list(raw.get("sessionQuestions"))
    ]
    sample_questions = [
        _normalize_question(q, "sample", critical_fail_keys) for q in _list(raw.get("sampleQuestions"))
    ]
    sample_dicts = [q for q in sample_questions if isinstance(q, Mapping)]

    computed_max = sum(q["points"] for q in sample_dicts if q["affectsScore"] and isinstance(q["points"], (int, float)))

    scoring = raw.get("scoring") if isinstance(raw.get("scoring"), Mapping) else {}
    max_score = scoring.get("maxScore")
    header = raw.get("sessionHeader") if isinstance(raw.get("sessionHeader"), Mapping) else {}
    purpose = raw.get("purpose") if isinstance(raw.get("purpose"), Mapping) else {}
    passing_threshold = raw.get("passingThreshold")

    candidate = {
        "id": template_id,
        "templateId": template_id,
        "title": raw.get("title") or DEFAULT_TITLE,
        "version": raw.get("version") or "1.0.0",
        "category": raw.get("category") or "Uncategorized",
        "placementTags": _list(raw.get("placementTags")),
        "ftagTags": _tags_for(references, "CMS"),
        "nydohTags": _tags_for(references, "NYCRR"),
        "purpose": {
            "summary": purpose.get("summary") or "",
            "risk": purpose.get("risk") or "",
            "evidenceToShow": purpose.get("evidenceToShow") or "",
        },
        "references": references,
        "scoring": {
            "mode": scoring.get("mode") or "sum",
            "maxScore": max_score if max_score is not None else computed_max,
            "naPolicy": scoring.get("naPolicy") or "excludeFromDenominator",
        },
        "sessionHeader": {
            **header,
            "date": header.get("date") or "auditDate",
            "auditorName": header.get("auditorName") or "auditor",
        },
        "gatingRules": raw.get("gatingRules") or [],
        "passingThreshold": passing_threshold if passing_threshold is not None else 100,
        "criticalFailKeys": _dedupe(
            [*critical_fail_keys, *(q.get("key") for q in sample_dicts if q.get("criticalFail"))]
        ),
        "sessionQuestions": session_questions,
        "sampleQuestions": sample_questions,
    }
    for optional in ("archived", "archivedAt", "archivedBy", "replacedByTemplateId"):
        if raw.get(optional) is not None:
            candidate[optional] = raw[optional]

    try:
        return Template.model_validate(candidate)
    except ValidationError as exc:
        raise SchemaValidationError(str(template_id), errors=exc.errors(include_url=False)) from exc


def normalize_templates(raws: Iterable[Any], skip_invalid: bool = False) -> list[Template]:
    """Normalize a batch; with ``skip_invalid`` bad templates are logged and dropped."""
    templates: list[Template] = []
    for index, raw in enumerate(raws):
        try:
            templates.append(normalize_template(raw, index))
        except SchemaValidationError as exc:
            if not skip_invalid:
                raise
            logger.warning("Skipping template %s: %s", exc.template_id, exc)
    return templates
