"""Sample Scorer: evaluate one sample's answers against a normalized template.

Deterministic and total: unknown or missing answer keys score as blank,
and a sample with nothing scoreable is 100%. A critical fail vetoes the
pass verdict regardless of the percentage.

Critical fails come from three independent sources, evaluated in order
and deduplicated by question key:
1. the question's own trigger (``criticalFailIf``, or ``"no"`` when
   ``criticalFail`` is set)
2. template gating rules
3. the template-level ``criticalFailKeys`` list (answer ``"no"``)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import ConfigDict

from auditqa.dates import round_half_up
from auditqa.models.audit import ActionItem, AuditSession, SampleResult
from auditqa.models.base import CamelModel
from auditqa.models.template import YES_NO_TYPES, Template, TemplateQuestion

logger = logging.getLogger(__name__)

TriggerSource = Literal["question", "gating_rule", "critical_key"]

REQUIRED_MISSING = "Required item missing"
CRITICAL_FAIL = "Critical fail"
GATING_RULE_FAILED = "Gating rule failed"


class CriticalFailTrigger(CamelModel):
    """One critical-fail hit, tagged with the mechanism that raised it."""

    model_config = ConfigDict(frozen=True)

    key: str
    source: TriggerSource
    reason: str = CRITICAL_FAIL


def _stringify(answers: Mapping[str, Any] | None) -> dict[str, str]:
    if not answers:
        return {}
    return {str(k): "" if v is None else str(v) for k, v in answers.items()}


def _is_scored(question: TemplateQuestion) -> bool:
    return question.counts_toward_score and question.scoring_points > 0


def collect_critical_fail_triggers(template: Template, answers: Mapping[str, Any]) -> list[CriticalFailTrigger]:
    """Critical-fail triggers for one sample, first source per key wins."""
    values = _stringify(answers)
    triggers: dict[str, CriticalFailTrigger] = {}

    for question in template.sample_questions:
        trigger = question.critical_trigger
        if trigger and values.get(question.key, "") == trigger and question.key not in triggers:
            triggers[question.key] = CriticalFailTrigger(key=question.key, source="question")

    for rule in template.gating_rules or []:
        if rule.fail_if and values.get(rule.key, "") == rule.fail_if and rule.key not in triggers:
            triggers[rule.key] = CriticalFailTrigger(
                key=rule.key,
                source="gating_rule",
                reason=rule.reason or GATING_RULE_FAILED,
            )

    for key in template.critical_fail_keys:
        if values.get(key, "") == "no" and key not in triggers:
            triggers[key] = CriticalFailTrigger(key=key, source="critical_key")

    return list(triggers.values())


def compute_sample_result(template: Template, answers: Mapping[str, Any] | None) -> SampleResult:
    """Score one sample.

    Args:
        template: A normalized template.
        answers: Question key to answer. Values are stringified; ``None`` is blank.

    Returns:
        SampleResult with percentage, pass verdict, critical fails and the
        follow-up items (missing required answers, gating failures, critical fails).
    """
    values = _stringify(answers)
    na_policy = template.na_policy
    max_points = 0.0
    got = 0.0
    action_needed: list[ActionItem] = []

    for question in template.sample_questions:
        value = values.get(question.key, "")

        if question.required and not value.strip():
            action_needed.append(ActionItem(key=question.key, label=question.label, reason=REQUIRED_MISSING))

        if not (_is_scored(question) and question.type in YES_NO_TYPES):
            continue
        points = question.scoring_points
        if value == "na":
            if na_policy == "fullCredit":
                max_points += points
                got += points
            elif na_policy == "zero":
                max_points += points
            # excludeFromDenominator: neither side
        else:
            max_points += points
            if value == "yes":
                got += points

    for rule in template.gating_rules or []:
        if rule.fail_if and values.get(rule.key, "") == rule.fail_if:
            question = template.sample_question(rule.key)
            action_needed.append(
                ActionItem(
                    key=rule.key,
                    label=question.label if question else rule.key,
                    reason=rule.reason or GATING_RULE_FAILED,
                )
            )

    triggers = collect_critical_fail_triggers(template, values)
    critical_fails = [t.key for t in triggers]

    noted = {item.key for item in action_needed}
    for key in critical_fails:
        if key in noted:
            continue
        question = template.sample_question(key)
        action_needed.append(ActionItem(key=key, label=question.label if question else key, reason=CRITICAL_FAIL))
        noted.add(key)

    pct = 100 if max_points == 0 else round_half_up((got / max_points) * 100)
    passed = pct >= template.passing_threshold and not critical_fails

    return SampleResult(
        pct=pct,
        passed=passed,
        critical_fails=critical_fails,
        action_needed=action_needed,
        max=max_points,
        got=got,
    )


def score_session(template: Template, session: AuditSession) -> AuditSession:
    """Copy of ``session`` with every sample re-scored against ``template``."""
    if session.template_id and session.template_id != template.id:
        logger.warning("Scoring session %s (template %s) against template %s", session.id, session.template_id, template.id)
    samples = [
        sample.model_copy(update={"result": compute_sample_result(template, sample.answers)})
        for sample in session.samples
    ]
    return session.model_copy(update={"samples": samples})
