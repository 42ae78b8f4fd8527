"""Shared test fixtures for AuditQA backend tests."""

import os
import sys

import pytest

# Ensure backend is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from auditqa.engines.template_normalizer import normalize_template
from auditqa.models.audit import AuditSession, SampleResult
from auditqa.models.qa import EducationSession, QaAction

TODAY = "2024-03-15"


def _hand_hygiene_raw() -> dict:
    return {
        "id": "test_hand_hygiene",
        "title": "Hand Hygiene",
        "version": "1.0.0",
        "category": "Infection Control",
        "placementTags": [],
        "ftagTags": ["F880"],
        "nydohTags": [],
        "purpose": {"summary": "", "risk": "", "evidenceToShow": ""},
        "references": [],
        "scoring": {"mode": "sum", "maxScore": 20, "naPolicy": "excludeFromDenominator"},
        "passingThreshold": 85,
        "criticalFailKeys": ["performed_hygiene"],
        "gatingRules": [{"key": "orders_present", "failIf": "no", "reason": "Orders must be present."}],
        "sessionQuestions": [],
        "sampleQuestions": [
            {"key": "subject_code", "label": "Subject", "type": "patientCode", "required": True, "score": 0},
            {
                "key": "performed_hygiene",
                "label": "Performed hand hygiene",
                "type": "ynna",
                "required": True,
                "score": 10,
                "criticalFail": True,
            },
            {"key": "gloves_removed", "label": "Removed gloves correctly", "type": "ynna", "required": True, "score": 10},
            {
                "key": "orders_present",
                "label": "Orders present",
                "type": "yn",
                "required": True,
                "score": 0,
                "affectsScore": False,
            },
        ],
    }


@pytest.fixture
def hand_hygiene_raw():
    """Legacy-shaped hand hygiene template (score instead of points)."""
    return _hand_hygiene_raw()


@pytest.fixture
def hand_hygiene(hand_hygiene_raw):
    return normalize_template(hand_hygiene_raw)


@pytest.fixture
def make_result():
    """Build a SampleResult: ``make_result(True)`` or ``make_result(False, ["key"])``."""

    def _make(passed: bool, critical_fails=None, actions=None, pct=None):
        return SampleResult(
            pct=pct if pct is not None else (100 if passed else 50),
            passed=passed,
            critical_fails=list(critical_fails or []),
            action_needed=list(actions or []),
        )

    return _make


@pytest.fixture
def make_session(make_result):
    """Build a complete AuditSession from a list of pass/fail flags."""

    def _make(
        outcomes,
        audit_date=TODAY,
        template_id="test_hand_hygiene",
        title="Hand Hygiene",
        unit="Unit A",
        status="complete",
        session_id="s1",
        staff=None,
        criticals=None,
    ):
        criticals = criticals or {}
        samples = []
        for idx, passed in enumerate(outcomes):
            samples.append(
                {
                    "id": f"{session_id}-smp{idx}",
                    "answers": {},
                    "staffAudited": staff[idx] if staff else None,
                    "result": make_result(passed, criticals.get(idx)).model_dump(by_alias=True),
                }
            )
        return AuditSession.model_validate(
            {
                "id": session_id,
                "templateId": template_id,
                "templateTitle": title,
                "createdAt": f"{audit_date}T09:00:00Z",
                "header": {"status": status, "auditDate": audit_date, "unit": unit, "sessionId": session_id},
                "samples": samples,
            }
        )

    return _make


@pytest.fixture
def make_action():
    """Build a QaAction with sensible defaults; override any field by name."""

    def _make(**overrides):
        fields = {
            "id": "qa_1",
            "createdAt": f"{TODAY}T10:00:00Z",
            "status": "open",
            "templateId": "test_hand_hygiene",
            "templateTitle": "Hand Hygiene",
            "unit": "Unit A",
            "auditDate": TODAY,
            "issue": "Performed hand hygiene",
            "dueDate": "2024-03-29",
        }
        fields.update(overrides)
        return QaAction.model_validate(fields)

    return _make


@pytest.fixture
def make_education():
    def _make(**overrides):
        fields = {
            "id": "edu_1",
            "status": "completed",
            "topic": "Hand hygiene refresher",
            "completedDate": TODAY,
            "attendees": [],
        }
        fields.update(overrides)
        return EducationSession.model_validate(fields)

    return _make
