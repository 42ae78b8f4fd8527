"""Tests for /api/v1/qa endpoints and the service-level routes."""

from __future__ import annotations

from auditqa.api.v1.qa import router
from auditqa.main import app
from fastapi import FastAPI
from fastapi.testclient import TestClient

TODAY = "2024-03-15"


def _client():
    test_app = FastAPI()
    test_app.include_router(router)
    return TestClient(test_app)


def _action(action_id="qa_1", **overrides):
    action = {
        "id": action_id,
        "createdAt": f"{TODAY}T10:00:00Z",
        "status": "open",
        "unit": "Unit A",
        "auditDate": TODAY,
        "issue": "Performed hand hygiene",
        "dueDate": "2024-03-29",
    }
    action.update(overrides)
    return action


class TestDueStatus:
    def test_overdue(self):
        resp = _client().post("/api/v1/qa/due-status", json={"today": TODAY, "dueDate": "2024-03-10"})
        assert resp.status_code == 200
        assert resp.json() == {"status": "overdue", "daysUntil": -5, "isOverdue": True}

    def test_due_soon_window_override(self):
        body = {"today": TODAY, "dueDate": "2024-03-20", "dueSoonDays": 3}
        assert _client().post("/api/v1/qa/due-status", json=body).json()["status"] == "upcoming"

    def test_bad_date_rejected(self):
        resp = _client().post("/api/v1/qa/due-status", json={"today": "yesterday", "dueDate": TODAY})
        assert resp.status_code == 422


class TestClosureAndEscalation:
    def test_closure_check(self):
        action = _action(ev_policyReviewed=True, ev_correctiveAction=True)
        data = _client().post("/api/v1/qa/closure-check", json={"action": action}).json()
        assert data == {"canClose": True, "errors": [], "warnings": []}

    def test_closure_blocked(self):
        data = _client().post("/api/v1/qa/closure-check", json={"action": _action()}).json()
        assert data["canClose"] is False

    def test_escalations(self):
        actions = [_action(caseId="CASE-1", createdAt="2024-03-01T00:00:00Z")]
        data = _client().post("/api/v1/qa/escalations", json={"actions": actions, "today": TODAY}).json()
        assert [e["type"] for e in data] == ["stale_case"]
        assert data[0]["caseId"] == "CASE-1"


class TestBundle:
    def test_bundle(self):
        body = {
            "templateId": "test_hand_hygiene",
            "templateTitle": "Hand Hygiene",
            "findingLabel": "Gloves not removed",
            "severity": "high",
            "unit": "Unit A",
        }
        resp = _client().post("/api/v1/qa/bundle", json=body)
        assert resp.status_code == 200
        data = resp.json()
        assert data["qaAction"]["caseId"] == data["caseId"]
        assert data["qaAction"]["linkedEduSessionId"] == data["educationDraft"]["id"]
        assert data["educationDraft"]["linkedQaActionId"] == data["qaAction"]["id"]
        assert data["reAuditDueDate"] == data["qaAction"]["dueDate"]

    def test_unknown_severity_rejected(self):
        body = {"templateId": "t", "templateTitle": "T", "findingLabel": "F", "severity": "urgent"}
        assert _client().post("/api/v1/qa/bundle", json=body).status_code == 422


class TestCompetenciesDuplicatesDictionaries:
    def test_competencies(self):
        data = _client().post("/api/v1/qa/competencies", json={"issue": "hand hygiene not performed", "limit": 3}).json()
        assert 0 < len(data["competencies"]) <= 3
        assert data["notes"].startswith("📋 RECOMMENDED COMPETENCY VALIDATION")

    def test_competencies_requires_issue(self):
        assert _client().post("/api/v1/qa/competencies", json={"issue": ""}).status_code == 422

    def test_regulatory_category(self):
        body = {"topic": "Isolation precautions refresher", "ftags": "F-880, F 881"}
        data = _client().post("/api/v1/qa/regulatory-category", json=body).json()
        assert data["category"] == "Infection Prevention & Control"
        assert data["citedFtags"] == ["F880", "F881"]
        assert data["categoryFtags"][0] == "F880"

    def test_regulatory_category_fallback(self):
        data = _client().post("/api/v1/qa/regulatory-category", json={"topic": "Weekly huddle"}).json()
        assert data["category"] == "Nursing Services"
        assert data["citedFtags"] == []
        assert "F720" in data["categoryFtags"]

    def test_duplicate(self):
        body = {"action": _action("new"), "existing": [_action("old", auditDate="2024-03-12")], "today": TODAY}
        assert _client().post("/api/v1/qa/duplicate", json=body).json()["duplicate"]["id"] == "old"

    def test_no_duplicate(self):
        body = {"action": _action("new"), "existing": [], "today": TODAY}
        assert _client().post("/api/v1/qa/duplicate", json=body).json() == {"duplicate": None}

    def test_dictionaries(self):
        body = {
            "actions": [_action(owner="Jane"), _action("b", unit="unit a", owner="jane")],
            "eduSessions": [{"id": "e", "unit": "Unit C", "instructor": "IP Nurse", "topic": "PPE"}],
        }
        data = _client().post("/api/v1/qa/dictionaries", json=body).json()
        assert data["units"] == ["Unit A", "Unit C"]
        assert data["owners"] == ["IP Nurse", "Jane"]
        assert data["staffRoles"] == []


class TestServiceRoutes:
    def test_health(self):
        resp = TestClient(app).get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["checks"]["competency_library"]["status"] == "ok"
        assert "due_soon_days=" in data["checks"]["settings"]["detail"]

    def test_root(self):
        data = TestClient(app).get("/").json()
        assert data["name"] == "AuditQA"
        assert data["status"] == "running"
