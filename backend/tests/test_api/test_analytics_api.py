"""Tests for /api/v1/analytics endpoints."""

from __future__ import annotations

from auditqa.api.v1.analytics import router
from fastapi import FastAPI
from fastapi.testclient import TestClient

TODAY = "2024-03-15"


def _client():
    test_app = FastAPI()
    test_app.include_router(router)
    return TestClient(test_app)


def _session(session_id, outcomes, audit_date="2024-03-14", unit="Unit A", title="Hand Hygiene", status="complete"):
    return {
        "id": session_id,
        "templateId": "test_hand_hygiene",
        "templateTitle": title,
        "createdAt": f"{audit_date}T09:00:00Z",
        "header": {"status": status, "auditDate": audit_date, "unit": unit},
        "samples": [
            {
                "id": f"{session_id}-{i}",
                "staffAudited": "Alice",
                "result": {"pct": 100 if ok else 0, "pass": ok, "criticalFails": [] if ok else ["performed_hygiene"]},
            }
            for i, ok in enumerate(outcomes)
        ],
    }


def _action(action_id, **overrides):
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


class TestSummary:
    def test_summary_with_status(self):
        sessions = [
            _session("s1", [True, True, True]),
            _session("s2", [False], unit="Unit B"),
            _session("s3", [False, False], status="in_progress"),
        ]
        resp = _client().post("/api/v1/analytics/summary", json={"sessions": sessions})
        assert resp.status_code == 200
        data = resp.json()
        assert data["samples"] == 4
        assert data["compliance"] == 75
        assert data["status"] == "warning"
        assert data["criticalFails"] == 1
        assert data["byUnit"][0] == {"unit": "Unit B", "total": 1, "pass": 0, "rate": 0}

    def test_empty(self):
        data = _client().post("/api/v1/analytics/summary", json={}).json()
        assert data["samples"] == 0
        assert data["status"] == "error"

    def test_negative_days_rejected(self):
        resp = _client().post("/api/v1/analytics/summary", json={"sessions": [], "daysAgo": -1})
        assert resp.status_code == 422


class TestTrendAndHeatmap:
    def test_trend(self):
        sessions = [
            _session("s1", [True, False], audit_date="2024-01-01"),
            _session("s2", [True], audit_date="2024-01-02"),
        ]
        data = _client().post("/api/v1/analytics/trend", json={"sessions": sessions}).json()
        assert [(p["date"], p["samples"], p["compliance"]) for p in data] == [
            ("2024-01-01", 2, 50),
            ("2024-01-02", 1, 100),
        ]

    def test_heatmap(self):
        sessions = [_session("s1", [True, False], unit="Unit B"), _session("s2", [True], unit="Unit A")]
        data = _client().post("/api/v1/analytics/heatmap", json={"sessions": sessions}).json()
        assert data["units"] == ["Unit A", "Unit B"]
        assert data["data"]["Hand Hygiene"]["Unit B"]["rate"] == 50


class TestClosedLoop:
    def test_stats_skip_deleted(self):
        actions = [
            _action("a", dueDate="2024-03-01"),
            _action("b", status="complete", completedAt="2024-03-18T00:00:00Z"),
            _action("c", deletedAt="2024-03-14T00:00:00Z"),
        ]
        data = _client().post("/api/v1/analytics/closed-loop", json={"actions": actions, "today": TODAY}).json()
        assert data["total"] == 2
        assert data["overdueCount"] == 1
        assert data["closureRate"] == 50
        assert data["byOwner"]["Unassigned"]["open"] == 1


class TestStaffAndRecurring:
    def test_staff_performance(self):
        body = {
            "sessions": [_session("s1", [True, False])],
            "actions": [_action("a", staffAudited="Alice")],
            "education": [{"id": "e1", "status": "completed", "completedDate": TODAY, "attendees": ["Alice"]}],
            "dateFrom": "2024-03-01",
            "dateTo": "2024-03-31",
        }
        data = _client().post("/api/v1/analytics/staff-performance", json=body).json()
        assert len(data) == 1
        row = data[0]
        assert row["staffName"] == "Alice"
        assert row["audits"] == 2
        assert row["passRate"] == 50
        assert row["educationSessions"] == 1
        assert row["trendMethod"] == "single_period_pass_rate"

    def test_recurring_issues(self):
        actions = [_action(f"x{i}", issue="X") for i in range(3)] + [_action("y", issue="Y")]
        data = _client().post("/api/v1/analytics/recurring-issues", json={"actions": actions, "today": TODAY}).json()
        assert [a["id"] for a in data] == ["x0", "x1", "x2"]


class TestEducation:
    def test_education_summary(self):
        sessions = [
            {"id": "1", "status": "completed", "topic": "Hand hygiene", "completedDate": TODAY},
            {"id": "2", "status": "planned", "topic": "Falls", "scheduledDate": TODAY},
        ]
        data = _client().post("/api/v1/analytics/education", json={"sessions": sessions}).json()
        assert data["count"] == 1
        assert data["byCategory"] == {"Infection Prevention": 1}
        assert data["topTopics"] == [{"topic": "Hand hygiene", "count": 1}]
