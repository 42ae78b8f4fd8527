"""Tests for /api/v1/reports endpoints."""

from __future__ import annotations

from auditqa.api.v1.reports import router
from fastapi import FastAPI
from fastapi.testclient import TestClient

TODAY = "2024-03-15"


def _client():
    test_app = FastAPI()
    test_app.include_router(router)
    return TestClient(test_app)


def _ic_session(outcomes, audit_date="2024-03-10"):
    return {
        "id": f"hh-{audit_date}",
        "templateId": "test_hand_hygiene",
        "templateTitle": "Hand Hygiene",
        "header": {"status": "complete", "auditDate": audit_date, "unit": "Unit A"},
        "samples": [{"id": str(i), "result": {"pct": 100 if ok else 0, "pass": ok}} for i, ok in enumerate(outcomes)],
    }


class TestICReportEndpoint:
    def test_empty_month_still_has_reminders(self):
        resp = _client().post("/api/v1/reports/ic", json={"today": TODAY})
        assert resp.status_code == 200
        data = resp.json()
        assert data["summary"]["complianceRate"] == 0
        assert data["summary"]["totalSamples"] == 0
        assert len(data["recommendations"]) >= 2
        assert data["period"]["label"] == "March 2024"

    def test_report_over_dataset(self, hand_hygiene_raw):
        body = {
            "sessions": [_ic_session([True, True, True, True]), _ic_session([True], audit_date="2024-02-20")],
            "qaActions": [],
            "eduSessions": [],
            "templates": [hand_hygiene_raw],
            "today": TODAY,
        }
        data = _client().post("/api/v1/reports/ic", json=body).json()
        assert data["summary"]["totalAudits"] == 1
        assert data["summary"]["complianceRate"] == 100
        assert data["byFTag"][0]["ftag"] == "F880"
        assert data["byFTag"][0]["status"] == "compliant"
        assert data["recommendations"][0].startswith("Excellent IC compliance")
        assert data["education"]["linkedToQA"] == 0

    def test_invalid_templates_skipped(self, hand_hygiene_raw):
        body = {
            "sessions": [_ic_session([True])],
            "templates": [{"id": "broken", "passingThreshold": 500}, hand_hygiene_raw],
            "today": TODAY,
        }
        resp = _client().post("/api/v1/reports/ic", json=body)
        assert resp.status_code == 200
        assert resp.json()["summary"]["totalSamples"] == 1

    def test_validation(self):
        assert _client().post("/api/v1/reports/ic", json={"monthsBack": 30}).status_code == 422
        assert _client().post("/api/v1/reports/ic", json={"today": "03/15/2024"}).status_code == 422

    def test_months_back(self):
        data = _client().post("/api/v1/reports/ic", json={"today": TODAY, "monthsBack": 2}).json()
        assert data["period"]["label"] == "January 2024"
