"""
Tests for the score and score breakdown endpoints.
"""

import pytest

from backend import config
from conftest import COMPANY


class TestScoreEndpoint:
    def test_requires_company(self, client):
        resp = client.get("/api/score")
        assert resp.status_code == 404
        assert resp.json()["message"] == "Company not found"

    def test_new_company_scores_revenue_only(self, client, company):
        resp = client.get("/api/score")
        assert resp.status_code == 200
        assert resp.json() == {
            "success": True,
            "data": {"score": 12, "reasons": ["Revenue scaled to $500,000"]},
        }

    def test_full_onboarding_reaches_100(self, client, upload):
        client.post("/api/company", json={**COMPANY, "revenue": 1_000_000})
        client.post("/api/kyc/verify", json={})
        client.post("/api/financials/link", json={"token": "tok"})
        for name in ("deck.pdf", "model.pdf", "cap-table.pdf"):
            assert upload(name=name).status_code == 200

        data = client.get("/api/score").json()["data"]
        assert data["score"] == 100
        assert data["reasons"] == [
            "KYC verified",
            "Financials linked",
            "3 docs uploaded",
            "Revenue scaled to $1,000,000",
        ]

    def test_deleting_a_document_lowers_score(self, client, company, upload):
        ids = [upload(name=f"{i}.pdf").json()["data"]["id"] for i in range(3)]
        assert client.get("/api/score").json()["data"]["score"] == 12 + 25

        client.delete(f"/api/files/{ids[0]}")
        data = client.get("/api/score").json()["data"]
        assert data["score"] == 12 + 16
        assert "2 docs uploaded (need 3+ for full points)" in data["reasons"]


class TestBreakdownEndpoint:
    def test_shape(self, client, company, upload):
        upload()
        data = client.get("/api/score/breakdown").json()["data"]
        assert list(data) == ["kycVerified", "financialsLinked", "documents", "revenue"]
        assert data["kycVerified"] == {
            "status": False,
            "points": 0,
            "maxPoints": 30,
            "description": "Complete KYC verification",
        }
        assert data["documents"] == {
            "status": False,
            "points": 8,
            "maxPoints": 25,
            "description": "Upload at least 3 documents",
            "current": 1,
            "required": 3,
        }
        assert data["revenue"]["max"] == 1_000_000
        assert data["revenue"]["current"] == 500_000
        assert data["revenue"]["points"] == 12

    def test_points_match_score(self, client, company, upload):
        client.post("/api/kyc/verify", json={})
        upload()
        upload(name="second.pdf")
        score = client.get("/api/score").json()["data"]["score"]
        breakdown = client.get("/api/score/breakdown").json()["data"]
        assert sum(c["points"] for c in breakdown.values()) == score

    def test_legacy_mode(self, client, company, upload, monkeypatch):
        monkeypatch.setattr(config, "SCORE_BREAKDOWN_LEGACY", True)
        upload()
        data = client.get("/api/score/breakdown").json()["data"]
        assert data["documents"]["points"] == pytest.approx(8.33)
        assert data["revenue"]["points"] == pytest.approx(12.5)
