"""
Tests for the plan catalog and subscription upgrades.
"""
from datetime import datetime, timezone

import pytest

from vahub.api.routes.subscription_routes import add_one_month


class TestPlans:

    def test_catalog_ordered_by_price(self, client):
        plans = client.get("/api/plans").json()
        assert [p["id"] for p in plans] == ["free-plan", "pro-plan", "premium-plan"]
        premium = plans[2]
        assert premium["name"] == "PREMIUM"
        assert premium["price"] == 39
        assert premium["job_post_limit"] == 10
        assert premium["featured_jobs_limit"] == 2


class TestSubscriptions:

    def test_default_is_free(self, client):
        sub = client.get("/api/subscriptions", params={"employer_id": "employer-demo-1"}).json()
        assert sub["plan_name"] == "Free"
        assert sub["job_post_limit"] == 3
        assert sub["id"] is None

    def test_upgrade_creates_one_active_row_a_month_ahead(self, client, database):
        response = client.post("/api/subscriptions/upgrade",
                               json={"employer_id": "employer-demo-1", "plan_id": "pro-plan"})
        assert response.status_code == 200
        assert response.json()["success"] is True

        rows = database.execute_raw_sql(
            "SELECT * FROM subscriptions WHERE employer_id = :eid", {"eid": "employer-demo-1"}
        )
        assert len(rows) == 1
        assert rows[0]["status"] == "active"
        assert rows[0]["plan_id"] == "pro-plan"
        period_end = datetime.fromisoformat(rows[0]["current_period_end"])
        days_ahead = (period_end - datetime.now(timezone.utc).replace(tzinfo=None)).days
        assert 27 <= days_ahead <= 31

        sub = client.get("/api/subscriptions", params={"employer_id": "employer-demo-1"}).json()
        assert sub["plan_name"] == "PRO"
        assert sub["price"] == 29
        assert sub["messaging_limit"] == 75

    def test_second_upgrade_replaces_first(self, client, database):
        for plan_id in ("pro-plan", "premium-plan"):
            client.post("/api/subscriptions", json={"employer_id": "employer-demo-1", "plan_id": plan_id})
        rows = database.execute_raw_sql("SELECT plan_id FROM subscriptions")
        assert rows == [{"plan_id": "premium-plan"}]

    def test_unknown_plan_is_404_and_keeps_existing(self, client, database):
        client.post("/api/subscriptions/upgrade", json={"employer_id": "employer-demo-1", "plan_id": "pro-plan"})
        response = client.post("/api/subscriptions/upgrade",
                               json={"employer_id": "employer-demo-1", "plan_id": "pro"})
        assert response.status_code == 404
        assert response.json()["detail"] == "Plan not found"
        assert database.execute_raw_sql("SELECT plan_id FROM subscriptions") == [{"plan_id": "pro-plan"}]


class TestAddOneMonth:
    """Period end is the same day next month, clamped."""

    @pytest.mark.parametrize("start,expected", [
        (datetime(2025, 3, 15, 9, 30), datetime(2025, 4, 15, 9, 30)),
        (datetime(2025, 1, 31), datetime(2025, 2, 28)),
        (datetime(2024, 1, 31), datetime(2024, 2, 29)),
        (datetime(2025, 8, 31), datetime(2025, 9, 30)),
        (datetime(2025, 12, 20), datetime(2026, 1, 20)),
    ])
    def test_add_one_month(self, start, expected):
        assert add_one_month(start) == expected
