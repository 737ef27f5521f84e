"""Integration tests for the dashboard stats endpoints.

Entries are made through the quick entry endpoint so they fall in the
current month and week.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest


@pytest.fixture
def seeded(test_client, api_v1_prefix, auth_headers):
    for amount, category, kind in [
        ("1000.00", "Salary", "INCOME"),
        ("250.00", "Food", "EXPENSE"),
        ("50.00", "Bus", "EXPENSE"),
    ]:
        response = test_client.post(
            f"{api_v1_prefix}/transactions/quick",
            json={"amount": amount, "category": category, "type": kind},
            headers=auth_headers,
        )
        assert response.status_code == 201


@pytest.mark.integration
class TestStats:
    def test_monthly_summary(self, test_client, api_v1_prefix, auth_headers, seeded):
        body = test_client.get(f"{api_v1_prefix}/stats", headers=auth_headers).json()

        monthly = body["monthly"]
        assert Decimal(monthly["income"]) == Decimal("1000.00")
        assert Decimal(monthly["expenses"]) == Decimal("300.00")
        assert Decimal(monthly["available"]) == Decimal("700.00")
        assert monthly["spent_percentage"] == 30
        assert monthly["transaction_count"] == {"income": 1, "expenses": 2}
        assert Decimal(body["weekly"]["expenses"]) == Decimal("300.00")

    def test_category_breakdown(self, test_client, api_v1_prefix, auth_headers, seeded):
        categories = test_client.get(
            f"{api_v1_prefix}/stats",
            headers=auth_headers,
        ).json()["categories"]

        assert [(c["category"], c["count"], c["percentage"]) for c in categories] == [
            ("Food", 1, 83),
            ("Bus", 1, 17),
        ]

    def test_empty_dashboard(self, test_client, api_v1_prefix, auth_headers):
        body = test_client.get(f"{api_v1_prefix}/stats", headers=auth_headers).json()

        assert Decimal(body["monthly"]["income"]) == 0
        assert body["monthly"]["spent_percentage"] == 0
        assert body["categories"] == []

    def test_stats_are_per_user(
        self,
        test_client,
        api_v1_prefix,
        other_auth_headers,
        seeded,
    ):
        body = test_client.get(
            f"{api_v1_prefix}/stats",
            headers=other_auth_headers,
        ).json()

        assert Decimal(body["monthly"]["expenses"]) == 0


@pytest.mark.integration
class TestTrend:
    def test_current_month_point(self, test_client, api_v1_prefix, auth_headers, seeded):
        body = test_client.get(
            f"{api_v1_prefix}/stats/trend",
            headers=auth_headers,
        ).json()

        current = datetime.now(tz=timezone.utc).strftime("%Y-%m")
        assert [point["month"] for point in body["trend"]] == [current]
        point = body["trend"][0]
        assert Decimal(point["income"]) == Decimal("1000.00")
        assert Decimal(point["expenses"]) == Decimal("300.00")
        assert Decimal(point["savings"]) == Decimal("700.00")

    def test_empty_trend(self, test_client, api_v1_prefix, auth_headers):
        body = test_client.get(
            f"{api_v1_prefix}/stats/trend",
            headers=auth_headers,
        ).json()

        assert body == {"trend": []}
