"""
Tests for report API endpoints.
"""

import pytest


def post_entry(client, kind, amount, customer, occurred_on):
    payload = {
        "customer_name": customer,
        "occurred_on": occurred_on,
        "kind": kind,
        "amount": amount,
    }
    if kind == "sales":
        payload["deposit_due_on"] = occurred_on
    else:
        payload["payment_date"] = occurred_on
    response = client.post("/entries", json=payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def seeded_client(client):
    post_entry(client, "sales", 100000, "A", "2024-01-10")
    post_entry(client, "cost", 40000, "A", "2024-01-12")
    post_entry(client, "sales", 50000, "B", "2024-02-01")
    return client


class TestGetReport:

    def test_default_report_groups_by_customer(self, seeded_client):
        response = seeded_client.get("/reports")
        assert response.status_code == 200

        data = response.json()
        assert data["view"] == "customer"
        assert data["title"] == "取引先ごと"
        assert data["label_title"] == "取引先名"
        assert data["entry_count"] == 3
        assert [(r["label"], r["count"]) for r in data["rows"]] == [("A", 2), ("B", 1)]
        assert data["rows"][0]["profit_display"] == "￥60,000"

    def test_summary_values_and_display(self, seeded_client):
        summary = seeded_client.get("/reports").json()["summary"]
        assert float(summary["sales"]) == 150000.0
        assert float(summary["cost"]) == 40000.0
        assert float(summary["profit"]) == 110000.0
        assert float(summary["margin"]) == pytest.approx(0.7333, abs=1e-4)
        assert summary["sales_display"] == "￥150,000"
        assert summary["margin_display"] == "73.3%"

    def test_date_filter(self, seeded_client):
        data = seeded_client.get(
            "/reports", params={"start": "2024-02-01", "end": "2024-02-29"}
        ).json()
        assert data["entry_count"] == 1
        assert data["summary"]["margin_display"] == "100.0%"
        assert data["filters"]["start"] == "2024-02-01"

    def test_end_before_start_returns_400(self, seeded_client):
        response = seeded_client.get(
            "/reports", params={"start": "2024-03-01", "end": "2024-02-01"}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "終了日は開始日以降を指定してください。"

    def test_weekly_period_view(self, seeded_client):
        data = seeded_client.get(
            "/reports", params={"view": "period", "period_grouping": "week"}
        ).json()
        assert data["label_title"] == "週"
        assert [r["label"] for r in data["rows"]] == ["2024-01-08 週", "2024-01-29 週"]

    def test_amount_range_filter_and_view(self, seeded_client):
        data = seeded_client.get(
            "/reports",
            params={"view": "amount-range", "amount_range": "under-100k"},
        ).json()
        assert [(r["label"], r["count"]) for r in data["rows"]] == [("10万円未満", 2)]

    def test_kind_and_customer_filters(self, seeded_client):
        data = seeded_client.get(
            "/reports", params={"entry_kind": "cost", "customer": "A"}
        ).json()
        assert data["entry_count"] == 1
        assert data["summary"]["margin_display"] == "0.0%"
        assert data["summary"]["profit_display"] == "-￥40,000"

    def test_empty_ledger(self, client):
        data = client.get("/reports").json()
        assert data["rows"] == []
        assert float(data["summary"]["margin"]) == 0.0

    def test_unknown_view_returns_422(self, client):
        response = client.get("/reports", params={"view": "by-color"})
        assert response.status_code == 422

    def test_unknown_entry_kind_returns_422(self, seeded_client):
        response = seeded_client.get("/reports", params={"entry_kind": "refund"})
        assert response.status_code == 422

    def test_all_entry_kinds_echoed_back(self, seeded_client):
        data = seeded_client.get("/reports", params={"entry_kind": "all"}).json()
        assert data["filters"]["entry_kind"] == "all"
        assert data["entry_count"] == 3


class TestAmountRanges:

    def test_lists_all_brackets_in_order(self, client):
        data = client.get("/reports/amount-ranges").json()
        assert [b["id"] for b in data] == [
            "all", "under-100k", "100k-300k", "300k-500k", "500k-plus",
        ]
        assert data[0]["max"] is None
        assert float(data[1]["max"]) == 99999.0
