"""
Tests for the wedding planning workbook API.
"""
import pytest

from conftest import API


@pytest.fixture
def planning(client, customer_headers):
    resp = client.post(
        f"{API}/planning",
        json={"title": "Nimali & Kasun", "totalBudget": 2500000, "weddingDate": "2026-12-12T00:00:00Z"},
        headers=customer_headers,
    )
    assert resp.status_code == 201
    return resp.json()


class TestWorkbook:

    def test_create_defaults(self, planning):
        assert planning["currency"] == "LKR"
        assert planning["progress"] == {"budget": 0, "guests": 0, "timeline": 0, "checklist": 0}
        assert planning["budgetItems"] == []

    def test_only_one_per_user(self, client, planning, customer_headers):
        resp = client.post(f"{API}/planning", json={}, headers=customer_headers)
        assert resp.status_code == 403

    def test_missing_workbook(self, client, customer_headers):
        assert client.get(f"{API}/planning", headers=customer_headers).status_code == 404

    def test_update_fields(self, client, planning, customer_headers):
        resp = client.patch(f"{API}/planning", json={"venue": "Galle Face Hotel"}, headers=customer_headers)
        assert resp.json()["venue"] == "Galle Face Hotel"
        assert resp.json()["title"] == "Nimali & Kasun"

    def test_null_title_rejected(self, client, planning, customer_headers):
        resp = client.patch(f"{API}/planning", json={"title": None}, headers=customer_headers)
        assert resp.status_code == 422
        assert client.get(f"{API}/planning", headers=customer_headers).json()["title"] == "Nimali & Kasun"

    def test_delete_then_recreate_starts_empty(self, client, planning, customer_headers):
        client.post(
            f"{API}/planning/guests", json={"guests": [{"name": "Amma"}]}, headers=customer_headers
        )
        assert client.delete(f"{API}/planning", headers=customer_headers).status_code == 200
        assert client.get(f"{API}/planning", headers=customer_headers).status_code == 404

        resp = client.post(f"{API}/planning", json={"title": "Second try"}, headers=customer_headers)
        assert resp.status_code == 201
        assert resp.json()["id"] == planning["id"]
        assert resp.json()["title"] == "Second try"
        assert resp.json()["guests"] == []


class TestSections:

    def test_budget_progress_follows_paid_items(self, client, planning, customer_headers):
        resp = client.post(
            f"{API}/planning/budget",
            json={
                "items": [
                    {"category": "venue", "name": "Hall", "estimatedCost": 900000, "isPaid": True},
                    {"category": "photography", "name": "Lens Studio", "estimatedCost": 300000},
                    {"category": "attire", "name": "Saree", "estimatedCost": 150000},
                ]
            },
            headers=customer_headers,
        )
        body = resp.json()
        assert len(body["budgetItems"]) == 3
        assert body["progress"]["budget"] == 33

        saree_id = body["budgetItems"][2]["id"]
        body = client.patch(
            f"{API}/planning/budget/{saree_id}", json={"isPaid": True}, headers=customer_headers
        ).json()
        assert body["progress"]["budget"] == 67

        body = client.delete(f"{API}/planning/budget/{saree_id}", headers=customer_headers).json()
        assert body["progress"]["budget"] == 50

    def test_null_item_flag_rejected(self, client, planning, customer_headers):
        body = client.post(
            f"{API}/planning/budget",
            json={"items": [{"category": "venue", "name": "Hall", "estimatedCost": 900000}]},
            headers=customer_headers,
        ).json()
        item_id = body["budgetItems"][0]["id"]

        resp = client.patch(f"{API}/planning/budget/{item_id}", json={"isPaid": None}, headers=customer_headers)
        assert resp.status_code == 422

    def test_guest_confirmation_progress(self, client, planning, customer_headers):
        body = client.post(
            f"{API}/planning/guests",
            json={"guests": [{"name": "Amma", "rsvpStatus": "confirmed"}, {"name": "Thaththa"}]},
            headers=customer_headers,
        ).json()
        assert body["progress"]["guests"] == 50
        assert body["guests"][1]["rsvpStatus"] == "pending"

    def test_checklist_completion_timestamp(self, client, planning, customer_headers):
        body = client.post(
            f"{API}/planning/checklist", json={"items": [{"task": "Book poruwa"}]}, headers=customer_headers
        ).json()
        item_id = body["checklist"][0]["id"]
        assert body["checklist"][0]["completedAt"] is None

        done = client.patch(
            f"{API}/planning/checklist/{item_id}", json={"isCompleted": True}, headers=customer_headers
        ).json()
        assert done["checklist"][0]["completedAt"] is not None
        assert done["progress"]["checklist"] == 100

        undone = client.patch(
            f"{API}/planning/checklist/{item_id}", json={"isCompleted": False}, headers=customer_headers
        ).json()
        assert undone["checklist"][0]["completedAt"] is None
        assert undone["progress"]["checklist"] == 0

    def test_remove_missing_item(self, client, planning, customer_headers):
        resp = client.delete(f"{API}/planning/timeline/999", headers=customer_headers)
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Timeline item not found"

    def test_planned_vendors_by_position(self, client, planning, customer_headers):
        client.post(f"{API}/planning/vendors", json={"name": "Lens Studio"}, headers=customer_headers)
        client.post(f"{API}/planning/vendors", json={"name": "Cake Co"}, headers=customer_headers)

        body = client.patch(
            f"{API}/planning/vendors/1", json={"quotedPrice": 45000}, headers=customer_headers
        ).json()
        assert body["vendors"][1] == {"name": "Cake Co", "quotedPrice": 45000}

        body = client.delete(f"{API}/planning/vendors/0", headers=customer_headers).json()
        assert [v["name"] for v in body["vendors"]] == ["Cake Co"]

        assert client.delete(f"{API}/planning/vendors/5", headers=customer_headers).status_code == 404


class TestStatsAndExport:

    def test_stats(self, client, planning, customer_headers):
        client.post(
            f"{API}/planning/budget",
            json={"items": [{"category": "venue", "name": "Hall", "estimatedCost": 1000, "actualCost": 400}]},
            headers=customer_headers,
        )
        client.post(
            f"{API}/planning/timeline",
            json={
                "items": [
                    {"title": "Send invites", "status": "completed"},
                    {"title": "Dress fitting", "dueDate": "2020-01-01T00:00:00Z"},
                ]
            },
            headers=customer_headers,
        )
        stats = client.get(f"{API}/planning/stats", headers=customer_headers).json()
        assert stats["budget"]["remaining"] == 600
        assert stats["timeline"]["completed"] == 1
        assert stats["timeline"]["overdue"] == 1
        assert stats["timeline"]["progress"] == 50
        # (0 + 0 + 50 + 0) / 4
        assert stats["overallProgress"] == 13

    def test_csv_export(self, client, planning, customer_headers):
        client.post(
            f"{API}/planning/budget",
            json={"items": [{"category": "venue", "name": "Hall", "estimatedCost": 1000, "isPaid": True}]},
            headers=customer_headers,
        )
        resp = client.get(f"{API}/planning/export", params={"format": "csv"}, headers=customer_headers)
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        lines = resp.text.strip().splitlines()
        assert lines[0] == "Category,Item,Estimated Cost,Actual Cost,Status"
        assert lines[1] == "venue,Hall,1000.0,0,Paid"
