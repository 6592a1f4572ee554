"""
Tests for vendor profiles, public search and the approval workflow.
"""
from conftest import API, make_user, make_vendor


def _create_payload(**overrides):
    payload = {
        "businessName": "Golden Petals",
        "categories": ["flowers", "decoration"],
        "district": "Gampaha",
        "phone": "0712345678",
        "priceMin": 25000,
    }
    payload.update(overrides)
    return payload


class TestCreateVendor:

    def test_vendor_profile_starts_pending(self, client, vendor_headers):
        resp = client.post(f"{API}/vendors", json=_create_payload(), headers=vendor_headers)
        assert resp.status_code == 201
        body = resp.json()
        assert body["status"] == "pending"
        assert body["rating"] == 0.0
        assert body["reviewCount"] == 0
        assert body["phone"] == "+94712345678"

    def test_customer_cannot_create(self, client, customer_headers):
        resp = client.post(f"{API}/vendors", json=_create_payload(), headers=customer_headers)
        assert resp.status_code == 403

    def test_one_profile_per_user(self, client, vendor_headers):
        assert client.post(f"{API}/vendors", json=_create_payload(), headers=vendor_headers).status_code == 201
        resp = client.post(f"{API}/vendors", json=_create_payload(), headers=vendor_headers)
        assert resp.status_code == 400

    def test_unknown_category_rejected(self, client, vendor_headers):
        resp = client.post(f"{API}/vendors", json=_create_payload(categories=["fireworks"]), headers=vendor_headers)
        assert resp.status_code == 422


class TestPublicSearch:

    def test_only_approved_vendors_listed(self, client, db, vendor):
        pending_owner = make_user(db, "pending@example.com", "Pending Owner", role="vendor")
        make_vendor(db, pending_owner, "Pending Cakes", status="pending", categories=["cakes"])

        resp = client.get(f"{API}/vendors")
        assert resp.status_code == 200
        body = resp.json()
        assert body["total"] == 1
        assert body["vendors"][0]["businessName"] == "Lens Studio"
        assert body["totalPages"] == 1

    def test_filter_by_category(self, client, db, vendor):
        owner = make_user(db, "cakes@example.com", "Cake Owner", role="vendor")
        make_vendor(db, owner, "Sweet Tiers", categories=["cakes"])

        resp = client.get(f"{API}/vendors", params={"categories": ["cakes"]})
        names = [v["businessName"] for v in resp.json()["vendors"]]
        assert names == ["Sweet Tiers"]

    def test_get_vendor_counts_views(self, client, vendor):
        client.get(f"{API}/vendors/{vendor.id}")
        resp = client.get(f"{API}/vendors/{vendor.id}")
        assert resp.json()["viewCount"] == 2

    def test_missing_vendor(self, client):
        assert client.get(f"{API}/vendors/999").status_code == 404


class TestOwnership:

    def test_owner_can_update(self, client, vendor, vendor_headers):
        resp = client.patch(
            f"{API}/vendors/{vendor.id}", json={"businessDescription": "Candid photography"}, headers=vendor_headers
        )
        assert resp.status_code == 200
        assert resp.json()["businessDescription"] == "Candid photography"

    def test_null_business_name_rejected(self, client, vendor, vendor_headers):
        resp = client.patch(f"{API}/vendors/{vendor.id}", json={"businessName": None}, headers=vendor_headers)
        assert resp.status_code == 422
        assert client.get(f"{API}/vendors/{vendor.id}").json()["businessName"] == "Lens Studio"

    def test_null_clears_optional_field(self, client, vendor, vendor_headers):
        client.patch(f"{API}/vendors/{vendor.id}", json={"businessDescription": "Candid"}, headers=vendor_headers)
        resp = client.patch(f"{API}/vendors/{vendor.id}", json={"businessDescription": None}, headers=vendor_headers)
        assert resp.status_code == 200
        assert resp.json()["businessDescription"] is None

    def test_other_vendor_cannot_update(self, client, db, vendor):
        from app.security_utils import create_user_token

        intruder = make_user(db, "other@example.com", "Other Vendor", role="vendor")
        headers = {"Authorization": f"Bearer {create_user_token(intruder)}"}
        resp = client.patch(f"{API}/vendors/{vendor.id}", json={"businessName": "Hijacked"}, headers=headers)
        assert resp.status_code == 403

    def test_soft_delete_hides_vendor(self, client, vendor, vendor_headers):
        assert client.delete(f"{API}/vendors/{vendor.id}", headers=vendor_headers).status_code == 200
        assert client.get(f"{API}/vendors/{vendor.id}").status_code == 404


class TestApproval:

    def test_approve_pending_vendor(self, client, db, admin_headers, super_admin):
        owner = make_user(db, "new@example.com", "New Owner", role="vendor")
        pending = make_vendor(db, owner, "Fresh Vendor", status="pending")

        listed = client.get(f"{API}/vendors/pending", headers=admin_headers)
        assert [v["id"] for v in listed.json()] == [pending.id]

        resp = client.patch(
            f"{API}/vendors/{pending.id}/approve", json={"status": "approved"}, headers=admin_headers
        )
        assert resp.status_code == 200
        assert resp.json()["status"] == "approved"
        assert resp.json()["approvedAt"] is not None

        db.refresh(pending)
        assert pending.approved_by == super_admin.id

    def test_reject_keeps_reason(self, client, vendor, admin_headers):
        resp = client.patch(
            f"{API}/vendors/{vendor.id}/approve",
            json={"status": "rejected", "rejectionReason": "Incomplete portfolio"},
            headers=admin_headers,
        )
        assert resp.json()["status"] == "rejected"
        assert resp.json()["rejectionReason"] == "Incomplete portfolio"

    def test_user_token_cannot_approve(self, client, vendor, customer_headers):
        resp = client.patch(
            f"{API}/vendors/{vendor.id}/approve", json={"status": "approved"}, headers=customer_headers
        )
        assert resp.status_code == 401
