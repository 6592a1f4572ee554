"""
Tests for customer to vendor inquiry threads.
"""
from app.security_utils import create_user_token
from conftest import API, bearer, make_user


def _open(client, headers, vendor, **overrides):
    payload = {
        "vendorId": vendor.id,
        "subject": "Availability in December",
        "message": "Are you free on the 12th?",
        "guestCount": 250,
        "weddingDate": "2026-12-12T09:00:00Z",
    }
    payload.update(overrides)
    return client.post(f"{API}/inquiries", json=payload, headers=headers)


class TestOpenInquiry:

    def test_create_counts_against_vendor(self, client, db, vendor, customer_headers):
        resp = _open(client, customer_headers, vendor)
        assert resp.status_code == 201
        body = resp.json()
        assert body["status"] == "pending"
        assert body["vendorName"] == "Lens Studio"
        assert len(body["messages"]) == 1
        assert body["messages"][0]["message"] == "Are you free on the 12th?"

        db.refresh(vendor)
        assert vendor.inquiry_count == 1

    def test_unknown_vendor(self, client, customer_headers, vendor):
        resp = _open(client, customer_headers, vendor, vendorId=9999)
        assert resp.status_code == 404


class TestConversation:

    def test_vendor_reply_marks_replied(self, client, vendor, customer_headers, vendor_headers):
        inquiry_id = _open(client, customer_headers, vendor).json()["id"]

        reply = client.post(
            f"{API}/inquiries/{inquiry_id}/messages", json={"message": "Yes we are free"}, headers=vendor_headers
        )
        assert reply.status_code == 201
        assert reply.json()["status"] == "replied"
        assert len(reply.json()["messages"]) == 2

    def test_any_follow_up_marks_replied(self, client, vendor, customer_headers):
        inquiry_id = _open(client, customer_headers, vendor).json()["id"]

        follow_up = client.post(
            f"{API}/inquiries/{inquiry_id}/messages", json={"message": "Also need a drone"}, headers=customer_headers
        )
        assert follow_up.status_code == 201
        assert follow_up.json()["status"] == "replied"

    def test_closed_inquiry_stays_closed(self, client, vendor, customer_headers, vendor_headers):
        inquiry_id = _open(client, customer_headers, vendor).json()["id"]
        client.patch(f"{API}/inquiries/{inquiry_id}", json={"status": "closed"}, headers=vendor_headers)

        resp = client.post(
            f"{API}/inquiries/{inquiry_id}/messages", json={"message": "Still there?"}, headers=customer_headers
        )
        assert resp.json()["status"] == "closed"

    def test_unread_count_and_mark_read(self, client, vendor, customer_headers, vendor_headers):
        inquiry_id = _open(client, customer_headers, vendor).json()["id"]

        assert client.get(f"{API}/inquiries/unread-count", headers=vendor_headers).json() == {"count": 1}
        assert client.get(f"{API}/inquiries/unread-count", headers=customer_headers).json() == {"count": 0}

        client.patch(f"{API}/inquiries/{inquiry_id}/read", headers=vendor_headers)
        assert client.get(f"{API}/inquiries/unread-count", headers=vendor_headers).json() == {"count": 0}

        message = client.get(f"{API}/inquiries/{inquiry_id}", headers=customer_headers).json()["messages"][0]
        assert message["isRead"] is True
        assert message["readAt"] is not None

    def test_close_records_who_and_when(self, client, vendor, vendor_user, customer_headers, vendor_headers):
        inquiry_id = _open(client, customer_headers, vendor).json()["id"]
        resp = client.patch(
            f"{API}/inquiries/{inquiry_id}",
            json={"status": "closed", "closeReason": "Booked elsewhere"},
            headers=vendor_headers,
        )
        body = resp.json()
        assert body["status"] == "closed"
        assert body["closedBy"] == vendor_user.id
        assert body["closedAt"] is not None
        assert body["closeReason"] == "Booked elsewhere"


class TestAccess:

    def test_other_customer_forbidden(self, client, vendor, customer_headers, other_customer_headers):
        inquiry_id = _open(client, customer_headers, vendor).json()["id"]
        resp = client.get(f"{API}/inquiries/{inquiry_id}", headers=other_customer_headers)
        assert resp.status_code == 403

    def test_listing_is_scoped(self, client, vendor, customer_headers, other_customer_headers, vendor_headers):
        _open(client, customer_headers, vendor)
        _open(client, other_customer_headers, vendor, subject="Mehndi coverage")

        assert client.get(f"{API}/inquiries", headers=customer_headers).json()["total"] == 1
        assert client.get(f"{API}/inquiries", headers=vendor_headers).json()["total"] == 2

        filtered = client.get(f"{API}/inquiries", params={"search": "mehndi"}, headers=vendor_headers).json()
        assert [i["subject"] for i in filtered["inquiries"]] == ["Mehndi coverage"]

    def test_recent_and_delete(self, client, vendor, customer_headers):
        first = _open(client, customer_headers, vendor).json()["id"]
        second = _open(client, customer_headers, vendor, subject="Second").json()["id"]

        recent = client.get(f"{API}/inquiries/recent", params={"limit": 1}, headers=customer_headers).json()
        assert [i["id"] for i in recent] == [second]

        assert client.delete(f"{API}/inquiries/{first}", headers=customer_headers).status_code == 200
        assert client.get(f"{API}/inquiries/{first}", headers=customer_headers).status_code == 404

    def test_vendor_without_profile_has_nothing_unread(self, client, db):
        studio = make_user(db, "newstudio@example.com", "New Studio", role="vendor")
        headers = bearer(create_user_token(studio))
        assert client.get(f"{API}/inquiries/unread-count", headers=headers).json() == {"count": 0}
        assert client.get(f"{API}/inquiries/recent", headers=headers).json() == []
