"""
Tests for the super admin dashboard and moderation endpoints.
"""
from datetime import datetime, timedelta

import pytest

from app.domain.admin.schemas import AdminStatsQuery
from app.domain.admin.service import date_window, period_start
from app.models import Booking, Idea, Vendor
from app.shared.time import utcnow
from conftest import API, PASSWORD, make_user, make_vendor


def _booking(db, customer, vendor, total, status="pending", payment_status="pending"):
    booking = Booking(
        customer_id=customer.id,
        vendor_id=vendor.id,
        service_name="Full day coverage",
        booking_date=utcnow() + timedelta(days=60),
        total_amount=total,
        status=status,
        payment_status=payment_status,
        created_at=utcnow(),
    )
    db.add(booking)
    db.commit()
    return booking


def _draft(db, author, title="Poruwa ceremony guide"):
    idea = Idea(
        title=title,
        content="content",
        type="tutorial",
        category="traditions",
        tags=[],
        author_id=author.id,
        author_name=author.name,
        author_role=author.role,
        created_at=utcnow(),
    )
    db.add(idea)
    db.commit()
    db.refresh(idea)
    return idea


class TestReportingWindow:

    def test_period_starts(self):
        now = datetime(2026, 10, 17, 15, 30)
        assert period_start("day", now) == datetime(2026, 10, 17)
        assert period_start("week", now) == datetime(2026, 10, 10, 15, 30)
        assert period_start("month", now) == datetime(2026, 10, 1)
        assert period_start("year", now) == datetime(2026, 1, 1)
        assert period_start(None, now) == datetime(2026, 9, 17, 15, 30)

    def test_explicit_dates_win(self):
        query = AdminStatsQuery(startDate=datetime(2026, 1, 1), endDate=datetime(2026, 2, 1), period="day")
        assert date_window(query) == (datetime(2026, 1, 1), datetime(2026, 2, 1))

    def test_no_window(self):
        assert date_window(AdminStatsQuery()) == (None, None)


class TestDashboard:

    def test_counts_and_revenue(self, client, db, customer, vendor, admin_headers):
        _booking(db, customer, vendor, 100000, status="completed", payment_status="paid")
        _booking(db, customer, vendor, 50000)
        pending_user = make_user(db, "newvendor@example.com", "New Vendor", role="vendor")
        make_vendor(db, pending_user, "Pending Florals", status="pending")

        body = client.get(f"{API}/admin/dashboard", headers=admin_headers).json()
        assert body["overview"]["totalUsers"] == 3
        assert body["overview"]["totalVendors"] == 2
        assert body["overview"]["totalBookings"] == 2
        assert body["overview"]["totalRevenue"] == 100000
        assert body["pending"]["pendingVendors"] == 1
        assert body["pending"]["pendingBookings"] == 1
        assert body["completion"]["completedBookings"] == 1

    def test_analytics(self, client, db, customer, vendor, admin_headers):
        _booking(db, customer, vendor, 75000, payment_status="paid")

        body = client.get(f"{API}/admin/analytics", params={"period": "month"}, headers=admin_headers).json()
        assert body["topVendors"][0]["businessName"] == "Lens Studio"
        assert body["topVendors"][0]["totalRevenue"] == 75000
        assert body["categoryDistribution"] == [{"category": "photography", "count": 1}]
        assert sum(day["bookings"] for day in body["trends"]["revenue"]) == 1

    def test_recent_activity(self, client, db, customer, vendor, admin_headers):
        _booking(db, customer, vendor, 1000)
        feed = client.get(f"{API}/admin/activity", params={"limit": 3}, headers=admin_headers).json()
        assert len(feed) == 3
        assert {"user", "vendor", "booking"} >= {entry["type"] for entry in feed}

    def test_customer_token_rejected(self, client, customer_headers):
        assert client.get(f"{API}/admin/dashboard", headers=customer_headers).status_code == 401


class TestModeration:

    def test_deactivated_user_cannot_sign_in(self, client, customer, admin_headers):
        resp = client.patch(
            f"{API}/admin/users/{customer.id}/status",
            json={"isActive": False, "reason": "Spam"},
            headers=admin_headers,
        )
        assert resp.status_code == 200
        assert resp.json()["isActive"] is False

        login = client.post(f"{API}/auth/login", json={"email": customer.email, "password": PASSWORD})
        assert login.status_code == 401

    def test_unknown_user(self, client, admin_headers):
        resp = client.patch(f"{API}/admin/users/999/status", json={"isActive": False}, headers=admin_headers)
        assert resp.status_code == 404

    def test_user_listing_filters_role(self, client, customer, vendor_user, admin_headers):
        body = client.get(f"{API}/admin/users", params={"role": "vendor"}, headers=admin_headers).json()
        assert [u["email"] for u in body["users"]] == [vendor_user.email]

    def test_vendor_status_with_flags(self, client, db, admin_headers):
        user = make_user(db, "florals@example.com", "Florals", role="vendor")
        pending = make_vendor(db, user, "Pending Florals", status="pending")

        listed = client.get(f"{API}/admin/vendors", params={"status": "pending"}, headers=admin_headers).json()
        assert [v["id"] for v in listed["vendors"]] == [pending.id]

        resp = client.patch(
            f"{API}/admin/vendors/{pending.id}/status",
            json={"status": "approved", "isVerified": True, "isFeatured": True},
            headers=admin_headers,
        )
        body = resp.json()
        assert body["status"] == "approved"
        assert body["isVerified"] is True
        assert body["isFeatured"] is True

    def test_publish_content(self, client, db, vendor_user, admin_headers):
        idea = _draft(db, vendor_user)
        drafts = client.get(f"{API}/admin/content", params={"isPublished": False}, headers=admin_headers).json()
        assert [i["id"] for i in drafts["ideas"]] == [idea.id]

        resp = client.patch(
            f"{API}/admin/content/{idea.id}/status", json={"isPublished": True}, headers=admin_headers
        )
        assert resp.json()["isPublished"] is True
        assert client.get(f"{API}/ideas/{idea.id}").status_code == 200

    def test_unknown_content(self, client, admin_headers):
        resp = client.patch(f"{API}/admin/content/999/status", json={"isPublished": True}, headers=admin_headers)
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Content not found"

    @pytest.mark.parametrize("item_type", ["vendor", "idea"])
    def test_featured_listing(self, client, db, vendor, vendor_user, admin_headers, item_type):
        item_id = vendor.id if item_type == "vendor" else _draft(db, vendor_user).id
        resp = client.post(
            f"{API}/admin/featured",
            json={"itemId": item_id, "itemType": item_type, "isFeatured": True},
            headers=admin_headers,
        )
        assert resp.status_code == 200

        db.expire_all()
        featured = db.get(Vendor if item_type == "vendor" else Idea, item_id)
        assert featured.is_featured is True
        assert featured.featured_at is not None

    def test_featured_unknown_item(self, client, admin_headers):
        resp = client.post(
            f"{API}/admin/featured",
            json={"itemId": 999, "itemType": "idea", "isFeatured": True},
            headers=admin_headers,
        )
        assert resp.status_code == 404
