"""
Tests for vendor portfolio showcases.
"""
import pytest

from app.security_utils import create_user_token
from conftest import API, bearer, make_user, make_vendor


def _portfolio_payload(**overrides):
    payload = {
        "title": "Beach wedding in Bentota",
        "category": "photography",
        "tags": ["beach", "sunset"],
        "items": [
            {"url": "https://cdn.example.com/1.jpg", "isPrimary": True},
            {"type": "video", "url": "https://cdn.example.com/1.mp4"},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def portfolio(client, vendor, vendor_headers):
    resp = client.post(f"{API}/vendors/portfolio", json=_portfolio_payload(), headers=vendor_headers)
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def rival_headers(db):
    user = make_user(db, "rival@example.com", "Rival Studio", role="vendor")
    make_vendor(db, user, "Rival Studio")
    return bearer(create_user_token(user))


class TestManagePortfolio:

    def test_create(self, portfolio):
        assert portfolio["vendorName"] == "Lens Studio"
        assert [i["type"] for i in portfolio["items"]] == ["image", "video"]
        assert portfolio["viewCount"] == 0

    def test_vendor_needs_profile(self, client, db):
        user = make_user(db, "fresh@example.com", "Fresh Vendor", role="vendor")
        resp = client.post(f"{API}/vendors/portfolio", json=_portfolio_payload(), headers=bearer(create_user_token(user)))
        assert resp.status_code == 404

    def test_items_required(self, client, vendor, vendor_headers):
        resp = client.post(f"{API}/vendors/portfolio", json=_portfolio_payload(items=[]), headers=vendor_headers)
        assert resp.status_code == 422

    def test_customer_forbidden(self, client, customer_headers):
        resp = client.post(f"{API}/vendors/portfolio", json=_portfolio_payload(), headers=customer_headers)
        assert resp.status_code == 403

    def test_own_listing_not_captured_by_vendor_route(self, client, portfolio, vendor_headers):
        resp = client.get(f"{API}/vendors/portfolio", params={"tags": "beach"}, headers=vendor_headers)
        assert resp.status_code == 200
        assert resp.json()["total"] == 1
        assert resp.json()["portfolios"][0]["id"] == portfolio["id"]

    def test_only_owner_updates(self, client, portfolio, vendor_headers, rival_headers):
        url = f"{API}/vendors/portfolio/{portfolio['id']}"
        assert client.put(url, json={"title": "Stolen"}, headers=rival_headers).status_code == 403

        resp = client.put(url, json={"venue": "Bentota Beach Hotel"}, headers=vendor_headers)
        assert resp.json()["venue"] == "Bentota Beach Hotel"
        assert resp.json()["title"] == "Beach wedding in Bentota"

    def test_delete_hides_from_public(self, client, vendor, portfolio, vendor_headers):
        assert client.delete(f"{API}/vendors/portfolio/{portfolio['id']}", headers=vendor_headers).status_code == 200
        assert client.get(f"{API}/vendors/{vendor.id}/portfolio").json() == []


class TestPublicPortfolio:

    def test_view_and_like(self, client, portfolio, customer_headers):
        url = f"{API}/vendors/portfolio/{portfolio['id']}"
        client.get(url)
        assert client.get(url).json()["viewCount"] == 2

        liked = client.post(f"{url}/like", headers=customer_headers)
        assert liked.json()["likeCount"] == 1

    def test_vendor_portfolio_listing(self, client, vendor, portfolio, vendor_headers):
        client.post(f"{API}/vendors/portfolio", json=_portfolio_payload(title="Kandyan wedding"), headers=vendor_headers)
        titles = [p["title"] for p in client.get(f"{API}/vendors/{vendor.id}/portfolio").json()]
        assert titles == ["Kandyan wedding", "Beach wedding in Bentota"]
