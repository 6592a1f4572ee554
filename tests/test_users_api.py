"""
Tests for the signed-in user's account: wedding details, preferences and favourites.
"""
from conftest import API, make_user, make_vendor


class TestAccount:

    def test_profile_completion_grows_with_details(self, client, customer_headers):
        stats = client.get(f"{API}/users/stats", headers=customer_headers).json()
        # only the name is filled in: 1 of 8 fields
        assert stats["profileCompletion"] == 13
        assert stats["favoritesCount"] == 0

        resp = client.patch(
            f"{API}/users/wedding-details",
            json={
                "weddingDate": "2026-12-12T00:00:00Z",
                "weddingLocation": "Kandy",
                "guestCount": 300,
                "budget": 3000000,
                "weddingStyle": "traditional",
            },
            headers=customer_headers,
        )
        assert resp.status_code == 200
        assert resp.json()["weddingLocation"] == "Kandy"

        stats = client.get(f"{API}/users/stats", headers=customer_headers).json()
        assert stats["profileCompletion"] == 75

    def test_profile_update_keeps_unsent_fields(self, client, customer_headers):
        client.patch(f"{API}/users/profile", json={"city": "Galle"}, headers=customer_headers)
        body = client.patch(f"{API}/users/profile", json={"address": "12 Lighthouse St"}, headers=customer_headers).json()
        assert body["city"] == "Galle"
        assert body["address"] == "12 Lighthouse St"
        assert body["name"] == "Nimali Perera"

    def test_preferences_merge(self, client, customer_headers):
        assert client.get(f"{API}/users/preferences", headers=customer_headers).json() == {}

        client.patch(
            f"{API}/users/preferences",
            json={"preferredCategories": ["photography"], "budgetRange": {"min": 100000, "max": 500000}},
            headers=customer_headers,
        )
        merged = client.patch(
            f"{API}/users/preferences", json={"weddingStyle": "beach"}, headers=customer_headers
        ).json()
        assert merged["preferredCategories"] == ["photography"]
        assert merged["budgetRange"] == {"min": 100000, "max": 500000}
        assert merged["weddingStyle"] == "beach"

    def test_inverted_budget_range_rejected(self, client, customer_headers):
        resp = client.patch(
            f"{API}/users/preferences", json={"budgetRange": {"min": 10, "max": 5}}, headers=customer_headers
        )
        assert resp.status_code == 422


class TestFavorites:

    def test_add_check_and_remove(self, client, vendor, customer_headers):
        resp = client.post(
            f"{API}/users/favorites", json={"vendorId": vendor.id, "category": "shortlist"}, headers=customer_headers
        )
        assert resp.status_code == 201
        assert resp.json()["vendor"]["businessName"] == "Lens Studio"

        check = client.get(f"{API}/users/favorites/check/{vendor.id}", headers=customer_headers)
        assert check.json() == {"isFavorited": True}

        duplicate = client.post(f"{API}/users/favorites", json={"vendorId": vendor.id}, headers=customer_headers)
        assert duplicate.status_code == 400

        removed = client.delete(f"{API}/users/favorites/vendor/{vendor.id}", headers=customer_headers)
        assert removed.status_code == 200
        check = client.get(f"{API}/users/favorites/check/{vendor.id}", headers=customer_headers)
        assert check.json() == {"isFavorited": False}

    def test_readding_reactivates(self, client, vendor, customer_headers):
        first = client.post(f"{API}/users/favorites", json={"vendorId": vendor.id}, headers=customer_headers).json()
        client.delete(f"{API}/users/favorites/{first['id']}", headers=customer_headers)

        again = client.post(
            f"{API}/users/favorites", json={"vendorId": vendor.id, "notes": "Call back"}, headers=customer_headers
        )
        assert again.status_code == 201
        assert again.json()["id"] == first["id"]
        assert again.json()["notes"] == "Call back"

    def test_unknown_vendor(self, client, customer_headers):
        resp = client.post(f"{API}/users/favorites", json={"vendorId": 404}, headers=customer_headers)
        assert resp.status_code == 404

    def test_category_listing_and_stats(self, client, db, vendor, customer_headers):
        cake_user = make_user(db, "cakes@example.com", "Cake Co", role="vendor")
        cakes = make_vendor(db, cake_user, "Cake Co", categories=["catering"])

        client.post(f"{API}/users/favorites", json={"vendorId": vendor.id, "category": "photo"}, headers=customer_headers)
        client.post(f"{API}/users/favorites", json={"vendorId": cakes.id, "category": "food"}, headers=customer_headers)

        all_favorites = client.get(f"{API}/users/favorites", headers=customer_headers).json()
        assert len(all_favorites) == 2

        food = client.get(f"{API}/users/favorites/category/food", headers=customer_headers).json()
        assert [f["vendorId"] for f in food] == [cakes.id]

        assert client.get(f"{API}/users/stats", headers=customer_headers).json()["favoritesCount"] == 2

    def test_update_notes(self, client, vendor, customer_headers, other_customer_headers):
        favorite = client.post(f"{API}/users/favorites", json={"vendorId": vendor.id}, headers=customer_headers).json()

        resp = client.patch(
            f"{API}/users/favorites/{favorite['id']}", json={"notes": "Ask about drones"}, headers=customer_headers
        )
        assert resp.json()["notes"] == "Ask about drones"

        # favourites are looked up within the caller's own list
        resp = client.patch(
            f"{API}/users/favorites/{favorite['id']}", json={"notes": "mine"}, headers=other_customer_headers
        )
        assert resp.status_code == 404
