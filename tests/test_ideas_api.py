"""
Tests for idea authoring, feeds and engagement counters.
"""
from datetime import timedelta

from app.models import Idea
from app.shared.time import utcnow
from conftest import API


def _idea_payload(**overrides):
    payload = {
        "title": "Ten table centrepieces",
        "content": "<p>Use <strong>lotus</strong> blooms</p><script>alert(1)</script>",
        "type": "blog_post",
        "category": "decoration",
        "tags": ["flowers", "tables"],
    }
    payload.update(overrides)
    return payload


def _seed(db, author, title, views=0, likes=0, shares=0, age_days=0, published=True, **extra):
    idea = Idea(
        title=title,
        content="content",
        type=extra.pop("type", "blog_post"),
        category=extra.pop("category", "decoration"),
        tags=extra.pop("tags", []),
        author_id=author.id,
        author_name=author.name,
        author_role=author.role,
        view_count=views,
        like_count=likes,
        share_count=shares,
        is_published=published,
        published_at=utcnow() if published else None,
        created_at=utcnow() - timedelta(days=age_days),
        **extra,
    )
    db.add(idea)
    db.commit()
    db.refresh(idea)
    return idea


class TestAuthoring:

    def test_vendor_creates_unpublished_draft(self, client, vendor_user, vendor_headers):
        resp = client.post(f"{API}/ideas", json=_idea_payload(), headers=vendor_headers)
        assert resp.status_code == 201
        body = resp.json()
        assert body["isPublished"] is False
        assert body["authorName"] == vendor_user.name
        assert "<script>" not in body["content"]
        assert "<strong>lotus</strong>" in body["content"]

    def test_customer_cannot_create(self, client, customer_headers):
        resp = client.post(f"{API}/ideas", json=_idea_payload(), headers=customer_headers)
        assert resp.status_code == 403

    def test_drafts_hidden_until_published(self, client, vendor_headers):
        idea_id = client.post(f"{API}/ideas", json=_idea_payload(), headers=vendor_headers).json()["id"]
        assert client.get(f"{API}/ideas/{idea_id}").status_code == 404

        mine = client.get(f"{API}/ideas/my-ideas", headers=vendor_headers).json()
        assert [i["id"] for i in mine] == [idea_id]

        published = client.patch(f"{API}/ideas/{idea_id}", json={"isPublished": True}, headers=vendor_headers)
        assert published.json()["isPublished"] is True
        assert published.json()["publishedAt"] is not None
        assert client.get(f"{API}/ideas/{idea_id}").status_code == 200

    def test_only_author_can_edit(self, client, db, vendor_headers, customer):
        idea = _seed(db, customer, "Someone else's idea")
        resp = client.patch(f"{API}/ideas/{idea.id}", json={"title": "Mine now"}, headers=vendor_headers)
        assert resp.status_code == 403

    def test_null_title_rejected(self, client, vendor_headers):
        idea_id = client.post(f"{API}/ideas", json=_idea_payload(), headers=vendor_headers).json()["id"]
        resp = client.patch(f"{API}/ideas/{idea_id}", json={"title": None}, headers=vendor_headers)
        assert resp.status_code == 422

    def test_soft_delete(self, client, vendor_headers):
        idea_id = client.post(f"{API}/ideas", json=_idea_payload(), headers=vendor_headers).json()["id"]
        assert client.delete(f"{API}/ideas/{idea_id}", headers=vendor_headers).status_code == 200
        assert client.get(f"{API}/ideas/my-ideas", headers=vendor_headers).json() == []


class TestFeeds:

    def test_default_sort_is_trending(self, client, db, vendor_user):
        _seed(db, vendor_user, "Stale", views=100, age_days=400)
        _seed(db, vendor_user, "Hot", likes=40)
        _seed(db, vendor_user, "Warm", views=30)
        _seed(db, vendor_user, "Draft", views=1000, published=False)

        body = client.get(f"{API}/ideas").json()
        assert body["total"] == 3
        assert [i["title"] for i in body["ideas"]] == ["Hot", "Warm", "Stale"]
        assert body["ideas"][0]["trendingScore"] is not None

    def test_trending_pagination(self, client, db, vendor_user):
        for n in range(5):
            _seed(db, vendor_user, f"Idea {n}", views=n * 10)
        body = client.get(f"{API}/ideas", params={"page": 2, "limit": 2}).json()
        assert [i["title"] for i in body["ideas"]] == ["Idea 2", "Idea 1"]
        assert body["totalPages"] == 3

    def test_trending_ignores_sort_order(self, client, db, vendor_user):
        _seed(db, vendor_user, "Quiet", views=5)
        _seed(db, vendor_user, "Loud", likes=40)
        body = client.get(f"{API}/ideas", params={"sortBy": "trending", "sortOrder": "asc"}).json()
        assert [i["title"] for i in body["ideas"]] == ["Loud", "Quiet"]

    def test_stored_field_sort(self, client, db, vendor_user):
        _seed(db, vendor_user, "Few likes", likes=1)
        _seed(db, vendor_user, "Many likes", likes=9)
        body = client.get(f"{API}/ideas", params={"sortBy": "likeCount"}).json()
        assert [i["title"] for i in body["ideas"]] == ["Many likes", "Few likes"]
        assert body["ideas"][0]["trendingScore"] is None

    def test_trending_endpoint(self, client, db, vendor_user):
        _seed(db, vendor_user, "Low", views=1)
        _seed(db, vendor_user, "High", shares=50)
        titles = [i["title"] for i in client.get(f"{API}/ideas/trending", params={"limit": 1}).json()]
        assert titles == ["High"]

    def test_filter_by_tags(self, client, db, vendor_user):
        _seed(db, vendor_user, "Tagged", tags=["mehndi"])
        _seed(db, vendor_user, "Untagged")
        resp = client.get(f"{API}/ideas/tags", params={"tags": "mehndi,poruwa"})
        assert [i["title"] for i in resp.json()] == ["Tagged"]

    def test_related_excludes_itself(self, client, db, vendor_user):
        base = _seed(db, vendor_user, "Base", category="fashion")
        _seed(db, vendor_user, "Same category", category="fashion")
        _seed(db, vendor_user, "Other", category="food", type="gallery")
        titles = [i["title"] for i in client.get(f"{API}/ideas/{base.id}/related").json()]
        assert titles == ["Same category"]


class TestEngagement:

    def test_view_counted_on_fetch(self, client, db, vendor_user):
        idea = _seed(db, vendor_user, "Viewed")
        client.get(f"{API}/ideas/{idea.id}")
        assert client.get(f"{API}/ideas/{idea.id}").json()["viewCount"] == 2

    def test_like_and_unlike_never_negative(self, client, db, vendor_user, customer_headers):
        idea = _seed(db, vendor_user, "Liked")
        liked = client.patch(f"{API}/ideas/{idea.id}/like", json={"isLiked": True}, headers=customer_headers)
        assert liked.json()["likeCount"] == 1

        client.patch(f"{API}/ideas/{idea.id}/like", json={"isLiked": False}, headers=customer_headers)
        again = client.patch(f"{API}/ideas/{idea.id}/like", json={"isLiked": False}, headers=customer_headers)
        assert again.json()["likeCount"] == 0

    def test_share_needs_no_login(self, client, db, vendor_user):
        idea = _seed(db, vendor_user, "Shared")
        assert client.post(f"{API}/ideas/{idea.id}/share").json()["shareCount"] == 1
