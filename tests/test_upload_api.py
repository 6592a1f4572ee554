"""
Tests for media uploads to object storage. The storage client is replaced
with an in-memory fake.
"""
import pytest
from botocore.exceptions import ClientError

from app.routes import upload
from conftest import API

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


class FakeBucket:

    def __init__(self, fail=False):
        self.objects = {}
        self.deleted = []
        self.fail = fail

    def put_object(self, Bucket, Key, Body, ContentType, CacheControl):
        if self.fail:
            raise ClientError({"Error": {"Code": "500", "Message": "unavailable"}}, "PutObject")
        self.objects[Key] = (Body, ContentType)

    def delete_object(self, Bucket, Key):
        self.deleted.append(Key)


@pytest.fixture
def bucket(monkeypatch):
    fake = FakeBucket()
    monkeypatch.setattr(upload, "get_r2_client", lambda: fake)
    monkeypatch.setattr(upload, "R2_PUBLIC_URL", "https://media.example.com")
    return fake


class TestImageUpload:

    def test_upload_image(self, client, customer, customer_headers, bucket):
        resp = client.post(
            f"{API}/upload/image",
            files={"file": ("cake.png", PNG, "image/png")},
            data={"folder": "ideas"},
            headers=customer_headers,
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["key"].startswith(f"ideas/{customer.id}/")
        assert body["key"].endswith(".png")
        assert body["url"] == f"https://media.example.com/{body['key']}"
        assert bucket.objects[body["key"]] == (PNG, "image/png")

    def test_rejects_wrong_type(self, client, customer_headers, bucket):
        resp = client.post(
            f"{API}/upload/image", files={"file": ("notes.pdf", b"%PDF", "application/pdf")}, headers=customer_headers
        )
        assert resp.status_code == 400
        assert bucket.objects == {}

    def test_rejects_overlong_filename(self, client, customer_headers, bucket):
        resp = client.post(
            f"{API}/upload/image",
            files={"file": ("a" * 260 + ".png", PNG, "image/png")},
            headers=customer_headers,
        )
        assert resp.status_code == 400
        assert bucket.objects == {}

    def test_rejects_unknown_folder(self, client, customer_headers, bucket):
        resp = client.post(
            f"{API}/upload/image",
            files={"file": ("cake.png", PNG, "image/png")},
            data={"folder": "../secrets"},
            headers=customer_headers,
        )
        assert resp.status_code == 400

    def test_rejects_oversize(self, client, customer_headers, bucket, monkeypatch):
        monkeypatch.setattr(upload, "MAX_IMAGE_SIZE", 16)
        resp = client.post(
            f"{API}/upload/image", files={"file": ("cake.png", PNG, "image/png")}, headers=customer_headers
        )
        assert resp.status_code == 400
        assert "limit" in resp.json()["detail"]

    def test_batch_validates_before_storing(self, client, customer_headers, bucket):
        resp = client.post(
            f"{API}/upload/images",
            files=[
                ("files", ("a.png", PNG, "image/png")),
                ("files", ("b.gif", b"GIF89a", "image/gif")),
            ],
            headers=customer_headers,
        )
        assert resp.status_code == 400
        assert bucket.objects == {}

    def test_batch_upload(self, client, customer_headers, bucket):
        resp = client.post(
            f"{API}/upload/images",
            files=[("files", ("a.png", PNG, "image/png")), ("files", ("b.webp", b"RIFF", "image/webp"))],
            headers=customer_headers,
        )
        assert len(resp.json()["files"]) == 2
        assert len(bucket.objects) == 2

    def test_storage_failure(self, client, customer_headers, monkeypatch):
        monkeypatch.setattr(upload, "get_r2_client", lambda: FakeBucket(fail=True))
        monkeypatch.setattr(upload, "R2_PUBLIC_URL", "https://media.example.com")
        resp = client.post(
            f"{API}/upload/image", files={"file": ("cake.png", PNG, "image/png")}, headers=customer_headers
        )
        assert resp.status_code == 500

    def test_requires_login(self, client, bucket):
        resp = client.post(f"{API}/upload/image", files={"file": ("cake.png", PNG, "image/png")})
        assert resp.status_code in (401, 403)


class TestVideoUpload:

    def test_upload_video(self, client, customer_headers, bucket):
        resp = client.post(
            f"{API}/upload/video", files={"file": ("first-dance.mp4", b"\x00" * 32, "video/mp4")}, headers=customer_headers
        )
        assert resp.status_code == 200
        assert resp.json()["key"].endswith(".mp4")

    def test_image_is_not_a_video(self, client, customer_headers, bucket):
        resp = client.post(
            f"{API}/upload/video", files={"file": ("cake.png", PNG, "image/png")}, headers=customer_headers
        )
        assert resp.status_code == 400


class TestDeleteUpload:

    def test_delete_own_key(self, client, customer, customer_headers, bucket):
        key = f"general/{customer.id}/photo.png"
        resp = client.request("DELETE", f"{API}/upload", json={"key": key}, headers=customer_headers)
        assert resp.status_code == 200
        assert bucket.deleted == [key]

    def test_cannot_delete_someone_elses_key(self, client, other_customer, customer_headers, bucket):
        key = f"general/{other_customer.id}/photo.png"
        resp = client.request("DELETE", f"{API}/upload", json={"key": key}, headers=customer_headers)
        assert resp.status_code == 403
        assert bucket.deleted == []
