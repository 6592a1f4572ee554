"""
Tests for account registration, login and recovery.
"""
from datetime import timedelta

from app.models import User
from app.shared.time import utcnow
from conftest import API, PASSWORD


def _register(client, **overrides):
    payload = {"email": "Ayesha@Example.com", "password": PASSWORD, "name": "Ayesha Fernando"}
    payload.update(overrides)
    return client.post(f"{API}/auth/register", json=payload)


class TestRegister:

    def test_defaults_to_customer(self, client):
        resp = _register(client)
        assert resp.status_code == 201
        body = resp.json()
        assert body["user"]["role"] == "customer"
        assert body["user"]["email"] == "ayesha@example.com"
        assert body["user"]["isEmailVerified"] is False
        assert body["token"].count(".") == 2

    def test_vendor_role_allowed(self, client):
        resp = _register(client, role="vendor")
        assert resp.status_code == 201
        assert resp.json()["user"]["role"] == "vendor"

    def test_admin_role_rejected(self, client):
        resp = _register(client, role="admin")
        assert resp.status_code == 400

    def test_unknown_role_rejected(self, client):
        resp = _register(client, role="planner")
        assert resp.status_code == 400

    def test_duplicate_email_conflict(self, client):
        assert _register(client).status_code == 201
        resp = _register(client, email="ayesha@example.com")
        assert resp.status_code == 409

    def test_local_phone_normalized(self, client):
        resp = _register(client, phone="077 123 4567")
        assert resp.json()["user"]["phone"] == "+94771234567"

    def test_short_password_is_validation_error(self, client):
        resp = _register(client, password="short")
        assert resp.status_code == 422


class TestLogin:

    def test_login_returns_token(self, client, customer):
        resp = client.post(f"{API}/auth/login", json={"email": customer.email, "password": PASSWORD})
        assert resp.status_code == 200
        body = resp.json()
        assert body["user"]["id"] == customer.id
        assert body["user"]["lastLoginAt"] is not None

    def test_wrong_password(self, client, customer):
        resp = client.post(f"{API}/auth/login", json={"email": customer.email, "password": "nope-nope-nope"})
        assert resp.status_code == 401

    def test_inactive_user_cannot_login(self, client, db, customer):
        customer.is_active = False
        db.commit()
        resp = client.post(f"{API}/auth/login", json={"email": customer.email, "password": PASSWORD})
        assert resp.status_code == 401


class TestProfile:

    def test_requires_token(self, client):
        resp = client.get(f"{API}/auth/profile")
        assert resp.status_code in (401, 403)

    def test_rejects_super_admin_token(self, client, admin_headers):
        resp = client.get(f"{API}/auth/profile", headers=admin_headers)
        assert resp.status_code == 401

    def test_update_profile(self, client, customer_headers):
        resp = client.put(
            f"{API}/auth/profile", json={"name": "Nimali F.", "city": "Kandy"}, headers=customer_headers
        )
        assert resp.status_code == 200
        assert resp.json()["name"] == "Nimali F."
        assert resp.json()["city"] == "Kandy"

    def test_change_password(self, client, customer, customer_headers):
        resp = client.put(
            f"{API}/auth/change-password",
            json={"currentPassword": "wrong-password", "newPassword": "NewWedding123!"},
            headers=customer_headers,
        )
        assert resp.status_code == 401

        resp = client.put(
            f"{API}/auth/change-password",
            json={"currentPassword": PASSWORD, "newPassword": "NewWedding123!"},
            headers=customer_headers,
        )
        assert resp.status_code == 200
        login = client.post(f"{API}/auth/login", json={"email": customer.email, "password": "NewWedding123!"})
        assert login.status_code == 200


class TestRecovery:

    def test_forgot_password_same_answer_for_unknown_email(self, client, customer):
        known = client.post(f"{API}/auth/forgot-password", json={"email": customer.email})
        unknown = client.post(f"{API}/auth/forgot-password", json={"email": "ghost@example.com"})
        assert known.status_code == unknown.status_code == 200
        assert known.json() == unknown.json()

    def test_reset_password_with_token(self, client, db, customer):
        client.post(f"{API}/auth/forgot-password", json={"email": customer.email})
        db.refresh(customer)
        token = customer.password_reset_token
        assert token

        resp = client.post(f"{API}/auth/reset-password", json={"token": token, "password": "Reset12345!"})
        assert resp.status_code == 200

        # tokens are single use
        again = client.post(f"{API}/auth/reset-password", json={"token": token, "password": "Reset12345!"})
        assert again.status_code == 400

    def test_expired_reset_token(self, client, db, customer):
        customer.password_reset_token = "expired-token"
        customer.password_reset_expires = utcnow() - timedelta(minutes=1)
        db.commit()
        resp = client.post(f"{API}/auth/reset-password", json={"token": "expired-token", "password": "Reset12345!"})
        assert resp.status_code == 400

    def test_verify_email(self, client, db):
        register = _register(client)
        user = db.query(User).filter(User.id == register.json()["user"]["id"]).first()

        resp = client.post(f"{API}/auth/verify-email", json={"token": user.email_verification_token})
        assert resp.status_code == 200
        db.refresh(user)
        assert user.is_email_verified is True

        resend = client.post(f"{API}/auth/resend-verification", json={"email": user.email})
        assert resend.status_code == 400


class TestSuperAdminAuth:

    def test_login_and_profile(self, client, super_admin):
        resp = client.post(
            f"{API}/super-admin/auth/login", json={"email": super_admin.email, "password": PASSWORD}
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["superAdmin"]["permissions"]["canManageVendors"] is True

        profile = client.get(
            f"{API}/super-admin/auth/profile", headers={"Authorization": f"Bearer {body['token']}"}
        )
        assert profile.status_code == 200
        assert profile.json()["email"] == super_admin.email

    def test_user_token_cannot_reach_admin(self, client, customer_headers):
        resp = client.get(f"{API}/super-admin/auth/profile", headers=customer_headers)
        assert resp.status_code == 401
