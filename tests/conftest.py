"""
Pytest configuration and shared fixtures.
"""

import os

# Point the app at in-memory SQLite and keep e-mail delivery off before any app import
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RESEND_API_KEY"] = ""
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DB_LOG_SLOW_QUERIES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import SuperAdmin, User, Vendor
from app.rate_limiter import login_rate_limit, password_reset_rate_limit, register_rate_limit
from app.security_utils import create_super_admin_token, create_user_token, hash_password
from app.shared.time import utcnow

API = "/api/v1"
PASSWORD = "Wedding123!"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def no_rate_limit():
    return None


@pytest.fixture
def db():
    """Fresh schema for every test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """TestClient without the lifespan hook, so no Redis connection is attempted."""
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[login_rate_limit] = no_rate_limit
    app.dependency_overrides[register_rate_limit] = no_rate_limit
    app.dependency_overrides[password_reset_rate_limit] = no_rate_limit
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(db, email: str, name: str, role: str = "customer", **extra) -> User:
    user = User(email=email, password_hash=hash_password(PASSWORD), name=name, role=role, **extra)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_vendor(db, user: User, business_name: str, status: str = "approved", **extra) -> Vendor:
    vendor = Vendor(
        user_id=user.id,
        business_name=business_name,
        categories=extra.pop("categories", ["photography"]),
        district=extra.pop("district", "Colombo"),
        status=status,
        approved_at=utcnow() if status == "approved" else None,
        **extra,
    )
    db.add(vendor)
    db.commit()
    db.refresh(vendor)
    return vendor


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def customer(db):
    return make_user(db, "nimali@example.com", "Nimali Perera")


@pytest.fixture
def other_customer(db):
    return make_user(db, "kasun@example.com", "Kasun Silva")


@pytest.fixture
def vendor_user(db):
    return make_user(db, "studio@example.com", "Lens Studio Owner", role="vendor")


@pytest.fixture
def vendor(db, vendor_user):
    return make_vendor(db, vendor_user, "Lens Studio", email="studio@example.com")


@pytest.fixture
def super_admin(db):
    admin = SuperAdmin(
        email="ops@example.com",
        password_hash=hash_password(PASSWORD),
        first_name="Ops",
        last_name="Admin",
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


@pytest.fixture
def customer_headers(customer):
    return bearer(create_user_token(customer))


@pytest.fixture
def other_customer_headers(other_customer):
    return bearer(create_user_token(other_customer))


@pytest.fixture
def vendor_headers(vendor_user):
    return bearer(create_user_token(vendor_user))


@pytest.fixture
def admin_headers(super_admin):
    return bearer(create_super_admin_token(super_admin))
