import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("SEED_SAMPLE_DATA", "0")

import pytest
from fastapi.testclient import TestClient

from app.db.session import Base, SessionLocal, engine
from app.models import User
from app.core.security import hash_password
from main import app

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def fresh_store():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    def _make(username, role="tenant", full_name=None):
        user = User(
            username=username,
            email=f"{username}@example.com",
            password=hash_password(PASSWORD),
            full_name=full_name or username.title(),
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_client():
    """A logged-in client per user; each keeps its own session cookie."""
    def _make(username, role="tenant"):
        c = TestClient(app)
        r = c.post("/api/auth/register", json={
            "username": username,
            "email": f"{username}@example.com",
            "password": PASSWORD,
            "confirmPassword": PASSWORD,
            "fullName": username.title(),
            "role": role,
        })
        assert r.status_code == 201, r.text
        c.user = r.json()
        return c
    return _make


def property_payload(**overrides):
    data = {
        "title": "Modern 2 Bedroom Apartment",
        "description": "Secure compound with parking",
        "price": 45000,
        "propertyType": "apartment",
        "listingType": "rent",
        "bedrooms": 2,
        "bathrooms": 1,
        "area": 80,
        "location": "Kilimani, Nairobi",
        "address": "Rose Avenue",
        "latitude": -1.29,
        "longitude": 36.78,
        "features": ["parking"],
        "images": [],
    }
    data.update(overrides)
    return data
