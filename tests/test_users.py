import pytest

from app.core.errors import ConflictError
from app.models import User
from app.schemas.auth import RegisterRequest
from app.services import users

from conftest import PASSWORD


def registration(username, email):
    return RegisterRequest(
        username=username,
        email=email,
        password=PASSWORD,
        confirmPassword=PASSWORD,
        fullName=username.title(),
    )


def stale_first_lookup(monkeypatch, name):
    """The first call misses, as if a concurrent request had not committed yet."""
    real = getattr(users, name)
    calls = []

    def lookup(db, value):
        calls.append(value)
        return None if len(calls) == 1 else real(db, value)

    monkeypatch.setattr(users, name, lookup)


def test_register_race_on_username(db, monkeypatch):
    users.register_user(db, registration("shakii", "shakii@example.com"))
    stale_first_lookup(monkeypatch, "get_user_by_username")
    with pytest.raises(ConflictError, match="Username already taken"):
        users.register_user(db, registration("Shakii", "other@example.com"))
    assert db.query(User).count() == 1


def test_register_race_on_email(db, monkeypatch):
    users.register_user(db, registration("shakii", "shakii@example.com"))
    stale_first_lookup(monkeypatch, "get_user_by_email")
    with pytest.raises(ConflictError, match="Email already registered"):
        users.register_user(db, registration("someoneelse", "SHAKII@example.com"))
    assert db.query(User).count() == 1
