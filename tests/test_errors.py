import pytest

from app.core.errors import (
    AppError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


@pytest.mark.parametrize("cls, status", [
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 400),
])
def test_status_comes_from_the_class(cls, status):
    err = cls("boom")
    assert err.status_code == status
    assert err.message == "boom"
    assert isinstance(err, AppError)


def test_status_cannot_be_overridden_per_instance():
    with pytest.raises(TypeError):
        NotFoundError("gone", 410)
