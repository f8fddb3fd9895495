import secrets
from datetime import datetime, timedelta, timezone

from bcrypt import checkpw, gensalt, hashpw

from app.core.config import get_reset_token_ttl_minutes

SALT_ROUNDS = 10
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes and newer releases reject longer input.
    return (password or "").encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    return hashpw(_encode(password), gensalt(rounds=SALT_ROUNDS)).decode("utf-8")


def verify_password(plain: str, hashed: str | None) -> bool:
    if not hashed:
        return False
    try:
        return checkpw(_encode(plain), hashed.encode("utf-8"))
    except ValueError:
        return False


def new_reset_token() -> tuple[str, datetime]:
    """Returns (token, expires_at)."""
    expires_at = datetime.now(timezone.utc) + timedelta(minutes=get_reset_token_ttl_minutes())
    return secrets.token_urlsafe(32), expires_at
