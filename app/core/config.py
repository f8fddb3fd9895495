"""Central config: values come from .env / environment. Fallbacks live only here."""
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./homeseeker.db"
DEFAULT_SESSION_MAX_AGE = 60 * 60 * 24 * 7  # 1 week
DEFAULT_RESET_TOKEN_TTL_MINUTES = 60


def get_database_url() -> str:
    """Normalise Heroku/Render style postgres:// URLs for SQLAlchemy."""
    url = (os.getenv("DATABASE_URL") or "").strip() or DEFAULT_DATABASE_URL
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


def get_app_env() -> str:
    return (os.getenv("APP_ENV") or "").strip().lower() or "development"


def is_production() -> bool:
    return get_app_env() == "production"


def get_session_secret() -> str:
    return (os.getenv("SESSION_SECRET") or "").strip() or "homeseeker-dev-secret"


def get_session_cookie() -> str:
    return (os.getenv("SESSION_COOKIE") or "").strip() or "hs_session"


def get_session_max_age() -> int:
    try:
        return int(os.getenv("SESSION_MAX_AGE") or DEFAULT_SESSION_MAX_AGE)
    except ValueError:
        return DEFAULT_SESSION_MAX_AGE


def get_reset_token_ttl_minutes() -> int:
    try:
        return int(os.getenv("RESET_TOKEN_TTL_MINUTES") or DEFAULT_RESET_TOKEN_TTL_MINUTES)
    except ValueError:
        return DEFAULT_RESET_TOKEN_TTL_MINUTES


def get_cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS") or "*"
    return [o.strip() for o in raw.split(",") if o.strip()]


def get_log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "").strip().upper() or "INFO"


def seed_on_startup() -> bool:
    return (os.getenv("SEED_SAMPLE_DATA") or "").strip().lower() in ("1", "true", "yes")
