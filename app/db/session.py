import logging
import threading

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from app.core.config import get_database_url

logger = logging.getLogger(__name__)

DATABASE_URL = get_database_url()


def _is_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (url in ("sqlite://", "sqlite:///:memory:") or ":memory:" in url)


if _is_memory_sqlite(DATABASE_URL):
    # One shared connection, otherwise every session would see an empty database.
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
elif DATABASE_URL.startswith("sqlite"):
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
else:
    engine = create_engine(DATABASE_URL, pool_pre_ping=True)

if DATABASE_URL.startswith("sqlite"):
    @event.listens_for(engine, "connect")
    def _enable_sqlite_fks(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Requests share a single connection in memory mode; only one may use it at a time.
_store_lock = threading.Lock() if _is_memory_sqlite(DATABASE_URL) else None


def get_db():
    """Dependency to inject DB session inside routes."""
    if _store_lock is not None:
        _store_lock.acquire()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        if _store_lock is not None:
            _store_lock.release()


def init_db() -> None:
    """Create all tables registered on Base."""
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database ready (%s)", engine.url.get_backend_name())


def dispose_engine() -> None:
    engine.dispose()
    logger.info("Database connections released")
