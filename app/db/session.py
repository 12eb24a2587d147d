from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import get_settings


def _unicode_lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def register_sqlite_functions(engine: Engine) -> None:
    """Replace SQLite's ASCII-only ``lower()`` so ILIKE folds non-ASCII text."""

    @event.listens_for(engine, "connect")
    def _register_lower(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def build_engine(database_url: str, timeout: float) -> Engine:
    """Create the process-wide engine with connect and pool timeouts applied."""

    engine_kwargs: dict[str, Any] = {"pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False, "timeout": timeout}
    else:
        engine_kwargs["pool_timeout"] = timeout
        if database_url.startswith("postgresql"):
            engine_kwargs["connect_args"] = {"connect_timeout": max(1, int(timeout))}

    engine = create_engine(database_url, **engine_kwargs)
    if engine.dialect.name == "sqlite":
        register_sqlite_functions(engine)
    return engine


settings = get_settings()

engine = build_engine(settings.database_url, settings.database_timeout)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session per request."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
