import os
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

DEFAULT_DATABASE_URL = "postgresql://localhost/workforce"

Base = declarative_base()

# Rows stay readable after commit; routers serialize them once the request session is done.
SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False)

engine: Optional[Engine] = None
_bound_url: Optional[str] = None


def _get_database_url() -> str:
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


def _engine_options(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        # TestClient runs sync endpoints on a worker thread.
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


def configure_database() -> Engine:
    """Bind SessionLocal to DATABASE_URL, rebuilding the engine only when the URL changes."""
    global engine, _bound_url

    database_url = _get_database_url()
    if engine is None or database_url != _bound_url:
        engine = create_engine(database_url, **_engine_options(database_url))
        SessionLocal.configure(bind=engine)
        _bound_url = database_url
    return engine


configure_database()


def get_db():
    configure_database()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope() -> Iterator[Session]:
    """Session for code outside a request: commits on success, rolls back on error."""
    configure_database()
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
