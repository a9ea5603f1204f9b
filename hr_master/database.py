from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from hr_master.core.config import settings


def build_engine(url: str) -> Engine:
    """PostgreSQL in production, SQLite for local runs and tests."""
    if url.startswith("postgresql"):
        return create_engine(url, pool_size=20, pool_pre_ping=True)
    return create_engine(url, connect_args={"check_same_thread": False})


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Request-scoped session; services decide when to commit."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope() -> Iterator[Session]:
    """Session for work outside a request: commits on success, rolls back on error."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db():
    """Create the employees, leaves and admin_auth tables if they are missing."""
    from hr_master.models import employee, leave, admin  # noqa: F401
    Base.metadata.create_all(bind=engine)


def dispose_db():
    engine.dispose()
