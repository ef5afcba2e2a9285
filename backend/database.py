from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from pathlib import Path

from config.app_config import APP_CONFIG

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """
    Create an engine for the given URL.

    SQLite connections are shared across threads (FastAPI runs sync routes in a
    threadpool) and in-memory databases are pinned to a single connection so
    every session sees the same tables.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=False,
            pool_pre_ping=True,  # Verify connections are alive before using
            pool_recycle=3600,
        )

    if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
        sqlite_engine = create_engine(
            database_url,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
        )
    else:
        db_file = database_url.split(":///", 1)[-1]
        Path(db_file).expanduser().parent.mkdir(parents=True, exist_ok=True)
        sqlite_engine = create_engine(
            database_url,
            connect_args={'check_same_thread': False},
            echo=False,
            pool_pre_ping=True,
        )

    @event.listens_for(sqlite_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return sqlite_engine


engine = build_engine(APP_CONFIG.database_url)
SessionLocal = sessionmaker(bind=engine)


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
