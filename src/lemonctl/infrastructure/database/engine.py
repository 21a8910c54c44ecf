"""Database engine setup for SQLite with WAL mode.

SQLite is the persistence layer: WAL mode for concurrent reads while a
batch is being written, ACID transactions so a batch commits as a unit.
The DB is stored at {stand_root}/.lemonctl/lemonctl.db unless an
explicit path is configured.

SQLAlchemy Core (not ORM) is used: two small tables, no identity map
or session management needed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine

from lemonctl.infrastructure.database.drawer import DrawerStore
from lemonctl.infrastructure.database.schema import metadata

DB_DIRNAME = ".lemonctl"
DB_FILENAME = "lemonctl.db"

# Execution option marking a connection that never writes.
READ_ONLY = "lemonctl_read_only"


def default_db_path(stand_root: Path) -> Path:
    """Location of the drawer database inside *stand_root*."""
    return stand_root / DB_DIRNAME / DB_FILENAME


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode enabled.

    ``check_same_thread`` is off so the HTTP server's worker threads can
    share the engine; writes are serialized by the stand's writer lock.

    pysqlite's own BEGIN handling is disabled and every transaction opens
    with ``BEGIN IMMEDIATE``, so the write lock is held from the first
    read of a batch across processes. Connections carrying the
    :data:`READ_ONLY` execution option open a deferred ``BEGIN`` instead.
    """
    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        dbapi_conn.isolation_level = None
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _begin(conn: Connection) -> None:
        if conn.get_execution_options().get(READ_ONLY):
            conn.exec_driver_sql("BEGIN")
        else:
            conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


def init_database(stand_root: Path, db_path: Path | None = None) -> Engine:
    """Initialize the drawer database.

    Creates the parent directory, all tables from :data:`schema.metadata`,
    and seeds a zero-count row for every denomination plus the sales row.

    Idempotent — safe to call on an existing stand; existing counts are kept.

    Returns the engine ready for use.
    """
    path = db_path if db_path is not None else default_db_path(stand_root)
    path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(path)
    metadata.create_all(engine)

    with engine.begin() as conn:
        DrawerStore(conn).initialize()
    return engine
