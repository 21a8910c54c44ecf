"""Stand — repository owning the drawer database and its writer lock.

The Stand is the single dependency injected into every service. The
:meth:`transaction` context manager serializes writers and wraps the
whole unit of work in one database transaction:

- **Lock**: one writer per database file within the process; acquired
  before the transaction opens and released on every exit path.
- **DB**: native SQLAlchemy ``engine.begin()`` with auto-commit on
  success and auto-rollback on exception. The engine opens it with
  ``BEGIN IMMEDIATE``, which serializes writers across processes.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from lemonctl.infrastructure.database.drawer import DrawerStore
from lemonctl.infrastructure.database.engine import READ_ONLY, default_db_path, init_database

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine

    from lemonctl.config.settings import StandSettings

logger = logging.getLogger(__name__)

_locks_guard = threading.Lock()
_writer_locks: dict[Path, threading.RLock] = {}


def _writer_lock_for(db_path: Path) -> threading.RLock:
    """Process-wide writer lock shared by every Stand on *db_path*."""
    key = db_path.resolve()
    with _locks_guard:
        lock = _writer_locks.get(key)
        if lock is None:
            lock = threading.RLock()
            _writer_locks[key] = lock
        return lock


class Stand:
    """Repository encapsulating the drawer database.

    Constructed once at CLI startup (or once per HTTP app) from
    :class:`StandSettings`. Services receive the Stand via their
    :class:`BaseService` constructor.
    """

    def __init__(self, settings: StandSettings) -> None:
        self._settings = settings
        configured = settings.database.path
        if configured is not None and not configured.is_absolute():
            configured = settings.stand_root / configured
        self._db_path = configured or default_db_path(settings.stand_root)
        self._engine: Engine = init_database(settings.stand_root, self._db_path)
        self._lock = _writer_lock_for(self._db_path)

    @property
    def root(self) -> Path:
        """The stand root directory."""
        return self._settings.stand_root

    @property
    def db_path(self) -> Path:
        return self._db_path

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def settings(self) -> StandSettings:
        """The resolved settings for this stand."""
        return self._settings

    @contextmanager
    def transaction(self) -> Iterator[DrawerStore]:
        """Serialized, atomic unit of work against the drawer.

        Usage::

            with stand.transaction() as store:
                store.decrement(5)
                store.add_lemonades(1)
                # Commits on success, rolls back if the block raises.
        """
        with self._lock:
            with self._engine.begin() as conn:
                try:
                    yield DrawerStore(conn)
                except BaseException:
                    logger.debug("Drawer transaction rolled back", exc_info=True)
                    raise

    @contextmanager
    def read(self) -> Iterator[DrawerStore]:
        """Read-only access outside the writer lock."""
        with self._engine.connect() as conn:
            conn.execution_options(**{READ_ONLY: True})
            yield DrawerStore(conn)

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self._engine.dispose()
