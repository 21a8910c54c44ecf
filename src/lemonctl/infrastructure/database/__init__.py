"""SQLite database engine, schema, and drawer store via SQLAlchemy Core."""

from lemonctl.infrastructure.database.drawer import DrawerStore
from lemonctl.infrastructure.database.engine import create_db_engine, init_database
from lemonctl.infrastructure.database.schema import drawer, metadata, sales

__all__ = [
    "DrawerStore",
    "create_db_engine",
    "drawer",
    "init_database",
    "metadata",
    "sales",
]
