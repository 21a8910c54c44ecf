"""SQLAlchemy Core table definitions for the lemonctl database.

Two logical relations: the cash drawer (one row per denomination) and a
singleton sales row holding the cumulative lemonade count.
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Integer, MetaData, Table

metadata = MetaData()

SALES_ROW_ID = 1

drawer = Table(
    "drawer",
    metadata,
    Column("denomination", Integer, primary_key=True, autoincrement=False),
    Column("count", Integer, nullable=False, default=0, server_default="0"),
    CheckConstraint("count >= 0", name="ck_drawer_count_non_negative"),
)

sales = Table(
    "sales",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("lemonades_sold", Integer, nullable=False, default=0, server_default="0"),
    CheckConstraint("lemonades_sold >= 0", name="ck_sales_non_negative"),
)
