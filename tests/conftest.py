"""Shared pytest fixtures and test helpers for lemonctl tests."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from lemonctl.config.settings import StandSettings
from lemonctl.domain.orders import CustomerOrder
from lemonctl.infrastructure.database.engine import init_database
from lemonctl.infrastructure.stand import Stand


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's LEMONCTL_* environment out of the tests."""
    for name in ("LEMONCTL_CONFIG", "LEMONCTL_STAND_ROOT", "LEMONCTL_DATABASE__PATH"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with both tables created and seeded."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def stand(tmp_path: Path) -> Iterator[Stand]:
    """Ready-to-use Stand on a temp directory with an empty drawer."""
    settings = StandSettings.from_cli(stand_root=tmp_path)
    s = Stand(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_stand(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI opens an isolated stand.

    Use via ``@pytest.mark.usefixtures("_isolated_stand")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def order(bill: int, position: int, lemonades: int = 1) -> CustomerOrder:
    """Shorthand for building a CustomerOrder."""
    return CustomerOrder(
        bill_value=bill,
        position_in_line=position,
        requested_lemonades=lemonades,
    )


def wire(bill: int, position: int, lemonades: int = 1) -> dict[str, int]:
    """An order in its JSON wire shape."""
    return {
        "bill_value": bill,
        "position_in_line": position,
        "requested_lemonades": lemonades,
    }


def seed_drawer(stand: Stand, bills: Mapping[int, int], lemonades: int = 0) -> None:
    """Put *bills* into the drawer and optionally bump the sales total."""
    with stand.transaction() as store:
        for denomination, count in bills.items():
            store.increment(denomination, count)
        store.add_lemonades(lemonades)


def drawer_counts(stand: Stand) -> dict[int, int]:
    with stand.read() as store:
        return store.snapshot().bills


def lemonades_sold(stand: Stand) -> int:
    with stand.read() as store:
        return store.lemonades_sold()
