"""InitService — stand initialization.

Writes a sparse ``lemonctl.toml`` (only when none exists) and creates the
drawer database with a zero row for every denomination. Running it on an
existing stand keeps both the config and the stored counts.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from lemonctl.config.discovery import CONFIG_FILENAME
from lemonctl.services.contracts import InitResultData, dump_validated
from lemonctl.services.result import ServiceError, ServiceResult

logger = structlog.get_logger(__name__)


def _render_toml(host: str, port: int) -> str:
    return (
        "# lemonctl stand configuration. Only overrides belong here.\n"
        "\n"
        "[server]\n"
        f'host = "{host}"\n'
        f"port = {port}\n"
    )


class InitService:
    """Creates a stand directory. Stateless, so everything is a static method."""

    @staticmethod
    def init_stand(
        path: Path,
        *,
        host: str = "127.0.0.1",
        port: int = 8080,
    ) -> ServiceResult:
        op = "init_stand"
        if path.exists() and not path.is_dir():
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="not_a_directory",
                    message=f"{path} exists and is not a directory",
                    detail={"path": str(path)},
                ),
            )

        path.mkdir(parents=True, exist_ok=True)
        config_path = path / CONFIG_FILENAME
        config_created = not config_path.exists()
        if config_created:
            config_path.write_text(_render_toml(host, port), encoding="utf-8")

        from lemonctl.config.settings import StandSettings
        from lemonctl.infrastructure.stand import Stand

        settings = StandSettings.from_cli(config_path=str(config_path), stand_root=path)
        stand = Stand(settings)
        try:
            with stand.read() as store:
                snapshot = store.snapshot()
        finally:
            stand.close()

        logger.info("stand_initialized", root=str(path), config_created=config_created)
        data = dump_validated(
            InitResultData,
            {
                "stand_root": str(path),
                "config_path": str(config_path),
                "config_created": config_created,
                "db_path": str(stand.db_path),
                "lemonades_sold": snapshot.lemonades_sold,
                "bills": {str(d): c for d, c in snapshot.bills.items()},
            },
        )
        return ServiceResult(ok=True, op=op, data=data)
