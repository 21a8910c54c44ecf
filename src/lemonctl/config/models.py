"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, lemonctl.toml only contains
overrides. A fresh stand needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the stand root.
    path: Path | None = None


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)

