"""HTTP API: a FastAPI app exposing batch processing and the sales report."""

from lemonctl.api.app import create_app

__all__ = ["create_app"]
