"""Process-level settings read from the environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path

# JSON file with a list of catalog items; the embedded seed catalog is used when unset
CATALOG_PATH_ENV = "POSTFRAME_CATALOG"

LOG_LEVEL = os.environ.get("POSTFRAME_LOG_LEVEL", "INFO").upper()

HOST = os.environ.get("POSTFRAME_HOST", "0.0.0.0")
PORT = int(os.environ.get("POSTFRAME_PORT", "8000"))

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def catalog_path() -> Path | None:
    value = os.environ.get(CATALOG_PATH_ENV)
    return Path(value) if value else None


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
