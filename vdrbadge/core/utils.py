from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

DEFAULT_ROUNDED_PIXELS = 3
DEFAULT_LOG_LEVEL = "INFO"


class BadgeError(RuntimeError):
    pass


class BadgeRenderError(BadgeError):
    pass


class SvgCompositionError(BadgeError):
    pass


class InvalidVdrError(BadgeError):
    pass


def get_base_url() -> str | None:
    """Base URL badges link to, from ``VDRBADGE_BASE_URL``."""
    value = os.environ.get("VDRBADGE_BASE_URL", "").strip()
    return value or None


def get_log_level() -> str:
    return os.environ.get("VDRBADGE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL


def setup_logging(level: str | None = None, verbose: bool = False) -> None:
    if verbose:
        level = "DEBUG"
    level = level or get_log_level()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
    )
    logging.basicConfig(level=level, handlers=[handler], force=True)


def load_vdr(path: Path) -> Any:
    """Read a VDR file. Any JSON value is accepted; only unparseable input fails."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InvalidVdrError(f"Cannot read VDR file {path}: {exc}") from exc
    return parse_vdr(text)


def parse_vdr(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except (ValueError, UnicodeDecodeError) as exc:
        raise InvalidVdrError(f"Invalid VDR payload: {exc}") from exc
