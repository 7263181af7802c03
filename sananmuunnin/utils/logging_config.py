"""Helpers for configuring consistent project logging output."""

from __future__ import annotations

import logging
import os
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False

LOG_LEVEL_ENV = "SANANMUUNNIN_LOG_LEVEL"


def _resolve_level(level: str | int | None, default: int = logging.INFO) -> int:
    if level is None or level == "":
        return default
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        return getattr(logging, normalized, default)


def configure_logging(
    level: Optional[str | int] = None,
    *,
    force: bool = False,
    default: int = logging.INFO,
) -> None:
    """Initialise root logging handlers for the application.

    Handlers write to stderr so swap results printed on stdout stay clean for
    piping. ``level`` wins over the ``SANANMUUNNIN_LOG_LEVEL`` environment
    variable, which wins over ``default``.
    """

    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    env_level = os.environ.get(LOG_LEVEL_ENV)
    resolved_level = _resolve_level(
        level if level is not None else env_level, default=default
    )

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT)
    logging.getLogger("sananmuunnin").setLevel(resolved_level)
    _CONFIGURED = True


__all__ = ["configure_logging", "LOG_LEVEL_ENV"]
