"""Environment driven defaults for the command line."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from ..core.coordinator import EXECUTORS
from ..utils.logging_config import LOG_LEVEL_ENV

THREADS_ENV = "SANANMUUNNIN_THREADS"
EXECUTOR_ENV = "SANANMUUNNIN_EXECUTOR"


def _env_int(value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class SearchSettings:
    """Worker count, pool flavour and log level for one run."""

    parallelism: int = 1
    executor: str = "thread"
    log_level: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SearchSettings":
        env = os.environ if environ is None else environ
        executor = (env.get(EXECUTOR_ENV) or "thread").strip().lower()
        if executor not in EXECUTORS:
            executor = "thread"
        return cls(
            parallelism=_env_int(env.get(THREADS_ENV), 1),
            executor=executor,
            log_level=env.get(LOG_LEVEL_ENV) or None,
        )

    def override(
        self,
        *,
        parallelism: Optional[int] = None,
        executor: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> "SearchSettings":
        """Return a copy with every non-``None`` argument applied."""

        changes = {
            key: value
            for key, value in (
                ("parallelism", parallelism),
                ("executor", executor),
                ("log_level", log_level),
            )
            if value is not None
        }
        return replace(self, **changes)


__all__ = ["SearchSettings", "THREADS_ENV", "EXECUTOR_ENV"]
