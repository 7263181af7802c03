"""Exception hierarchy for the sananmuunnin package."""

from __future__ import annotations


class SananmuunninError(Exception):
    """Base class for errors raised by this package."""


class DictionaryLoadError(SananmuunninError, OSError):
    """The word list file could not be read."""


class SelectionError(SananmuunninError, ValueError):
    """The word subset could not be selected, e.g. an invalid regex."""


class ParallelismError(SananmuunninError, ValueError):
    """Requested worker count is outside ``1..MAX_PARALLELISM``."""


class SearchError(SananmuunninError, RuntimeError):
    """A search partition failed; no partial results are returned."""


__all__ = [
    "SananmuunninError",
    "DictionaryLoadError",
    "SelectionError",
    "ParallelismError",
    "SearchError",
]
