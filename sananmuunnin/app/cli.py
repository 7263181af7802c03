#!/usr/bin/env python3
"""Command line entry point: list every sananmuunnos found in a word list."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from ..core.analyzer import WordAnalyzer
from ..core.coordinator import EXECUTORS, MAX_PARALLELISM, SearchCoordinator
from ..errors import DictionaryLoadError, SearchError, SelectionError
from ..utils.logging_config import configure_logging
from ..utils.observability import get_logger
from ..utils.telemetry import TelemetryLogger
from .config import SearchSettings
from .dictionary_loader import DictionaryLoader
from .result_formatter import MatchFormatter
from .selection import select_regex, select_word

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_TOO_MANY_THREADS = 2

_logger = get_logger(__name__).bind(component="cli")


class _UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports bad arguments to :func:`main` instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def _build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(
        prog="sananmuunnin",
        description=(
            "Find every pair of words in a dictionary whose initial morae can be "
            "swapped so that both results are words too."
        ),
    )
    parser.add_argument("dictionary", help="Word list file, one word per line.")
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "word",
        nargs="?",
        help="Only search swaps starting from this word (need not be in the dictionary).",
    )
    target.add_argument(
        "-r",
        "--regex",
        metavar="REGEX",
        help="Only search swaps starting from dictionary words fully matching REGEX (case-insensitive).",
    )
    parser.add_argument(
        "-t",
        "--threads",
        type=int,
        metavar="N",
        help=f"Number of parallel workers, at most {MAX_PARALLELISM}. 0 uses the default.",
    )
    parser.add_argument(
        "--executor",
        choices=EXECUTORS,
        help="Worker pool flavour; 'process' sidesteps the GIL for large dictionaries.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (defaults to $SANANMUUNNIN_LOG_LEVEL or WARNING).",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    out = stdout or sys.stdout
    err = stderr or sys.stderr

    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as exc:
        err.write(parser.format_usage())
        err.write(f"{parser.prog}: error: {exc}\n")
        return EXIT_ERROR

    settings = SearchSettings.from_env().override(
        parallelism=args.threads or None,
        executor=args.executor,
        log_level=args.log_level,
    )
    configure_logging(settings.log_level, default=logging.WARNING)

    if settings.parallelism > MAX_PARALLELISM:
        err.write(
            f"{parser.prog}: thread count {settings.parallelism} exceeds the maximum of "
            f"{MAX_PARALLELISM}\n"
        )
        return EXIT_TOO_MANY_THREADS
    if settings.parallelism < 1:
        err.write(parser.format_usage())
        err.write(f"{parser.prog}: error: thread count must be positive\n")
        return EXIT_ERROR

    formatter = MatchFormatter()
    analyzer = WordAnalyzer()
    coordinator = SearchCoordinator(settings.parallelism, executor=settings.executor)
    coordinator.telemetry.add_listener(TelemetryLogger())

    try:
        lexicon, dictionary = DictionaryLoader(args.dictionary, analyzer=analyzer).build()
        if args.regex is not None:
            from_list = select_regex(args.regex, dictionary)
            for line in formatter.format_regex_header(from_list):
                out.write(f"{line}\n")
        elif args.word is not None:
            from_list = select_word(args.word, analyzer)
        else:
            from_list = dictionary

        matches = coordinator.search(from_list, dictionary, lexicon)
    except (DictionaryLoadError, SelectionError, SearchError) as exc:
        _logger.debug("Run failed", context={"error_type": type(exc).__name__})
        err.write(f"{exc}\n")
        return EXIT_ERROR

    for line in formatter.render(matches):
        out.write(f"{line}\n")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
