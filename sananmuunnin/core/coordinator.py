"""Exhaustive pairwise swap search, partitioned across a worker pool."""

from __future__ import annotations

import time
from concurrent.futures import Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ..errors import ParallelismError, SearchError
from ..utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from ..utils.telemetry import StructuredTelemetry
from .lexicon import Lexicon, WordEntry, WordList
from .swap import swap

MAX_PARALLELISM = 64
EXECUTORS = ("thread", "process")

_logger = get_logger(__name__).bind(component="search_coordinator")

_METRIC_SEARCHES = create_counter(
    "sananmuunnin_searches_total",
    "Total swap searches started.",
    label_names=("executor",),
)
_METRIC_FAILURES = create_counter(
    "sananmuunnin_search_failures_total",
    "Total swap searches aborted by a failing partition.",
)
_METRIC_PAIRS = create_counter(
    "sananmuunnin_pairs_examined_total",
    "Word pairs passed through the swap engine.",
)
_METRIC_MATCHES = create_counter(
    "sananmuunnin_matches_total",
    "Swap results whose both outputs are known words.",
)
_METRIC_DURATION = create_histogram(
    "sananmuunnin_search_seconds",
    "Wall clock duration of complete swap searches.",
)


@dataclass(frozen=True)
class MatchRecord:
    """Two words whose swapped forms are both in the lexicon."""

    word1: str
    word2: str
    out_word1: str
    out_word2: str

    def format(self) -> str:
        return f"{self.word1} {self.word2} => {self.out_word1} {self.out_word2}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class PartitionResult:
    """Matches and counters produced by one contiguous slice of ``from``."""

    index: int
    matches: Tuple[MatchRecord, ...]
    pairs_examined: int
    candidates: int
    duration: float
    size: int = 0


def effective_parallelism(size: int, requested: int) -> int:
    """Clamp ``requested`` so that none of the ``size``-word partitions is empty."""

    return max(1, min(int(requested), MAX_PARALLELISM, size))


def partition_bounds(size: int, parallelism: int) -> List[Tuple[int, int]]:
    """Split ``range(size)`` into ``parallelism`` contiguous ``(start, stop)`` ranges.

    Every range holds ``size // parallelism`` words except the last one,
    which also takes the remainder.
    """

    if parallelism < 1:
        raise ParallelismError(f"parallelism must be at least 1, got {parallelism}")

    chunk = size // parallelism
    bounds = [(index * chunk, (index + 1) * chunk) for index in range(parallelism - 1)]
    bounds.append(((parallelism - 1) * chunk, size))
    return bounds


def _swap_candidates(
    from_entries: Iterable[WordEntry],
    to_entries: Iterable[WordEntry],
) -> Iterator[Tuple[str, str, Tuple[str, str]]]:
    to_entries = tuple(to_entries)
    for first in from_entries:
        for second in to_entries:
            outputs = swap(first.word, first.descriptor, second.word, second.descriptor)
            if outputs is not None:
                yield first.word, second.word, outputs


def iter_partition_matches(
    from_entries: Iterable[WordEntry],
    to_entries: Iterable[WordEntry],
    lexicon: Lexicon,
) -> Iterator[MatchRecord]:
    """Yield matches in ``from``-then-``to`` nested order."""

    for word1, word2, (out1, out2) in _swap_candidates(from_entries, to_entries):
        if lexicon.contains(out1) and lexicon.contains(out2):
            yield MatchRecord(word1, word2, out1, out2)


def search_partition(
    index: int,
    from_list: WordList,
    to_list: WordList,
    lexicon: Lexicon,
) -> PartitionResult:
    """Run the full inner loop over ``to_list`` for every word of ``from_list``."""

    start = time.perf_counter()
    candidates = 0
    matches: List[MatchRecord] = []
    for word1, word2, (out1, out2) in _swap_candidates(from_list, to_list):
        candidates += 1
        if lexicon.contains(out1) and lexicon.contains(out2):
            matches.append(MatchRecord(word1, word2, out1, out2))

    return PartitionResult(
        index=index,
        matches=tuple(matches),
        pairs_examined=len(from_list) * len(to_list),
        candidates=candidates,
        duration=time.perf_counter() - start,
        size=len(from_list),
    )


# Process workers receive the shared collections once, through the pool initializer.
_WORKER_STATE: Dict[str, Any] = {}


def _init_process_worker(to_list: WordList, lexicon: Lexicon) -> None:
    _WORKER_STATE["to_list"] = to_list
    _WORKER_STATE["lexicon"] = lexicon


def _process_partition(index: int, from_list: WordList) -> PartitionResult:
    return search_partition(
        index, from_list, _WORKER_STATE["to_list"], _WORKER_STATE["lexicon"]
    )


class SearchCoordinator:
    """Drives ``from`` x ``to`` through the swap engine on a bounded pool.

    The ``from`` list is cut into contiguous partitions, each searched
    against the whole ``to`` list.  Results are concatenated in partition
    order once every worker has finished, so the output equals that of a
    single-threaded run.  Any failing partition aborts the whole search
    with :class:`SearchError`.
    """

    def __init__(
        self,
        parallelism: int = 1,
        *,
        executor: str = "thread",
        telemetry: Optional[StructuredTelemetry] = None,
    ) -> None:
        try:
            requested = int(parallelism)
        except (TypeError, ValueError) as exc:
            raise ParallelismError(f"invalid parallelism: {parallelism!r}") from exc
        if requested < 1:
            raise ParallelismError(f"parallelism must be at least 1, got {requested}")
        if requested > MAX_PARALLELISM:
            raise ParallelismError(
                f"parallelism {requested} exceeds the maximum of {MAX_PARALLELISM}"
            )
        if executor not in EXECUTORS:
            raise ValueError(
                f"unknown executor {executor!r}; expected one of {', '.join(EXECUTORS)}"
            )

        self.parallelism = requested
        self.executor = executor
        self.telemetry = telemetry or StructuredTelemetry()
        self._logger = _logger.bind(executor=executor, parallelism=requested)

    def iter_matches(
        self,
        from_list: WordList,
        to_list: WordList,
        lexicon: Lexicon,
    ) -> Iterator[MatchRecord]:
        """Stream matches from the calling thread, in the same order as :meth:`search`."""

        return iter_partition_matches(from_list, to_list, lexicon)

    def search(
        self,
        from_list: WordList,
        to_list: WordList,
        lexicon: Lexicon,
    ) -> List[MatchRecord]:
        partitions = effective_parallelism(len(from_list), self.parallelism)
        telemetry = self.telemetry
        telemetry.start_trace("search")
        telemetry.annotate("search.from_size", len(from_list))
        telemetry.annotate("search.to_size", len(to_list))
        telemetry.annotate("search.partitions", partitions)

        _METRIC_SEARCHES.labels(executor=self.executor).inc()
        self._logger.info(
            "Starting swap search",
            context={
                "from_size": len(from_list),
                "to_size": len(to_list),
                "lexicon_size": len(lexicon),
                "partitions": partitions,
            },
        )

        attributes = {
            "search.from_size": len(from_list),
            "search.to_size": len(to_list),
            "search.partitions": partitions,
            "search.executor": self.executor,
        }
        with start_span("sananmuunnin.search", attributes) as span, _METRIC_DURATION.time():
            try:
                results = self._run_partitions(from_list, to_list, lexicon, partitions)
            except SearchError as exc:
                _METRIC_FAILURES.inc()
                record_exception(span, exc)
                self._logger.error("Swap search aborted", context={"error": str(exc)})
                raise

            matches: List[MatchRecord] = []
            for result in results:
                self._record_partition(result)
                matches.extend(result.matches)
            add_span_attributes(span, {"search.matches": len(matches)})

        self._logger.info(
            "Swap search finished",
            context={
                "matches": len(matches),
                "pairs_examined": int(telemetry.counter("search.pairs_examined")),
            },
        )
        return matches

    def _run_partitions(
        self,
        from_list: WordList,
        to_list: WordList,
        lexicon: Lexicon,
        partitions: int,
    ) -> List[PartitionResult]:
        bounds = partition_bounds(len(from_list), partitions)
        if partitions == 1:
            try:
                return [search_partition(0, from_list, to_list, lexicon)]
            except Exception as exc:
                raise SearchError("search partition 0 failed") from exc

        with self._create_executor(partitions, to_list, lexicon) as pool:
            futures = [
                self._submit(pool, index, from_list[start:stop], to_list, lexicon)
                for index, (start, stop) in enumerate(bounds)
            ]
            results: List[PartitionResult] = []
            for index, future in enumerate(futures):
                try:
                    results.append(future.result())
                except Exception as exc:
                    for pending in futures:
                        pending.cancel()
                    raise SearchError(f"search partition {index} failed") from exc
        return results

    def _create_executor(self, workers: int, to_list: WordList, lexicon: Lexicon) -> Executor:
        if self.executor == "process":
            return ProcessPoolExecutor(
                max_workers=workers,
                initializer=_init_process_worker,
                initargs=(to_list, lexicon),
            )
        return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="sananmuunnin")

    def _submit(
        self,
        pool: Executor,
        index: int,
        from_slice: WordList,
        to_list: WordList,
        lexicon: Lexicon,
    ) -> "Future[PartitionResult]":
        if self.executor == "process":
            return pool.submit(_process_partition, index, from_slice)
        return pool.submit(search_partition, index, from_slice, to_list, lexicon)

    def _record_partition(self, result: PartitionResult) -> None:
        telemetry = self.telemetry
        telemetry.record_timing(
            "search.partition",
            result.duration,
            {"partition": result.index, "words": result.size, "matches": len(result.matches)},
        )
        telemetry.increment("search.pairs_examined", result.pairs_examined)
        telemetry.increment("search.candidates", result.candidates)
        telemetry.increment("search.matches", len(result.matches))
        _METRIC_PAIRS.inc(result.pairs_examined)
        _METRIC_MATCHES.inc(len(result.matches))


def search(
    from_list: WordList,
    to_list: WordList,
    lexicon: Lexicon,
    parallelism: int = 1,
    *,
    executor: str = "thread",
    telemetry: Optional[StructuredTelemetry] = None,
) -> List[MatchRecord]:
    """Find every pair of ``from_list`` x ``to_list`` whose swap lands in ``lexicon``."""

    coordinator = SearchCoordinator(parallelism, executor=executor, telemetry=telemetry)
    return coordinator.search(from_list, to_list, lexicon)


__all__ = [
    "MAX_PARALLELISM",
    "EXECUTORS",
    "MatchRecord",
    "PartitionResult",
    "SearchCoordinator",
    "effective_parallelism",
    "iter_partition_matches",
    "partition_bounds",
    "search",
    "search_partition",
]
