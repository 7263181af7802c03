import logging

from prometheus_client import REGISTRY

from sananmuunnin.utils.logging_config import configure_logging
from sananmuunnin.utils.observability import (
    create_counter,
    create_histogram,
    get_logger,
    start_span,
)


def test_structured_logger_appends_context(caplog):
    caplog.set_level(logging.INFO, logger="sananmuunnin.tests")
    logger = get_logger("sananmuunnin.tests").bind(component="loader")

    logger.info("Dictionary loaded", context={"words": 3})

    assert caplog.records[-1].getMessage() == (
        'Dictionary loaded | {"component": "loader", "words": 3}'
    )


def test_structured_logger_keeps_non_ascii_words(caplog):
    caplog.set_level(logging.INFO, logger="sananmuunnin.tests")

    get_logger("sananmuunnin.tests").info("Query", context={"word": "äiti"})

    assert '"word": "äiti"' in caplog.records[-1].getMessage()


def test_counter_registration_is_idempotent():
    first = create_counter("sananmuunnin_test_events_total", "Events seen by tests.")
    second = create_counter("sananmuunnin_test_events_total", "Events seen by tests.")

    before = REGISTRY.get_sample_value("sananmuunnin_test_events_total") or 0.0
    first.inc()
    second.inc(2)

    assert REGISTRY.get_sample_value("sananmuunnin_test_events_total") == before + 3


def test_histogram_times_block():
    histogram = create_histogram("sananmuunnin_test_block_seconds", "Block timing in tests.")
    before = REGISTRY.get_sample_value("sananmuunnin_test_block_seconds_count") or 0.0

    with histogram.time():
        pass

    assert REGISTRY.get_sample_value("sananmuunnin_test_block_seconds_count") == before + 1


def test_labelled_counter():
    counter = create_counter(
        "sananmuunnin_test_labelled_total", "Labelled test counter.", label_names=("executor",)
    )

    counter.labels(executor="thread").inc()

    assert REGISTRY.get_sample_value(
        "sananmuunnin_test_labelled_total", {"executor": "thread"}
    ) >= 1


def test_start_span_yields_span_without_sdk():
    with start_span("sananmuunnin.test", {"words": 2, "skipped": None}) as span:
        assert span is not None


def test_configure_logging_reads_environment(monkeypatch):
    monkeypatch.setenv("SANANMUUNNIN_LOG_LEVEL", "debug")

    configure_logging(force=True)

    assert logging.getLogger("sananmuunnin").level == logging.DEBUG
    configure_logging("WARNING", force=True)
    assert logging.getLogger("sananmuunnin").level == logging.WARNING
