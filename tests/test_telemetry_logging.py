import logging

from sananmuunnin.utils.telemetry import StructuredTelemetry, TelemetryLogger


def test_structured_telemetry_emits_logging_events(caplog):
    telemetry = StructuredTelemetry()
    listener = TelemetryLogger()
    telemetry.add_listener(listener)

    caplog.set_level(logging.DEBUG, logger="sananmuunnin.utils.telemetry")

    telemetry.start_trace("test-trace")
    with telemetry.timer("search.partition"):
        pass
    telemetry.increment("search.matches")
    telemetry.annotate("search.from_size", 3)

    messages = [record.getMessage() for record in caplog.records]
    assert any("Telemetry trace_started: test-trace" in message for message in messages)
    assert any("Telemetry timer_started: search.partition" in message for message in messages)
    assert any("Telemetry timing: search.partition" in message for message in messages)
    assert any("Telemetry counter: search.matches" in message for message in messages)
    assert any("Telemetry metadata: search.from_size" in message for message in messages)


def test_telemetry_logger_respects_level(caplog):
    telemetry = StructuredTelemetry(listeners=[TelemetryLogger()])
    caplog.set_level(logging.INFO, logger="sananmuunnin.utils.telemetry")

    telemetry.start_trace("quiet")

    assert not caplog.records


def test_timings_aggregate_per_name():
    ticks = iter([0.0, 1.5, 2.0, 2.5])
    telemetry = StructuredTelemetry(time_fn=lambda: next(ticks))
    telemetry.start_trace("search")

    with telemetry.timer("search.partition", {"partition": 0}):
        pass
    with telemetry.timer("search.partition", {"partition": 1}):
        pass

    bucket = telemetry.snapshot()["timings"]["search.partition"]
    assert bucket["count"] == 2
    assert bucket["total"] == 2.0
    assert bucket["min"] == 0.5
    assert bucket["max"] == 1.5


def test_start_trace_resets_state():
    telemetry = StructuredTelemetry()
    telemetry.start_trace("first")
    telemetry.increment("search.matches", 3)

    trace_id = telemetry.start_trace("second")

    snapshot = telemetry.snapshot()
    assert trace_id == 2
    assert snapshot["counters"] == {}
    assert telemetry.counter("search.matches") == 0.0


def test_removed_listener_stops_receiving_events():
    events = []

    def listener(event_type, payload):
        events.append(event_type)

    telemetry = StructuredTelemetry(listeners=[listener])
    telemetry.increment("a")
    telemetry.remove_listener(listener)
    telemetry.increment("b")

    assert events == ["counter"]
