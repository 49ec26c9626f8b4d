"""Unit tests for structured diagnostics and sinks."""

import logging

import pytest

from relay_llm.observability.logging import Diagnostics
from relay_llm.observability.sinks.in_memory import InMemoryDiagnosticsSink


@pytest.mark.unit
class TestDiagnostics:

    def test_events_reach_sink_with_fields(self, diagnostics, sink):
        diagnostics.info("tool.executed", "Executed", tool="get_weather", call_id=None)

        event = sink.events()[0]
        assert event.name == "tool.executed"
        assert event.level == logging.INFO
        assert event.level_name == "INFO"
        assert event.component == "test"
        assert event.fields == {"tool": "get_weather"}

    def test_error_fields_added(self, diagnostics, sink):
        diagnostics.warning("tool.failed", "Failed", error=ValueError("bad input"))

        event = sink.events(name="tool.failed")[0]
        assert isinstance(event.error, ValueError)
        assert event.fields["error_type"] == "ValueError"
        assert event.fields["error_msg"] == "bad input"

    def test_logs_through_component_logger(self, diagnostics, caplog):
        with caplog.at_level(logging.DEBUG, logger="relay_llm.test"):
            diagnostics.debug("orchestrator.round", "Sending tool results", round=2)

        record = caplog.records[0]
        assert record.name == "relay_llm.test"
        assert "event=orchestrator.round" in record.getMessage()
        assert "round=2" in record.getMessage()

    def test_child_shares_sinks(self, diagnostics, sink):
        child = diagnostics.child("providers.anthropic")
        child.error("provider.error", "boom")

        event = sink.events()[0]
        assert event.component == "providers.anthropic"
        assert child.logger.name == "relay_llm.providers.anthropic"

    def test_add_and_remove_sink(self):
        diagnostics = Diagnostics("x")
        sink = InMemoryDiagnosticsSink()

        diagnostics.add_sink(sink)
        diagnostics.info("a", "first")
        diagnostics.remove_sink(sink)
        diagnostics.info("b", "second")

        assert sink.names() == ["a"]

    def test_track_request_success(self, diagnostics, sink):
        with diagnostics.track_request("generate", "model-x") as info:
            info["outcome"] = "completed"

        assert sink.names() == ["provider.request", "provider.response"]
        response = sink.events(name="provider.response")[0]
        assert response.fields["outcome"] == "completed"
        assert response.fields["request_id"] == info["request_id"]
        assert "duration_ms" in response.fields

    def test_track_request_failure_reraises(self, diagnostics, sink):
        with pytest.raises(RuntimeError):
            with diagnostics.track_request("generate", "model-x"):
                raise RuntimeError("down")

        failed = sink.events(name="provider.request_failed")
        assert len(failed) == 1
        assert failed[0].level == logging.ERROR


@pytest.mark.unit
class TestInMemorySink:

    def test_bounded_and_filterable(self):
        sink = InMemoryDiagnosticsSink(max_size=3)
        diagnostics = Diagnostics("x", sinks=[sink])
        for index in range(5):
            diagnostics.info(f"e{index}", "m")
        diagnostics.warning("w", "m")

        assert len(sink) == 3
        assert sink.names() == ["e3", "e4", "w"]
        assert [e.name for e in sink.events(level=logging.WARNING)] == ["w"]

        sink.clear()
        assert len(sink) == 0
