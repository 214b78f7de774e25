# ---------------------------------------------------------------------------
# File: test_telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pymnemonic.core.telemetry.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Uses MemorySink for deterministic assertions.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	pymnemonic dev				Initial tests
# 10/16/2026	pymnemonic dev				Cover MemorySink.total() and LogSink
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

from pymnemonic.core.telemetry import (
	LogSink,
	MemorySink,
	NullSink,
	Telemetry,
	get_telemetry,
	init_telemetry,
)


def test_telemetry_disabled_is_noop():
	sink = MemorySink()
	t = Telemetry(enabled=False, sink=sink)

	t.event("menu.select", {"label": "Open"})
	t.counter("mnemonics.assigned", 3, {"stage": "ranked"})

	with t.timer("mnemonics.pass_ms", {"items": 2}):
		pass

	assert not t.enabled
	assert sink.events == []
	assert sink.metrics == []


def test_telemetry_event_emits_to_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("menu.select", {"label": "Open"})

	assert len(sink.events) == 1
	ev = sink.events[0]
	assert ev.name == "menu.select"
	assert ev.attrs == {"label": "Open"}

	# slots=True dataclasses don't have __dict__
	assert isinstance(ev.timestamp, float)
	assert ev.timestamp > 0.0


def test_telemetry_counter_emits_metric_to_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.counter("mnemonics.assigned", 2, {"stage": "digit"})

	assert len(sink.metrics) == 1
	m = sink.metrics[0]
	assert m.name == "mnemonics.assigned"
	assert m.value == 2.0
	assert m.attrs["stage"] == "digit"


def test_telemetry_timer_emits_metric():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with t.timer("mnemonics.pass_ms", {"items": 5}):
		pass

	assert len(sink.metrics) == 1
	m = sink.metrics[0]
	assert m.name == "mnemonics.pass_ms"
	assert m.value >= 0.0
	assert m.attrs == {"items": 5}


def test_memorysink_total_filters_by_attrs():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.counter("mnemonics.assigned", 1, {"stage": "predefined"})
	t.counter("mnemonics.assigned", 1, {"stage": "predefined"})
	t.counter("mnemonics.assigned", 1, {"stage": "ranked"})
	t.counter("mnemonics.unassigned", 1)

	assert sink.total("mnemonics.assigned") == 3.0
	assert sink.total("mnemonics.assigned", stage="predefined") == 2.0
	assert sink.total("mnemonics.assigned", stage="digit") == 0.0
	assert sink.total("mnemonics.unassigned") == 1.0


def test_memorysink_clear():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("x")
	t.counter("y")

	assert len(sink.events) == 1
	assert len(sink.metrics) == 1

	sink.clear()

	assert sink.events == []
	assert sink.metrics == []


def test_logsink_writes_debug_records(caplog):
	t = Telemetry(enabled=True, sink=LogSink())

	with caplog.at_level(logging.DEBUG, logger="pymnemonic.telemetry"):
		t.event("menu.select", {"label": "Quit"})
		t.counter("mnemonics.unassigned", 1)

	messages = [r.getMessage() for r in caplog.records]
	assert any("menu.select" in msg for msg in messages)
	assert any("mnemonics.unassigned=1.0" in msg for msg in messages)


def test_nullsink_accepts_everything():
	t = Telemetry(enabled=True, sink=NullSink())
	t.event("x")
	t.counter("y")


def test_get_telemetry_safe_before_init_returns_disabled():
	t = get_telemetry()

	t.event("should.not.raise")
	t.counter("should.not.raise", 1)

	assert isinstance(t, Telemetry)


def test_init_telemetry_disabled_sets_global_noop():
	t = init_telemetry({"telemetry_enabled": False})

	assert get_telemetry() is t
	assert not t.enabled


def test_init_telemetry_log_sink():
	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "log"})

	assert get_telemetry() is t
	assert t.enabled
	t.event("enabled.log")

	init_telemetry(None)


def test_init_telemetry_enabled_unknown_sink_uses_nullsink():
	t = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "nope"})

	assert t.enabled
	t.event("enabled.unknownsink")
	t.counter("enabled.unknownsink", 1)

	init_telemetry(None)
