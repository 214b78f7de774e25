# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#	Lightweight telemetry for pymnemonic.
#
#	The allocator reports how each item got its mnemonic:
#		mnemonics.assigned		counter, attrs {"stage": ...}
#		mnemonics.unassigned	counter
#		mnemonics.pass_ms		timer, attrs {"items": n}
#	The menubar reports menu.select events.
#
# Notes:
#	- Safe to call when disabled; the default global instance is disabled.
#	- Backends are "sinks": NullSink, LogSink, MemorySink (tests).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	pymnemonic dev				Initial coding / release
# 10/16/2026	pymnemonic dev				Add MemorySink.total() for per-stage counter assertions
# ---------------------------------------------------------------------------

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

from pymnemonic.core.logging import get_app_logger


@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Dict[str, Any] = field(default_factory=dict)


class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class NullSink:
	"""
	Drops everything.
	"""

	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Writes events and metrics to a logger at DEBUG.
	"""

	def __init__(self, logger=None) -> None:
		self._log = logger if logger is not None else get_app_logger("telemetry")

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.debug("event %s %s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.debug("metric %s=%s %s", metric.name, metric.value, metric.attrs)


class MemorySink:
	"""
	Keeps everything in lists for inspection by tests.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def total(self, name: str, **attrs: Any) -> float:
		"""
		Sum of metric values named name whose attrs include attrs.
		"""
		out = 0.0
		for m in self.metrics:
			if m.name != name:
				continue
			if any(m.attrs.get(k) != v for k, v in attrs.items()):
				continue
			out += m.value
		return out

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry facade. Every method is a no-op when disabled.
	"""

	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	def event(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_event(TelemetryEvent(name=name, timestamp=time.time(), attrs=attrs or {}))

	def counter(self, name: str, value: int = 1, attrs: Optional[Dict[str, Any]] = None) -> None:
		self.metric(name, float(value), attrs)

	def metric(self, name: str, value: float, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_metric(TelemetryMetric(name=name, value=value, attrs=attrs or {}))

	def timer(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> "_Timer":
		return _Timer(self, name, attrs or {})


class _Timer:
	"""
	Context manager emitting elapsed milliseconds as a metric on exit.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: Dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._start = 0.0

	def __enter__(self) -> "_Timer":
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		self._telemetry.metric(self._name, elapsed_ms, self._attrs)


# ---------------------------------------------------------------------------
# Global instance
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any | None = None) -> Telemetry:
	"""
	(Re)create the global instance.

	cfg keys:
		telemetry_enabled:	bool (default False)
		telemetry_sink:		"null" | "log" (default "null")
	"""
	global _telemetry

	getter = getattr(cfg, "get", None)
	enabled = bool(getter("telemetry_enabled", False)) if callable(getter) else False
	sink_name = getter("telemetry_sink", "null") if callable(getter) else "null"

	if not enabled:
		_telemetry = Telemetry(False, NullSink())
	elif sink_name == "log":
		_telemetry = Telemetry(True, LogSink())
	else:
		_telemetry = Telemetry(True, NullSink())

	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the global instance (disabled until init_telemetry() says otherwise).
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())
	return _telemetry
