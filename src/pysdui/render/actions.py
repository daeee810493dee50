# ---------------------------------------------------------------------------
# File: actions.py
# ---------------------------------------------------------------------------
# Description:
#	Action sinks: where fire-and-forget activation signals go.
#
# Notes:
#	- The only payload is the id of the activated component.
#	- Sinks never mutate the component tree.
#	- Handling (navigation, analytics) belongs to whoever owns the sink.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	Paul G. LeDuc				Initial coding / release
# 10/09/2026	Paul G. LeDuc				Add TelemetryActionSink + FanoutActionSink
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from pysdui.core.logging import get_app_logger
from pysdui.core.telemetry import Telemetry, get_telemetry


@runtime_checkable
class ActionSink(Protocol):
	"""
	Receives one signal per activation.
	"""

	def activated(self, component_id: str) -> None: ...


class LogActionSink:
	def __init__(self, logger: Optional[logging.Logger] = None) -> None:
		self._log = logger or get_app_logger("actions")

	def activated(self, component_id: str) -> None:
		self._log.info("Action activated id=%s", component_id)


class TelemetryActionSink:
	def __init__(self, telemetry: Optional[Telemetry] = None) -> None:
		self._telemetry = telemetry

	def activated(self, component_id: str) -> None:
		t = self._telemetry or get_telemetry()
		t.event("action.activated", {"component_id": component_id})


class MemoryActionSink:
	"""
	Records activations (tests).
	"""

	def __init__(self) -> None:
		self.activations: list[str] = []

	def activated(self, component_id: str) -> None:
		self.activations.append(component_id)


class FanoutActionSink:
	"""
	Forwards each activation to every wrapped sink, in order.
	"""

	def __init__(self, *sinks: ActionSink) -> None:
		self._sinks = tuple(sinks)

	def activated(self, component_id: str) -> None:
		for sink in self._sinks:
			sink.activated(component_id)
