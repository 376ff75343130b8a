"""Lifecycle event sink for the estimate request orchestrator.

The orchestrator reports a small closed set of events (see
:class:`~ghanabuild.models.enums.EventType`) to one sink. Sending events to
monitoring backends is the sink's job; the orchestrator never depends on
the outcome of an emit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ghanabuild.models.enums import EventType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EstimateEvent:
    """A single lifecycle event with its context."""

    type: EventType
    payload: dict[str, Any] = field(default_factory=dict)


class EventSink(Protocol):
    def emit(self, event: EstimateEvent) -> None: ...


class LoggingEventSink:
    """Writes every event to the ``ghanabuild.events`` logger at INFO level."""

    def __init__(self, logger_name: str = "ghanabuild.events") -> None:
        self._logger = logging.getLogger(logger_name)

    def emit(self, event: EstimateEvent) -> None:
        self._logger.info("%s %s", event.type.value, event.payload)


class FanOutEventSink:
    """Forwards each event to several sinks.

    A sink that raises is logged and skipped; the remaining sinks still
    receive the event.
    """

    def __init__(self, sinks: Iterable[EventSink]) -> None:
        self._sinks = list(sinks)

    def emit(self, event: EstimateEvent) -> None:
        for sink in self._sinks:
            try:
                sink.emit(event)
            except Exception:
                logger.exception(
                    "Event sink %s failed on %s", type(sink).__name__, event.type.value
                )
