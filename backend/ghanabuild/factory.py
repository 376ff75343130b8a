"""Factory functions for creating pre-configured Ghanabuild components."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ghanabuild.config import Settings
from ghanabuild.data.repository import PricingTable
from ghanabuild.engine import PricingEngine
from ghanabuild.services.estimate_client import EstimateClient
from ghanabuild.services.events import LoggingEventSink
from ghanabuild.services.orchestrator import EstimateRequestOrchestrator

if TYPE_CHECKING:
    from ghanabuild.services.events import EventSink


def create_default_engine() -> PricingEngine:
    """Create a PricingEngine wired up with the built-in pricing table.

    Example::

        from ghanabuild import create_default_engine, validate

        engine = create_default_engine()
        result = validate(form_values)
        if result.is_valid:
            estimate = engine.estimate(result.specification)
    """
    return PricingEngine(PricingTable())


def create_orchestrator(
    settings: Settings | None = None,
    event_sink: EventSink | None = None,
) -> EstimateRequestOrchestrator:
    """Create an EstimateRequestOrchestrator talking to the configured API.

    Reads the API base URL and request timeout from the environment when
    ``settings`` is not given. Events go to the log unless another sink is
    supplied.
    """
    settings = settings or Settings.from_env()
    client = EstimateClient(
        base_url=settings.api_url,
        timeout_seconds=settings.request_timeout_seconds,
    )
    return EstimateRequestOrchestrator(
        client=client,
        event_sink=event_sink or LoggingEventSink(),
    )
