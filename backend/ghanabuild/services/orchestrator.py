"""Estimate request orchestrator: owns the client-side request lifecycle.

States (exactly one holds at a time)::

    Idle --submit(valid)--> Pending --success--> Succeeded
                               |
                               +-----failure----> Failed --retry--> Pending

An invalid submission leaves the current state untouched. A valid
submission from any state starts a new request. The network call is the
only blocking step; validation and state changes are synchronous.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ghanabuild.exceptions import EstimateRequestError, InvalidTransitionError
from ghanabuild.models.enums import EventType, FailureKind
from ghanabuild.services.events import EstimateEvent, LoggingEventSink
from ghanabuild.validation import Invalid, ValidationResult, validate

if TYPE_CHECKING:
    from ghanabuild.models.estimate import CostEstimate
    from ghanabuild.models.project import ProjectSpecification
    from ghanabuild.services.estimate_client import EstimateClient
    from ghanabuild.services.events import EventSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """No request has been issued yet."""


@dataclass(frozen=True)
class Pending:
    """A request for ``specification`` is in flight."""

    specification: ProjectSpecification


@dataclass(frozen=True)
class Succeeded:
    """The last request returned ``estimate``."""

    estimate: CostEstimate


@dataclass(frozen=True)
class Failed:
    """The last request failed; ``details`` is partial data from the error body."""

    specification: ProjectSpecification
    message: str
    kind: FailureKind
    details: Any = None


RequestState = Idle | Pending | Succeeded | Failed


class EstimateRequestOrchestrator:
    """Validates raw input, issues estimate requests and tracks their state.

    Retries are never automatic: :meth:`retry` replays the exact
    specification of the failed attempt without validating it again.
    """

    def __init__(
        self,
        client: EstimateClient,
        event_sink: EventSink | None = None,
        validator: Callable[[Mapping[str, Any] | None], ValidationResult] = validate,
    ) -> None:
        self._client = client
        self._event_sink = event_sink or LoggingEventSink()
        self._validator = validator
        self._state: RequestState = Idle()
        self._last_specification: ProjectSpecification | None = None

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def last_specification(self) -> ProjectSpecification | None:
        return self._last_specification

    def submit(self, raw: Mapping[str, Any] | None) -> ValidationResult:
        """Validate ``raw`` and, if it passes, request an estimate for it.

        Returns the validation result so callers can show the violation
        messages of an invalid submission.
        """
        fields = raw if isinstance(raw, Mapping) else {}
        self._emit(
            EventType.SUBMITTED,
            region=fields.get("region"),
            project_type=fields.get("projectType"),
            total_floor_area=fields.get("totalFloorArea"),
        )

        result = self._validator(raw)
        if isinstance(result, Invalid):
            self._emit(
                EventType.VALIDATION_FAILED,
                error_count=len(result.messages),
                errors=list(result.messages),
            )
            return result

        self._last_specification = result.specification
        self._dispatch(result.specification)
        return result

    def retry(self) -> RequestState:
        """Replay the last specification after a failure.

        Raises:
            InvalidTransitionError: If the current state is not ``Failed``.
        """
        if not isinstance(self._state, Failed) or self._last_specification is None:
            msg = f"retry is only allowed after a failure, current state is {self._state!r}"
            raise InvalidTransitionError(msg)

        self._emit(EventType.RETRIED, region=self._last_specification.region)
        self._dispatch(self._last_specification)
        return self._state

    def _dispatch(self, specification: ProjectSpecification) -> None:
        self._state = Pending(specification)
        start = time.monotonic()

        try:
            estimate = self._client.request_estimate(specification)
        except EstimateRequestError as exc:
            duration_ms = round((time.monotonic() - start) * 1000)
            self._state = Failed(
                specification=specification,
                message=exc.message,
                kind=exc.kind,
                details=exc.details,
            )
            self._emit(
                EventType.REQUEST_FAILED,
                kind=exc.kind.value,
                error=exc.message,
                status_code=exc.status_code,
                duration_ms=duration_ms,
            )
            return

        duration_ms = round((time.monotonic() - start) * 1000)
        self._state = Succeeded(estimate)
        self._emit(
            EventType.REQUEST_SUCCEEDED,
            total_cost=estimate.total_cost,
            duration_ms=duration_ms,
        )

    def _emit(self, event_type: EventType, **payload: Any) -> None:
        try:
            self._event_sink.emit(EstimateEvent(type=event_type, payload=payload))
        except Exception:
            logger.exception("Failed to emit %s event", event_type.value)
