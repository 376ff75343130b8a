"""Custom exception hierarchy for Ghanabuild."""

from __future__ import annotations

from typing import Any

from ghanabuild.models.enums import FailureKind


class GhanabuildError(Exception):
    """Base exception for all Ghanabuild errors."""


class InvalidTransitionError(GhanabuildError):
    """Raised when the request lifecycle is asked for an illegal transition."""


class EstimateRequestError(GhanabuildError):
    """Raised when an estimate request does not produce an estimate.

    ``message`` is the user-facing text; the original cause (if any) is
    chained via ``__cause__`` and never shown verbatim.
    """

    kind: FailureKind = FailureKind.SERVER

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class RequestTimeoutError(EstimateRequestError):
    """Raised when the estimate request exceeds its deadline."""

    kind = FailureKind.TIMEOUT


class TransportError(EstimateRequestError):
    """Raised on network, DNS or connection failures."""

    kind = FailureKind.TRANSPORT


class ServerFaultError(EstimateRequestError):
    """Raised when the server answers with a non-2xx status or an unusable body."""

    kind = FailureKind.SERVER
