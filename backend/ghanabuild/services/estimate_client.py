"""HTTP client for the estimate endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from ghanabuild.config import DEFAULT_REQUEST_TIMEOUT_SECONDS
from ghanabuild.exceptions import RequestTimeoutError, ServerFaultError, TransportError
from ghanabuild.models.estimate import CostEstimate

if TYPE_CHECKING:
    from ghanabuild.models.project import ProjectSpecification

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "The estimate request timed out. Please try again."
TRANSPORT_MESSAGE = "Unable to reach the estimate service. Please try again."
SERVER_FAULT_MESSAGE = "Failed to calculate estimate"
INVALID_RESPONSE_MESSAGE = "Received an invalid estimate from the server"


class EstimateClient:
    """Posts specifications to ``{base_url}/api/estimate``.

    Every request carries the same fixed timeout. Failures are raised as
    :class:`~ghanabuild.exceptions.EstimateRequestError` subclasses whose
    ``message`` is safe to show to a user.

    Args:
        base_url: Root URL of the Ghanabuild API.
        timeout_seconds: Deadline for each request.
        http_client: Optional pre-built ``httpx.Client`` (e.g. with a mock
            transport in tests).
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._endpoint = f"{base_url.rstrip('/')}/api/estimate"
        self._timeout = httpx.Timeout(timeout_seconds)
        self._http = http_client or httpx.Client(timeout=self._timeout)

    def request_estimate(self, specification: ProjectSpecification) -> CostEstimate:
        """Request an estimate for ``specification``.

        Raises
        ------
        RequestTimeoutError
            If no response arrives before the deadline.
        TransportError
            If the service cannot be reached.
        ServerFaultError
            If the service answers with an error status or an unusable body.
        """
        try:
            response = self._http.post(
                self._endpoint,
                content=specification.to_request_body(),
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            logger.warning("Estimate request to %s timed out: %s", self._endpoint, exc)
            raise RequestTimeoutError(TIMEOUT_MESSAGE) from exc
        except httpx.TransportError as exc:
            logger.warning("Estimate request to %s failed: %s", self._endpoint, exc)
            raise TransportError(TRANSPORT_MESSAGE) from exc
        except httpx.RequestError as exc:
            # Undecodable bodies, redirect loops and other request-level faults.
            logger.warning("Estimate request to %s could not complete: %s", self._endpoint, exc)
            raise TransportError(TRANSPORT_MESSAGE) from exc

        if response.is_success:
            try:
                return CostEstimate.model_validate(response.json())
            except ValueError as exc:
                logger.warning("Unusable estimate payload from %s: %s", self._endpoint, exc)
                raise ServerFaultError(
                    INVALID_RESPONSE_MESSAGE, status_code=response.status_code
                ) from exc

        payload = _error_payload(response)
        error = payload.get("error")
        if isinstance(error, str) and error:
            message = error
        elif response.status_code >= 500:
            message = SERVER_FAULT_MESSAGE
        else:
            message = f"Request failed with status code {response.status_code}"

        raise ServerFaultError(
            message,
            status_code=response.status_code,
            details=payload.get("details"),
        )

    def close(self) -> None:
        self._http.close()


def _error_payload(response: httpx.Response) -> dict[str, Any]:
    """Return the JSON error object of a failed response, or an empty dict."""
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
