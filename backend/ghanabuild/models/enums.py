"""Enums for the Ghanabuild domain models."""

from enum import StrEnum


class ProjectType(StrEnum):
    """Kinds of construction project the pricing table knows about."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"


class FinishQuality(StrEnum):
    """Finish quality levels, from cheapest to most expensive."""

    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"


class CostCategory(StrEnum):
    """Breakdown categories of an estimate, keyed as they appear on the wire."""

    FOUNDATION = "foundation"
    STRUCTURE = "structure"
    ROOFING = "roofing"
    ELECTRICAL = "electrical"
    PLUMBING = "plumbing"
    FINISHES = "finishes"
    EXTERNAL_WORKS = "externalWorks"


class FailureKind(StrEnum):
    """Why an estimate request failed."""

    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    SERVER = "server"


class EventType(StrEnum):
    """Lifecycle events emitted by the estimate request orchestrator."""

    SUBMITTED = "submitted"
    VALIDATION_FAILED = "validation_failed"
    REQUEST_SUCCEEDED = "request_succeeded"
    REQUEST_FAILED = "request_failed"
    RETRIED = "retried"
