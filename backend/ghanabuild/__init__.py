"""Ghanabuild construction cost estimator.

Usage::

    from ghanabuild import create_default_engine, validate

    result = validate({"region": "Greater Accra", "totalFloorArea": "2500", ...})
    if result.is_valid:
        estimate = create_default_engine().estimate(result.specification)
"""

from ghanabuild.engine import PricingEngine
from ghanabuild.factory import create_default_engine, create_orchestrator
from ghanabuild.models.enums import (
    CostCategory,
    EventType,
    FailureKind,
    FinishQuality,
    ProjectType,
)
from ghanabuild.models.estimate import CostEstimate
from ghanabuild.models.project import ProjectSpecification, StoredProject
from ghanabuild.services.orchestrator import (
    EstimateRequestOrchestrator,
    Failed,
    Idle,
    Pending,
    RequestState,
    Succeeded,
)
from ghanabuild.validation import Invalid, Valid, ValidationResult, validate

__version__ = "1.0.0"

__all__ = [
    "CostCategory",
    "CostEstimate",
    "EstimateRequestOrchestrator",
    "EventType",
    "FailureKind",
    "Failed",
    "FinishQuality",
    "Idle",
    "Invalid",
    "Pending",
    "PricingEngine",
    "ProjectSpecification",
    "ProjectType",
    "RequestState",
    "StoredProject",
    "Succeeded",
    "Valid",
    "ValidationResult",
    "__version__",
    "create_default_engine",
    "create_orchestrator",
    "validate",
]
