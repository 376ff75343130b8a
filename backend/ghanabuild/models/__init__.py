"""Domain models for the Ghanabuild pricing engine."""

from ghanabuild.models.enums import (
    CostCategory,
    EventType,
    FailureKind,
    FinishQuality,
    ProjectType,
)
from ghanabuild.models.estimate import CostEstimate
from ghanabuild.models.project import ProjectSpecification, StoredProject

__all__ = [
    "CostCategory",
    "CostEstimate",
    "EventType",
    "FailureKind",
    "FinishQuality",
    "ProjectSpecification",
    "ProjectType",
    "StoredProject",
]
