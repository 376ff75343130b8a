"""Tests for the public API surface of the ghanabuild package.

Verifies that consumers can import everything they need from the top-level
``ghanabuild`` package and use the factories for quick setup.
"""

from __future__ import annotations

from ghanabuild import (
    CostEstimate,
    EstimateRequestOrchestrator,
    Idle,
    PricingEngine,
    Valid,
    create_default_engine,
    create_orchestrator,
    validate,
)
from ghanabuild.config import Settings


class TestFactories:
    def test_create_default_engine(self) -> None:
        engine = create_default_engine()
        assert isinstance(engine, PricingEngine)

    def test_validate_then_estimate(self) -> None:
        result = validate(
            {
                "region": "Western",
                "projectType": "commercial",
                "totalFloorArea": "1000",
                "numberOfBathrooms": "2",
                "numberOfFloors": "1",
            }
        )
        assert isinstance(result, Valid)

        estimate = create_default_engine().estimate(result.specification)

        assert isinstance(estimate, CostEstimate)
        # 1000 * 50 * 0.9 * 1.3 = 58500 -> 96% allocated
        assert estimate.total_cost == 56_160

    def test_create_orchestrator_starts_idle(self) -> None:
        orchestrator = create_orchestrator(
            Settings(api_url="http://estimates.test", request_timeout_seconds=5)
        )
        assert isinstance(orchestrator, EstimateRequestOrchestrator)
        assert orchestrator.state == Idle()
