"""Core pricing engine for the Ghanabuild cost estimator.

The PricingEngine implements a square-foot estimation methodology:

1. **Multiplier lookup**: Find the region (case-insensitive), project type
   and finish quality multipliers, each falling back to 1.0 when unknown.
2. **Base cost**: floor area x base $/SF x the three multipliers.
3. **Category allocation**: Split the base cost into fixed category
   fractions, each rounded half-up to whole dollars on its own.
4. **External works**: Optionally add 8% of the base cost on top.
5. **Total**: Sum the rounded categories, so rounding drift is kept.
"""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from ghanabuild.models.enums import CostCategory
from ghanabuild.models.estimate import CostEstimate

if TYPE_CHECKING:
    from ghanabuild.data.repository import PricingTable
    from ghanabuild.models.project import ProjectSpecification

logger = logging.getLogger(__name__)

ESTIMATE_VALIDITY = timedelta(days=30)


class PricingEngine:
    """Deterministic engine that converts a ProjectSpecification into a CostEstimate.

    Args:
        table: The pricing table providing multipliers and allocation
            fractions.

    Example::

        from ghanabuild.data.repository import PricingTable

        engine = PricingEngine(PricingTable())
        estimate = engine.estimate(specification)
    """

    def __init__(self, table: PricingTable) -> None:
        self._table = table

    def estimate(
        self,
        specification: ProjectSpecification,
        now: datetime | None = None,
    ) -> CostEstimate:
        """Price a validated specification.

        Args:
            specification: A specification produced by the validator.
            now: Timestamp to record as ``estimated_at``; defaults to the
                current UTC time.

        Returns:
            A CostEstimate valid for 30 days from ``now``.
        """
        base_cost = self.base_cost(specification)

        breakdown: dict[str, int] = {}
        for category, fraction in self._table.get_category_allocations():
            breakdown[category.value] = _round_half_up(base_cost * fraction)

        if specification.include_external_works:
            breakdown[CostCategory.EXTERNAL_WORKS.value] = _round_half_up(
                base_cost * self._table.external_works_fraction
            )

        total_cost = sum(breakdown.values())

        estimated_at = now or datetime.now(UTC)
        logger.debug(
            "Priced %s sq ft %s project in %s: base=%.2f total=%d",
            specification.total_floor_area,
            specification.project_type,
            specification.region,
            base_cost,
            total_cost,
        )

        return CostEstimate(
            total_cost=total_cost,
            breakdown=breakdown,
            details=(
                f"Estimate based on current market rates in {specification.region} "
                f"region for {specification.preferred_finish_quality} quality "
                f"{specification.project_type} construction."
            ),
            estimated_at=estimated_at,
            valid_until=estimated_at + ESTIMATE_VALIDITY,
        )

    def base_cost(self, specification: ProjectSpecification) -> float:
        """Unrounded cost before category allocation."""
        return (
            specification.total_floor_area
            * self._table.base_cost_per_sqft
            * self._table.get_region_multiplier(specification.region)
            * self._table.get_project_type_multiplier(specification.project_type)
            * self._table.get_finish_quality_multiplier(
                specification.preferred_finish_quality
            )
        )


def _round_half_up(value: float) -> int:
    """Round to the nearest whole dollar, halves away from zero for positive values."""
    return math.floor(value + 0.5)
