"""Pricing table with lookup methods for the pricing engine."""

from __future__ import annotations

from ghanabuild.data.allocations import CATEGORY_ALLOCATIONS, EXTERNAL_WORKS_FRACTION
from ghanabuild.data.multipliers import (
    BASE_COST_PER_SQFT,
    DEFAULT_MULTIPLIER,
    FINISH_QUALITY_MULTIPLIERS,
    PROJECT_TYPE_MULTIPLIERS,
    REGION_MULTIPLIERS,
)
from ghanabuild.models.enums import CostCategory


class PricingTable:
    """Read-only lookup over the pricing constants.

    Every multiplier lookup falls back to the default multiplier, so a
    lookup never fails. The table copies its inputs and is never mutated
    after construction, so one instance can be shared freely.
    """

    def __init__(
        self,
        *,
        base_cost_per_sqft: float = BASE_COST_PER_SQFT,
        region_multipliers: dict[str, float] | None = None,
        project_type_multipliers: dict[str, float] | None = None,
        finish_quality_multipliers: dict[str, float] | None = None,
        category_allocations: list[tuple[CostCategory, float]] | None = None,
        external_works_fraction: float = EXTERNAL_WORKS_FRACTION,
        default_multiplier: float = DEFAULT_MULTIPLIER,
    ) -> None:
        self.base_cost_per_sqft = base_cost_per_sqft
        self._regions = {
            key.lower(): value
            for key, value in (region_multipliers or REGION_MULTIPLIERS).items()
        }
        self._project_types = dict(project_type_multipliers or PROJECT_TYPE_MULTIPLIERS)
        self._finish_qualities = dict(
            finish_quality_multipliers or FINISH_QUALITY_MULTIPLIERS
        )
        self._allocations = list(category_allocations or CATEGORY_ALLOCATIONS)
        self.external_works_fraction = external_works_fraction
        self.default_multiplier = default_multiplier

    def get_region_multiplier(self, region: str) -> float:
        """Case-insensitive region lookup, falling back to the default."""
        return self._regions.get(region.lower(), self.default_multiplier)

    def get_project_type_multiplier(self, project_type: str) -> float:
        return self._project_types.get(str(project_type), self.default_multiplier)

    def get_finish_quality_multiplier(self, finish_quality: str) -> float:
        return self._finish_qualities.get(str(finish_quality), self.default_multiplier)

    def get_category_allocations(self) -> list[tuple[CostCategory, float]]:
        """Base categories and their fractions of the base cost, in breakdown order."""
        return list(self._allocations)
