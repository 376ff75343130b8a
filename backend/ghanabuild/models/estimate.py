"""Cost estimate output models for the Ghanabuild pricing engine."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CostEstimate(BaseModel):
    """Itemized cost estimate for one project specification.

    ``breakdown`` maps :class:`~ghanabuild.models.enums.CostCategory` values
    to whole-dollar amounts. ``external_works`` is present only when it was
    requested.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    total_cost: int
    breakdown: dict[str, int]
    currency: Literal["USD"] = "USD"
    details: str
    estimated_at: datetime
    valid_until: datetime

    @model_validator(mode="after")
    def total_matches_breakdown(self) -> CostEstimate:
        breakdown_sum = sum(self.breakdown.values())
        if self.total_cost != breakdown_sum:
            msg = (
                f"total_cost must equal the sum of the breakdown, "
                f"got {self.total_cost} != {breakdown_sum}"
            )
            raise ValueError(msg)
        return self

    def to_wire_dict(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys, as returned by the API."""
        return self.model_dump(mode="json", by_alias=True)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for display.

        Breakdown rows keep the table's category order and carry
        human-readable labels and formatted amounts.
        """
        from ghanabuild.formatting import format_category_label, format_currency

        return {
            "total_cost_formatted": format_currency(self.total_cost),
            "currency": self.currency,
            "details": self.details,
            "breakdown": [
                {
                    "category": category,
                    "label": format_category_label(category),
                    "cost_formatted": format_currency(amount),
                }
                for category, amount in self.breakdown.items()
            ],
            "valid_until_formatted": self.valid_until.strftime("%Y-%m-%d"),
        }
