"""Category allocation fractions of the base cost.

The base categories sum to 0.96; the remaining 4% is not allocated to
any category. External works is priced on top of the base categories
rather than carved out of them.
"""

from __future__ import annotations

from ghanabuild.models.enums import CostCategory

# Ordered: this is the order categories appear in a breakdown.
CATEGORY_ALLOCATIONS: list[tuple[CostCategory, float]] = [
    (CostCategory.FOUNDATION, 0.12),
    (CostCategory.STRUCTURE, 0.36),
    (CostCategory.ROOFING, 0.10),
    (CostCategory.ELECTRICAL, 0.08),
    (CostCategory.PLUMBING, 0.10),
    (CostCategory.FINISHES, 0.20),
]

EXTERNAL_WORKS_FRACTION: float = 0.08
