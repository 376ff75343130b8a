"""Formatting helpers for cost estimate output.

Amounts are whole dollars, so currency is always shown without cents
(e.g., '$144,000').
"""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def format_currency(amount: float) -> str:
    """Format a whole-dollar amount with comma separators (e.g., '$1,234,567')."""
    return f"${amount:,.0f}"


def format_category_label(category: str) -> str:
    """Turn a camelCase breakdown key into a title-cased label.

    'externalWorks' -> 'External Works', 'foundation' -> 'Foundation'.
    """
    words = _CAMEL_BOUNDARY.split(category)
    return " ".join(word.capitalize() for word in words if word)
