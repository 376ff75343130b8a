"""Tests for formatting helpers."""

from __future__ import annotations

import pytest

from ghanabuild.formatting import format_category_label, format_currency


class TestFormatCurrency:
    def test_thousands(self) -> None:
        assert format_currency(144_000) == "$144,000"

    def test_millions(self) -> None:
        assert format_currency(1_234_567) == "$1,234,567"

    def test_small_amount(self) -> None:
        assert format_currency(950) == "$950"

    def test_zero(self) -> None:
        assert format_currency(0) == "$0"


class TestFormatCategoryLabel:
    @pytest.mark.parametrize(
        ("category", "label"),
        [
            ("foundation", "Foundation"),
            ("externalWorks", "External Works"),
            ("plumbing", "Plumbing"),
        ],
    )
    def test_labels(self, category: str, label: str) -> None:
        assert format_category_label(category) == label
