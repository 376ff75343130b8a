"""Tests for the shared specification validator."""

from __future__ import annotations

from typing import Any

import pytest

from ghanabuild.models.project import ProjectSpecification
from ghanabuild.validation import (
    BATHROOMS_MESSAGE,
    FLOOR_AREA_MESSAGE,
    FLOORS_MESSAGE,
    REGION_MESSAGE,
    Invalid,
    Valid,
    validate,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_raw(**overrides: Any) -> dict[str, Any]:
    """Form values as a browser would submit them (numbers as strings)."""
    raw: dict[str, Any] = {
        "region": "Greater Accra",
        "projectType": "residential",
        "totalFloorArea": "2500",
        "numberOfBathrooms": "3",
        "numberOfFloors": "2",
        "preferredFinishQuality": "standard",
        "includeExternalWorks": False,
    }
    raw.update(overrides)
    return raw


def _messages(raw: Any) -> tuple[str, ...]:
    result = validate(raw)
    assert isinstance(result, Invalid)
    return result.messages


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


class TestValidInput:
    def test_returns_normalized_specification(self) -> None:
        result = validate(_make_raw())

        assert isinstance(result, Valid)
        assert result.is_valid
        spec = result.specification
        assert isinstance(spec, ProjectSpecification)
        assert spec.region == "Greater Accra"
        assert spec.project_type == "residential"
        assert spec.total_floor_area == 2500
        assert spec.number_of_bathrooms == 3
        assert spec.number_of_floors == 2
        assert spec.preferred_finish_quality == "standard"
        assert spec.include_external_works is False

    def test_accepts_native_numbers(self) -> None:
        result = validate(
            _make_raw(totalFloorArea=2500, numberOfBathrooms=3, numberOfFloors=2)
        )
        assert isinstance(result, Valid)
        assert result.specification.total_floor_area == 2500

    def test_accepts_snake_case_keys(self) -> None:
        raw = {
            "region": "Ashanti",
            "total_floor_area": 1200,
            "number_of_bathrooms": 2,
            "number_of_floors": 1,
            "include_external_works": True,
        }
        result = validate(raw)
        assert isinstance(result, Valid)
        assert result.specification.total_floor_area == 1200
        assert result.specification.include_external_works is True

    def test_whole_number_with_zero_fraction_is_accepted(self) -> None:
        result = validate(_make_raw(totalFloorArea="2000.0", numberOfFloors=3.0))
        assert isinstance(result, Valid)
        assert result.specification.total_floor_area == 2000
        assert result.specification.number_of_floors == 3

    def test_surrounding_whitespace_in_numbers_is_ignored(self) -> None:
        result = validate(_make_raw(totalFloorArea=" 2500 "))
        assert isinstance(result, Valid)

    def test_region_with_spaces_and_hyphens(self) -> None:
        assert isinstance(validate(_make_raw(region="Brong-Ahafo")), Valid)
        assert isinstance(validate(_make_raw(region="Upper East")), Valid)


# ---------------------------------------------------------------------------
# Defaults and lenient fields
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_missing_quality_defaults_to_standard(self) -> None:
        raw = _make_raw()
        del raw["preferredFinishQuality"]
        result = validate(raw)
        assert isinstance(result, Valid)
        assert result.specification.preferred_finish_quality == "standard"

    def test_empty_quality_defaults_to_standard(self) -> None:
        result = validate(_make_raw(preferredFinishQuality=""))
        assert isinstance(result, Valid)
        assert result.specification.preferred_finish_quality == "standard"

    def test_unknown_quality_is_kept_not_rejected(self) -> None:
        result = validate(_make_raw(preferredFinishQuality="platinum"))
        assert isinstance(result, Valid)
        assert result.specification.preferred_finish_quality == "platinum"

    def test_missing_external_works_defaults_to_false(self) -> None:
        raw = _make_raw()
        del raw["includeExternalWorks"]
        result = validate(raw)
        assert isinstance(result, Valid)
        assert result.specification.include_external_works is False

    def test_missing_project_type_defaults_to_residential(self) -> None:
        raw = _make_raw()
        del raw["projectType"]
        result = validate(raw)
        assert isinstance(result, Valid)
        assert result.specification.project_type == "residential"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, True),
            (False, False),
            ("true", True),
            ("on", True),
            ("false", False),
            ("", False),
            (None, False),
            (1, True),
            (0, False),
        ],
    )
    def test_external_works_coercion(self, value: Any, expected: bool) -> None:
        result = validate(_make_raw(includeExternalWorks=value))
        assert isinstance(result, Valid)
        assert result.specification.include_external_works is expected


# ---------------------------------------------------------------------------
# Violations
# ---------------------------------------------------------------------------


class TestViolations:
    def test_empty_input_reports_all_four_in_order(self) -> None:
        assert _messages({}) == (
            REGION_MESSAGE,
            FLOOR_AREA_MESSAGE,
            BATHROOMS_MESSAGE,
            FLOORS_MESSAGE,
        )

    def test_non_mapping_input_is_treated_as_empty(self) -> None:
        assert len(_messages(None)) == 4
        assert len(_messages(["region", "Ashanti"])) == 4  # type: ignore[arg-type]

    def test_checks_accumulate(self) -> None:
        messages = _messages(_make_raw(region="A", numberOfFloors="9"))
        assert messages == (REGION_MESSAGE, FLOORS_MESSAGE)

    @pytest.mark.parametrize("region", ["A", "", "Accra1", "Accra!", "   x_", None, 42])
    def test_bad_region(self, region: Any) -> None:
        assert _messages(_make_raw(region=region)) == (REGION_MESSAGE,)

    def test_region_with_trailing_newline_only_matches_whitespace_rule(self) -> None:
        # Newlines count as whitespace, so this is letters + whitespace.
        assert isinstance(validate(_make_raw(region="Accra\n")), Valid)

    def test_fractional_floor_area_is_rejected_not_truncated(self) -> None:
        assert _messages(_make_raw(totalFloorArea="2000.5")) == (FLOOR_AREA_MESSAGE,)
        assert _messages(_make_raw(totalFloorArea=2000.5)) == (FLOOR_AREA_MESSAGE,)

    def test_fractional_bathrooms_rejected(self) -> None:
        assert _messages(_make_raw(numberOfBathrooms="3.5")) == (BATHROOMS_MESSAGE,)

    @pytest.mark.parametrize("value", ["", "abc", "12abc", "nan", "inf", "1_000", "2e3", True, None, [2500]])
    def test_non_numeric_floor_area_uses_range_message(self, value: Any) -> None:
        assert _messages(_make_raw(totalFloorArea=value)) == (FLOOR_AREA_MESSAGE,)

    def test_huge_exponent_is_rejected(self) -> None:
        assert _messages(_make_raw(totalFloorArea="1e999999")) == (FLOOR_AREA_MESSAGE,)


# ---------------------------------------------------------------------------
# Range boundaries
# ---------------------------------------------------------------------------


class TestBoundaries:
    @pytest.mark.parametrize(
        ("field", "low", "high", "message"),
        [
            ("totalFloorArea", 500, 10000, FLOOR_AREA_MESSAGE),
            ("numberOfBathrooms", 1, 10, BATHROOMS_MESSAGE),
            ("numberOfFloors", 1, 5, FLOORS_MESSAGE),
        ],
    )
    def test_inclusive_bounds(self, field: str, low: int, high: int, message: str) -> None:
        assert isinstance(validate(_make_raw(**{field: str(low)})), Valid)
        assert isinstance(validate(_make_raw(**{field: str(high)})), Valid)
        assert _messages(_make_raw(**{field: str(low - 1)})) == (message,)
        assert _messages(_make_raw(**{field: str(high + 1)})) == (message,)


# ---------------------------------------------------------------------------
# Determinism
# ---------------------------------------------------------------------------


class TestDeterminism:
    @pytest.mark.parametrize(
        "raw",
        [
            {},
            _make_raw(),
            _make_raw(totalFloorArea="2000.5", region="x"),
            _make_raw(preferredFinishQuality="luxury", includeExternalWorks="true"),
        ],
    )
    def test_same_input_same_result(self, raw: dict[str, Any]) -> None:
        assert validate(raw) == validate(raw)

    def test_input_is_not_mutated(self) -> None:
        raw = _make_raw()
        snapshot = dict(raw)
        validate(raw)
        assert raw == snapshot
