"""Specification validator shared by the request orchestrator and the API.

``validate`` turns an untyped mapping (form values or a JSON body) into
either a normalized :class:`ProjectSpecification` or the ordered list of
every rule the input breaks. It has no side effects and never raises for
bad input, so it is safe to run both before a request is sent and again
at the server boundary.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from ghanabuild.models.enums import FinishQuality, ProjectType
from ghanabuild.models.project import (
    MAX_BATHROOMS,
    MAX_FLOOR_AREA,
    MAX_FLOORS,
    MIN_BATHROOMS,
    MIN_FLOOR_AREA,
    MIN_FLOORS,
    ProjectSpecification,
)

REGION_MESSAGE = (
    "Region must be at least 2 characters long and contain only letters, "
    "spaces, or hyphens."
)
FLOOR_AREA_MESSAGE = "Total Floor Area must be an integer between 500 and 10,000 sq ft."
BATHROOMS_MESSAGE = "Number of Bathrooms must be an integer between 1 and 10."
FLOORS_MESSAGE = "Number of Floors must be an integer between 1 and 5."

_REGION_PATTERN = re.compile(r"[A-Za-z\s-]{2,}")
_NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")
_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_MAX_DIGITS = 18


@dataclass(frozen=True)
class Valid:
    """The input satisfied every rule."""

    specification: ProjectSpecification

    @property
    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """The input broke one or more rules; messages are in check order."""

    messages: tuple[str, ...]

    @property
    def is_valid(self) -> bool:
        return False


ValidationResult = Valid | Invalid


def validate(raw: Mapping[str, Any] | None) -> ValidationResult:
    """Validate a raw project specification.

    All four checks always run, in the order region, floor area, bathrooms,
    floors, and every failure is reported. Finish quality and external
    works are never rejected: missing values default to ``standard`` and
    ``False``, and unknown quality strings are kept as-is.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    messages: list[str] = []

    region = _field(raw, "region")
    if not isinstance(region, str) or _REGION_PATTERN.fullmatch(region) is None:
        messages.append(REGION_MESSAGE)

    floor_area = _parse_integer(_field(raw, "totalFloorArea", "total_floor_area"))
    if floor_area is None or not MIN_FLOOR_AREA <= floor_area <= MAX_FLOOR_AREA:
        messages.append(FLOOR_AREA_MESSAGE)

    bathrooms = _parse_integer(_field(raw, "numberOfBathrooms", "number_of_bathrooms"))
    if bathrooms is None or not MIN_BATHROOMS <= bathrooms <= MAX_BATHROOMS:
        messages.append(BATHROOMS_MESSAGE)

    floors = _parse_integer(_field(raw, "numberOfFloors", "number_of_floors"))
    if floors is None or not MIN_FLOORS <= floors <= MAX_FLOORS:
        messages.append(FLOORS_MESSAGE)

    if messages:
        return Invalid(tuple(messages))

    specification = ProjectSpecification(
        region=region,
        project_type=_text_or_default(
            _field(raw, "projectType", "project_type"), ProjectType.RESIDENTIAL
        ),
        total_floor_area=floor_area,
        number_of_bathrooms=bathrooms,
        number_of_floors=floors,
        preferred_finish_quality=_text_or_default(
            _field(raw, "preferredFinishQuality", "preferred_finish_quality"),
            FinishQuality.STANDARD,
        ),
        include_external_works=_coerce_bool(
            _field(raw, "includeExternalWorks", "include_external_works")
        ),
    )
    return Valid(specification)


def _field(raw: Mapping[str, Any], *names: str) -> Any:
    """Return the first present value among ``names`` (wire name first)."""
    for name in names:
        if name in raw:
            return raw[name]
    return None


def _parse_integer(value: Any) -> int | None:
    """Parse ``value`` as an integer, or None if it is not one.

    Numbers with a fractional part ('2000.5', 2000.5) are rejected rather
    than truncated; '2000.0' is accepted as 2000. Exponent notation
    ('2e3') is not an integer literal and is rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if _NUMBER_PATTERN.fullmatch(text) is None:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
        if number != number.to_integral_value():
            return None
        # Far outside every range; skip building a huge int.
        if number.adjusted() > _MAX_DIGITS:
            return None
        return int(number)
    return None


def _text_or_default(value: Any, default: str) -> str:
    if value is None or value == "":
        return str(default)
    return str(value)


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)
