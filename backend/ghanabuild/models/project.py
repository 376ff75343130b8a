"""Project specification models for the Ghanabuild pricing engine."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ghanabuild.models.enums import FinishQuality, ProjectType

MIN_FLOOR_AREA = 500
MAX_FLOOR_AREA = 10_000
MIN_BATHROOMS = 1
MAX_BATHROOMS = 10
MIN_FLOORS = 1
MAX_FLOORS = 5


class ProjectSpecification(BaseModel):
    """A validated, normalized project specification.

    Instances are produced by :func:`ghanabuild.validation.validate` and are
    never mutated afterwards. The field constraints repeat the validator's
    bounds so a specification cannot be built around it by accident.

    ``project_type`` and ``preferred_finish_quality`` are kept as plain
    strings: values outside :class:`ProjectType` / :class:`FinishQuality`
    are accepted and price with the default multiplier.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    region: str = Field(min_length=2)
    project_type: str = ProjectType.RESIDENTIAL.value
    total_floor_area: int = Field(ge=MIN_FLOOR_AREA, le=MAX_FLOOR_AREA)
    number_of_bathrooms: int = Field(ge=MIN_BATHROOMS, le=MAX_BATHROOMS)
    number_of_floors: int = Field(ge=MIN_FLOORS, le=MAX_FLOORS)
    preferred_finish_quality: str = FinishQuality.STANDARD.value
    include_external_works: bool = False

    def to_request_body(self) -> bytes:
        """Serialize to the camelCase JSON body sent to the estimate endpoint."""
        return self.model_dump_json(by_alias=True).encode()


class StoredProject(ProjectSpecification):
    """A specification accepted by the project registry."""

    id: str
    created_at: datetime
