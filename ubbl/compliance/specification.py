"""BuildingSpecification — the input to a compliance check, and its validation."""

from __future__ import annotations

from typing import Any, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from ubbl.config import BUILDING_TYPES
from ubbl.errors import ValidationError


class BuildingSpecification(BaseModel):
    """Building attributes supplied by the caller.

    The first five fields are mandatory for a check to run.  The measured
    attributes are optional; a clause check that needs one which is absent
    is flagged as unevaluable rather than passed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    project_id: str = Field(min_length=1)
    project_name: str = ""
    building_type: str
    building_height: float = Field(gt=0, allow_inf_nan=False)
    """Metres."""

    floor_area: float = Field(gt=0, allow_inf_nan=False)
    """Gross floor area in square metres."""

    occupancy: int = Field(ge=0, strict=True)

    # Measured attributes (metres unless noted)
    floors: Optional[int] = Field(default=None, ge=1)
    exit_width: Optional[float] = Field(default=None, ge=0)
    staircase_width: Optional[float] = Field(default=None, ge=0)
    corridor_width: Optional[float] = Field(default=None, ge=0)
    travel_distance: Optional[float] = Field(default=None, ge=0)
    ceiling_height: Optional[float] = Field(default=None, ge=0)
    window_area_pct: Optional[float] = Field(default=None, ge=0, le=100)
    ventilation_area_pct: Optional[float] = Field(default=None, ge=0, le=100)
    fire_resistance_minutes: Optional[float] = Field(default=None, ge=0)
    setback_front: Optional[float] = Field(default=None, ge=0)
    setback_rear: Optional[float] = Field(default=None, ge=0)
    setback_side: Optional[float] = Field(default=None, ge=0)
    parking_spaces: Optional[int] = Field(default=None, ge=0)
    dwelling_units: Optional[int] = Field(default=None, ge=0)
    fire_exits: Optional[int] = Field(default=None, ge=0)
    has_sprinklers: Optional[bool] = None
    accessible_entrance: Optional[bool] = None

    def attribute(self, name: str) -> Any:
        """Return the value of field *name*; raise KeyError if no such field."""
        if name not in type(self).model_fields:
            raise KeyError(name)
        return getattr(self, name)


def validate_specification(spec: BuildingSpecification | dict[str, Any]) -> BuildingSpecification:
    """Validate *spec* and return it as a :class:`BuildingSpecification`.

    Raises
    ------
    ValidationError
        Listing every missing or invalid field.
    """
    if isinstance(spec, BuildingSpecification):
        data = spec.model_dump()
    else:
        data = dict(spec)

    errors: list[str] = []
    try:
        model = BuildingSpecification.model_validate(data)
    except pydantic.ValidationError as exc:
        for err in exc.errors():
            loc = ".".join(str(part) for part in err["loc"]) or "specification"
            errors.append(f"{loc}: {err['msg']}")
        model = None

    building_type = data.get("building_type")
    if building_type is not None and building_type not in BUILDING_TYPES:
        errors.append(
            f"building_type: unknown type {building_type!r}; "
            f"expected one of {', '.join(BUILDING_TYPES)}"
        )

    if errors or model is None:
        raise ValidationError(errors)
    return model
