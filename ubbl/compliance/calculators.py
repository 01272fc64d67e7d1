"""Named calculators deriving required values from a building specification.

Each calculator is a pure function of the specification.  Clause checks
refer to calculators by name, so thresholds that depend on occupancy,
height or use group stay declarative in the corpus.
"""

from __future__ import annotations

import math
from typing import Callable

from ubbl.compliance.specification import BuildingSpecification
from ubbl.config import HIGH_RISE_HEIGHT_M

# One unit of exit width (metres)
EXIT_UNIT_WIDTH_M = 0.55
MIN_EXIT_WIDTH_M = 1.1

# Persons discharged per unit of exit width, by use group
PERSONS_PER_EXIT_UNIT: dict[str, int] = {
    "residential": 60,
    "commercial": 50,
    "industrial": 60,
    "institutional": 30,
    "mixed-use": 50,
    "assembly": 100,
}

# Floor area per person for the design occupancy load (m2)
AREA_PER_PERSON_M2: dict[str, float] = {
    "residential": 10.0,
    "commercial": 3.0,
    "industrial": 5.0,
    "institutional": 5.0,
    "mixed-use": 3.0,
    "assembly": 1.0,
}

# Maximum travel distance to a storey exit (m), by use group
TRAVEL_DISTANCE_M: dict[str, float] = {
    "residential": 45.0,
    "commercial": 45.0,
    "industrial": 45.0,
    "institutional": 30.0,
    "mixed-use": 45.0,
    "assembly": 45.0,
}
HIGH_RISE_TRAVEL_DISTANCE_M = 30.0

STOREY_HEIGHT_M = 3.5

Calculator = Callable[[BuildingSpecification], float]


class UnknownCalculatorError(KeyError):
    """Raised when a clause names a calculator that is not registered."""


def estimated_storeys(spec: BuildingSpecification) -> float:
    """Storeys as declared, or estimated from height at 3.5 m per storey."""
    if spec.floors is not None:
        return float(spec.floors)
    return float(max(1, math.ceil(spec.building_height / STOREY_HEIGHT_M)))


def required_exit_width(spec: BuildingSpecification) -> float:
    """Aggregate exit width in metres, in 550 mm units of exit width."""
    per_unit = PERSONS_PER_EXIT_UNIT.get(spec.building_type, 50)
    units = math.ceil(spec.occupancy / per_unit)
    return round(max(units * EXIT_UNIT_WIDTH_M, MIN_EXIT_WIDTH_M), 2)


def required_exit_count(spec: BuildingSpecification) -> float:
    if spec.occupancy < 50:
        return 1.0
    if spec.occupancy <= 500:
        return 2.0
    if spec.occupancy <= 1000:
        return 3.0
    return 4.0


def max_travel_distance(spec: BuildingSpecification) -> float:
    """Travel distance limit; high-rise buildings are capped at 30 m."""
    limit = TRAVEL_DISTANCE_M.get(spec.building_type, 45.0)
    if spec.building_height >= HIGH_RISE_HEIGHT_M:
        limit = min(limit, HIGH_RISE_TRAVEL_DISTANCE_M)
    return limit


def required_staircase_width(spec: BuildingSpecification) -> float:
    return 1.0 if estimated_storeys(spec) <= 4 else 1.15


def design_occupant_load(spec: BuildingSpecification) -> float:
    area = AREA_PER_PERSON_M2.get(spec.building_type, 3.0)
    return float(max(1, math.floor(spec.floor_area / area)))


def required_fire_resistance(spec: BuildingSpecification) -> float:
    """Minutes of fire resistance for elements of structure (Ninth Schedule)."""
    if spec.building_height < HIGH_RISE_HEIGHT_M:
        return 60.0
    if spec.building_height < 30.0:
        return 90.0
    return 120.0


# Gross floor area per parking space outside residential use (m2)
AREA_PER_PARKING_SPACE_M2 = 25.0
SPACES_PER_DWELLING_UNIT = 1


def required_parking_spaces(spec: BuildingSpecification) -> float:
    """Parking spaces: one per dwelling unit, otherwise one per 25 m2 GFA."""
    if spec.building_type == "residential":
        if spec.dwelling_units is None:
            raise ValueError("dwelling_units is required for residential parking")
        return float(spec.dwelling_units * SPACES_PER_DWELLING_UNIT)
    return float(math.ceil(spec.floor_area / AREA_PER_PARKING_SPACE_M2))


CALCULATORS: dict[str, Calculator] = {
    "estimated_storeys": estimated_storeys,
    "required_exit_width": required_exit_width,
    "required_exit_count": required_exit_count,
    "max_travel_distance": max_travel_distance,
    "required_staircase_width": required_staircase_width,
    "design_occupant_load": design_occupant_load,
    "required_fire_resistance": required_fire_resistance,
    "required_parking_spaces": required_parking_spaces,
}


def calculate(name: str, spec: BuildingSpecification) -> float:
    """Run the calculator registered as *name* against *spec*."""
    try:
        func = CALCULATORS[name]
    except KeyError:
        raise UnknownCalculatorError(name) from None
    return func(spec)
