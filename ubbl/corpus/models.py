"""Clause model: one regulatory provision and its applicability/evaluation rules."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ubbl.config import DEFAULT_LANGUAGE


class ClauseCategory(str, Enum):
    """Fixed clause categories, in recommendation tie-break order."""

    FIRE_SAFETY = "fire_safety"
    STRUCTURAL = "structural"
    SUBMISSION = "submission"
    ACCESSIBILITY = "accessibility"
    ENVIRONMENTAL = "environmental"
    SPATIAL = "spatial"
    SERVICES = "services"
    GENERAL = "general"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Severity(str, Enum):
    """Violation severity; :attr:`rank` orders most severe highest."""

    MINOR = "minor"
    MAJOR = "major"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return {"minor": 1, "major": 2, "critical": 3}[self.value]


CHECK_TYPES = ("min_value", "max_value", "exists", "boolean", "enum")


class ClauseText(BaseModel):
    """Title and normative content of a clause in one language."""

    model_config = ConfigDict(frozen=True)

    title: str
    content: str


class Applicability(BaseModel):
    """Conjunction of constraints deciding whether a clause is relevant.

    Numeric bounds are half-open: ``min <= value < max``.  An empty
    ``building_types`` list accepts any building type.
    """

    model_config = ConfigDict(frozen=True)

    building_types: list[str] = Field(default_factory=list)
    min_height: float | None = None
    max_height: float | None = None
    min_floor_area: float | None = None
    max_floor_area: float | None = None
    min_occupancy: int | None = None
    max_occupancy: int | None = None

    def matches(self, spec: Any) -> bool:
        """Return True if *spec* satisfies every constraint."""
        if self.building_types and spec.building_type not in self.building_types:
            return False
        return (
            _in_range(spec.building_height, self.min_height, self.max_height)
            and _in_range(spec.floor_area, self.min_floor_area, self.max_floor_area)
            and _in_range(spec.occupancy, self.min_occupancy, self.max_occupancy)
        )


def _in_range(value: float, low: float | None, high: float | None) -> bool:
    if low is not None and value < low:
        return False
    if high is not None and value >= high:
        return False
    return True


class RuleCheck(BaseModel):
    """One failure mode of a clause's evaluation predicate."""

    model_config = ConfigDict(frozen=True)

    check_id: str
    """Failure mode identifier, unique within the clause."""

    check_type: str
    """Evaluation type: 'min_value', 'max_value', 'exists', 'boolean', 'enum'."""

    attribute: str
    """Specification field holding the actual value, e.g. 'exit_width'."""

    threshold: Any = None
    """Fixed required value; ignored when ``calculator`` is set."""

    calculator: str | None = None
    """Name of a calculator deriving the required value from the specification."""

    unit: str = ""
    severity: Severity
    description: str
    """Template rendered into ``Violation.description``."""

    remediation: str
    """Template rendered into ``Violation.required_action``."""


class Clause(BaseModel):
    """A single UBBL by-law clause."""

    model_config = ConfigDict(frozen=True)

    id: str
    number: str
    part_number: int
    part_title: dict[str, str] = Field(default_factory=dict)
    text: dict[str, ClauseText]
    """Title and content keyed by language code."""

    category: ClauseCategory
    tags: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    priority: Priority = Priority.MEDIUM
    complexity: int = Field(default=1, ge=1, le=5)
    applicability: Applicability | None = None
    """None means the clause applies to every building."""

    checks: list[RuleCheck] = Field(default_factory=list)
    """Empty for informational clauses."""

    requires_calculation: bool = False
    calculators: list[str] = Field(default_factory=list)
    related_clauses: list[str] = Field(default_factory=list)
    effective_date: str = ""

    @property
    def is_informational(self) -> bool:
        return not self.checks

    @property
    def is_universal(self) -> bool:
        return self.applicability is None

    def has_language(self, language: str) -> bool:
        return language in self.text

    def localized(self, language: str) -> ClauseText:
        """Return the clause text in *language*, falling back to English."""
        if language in self.text:
            return self.text[language]
        return self.text[DEFAULT_LANGUAGE]

    def title(self, language: str = DEFAULT_LANGUAGE) -> str:
        return self.localized(language).title
