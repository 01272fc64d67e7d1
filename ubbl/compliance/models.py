"""Compliance check records: checks, results, violations, flagged clauses."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ubbl.compliance.specification import BuildingSpecification
from ubbl.corpus.models import Severity


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class CheckStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    FAILED = "failed"


class Violation(BaseModel):
    """A failure of the specification to satisfy one clause check."""

    model_config = ConfigDict(frozen=True)

    clause_id: str
    check_id: str = ""
    description: str
    severity: Severity
    required_action: str
    actual_value: Any = None
    required_value: Any = None


class EvaluationIssue(BaseModel):
    """A clause check that could not be computed; flagged, never passed."""

    model_config = ConfigDict(frozen=True)

    clause_id: str
    check_id: str
    message: str


class ComplianceResult(BaseModel):
    """Outcome of evaluating a specification against the corpus."""

    model_config = ConfigDict(frozen=True)

    applicable_clauses: list[str] = Field(default_factory=list)
    violations: list[Violation] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    compliance_score: float = Field(default=100.0, ge=0, le=100)
    evaluation_errors: list[EvaluationIssue] = Field(default_factory=list)
    corpus_version: str = ""

    @property
    def has_warnings(self) -> bool:
        """True when some clauses could not be evaluated."""
        return bool(self.evaluation_errors)

    @property
    def is_compliant(self) -> bool:
        return not self.violations

    def violations_by_severity(self, severity: Severity | str) -> list[Violation]:
        sev = Severity(severity)
        return [v for v in self.violations if v.severity == sev]


class ComplianceCheck(BaseModel):
    """One evaluation run of a building specification at a point in time.

    Records are frozen; a status transition produces a new instance that
    the repository persists.  Completed checks are never rewritten.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: _new_id("check"))
    project_id: str
    project_name: str = ""
    specification: BuildingSpecification
    check_date: datetime = Field(default_factory=_utc_now)
    status: CheckStatus = CheckStatus.PENDING
    result: Optional[ComplianceResult] = None
    error: str = ""
    """Reason for failure when status is 'failed'."""

    @property
    def building_type(self) -> str:
        return self.specification.building_type

    @property
    def building_height(self) -> float:
        return self.specification.building_height

    @property
    def floor_area(self) -> float:
        return self.specification.floor_area

    @property
    def occupancy(self) -> int:
        return self.specification.occupancy

    @property
    def completed_with_warnings(self) -> bool:
        return (
            self.status == CheckStatus.COMPLETED
            and self.result is not None
            and self.result.has_warnings
        )
