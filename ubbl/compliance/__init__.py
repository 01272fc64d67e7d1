"""Compliance evaluation — applicability, detection, scoring, and checks."""

from ubbl.compliance.engine import ComplianceEngine
from ubbl.compliance.models import (
    CheckStatus,
    ComplianceCheck,
    ComplianceResult,
    EvaluationIssue,
    Violation,
)
from ubbl.compliance.scoring import ScoringPolicy
from ubbl.compliance.specification import BuildingSpecification, validate_specification

__all__ = [
    "BuildingSpecification",
    "CheckStatus",
    "ComplianceCheck",
    "ComplianceEngine",
    "ComplianceResult",
    "EvaluationIssue",
    "ScoringPolicy",
    "Violation",
    "validate_specification",
]
