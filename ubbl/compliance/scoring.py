"""Score aggregation — compliance score and per-category recommendations."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from ubbl.compliance.models import Violation
from ubbl.config import DEFAULT_SEVERITY_WEIGHTS, severity_weights
from ubbl.corpus.models import Clause, ClauseCategory, Severity

# One actionable recommendation per category with violations
CATEGORY_RECOMMENDATIONS: dict[ClauseCategory, str] = {
    ClauseCategory.FIRE_SAFETY: (
        "Rectify fire safety and means-of-escape deficiencies and obtain BOMBA "
        "endorsement before resubmission"
    ),
    ClauseCategory.STRUCTURAL: (
        "Have the professional engineer revise the structural design against Part V"
    ),
    ClauseCategory.SUBMISSION: "Complete the outstanding submission requirements under Part II",
    ClauseCategory.ACCESSIBILITY: (
        "Provide barrier-free access and facilities for disabled persons in line with MS 1184"
    ),
    ClauseCategory.ENVIRONMENTAL: (
        "Revise the building envelope and energy measures to meet the environmental provisions"
    ),
    ClauseCategory.SPATIAL: (
        "Revise setbacks, room dimensions and openings to meet the space, light and "
        "ventilation provisions"
    ),
    ClauseCategory.SERVICES: "Upgrade essential building services to meet the by-law provisions",
    ClauseCategory.GENERAL: "Review the general provisions of the by-laws with the submitting person",
}

_CATEGORY_ORDER = {cat: i for i, cat in enumerate(ClauseCategory)}


class ScoringPolicy(BaseModel):
    """Score deducted per violation severity; tunable through configuration."""

    model_config = ConfigDict(frozen=True)

    weights: dict[Severity, float] = Field(
        default_factory=lambda: {Severity(k): v for k, v in DEFAULT_SEVERITY_WEIGHTS.items()}
    )

    @classmethod
    def from_config(cls, config: dict[str, str]) -> ScoringPolicy:
        return cls(weights={Severity(k): v for k, v in severity_weights(config).items()})

    def weight(self, severity: Severity) -> float:
        return max(0.0, self.weights.get(severity, 0.0))


def compute_score(violations: Iterable[Violation], policy: ScoringPolicy | None = None) -> float:
    """Start at 100, subtract each violation's weight, never below 0."""
    policy = policy or ScoringPolicy()
    score = 100.0
    for violation in violations:
        score = max(0.0, score - policy.weight(violation.severity))
    return score


def build_recommendations(
    clauses: Iterable[Clause],
    violations: Iterable[Violation],
) -> list[str]:
    """One recommendation per violated category, most severe category first.

    Categories with equal highest severity keep their declaration order.

    Raises
    ------
    ValueError
        If a violation references a clause not in *clauses*.
    """
    category_of = {c.id: c.category for c in clauses}
    worst: dict[ClauseCategory, Severity] = {}
    clause_ids: dict[ClauseCategory, set[str]] = {}

    for violation in violations:
        try:
            category = category_of[violation.clause_id]
        except KeyError:
            raise ValueError(f"Violation references non-applicable clause {violation.clause_id}") from None
        if category not in worst or violation.severity.rank > worst[category].rank:
            worst[category] = violation.severity
        clause_ids.setdefault(category, set()).add(violation.clause_id)

    ordered = sorted(worst, key=lambda cat: (-worst[cat].rank, _CATEGORY_ORDER[cat]))
    return [
        f"{CATEGORY_RECOMMENDATIONS[cat]} ({', '.join(sorted(clause_ids[cat]))})"
        for cat in ordered
    ]


def score(
    clauses: Iterable[Clause],
    violations: list[Violation],
    policy: ScoringPolicy | None = None,
) -> tuple[float, list[str]]:
    """Return ``(compliance_score, recommendations)`` for a violation set."""
    clauses = list(clauses)
    if not violations:
        return 100.0, []
    return compute_score(violations, policy), build_recommendations(clauses, violations)
