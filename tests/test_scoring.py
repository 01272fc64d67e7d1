"""Tests for score aggregation and recommendations."""

from __future__ import annotations

import pytest

from ubbl.compliance.models import Violation
from ubbl.compliance.scoring import (
    CATEGORY_RECOMMENDATIONS,
    ScoringPolicy,
    build_recommendations,
    compute_score,
    score,
)
from ubbl.corpus import Clause, ClauseCategory, ClauseText, Severity


def _clause(clause_id: str, category: str) -> Clause:
    return Clause(
        id=clause_id,
        number=clause_id,
        part_number=1,
        text={"en": ClauseText(title=clause_id, content="")},
        category=category,
    )


def _violation(clause_id: str, severity: str) -> Violation:
    return Violation(
        clause_id=clause_id,
        description="d",
        severity=severity,
        required_action="a",
    )


CLAUSES = [
    _clause("fire-1", "fire_safety"),
    _clause("fire-2", "fire_safety"),
    _clause("space-1", "spatial"),
    _clause("access-1", "accessibility"),
    _clause("struct-1", "structural"),
]


class TestComputeScore:
    def test_no_violations(self) -> None:
        assert compute_score([]) == 100.0

    @pytest.mark.parametrize("severity,expected", [("critical", 85.0), ("major", 92.0), ("minor", 97.0)])
    def test_default_weights(self, severity: str, expected: float) -> None:
        assert compute_score([_violation("fire-1", severity)]) == expected

    def test_floors_at_zero(self) -> None:
        violations = [_violation("fire-1", "critical")] * 10
        assert compute_score(violations) == 0.0

    def test_monotonic(self) -> None:
        violations: list[Violation] = []
        previous = compute_score(violations)
        for sev in ["minor", "critical", "major", "critical", "minor"] * 3:
            violations.append(_violation("fire-1", sev))
            current = compute_score(violations)
            assert 0.0 <= current <= previous
            previous = current

    def test_custom_policy(self) -> None:
        policy = ScoringPolicy(weights={Severity.CRITICAL: 40.0, Severity.MAJOR: 10.0, Severity.MINOR: 1.0})
        assert compute_score([_violation("fire-1", "critical")], policy) == 60.0


class TestScoringPolicy:
    def test_from_config(self) -> None:
        policy = ScoringPolicy.from_config({"UBBL_WEIGHT_CRITICAL": "20", "UBBL_WEIGHT_MINOR": "2.5"})
        assert policy.weight(Severity.CRITICAL) == 20.0
        assert policy.weight(Severity.MAJOR) == 8.0
        assert policy.weight(Severity.MINOR) == 2.5

    def test_negative_weight_treated_as_zero(self) -> None:
        policy = ScoringPolicy(weights={Severity.MINOR: -5.0})
        assert policy.weight(Severity.MINOR) == 0.0
        assert compute_score([_violation("fire-1", "minor")], policy) == 100.0


class TestRecommendations:
    def test_one_per_category(self) -> None:
        recs = build_recommendations(CLAUSES, [
            _violation("fire-1", "critical"),
            _violation("fire-2", "major"),
        ])
        assert len(recs) == 1
        assert recs[0].startswith(CATEGORY_RECOMMENDATIONS[ClauseCategory.FIRE_SAFETY])
        assert recs[0].endswith("(fire-1, fire-2)")

    def test_ordered_by_highest_severity(self) -> None:
        recs = build_recommendations(CLAUSES, [
            _violation("space-1", "minor"),
            _violation("access-1", "major"),
            _violation("fire-1", "critical"),
        ])
        assert [r.split(" (")[0] for r in recs] == [
            CATEGORY_RECOMMENDATIONS[ClauseCategory.FIRE_SAFETY],
            CATEGORY_RECOMMENDATIONS[ClauseCategory.ACCESSIBILITY],
            CATEGORY_RECOMMENDATIONS[ClauseCategory.SPATIAL],
        ]

    def test_ties_use_category_declaration_order(self) -> None:
        recs = build_recommendations(CLAUSES, [
            _violation("space-1", "major"),
            _violation("struct-1", "major"),
        ])
        # structural is declared before spatial
        assert recs[0].startswith(CATEGORY_RECOMMENDATIONS[ClauseCategory.STRUCTURAL])
        assert recs[1].startswith(CATEGORY_RECOMMENDATIONS[ClauseCategory.SPATIAL])

    def test_unknown_clause_rejected(self) -> None:
        with pytest.raises(ValueError):
            build_recommendations(CLAUSES, [_violation("ghost", "minor")])

    def test_every_category_has_text(self) -> None:
        assert set(CATEGORY_RECOMMENDATIONS) == set(ClauseCategory)


class TestScore:
    def test_no_violations(self) -> None:
        assert score(CLAUSES, []) == (100.0, [])

    def test_score_and_recommendations(self) -> None:
        value, recs = score(CLAUSES, [_violation("fire-1", "critical"), _violation("space-1", "minor")])
        assert value == 82.0
        assert len(recs) == 2

    def test_deterministic(self) -> None:
        violations = [_violation("space-1", "minor"), _violation("fire-2", "critical")]
        assert score(CLAUSES, violations) == score(CLAUSES, violations)
