"""Tests for violation detection."""

from __future__ import annotations

import pytest

from ubbl.compliance.applicability import resolve
from ubbl.compliance.detector import detect, evaluate_check
from ubbl.compliance.specification import BuildingSpecification
from ubbl.corpus import Clause, ClauseCorpus, ClauseText, RuleCheck, Severity
from ubbl.errors import EvaluationError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _spec(**overrides) -> BuildingSpecification:
    data = {
        "project_id": "proj-1",
        "building_type": "commercial",
        "building_height": 45.0,
        "floor_area": 5000.0,
        "occupancy": 400,
    }
    data.update(overrides)
    return BuildingSpecification(**data)


def _check(**overrides) -> RuleCheck:
    data = {
        "check_id": "c1",
        "check_type": "min_value",
        "attribute": "ceiling_height",
        "threshold": 2.5,
        "unit": "m",
        "severity": "minor",
        "description": "Ceiling {actual}{unit} below {required}{unit}",
        "remediation": "Raise ceiling to {required}{unit}",
    }
    data.update(overrides)
    return RuleCheck(**data)


def _clause(*checks: RuleCheck, clause_id: str = "t-1") -> Clause:
    return Clause(
        id=clause_id,
        number=clause_id.upper(),
        part_number=3,
        text={"en": ClauseText(title="Test", content="Test clause")},
        category="spatial",
        checks=list(checks),
    )


# ---------------------------------------------------------------------------
# evaluate_check
# ---------------------------------------------------------------------------


class TestEvaluateCheck:
    def test_min_value_pass(self) -> None:
        check = _check()
        assert evaluate_check(_clause(check), check, _spec(ceiling_height=2.5)) is None

    def test_min_value_fail(self) -> None:
        check = _check()
        v = evaluate_check(_clause(check), check, _spec(ceiling_height=2.4))
        assert v is not None
        assert v.clause_id == "t-1"
        assert v.check_id == "c1"
        assert v.severity == Severity.MINOR
        assert v.description == "Ceiling 2.4m below 2.5m"
        assert v.required_action == "Raise ceiling to 2.5m"
        assert v.actual_value == 2.4
        assert v.required_value == 2.5

    def test_max_value(self) -> None:
        check = _check(check_type="max_value", attribute="travel_distance", threshold=45.0)
        clause = _clause(check)
        assert evaluate_check(clause, check, _spec(travel_distance=45.0)) is None
        assert evaluate_check(clause, check, _spec(travel_distance=46.0)) is not None

    def test_calculated_threshold(self) -> None:
        check = _check(attribute="exit_width", threshold=None, calculator="required_exit_width", severity="critical")
        v = evaluate_check(_clause(check), check, _spec(exit_width=1.2))
        assert v is not None
        assert v.required_value == pytest.approx(4.4)
        assert "4.4m" in v.description

    def test_boolean(self) -> None:
        check = _check(check_type="boolean", attribute="has_sprinklers", threshold=True, severity="critical")
        clause = _clause(check)
        assert evaluate_check(clause, check, _spec(has_sprinklers=True)) is None
        v = evaluate_check(clause, check, _spec(has_sprinklers=False))
        assert v is not None
        assert v.required_value is True

    def test_exists(self) -> None:
        check = _check(check_type="exists", attribute="project_name", threshold=None)
        clause = _clause(check)
        assert evaluate_check(clause, check, _spec(project_name="Menara")) is None
        assert evaluate_check(clause, check, _spec()) is not None

    def test_enum(self) -> None:
        check = _check(check_type="enum", attribute="building_type", threshold=["commercial", "mixed-use"])
        clause = _clause(check)
        assert evaluate_check(clause, check, _spec()) is None
        assert evaluate_check(clause, check, _spec(building_type="industrial")) is not None

    def test_missing_field_raises(self) -> None:
        check = _check()
        with pytest.raises(EvaluationError, match="ceiling_height"):
            evaluate_check(_clause(check), check, _spec())

    def test_unknown_attribute_raises(self) -> None:
        check = _check(attribute="colour")
        with pytest.raises(EvaluationError, match="unknown attribute"):
            evaluate_check(_clause(check), check, _spec())

    def test_unknown_calculator_raises(self) -> None:
        check = _check(calculator="no_such_calculator")
        with pytest.raises(EvaluationError, match="unknown calculator"):
            evaluate_check(_clause(check), check, _spec(ceiling_height=3.0))

    def test_failing_calculator_raises(self) -> None:
        check = _check(attribute="parking_spaces", calculator="required_parking_spaces")
        spec = _spec(building_type="residential", parking_spaces=2)
        with pytest.raises(EvaluationError, match="dwelling_units"):
            evaluate_check(_clause(check), check, spec)

    def test_unknown_check_type_raises(self) -> None:
        check = _check(check_type="regex")
        with pytest.raises(EvaluationError, match="unknown check_type"):
            evaluate_check(_clause(check), check, _spec(ceiling_height=3.0))

    def test_missing_threshold_raises(self) -> None:
        check = _check(threshold=None)
        with pytest.raises(EvaluationError, match="threshold"):
            evaluate_check(_clause(check), check, _spec(ceiling_height=3.0))

    def test_malformed_template_raises(self) -> None:
        check = _check(description="Ceiling {height}")
        with pytest.raises(EvaluationError, match="template"):
            evaluate_check(_clause(check), check, _spec(ceiling_height=2.0))

    def test_attribute_lookup_in_template_raises(self) -> None:
        check = _check(remediation="Widen to {required.width}")
        with pytest.raises(EvaluationError, match="template"):
            evaluate_check(_clause(check), check, _spec(ceiling_height=2.0))

    def test_bad_template_flagged_not_aborted(self) -> None:
        broken = _check(check_id="broken", remediation="Widen to {required.width}")
        good = _check(check_id="good")
        outcome = detect(_spec(ceiling_height=2.0), [_clause(broken, good)])
        assert [i.check_id for i in outcome.evaluation_errors] == ["broken"]
        assert [v.check_id for v in outcome.violations] == ["good"]


# ---------------------------------------------------------------------------
# detect
# ---------------------------------------------------------------------------


class TestDetect:
    def test_informational_clause_never_violates(self) -> None:
        outcome = detect(_spec(), [_clause()])
        assert outcome.violations == []
        assert outcome.evaluation_errors == []
        assert outcome.checks_evaluated == 0

    def test_unevaluable_check_flagged_not_passed(self) -> None:
        broken = _check(check_id="broken", attribute="colour")
        good = _check(check_id="good")
        outcome = detect(_spec(ceiling_height=2.0), [_clause(broken, good)])
        assert [i.check_id for i in outcome.evaluation_errors] == ["broken"]
        assert [v.check_id for v in outcome.violations] == ["good"]
        assert outcome.checks_evaluated == 2

    def test_scenario_undersized_egress(self) -> None:
        corpus = ClauseCorpus.load_default()
        spec = _spec(exit_width=1.2)
        applicable = resolve(spec, corpus)
        outcome = detect(spec, applicable)
        assert len(outcome.violations) == 1
        violation = outcome.violations[0]
        assert violation.clause_id == "ubbl-168"
        assert violation.severity == Severity.CRITICAL
        assert violation.required_value == pytest.approx(4.4)

    def test_violations_reference_input_clauses(self) -> None:
        corpus = ClauseCorpus.load_default()
        spec = _spec(
            exit_width=0.5, ceiling_height=2.0, window_area_pct=2.0,
            setback_front=1.0, has_sprinklers=False, fire_exits=1,
        )
        applicable = resolve(spec, corpus)
        ids = {c.id for c in applicable}
        outcome = detect(spec, applicable)
        assert outcome.violations
        assert all(v.clause_id in ids for v in outcome.violations)

    def test_deterministic(self) -> None:
        corpus = ClauseCorpus.load_default()
        spec = _spec(exit_width=1.2, ceiling_height=2.0)
        applicable = resolve(spec, corpus)
        assert detect(spec, applicable) == detect(spec, applicable)
