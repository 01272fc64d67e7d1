"""Violation detection — evaluate a specification against clause checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from ubbl.compliance.calculators import UnknownCalculatorError, calculate
from ubbl.compliance.models import EvaluationIssue, Violation
from ubbl.compliance.specification import BuildingSpecification
from ubbl.corpus.models import Clause, RuleCheck
from ubbl.errors import EvaluationError

logger = logging.getLogger(__name__)


@dataclass
class DetectionOutcome:
    """Violations found plus the checks that could not be evaluated."""

    violations: list[Violation] = field(default_factory=list)
    evaluation_errors: list[EvaluationIssue] = field(default_factory=list)
    checks_evaluated: int = 0


def _coerce_numeric(value: Any) -> float | None:
    """Try to coerce a value to float."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


def _fmt(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _render(template: str, clause: Clause, check: RuleCheck, actual: Any, required: Any) -> str:
    try:
        return template.format(
            actual=_fmt(actual),
            required=_fmt(required),
            unit=check.unit,
            attribute=check.attribute,
        )
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
        raise EvaluationError(clause.id, check.check_id, f"malformed message template: {exc}") from exc


def _required_value(clause: Clause, check: RuleCheck, spec: BuildingSpecification) -> Any:
    """Fixed threshold, or the value derived by the check's calculator."""
    if check.calculator is None:
        return check.threshold
    try:
        return calculate(check.calculator, spec)
    except UnknownCalculatorError:
        raise EvaluationError(clause.id, check.check_id, f"unknown calculator {check.calculator!r}") from None
    except (ArithmeticError, TypeError, ValueError) as exc:
        raise EvaluationError(
            clause.id, check.check_id, f"calculator {check.calculator!r} failed: {exc}"
        ) from exc


def evaluate_check(
    clause: Clause,
    check: RuleCheck,
    spec: BuildingSpecification,
) -> Violation | None:
    """Evaluate one failure mode of *clause* against *spec*.

    Returns
    -------
    Violation | None
        The violation on failure, *None* on pass.

    Raises
    ------
    EvaluationError
        When the check cannot be computed (missing specification field,
        unknown attribute or calculator, unknown check type, bad template).
    """
    try:
        actual = spec.attribute(check.attribute)
    except KeyError:
        raise EvaluationError(clause.id, check.check_id, f"unknown attribute {check.attribute!r}") from None

    if actual is None and check.check_type != "exists":
        raise EvaluationError(
            clause.id, check.check_id, f"missing specification field {check.attribute!r}"
        )

    required = _required_value(clause, check, spec)
    passed: bool

    if check.check_type == "exists":
        passed = actual is not None and actual != "" and actual != []

    elif check.check_type == "boolean":
        expected = bool(required) if required is not None else True
        passed = bool(actual) == expected
        required = expected

    elif check.check_type == "enum":
        allowed = required if isinstance(required, list) else [required]
        passed = str(actual).upper() in [str(a).upper() for a in allowed]

    elif check.check_type in ("min_value", "max_value"):
        actual_num = _coerce_numeric(actual)
        required_num = _coerce_numeric(required)
        if actual_num is None:
            raise EvaluationError(clause.id, check.check_id, f"{check.attribute} = {actual!r} is not numeric")
        if required_num is None:
            raise EvaluationError(clause.id, check.check_id, f"no numeric threshold (got {required!r})")
        if check.check_type == "min_value":
            passed = actual_num >= required_num
        else:
            passed = actual_num <= required_num
        actual, required = actual_num, required_num

    else:
        raise EvaluationError(clause.id, check.check_id, f"unknown check_type {check.check_type!r}")

    if passed:
        return None

    return Violation(
        clause_id=clause.id,
        check_id=check.check_id,
        description=_render(check.description, clause, check, actual, required),
        severity=check.severity,
        required_action=_render(check.remediation, clause, check, actual, required),
        actual_value=actual,
        required_value=required,
    )


def detect(spec: BuildingSpecification, clauses: Iterable[Clause]) -> DetectionOutcome:
    """Evaluate every check of every clause in *clauses*.

    Informational clauses (no checks) never produce violations.  A check
    that cannot be computed is recorded in ``evaluation_errors`` and the
    remaining checks still run.
    """
    outcome = DetectionOutcome()

    for clause in clauses:
        for check in clause.checks:
            outcome.checks_evaluated += 1
            try:
                violation = evaluate_check(clause, check, spec)
            except EvaluationError as exc:
                logger.warning("Could not evaluate %s: %s", clause.id, exc.message)
                outcome.evaluation_errors.append(
                    EvaluationIssue(clause_id=clause.id, check_id=check.check_id, message=exc.message)
                )
                continue
            if violation is not None:
                logger.debug("%s/%s failed: %s", clause.id, check.check_id, violation.description)
                outcome.violations.append(violation)

    return outcome
