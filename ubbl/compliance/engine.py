"""ComplianceEngine — main entry point for running compliance checks.

Usage::

    from ubbl.compliance import ComplianceEngine

    engine = ComplianceEngine()
    check = engine.run_compliance_check({
        "project_id": "proj-1",
        "building_type": "commercial",
        "building_height": 45,
        "floor_area": 5000,
        "occupancy": 400,
    })
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from ubbl.compliance.applicability import resolve
from ubbl.compliance.detector import detect
from ubbl.compliance.models import CheckStatus, ComplianceCheck, ComplianceResult
from ubbl.compliance.scoring import ScoringPolicy, score
from ubbl.compliance.specification import BuildingSpecification, validate_specification
from ubbl.compliance.database import CheckDatabase
from ubbl.corpus.loader import ClauseCorpus
from ubbl.corpus.models import Clause
from ubbl.errors import InvalidStateError

logger = logging.getLogger(__name__)

SpecLike = BuildingSpecification | dict[str, Any]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ComplianceEngine:
    """Evaluate building specifications against the clause corpus.

    Parameters
    ----------
    corpus:
        Clause corpus to evaluate against.  Defaults to the embedded corpus.
    db:
        Check store, or a path for a new SQLite store.  Defaults to an
        in-memory database.
    policy:
        Severity weights used for scoring.
    clock:
        Returns the current time; injectable for reproducible tests.
    """

    def __init__(
        self,
        corpus: ClauseCorpus | None = None,
        db: CheckDatabase | str | Path = ":memory:",
        *,
        policy: ScoringPolicy | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.corpus = corpus if corpus is not None else ClauseCorpus.load_default()
        self.db = db if isinstance(db, CheckDatabase) else CheckDatabase(db)
        self.policy = policy or ScoringPolicy()
        self._clock = clock or _utc_now

    def now(self) -> datetime:
        ts = self._clock()
        if ts.tzinfo is None:
            return ts.replace(tzinfo=timezone.utc)
        return ts.astimezone(timezone.utc)

    # -- Pure evaluation -----------------------------------------------------

    def get_applicable_clauses(self, spec: SpecLike) -> list[Clause]:
        """Validate *spec* and return the clauses that apply to it."""
        return resolve(validate_specification(spec), self.corpus)

    def evaluate(self, spec: SpecLike) -> ComplianceResult:
        """Resolve, detect and score *spec* without persisting anything."""
        spec = validate_specification(spec)
        applicable = resolve(spec, self.corpus)
        outcome = detect(spec, applicable)
        compliance_score, recommendations = score(applicable, outcome.violations, self.policy)
        return ComplianceResult(
            applicable_clauses=[c.id for c in applicable],
            violations=outcome.violations,
            recommendations=recommendations,
            compliance_score=compliance_score,
            evaluation_errors=outcome.evaluation_errors,
            corpus_version=self.corpus.version,
        )

    # -- Check lifecycle -----------------------------------------------------

    def create_check(self, spec: SpecLike) -> ComplianceCheck:
        """Validate *spec* and store a new ``pending`` check.

        Raises
        ------
        ValidationError
            Before anything is stored, if the specification is invalid.
        """
        spec = validate_specification(spec)
        check = ComplianceCheck(
            project_id=spec.project_id,
            project_name=spec.project_name,
            specification=spec,
            check_date=self.now(),
        )
        self.db.add_check(check)
        logger.debug("Created check %s for project %s", check.id, check.project_id)
        return check

    def run_check(self, check_id: str) -> ComplianceCheck:
        """Evaluate a pending check and store it as ``completed`` or ``failed``.

        Raises
        ------
        NotFoundError
            If *check_id* does not exist.
        InvalidStateError
            If the check is not ``pending``.
        """
        check = self.db.get_check(check_id)
        if check.status != CheckStatus.PENDING:
            raise InvalidStateError(f"Check {check_id} is {check.status.value}; only pending checks can run")

        running = check.model_copy(update={"status": CheckStatus.IN_PROGRESS})
        self.db.update_check(running)

        try:
            result = self.evaluate(check.specification)
        except Exception as exc:
            logger.warning("Check %s failed: %s", check_id, exc, exc_info=True)
            failed = running.model_copy(update={"status": CheckStatus.FAILED, "error": str(exc)})
            self.db.update_check(failed)
            return failed

        completed = running.model_copy(update={"status": CheckStatus.COMPLETED, "result": result})
        self.db.update_check(completed)
        logger.info(
            "Check %s completed for %s: score %.1f, %d violation(s), %d unevaluable",
            check_id, check.project_id, result.compliance_score,
            len(result.violations), len(result.evaluation_errors),
        )
        return completed

    def run_compliance_check(self, spec: SpecLike) -> ComplianceCheck:
        """Create and immediately run a check for *spec*."""
        return self.run_check(self.create_check(spec).id)

    def get_check(self, check_id: str) -> ComplianceCheck:
        return self.db.get_check(check_id)

    def list_checks(self, project_id: str) -> list[ComplianceCheck]:
        """All checks for *project_id*, newest first."""
        return self.db.list_checks(project_id)
