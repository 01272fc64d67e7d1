"""UBBL — the single entry point for compliance operations.

Usage::

    from ubbl import UBBL

    ubbl = UBBL()
    check = ubbl.run_compliance_check({
        "project_id": "proj-1",
        "building_type": "commercial",
        "building_height": 45,
        "floor_area": 5000,
        "occupancy": 400,
        "exit_width": 1.2,
    })
    report = ubbl.generate_report(check.id, certified_by="Ar. Tan")
    data = ubbl.export_report(report.id)
    ubbl.search_clauses("fire")
    ubbl.get_explainer_for_clause("ubbl-168", "en")
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

from ubbl.compliance.calculators import calculate as run_calculator
from ubbl.compliance.database import CheckDatabase
from ubbl.compliance.engine import ComplianceEngine, SpecLike
from ubbl.compliance.models import ComplianceCheck
from ubbl.compliance.scoring import ScoringPolicy
from ubbl.compliance.specification import validate_specification
from ubbl.config import configure_logging, load_config, report_validity_days
from ubbl.corpus.loader import ClauseCorpus
from ubbl.corpus.models import Clause, ClauseCategory
from ubbl.explainers.models import Explainer
from ubbl.explainers.store import ExplainerStore
from ubbl.reporting.exporter import ReportExporter
from ubbl.reporting.generator import ReportGenerator
from ubbl.reporting.report import Report
from ubbl.search.service import ClauseSearch

logger = logging.getLogger(__name__)


class UBBL:
    """The public interface for the compliance engine.

    Reference data (clauses, explainers) is loaded once here and shared
    read-only by every operation.

    Parameters
    ----------
    project_root:
        Directory searched for ``.ubbl/config.json`` and ``.env``.
    config:
        Pre-loaded configuration; bypasses :func:`load_config`.
    db_path:
        Check database path; overrides ``UBBL_CHECK_DB``.
    clock:
        Returns the current time; injectable for reproducible tests.
    """

    def __init__(
        self,
        project_root: str | Path = ".",
        *,
        config: Optional[dict[str, str]] = None,
        db_path: str | Path | None = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.project_root = Path(project_root).resolve()
        self.config = config if config is not None else load_config(self.project_root)
        configure_logging(self.config)

        corpus_path = self.config.get("UBBL_CORPUS_PATH", "")
        self.corpus = (
            ClauseCorpus.from_json(self._resolve(corpus_path))
            if corpus_path else ClauseCorpus.load_default()
        )
        explainer_path = self.config.get("UBBL_EXPLAINER_PATH", "")
        self.explainers = (
            ExplainerStore.from_json(self._resolve(explainer_path))
            if explainer_path else ExplainerStore.load_default()
        )

        if db_path is None:
            db_path = self.config.get("UBBL_CHECK_DB", ":memory:") or ":memory:"
        if str(db_path) != ":memory:":
            db_path = self._resolve(str(db_path))
        self.db = CheckDatabase(db_path)

        self.engine = ComplianceEngine(
            self.corpus,
            self.db,
            policy=ScoringPolicy.from_config(self.config),
            clock=clock,
        )
        self.reports = ReportGenerator(
            self.db,
            total_clauses=len(self.corpus),
            validity_days=report_validity_days(self.config),
            clock=self.engine.now,
        )
        self.exporter = ReportExporter()
        self.search = ClauseSearch(self.corpus)

        logger.info(
            "UBBL engine ready: %d clauses (corpus %s), %d explainers",
            len(self.corpus), self.corpus.version, len(self.explainers),
        )

    def _resolve(self, path: str | Path) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self.project_root / p

    def close(self) -> None:
        self.db.close()

    # -- Compliance checks ---------------------------------------------------

    def run_compliance_check(self, spec: SpecLike) -> ComplianceCheck:
        """Validate, evaluate and store a check for *spec*."""
        return self.engine.run_compliance_check(spec)

    def get_applicable_clauses(self, spec: SpecLike) -> list[Clause]:
        return self.engine.get_applicable_clauses(spec)

    def get_check(self, check_id: str) -> ComplianceCheck:
        return self.engine.get_check(check_id)

    def list_checks(self, project_id: str) -> list[ComplianceCheck]:
        """Check history for *project_id*, newest first."""
        return self.engine.list_checks(project_id)

    def calculate(self, name: str, spec: SpecLike) -> float:
        """Evaluate calculator *name* directly against *spec*."""
        return run_calculator(name, validate_specification(spec))

    # -- Reports -------------------------------------------------------------

    def generate_report(self, check_id: str, certified_by: Optional[str] = None) -> Report:
        return self.reports.generate(check_id, certified_by=certified_by)

    def get_report(self, report_id: str) -> Report:
        return self.reports.get_report(report_id)

    def list_reports(self, check_id: str) -> list[Report]:
        return self.reports.list_reports(check_id)

    def export_report(self, report_id: str, fmt: str = "text") -> bytes:
        """Serialise a stored report; repeated exports are byte-identical."""
        return self.exporter.export(self.reports.get_report(report_id), fmt)

    # -- Clause lookup -------------------------------------------------------

    def search_clauses(self, query: str) -> list[Clause]:
        return self.search.search(query)

    def filter_by_section(self, part: int | str) -> list[Clause]:
        return self.search.filter_by_section(part)

    def filter_by_category(self, category: ClauseCategory | str) -> list[Clause]:
        return self.search.filter_by_category(category)

    def get_clause(self, clause_id: str) -> Clause:
        return self.search.get_clause(clause_id)

    def get_explainer_for_clause(self, clause_id: str, language: str = "en") -> Explainer | None:
        """Explainer for *clause_id* in *language*; *None* when absent.

        Raises :class:`NotFoundError` if the clause itself is unknown.
        """
        self.corpus.get(clause_id)
        return self.explainers.get(clause_id, language)

    def stats(self) -> dict[str, Any]:
        return {
            "corpus_version": self.corpus.version,
            "clauses": len(self.corpus),
            "explainers": len(self.explainers),
            "checks": self.db.count_checks(),
        }
