"""ReportGenerator — build and store reports from completed checks."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Callable, Optional

from ubbl.compliance.models import CheckStatus
from ubbl.config import DEFAULT_REPORT_VALIDITY_DAYS, MAX_REPORT_VALIDITY_DAYS
from ubbl.errors import InvalidStateError
from ubbl.reporting.report import Report

if TYPE_CHECKING:
    from ubbl.compliance.database import CheckDatabase

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Snapshot completed checks into immutable reports.

    Parameters
    ----------
    db:
        Store holding the checks; generated reports are written to it too.
    total_clauses:
        Corpus size recorded on every report.
    validity_days:
        Days after generation a report stays valid, capped at
        ``MAX_REPORT_VALIDITY_DAYS``; zero means reports never expire.
    clock:
        Returns the current time; injectable for reproducible tests.
    """

    def __init__(
        self,
        db: CheckDatabase,
        total_clauses: int,
        *,
        validity_days: int = DEFAULT_REPORT_VALIDITY_DAYS,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.db = db
        self.total_clauses = total_clauses
        self.validity_days = max(0, min(validity_days, MAX_REPORT_VALIDITY_DAYS))
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def generate(self, check_id: str, certified_by: Optional[str] = None) -> Report:
        """Create and store a report for a completed check.

        Raises
        ------
        NotFoundError
            If *check_id* does not exist.
        InvalidStateError
            If the check is not ``completed``.
        """
        check = self.db.get_check(check_id)
        if check.status != CheckStatus.COMPLETED or check.result is None:
            raise InvalidStateError(
                f"Cannot report on check {check_id}: status is {check.status.value}, not completed"
            )

        generated = self._clock()
        if generated.tzinfo is None:
            generated = generated.replace(tzinfo=timezone.utc)
        result = check.result

        report = Report(
            check_id=check.id,
            project_id=check.project_id,
            project_name=check.project_name,
            generated_date=generated,
            compliance_score=result.compliance_score,
            applicable_clauses=len(result.applicable_clauses),
            total_clauses=self.total_clauses,
            violations=result.violations,
            recommendations=result.recommendations,
            evaluation_errors=result.evaluation_errors,
            certified_by=certified_by,
            valid_until=generated + timedelta(days=self.validity_days) if self.validity_days > 0 else None,
            corpus_version=result.corpus_version,
        )
        self.db.add_report(report.id, report.check_id, generated.isoformat(), report.model_dump_json())
        logger.info(
            "Generated report %s for check %s (score %.1f)",
            report.id, check_id, report.compliance_score,
        )
        return report

    def get_report(self, report_id: str) -> Report:
        """Fetch a stored report or raise :class:`NotFoundError`."""
        return Report.model_validate_json(self.db.get_report(report_id))

    def list_reports(self, check_id: str) -> list[Report]:
        """Reports generated from *check_id*, oldest first."""
        return [Report.model_validate_json(doc) for doc in self.db.list_reports(check_id)]
