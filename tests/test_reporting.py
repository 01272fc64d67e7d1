"""Tests for report generation and export."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from ubbl.compliance import ComplianceEngine
from ubbl.config import MAX_REPORT_VALIDITY_DAYS
from ubbl.errors import InvalidStateError, NotFoundError, ValidationError
from ubbl.reporting import Report, ReportExporter, ReportGenerator

NOW = datetime(2025, 6, 1, 10, 30, tzinfo=timezone.utc)

HIGH_RISE = {
    "project_id": "tower-1",
    "project_name": "Menara Contoh",
    "building_type": "commercial",
    "building_height": 45.0,
    "floor_area": 5000.0,
    "occupancy": 400,
    "exit_width": 1.2,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def engine() -> ComplianceEngine:
    return ComplianceEngine(db=":memory:", clock=lambda: NOW)


@pytest.fixture
def generator(engine: ComplianceEngine) -> ReportGenerator:
    return ReportGenerator(engine.db, total_clauses=len(engine.corpus), clock=lambda: NOW)


@pytest.fixture
def report(engine: ComplianceEngine, generator: ReportGenerator) -> Report:
    check = engine.run_compliance_check(HIGH_RISE)
    return generator.generate(check.id, certified_by="Ar. Lim")


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class TestReportGenerator:
    def test_snapshot_fields(self, engine: ComplianceEngine, report: Report) -> None:
        check = engine.get_check(report.check_id)
        assert report.id.startswith("report-")
        assert report.project_id == "tower-1"
        assert report.project_name == "Menara Contoh"
        assert report.compliance_score == check.result.compliance_score
        assert report.applicable_clauses == len(check.result.applicable_clauses)
        assert report.total_clauses == len(engine.corpus)
        assert report.violations == check.result.violations
        assert report.recommendations == check.result.recommendations
        assert report.evaluation_errors == check.result.evaluation_errors
        assert report.certified_by == "Ar. Lim"
        assert report.corpus_version == check.result.corpus_version

    def test_validity_defaults_to_90_days(self, report: Report) -> None:
        assert report.generated_date == NOW
        assert report.valid_until == NOW + timedelta(days=90)

    def test_custom_validity(self, engine: ComplianceEngine) -> None:
        generator = ReportGenerator(engine.db, total_clauses=1, validity_days=30, clock=lambda: NOW)
        check = engine.run_compliance_check(HIGH_RISE)
        assert generator.generate(check.id).valid_until == NOW + timedelta(days=30)

    def test_zero_validity_means_no_expiry(self, engine: ComplianceEngine) -> None:
        generator = ReportGenerator(engine.db, total_clauses=1, validity_days=0, clock=lambda: NOW)
        check = engine.run_compliance_check(HIGH_RISE)
        assert generator.generate(check.id).valid_until is None

    def test_oversized_validity_capped(self, engine: ComplianceEngine) -> None:
        generator = ReportGenerator(engine.db, total_clauses=1, validity_days=10**9, clock=lambda: NOW)
        check = engine.run_compliance_check(HIGH_RISE)
        valid_until = generator.generate(check.id).valid_until
        assert valid_until == NOW + timedelta(days=MAX_REPORT_VALIDITY_DAYS)

    def test_pending_check_rejected(self, engine: ComplianceEngine, generator: ReportGenerator) -> None:
        check = engine.create_check(HIGH_RISE)
        with pytest.raises(InvalidStateError):
            generator.generate(check.id)

    def test_unknown_check_rejected(self, generator: ReportGenerator) -> None:
        with pytest.raises(NotFoundError):
            generator.generate("check-missing")

    def test_stored_and_retrievable(self, generator: ReportGenerator, report: Report) -> None:
        assert generator.get_report(report.id) == report
        assert generator.list_reports(report.check_id) == [report]

    def test_get_unknown_report(self, generator: ReportGenerator) -> None:
        with pytest.raises(NotFoundError):
            generator.get_report("report-missing")

    def test_multiple_reports_per_check(self, engine: ComplianceEngine, generator: ReportGenerator) -> None:
        check = engine.run_compliance_check(HIGH_RISE)
        first = generator.generate(check.id)
        second = generator.generate(check.id, certified_by="Ir. Wong")
        assert first.id != second.id
        assert [r.id for r in generator.list_reports(check.id)] == [first.id, second.id]

    def test_frozen(self, report: Report) -> None:
        with pytest.raises(Exception):
            report.compliance_score = 100.0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Rendering and export
# ---------------------------------------------------------------------------


class TestReportText:
    def test_layout_sections_in_order(self, report: Report) -> None:
        text = report.to_text()
        markers = [
            "UBBL COMPLIANCE REPORT",
            "COMPLIANCE SCORE: 85%",
            "VIOLATIONS (1):",
            "UNEVALUATED CLAUSES (",
            "RECOMMENDATIONS:",
            "Certified By: Ar. Lim",
        ]
        positions = [text.index(m) for m in markers]
        assert positions == sorted(positions)

    def test_header_fields(self, report: Report) -> None:
        text = report.to_text()
        assert "Project ID: tower-1" in text
        assert "Generated: 2025-06-01" in text
        assert "Valid Until: 2025-08-30" in text

    def test_violation_block(self, report: Report) -> None:
        text = report.to_text()
        assert "1. ubbl-168 [CRITICAL]" in text
        assert "Required action: Increase exit width to at least 4.4m" in text

    def test_uncertified(self, engine: ComplianceEngine, generator: ReportGenerator) -> None:
        check = engine.run_compliance_check(HIGH_RISE)
        text = generator.generate(check.id).to_text()
        assert "Certified By: Not certified" in text

    def test_markdown(self, report: Report) -> None:
        md = report.to_markdown()
        assert md.startswith("# UBBL Compliance Report")
        assert "## Violations" in md
        assert "| ubbl-168 | critical |" in md
        assert "## Recommendations" in md


class TestReportExporter:
    def test_text_export_is_idempotent(self, report: Report) -> None:
        exporter = ReportExporter()
        assert exporter.export(report) == exporter.export(report)

    def test_text_export_matches_rendering(self, report: Report) -> None:
        assert ReportExporter().export(report, "text") == report.to_text().encode("utf-8")

    def test_export_after_reload_is_identical(self, generator: ReportGenerator, report: Report) -> None:
        exporter = ReportExporter()
        reloaded = generator.get_report(report.id)
        for fmt in ("text", "markdown", "json"):
            assert exporter.export(reloaded, fmt) == exporter.export(report, fmt)

    def test_json_export(self, report: Report) -> None:
        data = json.loads(ReportExporter().export(report, "json"))
        assert data["id"] == report.id
        assert data["compliance_score"] == 85.0
        assert data["violations"][0]["clause_id"] == "ubbl-168"

    def test_unknown_format(self, report: Report) -> None:
        with pytest.raises(ValidationError, match="export format.*pdf"):
            ReportExporter().export(report, "pdf")
