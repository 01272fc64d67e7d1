"""Report model and its plain-text and Markdown renderings."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ubbl.compliance.models import EvaluationIssue, Violation, _new_id

_RULE = "=" * 60
_THIN_RULE = "-" * 60


def _fmt_score(value: float) -> str:
    return f"{value:g}"


def _fmt_date(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d") if value is not None else "N/A"


class Report(BaseModel):
    """Certified, point-in-time snapshot of a completed compliance check.

    A report copies everything it renders from the check at generation
    time; later corpus changes never alter it.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: _new_id("report"))
    check_id: str
    project_id: str
    project_name: str = ""
    generated_date: datetime
    compliance_score: float = Field(ge=0, le=100)
    applicable_clauses: int = Field(ge=0)
    """Number of clauses that applied to the specification."""

    total_clauses: int = Field(ge=0)
    """Corpus size when the report was generated."""

    violations: list[Violation] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    evaluation_errors: list[EvaluationIssue] = Field(default_factory=list)
    certified_by: Optional[str] = None
    valid_until: Optional[datetime] = None
    corpus_version: str = ""

    @property
    def is_compliant(self) -> bool:
        return not self.violations

    def to_text(self) -> str:
        """Render the stable plain-text layout used for export.

        The output depends only on the report's fields, so rendering the
        same report twice gives identical text.
        """
        lines: list[str] = [
            "UBBL COMPLIANCE REPORT",
            _RULE,
            f"Report ID: {self.id}",
            f"Check ID: {self.check_id}",
            f"Project ID: {self.project_id}",
        ]
        if self.project_name:
            lines.append(f"Project Name: {self.project_name}")
        lines += [
            f"Generated: {_fmt_date(self.generated_date)}",
            f"Valid Until: {_fmt_date(self.valid_until)}",
            f"Corpus Version: {self.corpus_version or 'N/A'}",
            "",
            f"COMPLIANCE SCORE: {_fmt_score(self.compliance_score)}%",
            f"Total UBBL Clauses: {self.total_clauses}",
            f"Applicable Clauses: {self.applicable_clauses}",
            f"Status: {'COMPLIANT' if self.is_compliant else 'NON-COMPLIANT'}",
            "",
            f"VIOLATIONS ({len(self.violations)}):",
        ]

        if not self.violations:
            lines.append("None")
        for i, v in enumerate(self.violations, start=1):
            lines += [
                _THIN_RULE,
                f"{i}. {v.clause_id} [{v.severity.value.upper()}]",
                f"   {v.description}",
                f"   Required action: {v.required_action}",
            ]
        lines.append("")

        if self.evaluation_errors:
            lines.append(f"UNEVALUATED CLAUSES ({len(self.evaluation_errors)}):")
            for issue in self.evaluation_errors:
                lines.append(f"- {issue.clause_id} ({issue.check_id}): {issue.message}")
            lines.append("")

        lines.append("RECOMMENDATIONS:")
        if not self.recommendations:
            lines.append("None")
        for rec in self.recommendations:
            lines.append(f"- {rec}")
        lines += [
            "",
            _RULE,
            f"Certified By: {self.certified_by or 'Not certified'}",
            "",
        ]
        return "\n".join(lines)

    def to_markdown(self) -> str:
        """Render the report as a Markdown document."""
        lines: list[str] = []

        lines.append(f"# UBBL Compliance Report — {self.project_name or self.project_id}")
        lines.append("")
        lines.append(f"**Report:** `{self.id}`  ")
        lines.append(f"**Check:** `{self.check_id}`  ")
        lines.append(f"**Generated:** {_fmt_date(self.generated_date)}  ")
        lines.append(f"**Valid until:** {_fmt_date(self.valid_until)}")
        lines.append("")
        lines.append(f"**Compliance score:** {_fmt_score(self.compliance_score)}%")
        lines.append(
            f"**Clauses:** {self.applicable_clauses} applicable of {self.total_clauses} "
            f"(corpus {self.corpus_version or 'N/A'})"
        )
        lines.append("")

        if self.violations:
            lines.append("## Violations")
            lines.append("")
            lines.append("| Clause | Severity | Description | Required action |")
            lines.append("|--------|----------|-------------|-----------------|")
            for v in self.violations:
                desc = v.description.replace("|", "\\|")
                action = v.required_action.replace("|", "\\|")
                lines.append(f"| {v.clause_id} | {v.severity.value} | {desc} | {action} |")
            lines.append("")

        if self.evaluation_errors:
            lines.append("## Unevaluated Clauses")
            lines.append("")
            for issue in self.evaluation_errors:
                lines.append(f"- **{issue.clause_id}** ({issue.check_id}): {issue.message}")
            lines.append("")

        if self.recommendations:
            lines.append("## Recommendations")
            lines.append("")
            for rec in self.recommendations:
                lines.append(f"- {rec}")
            lines.append("")

        lines.append(f"*Certified by:* {self.certified_by or 'Not certified'}")
        lines.append("")
        return "\n".join(lines)
