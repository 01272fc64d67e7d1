"""ReportExporter — plain-text, Markdown and JSON export of reports."""

from __future__ import annotations

import json
import logging

from ubbl.errors import ValidationError
from ubbl.reporting.report import Report

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("text", "markdown", "json")


class ReportExporter:
    """Serialise reports; every export of the same report is byte-identical."""

    def export_text(self, report: Report) -> str:
        return report.to_text()

    def export_markdown(self, report: Report) -> str:
        return report.to_markdown()

    def export_json(self, report: Report) -> str:
        """Export the report as structured JSON with sorted keys."""
        return json.dumps(report.model_dump(mode="json"), indent=2, sort_keys=True, ensure_ascii=False)

    def export(self, report: Report, fmt: str = "text") -> bytes:
        """Render *report* in *fmt* and encode it as UTF-8.

        Parameters
        ----------
        report:
            The report to serialise.
        fmt:
            One of ``'text'``, ``'markdown'`` or ``'json'``.

        Raises
        ------
        ValidationError
            If *fmt* is not a supported format.
        """
        renderers = {
            "text": self.export_text,
            "markdown": self.export_markdown,
            "json": self.export_json,
        }
        try:
            render = renderers[fmt]
        except KeyError:
            raise ValidationError(
                [f"unsupported format {fmt!r}; expected one of {', '.join(EXPORT_FORMATS)}"],
                subject="export format",
            ) from None
        data = render(report).encode("utf-8")
        logger.debug("Exported report %s as %s (%d bytes)", report.id, fmt, len(data))
        return data
