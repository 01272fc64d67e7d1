"""Compliance reports — snapshot, render, and export completed checks."""

from ubbl.reporting.exporter import EXPORT_FORMATS, ReportExporter
from ubbl.reporting.generator import ReportGenerator
from ubbl.reporting.report import Report

__all__ = ["EXPORT_FORMATS", "Report", "ReportExporter", "ReportGenerator"]
