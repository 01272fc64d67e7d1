"""UBBL compliance engine — evaluate buildings against the Uniform Building By-Laws."""

__version__ = "1.0.0"

from ubbl.api.facade import UBBL
from ubbl.compliance.engine import ComplianceEngine
from ubbl.compliance.models import (
    CheckStatus,
    ComplianceCheck,
    ComplianceResult,
    EvaluationIssue,
    Violation,
)
from ubbl.compliance.specification import BuildingSpecification
from ubbl.corpus.loader import ClauseCorpus
from ubbl.corpus.models import Clause, ClauseCategory, Severity
from ubbl.errors import (
    ComplianceError,
    CorpusError,
    EvaluationError,
    InvalidStateError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from ubbl.explainers.models import Explainer
from ubbl.explainers.store import ExplainerStore
from ubbl.reporting.exporter import ReportExporter
from ubbl.reporting.generator import ReportGenerator
from ubbl.reporting.report import Report
from ubbl.search.service import ClauseSearch

__all__ = [
    "BuildingSpecification",
    "CheckStatus",
    "Clause",
    "ClauseCategory",
    "ClauseCorpus",
    "ClauseSearch",
    "ComplianceCheck",
    "ComplianceEngine",
    "ComplianceError",
    "ComplianceResult",
    "CorpusError",
    "EvaluationError",
    "EvaluationIssue",
    "Explainer",
    "ExplainerStore",
    "InvalidStateError",
    "NotFoundError",
    "Report",
    "ReportExporter",
    "ReportGenerator",
    "Severity",
    "StorageError",
    "UBBL",
    "ValidationError",
    "Violation",
]
