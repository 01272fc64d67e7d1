"""Explainer Store — multilingual educational content keyed by clause."""

from ubbl.explainers.models import (
    BestPractice,
    CaseStudy,
    CommonViolation,
    Example,
    Explainer,
)
from ubbl.explainers.store import NOT_AVAILABLE, ExplainerStore, not_available_message

__all__ = [
    "BestPractice",
    "CaseStudy",
    "CommonViolation",
    "Example",
    "Explainer",
    "ExplainerStore",
    "NOT_AVAILABLE",
    "not_available_message",
]
