"""Clause Corpus — versioned UBBL reference data, read-only at runtime."""

from ubbl.corpus.loader import ClauseCorpus
from ubbl.corpus.models import (
    Applicability,
    Clause,
    ClauseCategory,
    ClauseText,
    Priority,
    RuleCheck,
    Severity,
)

__all__ = [
    "Applicability",
    "Clause",
    "ClauseCategory",
    "ClauseCorpus",
    "ClauseText",
    "Priority",
    "RuleCheck",
    "Severity",
]
