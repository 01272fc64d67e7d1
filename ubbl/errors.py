"""Error taxonomy for the compliance engine."""

from __future__ import annotations


class ComplianceError(Exception):
    """Base class for every error raised by the engine."""


class ValidationError(ComplianceError):
    """Raised when caller input (usually a building specification) is invalid.

    The individual field problems are available on :attr:`errors`.
    """

    def __init__(self, errors: list[str], subject: str = "building specification") -> None:
        self.errors = list(errors)
        super().__init__(f"Invalid {subject}: " + "; ".join(self.errors))


class EvaluationError(ComplianceError):
    """Raised when a single clause check cannot be computed.

    The detector catches it and records an ``EvaluationIssue`` instead of
    aborting the whole check.
    """

    def __init__(self, clause_id: str, check_id: str, message: str) -> None:
        self.clause_id = clause_id
        self.check_id = check_id
        self.message = message
        super().__init__(f"{clause_id}/{check_id}: {message}")


class NotFoundError(ComplianceError):
    """Raised when a check, report, or clause id does not exist."""


class InvalidStateError(ComplianceError):
    """Raised when an operation is not allowed in the record's current status."""


class StorageError(ComplianceError):
    """Raised when the check repository cannot be read or written.

    Transient from the caller's point of view; the engine never retries.
    """


class CorpusError(ComplianceError):
    """Raised when clause or explainer reference data is malformed."""
