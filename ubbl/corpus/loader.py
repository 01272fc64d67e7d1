"""ClauseCorpus — the read-only, versioned set of clauses loaded at startup."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator

import pydantic

from ubbl.config import CORPUS_VERSION, SUPPORTED_LANGUAGES
from ubbl.corpus.models import Clause
from ubbl.errors import CorpusError, NotFoundError

logger = logging.getLogger(__name__)


class ClauseCorpus:
    """Immutable collection of clauses indexed by id.

    Parameters
    ----------
    clauses:
        Clauses in their canonical (by-law) order.
    version:
        Version tag of the reference data the clauses came from.
    """

    def __init__(self, clauses: Iterable[Clause], version: str = CORPUS_VERSION) -> None:
        self._clauses: tuple[Clause, ...] = tuple(clauses)
        self.version = version
        self._index: dict[str, Clause] = {}
        for clause in self._clauses:
            if clause.id in self._index:
                raise CorpusError(f"Duplicate clause id in corpus: {clause.id}")
            self._index[clause.id] = clause

        missing = [
            c.id for c in self._clauses
            if not all(c.has_language(lang) for lang in SUPPORTED_LANGUAGES)
        ]
        if missing:
            logger.warning(
                "%d clause(s) lack a supported language and are excluded from "
                "localized rendering: %s", len(missing), ", ".join(missing),
            )

    # -- Construction --------------------------------------------------------

    @classmethod
    def load_default(cls) -> ClauseCorpus:
        """Load the embedded clause corpus."""
        from ubbl.corpus.seed_data import SEED_CLAUSES

        corpus = cls(SEED_CLAUSES, version=CORPUS_VERSION)
        logger.info("Loaded %d clauses (corpus %s).", len(corpus), corpus.version)
        return corpus

    @classmethod
    def from_records(cls, records: list[dict[str, Any]], version: str = CORPUS_VERSION) -> ClauseCorpus:
        """Build a corpus from plain dicts, e.g. parsed JSON."""
        try:
            clauses = [Clause.model_validate(rec) for rec in records]
        except pydantic.ValidationError as exc:
            raise CorpusError(f"Malformed clause record: {exc}") from exc
        return cls(clauses, version=version)

    @classmethod
    def from_json(cls, path: str | Path) -> ClauseCorpus:
        """Load a corpus file of the form ``{"version": ..., "clauses": [...]}``."""
        p = Path(path)
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CorpusError(f"Cannot read clause corpus {p}: {exc}") from exc
        corpus = cls.from_records(data.get("clauses", []), version=data.get("version", CORPUS_VERSION))
        logger.info("Loaded %d clauses from %s (corpus %s).", len(corpus), p, corpus.version)
        return corpus

    # -- Access --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._clauses)

    def __iter__(self) -> Iterator[Clause]:
        return iter(self._clauses)

    def __contains__(self, clause_id: object) -> bool:
        return clause_id in self._index

    @property
    def clauses(self) -> tuple[Clause, ...]:
        return self._clauses

    def get(self, clause_id: str) -> Clause:
        """Return the clause with *clause_id* or raise :class:`NotFoundError`."""
        try:
            return self._index[clause_id]
        except KeyError:
            raise NotFoundError(f"Clause not found: {clause_id}") from None

    def localized(self, language: str) -> list[Clause]:
        """Return only the clauses that carry text in *language*."""
        return [c for c in self._clauses if c.has_language(language)]

    def parts(self) -> dict[int, str]:
        """Map part number to its English title, in corpus order."""
        result: dict[int, str] = {}
        for clause in self._clauses:
            result.setdefault(clause.part_number, clause.part_title.get("en", ""))
        return result

    def to_records(self) -> list[dict[str, Any]]:
        """Serialise every clause to JSON-compatible dicts."""
        return [c.model_dump(mode="json") for c in self._clauses]
