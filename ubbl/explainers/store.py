"""ExplainerStore — explainers keyed by (clause id, language)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import pydantic

from ubbl.errors import CorpusError
from ubbl.explainers.models import Explainer

logger = logging.getLogger(__name__)

# Placeholder callers render when no explainer exists for the requested language
NOT_AVAILABLE: dict[str, str] = {
    "en": "An explainer for this clause is not yet available in English.",
    "ms": "Penerangan bagi klausa ini belum tersedia dalam Bahasa Melayu.",
}


class ExplainerStore:
    """Read-only lookup of explainers.

    A missing explainer is a normal state: :meth:`get` returns *None* and
    never substitutes another language.
    """

    def __init__(self, explainers: Iterable[Explainer] = ()) -> None:
        self._by_key: dict[tuple[str, str], Explainer] = {}
        for exp in explainers:
            key = (exp.clause_id, exp.language)
            if key in self._by_key:
                raise CorpusError(f"Duplicate explainer for {exp.clause_id} [{exp.language}]")
            self._by_key[key] = exp

    @classmethod
    def load_default(cls) -> ExplainerStore:
        """Load the embedded explainers."""
        from ubbl.explainers.seed_data import SEED_EXPLAINERS

        store = cls(SEED_EXPLAINERS)
        logger.info("Loaded %d explainers.", len(store))
        return store

    @classmethod
    def from_json(cls, path: str | Path) -> ExplainerStore:
        """Load a JSON list of explainer records."""
        p = Path(path)
        try:
            records: list[dict[str, Any]] = json.loads(p.read_text(encoding="utf-8"))
            explainers = [Explainer.model_validate(r) for r in records]
        except (OSError, json.JSONDecodeError, pydantic.ValidationError) as exc:
            raise CorpusError(f"Cannot load explainers from {p}: {exc}") from exc
        return cls(explainers)

    def __len__(self) -> int:
        return len(self._by_key)

    def get(self, clause_id: str, language: str) -> Explainer | None:
        """Return the explainer for *clause_id* in *language*, or *None*."""
        exp = self._by_key.get((clause_id, language))
        if exp is None:
            logger.debug("No explainer for %s [%s]", clause_id, language)
        return exp

    def has_explainer(self, clause_id: str, language: str | None = None) -> bool:
        if language is not None:
            return (clause_id, language) in self._by_key
        return any(cid == clause_id for cid, _lang in self._by_key)

    def languages_for(self, clause_id: str) -> list[str]:
        """Languages in which *clause_id* has an explainer, sorted."""
        return sorted(lang for cid, lang in self._by_key if cid == clause_id)

    def clause_ids(self) -> set[str]:
        return {cid for cid, _lang in self._by_key}


def not_available_message(language: str) -> str:
    """Return the 'not yet available' text for *language* (English if unknown)."""
    return NOT_AVAILABLE.get(language, NOT_AVAILABLE["en"])
