"""ClauseSearch — full-text and categorical lookup over the clause corpus."""

from __future__ import annotations

import logging

from ubbl.corpus.loader import ClauseCorpus
from ubbl.corpus.models import Clause, ClauseCategory
from ubbl.errors import ValidationError
from ubbl.explainers.store import ExplainerStore

logger = logging.getLogger(__name__)


class ClauseSearch:
    """Read-only queries over a :class:`ClauseCorpus`.

    Results always keep corpus order.  Nothing here depends on a check.
    """

    def __init__(self, corpus: ClauseCorpus) -> None:
        self.corpus = corpus

    @staticmethod
    def _haystack(clause: Clause) -> list[str]:
        fields = [clause.number.lower()]
        for text in clause.text.values():
            fields.append(text.title.lower())
            fields.append(text.content.lower())
        return fields

    def search(self, query: str) -> list[Clause]:
        """Case-insensitive substring match on number, title and content.

        Every loaded language is searched.  A blank query matches nothing.
        """
        needle = query.strip().lower()
        if not needle:
            return []
        results = [c for c in self.corpus if any(needle in f for f in self._haystack(c))]
        logger.debug("Search %r matched %d clause(s)", query, len(results))
        return results

    def filter_by_section(self, part: int | str) -> list[Clause]:
        """Clauses in by-law part *part* (e.g. ``7`` or ``"7"``)."""
        try:
            part_number = int(part)
        except (TypeError, ValueError):
            raise ValidationError([f"section must be a part number, got {part!r}"], subject="section") from None
        return [c for c in self.corpus if c.part_number == part_number]

    def filter_by_category(self, category: ClauseCategory | str) -> list[Clause]:
        try:
            cat = ClauseCategory(category)
        except ValueError:
            valid = ", ".join(c.value for c in ClauseCategory)
            raise ValidationError(
                [f"unknown category {category!r}; expected one of {valid}"], subject="category"
            ) from None
        return [c for c in self.corpus if c.category == cat]

    def get_clause(self, clause_id: str) -> Clause:
        return self.corpus.get(clause_id)

    def clauses_with_calculators(self) -> list[Clause]:
        return [c for c in self.corpus if c.requires_calculation or c.calculators]

    def clauses_with_explainers(self, store: ExplainerStore) -> list[Clause]:
        """Clauses that have an explainer in at least one language."""
        ids = store.clause_ids()
        return [c for c in self.corpus if c.id in ids]
