"""Search & filter over the clause corpus."""

from ubbl.search.service import ClauseSearch

__all__ = ["ClauseSearch"]
