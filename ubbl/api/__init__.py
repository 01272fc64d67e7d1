"""Public API facade."""

from ubbl.api.facade import UBBL

__all__ = ["UBBL"]
