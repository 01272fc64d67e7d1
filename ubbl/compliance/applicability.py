"""Applicability resolution — which clauses are relevant to a specification."""

from __future__ import annotations

import logging
from typing import Iterable

from ubbl.compliance.specification import BuildingSpecification
from ubbl.corpus.models import Clause

logger = logging.getLogger(__name__)


def is_applicable(clause: Clause, spec: BuildingSpecification) -> bool:
    """Return True if *clause* applies to *spec*.

    Clauses without an applicability predicate apply to every building.
    """
    if clause.applicability is None:
        return True
    return clause.applicability.matches(spec)


def resolve(spec: BuildingSpecification, clauses: Iterable[Clause]) -> list[Clause]:
    """Select the clauses applicable to *spec*, preserving corpus order.

    Pure: the result depends only on *spec* and *clauses*.  A specification
    matching no conditional clause still yields the universal clauses.
    """
    applicable = [c for c in clauses if is_applicable(c, spec)]
    logger.debug(
        "%d applicable clause(s) for %s (%s, %.1fm, %d occupants)",
        len(applicable), spec.project_id, spec.building_type,
        spec.building_height, spec.occupancy,
    )
    return applicable
