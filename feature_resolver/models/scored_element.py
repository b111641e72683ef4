from typing import NamedTuple

from feature_resolver.models.overpass import OverpassElement


class ScoredElement(NamedTuple):
    element: OverpassElement
    score: int
    distance: float | None  # meters, None when unknown


class Classification(NamedTuple):
    """Candidates partitioned by role, each bucket in selection order."""

    nearby: list[ScoredElement]
    enclosing: list[ScoredElement]
