from collections.abc import Iterable
from math import inf

import cython

from feature_resolver.config import (
    QUERY_FEATURES_ENCLOSING_MAX_DISTANCE,
    QUERY_FEATURES_NEARBY_RADIUS_FACTOR,
)
from feature_resolver.models.scored_element import Classification, ScoredElement

# Tag keys describing something the user may have clicked into
ENCLOSING_KEYS = frozenset(('building', 'amenity', 'shop', 'tourism', 'leisure'))


def classify_features(scored: Iterable[ScoredElement], radius_meters: float) -> Classification:
    """
    Partition scored elements into nearby and enclosing candidates.

    An element may qualify for both roles. Both buckets are sorted by distance
    ascending, then by score descending. Enclosing candidates with unknown
    distance sort last.
    """
    nearby_max_distance: cython.double = radius_meters * QUERY_FEATURES_NEARBY_RADIUS_FACTOR
    nearby: list[ScoredElement] = []
    enclosing: list[ScoredElement] = []

    for entry in scored:
        tags = entry.element.tags or {}
        if is_administrative(tags):
            continue
        if _is_enclosing_candidate(entry, tags):
            enclosing.append(entry)
        if entry.distance is not None and entry.distance <= nearby_max_distance:
            nearby.append(entry)

    nearby.sort(key=lambda e: (e.distance, -e.score))
    enclosing.sort(key=lambda e: (inf if e.distance is None else e.distance, -e.score))
    return Classification(nearby=nearby, enclosing=enclosing)


def is_administrative(tags: dict[str, str]) -> bool:
    """
    Check whether the tags describe an administrative boundary.

    >>> is_administrative({'admin_level': '8'})
    True
    """
    return tags.get('boundary') == 'administrative' or 'admin_level' in tags


@cython.cfunc
def _is_enclosing_candidate(entry: ScoredElement, tags: dict[str, str]) -> cython.bint:
    if not entry.element.enclosing:
        return False
    if ENCLOSING_KEYS.isdisjoint(tags):
        return False
    # very large containing regions are never the intended target
    return entry.distance is None or entry.distance <= QUERY_FEATURES_ENCLOSING_MAX_DISTANCE
