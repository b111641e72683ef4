import logging
from collections.abc import Sequence

from feature_resolver.models.element import TypedElementKey
from feature_resolver.models.overpass import OverpassElement
from feature_resolver.models.scored_element import Classification, ScoredElement


def select_feature(
    classification: Classification,
    survivors: Sequence[OverpassElement],
) -> OverpassElement | None:
    """
    Pick exactly one element to present, or None.

    Rules, the first match wins:
    1. element both nearby and enclosing (its enclosing entry, in nearby order)
    2. no nearby candidates: the first enclosing candidate
    3. the first nearby candidate
    4. the first enclosing candidate
    5. the first filtered element with tags
    """
    nearby, enclosing = classification

    if nearby and enclosing:
        enclosing_map: dict[TypedElementKey, ScoredElement] = {}
        for entry in enclosing:
            enclosing_map.setdefault(entry.element.key, entry)

        for entry in nearby:
            both = enclosing_map.get(entry.element.key)
            if both is not None:
                logging.debug('Selected %r (nearby and enclosing)', both.element.key)
                return both.element

    if not nearby and enclosing:
        logging.debug('Selected %r (enclosing, nothing nearby)', enclosing[0].element.key)
        return enclosing[0].element

    if nearby:
        logging.debug('Selected %r (nearby)', nearby[0].element.key)
        return nearby[0].element

    if enclosing:
        return enclosing[0].element

    for element in survivors:
        if element.tags:
            logging.debug('Selected %r (fallback, no candidates)', element.key)
            return element

    return None
