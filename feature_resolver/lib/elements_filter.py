from collections.abc import Iterable

import cython

from feature_resolver.models.overpass import OverpassElement, OverpassWay

# Fewer member nodes cannot form a visible shape
WAY_MIN_NODES = 3


class ElementsFilter:
    @staticmethod
    def filter_resolvable(elements: Iterable[OverpassElement]) -> list[OverpassElement]:
        """Return only elements that may be selected, preserving their order."""
        return [element for element in elements if _check_resolvable(element)]


@cython.cfunc
def _check_resolvable(element: OverpassElement) -> cython.bint:
    if not element.tags:
        return False
    if isinstance(element, OverpassWay):
        return len(element.nodes) >= WAY_MIN_NODES
    return True
