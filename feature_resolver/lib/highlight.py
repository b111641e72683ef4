import logging

import cython
import numpy as np
from shapely import LineString, Polygon, get_coordinates
from shapely.errors import GEOSException

from feature_resolver.lib.element_distance import way_points
from feature_resolver.models.element import ElementId, LatLon
from feature_resolver.models.highlight import (
    HIGHLIGHT_NONE,
    Highlight,
    HighlightMarker,
    HighlightPolygon,
    HighlightPolyline,
)
from feature_resolver.models.overpass import OverpassElement, OverpassNode, OverpassWay

# Tag keys that make a way render as a filled area
_AREA_KEYS = frozenset(('building', 'amenity', 'leisure'))

_WAY_MIN_POINTS = 3


def build_highlight(
    element: OverpassElement | None,
    points: dict[ElementId, LatLon],
    lat: float,
    lon: float,
) -> Highlight:
    """
    Build the highlight geometry for the selected element.

    Anything that cannot be drawn falls back to a marker at the clicked coordinate.
    """
    if element is None:
        return HIGHLIGHT_NONE

    click = HighlightMarker(point=(lat, lon), style='click')

    match element:
        case OverpassNode(lat=None) | OverpassNode(lon=None):
            logging.debug('Node %d has no coordinates, highlighting the click', element.id)
            return click

        case OverpassNode(lat=node_lat, lon=node_lon):
            return HighlightMarker(point=(node_lat, node_lon), style='feature')

        case OverpassWay():
            resolved = way_points(element, points)
            distinct: cython.Py_ssize_t = len(set(resolved))
            if distinct < _WAY_MIN_POINTS:
                logging.debug('Way %d has only %d distinct resolved points, highlighting the click', element.id, distinct)
                return click
            try:
                highlight = _way_highlight(element, resolved)
            except (ValueError, GEOSException):
                logging.info('Failed to build geometry for way %d', element.id, exc_info=True)
                return click
            if highlight is None:
                logging.debug('Way %d has a degenerate area, highlighting the click', element.id)
                return click
            return highlight

        case _:
            return click


@cython.cfunc
def _way_highlight(way: OverpassWay, resolved: list[LatLon]) -> Highlight | None:
    lon_lat = np.fliplr(resolved)

    if way.enclosing or not _AREA_KEYS.isdisjoint(way.tags or ()):
        polygon = Polygon(lon_lat)
        if polygon.is_empty or polygon.area == 0:
            return None
        ring: list[LatLon] = [tuple(p) for p in np.fliplr(get_coordinates(polygon.exterior)).tolist()]
        return HighlightPolygon(ring=ring, dashed=way.enclosing)

    line = LineString(lon_lat)
    path: list[LatLon] = [tuple(p) for p in np.fliplr(get_coordinates(line)).tolist()]
    return HighlightPolyline(path=path)
