import logging
from collections.abc import Iterable

from feature_resolver.lib.geo_utils import planar_distance
from feature_resolver.models.element import ElementId, LatLon
from feature_resolver.models.overpass import OverpassElement, OverpassNode, OverpassWay


def element_points(elements: Iterable[OverpassElement]) -> dict[ElementId, LatLon]:
    """Map node ids to their (lat, lon), including untagged member nodes."""
    return {
        element.id: (element.lat, element.lon)
        for element in elements
        if isinstance(element, OverpassNode) and element.lat is not None and element.lon is not None
    }


def way_points(way: OverpassWay, points: dict[ElementId, LatLon]) -> list[LatLon]:
    """Resolve way member nodes in order, skipping those missing from the response."""
    return [point for node_id in way.nodes if (point := points.get(node_id)) is not None]


def element_distance(
    element: OverpassElement,
    lat: float,
    lon: float,
    points: dict[ElementId, LatLon],
) -> float | None:
    """
    Get the distance in meters from the click to the element.

    Ways use their closest member node.
    Returns None when the distance is unknown.
    """
    match element:
        case OverpassNode(lat=None) | OverpassNode(lon=None):
            logging.debug('Node %d has no coordinates', element.id)
            return None

        case OverpassNode(lat=node_lat, lon=node_lon):
            return planar_distance(lat, lon, node_lat, node_lon)

        case OverpassWay(nodes=nodes):
            resolved = way_points(element, points)
            if not resolved:
                logging.debug('Way %d has none of its %d nodes resolved', element.id, len(nodes))
                return None
            return min(planar_distance(lat, lon, p_lat, p_lon) for p_lat, p_lon in resolved)

        case _:
            return None
