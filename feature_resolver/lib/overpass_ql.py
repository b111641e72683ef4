from datetime import timedelta
from typing import NamedTuple

# Tag keys that make a node worth querying around the click
NEARBY_NODE_KEYS = ('amenity', 'shop', 'tourism', 'leisure', 'historic', 'building')

# Tag keys that make a way worth querying around the click
NEARBY_WAY_KEYS = ('building', 'amenity', 'shop', 'tourism', 'leisure', 'name')


class ElementsQuery(NamedTuple):
    lat: float
    lon: float
    radius_meters: float
    node_keys: tuple[str, ...]
    way_keys: tuple[str, ...]
    enclosing: bool
    """Query elements containing the point instead of elements around it."""


def build_click_queries(lat: float, lon: float, radius_meters: float) -> tuple[ElementsQuery, ElementsQuery]:
    """
    Build the radius and the containment queries for a map click.

    >>> nearby, enclosing = build_click_queries(52.2297, 21.0122, 30)
    >>> nearby.enclosing, enclosing.enclosing
    (False, True)
    """
    return (
        ElementsQuery(lat, lon, radius_meters, NEARBY_NODE_KEYS, NEARBY_WAY_KEYS, enclosing=False),
        ElementsQuery(lat, lon, radius_meters, (), (), enclosing=True),
    )


def overpass_ql(query: ElementsQuery, *, timeout: timedelta) -> str:
    """
    Render the query in Overpass QL.

    Ways are followed by their member nodes (skeleton only) so that their shape can be resolved.
    """
    header = f'[out:json][timeout:{int(timeout.total_seconds())}];'
    lat_lon = f'{query.lat:.7f},{query.lon:.7f}'

    if query.enclosing:
        return (
            f'{header}'
            f'is_in({lat_lon})->.a;'
            'way(pivot.a)->.w;'
            '.w out body;'
            'node(w.w);'
            'out skel qt;'
            'rel(pivot.a);'
            'out tags;'
        )

    around = f'around:{query.radius_meters:.1f},{lat_lon}'
    return (
        f'{header}'
        f'node({around}){_keys_filter(query.node_keys)};'
        'out body;'
        f'way({around}){_keys_filter(query.way_keys)}->.w;'
        '.w out body;'
        'node(w.w);'
        'out skel qt;'
    )


def _keys_filter(keys: tuple[str, ...]) -> str:
    """
    >>> _keys_filter(('amenity', 'shop'))
    '[~"^(amenity|shop)$"~"."]'
    """
    if not keys:
        return ''
    return f'[~"^({"|".join(keys)})$"~"."]'
