from collections.abc import Iterable

import cython

from feature_resolver.models.element import ElementType
from feature_resolver.models.overpass import OverpassElement

# Checked in order, the first key present on the feature decides its prefix
_PREFIX_KEYS = ('amenity', 'shop', 'tourism', 'highway', 'building', 'natural', 'leisure', 'historic')

_PREFIX_VALUES: dict[str, dict[str, str]] = {
    'amenity': {
        'restaurant': 'Restaurant',
        'cafe': 'Cafe',
        'bar': 'Bar',
        'fast_food': 'Fast Food',
        'bank': 'Bank',
        'atm': 'ATM',
        'pharmacy': 'Pharmacy',
        'hospital': 'Hospital',
        'school': 'School',
        'university': 'University',
        'library': 'Library',
        'place_of_worship': 'Place of Worship',
        'fuel': 'Gas Station',
        'parking': 'Parking',
    },
    'shop': {
        'supermarket': 'Supermarket',
        'convenience': 'Convenience Store',
        'clothes': 'Clothing Store',
        'bakery': 'Bakery',
        'butcher': 'Butcher',
        'hardware': 'Hardware Store',
        'electronics': 'Electronics Store',
    },
    'tourism': {
        'hotel': 'Hotel',
        'attraction': 'Attraction',
        'museum': 'Museum',
        'viewpoint': 'Viewpoint',
    },
    'highway': {
        'motorway': 'Motorway',
        'trunk': 'Trunk Road',
        'primary': 'Primary Road',
        'secondary': 'Secondary Road',
        'residential': 'Residential Street',
        'footway': 'Footpath',
        'cycleway': 'Cycle Path',
    },
    'natural': {
        'water': 'Water',
        'wood': 'Forest',
        'tree': 'Tree',
        'peak': 'Mountain Peak',
    },
    'leisure': {
        'park': 'Park',
        'playground': 'Playground',
        'sports_centre': 'Sports Center',
        'stadium': 'Stadium',
    },
}

_ADMIN_LEVELS = {
    '2': 'Country Boundary',
    '4': 'State Boundary',
    '5': 'Region Boundary',
    '6': 'County Boundary',
    '7': 'District Boundary',
    '8': 'City Boundary',
    '9': 'Suburb Boundary',
    '10': 'Neighbourhood Boundary',
}

_TYPE_PREFIXES: dict[ElementType, str] = {
    'node': 'Point',
    'way': 'Way',
    'relation': 'Relation',
}


def features_prefixes(elements: Iterable[OverpassElement]) -> list[str]:
    """
    Returns a human-readable prefix for a feature based on its type and tags.

    >>> features_prefixes(...)
    ['Restaurant', 'City Boundary', ...]
    """
    return [_feature_prefix(e) for e in elements]


@cython.cfunc
def _feature_prefix(element: OverpassElement) -> str:
    tags = element.tags
    if tags and (r := _feature_prefix_tags(tags)) is not None:
        return r
    return _TYPE_PREFIXES[element.type]


@cython.cfunc
def _feature_prefix_tags(tags: dict[str, str]):
    if tags.get('boundary') == 'administrative':
        return _ADMIN_LEVELS.get(tags.get('admin_level', ''), 'Administrative Boundary')

    for key in _PREFIX_KEYS:
        value = tags.get(key)
        if value is None:
            continue

        if key == 'building':
            return _feature_prefix_building(value, tags)

        known = _PREFIX_VALUES.get(key, {}).get(value)
        if known is not None:
            return known

        # provide automatic feature prefix for unknown values
        # e.g., amenity=cooking_school -> 'Cooking school'
        prefix = _humanize(value)
        return f'Historic {prefix}' if key == 'historic' else prefix

    return None


@cython.cfunc
def _feature_prefix_building(value: str, tags: dict[str, str]) -> str:
    if value != 'yes':
        return _humanize(value)
    if 'name' in tags or 'amenity' in tags or 'shop' in tags or 'tourism' in tags:
        return 'Building'
    return 'Unnamed Building'


@cython.cfunc
def _humanize(value: str) -> str:
    value = value.replace('_', ' ')
    return value[:1].upper() + value[1:]
