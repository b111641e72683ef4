import cython

from feature_resolver.lib.feature_name import feature_address, feature_display_name, feature_name
from feature_resolver.lib.feature_prefix import features_prefixes
from feature_resolver.models.feature import Feature
from feature_resolver.models.overpass import OverpassElement

# Tags never shown in the properties view, either bookkeeping or surfaced as dedicated fields
_HIDDEN_KEYS = frozenset((
    'name',
    'source',
    'created_by',
    'id',
    'type',
    'source:date',
    'source:name',
    'attribution',
    'note',
    'fixme',
    'FIXME',
    'description',
    'website',
    'phone',
    'opening_hours',
    'operator',
    'brand',
    'layer',
))

_HIDDEN_PREFIXES = ('addr:', 'operator:')


def map_feature(element: OverpassElement) -> Feature:
    """
    Convert the selected element into the caller-facing feature.

    >>> map_feature(...)
    Feature(id=1, type='node', tags={'amenity': 'cafe'}, name="Joe's Cafe", ...)
    """
    tags = element.tags or {}
    return Feature(
        id=element.id,
        type=element.type,
        tags=properties_view(tags),
        name=feature_name(tags),
        display_name=feature_display_name(tags),
        prefix=features_prefixes((element,))[0],
        address=feature_address(tags),
        website=_normalize_website(tags.get('website')),
        phone=tags.get('phone'),
        opening_hours=tags.get('opening_hours'),
    )


def properties_view(tags: dict[str, str]) -> dict[str, str]:
    """
    Return the displayable tags, in source order.

    >>> properties_view({'name': 'Foo', 'cuisine': 'thai', 'addr:street': 'Main St'})
    {'cuisine': 'thai'}
    """
    return {key: value for key, value in tags.items() if _is_visible(key)}


@cython.cfunc
def _is_visible(key: str) -> cython.bint:
    return key not in _HIDDEN_KEYS and not key.startswith(_HIDDEN_PREFIXES)


@cython.cfunc
def _normalize_website(website: str | None):
    if not website:
        return None
    if website.startswith(('http://', 'https://')):
        return website
    return f'https://{website}'
