import cython


def feature_name(tags: dict[str, str] | None) -> str | None:
    """
    Returns the feature name tag, if any.

    >>> feature_name({'name': 'Foo', 'ref': 'A1'})
    'Foo'
    """
    return tags.get('name') if tags else None


def feature_display_name(tags: dict[str, str] | None) -> str | None:
    """
    Returns a human-readable name for a feature.

    Falls back to the street address when the feature is unnamed.

    >>> feature_display_name({'addr:housenumber': '42', 'addr:street': 'Main St'})
    '42 Main St'
    """
    if not tags:
        return None
    if name := tags.get('name'):
        return name
    return _street_address(tags)


def feature_address(tags: dict[str, str] | None) -> str | None:
    """
    Returns a one-line postal address for a feature.

    A free-form address tag takes precedence over the addr:* parts.

    >>> feature_address({'addr:housenumber': '1', 'addr:street': 'Rynek', 'addr:city': 'Kraków'})
    '1 Rynek, Kraków'
    """
    if not tags:
        return None
    if address := tags.get('address'):
        return address
    street = _street_address(tags)
    if street is None:
        return None
    if city := tags.get('addr:city'):
        return f'{street}, {city}'
    return street


@cython.cfunc
def _street_address(tags: dict[str, str]):
    street = tags.get('addr:street')
    if not street:
        return None
    if house_number := tags.get('addr:housenumber'):
        return f'{house_number} {street}'
    return street
