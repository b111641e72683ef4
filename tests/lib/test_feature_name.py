import pytest

from feature_resolver.lib.feature_name import feature_address, feature_display_name, feature_name


@pytest.mark.parametrize(
    ('tags', 'expected'),
    [
        ({'name': 'Foo'}, 'Foo'),
        ({'name': 'Foo', 'addr:street': 'Main St'}, 'Foo'),
        ({'addr:street': 'Main St'}, None),
        ({}, None),
        (None, None),
    ],
)
def test_feature_name(tags, expected):
    assert feature_name(tags) == expected


@pytest.mark.parametrize(
    ('tags', 'expected'),
    [
        # Basic name tag
        ({'name': "Joe's Cafe", 'amenity': 'cafe'}, "Joe's Cafe"),
        # House number + street as fallback
        ({'addr:housenumber': '42', 'addr:street': 'Main St'}, '42 Main St'),
        # Street alone when the house number is missing
        ({'addr:street': 'Main St'}, 'Main St'),
        # House number is meaningless without a street
        ({'addr:housenumber': '42'}, None),
        # No recognizable name tags
        ({'building': 'yes'}, None),
        ({}, None),
        (None, None),
    ],
)
def test_feature_display_name(tags, expected):
    assert feature_display_name(tags) == expected


@pytest.mark.parametrize(
    ('tags', 'expected'),
    [
        ({'addr:housenumber': '1', 'addr:street': 'Rynek', 'addr:city': 'Kraków'}, '1 Rynek, Kraków'),
        ({'addr:housenumber': '1', 'addr:street': 'Rynek'}, '1 Rynek'),
        ({'addr:city': 'Kraków'}, None),
        # free-form address tag takes precedence
        ({'address': 'ul. Floriańska 3, Kraków', 'addr:street': 'Rynek'}, 'ul. Floriańska 3, Kraków'),
        ({'address': '221B Baker Street'}, '221B Baker Street'),
        ({'name': 'Foo'}, None),
    ],
)
def test_feature_address(tags, expected):
    assert feature_address(tags) == expected
