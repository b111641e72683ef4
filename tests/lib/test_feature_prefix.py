import pytest

from feature_resolver.lib.feature_prefix import features_prefixes
from feature_resolver.models.element import ElementId
from feature_resolver.models.overpass import OverpassNode, OverpassRelation, OverpassWay


@pytest.mark.parametrize(
    ('tags', 'expected'),
    [
        ({'amenity': 'restaurant'}, 'Restaurant'),
        ({'amenity': 'fuel'}, 'Gas Station'),
        ({'amenity': 'cooking_school'}, 'Cooking school'),
        # only the first letter is upper-cased
        ({'shop': 'DIY_store'}, 'DIY store'),
        ({'amenity': 'bicycle_rental_ATM'}, 'Bicycle rental ATM'),
        ({'shop': 'clothes'}, 'Clothing Store'),
        ({'tourism': 'museum'}, 'Museum'),
        ({'highway': 'residential'}, 'Residential Street'),
        ({'highway': 'service'}, 'Service'),
        ({'building': 'yes'}, 'Unnamed Building'),
        ({'building': 'yes', 'name': 'Foo'}, 'Building'),
        ({'building': 'apartments'}, 'Apartments'),
        ({'natural': 'wood'}, 'Forest'),
        ({'leisure': 'sports_centre'}, 'Sports Center'),
        ({'historic': 'castle'}, 'Historic Castle'),
        # first matching key wins
        ({'building': 'yes', 'amenity': 'school'}, 'School'),
        # administrative boundaries
        ({'boundary': 'administrative', 'admin_level': '8'}, 'City Boundary'),
        ({'boundary': 'administrative', 'admin_level': '2'}, 'Country Boundary'),
        ({'boundary': 'administrative'}, 'Administrative Boundary'),
    ],
)
def test_features_prefixes(tags, expected):
    element = OverpassWay(id=ElementId(1), tags=tags)
    assert features_prefixes([element]) == [expected]


@pytest.mark.parametrize(
    ('element', 'expected'),
    [
        (OverpassNode(id=ElementId(1), tags={'foo': 'bar'}), 'Point'),
        (OverpassWay(id=ElementId(1), tags={'foo': 'bar'}), 'Way'),
        (OverpassRelation(id=ElementId(1)), 'Relation'),
    ],
)
def test_features_prefixes_type_fallback(element, expected):
    assert features_prefixes([element]) == [expected]
