import cython

from feature_resolver.models.overpass import OverpassElement

# Weights are hand-tuned, selection outcomes depend on their exact values.

_TYPE_SCORES = {
    'node': 5,
    'way': 3,
}
_TYPE_SCORE_OTHER = 1

_NAME_SCORE = 20
_ENCLOSING_SCORE = 30

_KEY_SCORES = {
    # categories
    'building': 15,
    'amenity': 18,
    'shop': 18,
    'tourism': 17,
    'leisure': 16,
    'historic': 16,
    # infrastructure
    'railway': 10,
    'public_transport': 12,
    # minor
    'natural': 8,
    'landuse': 5,
    'water': 7,
}

_HIGHWAY_SCORE = 10
_HIGHWAY_IGNORED_VALUE = 'service'


def feature_score(element: OverpassElement) -> int:
    """Sum of all independent contributions of the element type, tags and origin."""
    score: cython.int = _TYPE_SCORES.get(element.type, _TYPE_SCORE_OTHER)
    if element.enclosing:
        score += _ENCLOSING_SCORE

    tags = element.tags
    if tags:
        score += _tags_score(tags)
    return score


@cython.cfunc
def _tags_score(tags: dict[str, str]) -> cython.int:
    score: cython.int = 0

    if 'name' in tags:
        score += _NAME_SCORE

    for key, value in _KEY_SCORES.items():
        if key in tags:
            score += value

    highway = tags.get('highway')
    if highway is not None and highway != _HIGHWAY_IGNORED_VALUE:
        score += _HIGHWAY_SCORE

    return score
