import logging
from collections.abc import Sequence

from feature_resolver.lib.element_distance import element_distance, element_points
from feature_resolver.lib.elements_filter import ElementsFilter
from feature_resolver.lib.feature_classify import classify_features
from feature_resolver.lib.feature_mapper import map_feature
from feature_resolver.lib.feature_score import feature_score
from feature_resolver.lib.feature_select import select_feature
from feature_resolver.lib.highlight import build_highlight
from feature_resolver.models.feature import Feature
from feature_resolver.models.highlight import Highlight
from feature_resolver.models.overpass import OverpassElement
from feature_resolver.models.scored_element import ScoredElement


class QueryFeatures:
    @staticmethod
    def resolve_elements(
        elements: Sequence[OverpassElement],
        lat: float,
        lon: float,
        radius_meters: float,
    ) -> tuple[Feature | None, Highlight]:
        """
        Resolve a map click into at most one feature and its highlight.

        Elements may come from several queries, ways must be accompanied by their member nodes.
        """
        points = element_points(elements)
        survivors = ElementsFilter.filter_resolvable(elements)

        scored = [
            ScoredElement(
                element=element,
                score=feature_score(element),
                distance=element_distance(element, lat, lon, points),
            )
            for element in survivors
        ]

        classification = classify_features(scored, radius_meters)
        logging.debug(
            'Click at %.7f,%.7f: %d elements, %d resolvable, %d nearby, %d enclosing',
            lat,
            lon,
            len(elements),
            len(survivors),
            len(classification.nearby),
            len(classification.enclosing),
        )

        selected = select_feature(classification, survivors)
        if selected is None:
            return None, build_highlight(None, points, lat, lon)

        return map_feature(selected), build_highlight(selected, points, lat, lon)
