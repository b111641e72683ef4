from typing import Literal

import msgspec
from shapely import LineString, Point, Polygon

from feature_resolver.models.element import LatLon


class _Highlight(msgspec.Struct, frozen=True, kw_only=True, tag_field='kind'):
    pass


class HighlightNone(_Highlight, frozen=True, kw_only=True, tag='none'):
    def to_shapely(self) -> None:
        return None


class HighlightMarker(_Highlight, frozen=True, kw_only=True, tag='marker'):
    point: LatLon
    style: Literal['feature', 'click']
    """A 'feature' marker sits on the selected node, a 'click' marker on the clicked coordinate."""

    def to_shapely(self) -> Point:
        lat, lon = self.point
        return Point(lon, lat)


class HighlightPolygon(_Highlight, frozen=True, kw_only=True, tag='polygon'):
    ring: list[LatLon]  # closed: first == last
    dashed: bool = False

    def to_shapely(self) -> Polygon:
        return Polygon([(lon, lat) for lat, lon in self.ring])


class HighlightPolyline(_Highlight, frozen=True, kw_only=True, tag='polyline'):
    path: list[LatLon]

    def to_shapely(self) -> LineString:
        return LineString([(lon, lat) for lat, lon in self.path])


Highlight = HighlightNone | HighlightMarker | HighlightPolygon | HighlightPolyline

HIGHLIGHT_NONE = HighlightNone()
