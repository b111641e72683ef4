from collections.abc import Sequence
from typing import Protocol

from feature_resolver.lib.overpass_ql import ElementsQuery
from feature_resolver.models.overpass import OverpassElement


class GeoDataSource(Protocol):
    async def fetch(self, query: ElementsQuery, /) -> Sequence[OverpassElement]:
        """
        Execute a spatial query.

        Ways are accompanied by their member nodes in the same sequence.
        Elements from a containment query must have enclosing set.
        May raise on transport, status or decoding errors.
        """
        ...
