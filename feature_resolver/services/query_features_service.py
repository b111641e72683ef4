import asyncio
import logging
from asyncio import TaskGroup

from sentry_sdk import capture_exception

import feature_resolver.lib.sentry  # noqa: F401
from feature_resolver.config import QUERY_FEATURES_RADIUS_METERS
from feature_resolver.lib.geo_utils import validate_lat_lon, zoom_radius_meters
from feature_resolver.lib.overpass_ql import ElementsQuery, build_click_queries
from feature_resolver.lib.query_features import QueryFeatures
from feature_resolver.models.geo_data_source import GeoDataSource
from feature_resolver.models.highlight import HIGHLIGHT_NONE, HighlightNone
from feature_resolver.models.overpass import OverpassElement
from feature_resolver.models.selection_state import SELECTION_EMPTY, SelectionState
from feature_resolver.queries.overpass_query import OverpassQuery


class QueryFeaturesService:
    """
    Resolve map clicks into the current selection.

    Only the most recent call may update the selection, starting a new call
    (or clearing the selection) cancels the pending fetch of the previous one.
    """

    def __init__(self, source: GeoDataSource = OverpassQuery) -> None:  # type: ignore[assignment]
        self._source = source
        self._state = SELECTION_EMPTY
        self._generation = 0
        self._pending: asyncio.Task | None = None

    @property
    def state(self) -> SelectionState:
        return self._state

    async def resolve(
        self,
        lat: float,
        lon: float,
        *,
        zoom: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> SelectionState | None:
        """
        Resolve a map click and replace the current selection.

        Returns None when the call was superseded by a newer one, or abandoned through the cancel event.
        In that case the selection is left untouched.
        """
        validate_lat_lon(lat, lon)
        radius_meters = QUERY_FEATURES_RADIUS_METERS if zoom is None else zoom_radius_meters(zoom)

        generation = self._supersede()
        fetch_task = asyncio.create_task(self._fetch(build_click_queries(lat, lon, radius_meters)))
        self._pending = fetch_task

        cancel_task = asyncio.create_task(cancel.wait()) if cancel is not None else None
        try:
            await asyncio.wait(
                (fetch_task,) if cancel_task is None else (fetch_task, cancel_task),
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            if cancel_task is not None:
                cancel_task.cancel()
            if not fetch_task.done():
                fetch_task.cancel()
            if self._pending is fetch_task:
                self._pending = None

        if (
            generation != self._generation
            or (cancel is not None and cancel.is_set())
            or not fetch_task.done()
            or fetch_task.cancelled()
        ):
            logging.debug('Abandoned click resolution at %.7f,%.7f', lat, lon)
            return None

        results = fetch_task.result()
        if all(result is None for result in results):
            state = SelectionState(feature=None, highlight=HIGHLIGHT_NONE, status='query_failed')
        else:
            elements = [element for result in results if result is not None for element in result]
            feature, highlight = QueryFeatures.resolve_elements(elements, lat, lon, radius_meters)
            state = SelectionState(
                feature=feature,
                highlight=highlight,
                status='found' if feature is not None else 'not_found',
            )

        self._state = state
        return state

    def clear_selection(self) -> HighlightNone:
        """Reset the selection and invalidate any pending resolution."""
        self._supersede()
        self._state = SELECTION_EMPTY
        return HIGHLIGHT_NONE

    def _supersede(self) -> int:
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        return self._generation

    async def _fetch(self, queries: tuple[ElementsQuery, ...]) -> list[list[OverpassElement] | None]:
        async with TaskGroup() as tg:
            tasks = [tg.create_task(self._fetch_branch(query)) for query in queries]
        return [task.result() for task in tasks]

    async def _fetch_branch(self, query: ElementsQuery) -> list[OverpassElement] | None:
        try:
            return list(await self._source.fetch(query))
        except Exception:
            logging.warning(
                'Failed to query %s elements at %.7f,%.7f',
                'enclosing' if query.enclosing else 'nearby',
                query.lat,
                query.lon,
                exc_info=True,
            )
            capture_exception()
            return None
