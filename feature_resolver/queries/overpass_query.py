import logging

import httpx
import msgspec
from httpx import Timeout

from feature_resolver.config import OVERPASS_INTERPRETER_URL, OVERPASS_RETRY_TIMEOUT, OVERPASS_TIMEOUT
from feature_resolver.lib.overpass_ql import ElementsQuery, overpass_ql
from feature_resolver.lib.retry import retry
from feature_resolver.models.overpass import OverpassElement, OverpassResponse
from feature_resolver.utils import HTTP, typed_json_decoder


class OverpassError(Exception):
    """Overpass accepted the query but reported a failure in its remark."""


class OverpassQuery:
    @staticmethod
    async def fetch(query: ElementsQuery) -> list[OverpassElement]:
        """
        Query Overpass for elements around or enclosing a point.

        Ways are followed by their member nodes.
        Elements returned by a containment query are marked as enclosing.
        """
        ql = overpass_ql(query, timeout=OVERPASS_TIMEOUT)
        logging.debug(
            'Querying Overpass for %s elements at %.7f,%.7f with radius %r',
            'enclosing' if query.enclosing else 'nearby',
            query.lat,
            query.lon,
            query.radius_meters,
        )

        elements = (await _post(ql)).elements
        if query.enclosing:
            elements = [msgspec.structs.replace(element, enclosing=True) for element in elements]
        return elements


def _is_retryable(e: Exception) -> bool:
    if isinstance(e, OverpassError):
        return False
    # client errors will not go away on retry, except for rate limiting
    if isinstance(e, httpx.HTTPStatusError):
        status_code = e.response.status_code
        return status_code == 429 or status_code >= 500
    return True


@retry(OVERPASS_RETRY_TIMEOUT, retryable=_is_retryable)
async def _post(ql: str) -> OverpassResponse:
    r = await HTTP.post(
        OVERPASS_INTERPRETER_URL,
        data={'data': ql},
        timeout=Timeout(OVERPASS_TIMEOUT.total_seconds() * 2),
    )
    r.raise_for_status()

    response = typed_json_decoder(OverpassResponse).decode(r.content)
    if response.remark is not None and 'error' in response.remark.lower():
        raise OverpassError(response.remark)
    return response
