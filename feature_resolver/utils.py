import logging
from functools import cache

import httpx
import msgspec

from feature_resolver.config import HTTP_TIMEOUT, USER_AGENT


async def _log_http_request(r: httpx.Request) -> None:
    logging.debug('Client HTTP request: %s %s', r.method, r.url)


async def _log_http_response(r: httpx.Response) -> None:
    if r.is_success:
        logging.debug('Client HTTP response: %s %s %s', r.status_code, r.reason_phrase, r.url)
    else:
        logging.info('Client HTTP response: %s %s %s', r.status_code, r.reason_phrase, r.url)


HTTP = httpx.AsyncClient(
    headers={'User-Agent': USER_AGENT},
    timeout=HTTP_TIMEOUT.total_seconds(),
    follow_redirects=True,
    event_hooks={
        'request': [_log_http_request],
        'response': [_log_http_response],
    },
)


@cache
def typed_json_decoder(t):
    """Get a cached JSON decoder that validates into the given type."""
    return msgspec.json.Decoder(t)
