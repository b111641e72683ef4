from datetime import timedelta
from logging.config import dictConfig
from typing import Literal

from githead import githead
from pydantic import Field

from feature_resolver.lib.pydantic_settings_integration import pydantic_settings_integration

# -------------------- System Configuration --------------------

ENV: Literal['dev', 'test', 'prod'] = 'prod'
LOG_LEVEL: Literal['DEBUG', 'INFO', 'WARNING'] | None = None

# -------------------- External Services --------------------

OVERPASS_INTERPRETER_URL = 'https://overpass-api.de/api/interpreter'

# Durations are read from the environment as ISO 8601 (e.g. PT5S)

# Server-side query timeout, the HTTP timeout is twice as long
OVERPASS_TIMEOUT = timedelta(seconds=10)
OVERPASS_RETRY_TIMEOUT: timedelta | None = timedelta(seconds=3)
HTTP_TIMEOUT = timedelta(seconds=20)

# -------------------- Query Features --------------------

QUERY_FEATURES_RADIUS_METERS: float = Field(30.0, gt=0)
QUERY_FEATURES_NEARBY_RADIUS_FACTOR: float = Field(2.0, gt=0)
QUERY_FEATURES_ENCLOSING_MAX_DISTANCE: float = Field(1000.0, gt=0)  # meters

pydantic_settings_integration(__name__, globals())

# -------------------- Constant or derived configuration --------------------

try:
    VERSION = 'git#' + githead()[:7]
except FileNotFoundError:
    VERSION = 'dev'  # pyright: ignore [reportConstantRedefinition]

NAME = 'feature-resolver'
WEBSITE = 'https://www.openstreetmap.org'
USER_AGENT = f'{NAME}/{VERSION} (+{WEBSITE})'

if LOG_LEVEL is None:
    LOG_LEVEL = 'INFO' if ENV == 'prod' else 'DEBUG'  # pyright: ignore [reportConstantRedefinition]

# -------------------- Logging configuration --------------------

dictConfig({
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(levelname)s | %(asctime)s | %(name)s %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'default': {
            'formatter': 'default',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',
        },
    },
    'loggers': {
        'root': {'handlers': ['default'], 'level': LOG_LEVEL},
        **{
            # reduce logging verbosity of some modules
            module: {'handlers': [], 'level': 'INFO'}
            for module in (
                'httpx',
                'httpcore',
            )
        },
    },
})
