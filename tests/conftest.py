from collections.abc import Collection

import pytest
import pytest_asyncio
import respx

from feature_resolver.config import OVERPASS_INTERPRETER_URL


def pytest_collection_modifyitems(config: pytest.Config, items: Collection[pytest.Item]):
    # run all tests in the session in the same event loop, the HTTP client is shared
    # https://pytest-asyncio.readthedocs.io/en/latest/how-to-guides/run_session_tests_in_same_loop.html
    session_scope_marker = pytest.mark.asyncio(loop_scope='session')
    for item in items:
        if pytest_asyncio.is_async_test(item):
            item.add_marker(session_scope_marker, append=False)


@pytest.fixture
def mock_overpass():
    with respx.mock(assert_all_called=False) as mock:
        yield mock.post(OVERPASS_INTERPRETER_URL)
