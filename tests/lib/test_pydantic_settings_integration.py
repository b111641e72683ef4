from datetime import timedelta

import pytest
from pydantic import Field, ValidationError

from feature_resolver.lib.pydantic_settings_integration import pydantic_settings_integration

FEATURE_RESOLVER_TEST_NAME: str | None = None
FEATURE_RESOLVER_TEST_TIMEOUT = timedelta(seconds=1)
FEATURE_RESOLVER_TEST_RADIUS: float


def test_pydantic_settings_integration(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv('FEATURE_RESOLVER_TEST_NAME', 'example')
    monkeypatch.setenv('FEATURE_RESOLVER_TEST_TIMEOUT', 'PT5S')
    assert FEATURE_RESOLVER_TEST_NAME is None
    pydantic_settings_integration(__name__, globals())
    assert FEATURE_RESOLVER_TEST_NAME == 'example'
    assert FEATURE_RESOLVER_TEST_TIMEOUT == timedelta(seconds=5)


@pytest.mark.parametrize(
    ('value', 'valid'),
    [
        ('12.5', True),
        ('0', False),
        ('-1', False),
    ],
)
def test_pydantic_settings_integration_constraints(monkeypatch: pytest.MonkeyPatch, value: str, valid: bool):
    monkeypatch.setenv('FEATURE_RESOLVER_TEST_RADIUS', value)
    settings = {'FEATURE_RESOLVER_TEST_RADIUS': Field(30.0, gt=0)}

    if not valid:
        with pytest.raises(ValidationError):
            pydantic_settings_integration(__name__, settings)
        return

    pydantic_settings_integration(__name__, settings)
    assert settings['FEATURE_RESOLVER_TEST_RADIUS'] == 12.5


@pytest.mark.parametrize(
    ('value', 'expected'),
    [
        ('PT5S', timedelta(seconds=5)),
        ('PT1M30S', timedelta(minutes=1, seconds=30)),
        ('P1D', timedelta(days=1)),
    ],
)
def test_pydantic_settings_integration_duration(monkeypatch: pytest.MonkeyPatch, value: str, expected: timedelta):
    monkeypatch.setenv('FEATURE_RESOLVER_TEST_TIMEOUT', value)
    settings = {'FEATURE_RESOLVER_TEST_TIMEOUT': timedelta(seconds=1)}
    pydantic_settings_integration(__name__, settings)
    assert settings['FEATURE_RESOLVER_TEST_TIMEOUT'] == expected
