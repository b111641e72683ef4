import logging
from collections.abc import Callable
from sys import modules
from typing import Any, get_type_hints

from pydantic import create_model
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_CONFIG = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')


def _is_setting_name(name: str) -> bool:
    return name[:1] != '_' and name.isupper()


def pydantic_settings_integration(
    caller_name: str,
    caller_globals: dict[str, Any],
    /,
    config: SettingsConfigDict = _DEFAULT_CONFIG,
    name_filter: Callable[[str], bool] = _is_setting_name,
) -> None:
    """
    Override the calling module's upper-case globals with environment values.

    Builds a BaseSettings model out of the matching globals (their type hints,
    or the type of the default value), validates it against the environment
    and the .env file, and writes the validated values back into the module.
    """
    settings = {k: v for k, v in caller_globals.items() if name_filter(k)}
    if not settings:
        logging.warning('No settings found in %s matching the filter', caller_name)
        return

    hints = get_type_hints(modules[caller_name], settings)
    fields: dict[str, tuple[Any, Any]] = {
        name: (
            hints.get(name, Any if isinstance(default, FieldInfo) else type(default)),
            default,
        )
        for name, default in settings.items()
    }

    base = type(f'{caller_name}_SettingsBase', (BaseSettings,), {'model_config': config})
    model = create_model(f'{caller_name}_Settings', __base__=base, **fields)  # type: ignore
    instance = model()

    for name in settings:
        caller_globals[name] = getattr(instance, name)
