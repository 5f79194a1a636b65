import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

_TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Settings:
    """runtime settings for the query engine"""
    log_level: str = 'WARNING'
    trace_pulls: bool = False  # log every cursor pull at debug level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """read settings from LAZINQ_* environment variables"""
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get('LAZINQ_LOG_LEVEL', cls.log_level).upper(),
            trace_pulls=env.get('LAZINQ_TRACE_PULLS', '').strip().lower() in _TRUTHY,
        )


_settings = Settings.from_env()


def _apply(settings: Settings) -> None:
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: '{settings.log_level}'")
    logging.getLogger('lazinq').setLevel(level)


def get_settings() -> Settings:
    return _settings


def configure(**overrides) -> Settings:
    """replace individual settings and re-apply the package logger level"""
    global _settings
    if 'log_level' in overrides:
        overrides['log_level'] = overrides['log_level'].upper()
    new_settings = replace(_settings, **overrides)
    _apply(new_settings)
    _settings = new_settings
    return _settings


_apply(_settings)
