from __future__ import annotations
import logging
import os
from dataclasses import dataclass

_TRUTHY = ('1', 'true', 'yes', 'on')
_FALSY = ('0', 'false', 'no', 'off')

# Defaults
DEFAULT_PROMPT = '> '
DEFAULT_LOG_LEVEL = 'WARNING'


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    raw = raw.strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return default


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return raw if raw else default


@dataclass
class Settings:
    trace: bool = False
    color: bool = True
    prompt: str = DEFAULT_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """Read TOYLISP_* environment variables; CLI flags override the result."""
    return Settings(
        trace=flag_from_env('TOYLISP_TRACE', False),
        color=flag_from_env('TOYLISP_COLOR', True),
        prompt=str_from_env('TOYLISP_PROMPT', DEFAULT_PROMPT),
        log_level=str_from_env('TOYLISP_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper(),
    )


def resolve_log_level(name: str) -> int:
    """Map a level name to its logging constant; unknown names give WARNING."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING
