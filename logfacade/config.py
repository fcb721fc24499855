"""config.py - Minimal backend setup for applications and examples.

The facade does not need any configuration of its own; level filtering and
output routing belong to ``logging``. ``configure()`` is a convenience for
scripts that want a sane console setup in one line:

    from logfacade import configure, get_logger

    configure()                 # level from $LOGFACADE_LEVEL, default INFO
    configure(level="debug")    # explicit level name
    configure(level=logging.WARNING, stream=sys.stdout)

Calling it again replaces the handler it installed before instead of adding a
second one, so repeated calls never duplicate output.
"""

import logging
import os
import sys
from typing import Optional, TextIO, Union

# Environment variable consulted when configure() is called without a level.
LEVEL_ENV_VAR = "LOGFACADE_LEVEL"

DEFAULT_LEVEL = logging.INFO

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Level names accepted in addition to logging's own.
_ALIASES = {
    "WARN": logging.WARNING,
    "FATAL": logging.CRITICAL,
}

# Marks the handler configure() installs so it can be found again.
_HANDLER_ATTR = "_logfacade_handler"


def resolve_level(value: Union[int, str, None]) -> int:
    """Map a level name or number to a ``logging`` level.

    Args:
        value: An int level, a case-insensitive name (``"debug"``, ``"WARN"``),
            a numeric string (``"15"``), or None for the default.

    Returns:
        The integer level.

    Raises:
        ValueError: If ``value`` is a name ``logging`` does not know.
    """
    if value is None:
        return DEFAULT_LEVEL
    if isinstance(value, int):
        return value

    text = value.strip()
    if text.isdigit():
        return int(text)

    name = text.upper()
    if name in _ALIASES:
        return _ALIASES[name]

    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {value!r}")
    return level


def configure(
    level: Union[int, str, None] = None,
    stream: Optional[TextIO] = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Handler:
    """Install a console handler on the root logger and set its level.

    Args:
        level: Root logger level. When None, ``$LOGFACADE_LEVEL`` is used,
            falling back to INFO.
        stream: Where records are written. Defaults to ``sys.stderr``.
        fmt: ``logging.Formatter`` format string.

    Returns:
        The installed handler.

    Raises:
        ValueError: If the level (argument or environment) is unknown.
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR)
    numeric_level = resolve_level(level)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, _HANDLER_ATTR, False):
            root.removeHandler(existing)
            existing.close()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    setattr(handler, _HANDLER_ATTR, True)

    root.addHandler(handler)
    root.setLevel(numeric_level)
    return handler
