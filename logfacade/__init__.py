"""logfacade/__init__.py - Public API for the logfacade package.

logfacade is a thin facade over the standard library ``logging`` module. It
adds printf-style methods that only format when the level is enabled, helpers
that show a cause's full traceback at DEBUG and a one-line summary otherwise,
and call-site-aware logger creation. Handlers, levels and output routing stay
with ``logging``.

Quick start:
    from logfacade import configure, get_logger

    configure(level="info")     # optional: console handler on the root logger

    LOG = get_logger()          # named after the calling module

    LOG.infof("processed %d of %d items", done, total)

    try:
        sync()
    except ConnectionError as exc:
        # DEBUG on:  full traceback
        # DEBUG off: "sync failed (Switch to DEBUG for full stack trace):
        #             ConnectionError: refused"
        LOG.warn_debug(exc, "sync failed")

Exported names:
    Logger:         The facade class wrapping one ``logging.Logger``.
    get_logger:     Create a Logger for a name, or for the calling module/class.
    configure:      Install a console handler on the root logger.
    resolve_level:  Map a level name or number to a ``logging`` level.
    safe_to_string: Never-raising rendering of arbitrary values.
"""

from .core import Logger, get_logger
from .config import configure, resolve_level
from .render import safe_to_string

__all__ = [
    "Logger",
    "get_logger",
    "configure",
    "resolve_level",
    "safe_to_string",
]
__version__ = "0.1.0"
