"""core.py - The Logger facade over the standard library ``logging`` module.

Logger wraps a ``logging.Logger`` (the Delegation Pattern) and adds three
things the stdlib API does not give you directly:

    printf-style ``...f`` methods:
        ``log.infof("loaded %d rows from %s", n, path)`` formats only when INFO
        is enabled, and a broken format string turns into a WARNING diagnostic
        instead of an exception at the call site.

    "full cause at DEBUG" helpers:
        ``log.warn_debug(exc, "retrying")`` attaches the full traceback when
        DEBUG is enabled, and otherwise appends a one-line summary of ``exc``
        so production logs stay readable.

    call-site resolution:
        ``LOG = get_logger()`` at module or class scope names the logger after
        the enclosing module or class.

Every record is emitted with the *caller's* file, line and function, not this
module's, so ``%(filename)s:%(lineno)d`` in a Formatter points at user code.

Typical usage:
    from logfacade import get_logger

    LOG = get_logger()

    def load(path):
        try:
            rows = read(path)
        except OSError as exc:
            LOG.warn_debugf(exc, "could not read %s", path)
            return []
        LOG.debugf("read %d rows from %s", len(rows), path)
        return rows
"""

import inspect
import logging
import os
import warnings
from typing import Any, Optional

from . import callsite
from .render import format_message, render_error, safe_to_string, summarize_cause

# Appended between the message and the cause summary when DEBUG is off.
DEBUG_HINT = " (Switch to DEBUG for full stack trace): "

# Logged instead of the intended message when formatting fails.
BOGUS_FORMAT = "Bogus format string: %s %s [%s] (%s)"


def _deprecated_no_args(method: str, replacement: str) -> None:
    # stacklevel=3: this helper, the ...f method, then the caller.
    warnings.warn(
        f"{method}() called without format arguments; "
        f"you meant to call {replacement}().",
        DeprecationWarning,
        stacklevel=3,
    )


def _bogus_format(level: int, message: Any, args: tuple, exc: Exception) -> str:
    return BOGUS_FORMAT % (
        logging.getLevelName(level),
        safe_to_string((message,)),
        safe_to_string(args),
        render_error(exc),
    )


def _diagnostic_level(level: int) -> int:
    # Formatting failures are never reported below WARNING.
    return max(logging.WARNING, level)


class Logger:
    """printf-style facade over a single ``logging.Logger``.

    Instances are immutable and hold no state besides the wrapped logger, so
    they are safe to share between threads to the same extent the configured
    handlers are.

    Method families, for each of debug / info / warn / error:

        ``S(message, cause=None)``
            Log a constant message. ``cause`` is attached as ``exc_info``.
        ``Sf(message, *args, cause=None)``
            Log ``message % args``. Nothing is formatted unless S is enabled.

    And for info / warn / error:

        ``S_debug(cause, message)`` / ``S_debugf(cause, message, *args)``
            Attach ``cause`` in full when DEBUG is enabled (or when ``cause``
            is None); otherwise log at S with a one-line summary of ``cause``.

    Attributes:
        logger (logging.Logger): The wrapped stdlib logger.
        name (str): The wrapped logger's name.
    """

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def name(self) -> str:
        return self._logger.name

    def __repr__(self) -> str:
        return f"<Logger {self._logger.name!r}>"

    def is_enabled_for(self, level: int) -> bool:
        """Return True if a record at ``level`` would be processed."""
        return self._logger.isEnabledFor(level)

    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(logging.DEBUG)

    # ---------------------------------------------------------------------- #
    # DEBUG
    # ---------------------------------------------------------------------- #

    def debug(self, message: str, cause: Optional[BaseException] = None) -> None:
        """Log ``message`` at DEBUG, with the traceback of ``cause`` if given."""
        self._emit(logging.DEBUG, message, cause)

    def debugf(
        self, message: str, *args: Any, cause: Optional[BaseException] = None
    ) -> None:
        """Log ``message % args`` at DEBUG, formatting only if DEBUG is enabled.

        Calling this without ``args`` is deprecated and behaves like debug().
        """
        if not args:
            _deprecated_no_args("debugf", "debug")
            self.debug(message, cause)
            return
        self._logf(logging.DEBUG, cause, message, args)

    # ---------------------------------------------------------------------- #
    # INFO
    # ---------------------------------------------------------------------- #

    def info(self, message: str, cause: Optional[BaseException] = None) -> None:
        """Log ``message`` at INFO, with the traceback of ``cause`` if given."""
        self._emit(logging.INFO, message, cause)

    def infof(
        self, message: str, *args: Any, cause: Optional[BaseException] = None
    ) -> None:
        """Log ``message % args`` at INFO, formatting only if INFO is enabled.

        Calling this without ``args`` is deprecated and behaves like info().
        """
        if not args:
            _deprecated_no_args("infof", "info")
            self.info(message, cause)
            return
        self._logf(logging.INFO, cause, message, args)

    def info_debug(self, cause: Optional[BaseException], message: str) -> None:
        """Log at INFO; full traceback of ``cause`` only if DEBUG is enabled."""
        self._log_debug(logging.INFO, cause, message)

    def info_debugf(
        self, cause: Optional[BaseException], message: str, *args: Any
    ) -> None:
        """Formatting counterpart of info_debug().

        Calling this without ``args`` is deprecated and behaves like
        info_debug().
        """
        if not args:
            _deprecated_no_args("info_debugf", "info_debug")
            self.info_debug(cause, message)
            return
        self._log_debugf(logging.INFO, cause, message, args)

    # ---------------------------------------------------------------------- #
    # WARN
    # ---------------------------------------------------------------------- #

    def warn(self, message: str, cause: Optional[BaseException] = None) -> None:
        """Log ``message`` at WARNING, with the traceback of ``cause`` if given."""
        self._emit(logging.WARNING, message, cause)

    def warnf(
        self, message: str, *args: Any, cause: Optional[BaseException] = None
    ) -> None:
        """Log ``message % args`` at WARNING, formatting only if enabled.

        Calling this without ``args`` is deprecated and behaves like warn().
        """
        if not args:
            _deprecated_no_args("warnf", "warn")
            self.warn(message, cause)
            return
        self._logf(logging.WARNING, cause, message, args)

    def warn_debug(self, cause: Optional[BaseException], message: str) -> None:
        """Log at WARNING; full traceback of ``cause`` only if DEBUG is enabled.

        Example:
            >>> LOG.warn_debug(ValueError("boom\\nmore"), "retrying")
            # DEBUG off:  WARNING "retrying (Switch to DEBUG for full stack
            #             trace): ValueError: boom", no traceback
            # DEBUG on:   WARNING "retrying" with the ValueError traceback
        """
        self._log_debug(logging.WARNING, cause, message)

    def warn_debugf(
        self, cause: Optional[BaseException], message: str, *args: Any
    ) -> None:
        """Formatting counterpart of warn_debug().

        Calling this without ``args`` is deprecated and behaves like
        warn_debug().
        """
        if not args:
            _deprecated_no_args("warn_debugf", "warn_debug")
            self.warn_debug(cause, message)
            return
        self._log_debugf(logging.WARNING, cause, message, args)

    warning = warn
    warningf = warnf

    # ---------------------------------------------------------------------- #
    # ERROR
    # ---------------------------------------------------------------------- #

    def error(self, message: str, cause: Optional[BaseException] = None) -> None:
        """Log ``message`` at ERROR, with the traceback of ``cause`` if given."""
        self._emit(logging.ERROR, message, cause)

    def errorf(
        self, message: str, *args: Any, cause: Optional[BaseException] = None
    ) -> None:
        """Log ``message % args`` at ERROR, formatting only if ERROR is enabled.

        Calling this without ``args`` is deprecated and behaves like error().
        """
        if not args:
            _deprecated_no_args("errorf", "error")
            self.error(message, cause)
            return
        self._logf(logging.ERROR, cause, message, args)

    def error_debug(self, cause: Optional[BaseException], message: str) -> None:
        """Log at ERROR; full traceback of ``cause`` only if DEBUG is enabled."""
        self._log_debug(logging.ERROR, cause, message)

    def error_debugf(
        self, cause: Optional[BaseException], message: str, *args: Any
    ) -> None:
        """Formatting counterpart of error_debug().

        Calling this without ``args`` is deprecated and behaves like
        error_debug().
        """
        if not args:
            _deprecated_no_args("error_debugf", "error_debug")
            self.error_debug(cause, message)
            return
        self._log_debugf(logging.ERROR, cause, message, args)

    # ---------------------------------------------------------------------- #
    # Private helpers
    # ---------------------------------------------------------------------- #

    def _emit(
        self, level: int, message: Any, cause: Optional[BaseException]
    ) -> None:
        """Hand one record to the wrapped logger.

        No ``%``-args are passed, so ``logging`` never re-formats a message
        that is already rendered.
        """
        self._logger.log(
            level, message, exc_info=cause, stacklevel=_caller_stacklevel()
        )

    def _logf(
        self,
        level: int,
        cause: Optional[BaseException],
        message: str,
        args: tuple,
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return

        try:
            rendered = format_message(message, args)
        except Exception as exc:
            self._emit(
                _diagnostic_level(level),
                _bogus_format(level, message, args, exc),
                cause,
            )
            return

        self._emit(level, rendered, cause)

    def _log_debug(
        self, level: int, cause: Optional[BaseException], message: str
    ) -> None:
        """Escalation policy shared by the ``..._debug`` methods.

        DEBUG enabled, or no cause:  log at ``level`` with the cause attached.
        Otherwise, ``level`` enabled: log a one-line summary, no cause.
        Otherwise:                   do nothing.
        """
        if cause is None or self._logger.isEnabledFor(logging.DEBUG):
            self._emit(level, message, cause)
        elif self._logger.isEnabledFor(level):
            self._emit(
                level, f"{message}{DEBUG_HINT}{summarize_cause(cause)}", None
            )

    def _log_debugf(
        self,
        level: int,
        cause: Optional[BaseException],
        message: str,
        args: tuple,
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return

        try:
            rendered = format_message(message, args)
        except Exception as exc:
            self._log_debug(
                _diagnostic_level(level),
                cause,
                _bogus_format(level, message, args, exc),
            )
            return

        self._log_debug(level, cause, rendered)


# Frames whose code lives in this file belong to the facade, not the caller.
_srcfile = os.path.normcase(Logger._emit.__code__.co_filename)


def _caller_stacklevel() -> int:
    """Return the ``stacklevel`` that makes ``logging`` report the caller.

    Counts the consecutive facade frames starting at ``Logger._emit``; the
    first frame outside this file is the one that called the facade.
    """
    frame = inspect.currentframe()
    frame = frame.f_back if frame is not None else None
    stacklevel = 1
    try:
        while (
            frame is not None
            and os.path.normcase(frame.f_code.co_filename) == _srcfile
        ):
            frame = frame.f_back
            stacklevel += 1
    finally:
        del frame
    return stacklevel


# The facade's own logger, used for the get_logger() advisory.
LOG = Logger(logging.getLogger(__name__))


def get_logger(name: Optional[str] = None) -> Logger:
    """Return a Logger for ``name``, or for the calling module or class.

    With ``name`` the stdlib logger of that name is wrapped and nothing else
    happens. Without it the caller's frame is inspected:

        * module scope resolves to the module's ``__name__``;
        * a class body resolves to ``"<module>.<ClassQualname>"``;
        * anything else resolves to the module's ``__name__`` and logs a
          WARNING advisory, since inspecting frames on every call is
          wasteful. The logger is returned regardless.

    Typical usage is a module or class attribute::

        LOG = get_logger()

    Args:
        name: Explicit logger name. Skips frame inspection when given.

    Returns:
        A new Logger wrapping ``logging.getLogger(<resolved name>)``.
    """
    if name is not None:
        return Logger(logging.getLogger(name))

    site = callsite.resolve(1)
    if site is None:
        return Logger(logging.getLogger())

    if not site.static_scope:
        LOG.warnf(
            "Logger %s wasn't created at module or class scope -- "
            "did you mean to make it a module-level constant? (%s:%s)",
            site.name,
            os.path.basename(site.filename),
            site.lineno,
        )

    return Logger(logging.getLogger(site.name))
