"""render.py - Best-effort text rendering for log messages and diagnostics.

Everything in this module is used on the logging path itself, so none of it is
allowed to raise. Values whose ``__str__`` blows up, exceptions with broken
messages and malformed format strings all degrade to a readable placeholder
instead of propagating into the caller's code.

Public helpers:
    safe_to_string:   Comma-joined rendering of a sequence of arbitrary values.
    render_error:     ``"TypeName: message"`` rendering of an exception.
    summarize_cause:  One-line summary of a cause, first message line only.
    format_message:   printf-style ``message % args`` with logging's own
                      single-mapping convention.
"""

import collections.abc
from typing import Any, Iterable, Optional

# Marker prefixed to an argument whose own __str__ raised.
STR_FAILED_PREFIX = "toString():"

# Last-resort placeholder when even the failure cannot be rendered.
UNRENDERABLE = "???"


def type_name(obj: Any) -> str:
    """Return the qualified type name of ``obj`` the way tracebacks print it.

    Builtin and ``__main__`` types are shown bare (``ValueError``); everything
    else is prefixed with its module (``mypkg.errors.QuotaExceeded``).
    """
    cls = type(obj)
    module = getattr(cls, "__module__", None)
    qualname = getattr(cls, "__qualname__", cls.__name__)
    if module in (None, "builtins", "__main__"):
        return qualname
    return f"{module}.{qualname}"


def render_error(exc: BaseException) -> str:
    """Render ``exc`` as ``"TypeName: message"``.

    The message part is dropped when ``str(exc)`` is empty. If ``str(exc)``
    itself raises, only the type name is returned.

    Example:
        >>> render_error(KeyError("missing"))
        "KeyError: 'missing'"
        >>> render_error(RuntimeError())
        'RuntimeError'
    """
    name = type_name(exc)
    try:
        text = str(exc)
    except Exception:
        return name
    if not text:
        return name
    return f"{name}: {text}"


def safe_to_string(args: Optional[Iterable[Any]]) -> str:
    """Render a sequence of arbitrary values for a diagnostic message.

    Each value is converted independently with ``str()``, except ``None``
    which renders as ``"null"``:

        * a value whose conversion raises becomes ``"toString():<error>"``;
        * if ``str()`` of that error raises as well, ``"???"`` is used.

    Args:
        args: The values to render, or ``None``.

    Returns:
        ``"null"`` for ``None``, ``""`` for an empty sequence, otherwise the
        rendered values joined with ``", "``.

    Example:
        >>> safe_to_string([1, "two", None])
        '1, two, null'
        >>> safe_to_string(None)
        'null'
    """
    if args is None:
        return "null"

    parts = []
    for arg in args:
        if arg is None:
            parts.append("null")
            continue
        try:
            parts.append(str(arg))
        except Exception as exc:
            try:
                parts.append(STR_FAILED_PREFIX + _strict_render_error(exc))
            except Exception:
                parts.append(UNRENDERABLE)
    return ", ".join(parts)


def _strict_render_error(exc: BaseException) -> str:
    # Like render_error(), but lets a failing str(exc) propagate.
    text = str(exc)
    name = type_name(exc)
    if not text:
        return name
    return f"{name}: {text}"


def summarize_cause(cause: BaseException) -> str:
    """Return a one-line summary of ``cause``: type name plus first message line.

    Example:
        >>> summarize_cause(ValueError("boom\\nextra detail"))
        'ValueError: boom'
        >>> summarize_cause(TimeoutError())
        'TimeoutError'
    """
    name = type_name(cause)
    try:
        text = str(cause)
    except Exception:
        return name
    if not text:
        return name
    first_line = text.split("\n", 1)[0]
    return f"{name}: {first_line}"


def format_message(message: str, args: tuple) -> str:
    """Apply printf-style substitution the way ``logging.LogRecord`` does.

    A single non-empty mapping argument is used as the mapping, so
    ``"%(user)s" % {"user": "bob"}`` style calls work just like they do with
    ``logger.info("%(user)s", {"user": "bob"})``.

    Raises:
        Whatever ``%`` raises (``TypeError``, ``ValueError``, ``KeyError`` or
        an error from an argument's ``__str__``). Callers are expected to
        catch it.
    """
    if (
        len(args) == 1
        and isinstance(args[0], collections.abc.Mapping)
        and args[0]
    ):
        return str(message) % args[0]
    return str(message) % args
