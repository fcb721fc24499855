"""callsite.py - Call-site resolution for ``get_logger()``.

``get_logger()`` without a name infers it from the code that called it. The
resolved frame also tells us *where* the logger is being built, which drives
the one-time advisory about loggers created inside functions:

    Module scope:  ``LOG = get_logger()`` at the top of a module resolves to the
                   module's ``__name__``.
    Class body:    ``LOG = get_logger()`` inside ``class Foo:`` resolves to
                   ``"<module>.Foo"`` (nested classes use their qualname).
    Anywhere else: functions, methods and lambdas resolve to the module's
                   ``__name__`` and are flagged as non-static.

Frame inspection is not free, which is why loggers are meant to be created
once at import time rather than on every call.
"""

import inspect
from types import FrameType
from typing import Optional

# co_name of the code object executing a module body.
MODULE_SCOPE = "<module>"


class CallSite:
    """Where a logger was requested from.

    Attributes:
        name (str): The logger name the call site resolves to.
        filename (str): Source file of the calling frame.
        lineno (int): Line number of the call.
        function (str): ``co_name`` of the calling code object.
        static_scope (bool): True for module scope or a class body.
    """

    __slots__ = ("name", "filename", "lineno", "function", "static_scope")

    def __init__(
        self,
        name: str,
        filename: str,
        lineno: int,
        function: str,
        static_scope: bool,
    ) -> None:
        self.name = name
        self.filename = filename
        self.lineno = lineno
        self.function = function
        self.static_scope = static_scope

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"CallSite({self.name!r}, {self.filename}:{self.lineno}, "
            f"function={self.function!r}, static_scope={self.static_scope})"
        )


def _is_class_body(frame: FrameType) -> bool:
    # Class bodies run with a fresh namespace that the interpreter seeds with
    # __module__ and __qualname__ before the first statement.
    if frame.f_code.co_name == MODULE_SCOPE:
        return False
    f_locals = frame.f_locals
    return "__module__" in f_locals and "__qualname__" in f_locals


def from_frame(frame: FrameType) -> CallSite:
    """Build a CallSite describing ``frame``.

    Args:
        frame: The frame that requested a logger.

    Returns:
        The resolved CallSite.
    """
    code = frame.f_code
    module = frame.f_globals.get("__name__", "")

    if code.co_name == MODULE_SCOPE:
        name = module
        static_scope = True
    elif _is_class_body(frame):
        f_locals = frame.f_locals
        name = f"{f_locals['__module__']}.{f_locals['__qualname__']}"
        static_scope = True
    else:
        name = module
        static_scope = False

    return CallSite(
        name=name,
        filename=code.co_filename,
        lineno=frame.f_lineno,
        function=code.co_name,
        static_scope=static_scope,
    )


def resolve(depth: int = 1) -> Optional[CallSite]:
    """Resolve the call site ``depth`` frames above the caller of ``resolve``.

    ``resolve(1)`` called from ``get_logger`` describes whoever called
    ``get_logger``.

    Returns:
        The CallSite, or None when the interpreter does not expose frames
        (or the stack is not that deep).
    """
    frame = inspect.currentframe()
    try:
        # Skip resolve() itself, then the requested number of frames.
        for _ in range(depth + 1):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None
        return from_frame(frame)
    finally:
        # Break the frame reference cycle explicitly.
        del frame
