"""Switchmap exception hierarchy.

Configuration mistakes are reported synchronously at the offending call.
Handler failures are never translated into these types; they propagate
from ``SwitchMap.push()`` unchanged.
"""


class SwitchMapError(Exception):
    """Base for all switchmap-specific errors."""


class InvalidArgument(SwitchMapError, ValueError):  # noqa: N818 — mirrors the argument-check vocabulary
    """A selector spec, case, or handler is missing or malformed.

    Raised while building a ``SwitchMap``, never during dispatch.
    """


class InvalidOperation(SwitchMapError, RuntimeError):  # noqa: N818 — mirrors the argument-check vocabulary
    """The call is not allowed in the current lifecycle state.

    Examples: adding a case after ``compile()``, setting a second default,
    compiling twice, or pushing before compiling with auto-compile off.
    """
