"""ValueCase and PatternCase frozen dataclasses.

Cases are accepted in three shapes and normalized on registration::

    ValueCase("email", send_email)
    PatternCase(re.compile(r"^qu.+"), queue_it)
    {"value": ["tweet", "holla"], "handler": queue_it}

A mapping carrying a ``"value"`` key is a value case (``None`` included,
so missing keys can be routed). Otherwise it must carry ``"match"``.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from switchmap._internal.types import Handler, Predicate
from switchmap.errors import InvalidArgument

# Containers whose elements are matched individually. Strings are scalars.
MULTI_VALUE_TYPES = (list, tuple, set, frozenset)


@dataclass(frozen=True, slots=True)
class ValueCase:
    """Exact-match case: one accepted key, or a collection of them."""

    value: Any
    handler: Handler

    @property
    def keys(self) -> tuple[Any, ...]:
        """Accepted keys in declaration order."""
        if isinstance(self.value, MULTI_VALUE_TYPES):
            return tuple(self.value)
        return (self.value,)


@dataclass(frozen=True, slots=True)
class PatternCase:
    """Predicate case.

    After normalization ``match`` is always a callable; ``pattern`` keeps
    the regular expression it was built from, if any.
    """

    match: Predicate | re.Pattern[Any]
    handler: Handler
    pattern: re.Pattern[Any] | None = None


Case = ValueCase | PatternCase


def pattern_predicate(pattern: re.Pattern[Any]) -> Predicate:
    """Wrap a compiled regex as a predicate.

    Only keys of the pattern's own type match: str patterns test str keys,
    bytes patterns test bytes keys. Anything else is a miss, never an error.
    """
    key_type = type(pattern.pattern)

    def test(key: Any) -> bool:
        return isinstance(key, key_type) and pattern.search(key) is not None

    test.__qualname__ = f"pattern[{pattern.pattern!r}]"
    return test


def normalize_case(case: Any) -> Case:
    """Validate one case and return its canonical form.

    Raises ``InvalidArgument`` for anything that cannot be routed.
    """
    if isinstance(case, ValueCase):
        return _value_case(case.value, case.handler)
    if isinstance(case, PatternCase):
        return _pattern_case(case.match, case.handler)
    if not isinstance(case, Mapping):
        msg = "cases (Case) is required"
        raise InvalidArgument(msg)
    if "value" in case:
        return _value_case(case["value"], case.get("handler"))
    if "match" in case:
        return _pattern_case(case["match"], case.get("handler"))
    msg = f"case must define 'value' or 'match', got keys {sorted(map(str, case))}"
    raise InvalidArgument(msg)


def _check_handler(handler: Any) -> None:
    if not callable(handler):
        msg = "handler (Handler) is required"
        raise InvalidArgument(msg)


def _value_case(value: Any, handler: Any) -> ValueCase:
    _check_handler(handler)
    normalized = ValueCase(value=value, handler=handler)
    for key in normalized.keys:
        try:
            hash(key)
        except TypeError as exc:
            msg = f"case value {key!r} is not hashable"
            raise InvalidArgument(msg) from exc
    return normalized


def _pattern_case(match: Any, handler: Any) -> PatternCase:
    _check_handler(handler)
    if isinstance(match, re.Pattern):
        return PatternCase(match=pattern_predicate(match), handler=handler, pattern=match)
    if callable(match):
        return PatternCase(match=match, handler=handler)
    msg = "match (Predicate | re.Pattern) is required"
    raise InvalidArgument(msg)
