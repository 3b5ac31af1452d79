"""Compiled matcher — the frozen lookup a SwitchMap dispatches through.

Cases are registered during setup and compiled into an immutable
structure: a dict for exact values, checked before an ordered scan of
predicates, then the default.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from switchmap._internal.types import Handler, Predicate
from switchmap.cases import PatternCase, ValueCase


@dataclass(frozen=True, slots=True)
class CompiledMatcher:
    """Immutable case table.

    Usage::

        matcher = CompiledMatcher.build(values, matches, default)
        handler = matcher.lookup("email")
    """

    table: MappingProxyType[tuple[bool, Any], Handler]
    predicates: tuple[tuple[Predicate, Handler], ...]
    default: Handler | None = None

    @classmethod
    def build(
        cls,
        values: Sequence[ValueCase],
        matches: Sequence[PatternCase],
        default: Handler | None = None,
    ) -> "CompiledMatcher":
        """Compile cases in registration order."""
        table: dict[tuple[bool, Any], Handler] = {}
        for case in values:
            for key in case.keys:
                # First registered value wins, as with switch/case labels
                table.setdefault(_strict_key(key), case.handler)
        predicates = tuple((case.match, case.handler) for case in matches)
        return cls(table=MappingProxyType(table), predicates=predicates, default=default)

    def lookup(self, key: Any) -> Handler | None:
        """Return the handler for *key*, or None if nothing matches.

        Order: exact values, then predicates in registration order, then
        the default. Booleans never equal numbers here. Unhashable keys cannot equal a registered value and
        go straight to the predicates.
        """
        try:
            handler = self.table.get(_strict_key(key))
        except TypeError:
            handler = None
        if handler is not None:
            return handler

        for predicate, handler in self.predicates:
            if predicate(key):
                return handler

        return self.default

    def __len__(self) -> int:
        return len(self.table) + len(self.predicates)


def _strict_key(key: Any) -> tuple[bool, Any]:
    # True == 1 and False == 0 in Python; tag bools so they only match bools
    return (type(key) is bool, key)
