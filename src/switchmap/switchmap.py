"""SwitchMap — a switch statement whose cases are assembled at runtime.

Build once, compile, then push items through it::

    contacts = (
        SwitchMap("type")
        .add_value("email", send_email)
        .add_value(["tweet", "holla"], queue_for_support)
        .add_match(re.compile(r"^phone"), call_requester)
        .set_default(unsupported)
    )

    await contacts.push({"type": "email", "address": "bilbo@bagend.com"})

Value cases are checked before pattern cases regardless of the order they
were added in; within each kind the first registered case wins.
"""

import logging
import re
import threading
from collections.abc import Callable
from typing import Any

from switchmap._internal.invoke import invoke
from switchmap._internal.types import Handler, Predicate, Selector
from switchmap.cases import Case, PatternCase, ValueCase, normalize_case
from switchmap.config import SwitchMapConfig
from switchmap.errors import InvalidArgument, InvalidOperation
from switchmap.matcher import CompiledMatcher
from switchmap.selectors import resolve_selector

logger = logging.getLogger("switchmap")


class SwitchMap:
    """Runtime-configurable dispatcher.

    The selector is fixed at construction. Cases and the default are
    added until ``compile()`` (or the first ``push()`` when
    ``config.auto_compile`` is on); after that the configuration is frozen
    and dispatch only reads the compiled matcher, so overlapping pushes
    need no locking.
    """

    __slots__ = (
        "_compile_lock",
        "_config",
        "_default",
        "_matcher",
        "_matches",
        "_selector",
        "_values",
    )

    def __init__(
        self,
        selector: str | Selector,
        *,
        config: SwitchMapConfig | None = None,
    ) -> None:
        if isinstance(selector, str):
            selector = resolve_selector(selector)
        elif not callable(selector):
            msg = "selector (str | Selector) is required"
            raise InvalidArgument(msg)
        self._selector: Selector = selector
        self._config: SwitchMapConfig = config or SwitchMapConfig()
        self._values: list[ValueCase] = []
        self._matches: list[PatternCase] = []
        self._default: Handler | None = None
        self._matcher: CompiledMatcher | None = None
        self._compile_lock = threading.Lock()

    # -- Introspection --

    @property
    def selector(self) -> Selector:
        return self._selector

    @property
    def config(self) -> SwitchMapConfig:
        return self._config

    @property
    def values(self) -> tuple[ValueCase, ...]:
        """Registered value cases, in registration order."""
        return tuple(self._values)

    @property
    def matches(self) -> tuple[PatternCase, ...]:
        """Registered pattern cases, in registration order."""
        return tuple(self._matches)

    @property
    def default_handler(self) -> Handler | None:
        return self._default

    @property
    def has_default(self) -> bool:
        return self._default is not None

    @property
    def is_compiled(self) -> bool:
        return self._matcher is not None

    # -- Registration --

    def add_case(self, *cases: Case | dict[str, Any]) -> "SwitchMap":
        """Register cases in order. Nothing is added if any case is invalid."""
        self._check_not_compiled()
        normalized = [normalize_case(case) for case in cases]
        for case in normalized:
            if isinstance(case, ValueCase):
                self._values.append(case)
            else:
                self._matches.append(case)
        return self

    def add_value(self, value: Any, handler: Handler) -> "SwitchMap":
        """Route keys equal to *value* (or to any element of a list, tuple or set)."""
        return self.add_case(ValueCase(value=value, handler=handler))

    def add_match(self, match: Predicate | re.Pattern[Any], handler: Handler) -> "SwitchMap":
        """Route keys accepted by a predicate or matched by a compiled regex."""
        return self.add_case(PatternCase(match=match, handler=handler))

    def set_default(self, handler: Handler) -> "SwitchMap":
        """Set the fallback handler. May only be set once."""
        if self._default is not None:
            msg = "Invalid operation; cannot be reassigned."
            raise InvalidOperation(msg)
        self._check_not_compiled()
        if not callable(handler):
            msg = "handler (Handler) is required"
            raise InvalidArgument(msg)
        self._default = handler
        return self

    # -- Decorators --

    def when(self, value: Any) -> Callable[[Handler], Handler]:
        """Decorator form of ``add_value``::

            @contacts.when("email")
            async def send_email(contact): ...
        """

        def decorator(handler: Handler) -> Handler:
            self.add_value(value, handler)
            return handler

        return decorator

    def when_match(self, match: Predicate | re.Pattern[Any]) -> Callable[[Handler], Handler]:
        """Decorator form of ``add_match``."""

        def decorator(handler: Handler) -> Handler:
            self.add_match(match, handler)
            return handler

        return decorator

    def otherwise(self, handler: Handler) -> Handler:
        """Decorator form of ``set_default``."""
        self.set_default(handler)
        return handler

    # -- Compilation --

    def compile(self) -> "SwitchMap":
        """Freeze the configuration and build the matcher. Callable once."""
        with self._compile_lock:
            self._check_not_compiled()
            self._compile()
        return self

    def _ensure_compiled(self) -> CompiledMatcher:
        """Thread-safe implicit compile with double-check locking."""
        matcher = self._matcher
        if matcher is not None:
            return matcher
        if not self._config.auto_compile:
            msg = "Invalid operation; not prepared."
            raise InvalidOperation(msg)
        with self._compile_lock:
            if self._matcher is None:
                self._compile()
        assert self._matcher is not None
        return self._matcher

    def _compile(self) -> None:
        """MUST only be called while holding _compile_lock."""
        matcher = CompiledMatcher.build(self._values, self._matches, self._default)
        self._matcher = matcher
        logger.debug(
            "switchmap %s compiled: %d value keys, %d patterns, default=%s",
            self._label(),
            len(matcher.table),
            len(matcher.predicates),
            matcher.default is not None,
        )

    def _check_not_compiled(self) -> None:
        if self._matcher is not None:
            msg = "Invalid operation; already prepared."
            raise InvalidOperation(msg)

    # -- Dispatch --

    async def push(self, item: Any, *args: Any, **kwargs: Any) -> Any:
        """Route *item* to its handler and return the handler's result.

        The handler is called as ``handler(item, *args, **kwargs)`` and
        awaited if it returns an awaitable. Its exceptions propagate
        unchanged. An item that matches nothing, with no default set, is
        dropped and ``None`` is returned.
        """
        matcher = self._ensure_compiled()
        handler = matcher.lookup(self._selector(item))
        if handler is None:
            return None
        return await invoke(handler, item, *args, **kwargs)

    # -- Internal --

    def _label(self) -> str:
        return self._config.name or getattr(self._selector, "__qualname__", repr(self._selector))

    def __repr__(self) -> str:
        state = "compiled" if self.is_compiled else "building"
        return (
            f"<SwitchMap {self._label()} values={len(self._values)} "
            f"matches={len(self._matches)} default={self.has_default} {state}>"
        )
