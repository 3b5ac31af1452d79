"""Shared type aliases used across switchmap modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Selector — extracts the routing key from an incoming item
Selector: TypeAlias = Callable[[Any], Any]

# Predicate — decides whether a pattern case accepts a key
Predicate: TypeAlias = Callable[[Any], bool]

# Case handler — receives (item, *args, **kwargs), sync or async
Handler: TypeAlias = Callable[..., Any]
