"""Selector resolution — turn a routing spec into a key-extraction function.

A spec is either a plain field name or a JSON Pointer::

    "type"             -> item["type"]            (or item.type for objects)
    "/contact/type"    -> item["contact"]["type"]
    "#/contact/type"   -> same, written as a URI fragment

Selectors never raise for missing data: any absent field, segment, or
item yields ``None``.

Only plain field names fall back to attribute access. Pointers walk
mappings, sequences and objects with ``__getitem__``; a pointer applied
to a plain object (a dataclass, say) selects ``None``.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import unquote

from jsonpointer import EndOfList, JsonPointer, JsonPointerException

from switchmap._internal.types import Selector
from switchmap.errors import InvalidArgument

POINTER_PREFIXES = ("#", "/")


def is_pointer(spec: str) -> bool:
    """Return True if *spec* is written as a JSON Pointer or fragment id."""
    return spec[:1] in POINTER_PREFIXES


def resolve_selector(spec: str) -> Selector:
    """Build a selector from a string spec.

    Pointer-form specs (first character ``#`` or ``/``) walk nested
    mappings and sequences. Anything else, including the empty string,
    names a top-level field.

    Raises ``InvalidArgument`` if *spec* is not a string or is a
    malformed pointer.
    """
    if not isinstance(spec, str):
        msg = "spec (str) is required"
        raise InvalidArgument(msg)
    if is_pointer(spec):
        return _pointer_selector(spec)
    return _field_selector(spec)


def _field_selector(name: str) -> Selector:
    def select(target: Any) -> Any:
        if target is None:
            return None
        if isinstance(target, Mapping):
            return target.get(name)
        return getattr(target, name, None)

    select.__qualname__ = f"field[{name!r}]"
    return select


def _pointer_selector(spec: str) -> Selector:
    path = unquote(spec[1:]) if spec.startswith("#") else spec
    try:
        pointer = JsonPointer(path)
    except JsonPointerException as exc:
        msg = f"spec {spec!r} is not a valid JSON Pointer: {exc}"
        raise InvalidArgument(msg) from exc

    def select(target: Any) -> Any:
        value = pointer.resolve(target, None)
        # "-" addresses the slot past the end of a list; nothing lives there
        if isinstance(value, EndOfList):
            return None
        return value

    select.__qualname__ = f"pointer[{spec!r}]"
    return select
