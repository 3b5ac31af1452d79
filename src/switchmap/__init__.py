"""Switchmap — a switch statement whose cases are assembled at runtime.

Extract a key from each item, match it against exact values or
predicates, and call the handler. Handlers may be sync or async.

Basic usage::

    import re

    from switchmap import SwitchMap

    requests = (
        SwitchMap("type")
        .add_value("email", send_email)
        .add_value(["tweet", "holla"], queue_for_support)
        .add_match(re.compile(r"^phone"), call_requester)
        .set_default(unsupported)
    )

    await requests.push({"type": "email", "name": "Bilbo"})

Selectors may also be JSON Pointers (``"/meta/version"``, ``"#/meta/version"``)
or any callable taking the item.
"""

__version__ = "0.1.0-dev"
__all__ = [
    "Case",
    "CompiledMatcher",
    "InvalidArgument",
    "InvalidOperation",
    "PatternCase",
    "SwitchMap",
    "SwitchMapConfig",
    "SwitchMapError",
    "ValueCase",
    "resolve_selector",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "Case": "switchmap.cases",
    "CompiledMatcher": "switchmap.matcher",
    "InvalidArgument": "switchmap.errors",
    "InvalidOperation": "switchmap.errors",
    "PatternCase": "switchmap.cases",
    "SwitchMap": "switchmap.switchmap",
    "SwitchMapConfig": "switchmap.config",
    "SwitchMapError": "switchmap.errors",
    "ValueCase": "switchmap.cases",
    "resolve_selector": "switchmap.selectors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import switchmap`` cheap while providing a flat top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
