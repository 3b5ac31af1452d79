"""Dispatcher configuration.

SwitchMapConfig is a frozen dataclass — immutable after creation, shared
safely between dispatchers.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SwitchMapConfig:
    """Dispatcher configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SwitchMapConfig(auto_compile=False, name="contacts")
    """

    # Compile on the first push() instead of requiring an explicit compile()
    auto_compile: bool = True

    # Label used in log records and repr()
    name: str | None = None
