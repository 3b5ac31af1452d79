"""Tests for switchmap.config — SwitchMapConfig defaults and immutability."""

import dataclasses

import pytest

from switchmap.config import SwitchMapConfig


class TestSwitchMapConfig:
    def test_defaults(self) -> None:
        config = SwitchMapConfig()
        assert config.auto_compile is True
        assert config.name is None

    def test_override(self) -> None:
        config = SwitchMapConfig(auto_compile=False, name="contacts")
        assert config.auto_compile is False
        assert config.name == "contacts"

    def test_frozen(self) -> None:
        config = SwitchMapConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.auto_compile = False  # type: ignore[misc]
