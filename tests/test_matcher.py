"""Tests for switchmap.matcher — compiled lookup order."""

import re

import pytest

from switchmap.cases import PatternCase, ValueCase, normalize_case
from switchmap.matcher import CompiledMatcher


def _h(name: str):
    def handler(item: object) -> str:
        return name

    handler.__name__ = name
    return handler


H1, H2, H3, H4 = _h("h1"), _h("h2"), _h("h3"), _h("h4")


def _build(*cases, default=None) -> CompiledMatcher:
    normalized = [normalize_case(c) for c in cases]
    values = [c for c in normalized if isinstance(c, ValueCase)]
    matches = [c for c in normalized if isinstance(c, PatternCase)]
    return CompiledMatcher.build(values, matches, default)


class TestLookup:
    def test_scalar_value(self) -> None:
        m = _build(ValueCase("bar", H1))
        assert m.lookup("bar") is H1

    def test_multi_value(self) -> None:
        m = _build(ValueCase(["baz", "garply"], H1))
        assert m.lookup("baz") is H1
        assert m.lookup("garply") is H1

    def test_no_match(self) -> None:
        m = _build(ValueCase("bar", H1))
        assert m.lookup("nope") is None

    def test_first_value_wins(self) -> None:
        m = _build(ValueCase("bar", H1), ValueCase(["x", "bar"], H2))
        assert m.lookup("bar") is H1
        assert m.lookup("x") is H2

    def test_values_before_patterns(self) -> None:
        m = _build(PatternCase(re.compile("^b"), H1), ValueCase("bar", H2))
        assert m.lookup("bar") is H2
        assert m.lookup("baz") is H1

    def test_first_pattern_wins(self) -> None:
        m = _build(PatternCase(lambda k: k.startswith("q"), H1), PatternCase(re.compile("^qu"), H2))
        assert m.lookup("quux") is H1

    def test_default(self) -> None:
        m = _build(ValueCase("bar", H1), default=H4)
        assert m.lookup("nope") is H4

    def test_default_only(self) -> None:
        m = _build(default=H4)
        assert m.lookup(None) is H4
        assert m.lookup("anything") is H4

    def test_unhashable_key_skips_values(self) -> None:
        m = _build(ValueCase("bar", H1), PatternCase(lambda k: isinstance(k, list), H2))
        assert m.lookup(["bar"]) is H2

    def test_none_key_matches_none_value(self) -> None:
        m = _build({"value": None, "handler": H1})
        assert m.lookup(None) is H1

    def test_no_string_coercion(self) -> None:
        m = _build(ValueCase("1", H1))
        assert m.lookup(1) is None

    def test_bool_never_matches_int(self) -> None:
        m = _build(ValueCase(1, H1), default=H4)
        assert m.lookup(True) is H4
        assert m.lookup(1) is H1

    def test_int_never_matches_bool(self) -> None:
        m = _build(ValueCase(False, H1), default=H4)
        assert m.lookup(0) is H4
        assert m.lookup(False) is H1

    def test_bool_and_int_cases_coexist(self) -> None:
        m = _build(ValueCase([True, 1], H1), ValueCase(1, H2))
        assert m.lookup(True) is H1
        assert m.lookup(1) is H1
        assert len(m.table) == 2

    def test_int_matches_equal_float(self) -> None:
        m = _build(ValueCase(1, H1))
        assert m.lookup(1.0) is H1

    def test_predicate_errors_propagate(self) -> None:
        def boom(key: object) -> bool:
            raise KeyError("boom")

        m = _build(PatternCase(boom, H1))
        with pytest.raises(KeyError):
            m.lookup("x")


class TestImmutability:
    def test_table_read_only(self) -> None:
        m = _build(ValueCase("bar", H1))
        with pytest.raises(TypeError):
            m.table["baz"] = H2  # type: ignore[index]

    def test_frozen(self) -> None:
        m = _build()
        with pytest.raises(AttributeError):
            m.default = H1  # type: ignore[misc]

    def test_len(self) -> None:
        m = _build(ValueCase(["a", "b"], H1), PatternCase(re.compile("c"), H2))
        assert len(m) == 3
