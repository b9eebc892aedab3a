"""Unit tests for structext.extensions.loose_map.

Reads must succeed only on an exact runtime type match; every failure
returns the type's default instead of raising.
"""

import logging

import pytest

from structext.extensions.loose_map import LooseMap, try_get, try_parse, type_default

# pylint: disable=magic-value-comparison

TABLE = {"count": 5, "name": "Ada", "ratio": 0.5, "enabled": True, "tags": ["a"]}


class Label(str):
    """A str subclass used to check that subclasses do not match."""


@pytest.mark.parametrize(
    "key, value_type, expected",
    [
        ("count", int, 5),
        ("name", str, "Ada"),
        ("ratio", float, 0.5),
        ("enabled", bool, True),
        ("tags", list, ["a"]),
    ],
)
def test_try_parse_exact_match(key, value_type, expected):
    """Values of exactly the requested type are returned."""
    assert try_parse(TABLE, key, value_type) == (True, expected)


def test_try_parse_type_mismatch_even_when_key_exists():
    """An existing key with another type is a failed read."""
    assert try_parse(TABLE, "count", str) == (False, None)


@pytest.mark.parametrize(
    "key, value_type, expected",
    [
        ("enabled", int, (False, 0)),
        ("count", bool, (False, False)),
        ("count", float, (False, 0.0)),
    ],
)
def test_try_parse_does_not_coerce(key, value_type, expected):
    """No coercion between bool, int and float."""
    assert try_parse(TABLE, key, value_type) == expected


def test_try_parse_subclass_does_not_match():
    """A str subclass is not a str for the purpose of the lookup."""
    assert try_parse({"label": Label("x")}, "label", str) == (False, None)


@pytest.mark.parametrize(
    "table, key",
    [(None, "count"), (TABLE, None), (TABLE, ""), (TABLE, "   "), (TABLE, "missing")],
)
def test_try_parse_failures_return_type_default(table, key):
    """Absent tables, blank keys and missing keys all fail without raising."""
    assert try_parse(table, key, int) == (False, 0)
    assert try_parse(table, key, str) == (False, None)


def test_try_parse_logs_type_mismatch(caplog):
    """Rejected reads are logged at DEBUG."""
    with caplog.at_level(logging.DEBUG, logger="structext.extensions.loose_map"):
        try_parse(TABLE, "count", str)
    assert "Loose map value for 'count' is int, not str" in caplog.text


@pytest.mark.parametrize(
    "value_type, expected",
    [(int, 0), (float, 0.0), (bool, False), (complex, 0j), (str, None), (list, None)],
)
def test_type_default(value_type, expected):
    """Numbers and bools default to zero; everything else to None."""
    assert type_default(value_type) == expected


def test_try_get_returns_value_or_default():
    """try_get falls back to the caller's default on any failure."""
    assert try_get(TABLE, "count", int, -1) == 5
    assert try_get(TABLE, "count", str, "n/a") == "n/a"
    assert try_get(None, "count", int, -1) == -1
    assert try_get(TABLE, "missing", str) is None


class TestLooseMap:
    """Tests for the LooseMap wrapper."""

    @staticmethod
    def test_is_a_read_only_mapping() -> None:
        """The wrapper behaves like a mapping over a snapshot of the source."""
        source = dict(TABLE)
        loose = LooseMap(source)
        source["extra"] = 1
        assert len(loose) == len(TABLE)
        assert set(loose) == set(TABLE)
        assert loose["name"] == "Ada"
        assert "extra" not in loose

    @staticmethod
    def test_none_is_empty() -> None:
        """Wrapping None gives an empty map on which every read fails."""
        loose = LooseMap(None)
        assert len(loose) == 0
        assert loose.try_parse("count", int) == (False, 0)

    @staticmethod
    def test_typed_accessors() -> None:
        """Methods delegate to the module-level helpers."""
        loose = LooseMap(TABLE)
        assert loose.try_parse("name", str) == (True, "Ada")
        assert loose.try_get("name", int, 0) == 0
        assert loose.try_get("ratio", float) == 0.5

    @staticmethod
    def test_repr() -> None:
        """The repr shows the wrapped table."""
        assert repr(LooseMap({"a": 1})) == "LooseMap({'a': 1})"
