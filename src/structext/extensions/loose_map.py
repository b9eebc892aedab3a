"""Typed reads from loosely-typed key/value tables.

A loose map is any `Mapping[str, Any]` whose values carry no static type.
Reads succeed only when the stored value's runtime type is exactly the
requested type: no coercion is attempted and subclasses do not match, so a
stored `True` is not an `int` and a stored `5` is not a `str`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, TypeVar, overload

from structext.extensions.text import is_blank

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Types whose default is their zero value; every other type defaults to None.
ZERO_DEFAULT_TYPES: frozenset[type] = frozenset({int, float, complex, bool})


def type_default(value_type: type[T]) -> T | None:
    """Return the default for `value_type`: its zero value for numbers and
    bools, None for everything else."""
    return value_type() if value_type in ZERO_DEFAULT_TYPES else None


def try_parse(
    table: Mapping[str, Any] | None, key: str | None, value_type: type[T]
) -> tuple[bool, T | None]:
    """Read `key` from `table` if its value is exactly of `value_type`.

    Args:
        table: The loose map, or None.
        key: The key to look up.
        value_type: The type the stored value must have.

    Returns:
        ``(True, value)`` on an exact type match. Otherwise
        ``(False, type_default(value_type))``: when `table` is None, `key`
        is blank, `key` is missing, or the stored value has another type.
    """
    if table is None or key is None or is_blank(key) or key not in table:
        return False, type_default(value_type)
    if type(value := table[key]) is not value_type:
        logger.debug(
            "Loose map value for %r is %s, not %s",
            key,
            type(value).__name__,
            value_type.__name__,
        )
        return False, type_default(value_type)
    return True, value


@overload
def try_get(
    table: Mapping[str, Any] | None, key: str | None, value_type: type[T]
) -> T | None: ...


@overload
def try_get(
    table: Mapping[str, Any] | None, key: str | None, value_type: type[T], default: T
) -> T: ...


def try_get(
    table: Mapping[str, Any] | None,
    key: str | None,
    value_type: type[T],
    default: T | None = None,
) -> T | None:
    """Return the value for `key` if it is exactly of `value_type`, else `default`."""
    found, value = try_parse(table, key, value_type)
    return value if found else default


class LooseMap(Mapping[str, Any]):
    """Read-only view over a loose map with typed accessors.

    Wraps a snapshot of `table` (None becomes an empty map) so later changes
    to the source mapping are not observed.
    """

    def __init__(self, table: Mapping[str, Any] | None = None) -> None:
        self._table: dict[str, Any] = dict(table) if table is not None else {}

    def __getitem__(self, key: str) -> Any:
        return self._table[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._table!r})"

    def try_parse(self, key: str | None, value_type: type[T]) -> tuple[bool, T | None]:
        """See `structext.extensions.loose_map.try_parse`."""
        return try_parse(self._table, key, value_type)

    def try_get(
        self, key: str | None, value_type: type[T], default: T | None = None
    ) -> T | None:
        """See `structext.extensions.loose_map.try_get`."""
        return try_get(self._table, key, value_type, default)
