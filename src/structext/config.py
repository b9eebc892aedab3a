"""Configuration utilities for STRUCTEXT.

This module centralizes defaults shared by the extension helpers and the
settings objects the JSON adapter forwards to pydantic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from pydantic import ConfigDict

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "structext"

DEFAULT_MASK_CHAR = "X"  # pragma: no mutate
DEFAULT_EXPOSED_COUNT = 0
DEFAULT_INDENT = 2


class Formatting(Enum):
    """Enumeration of JSON output layouts.

    Modes:
    - NONE: compact output on a single line.
    - INDENTED: pretty-printed output, one member per line.
    """

    NONE = "none"
    INDENTED = "indented"


@dataclass(frozen=True)
class JsonSettings:
    """Settings passed through to pydantic when encoding or decoding JSON.

    Attributes:
        config: Optional `pydantic.ConfigDict` used to build the type adapter
            (e.g. `ser_json_timedelta`, `str_strip_whitespace`).
        indent: Indentation width used when `Formatting.INDENTED` is requested.
        by_alias: Serialize and validate fields using their aliases.
        exclude_none: Drop fields whose value is `None` when serializing.
        strict: Validate in strict mode (no type coercion) when decoding.
        fallback: Converter called for values pydantic cannot serialize on its
            own; its return value is serialized in their place.
        validate_options: Further keyword arguments for `validate_json`.
        dump_options: Further keyword arguments for `dump_json`.
    """

    config: ConfigDict | None = None
    indent: int = DEFAULT_INDENT
    by_alias: bool | None = None
    exclude_none: bool = False
    strict: bool | None = None
    fallback: Callable[[Any], Any] | None = None
    validate_options: dict[str, Any] = field(default_factory=dict)
    dump_options: dict[str, Any] = field(default_factory=dict)
