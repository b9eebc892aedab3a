"""JSON encode/decode delegated to pydantic.

These helpers do not parse or emit JSON themselves. They build a
`pydantic.TypeAdapter`, forward the caller's `JsonSettings` and keyword
options to it unmodified, and let pydantic's errors propagate:

- `pydantic.ValidationError` for malformed JSON or a schema mismatch.
- `pydantic_core.PydanticSerializationError` for values pydantic cannot
  serialize (supply `JsonSettings.fallback` to convert them).
"""

from __future__ import annotations

from dataclasses import is_dataclass
from typing import Any

from pydantic import BaseModel, PydanticSchemaGenerationError, TypeAdapter
from typing_extensions import is_typeddict

from structext.config import Formatting, JsonSettings
from structext.errors import ConfigConflictError

DEFAULT_SETTINGS = JsonSettings()


def _has_own_config(value_type: Any) -> bool:
    return isinstance(value_type, type) and (
        issubclass(value_type, BaseModel)
        or is_dataclass(value_type)
        or is_typeddict(value_type)
    )


def _adapter(value_type: Any, settings: JsonSettings) -> TypeAdapter[Any]:
    if settings.config is not None and _has_own_config(value_type):
        raise ConfigConflictError(value_type)
    return TypeAdapter(value_type, config=settings.config)


def _encoder(value: Any, settings: JsonSettings) -> TypeAdapter[Any]:
    try:
        return _adapter(type(value), settings)
    except PydanticSchemaGenerationError:
        # no schema for this type; serialize by inference so `fallback` applies
        return _adapter(Any, settings)


def _validate_options(settings: JsonSettings) -> dict[str, Any]:
    options: dict[str, Any] = {}
    if settings.strict is not None:
        options["strict"] = settings.strict
    if settings.by_alias is not None:
        options["by_alias"] = settings.by_alias
    return options | settings.validate_options


def _dump_options(settings: JsonSettings, formatting: Formatting) -> dict[str, Any]:
    options: dict[str, Any] = {
        "indent": settings.indent if formatting is Formatting.INDENTED else None,
        "exclude_none": settings.exclude_none,
    }
    if settings.by_alias is not None:
        options["by_alias"] = settings.by_alias
    if settings.fallback is not None:
        options["fallback"] = settings.fallback
    return options | settings.dump_options


def from_json(
    text: str | bytes,
    value_type: Any = Any,
    settings: JsonSettings | None = None,
    **options: Any,
) -> Any:
    """Decode `text` into an instance of `value_type`.

    Args:
        text: JSON document.
        value_type: Target type: any type pydantic can validate (dataclasses,
            models, ``list[int]``, ``dict[str, Any]``...). Defaults to `Any`,
            which yields plain dicts, lists and scalars.
        settings: Settings forwarded to pydantic. `config` goes to the
            `TypeAdapter`; `strict`, `by_alias` and `validate_options` go
            to `validate_json`.
        **options: Extra keyword arguments for `TypeAdapter.validate_json`;
            they take precedence over `settings`.

    Returns:
        The decoded value.

    Raises:
        pydantic.ValidationError: On malformed JSON or a type mismatch.
        ConfigConflictError: If `settings.config` is set and `value_type` is a
            model, dataclass or TypedDict, which carry their own config.
    """
    settings = settings or DEFAULT_SETTINGS
    adapter = _adapter(value_type, settings)
    return adapter.validate_json(text, **(_validate_options(settings) | options))


def to_json(
    value: Any,
    formatting: Formatting = Formatting.NONE,
    settings: JsonSettings | None = None,
    *,
    value_type: Any = None,
    **options: Any,
) -> str:
    """Encode `value` as JSON text.

    Without a `value_type` the adapter is built for ``type(value)``, so
    dataclasses, pydantic models, dicts, lists and scalars all work without
    a type hint. Types pydantic has no schema for are serialized by
    inference, which is where `settings.fallback` converts them. Pass
    `value_type` (e.g. ``list[Account]``) for containers whose items need
    field-level settings such as `exclude_none`.

    Args:
        value: The value to encode.
        formatting: `Formatting.NONE` for compact output, `Formatting.INDENTED`
            to indent by `settings.indent`.
        settings: Settings forwarded to pydantic. `config` goes to the
            `TypeAdapter`; the rest to `dump_json`.
        value_type: Type to serialize `value` as. Defaults to its runtime type.
        **options: Extra keyword arguments for `TypeAdapter.dump_json`; they
            take precedence over `settings` and `formatting`.

    Returns:
        The JSON document as text.

    Raises:
        pydantic_core.PydanticSerializationError: If `value` contains data
            pydantic cannot serialize and no fallback handles it.
        ConfigConflictError: If `settings.config` is set and the type being
            serialized is a model, dataclass or TypedDict.
    """
    settings = settings or DEFAULT_SETTINGS
    adapter = (
        _encoder(value, settings)
        if value_type is None
        else _adapter(value_type, settings)
    )
    dump_options = _dump_options(settings, formatting) | options
    return adapter.dump_json(value, **dump_options).decode("utf-8")
