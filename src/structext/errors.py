"""Error definitions for the extension helpers."""

# ============================================================================
#                               Base error
# ============================================================================


class ExtensionError(Exception):
    """Base class for errors raised by the extension helpers."""


# ============================================================================
#                           Byte sequence errors
# ============================================================================


class ByteRangeError(ExtensionError, IndexError):
    """Raised when a requested byte range falls outside the source sequence."""

    def __init__(self, length: int, start_index: int, available: int) -> None:
        super().__init__(
            f"Cannot read {length} byte(s) starting at index {start_index} "
            f"from a sequence of {available} byte(s)."
        )
        self.length = length
        self.start_index = start_index
        self.available = available


# ============================================================================
#                               Text errors
# ============================================================================


class TemplateFormatError(ExtensionError, ValueError):
    """Raised when a positional template cannot be filled."""

    def __init__(
        self,
        template: str,
        reason: str,
        index: int | None = None,
        supplied: int | None = None,
    ) -> None:
        super().__init__(f"Cannot format template {template!r}: {reason}")
        self.template = template
        self.reason = reason
        self.index = index
        self.supplied = supplied


class MissingParameterError(TemplateFormatError):
    """Raised when a placeholder index has no corresponding parameter."""

    def __init__(self, template: str, index: int, supplied: int) -> None:
        super().__init__(
            template,
            f"placeholder {{{index}}} has no parameter ({supplied} supplied).",
            index=index,
            supplied=supplied,
        )


# ============================================================================
#                               JSON errors
# ============================================================================


class ConfigConflictError(ExtensionError, TypeError):
    """Raised when a `pydantic.ConfigDict` is supplied for a type that already
    carries its own config (a pydantic model, dataclass or TypedDict)."""

    def __init__(self, value_type: type) -> None:
        super().__init__(
            f"{value_type.__name__} defines its own pydantic config; set it on "
            "the type instead of passing JsonSettings.config."
        )
        self.value_type = value_type
