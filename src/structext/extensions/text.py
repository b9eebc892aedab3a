"""Text helpers: normalization, safe parsing, templating and masking.

Every helper accepts `None` as an absent value. Blank input (absent, empty or
whitespace-only) never raises; it resolves to the default each helper
documents. Parse failures are recovered locally and logged at DEBUG.
"""

from __future__ import annotations

import logging
import posixpath
import re
import string
from collections.abc import Iterator
from enum import Enum
from typing import Any

from structext.config import DEFAULT_EXPOSED_COUNT, DEFAULT_MASK_CHAR
from structext.errors import MissingParameterError, TemplateFormatError

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
NON_DIGIT_PATTERN = re.compile(r"[^0-9]")
PLACEHOLDER_FIELD_PATTERN = re.compile(r"[0-9]+")
BOOLEAN_LITERALS = {"true": True, "false": False}

_FORMATTER = string.Formatter()


class MaskDirection(Enum):
    """Which end of a masked value stays readable.

    Directions:
    - LEFT: the leading characters are exposed, the rest is masked.
    - RIGHT: the trailing characters are exposed, the rest is masked.
    """

    LEFT = "left"
    RIGHT = "right"


# ============================================================================
#                               Normalization
# ============================================================================


def is_blank(value: str | None) -> bool:
    """Return True if `value` is None, empty, or only whitespace."""
    return value is None or not value.strip()


def to_string_or_empty(value: str | None) -> str:
    """Return `value` unless it is blank, in which case return ``""``."""
    if value is None or is_blank(value):
        return ""
    return value


def to_trim_or_empty(value: str | None) -> str:
    """Return `value` without surrounding whitespace, or ``""`` if blank."""
    return to_string_or_empty(value).strip()


def to_lower_trimmed(value: str | None) -> str:
    """Return the trimmed, lower-cased value (``""`` if blank)."""
    return to_trim_or_empty(value).lower()


def to_upper_trimmed(value: str | None) -> str:
    """Return the trimmed, upper-cased value (``""`` if blank)."""
    return to_trim_or_empty(value).upper()


def is_equal(left: str | None, right: str | None, lazy: bool = True) -> bool:
    """Compare two text values.

    Args:
        left: First value.
        right: Second value.
        lazy: When True (default), both values are trimmed and lower-cased
            before comparing, and absent values count as ``""``. When False,
            the comparison is exact, including case and whitespace.

    Returns:
        True if the values are equal under the chosen comparison.
    """
    if lazy:
        return to_lower_trimmed(left) == to_lower_trimmed(right)
    return left == right


def to_string_or_default(value: str | None, default: str) -> str:
    """Return `value` unless it is blank, in which case return `default`."""
    if value is None or is_blank(value):
        return default
    return value


# ============================================================================
#                               Safe parsing
# ============================================================================


def to_int_or_default(value: str | None, default: int) -> int:
    """Parse the trimmed value as a base-10 integer.

    Only ASCII digits with an optional leading sign are accepted; anything
    else, including absent or blank input, yields `default`.
    """
    text = to_trim_or_empty(value)
    if INTEGER_PATTERN.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # digit count above the interpreter's int conversion limit
            pass
    logger.debug("Could not parse %r as an integer; using %r", value, default)
    return default


def to_int_or_zero(value: str | None) -> int:
    """Parse the trimmed value as a base-10 integer, or return 0."""
    return to_int_or_default(value, 0)


def to_bool_or_default(value: str | None, default: bool) -> bool:
    """Parse ``"true"``/``"false"`` (case-insensitive, trimmed), else `default`."""
    if (parsed := BOOLEAN_LITERALS.get(to_lower_trimmed(value))) is None:
        logger.debug("Could not parse %r as a boolean; using %r", value, default)
        return default
    return parsed


def strip_to_int_or_zero(value: str | None) -> int:
    """Drop every non-digit character and parse what remains.

    Example:
        ``strip_to_int_or_zero("Account22") == 22``

    Returns:
        The parsed integer, or 0 when the input is absent or has no digits.
    """
    if value is None or not (digits := NON_DIGIT_PATTERN.sub("", value)):
        return 0
    try:
        return int(digits)
    except ValueError:
        logger.debug("Could not parse digits of %r as an integer; using 0", value)
        return 0


# ============================================================================
#                           Expansion and templating
# ============================================================================


def expand_environment(value: str | None) -> str:
    """Substitute environment variable references in `value`.

    References use the POSIX shell convention on every platform: ``$NAME``
    or ``${NAME}``. References to unset variables are left as written.
    Blank input yields ``""``.
    """
    return posixpath.expandvars(to_string_or_empty(value))


def _placeholder_fields(template: str) -> Iterator[str]:
    """Yield every field name in `template`, including those nested in specs."""
    for _, name, spec, _ in _FORMATTER.parse(template):
        if name is not None:
            yield name
        if spec:
            yield from _placeholder_fields(spec)


def add_parameters(template: str | None, *params: Any) -> str | None:
    """Fill positional placeholders (``{0}``, ``{1}``, ...) in `template`.

    Placeholders may carry a conversion (``{0!r}``) or a format spec
    (``{0:>8}``), and a spec may nest another placeholder (``{0:>{1}}``).
    Literal braces are written ``{{`` and ``}}``. Parameters without a
    matching placeholder are ignored.

    Args:
        template: The template text. Returned unchanged if blank.
        *params: Values substituted by position.

    Returns:
        The formatted text.

    Raises:
        MissingParameterError: If a placeholder index has no parameter.
        TemplateFormatError: If the template is malformed (unbalanced braces,
            non-numeric or empty placeholders, or an invalid format spec).
    """
    if template is None or is_blank(template):
        return template

    try:
        fields = list(_placeholder_fields(template))
    except ValueError as e:
        raise TemplateFormatError(template, str(e)) from e

    for name in fields:
        if not PLACEHOLDER_FIELD_PATTERN.fullmatch(name):
            raise TemplateFormatError(template, f"invalid placeholder {{{name}}}.")
        if (index := int(name)) >= len(params):
            raise MissingParameterError(template, index, len(params))

    try:
        return template.format(*params)
    except (IndexError, KeyError, TypeError, ValueError) as e:
        # raised by a parameter's __format__, e.g. "{0:d}" with a str or None
        raise TemplateFormatError(template, str(e)) from e


# ============================================================================
#                               Replacement
# ============================================================================


def replace_at(value: str | None, index: int, char: str) -> str | None:
    """Return a copy of `value` with the character at `index` replaced.

    Args:
        value: Source text. Returned unchanged if blank.
        index: Zero-based position. Negative or out-of-range positions leave
            the text unchanged.
        char: The replacement, exactly one character.

    Raises:
        ValueError: If `char` is not a single character.
    """
    if value is None or is_blank(value) or not 0 <= index < len(value):
        return value
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    return value[:index] + char + value[index + 1 :]


def replace_all(value: str | None, old: str, new: str) -> str | None:
    """Replace every occurrence of `old` with `new` in a single pass.

    Replacements are never rescanned, so `new` may safely contain `old`:
    ``replace_all("aXbXc", "X", "XX") == "aXXbXXc"``. Blank input, or an
    empty `old`, returns `value` unchanged.
    """
    if value is None or is_blank(value) or not old:
        return value
    return value.replace(old, new)


def mask(
    value: str | None,
    exposed_count: int = DEFAULT_EXPOSED_COUNT,
    direction: MaskDirection = MaskDirection.RIGHT,
    mask_char: str = DEFAULT_MASK_CHAR,
) -> str | None:
    """Mask all but `exposed_count` characters of `value`.

    Example:
        >>> mask("4111111111111111", 4)
        'XXXXXXXXXXXX1111'
        >>> mask("4111111111111111", 4, MaskDirection.LEFT)
        '4111XXXXXXXXXXXX'

    Args:
        value: Text to mask. Returned unchanged if blank or shorter than
            `exposed_count`.
        exposed_count: Number of characters left readable. Negative counts
            are treated as zero.
        direction: `RIGHT` keeps the trailing characters, `LEFT` the leading.
        mask_char: Single replacement character.

    Returns:
        A new masked string, or `value` itself when nothing is masked.

    Raises:
        ValueError: If `mask_char` is not a single character.
    """
    if value is None or is_blank(value) or len(value) < exposed_count:
        return value
    if len(mask_char) != 1:
        raise ValueError(f"Expected a single mask character, got {mask_char!r}")

    exposed = max(exposed_count, 0)
    hidden = len(value) - exposed
    if direction is MaskDirection.LEFT:
        return value[:exposed] + mask_char * hidden
    return mask_char * hidden + value[hidden:]
