"""Byte sequence helpers: concatenation, suffix comparison and slicing.

Inputs may be any bytes-like object (`bytes`, `bytearray`, `memoryview`) or
`None`. Inputs are never mutated; new sequences are returned as `bytes`.
"""

from __future__ import annotations

from typing import TypeAlias

from structext.errors import ByteRangeError

BytesLike: TypeAlias = bytes | bytearray | memoryview


def concat_all(
    target: BytesLike | None, *arrays: BytesLike | None
) -> BytesLike | None:
    """Concatenate `target` with each of `arrays`, in order.

    Absent (`None`) parts are skipped, so ``concat_all(None, b"\\x01")`` is
    ``b"\\x01"``.

    Args:
        target: Leading bytes, or None.
        *arrays: Byte sequences appended after `target`.

    Returns:
        A new `bytes` object, or `target` itself when no arrays are given.
    """
    if not arrays:
        return target
    return b"".join(part for part in (target, *arrays) if part is not None)


def ends_with(target: BytesLike | None, suffix: BytesLike | None) -> bool:
    """Return True if the trailing bytes of `target` equal `suffix`.

    Two absent values are considered equal; exactly one absent value never
    matches. An empty suffix matches any present target.
    """
    if target is None or suffix is None:
        return target is None and suffix is None
    if (offset := len(target) - len(suffix)) < 0:
        return False
    return bytes(target[offset:]) == bytes(suffix)


def sub_array(
    target: BytesLike | None, length: int, start_index: int = 0
) -> BytesLike | None:
    """Extract `length` bytes of `target` starting at `start_index`.

    The range is never clamped: a read past the end of `target` is an error,
    not a short read.

    Args:
        target: Source bytes. Returned unchanged if None.
        length: Number of bytes to copy. Values below 1 yield ``b""``.
        start_index: Zero-based offset of the first byte.

    Returns:
        A new `bytes` object holding the requested range.

    Raises:
        ByteRangeError: If `start_index` is negative or
            `start_index + length` exceeds the length of `target`.
    """
    if target is None:
        return target
    if length < 1:
        return b""
    if start_index < 0 or start_index + length > len(target):
        raise ByteRangeError(length, start_index, len(target))
    return bytes(target[start_index : start_index + length])
