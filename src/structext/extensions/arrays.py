"""Null-safe defaulting for sequences."""

from collections.abc import Callable, Sequence
from typing import TypeVar

S = TypeVar("S", bound=Sequence)


def to_array_or_empty(
    target: S | None, factory: Callable[[], S] = list  # type: ignore[assignment]
) -> S:
    """Return `target`, or a new empty sequence if `target` is None.

    Use this when a sequence must be initialized before it is iterated or
    measured.

    Args:
        target: The sequence, or None.
        factory: Zero-argument callable building the empty sequence. Pass
            `tuple`, `bytes` or ``functools.partial(array.array, "i")`` to get
            an empty value of the same container and element type as
            `target` would have.

    Returns:
        `target` itself when present, otherwise ``factory()``.
    """
    return factory() if target is None else target
