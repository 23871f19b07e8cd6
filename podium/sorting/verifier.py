"""Verification phase: linear-time checks on a proposed ordering.

This module must stay independent of the hint phase. It only sees the
candidate (and, for the permutation check, the original input).
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Optional, Sequence


class SortError(Exception):
    """The candidate ordering cannot be trusted."""


class NotSorted(SortError):
    """Adjacent pair out of descending order."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"candidate not descending at positions {position} and {position + 1}")


class LengthMismatch(SortError):
    """Candidate does not hold exactly as many items as the input."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"candidate has {actual} items, input has {expected}")


class Uncomparable(SortError):
    """Candidate items could not be keyed or compared."""

    def __init__(self, position: int, detail: str) -> None:
        self.position = position
        self.detail = detail
        super().__init__(f"candidate item at position {position} cannot be ordered: {detail}")


class NotPermutation(SortError):
    """Candidate is not a rearrangement of the input."""

    def __init__(self, missing: int, unexpected: int) -> None:
        self.missing = missing
        self.unexpected = unexpected
        super().__init__(
            f"candidate is not a permutation of the input: "
            f"{missing} missing, {unexpected} unexpected"
        )


def verify_descending(candidate: Sequence[Any], key: Optional[Callable[[Any], Any]] = None) -> None:
    """Check ``key(c[i]) >= key(c[i + 1])`` for every adjacent pair.

    Empty and single-element candidates pass. Note that this alone does not
    prove the candidate holds the same values as the input; see
    verify_permutation.

    Raises:
        NotSorted: at the first violating pair.
        Uncomparable: if an item has no key or keys cannot be compared.
    """
    keys = []
    for position, item in enumerate(candidate):
        try:
            keys.append(key(item) if key is not None else item)
        except (AttributeError, KeyError, TypeError) as e:
            raise Uncomparable(position, str(e)) from e

    for i in range(len(keys) - 1):
        try:
            ordered = keys[i] >= keys[i + 1]
        except TypeError as e:
            raise Uncomparable(i + 1, str(e)) from e
        if not ordered:
            raise NotSorted(i)


def verify_length(original: Sequence[Any], candidate: Sequence[Any]) -> None:
    """Check the candidate has exactly as many items as the input.

    Raises:
        LengthMismatch: on any difference.
    """
    if len(candidate) != len(original):
        raise LengthMismatch(expected=len(original), actual=len(candidate))


def _hashable(item: Any) -> bool:
    try:
        hash(item)
    except TypeError:
        return False
    return True


def verify_permutation(original: Sequence[Any], candidate: Sequence[Any]) -> None:
    """Check the candidate holds exactly the input's multiset of items.

    Items must be hashable.

    Raises:
        NotPermutation: if any item is missing or extra.
        Uncomparable: if a candidate item is unhashable.
    """
    expected = Counter(original)
    try:
        actual = Counter(candidate)
    except TypeError as e:
        position = next(i for i, item in enumerate(candidate) if not _hashable(item))
        raise Uncomparable(position, str(e)) from e
    if expected == actual:
        return
    missing = sum((expected - actual).values())
    unexpected = sum((actual - expected).values())
    raise NotPermutation(missing=missing, unexpected=unexpected)


__all__ = [
    "LengthMismatch",
    "NotPermutation",
    "NotSorted",
    "SortError",
    "Uncomparable",
    "verify_descending",
    "verify_length",
    "verify_permutation",
]
