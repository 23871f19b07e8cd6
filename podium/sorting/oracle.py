"""Hint phase: untrusted proposals of a descending order.

Nothing here is trusted. An oracle may be buggy, run in another process,
or be supplied by another party; its output is only used after
podium.sorting.verifier accepts it.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")

KeyFn = Optional[Callable[[Any], Any]]


def _identity(value: Any) -> Any:
    return value


def select_and_remove_max(slots: list[Optional[T]], key: KeyFn = None) -> T:
    """Pop the largest remaining value and tombstone its slot.

    Ties go to the lowest index.

    Raises:
        ValueError: if every slot is already None.
    """
    key = key or _identity
    best_index = -1
    best_key: Any = None
    for index, value in enumerate(slots):
        if value is None:
            continue
        value_key = key(value)
        # strict > keeps the first of equal maxima
        if best_index < 0 or value_key > best_key:
            best_index = index
            best_key = value_key

    if best_index < 0:
        raise ValueError("no values left to select")

    value = slots[best_index]
    slots[best_index] = None
    return value  # type: ignore[return-value]


@runtime_checkable
class SortOracle(Protocol):
    """Proposes ``items`` in descending order. No correctness contract."""

    name: str

    def propose(self, items: Sequence[T], key: KeyFn = None) -> list[T]:
        ...


class SelectionOracle:
    """Repeated max-selection over a scratch copy of tombstoned slots."""

    name = "selection"

    def propose(self, items: Sequence[T], key: KeyFn = None) -> list[T]:
        scratch: list[Optional[T]] = list(items)
        return [select_and_remove_max(scratch, key) for _ in range(len(scratch))]


class BuiltinOracle:
    """Timsort via ``sorted``."""

    name = "builtin"

    def propose(self, items: Sequence[T], key: KeyFn = None) -> list[T]:
        return sorted(items, key=key, reverse=True)


class PrecomputedOracle:
    """Hands back a candidate computed elsewhere, ignoring the input."""

    name = "precomputed"

    def __init__(self, candidate: Sequence[Any]):
        self.candidate = list(candidate)

    def propose(self, items: Sequence[T], key: KeyFn = None) -> list[T]:
        return list(self.candidate)


_ORACLES: dict[str, type] = {
    SelectionOracle.name: SelectionOracle,
    BuiltinOracle.name: BuiltinOracle,
}


def get_oracle(name: str) -> SortOracle:
    """Instantiate a named in-process oracle."""
    try:
        return _ORACLES[name]()
    except KeyError:
        raise ValueError(f"unknown oracle: {name!r} (known: {sorted(_ORACLES)})") from None


__all__ = [
    "BuiltinOracle",
    "PrecomputedOracle",
    "SelectionOracle",
    "SortOracle",
    "get_oracle",
    "select_and_remove_max",
]
