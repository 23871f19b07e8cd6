"""Hint-and-verify sorting.

- oracle: untrusted proposals of a descending order
- verifier: linear-time checks that decide whether a proposal is used
- sort: sort_descending, which wires the two together
"""

from .oracle import (
    BuiltinOracle,
    PrecomputedOracle,
    SelectionOracle,
    SortOracle,
    get_oracle,
    select_and_remove_max,
)
from .sort import sort_descending
from .verifier import (
    LengthMismatch,
    NotPermutation,
    NotSorted,
    SortError,
    Uncomparable,
    verify_descending,
    verify_length,
    verify_permutation,
)

__all__ = [
    "BuiltinOracle",
    "LengthMismatch",
    "NotPermutation",
    "NotSorted",
    "PrecomputedOracle",
    "SelectionOracle",
    "SortError",
    "SortOracle",
    "Uncomparable",
    "get_oracle",
    "select_and_remove_max",
    "sort_descending",
    "verify_descending",
    "verify_length",
    "verify_permutation",
]
