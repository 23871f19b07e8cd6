"""Hint-and-verify sort.

The oracle proposes, the verifier disposes. Only a candidate that passes
verification is returned; otherwise the SortError propagates and nothing
about the candidate should be used.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, TypeVar

import bittensor as bt

from .oracle import SelectionOracle, SortOracle
from .verifier import verify_descending, verify_length, verify_permutation

T = TypeVar("T")


def sort_descending(
    items: Sequence[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
    oracle: Optional[SortOracle] = None,
    size: Optional[int] = None,
    check_permutation: bool = False,
) -> list[T]:
    """Sort ``items`` descending by asking an oracle, then verifying.

    Args:
        items: Fixed-size input batch.
        key: Ordering key (defaults to the items themselves).
        oracle: Hint provider; SelectionOracle when omitted.
        size: Expected batch size, checked before anything runs.
        check_permutation: Also require the candidate to be a
            rearrangement of ``items``. Off by default, in which case a
            candidate is accepted on ordering alone.

    Returns:
        The verified candidate.

    Raises:
        ValueError: if ``size`` is given and does not match.
        LengthMismatch: if the candidate does not hold exactly len(items) items.
        Uncomparable: if candidate items cannot be keyed or compared.
        NotSorted: if the candidate is not descending.
        NotPermutation: if ``check_permutation`` and the values differ.
    """
    if size is not None and len(items) != size:
        raise ValueError(f"expected exactly {size} items, got {len(items)}")

    oracle = oracle or SelectionOracle()
    candidate = oracle.propose(list(items), key)

    verify_length(items, candidate)
    verify_descending(candidate, key)
    if check_permutation:
        verify_permutation(items, candidate)

    bt.logging.debug({"sort_descending": {"oracle": getattr(oracle, "name", "?"), "n": len(candidate)}})
    return candidate


__all__ = ["sort_descending"]
