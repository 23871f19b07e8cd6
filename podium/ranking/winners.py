"""Authenticated top-3 extraction.

One run walks INIT -> AUTHENTICATING -> SORTING -> EXTRACTING -> DONE.
Any failure moves it straight to FAILED and raises; there is no retry
and no partial result.
"""

from __future__ import annotations

from enum import Enum
from operator import attrgetter
from typing import Optional, Sequence

import bittensor as bt

from podium.base.config import RankingSettings, load_settings
from podium.sorting import SortError, SortOracle, get_oracle, sort_descending

from .errors import (
    BatchSizeMismatch,
    InsufficientParticipants,
    SortInvalid,
    Unauthenticated,
)
from .models import PODIUM_SIZE, RankingResult, Record
from .signer import Authenticator, verify_batch

_by_score = attrgetter("score")


class RankingState(str, Enum):
    INIT = "init"
    AUTHENTICATING = "authenticating"
    SORTING = "sorting"
    EXTRACTING = "extracting"
    DONE = "done"
    FAILED = "failed"


class RankingRun:
    """A single, non-reusable ranking invocation."""

    def __init__(
        self,
        batch: Sequence[Record],
        authenticator: Authenticator,
        settings: Optional[RankingSettings] = None,
        oracle: Optional[SortOracle] = None,
    ):
        self.batch = tuple(batch)
        self.authenticator = authenticator
        self.settings = settings or load_settings()
        self.oracle = oracle or get_oracle(self.settings.oracle)

        self.state = RankingState.INIT
        self.failure: Optional[Exception] = None
        self.result: Optional[RankingResult] = None

    def _enter(self, state: RankingState) -> None:
        self.state = state
        bt.logging.debug({"ranking": {"state": state.value, "n": len(self.batch)}})

    def _fail(self, error: Exception) -> Exception:
        self.state = RankingState.FAILED
        self.failure = error
        bt.logging.error({"ranking": {"state": "failed", "reason": type(error).__name__, "detail": str(error)}})
        return error

    def execute(self) -> RankingResult:
        """Run the ranking to completion.

        Raises:
            RuntimeError: if this run was already executed.
            WinnersError: subclass naming the guarantee that broke.
        """
        if self.state is not RankingState.INIT:
            raise RuntimeError(f"ranking run already executed (state={self.state.value})")

        n = len(self.batch)
        if n < PODIUM_SIZE:
            raise self._fail(InsufficientParticipants(n, PODIUM_SIZE))
        expected = self.settings.batch_size
        if expected is not None and n != expected:
            raise self._fail(BatchSizeMismatch(n, expected))

        # Step 1: every record must authenticate before any ordering is trusted
        self._enter(RankingState.AUTHENTICATING)
        auth = verify_batch(self.batch, self.authenticator)
        if not auth:
            raise self._fail(Unauthenticated(auth.errors))

        # Step 2: hint, then verify
        self._enter(RankingState.SORTING)
        try:
            ordered = sort_descending(
                self.batch,
                key=_by_score,
                oracle=self.oracle,
                check_permutation=self.settings.check_permutation,
            )
        except SortError as e:
            error = SortInvalid(str(e))
            self._fail(error)
            raise error from e

        # Step 3
        self._enter(RankingState.EXTRACTING)
        podium = ordered[:PODIUM_SIZE]
        if len(podium) != PODIUM_SIZE or not all(isinstance(r, Record) for r in podium):
            raise self._fail(SortInvalid("verified candidate does not start with three records"))
        first, second, third = podium
        self.result = RankingResult(
            first=first.identity,
            second=second.identity,
            third=third.identity,
        )

        self._enter(RankingState.DONE)
        bt.logging.info({
            "ranking": {
                "state": "done",
                "n": n,
                "podium": [identity.hex()[:16] for identity in self.result.as_tuple()],
                "scores": [r.score for r in podium],
            }
        })
        return self.result


def rank(
    batch: Sequence[Record],
    authenticator: Authenticator,
    *,
    settings: Optional[RankingSettings] = None,
    oracle: Optional[SortOracle] = None,
) -> RankingResult:
    """Authenticate a batch and return its three highest-scoring identities.

    Args:
        batch: Signed records, at least three.
        authenticator: Verifying capability for the record tags.
        settings: Ranking settings; process settings when omitted.
        oracle: Hint provider overriding ``settings.oracle``.

    Raises:
        InsufficientParticipants: fewer than three records.
        BatchSizeMismatch: ``settings.batch_size`` set and not matched.
        Unauthenticated: any record failed authentication.
        SortInvalid: the proposed ordering failed verification.
    """
    return RankingRun(batch, authenticator, settings=settings, oracle=oracle).execute()


__all__ = ["RankingRun", "RankingState", "rank"]
