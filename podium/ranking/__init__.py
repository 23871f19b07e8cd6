"""Authenticated ranking of signed score records.

Records are authenticated one by one, sorted with the hint-and-verify
protocol from podium.sorting, and the top three identities returned.
"""

from .errors import (
    AuthError,
    BatchSizeMismatch,
    InsufficientParticipants,
    SignatureMismatch,
    SortInvalid,
    Unauthenticated,
    WinnersError,
)
from .models import (
    IDENTITY_SIZE,
    MESSAGE_SIZE,
    PODIUM_SIZE,
    SCORE_MAX,
    TAG_SIZE,
    RankingResult,
    Record,
)
from .signer import (
    Authenticator,
    DigestAuthenticator,
    KeypairAuthenticator,
    VerificationResult,
    record_message,
    sign_record,
    verify_batch,
    verify_record,
)
from .winners import RankingRun, RankingState, rank

__all__ = [
    "IDENTITY_SIZE",
    "MESSAGE_SIZE",
    "PODIUM_SIZE",
    "SCORE_MAX",
    "TAG_SIZE",
    "AuthError",
    "Authenticator",
    "BatchSizeMismatch",
    "DigestAuthenticator",
    "InsufficientParticipants",
    "KeypairAuthenticator",
    "RankingResult",
    "RankingRun",
    "RankingState",
    "Record",
    "SignatureMismatch",
    "SortInvalid",
    "Unauthenticated",
    "VerificationResult",
    "WinnersError",
    "rank",
    "record_message",
    "sign_record",
    "verify_batch",
    "verify_record",
]
