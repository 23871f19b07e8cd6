"""Typed failures for authentication and winner extraction.

Every failure is fatal to the invocation that raised it. Batch-level
errors chain the record- or sort-level cause.
"""

from __future__ import annotations


class AuthError(Exception):
    """A record could not be authenticated."""


class SignatureMismatch(AuthError):
    """Record tag differs from the value the authenticator endorses."""

    def __init__(self, identity: bytes, detail: str = "") -> None:
        self.identity = identity
        self.detail = detail
        message = f"signature mismatch for identity {identity.hex()[:16]}..."
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class WinnersError(Exception):
    """Base for batch-level ranking failures."""


class InsufficientParticipants(WinnersError):
    def __init__(self, count: int, minimum: int) -> None:
        self.count = count
        self.minimum = minimum
        super().__init__(f"need at least {minimum} participants, got {count}")


class BatchSizeMismatch(WinnersError):
    def __init__(self, count: int, expected: int) -> None:
        self.count = count
        self.expected = expected
        super().__init__(f"batch size is fixed at {expected}, got {count}")


class Unauthenticated(WinnersError):
    """At least one record in the batch failed authentication."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"{len(errors)} record(s) failed authentication: {'; '.join(errors)}")


class SortInvalid(WinnersError):
    """The proposed ordering did not pass verification."""


__all__ = [
    "AuthError",
    "BatchSizeMismatch",
    "InsufficientParticipants",
    "SignatureMismatch",
    "SortInvalid",
    "Unauthenticated",
    "WinnersError",
]
