"""Record signing and verification.

A record's tag endorses the canonical message ``identity || score``.
The signing scheme is a pluggable collaborator: the reference
DigestAuthenticator is a keyless placeholder, KeypairAuthenticator signs
with a bittensor sr25519 keypair.
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import Any, Iterable, Protocol, runtime_checkable

import bittensor as bt

from .errors import SignatureMismatch
from .models import IDENTITY_SIZE, SCORE_MAX, TAG_SIZE, Record


def record_message(identity: bytes, score: int) -> bytes:
    """Build the canonical message to sign.

    32 identity bytes in their original order followed by one score byte.
    """
    if len(identity) != IDENTITY_SIZE:
        raise ValueError(f"identity must be {IDENTITY_SIZE} bytes, got {len(identity)}")
    if not 0 <= score <= SCORE_MAX:
        raise ValueError(f"score out of range: {score}")
    return bytes(identity) + bytes([score])


@runtime_checkable
class Authenticator(Protocol):
    """Signing capability handed in by the caller."""

    tag_size: int

    def sign(self, message: bytes) -> bytes:
        ...

    def verify(self, message: bytes, tag: bytes) -> bool:
        ...


class DigestAuthenticator:
    """Placeholder scheme: the tag is SHA-256 of the message.

    Holds no key material, so anyone can forge tags. Useful only as a
    stand-in where the integrity primitive is supplied elsewhere.
    """

    tag_size = TAG_SIZE

    def sign(self, message: bytes) -> bytes:
        return hashlib.sha256(message).digest()

    def verify(self, message: bytes, tag: bytes) -> bool:
        return hmac.compare_digest(self.sign(message), bytes(tag))


class KeypairAuthenticator:
    """sr25519 signatures from a bittensor keypair.

    Verification only needs the public ss58 address; signing needs the
    private half.
    """

    tag_size = 64

    def __init__(self, keypair: Any):
        self.keypair = keypair

    @classmethod
    def from_ss58(cls, ss58_address: str) -> KeypairAuthenticator:
        """Verify-only authenticator for a known signer address."""
        return cls(bt.Keypair(ss58_address=ss58_address))

    @property
    def ss58_address(self) -> str:
        return self.keypair.ss58_address

    def sign(self, message: bytes) -> bytes:
        return bytes(self.keypair.sign(message))

    def verify(self, message: bytes, tag: bytes) -> bool:
        try:
            return bool(self.keypair.verify(message, bytes(tag)))
        except Exception:
            return False


def sign_record(identity: bytes, score: int, authenticator: Authenticator) -> Record:
    """Create a record whose tag endorses (identity, score)."""
    tag = authenticator.sign(record_message(identity, score))
    return Record(identity=identity, score=score, tag=tag)


def verify_record(record: Record, authenticator: Authenticator) -> None:
    """Check a single record's tag.

    Raises:
        SignatureMismatch: if the tag is not the one the authenticator
            endorses for this record's identity and score.
    """
    if len(record.tag) != authenticator.tag_size:
        raise SignatureMismatch(
            record.identity,
            f"tag is {len(record.tag)} bytes, expected {authenticator.tag_size}",
        )
    message = record_message(record.identity, record.score)
    if not authenticator.verify(message, record.tag):
        raise SignatureMismatch(record.identity)


@dataclass
class VerificationResult:
    """Outcome of batch authentication."""

    valid: bool
    errors: list[str]

    def __bool__(self) -> bool:
        return self.valid


def verify_batch(records: Iterable[Record], authenticator: Authenticator) -> VerificationResult:
    """Authenticate every record independently.

    All records are checked so the caller sees every bad entry; a single
    failure still invalidates the whole batch.
    """
    errors: list[str] = []
    for index, record in enumerate(records):
        try:
            verify_record(record, authenticator)
        except SignatureMismatch as e:
            errors.append(f"record {index}: {e}")

    if errors:
        bt.logging.warning({"ranking_auth": {"event": "batch_rejected", "bad_records": len(errors)}})
    return VerificationResult(valid=len(errors) == 0, errors=errors)


__all__ = [
    "Authenticator",
    "DigestAuthenticator",
    "KeypairAuthenticator",
    "VerificationResult",
    "record_message",
    "sign_record",
    "verify_batch",
    "verify_record",
]
