"""Pydantic models for authenticated ranking.

Two shapes cross the boundary:
- Record: identity + score + tag, the unit being ranked
- RankingResult: the three highest-scoring identities, in podium order
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


# ---------------------------------------------------------------------------
# Wire widths - the canonical message is identity || score
# ---------------------------------------------------------------------------

IDENTITY_SIZE = 32
TAG_SIZE = 32
SCORE_MAX = 255
MESSAGE_SIZE = IDENTITY_SIZE + 1
PODIUM_SIZE = 3


def _coerce_bytes(value: Any) -> Any:
    """Accept hex strings (JSON input) as well as raw bytes."""
    if isinstance(value, str):
        try:
            return bytes.fromhex(value)
        except ValueError as e:
            raise ValueError(f"not a hex string: {e}") from e
    return value


def _check_identity(value: bytes) -> bytes:
    if len(value) != IDENTITY_SIZE:
        raise ValueError(f"identity must be {IDENTITY_SIZE} bytes, got {len(value)}")
    return value


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------


class Record(BaseModel):
    """A scored participant with its authentication tag.

    The tag is established once, when the record is signed, and only
    checked afterwards. Records are frozen so they can be counted and
    compared by value.
    """

    model_config = ConfigDict(frozen=True)

    identity: bytes
    score: int = Field(ge=0, le=SCORE_MAX)
    tag: bytes = Field(min_length=1)

    @field_validator("identity", "tag", mode="before")
    @classmethod
    def _from_hex(cls, value: Any) -> Any:
        return _coerce_bytes(value)

    @field_validator("identity")
    @classmethod
    def _identity_width(cls, value: bytes) -> bytes:
        return _check_identity(value)

    @field_serializer("identity", "tag", when_used="json")
    def _to_hex(self, value: bytes) -> str:
        return value.hex()


# ---------------------------------------------------------------------------
# RankingResult
# ---------------------------------------------------------------------------


class RankingResult(BaseModel):
    """Top three identities of a verified batch."""

    model_config = ConfigDict(frozen=True)

    first: bytes
    second: bytes
    third: bytes

    @field_validator("first", "second", "third", mode="before")
    @classmethod
    def _from_hex(cls, value: Any) -> Any:
        return _coerce_bytes(value)

    @field_validator("first", "second", "third")
    @classmethod
    def _identity_width(cls, value: bytes) -> bytes:
        return _check_identity(value)

    @field_serializer("first", "second", "third", when_used="json")
    def _to_hex(self, value: bytes) -> str:
        return value.hex()

    def as_tuple(self) -> tuple[bytes, bytes, bytes]:
        return (self.first, self.second, self.third)


__all__ = [
    "IDENTITY_SIZE",
    "MESSAGE_SIZE",
    "PODIUM_SIZE",
    "SCORE_MAX",
    "TAG_SIZE",
    "RankingResult",
    "Record",
]
