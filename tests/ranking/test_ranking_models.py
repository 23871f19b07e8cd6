"""Tests for ranking Pydantic models."""

import pytest
from pydantic import ValidationError

from podium.ranking.models import IDENTITY_SIZE, RankingResult, Record


def _identity(n: int) -> bytes:
    return n.to_bytes(IDENTITY_SIZE, "big")


class TestRecord:

    def test_accepts_bytes(self):
        record = Record(identity=_identity(1), score=10, tag=b"\x01" * 32)
        assert record.identity == _identity(1)
        assert record.score == 10

    def test_accepts_hex_strings(self):
        record = Record(identity=_identity(5).hex(), score=0, tag=("ab" * 32))
        assert record.identity == _identity(5)
        assert record.tag == b"\xab" * 32

    def test_json_roundtrip_uses_hex(self):
        record = Record(identity=_identity(7), score=255, tag=b"\x02" * 32)
        data = record.model_dump(mode="json")
        assert data["identity"] == _identity(7).hex()
        assert data["tag"] == ("02" * 32)
        assert Record.model_validate(data) == record

    def test_identity_width_enforced(self):
        with pytest.raises(ValidationError):
            Record(identity=b"\x00" * 31, score=1, tag=b"\x00" * 32)

    @pytest.mark.parametrize("score", [-1, 256])
    def test_score_range_enforced(self, score):
        with pytest.raises(ValidationError):
            Record(identity=_identity(1), score=score, tag=b"\x00" * 32)

    def test_bad_hex_rejected(self):
        with pytest.raises(ValidationError):
            Record(identity="zz" * 32, score=1, tag=b"\x00" * 32)

    def test_frozen_and_hashable(self):
        record = Record(identity=_identity(1), score=3, tag=b"\x00" * 32)
        with pytest.raises(ValidationError):
            record.score = 4
        twin = Record(identity=_identity(1), score=3, tag=b"\x00" * 32)
        assert hash(record) == hash(twin)
        assert len({record, twin}) == 1


class TestRankingResult:

    def test_as_tuple_in_podium_order(self):
        result = RankingResult(first=_identity(3), second=_identity(2), third=_identity(1))
        assert result.as_tuple() == (_identity(3), _identity(2), _identity(1))

    def test_json_dump(self):
        result = RankingResult(first=_identity(3), second=_identity(2), third=_identity(1))
        data = result.model_dump(mode="json")
        assert data["first"] == _identity(3).hex()
        assert RankingResult.model_validate(data) == result
