"""Tests for the ranking entrypoint."""

import json

import pytest

from podium.entrypoints.rank import main
from podium.ranking.models import IDENTITY_SIZE
from podium.ranking.signer import DigestAuthenticator, sign_record


def _identity(n: int) -> bytes:
    return n.to_bytes(IDENTITY_SIZE, "big")


@pytest.fixture
def batch_file(tmp_path, monkeypatch):
    monkeypatch.setenv("PODIUM_TEST_MODE", "true")
    for name in ("PODIUM_BATCH_SIZE", "PODIUM_CHECK_PERMUTATION", "PODIUM_ORACLE", "PODIUM_SIGNER_SS58"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    def _write(records):
        path = tmp_path / "batch.json"
        path.write_text(json.dumps([r.model_dump(mode="json") for r in records]))
        return str(path)

    return _write


class TestRankEntrypoint:

    def test_ranks_valid_batch(self, batch_file):
        auth = DigestAuthenticator()
        path = batch_file([sign_record(_identity(i), i * 2, auth) for i in range(1, 11)])
        assert main(["--batch", path]) == 0

    def test_tampered_batch_fails(self, batch_file):
        auth = DigestAuthenticator()
        records = [sign_record(_identity(i), i, auth) for i in range(1, 6)]
        records[0] = records[0].model_copy(update={"score": 99})
        path = batch_file(records)
        assert main(["--batch", path]) == 1

    def test_missing_file_fails(self, batch_file, tmp_path):
        assert main(["--batch", str(tmp_path / "nope.json")]) == 1

    def test_malformed_record_fails(self, batch_file, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"identity": "00", "score": 1, "tag": "00"}]))
        assert main(["--batch", str(path)]) == 1

    def test_malformed_signer_fails(self, batch_file):
        auth = DigestAuthenticator()
        path = batch_file([sign_record(_identity(i), i, auth) for i in range(1, 6)])
        assert main(["--batch", path, "--ranking.signer_ss58", "not-an-ss58-address"]) == 1
