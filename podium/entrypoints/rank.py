"""Ranking entrypoint.

Reads a JSON batch of signed records, ranks it, and logs the podium.
Batch format: ``[{"identity": hex, "score": int, "tag": hex}, ...]``.
"""

import argparse
import json
import os
import sys

import bittensor as bt
from dotenv import load_dotenv
from pydantic import ValidationError


def main(argv: list[str] | None = None) -> int:
    # Load .env if not in test mode
    if os.environ.get("PODIUM_TEST_MODE") != "true":
        load_dotenv()

    from podium.base.config import RankingSettings, add_args, settings_from_args
    from podium.ranking import (
        DigestAuthenticator,
        KeypairAuthenticator,
        Record,
        WinnersError,
        rank,
    )

    parser = argparse.ArgumentParser(description="Podium ranking")
    bt.logging.add_args(parser)
    add_args(parser)
    parser.add_argument("--batch", type=str, required=True, help="Path to a JSON batch file.")

    args = parser.parse_args(argv)
    settings = settings_from_args(args, RankingSettings())

    try:
        with open(args.batch, encoding="utf-8") as f:
            raw = json.load(f)
        batch = [Record.model_validate(item) for item in raw]
    except (OSError, json.JSONDecodeError, ValidationError, TypeError) as e:
        bt.logging.error({"rank": {"event": "batch_load_failed", "path": args.batch, "error": str(e)}})
        return 1

    try:
        if settings.signer_ss58:
            authenticator = KeypairAuthenticator.from_ss58(settings.signer_ss58)
        else:
            authenticator = DigestAuthenticator()
    except Exception as e:
        bt.logging.error({"rank": {"event": "bad_signer", "signer_ss58": settings.signer_ss58, "error": str(e)}})
        return 1

    bt.logging.info({
        "rank_config": {
            "batch": args.batch,
            "n": len(batch),
            "oracle": settings.oracle,
            "check_permutation": settings.check_permutation,
            "scheme": type(authenticator).__name__,
        }
    })

    try:
        result = rank(batch, authenticator, settings=settings)
    except WinnersError as e:
        bt.logging.error({"rank": {"event": "failed", "reason": type(e).__name__, "detail": str(e)}})
        return 1

    bt.logging.info({"rank": {"event": "done", "result": result.model_dump(mode="json")}})
    return 0


if __name__ == "__main__":
    sys.exit(main())
