# The MIT License (MIT)
# Copyright © 2023 Yuma Rao
# Copyright © 2023 Opentensor Foundation

# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:

# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software.

# THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO
# THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION
# OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
# DEALINGS IN THE SOFTWARE.

"""Ranking configuration.

Values come from PODIUM_* environment variables (and a local .env),
with CLI flags from add_args() as the fallback. Environment takes
precedence over CLI, matching how the entrypoint resolves them.
"""

from __future__ import annotations

import argparse
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RankingSettings(BaseSettings):
    """Settings for authenticated ranking runs."""

    model_config = SettingsConfigDict(
        env_prefix="PODIUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Fixed batch size N; None accepts any size of at least three
    batch_size: Optional[int] = Field(default=None, ge=3)

    # Require the sorted candidate to be a rearrangement of the batch
    check_permutation: bool = True

    # Hint provider used when the caller does not pass one
    oracle: Literal["selection", "builtin"] = "selection"

    # Verify-only sr25519 signer; digest placeholder scheme when empty
    signer_ss58: str = ""


@lru_cache(maxsize=1)
def load_settings() -> RankingSettings:
    """Load settings once per process."""
    return RankingSettings()


def add_args(parser: argparse.ArgumentParser) -> None:
    """Adds ranking arguments to the parser."""
    parser.add_argument(
        "--ranking.batch_size",
        type=int,
        default=None,
        help="Fixed number of records per batch.",
    )
    parser.add_argument(
        "--ranking.no_permutation_check",
        action="store_true",
        default=False,
        help="Accept sorted candidates on ordering alone.",
    )
    parser.add_argument(
        "--ranking.oracle",
        type=str,
        choices=["selection", "builtin"],
        default="selection",
        help="Hint provider for the sort.",
    )
    parser.add_argument(
        "--ranking.signer_ss58",
        type=str,
        default="",
        help="ss58 address that signed the records (sr25519 scheme).",
    )


def settings_from_args(args: argparse.Namespace, env: RankingSettings) -> RankingSettings:
    """Merge parsed CLI arguments under environment settings."""
    fields_set = env.model_fields_set
    merged = {
        "batch_size": getattr(args, "ranking.batch_size", None),
        "check_permutation": not getattr(args, "ranking.no_permutation_check", False),
        "oracle": getattr(args, "ranking.oracle", "selection"),
        "signer_ss58": getattr(args, "ranking.signer_ss58", ""),
    }
    for name in fields_set:
        merged[name] = getattr(env, name)
    return RankingSettings.model_validate(merged)


__all__ = ["RankingSettings", "add_args", "load_settings", "settings_from_args"]
