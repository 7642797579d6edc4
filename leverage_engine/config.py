"""
Runtime defaults for the reporting and recommendation entry points.

These are call-site defaults only. Score multipliers, tier thresholds and the
"materially better" factor are fixed in the core modules.

All values can be overridden via environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass
class Config:
    """
    Defaults for ranking size, alternative count and candidate pool selection.
    """

    ranking_limit: int = 10
    max_alternatives: int = 3

    # Candidate pool for opportunity-cost analysis
    candidate_lookback_days: int = 90
    candidate_min_impact: float = 7
    candidate_pool_limit: int = 20

    # Top-efficient report
    top_min_impact: float = 7

    @classmethod
    def from_env(cls) -> "Config":
        """
        Construct a Config object by reading environment variables.

        Environment variables (all optional):
        - LE_RANKING_LIMIT
        - LE_MAX_ALTERNATIVES
        - LE_CANDIDATE_LOOKBACK_DAYS
        - LE_CANDIDATE_MIN_IMPACT
        - LE_CANDIDATE_POOL_LIMIT
        - LE_TOP_MIN_IMPACT
        """
        defaults = cls()
        return cls(
            ranking_limit=_get_env_int("LE_RANKING_LIMIT", defaults.ranking_limit),
            max_alternatives=_get_env_int("LE_MAX_ALTERNATIVES", defaults.max_alternatives),
            candidate_lookback_days=_get_env_int("LE_CANDIDATE_LOOKBACK_DAYS", defaults.candidate_lookback_days),
            candidate_min_impact=_get_env_float("LE_CANDIDATE_MIN_IMPACT", defaults.candidate_min_impact),
            candidate_pool_limit=_get_env_int("LE_CANDIDATE_POOL_LIMIT", defaults.candidate_pool_limit),
            top_min_impact=_get_env_float("LE_TOP_MIN_IMPACT", defaults.top_min_impact),
        )
