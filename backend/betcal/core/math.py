from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from betcal.domain.types import HedgeQuote, HedgeRejection, HedgeResult, Leg

logger = logging.getLogger(__name__)

EPS = 1e-9


def _ensure_finite(value: float, name: str) -> float:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite")
    return value


def _ensure_non_negative(value: float, name: str) -> float:
    value = _ensure_finite(value, name)
    if value < 0.0:
        raise ValueError(f"{name} must be non-negative")
    return value


def validate_stake(stake: float, name: str = "stake") -> float:
    return _ensure_non_negative(float(stake), name)


def validate_legs(legs: Sequence[Leg]) -> None:
    for leg in legs:
        _ensure_finite(float(leg.odds), "leg.odds")


def min_hedge_odds(origin_odds: float) -> float:
    origin_odds = _ensure_finite(float(origin_odds), "origin_odds")
    # No hedge can lock in profit on a bet that pays back at most its stake.
    if origin_odds <= 1.0 + EPS:
        return math.inf
    return 1.0 / (origin_odds - 1.0) + 1.0


def hedge(origin_odds: float, origin_stake: float, hedge_odds: float) -> HedgeResult:
    origin_stake = validate_stake(origin_stake, "origin_stake")
    hedge_odds = _ensure_finite(float(hedge_odds), "hedge_odds")
    minimum = min_hedge_odds(origin_odds)
    origin_odds = float(origin_odds)

    if hedge_odds <= minimum:
        logger.info("Hedge rejected: odds %s do not exceed minimum %s", hedge_odds, minimum)
        return HedgeRejection(origin_odds=origin_odds, hedge_odds=hedge_odds, min_hedge_odds=minimum)

    # Below min_stake the hedge cannot cover the original stake; above max_stake
    # it eats the original bet's profit.
    min_stake = origin_stake / (hedge_odds - 1.0)
    max_stake = (origin_odds - 1.0) * origin_stake
    mid_stake = origin_odds * origin_stake / hedge_odds
    mid_net_win = (hedge_odds - 1.0) * mid_stake - origin_stake
    return HedgeQuote(
        origin_odds=origin_odds,
        origin_stake=origin_stake,
        hedge_odds=hedge_odds,
        min_hedge_odds=minimum,
        min_stake=min_stake,
        max_stake=max_stake,
        mid_stake=mid_stake,
        mid_net_win=mid_net_win,
    )
