from __future__ import annotations

import logging
from collections.abc import Sequence

from betcal.config import get_settings
from betcal.core.combinatorics import combinations
from betcal.core.math import validate_legs, validate_stake
from betcal.domain.types import CombinedBet, Leg, NetWinResult, OutcomeFn

logger = logging.getLogger(__name__)


def ensure_leg_limit(leg_count: int, max_legs: int | None = None) -> None:
    limit = get_settings().max_legs if max_legs is None else max_legs
    if leg_count > limit:
        logger.warning("Rejecting calculation with %s legs (max_legs=%s)", leg_count, limit)
        raise ValueError(f"leg count {leg_count} exceeds max_legs {limit}")


def build_bets(legs: Sequence[Leg], choose_count: int, stake_per_bet: float) -> list[CombinedBet]:
    # choose_count == 1 means one accumulator over every leg, not singles.
    effective_count = len(legs) if choose_count == 1 else choose_count
    return [
        CombinedBet(legs=tuple(combo), stake=stake_per_bet)
        for combo in combinations(legs, effective_count)
    ]


def calc_net_win(
    legs: Sequence[Leg],
    choose_count: int,
    stake_per_bet: float,
    outcome_fn: OutcomeFn | None = None,
) -> NetWinResult:
    """Total stake and net win over every ``choose_count`` combination of ``legs``.

    ``outcome_fn`` overrides each leg's ``won`` flag before pricing. Requests
    that cannot form any bet return zero totals.
    """
    ensure_leg_limit(len(legs))
    validate_legs(legs)
    stake_per_bet = validate_stake(stake_per_bet, "stake_per_bet")

    final_legs = [outcome_fn(leg) for leg in legs] if outcome_fn is not None else list(legs)
    bets = build_bets(final_legs, choose_count, stake_per_bet)

    total_stake = len(bets) * stake_per_bet
    net_win = sum(bet.gross_return for bet in bets) - total_stake
    return NetWinResult(total_stake=total_stake, net_win=net_win, bet_count=len(bets))
