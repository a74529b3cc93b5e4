from __future__ import annotations

import logging
from collections.abc import Sequence

from betcal.core.outcomes import assign_losses, sort_legs
from betcal.domain.enums import OddsOrder
from betcal.domain.types import Leg, SummaryRow
from betcal.services.net_win import calc_net_win, ensure_leg_limit

logger = logging.getLogger(__name__)


def legs_from_odds(odds: Sequence[float]) -> list[Leg]:
    return [Leg.winning(value) for value in odds]


def max_loss_count(leg_count: int, choose_count: int) -> int:
    # Includes one row past the last loss count that still leaves a winning bet.
    return leg_count - choose_count + 1


def summary_row(
    legs: Sequence[Leg],
    choose_count: int,
    stake_per_bet: float,
    loss_count: int,
) -> SummaryRow:
    """Net-win bounds when exactly ``loss_count`` legs lose.

    The low bound loses the highest-odds legs, the high bound the lowest-odds
    legs. Incoming ``won`` flags are ignored.
    """
    descending = sort_legs(legs, OddsOrder.DESCENDING)
    ascending = sort_legs(legs, OddsOrder.ASCENDING)

    low = calc_net_win(assign_losses(descending, loss_count), choose_count, stake_per_bet)
    high = calc_net_win(assign_losses(ascending, loss_count), choose_count, stake_per_bet)

    row = SummaryRow(
        leg_count=len(legs),
        choose_count=choose_count,
        loss_count=loss_count,
        total_stake=low.total_stake,
        net_win_low=low.net_win,
        net_win_high=high.net_win,
    )
    logger.debug("Summary row %s", row)
    return row


def summarize(legs: Sequence[Leg], choose_count: int, stake_per_bet: float) -> list[SummaryRow]:
    ensure_leg_limit(len(legs))
    return [
        summary_row(legs, choose_count, stake_per_bet, loss_count)
        for loss_count in range(max_loss_count(len(legs), choose_count) + 1)
    ]


def summarize_odds(odds: Sequence[float], choose_count: int, stake_per_bet: float) -> list[SummaryRow]:
    return summarize(legs_from_odds(odds), choose_count, stake_per_bet)
