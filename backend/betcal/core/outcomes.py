from __future__ import annotations

import itertools
from collections.abc import Sequence

from betcal.domain.enums import OddsOrder
from betcal.domain.types import Leg, OutcomeFn


def win(leg: Leg) -> Leg:
    return leg.with_outcome(True)


def lose(leg: Leg) -> Leg:
    return leg.with_outcome(False)


def sort_legs(legs: Sequence[Leg], order: OddsOrder) -> list[Leg]:
    # sorted() is stable with reverse=True too, so ties keep input order.
    return sorted(legs, key=lambda leg: leg.odds, reverse=order == OddsOrder.DESCENDING)


def assign_losses(ordered_legs: Sequence[Leg], lose_count: int) -> list[Leg]:
    """Mark the first ``lose_count`` legs lost and every other leg won.

    The caller picks the ordering: descending odds gives the pessimistic
    bound, ascending odds the optimistic one.
    """
    if lose_count < 0:
        raise ValueError("lose_count must be non-negative")
    return [lose(leg) if idx < lose_count else win(leg) for idx, leg in enumerate(ordered_legs)]


def first_legs_lose(ordered_legs: Sequence[Leg], lose_count: int) -> OutcomeFn:
    """Outcome function form of assign_losses.

    Outcomes are handed out by position: the n-th call gets the outcome of
    the n-th leg in ``ordered_legs``, wrapping around after the last leg so
    the function can be reused across passes over the same legs.
    """
    assigned = assign_losses(ordered_legs, lose_count)
    position = itertools.count()

    def _outcome(leg: Leg) -> Leg:
        if not assigned:
            return win(leg)
        return leg.with_outcome(assigned[next(position) % len(assigned)].won)

    return _outcome


def _top(legs: Sequence[Leg], count: int, order: OddsOrder) -> list[Leg] | None:
    if count < 0 or len(legs) < count:
        return None
    return sort_legs(legs, order)[:count]


def best_odds(legs: Sequence[Leg], count: int) -> list[Leg] | None:
    return _top(legs, count, OddsOrder.DESCENDING)


def worst_odds(legs: Sequence[Leg], count: int) -> list[Leg] | None:
    return _top(legs, count, OddsOrder.ASCENDING)
