from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Leg:
    """A single wager outcome.

    ``odds`` is the decimal payout multiplier. Odds at or below 1.0 are
    accepted but give meaningless results.
    """

    odds: float
    won: bool = True
    label: str | None = None

    @classmethod
    def winning(cls, odds: float) -> Leg:
        return cls(odds=float(odds), won=True)

    @classmethod
    def losing(cls, odds: float) -> Leg:
        return cls(odds=float(odds), won=False)

    def with_outcome(self, won: bool) -> Leg:
        return replace(self, won=won)


OutcomeFn = Callable[[Leg], Leg]


@dataclass(frozen=True, slots=True)
class CombinedBet:
    legs: tuple[Leg, ...]
    stake: float

    @property
    def combined_odds(self) -> float:
        return math.prod(leg.odds for leg in self.legs)

    @property
    def won(self) -> bool:
        return all(leg.won for leg in self.legs)

    @property
    def gross_return(self) -> float:
        # Stake is returned as part of the payout; losing bets return nothing.
        if self.won:
            return self.stake * self.combined_odds
        return 0.0


@dataclass(frozen=True, slots=True)
class NetWinResult:
    total_stake: float
    net_win: float
    bet_count: int


@dataclass(frozen=True, slots=True)
class SummaryRow:
    leg_count: int
    choose_count: int
    loss_count: int
    total_stake: float
    net_win_low: float
    net_win_high: float


@dataclass(frozen=True, slots=True)
class HedgeQuote:
    origin_odds: float
    origin_stake: float
    hedge_odds: float
    min_hedge_odds: float
    min_stake: float
    max_stake: float
    mid_stake: float
    mid_net_win: float


@dataclass(frozen=True, slots=True)
class HedgeRejection:
    origin_odds: float
    hedge_odds: float
    min_hedge_odds: float
    error: str = "odds below minimum"


HedgeResult = HedgeQuote | HedgeRejection
