from __future__ import annotations

from collections.abc import Sequence

from betcal.domain.types import HedgeQuote, HedgeResult, NetWinResult, SummaryRow


def format_summary_row(row: SummaryRow) -> str:
    return (
        f"{row.leg_count} legs choose {row.choose_count} | total stake: {row.total_stake} | "
        f"lose {row.loss_count}: net win range [{row.net_win_low} --- {row.net_win_high}]"
    )


def render_summary(rows: Sequence[SummaryRow]) -> str:
    return "\n".join(format_summary_row(row) for row in rows)


def format_net_win(result: NetWinResult) -> str:
    return f"total stake: {result.total_stake}, net win: {result.net_win}"


def render_hedge(result: HedgeResult) -> list[str]:
    if not isinstance(result, HedgeQuote):
        return [f"hedge odds too low, must be greater than {result.min_hedge_odds}"]
    return [
        f"hedge stake should stay within [{result.min_stake} --- {result.max_stake}]",
        f"hedge stake {result.mid_stake}, locked profit: {result.mid_net_win}",
        f"hedge stake in [{result.min_stake} --- {result.mid_stake}]: original bet winning pays more",
        f"hedge stake in [{result.mid_stake} --- {result.max_stake}]: hedge bet winning pays more",
    ]
