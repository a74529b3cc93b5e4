import math

import pytest

from betcal.domain.types import Leg
from betcal.services.report import render_summary
from betcal.services.summary import legs_from_odds, max_loss_count, summarize, summarize_odds, summary_row


def test_summary_rows_for_three_legs_choose_two() -> None:
    rows = summarize_odds([1.5, 2.0, 3.0], 2, 10)

    assert [row.loss_count for row in rows] == [0, 1, 2]
    assert all(row.total_stake == pytest.approx(30.0) for row in rows)

    assert rows[0].net_win_low == pytest.approx(105.0)
    assert rows[0].net_win_high == pytest.approx(105.0)
    # low: the 3.0 leg loses, only 1.5 x 2.0 pays; high: the 1.5 leg loses.
    assert rows[1].net_win_low == pytest.approx(0.0)
    assert rows[1].net_win_high == pytest.approx(30.0)
    assert rows[2].net_win_low == pytest.approx(-30.0)
    assert rows[2].net_win_high == pytest.approx(-30.0)


def test_sweep_includes_row_past_last_winning_bet() -> None:
    rows = summarize_odds([2.0, 3.0], 2, 100)

    assert max_loss_count(2, 2) == 1
    assert len(rows) == 2
    assert rows[0].net_win_low == pytest.approx(500.0)
    assert rows[1].net_win_low == pytest.approx(-100.0)
    assert rows[1].net_win_high == pytest.approx(-100.0)


def test_zero_losses_bounds_coincide() -> None:
    odds = [2.05, 2.11, 2.23, 1.11, 1.30, 1.18, 1.92]
    for choose in range(2, len(odds) + 1):
        row = summarize_odds(odds, choose, 10)[0]
        assert row.loss_count == 0
        assert row.net_win_low == pytest.approx(row.net_win_high)


def test_total_stake_constant_across_rows() -> None:
    odds = [3.5, 2.8, 1.09, 1.30, 1.80, 1.43, 1.40]
    rows = summarize_odds(odds, 5, 100)

    assert len(rows) == len(odds) - 5 + 2
    expected = math.comb(len(odds), 5) * 100
    assert all(row.total_stake == pytest.approx(expected) for row in rows)
    assert all(row.net_win_low <= row.net_win_high + 1e-9 for row in rows)


def test_low_bound_never_increases_with_more_losses() -> None:
    rows = summarize_odds([1.17, 1.86, 1.55, 1.15, 1.22, 3.95, 1.42], 4, 5)
    lows = [row.net_win_low for row in rows]
    assert lows == sorted(lows, reverse=True)


def test_existing_won_flags_are_ignored() -> None:
    legs = [Leg.winning(2.05), Leg.losing(2.11), Leg.winning(2.23), Leg.winning(1.11)]

    assert summarize(legs, 3, 200) == summarize_odds([2.05, 2.11, 2.23, 1.11], 3, 200)


def test_choose_one_sweeps_every_loss_count() -> None:
    rows = summarize_odds([2.0, 3.0], 1, 100)

    assert [row.loss_count for row in rows] == [0, 1, 2]
    assert rows[0].net_win_low == pytest.approx(500.0)
    assert rows[2].net_win_high == pytest.approx(-100.0)


def test_no_rows_when_choose_exceeds_leg_count_by_two() -> None:
    assert summarize_odds([2.0, 3.0], 4, 100) == []


def test_summary_row_single_loss_count() -> None:
    row = summary_row(legs_from_odds([1.5, 2.0, 3.0]), 2, 10, 1)
    assert (row.leg_count, row.choose_count, row.loss_count) == (3, 2, 1)
    assert row.net_win_high == pytest.approx(30.0)


def test_summary_is_idempotent() -> None:
    odds = [2.05, 2.11, 2.23, 1.11, 1.30]
    first = summarize_odds(odds, 3, 10)
    second = summarize_odds(odds, 3, 10)

    assert first == second
    assert render_summary(first) == render_summary(second)


def test_summary_respects_leg_guard(monkeypatch) -> None:
    monkeypatch.setenv("BETCAL_MAX_LEGS", "4")
    with pytest.raises(ValueError):
        summarize_odds([1.5] * 5, 2, 10)


def test_choose_zero_prices_one_empty_bet_per_row() -> None:
    rows = summarize_odds([1.5, 2.0, 3.0], 0, 10)

    assert [row.loss_count for row in rows] == [0, 1, 2, 3, 4]
    for row in rows:
        # The empty bet has odds 1.0 and no leg that can lose.
        assert row.total_stake == pytest.approx(10.0)
        assert row.net_win_low == pytest.approx(0.0)
        assert row.net_win_high == pytest.approx(0.0)


def test_choose_one_more_than_leg_count_gives_single_empty_row() -> None:
    rows = summarize_odds([1.5, 2.0, 3.0], 4, 10)

    assert len(rows) == 1
    assert rows[0].loss_count == 0
    assert rows[0].total_stake == 0
    assert (rows[0].net_win_low, rows[0].net_win_high) == (0, 0)
