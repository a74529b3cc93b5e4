from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from betcal.config import get_settings
from betcal.domain.types import Leg, SummaryRow
from betcal.services.net_win import calc_net_win
from betcal.services.report import format_net_win, render_summary
from betcal.services.summary import summarize_odds

router = APIRouter(tags=["parlay"])


class LegIn(BaseModel):
    odds: float
    won: bool = True
    label: str | None = None


class NetWinRequest(BaseModel):
    legs: list[LegIn]
    choose_count: int = Field(..., ge=0)
    stake_per_bet: float | None = Field(None, ge=0)


class SummaryRequest(BaseModel):
    odds: list[float]
    choose_count: int = Field(..., ge=0)
    stake_per_bet: float | None = Field(None, ge=0)


def _stake(value: float | None) -> float:
    return get_settings().default_stake_per_bet if value is None else value


def _summary_rows(request: SummaryRequest) -> list[SummaryRow]:
    try:
        return summarize_odds(request.odds, request.choose_count, _stake(request.stake_per_bet))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.post("/parlay/net_win")
def parlay_net_win(request: NetWinRequest) -> dict[str, object]:
    legs = [Leg(odds=leg.odds, won=leg.won, label=leg.label) for leg in request.legs]
    try:
        result = calc_net_win(legs, request.choose_count, _stake(request.stake_per_bet))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {**asdict(result), "text": format_net_win(result)}


@router.post("/parlay/summary")
def parlay_summary(request: SummaryRequest) -> list[dict[str, object]]:
    return [asdict(row) for row in _summary_rows(request)]


@router.post("/parlay/summary.txt", response_class=PlainTextResponse)
def parlay_summary_text(request: SummaryRequest) -> str:
    return render_summary(_summary_rows(request))
