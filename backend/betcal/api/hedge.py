from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Query

from betcal.core.math import hedge
from betcal.domain.enums import HedgeStatus
from betcal.domain.types import HedgeQuote
from betcal.services.report import render_hedge

router = APIRouter(tags=["hedge"])


@router.get("/hedge")
def hedge_quote(
    origin_odds: float = Query(..., gt=1.0),
    origin_stake: float = Query(..., ge=0),
    hedge_odds: float = Query(..., gt=1.0),
) -> dict[str, object]:
    try:
        result = hedge(origin_odds, origin_stake, hedge_odds)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    status = HedgeStatus.OK if isinstance(result, HedgeQuote) else HedgeStatus.REJECTED
    return {"status": status.value, **asdict(result), "lines": render_hedge(result)}
