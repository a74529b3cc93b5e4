from fastapi import APIRouter

from betcal.api.hedge import router as hedge_router
from betcal.api.parlay import router as parlay_router

api_router = APIRouter()
api_router.include_router(parlay_router)
api_router.include_router(hedge_router)
