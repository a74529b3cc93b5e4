from fastapi import FastAPI

from betcal.api.router import api_router
from betcal.config import get_settings

settings = get_settings()
app = FastAPI(title=settings.app_name)
app.include_router(api_router)


@app.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok", "environment": settings.app_env}
