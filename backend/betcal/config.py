from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_env: str
    max_legs: int
    default_stake_per_bet: float


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    return float(raw.strip())


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    return int(raw.strip())


@lru_cache
def get_settings() -> Settings:
    # Enumeration is exponential in leg count; keep the guard well below the
    # point where a single request takes seconds.
    return Settings(
        app_name=os.getenv("APP_NAME", "betcal"),
        app_env=os.getenv("APP_ENV", "development"),
        max_legs=_int_env("BETCAL_MAX_LEGS", 20),
        default_stake_per_bet=_float_env("DEFAULT_STAKE_PER_BET", 100.0),
    )
