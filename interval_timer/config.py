from __future__ import annotations

import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Engine timing
    TICK_SECONDS: float = 1.0
    COUNTDOWN_CUE_SECONDS: int = 3

    # Defaults for a freshly created exercise
    DEFAULT_PREPARE_TIME: int = 5
    DEFAULT_WORK_TIME: int = 45
    DEFAULT_REST_TIME: int = 15
    DEFAULT_ROUNDS: int = 3
    DEFAULT_CYCLES: int = 4
    DEFAULT_REST_BETWEEN_CYCLES: int = 60
    DEFAULT_REPETITIONS: int = 12
    DEFAULT_LOAD: float = 30.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Allow Streamlit Cloud secrets to override or provide env values
    overrides: dict = {}
    try:
        import streamlit as _st  # type: ignore
        sec = getattr(_st, "secrets", None)
        if sec:
            for k in ["APP_ENV", "LOG_LEVEL", "TICK_SECONDS", "COUNTDOWN_CUE_SECONDS"]:
                if k in sec and sec[k] is not None and sec[k] != "":
                    overrides[k] = sec[k]
    except Exception:
        pass
    return Settings(**overrides)  # type: ignore[call-arg]


def configure_logging(level: str | None = None) -> None:
    settings = get_settings()
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
