"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # i18n
    DEFAULT_LANG: str = os.getenv("DEFAULT_LANG", "id")

    # Readings older than this are treated as offline
    STALE_AFTER_S: int = int(os.getenv("STALE_AFTER_S", "60"))

    # Simulation
    SIMULATION_SEED: int = int(os.getenv("SIMULATION_SEED", "42"))
    HISTORY_DAYS: int = int(os.getenv("HISTORY_DAYS", "7"))


settings = Settings()
