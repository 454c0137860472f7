"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the Farm Twin Monitor test suite.
"""
import os
from datetime import datetime, timezone

import numpy as np
import pytest

os.environ.setdefault("HISTORY_DAYS", "2")
os.environ.setdefault("SIMULATION_SEED", "42")
os.environ.setdefault("STALE_AFTER_S", "60")


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def pen_band():
    """Pen temperature band: ok=[20,27], warn 18/30."""
    from config.thresholds import BandDefinition
    return BandDefinition(ok=(20.0, 27.0), warn_low=18.0, warn_high=30.0, units="°C")


@pytest.fixture
def healthy_snapshot() -> dict:
    return {
        "kolam": {"suhu": 28.0, "ph": 7.5, "oksigen": 6.5, "amonia": 0.05},
        "ulat": {"suhu": 27.0, "ph": 7.2, "oksigen": 3.5, "amonia": 0.4},
        "kandang": {"suhu": 24.0, "kelembaban": 60.0, "kualitas_udara": 5.0, "pencahayaan": 10.0},
        "hidroponik": {
            "ph": 6.0, "suhu": 22.0, "kelembaban": 60.0,
            "intensitas_cahaya": 15_000.0, "aliran_nutrisi": 1.8,
        },
        "usage": {"energy": 30.0, "water": 300.0, "efficiency": 85.0},
    }


@pytest.fixture
def degraded_snapshot() -> dict:
    """Pond DO critical, hot humid pen, hydroponic pH at its warn limit, silk worm tank offline."""
    return {
        "kolam": {"suhu": 28.0, "ph": "-", "oksigen": 2.5, "amonia": 0.3},
        "kandang": {"suhu": 31.0, "kelembaban": 80.0, "kualitas_udara": 5.0, "pencahayaan": 10.0},
        "hidroponik": {
            "ph": "7.0", "suhu": 22.0, "kelembaban": 60.0,
            "intensitas_cahaya": 15_000.0, "aliran_nutrisi": 1.8,
        },
    }
