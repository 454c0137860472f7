"""
farmtwin/data/simulator.py
──────────────────────────
Synthetic realtime-store data for demos and tests.

Generates:
  - Store-shaped snapshots ({"kolam": {...}, "kandang": {...}, ...})
  - Hourly per-domain history frames with a daily temperature cycle
  - Sensor dropouts reported with the store's "-" sentinel

Design:
  - Reproducible with SIMULATION_SEED for consistent demos
  - Values are rounded the way the field gateways report them
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

import numpy as np
import pandas as pd

from config.sensors import SENSOR_FIELDS
from config.settings import settings
from config.thresholds import Domain

MISSING = "-"
DROPOUT_PROB = 0.02

# ── Baseline operating points (store field names) ─────────────────────────────

BASELINES: dict[Domain, dict[str, float]] = {
    Domain.KOLAM: {"suhu": 28.0, "ph": 7.6, "oksigen": 6.2, "amonia": 0.35},
    Domain.ULAT: {"suhu": 27.0, "ph": 7.2, "oksigen": 3.8, "amonia": 0.5},
    Domain.KANDANG: {"suhu": 25.5, "kelembaban": 65.0, "kualitas_udara": 6.0, "pencahayaan": 12.0},
    Domain.HIDROPONIK: {
        "ph": 6.0, "suhu": 22.0, "kelembaban": 60.0,
        "intensitas_cahaya": 15_000.0, "aliran_nutrisi": 1.8,
    },
    Domain.USAGE: {"energy": 32.0, "water": 320.0, "efficiency": 84.0},
}

# Noise scales (σ)
NOISE: dict[Domain, dict[str, float]] = {
    Domain.KOLAM: {"suhu": 0.6, "ph": 0.15, "oksigen": 0.5, "amonia": 0.08},
    Domain.ULAT: {"suhu": 0.5, "ph": 0.12, "oksigen": 0.4, "amonia": 0.15},
    Domain.KANDANG: {"suhu": 1.2, "kelembaban": 4.0, "kualitas_udara": 2.0, "pencahayaan": 2.5},
    Domain.HIDROPONIK: {
        "ph": 0.15, "suhu": 0.8, "kelembaban": 4.0,
        "intensitas_cahaya": 1_500.0, "aliran_nutrisi": 0.2,
    },
    Domain.USAGE: {"energy": 6.0, "water": 60.0, "efficiency": 4.0},
}

# Daily swing amplitude of air/water temperature (°C)
DIURNAL_AMPLITUDE: dict[Domain, float] = {
    Domain.KOLAM: 1.5,
    Domain.ULAT: 1.0,
    Domain.KANDANG: 3.5,
    Domain.HIDROPONIK: 2.0,
}

DECIMALS: dict[str, int] = {"intensitas_cahaya": 0, "pencahayaan": 1, "energy": 1, "water": 0}


def _diurnal(hour_of_day: float) -> float:
    """−1 … 1, peaking mid-afternoon (15:00)."""
    return float(np.cos((hour_of_day - 15.0) / 24.0 * 2.0 * np.pi))


def _generate_section(domain: Domain, hour_of_day: float, rng: np.random.Generator) -> dict[str, object]:
    base = BASELINES[domain]
    noise = NOISE[domain]
    section: dict[str, object] = {}

    for field in SENSOR_FIELDS[domain]:
        key = field.key
        value = base[key] + rng.normal(0, noise[key])
        if key == "suhu":
            value += DIURNAL_AMPLITUDE.get(domain, 0.0) * _diurnal(hour_of_day)
        value = max(0.0, value)
        if rng.random() < DROPOUT_PROB:
            section[key] = MISSING
        else:
            section[key] = round(float(value), DECIMALS.get(key, 2))
    return section


# ── Public API ────────────────────────────────────────────────────────────────

def generate_snapshot(
    rng: np.random.Generator | None = None,
    at: datetime | None = None,
) -> dict[str, dict[str, object]]:
    """One store snapshot for all domains at time `at` (now if None)."""
    rng = rng or np.random.default_rng(settings.SIMULATION_SEED)
    at = at or datetime.now(tz=UTC)
    hour_of_day = at.hour + at.minute / 60.0
    return {domain.value: _generate_section(domain, hour_of_day, rng) for domain in BASELINES}


def generate_history(
    seed: int = settings.SIMULATION_SEED,
    days: int = settings.HISTORY_DAYS,
) -> dict[str, pd.DataFrame]:
    """
    Generate `days` × 24 hourly snapshots.
    Returns one DataFrame per domain key, indexed by timestamp.
    """
    rng = np.random.default_rng(seed)
    total_hours = days * 24
    end_ts = datetime.now(tz=UTC).replace(minute=0, second=0, microsecond=0)
    start_ts = end_ts - timedelta(hours=total_hours - 1)
    timestamps = [start_ts + timedelta(hours=h) for h in range(total_hours)]

    rows: dict[str, list[dict[str, object]]] = {domain.value: [] for domain in BASELINES}
    for ts in timestamps:
        snapshot = generate_snapshot(rng, ts)
        for key, section in snapshot.items():
            rows[key].append(section)

    index = pd.DatetimeIndex(timestamps, name="timestamp")
    return {key: pd.DataFrame(records, index=index) for key, records in rows.items()}
