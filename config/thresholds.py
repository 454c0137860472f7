"""
config/thresholds.py
────────────────────
Cultivation domains, sensor metrics and their health bands.

Band semantics (per metric):
  ok         : [min, max] closed interval → healthy
  warn_low   : [warn_low, min)            → warning, below → danger
  warn_high  : (max, warn_high]           → warning, above → danger
  A missing warn bound leaves that side open: leaving `ok` there is only
  ever a warning.

Reference points:
  - Pond DO ≥5 mg/L ideal, 3–5 mg/L marginal (Boyd 2003; Mallya 2007).
  - Pond pH 6.5–9.0; un-ionized NH3 harmful from 0.05 mg/L (US EPA 2013).
  - Tilapia culture 26–30 °C.
  - Hydroponic leafy greens pH 5.5–6.5, solution 18–25 °C.
  - Poultry heat stress >30 °C, worse above 75 %RH; air NH3 <25 ppm.
  - Tubifex (silk worm): pH ~6.9–7.6, 26–28 °C, DO ~2.7–5 mg/L.
"""
from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Domain(str, Enum):
    KOLAM = "kolam"            # fish pond
    HIDROPONIK = "hidroponik"  # hydroponic rack
    KANDANG = "kandang"        # livestock (poultry) pen
    ULAT = "ulat"              # silk worm tank
    USAGE = "usage"            # aggregate resource usage


class Metric(str, Enum):
    SUHU = "suhu"
    PH = "ph"
    OKSIGEN = "oksigen"
    AMONIA = "amonia"
    AMONIA_TOTAL = "amonia_total"
    AMONIA_UIA = "amonia_uia"
    EC = "ec"
    KELEMBABAN = "kelembaban"
    INTENSITAS_CAHAYA = "intensitas_cahaya"
    ENERGY = "energy"
    WATER = "water"
    EFFICIENCY = "efficiency"


# Alternate domain keys found in the realtime store
DOMAIN_ALIASES: dict[str, Domain] = {
    "cacing_sutra": Domain.ULAT,
}


def resolve_domain(domain: Domain | str) -> Domain | None:
    """Map a Domain or its string key (or alias) to a Domain, None if unsupported."""
    if isinstance(domain, Domain):
        return domain
    if not isinstance(domain, str):
        return None
    if domain in DOMAIN_ALIASES:
        return DOMAIN_ALIASES[domain]
    try:
        return Domain(domain)
    except ValueError:
        return None


def resolve_metric(metric: Metric | str) -> Metric | None:
    if isinstance(metric, Metric):
        return metric
    if not isinstance(metric, str):
        return None
    try:
        return Metric(metric)
    except ValueError:
        return None


@dataclass(frozen=True)
class BandDefinition:
    """Healthy interval plus optional outer warning limits for one metric."""
    ok: tuple[float, float]
    warn_low: float | None = None
    warn_high: float | None = None
    units: str = ""
    note: str | None = None

    def __post_init__(self) -> None:
        ok_min, ok_max = self.ok
        if not ok_min <= ok_max:
            raise ValueError(f"ok.min must be <= ok.max, got {self.ok}")
        for name in ("warn_low", "warn_high"):
            limit = getattr(self, name)
            if limit is not None and not math.isfinite(limit):
                raise ValueError(f"{name} must be finite or None, got {limit}")
        if self.warn_low is not None and self.warn_low > ok_min:
            raise ValueError(f"warn_low {self.warn_low} lies above ok.min {ok_min}")
        if self.warn_high is not None and self.warn_high < ok_max:
            raise ValueError(f"warn_high {self.warn_high} lies below ok.max {ok_max}")

    @property
    def ok_min(self) -> float:
        return self.ok[0]

    @property
    def ok_max(self) -> float:
        return self.ok[1]


@dataclass(frozen=True)
class HeatStressLimits:
    """Combined temperature/humidity limits for pen heat stress."""
    danger_temp: float       # value > danger_temp …
    danger_humidity: float   # … and humidity >= danger_humidity → danger
    warning_temp: float      # value >= warning_temp …
    warning_humidity: float  # … and humidity >= warning_humidity → at least warning


PEN_HEAT_STRESS = HeatStressLimits(
    danger_temp=30.0,
    danger_humidity=75.0,
    warning_temp=28.0,
    warning_humidity=70.0,
)


class ThresholdRegistry:
    """
    Read-only Domain → Metric → BandDefinition map.

    Built once and shared; lookups with unsupported keys return None rather
    than raising.
    """

    def __init__(self, bands: Mapping[Domain, Mapping[Metric, BandDefinition]]):
        frozen: dict[Domain, Mapping[Metric, BandDefinition]] = {}
        for domain, metrics in bands.items():
            domain = Domain(domain)
            frozen[domain] = MappingProxyType({Metric(m): band for m, band in metrics.items()})
        self._bands: Mapping[Domain, Mapping[Metric, BandDefinition]] = MappingProxyType(frozen)

    def get(self, domain: Domain | str, metric: Metric | str) -> BandDefinition | None:
        d = resolve_domain(domain)
        m = resolve_metric(metric)
        if d is None or m is None:
            return None
        return self._bands.get(d, {}).get(m)

    def domains(self) -> list[Domain]:
        return list(self._bands.keys())

    def metrics(self, domain: Domain | str) -> list[Metric]:
        d = resolve_domain(domain)
        if d is None:
            return []
        return list(self._bands.get(d, {}).keys())

    def items(self) -> Iterator[tuple[Domain, Metric, BandDefinition]]:
        for domain, metrics in self._bands.items():
            for metric, band in metrics.items():
                yield domain, metric, band

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self.get(*key) is not None

    def __len__(self) -> int:
        return sum(len(m) for m in self._bands.values())


# ── Shared bands ──────────────────────────────────────────────────────────────
_RH_BAND = BandDefinition(
    ok=(50.0, 70.0), warn_low=40.0, warn_high=80.0, units="%RH",
    note="High RH with high temperature raises heat load and respiratory disease risk.",
)


def build_default_registry() -> ThresholdRegistry:
    """Construct the production threshold registry."""
    return ThresholdRegistry({
        # ── Fish pond (freshwater / tilapia) ─────────────────────────────────
        Domain.KOLAM: {
            Metric.SUHU: BandDefinition(
                ok=(26.0, 30.0), warn_low=24.0, warn_high=32.0, units="°C",
                note="Growth slows below 24 °C; heat stress risk above 32 °C.",
            ),
            Metric.PH: BandDefinition(ok=(6.5, 9.0), warn_low=6.0, warn_high=9.5, units="pH"),
            Metric.OKSIGEN: BandDefinition(
                ok=(5.0, math.inf), warn_low=3.0, warn_high=None, units="mg/L",
                note="Keep aeration on; DO <3 mg/L is dangerous, especially before dawn.",
            ),
            Metric.AMONIA_UIA: BandDefinition(
                ok=(0.0, 0.02), warn_low=0.0, warn_high=0.05, units="mg/L NH3-N",
                note="NH3 ≥0.05 mg/L damages gills; ≥0.2 mg/L dangerous; ≥1 mg/L severe.",
            ),
            # Coarse TAN fallback, used only without pH and temperature
            Metric.AMONIA_TOTAL: BandDefinition(
                ok=(0.0, 0.5), warn_low=0.0, warn_high=1.0, units="mg/L TAN",
                note="Prefer the UIA classification (needs pH and temperature).",
            ),
        },
        # ── Hydroponic rack (leafy greens) ───────────────────────────────────
        Domain.HIDROPONIK: {
            Metric.PH: BandDefinition(ok=(5.5, 6.5), warn_low=5.0, warn_high=7.0, units="pH"),
            Metric.SUHU: BandDefinition(
                ok=(18.0, 25.0), warn_low=16.0, warn_high=28.0, units="°C",
                note="Warm solution lowers dissolved O2 and raises Pythium/root rot risk.",
            ),
            Metric.EC: BandDefinition(
                ok=(1.2, 2.5), warn_low=0.8, warn_high=3.0, units="mS/cm",
                note="Adjust per crop variety.",
            ),
            Metric.KELEMBABAN: _RH_BAND,
            Metric.INTENSITAS_CAHAYA: BandDefinition(
                ok=(10_000.0, 20_000.0), warn_low=8_000.0, warn_high=30_000.0, units="lux",
            ),
        },
        # ── Livestock pen (adult poultry) ────────────────────────────────────
        Domain.KANDANG: {
            Metric.SUHU: BandDefinition(
                ok=(20.0, 27.0), warn_low=18.0, warn_high=30.0, units="°C",
                note="Heat stress rises above 30 °C, especially with RH >75%.",
            ),
            Metric.KELEMBABAN: _RH_BAND,
            Metric.AMONIA: BandDefinition(
                ok=(0.0, 10.0), warn_low=0.0, warn_high=25.0, units="ppm",
                note="Target <25 ppm; above that is harmful to birds and workers.",
            ),
            Metric.INTENSITAS_CAHAYA: BandDefinition(
                ok=(5.0, 20.0), warn_low=3.0, warn_high=50.0, units="lux",
                note="Depends on phase: layers 10–30 lux, brooding 20+, grow-out 5–10.",
            ),
        },
        # ── Silk worm tank ───────────────────────────────────────────────────
        Domain.ULAT: {
            Metric.SUHU: BandDefinition(ok=(26.0, 28.0), warn_low=24.0, warn_high=30.0, units="°C"),
            Metric.PH: BandDefinition(ok=(6.9, 7.6), warn_low=6.5, warn_high=8.0, units="pH"),
            Metric.OKSIGEN: BandDefinition(ok=(2.8, 5.0), warn_low=2.0, warn_high=None, units="mg/L"),
            Metric.AMONIA_TOTAL: BandDefinition(ok=(0.0, 1.0), warn_low=0.0, warn_high=3.0, units="mg/L TAN"),
        },
        # ── Aggregate resource usage ─────────────────────────────────────────
        Domain.USAGE: {
            Metric.ENERGY: BandDefinition(ok=(0.0, 50.0), warn_low=0.0, warn_high=100.0, units="kWh"),
            Metric.WATER: BandDefinition(ok=(0.0, 500.0), warn_low=0.0, warn_high=1_000.0, units="L"),
            Metric.EFFICIENCY: BandDefinition(ok=(75.0, 100.0), warn_low=50.0, warn_high=None, units="%"),
        },
    })


THRESHOLDS = build_default_registry()
