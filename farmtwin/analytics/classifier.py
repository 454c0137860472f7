"""
farmtwin/analytics/classifier.py
─────────────────────────────────
Single entry point turning a reading into a health status.

Flow for classify(domain, metric, value, extras):
  1. Look up the band for (domain, metric).
  2. Pond TAN with finite pH and temperature → compute un-ionized NH3,
     classify it against the pond UIA band and return (no composite rules).
  3. Otherwise classify the raw value against its band.
  4. Let composite rules escalate the level.
  5. Attach the canned message, target range and units.

Missing bands and non-finite readings resolve to "unknown"; nothing here
raises for bad input.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from config.alerts import Level
from config.thresholds import (
    THRESHOLDS,
    BandDefinition,
    Domain,
    Metric,
    ThresholdRegistry,
    resolve_domain,
    resolve_metric,
)
from farmtwin.analytics.ammonia import uia_from_tan
from farmtwin.analytics.bands import classify_by_bands
from farmtwin.analytics.composite import COMPOSITE_RULES, CompositeRule, apply_composite_rules
from farmtwin.data.models import ClassificationResult
from farmtwin.data.normalize import is_number
from farmtwin.i18n.translator import t

logger = logging.getLogger(__name__)


def format_number(x: float) -> str:
    """Lossless display form: 26 → "26", 0.02 → "0.02", 1.5e6 → "1500000", inf → "∞"."""
    x = float(x)
    if math.isinf(x):
        return "∞" if x > 0 else "-∞"
    if x.is_integer() and abs(x) < 1e16:
        return str(int(x))
    return repr(x)


def format_target(band: BandDefinition | None) -> str:
    if band is None:
        return "-"
    return f"{format_number(band.ok_min)}–{format_number(band.ok_max)} {band.units}"


class Classifier:
    """
    Classification facade bound to one threshold registry and rule table.

    Both are read-only, so a single instance can be shared freely.
    """

    def __init__(
        self,
        registry: ThresholdRegistry = THRESHOLDS,
        rules: Mapping[tuple[Domain, Metric], CompositeRule] = COMPOSITE_RULES,
    ):
        self.registry = registry
        self.rules = rules

    def classify(
        self,
        domain: Domain | str,
        metric: Metric | str,
        value: object,
        extras: Mapping[str, object] | None = None,
        *,
        lang: str | None = None,
    ) -> ClassificationResult:
        extras = extras if extras is not None else {}
        d = resolve_domain(domain)
        m = resolve_metric(metric)
        band = self.registry.get(d, m) if d is not None and m is not None else None
        if band is None:
            logger.debug("No band definition for %s/%s", domain, metric)

        if self._wants_uia(d, m, value, extras):
            return self._classify_uia(value, extras, lang)

        level = classify_by_bands(band, value)
        if d is not None and m is not None:
            level = apply_composite_rules(d, m, value, extras, level, self.rules)

        return ClassificationResult(
            level=level,
            message=t(f"level.{level.value}", lang),
            target=format_target(band),
            range=band.ok if band else None,
            units=band.units if band else "",
        )

    def klass(
        self,
        domain: Domain | str,
        metric: Metric | str,
        value: object,
        extras: Mapping[str, object] | None = None,
    ) -> Level:
        return self.classify(domain, metric, value, extras).level

    # ── UIA branch ────────────────────────────────────────────────────────────

    @staticmethod
    def _wants_uia(d: Domain | None, m: Metric | None, value: object, extras: Mapping[str, object]) -> bool:
        return (
            d == Domain.KOLAM
            and m == Metric.AMONIA_TOTAL
            and is_number(value)
            and is_number(extras.get(Metric.PH.value))
            and is_number(extras.get(Metric.SUHU.value))
        )

    def _classify_uia(
        self, tan: float, extras: Mapping[str, object], lang: str | None
    ) -> ClassificationResult:
        ph = extras[Metric.PH.value]
        temp = extras[Metric.SUHU.value]
        equilibrium = uia_from_tan(tan, ph, temp, 0.0)
        band = self.registry.get(Domain.KOLAM, Metric.AMONIA_UIA)
        level = classify_by_bands(band, equilibrium.nh3_mgl)
        logger.debug(
            "UIA %.4f mg/L (f=%.4f) from TAN %s @ pH %s, %s °C → %s",
            equilibrium.nh3_mgl, equilibrium.f_nh3, tan, ph, temp, level.value,
        )
        return ClassificationResult(
            level=level,
            message=t(
                "uia.message",
                lang,
                nh3=equilibrium.nh3_mgl,
                tan=format_number(tan),
                ph=format_number(ph),
                temp=format_number(temp),
            ),
            target=format_target(band),
            range=band.ok if band else None,
            units=band.units if band else "",
            nh3_mgl=equilibrium.nh3_mgl,
            f_nh3=equilibrium.f_nh3,
        )


# ── Module-level API ──────────────────────────────────────────────────────────

default_classifier = Classifier()


def classify(
    domain: Domain | str,
    metric: Metric | str,
    value: object,
    extras: Mapping[str, object] | None = None,
    *,
    lang: str | None = None,
) -> ClassificationResult:
    """Classify one reading with the default registry."""
    return default_classifier.classify(domain, metric, value, extras, lang=lang)


def klass(
    domain: Domain | str,
    metric: Metric | str,
    value: object,
    extras: Mapping[str, object] | None = None,
) -> Level:
    """Level only, for callers that just pick a colour or icon."""
    return default_classifier.klass(domain, metric, value, extras)
