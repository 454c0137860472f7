"""
farmtwin/analytics/composite.py
────────────────────────────────
Cross-variable rules that can raise a single-variable verdict.

A rule sees the reading, its companion readings and the level the banded
classifier produced, and proposes a level. The proposal is only ever taken
when it ranks higher than the current level.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from config.alerts import Level, rank_of
from config.thresholds import PEN_HEAT_STRESS, Domain, HeatStressLimits, Metric
from farmtwin.data.normalize import is_number

CompositeRule = Callable[[float, Mapping[str, object], Level], Level]


def escalate(current: Level | str, candidate: Level | str) -> Level:
    """Return whichever of the two levels is more severe."""
    current, candidate = Level(current), Level(candidate)
    return candidate if rank_of(candidate) > rank_of(current) else current


def heat_stress_rule(limits: HeatStressLimits = PEN_HEAT_STRESS) -> CompositeRule:
    """Pen air temperature combined with relative humidity (extras["kelembaban"])."""

    def rule(value: float, extras: Mapping[str, object], current: Level) -> Level:
        humidity = extras.get(Metric.KELEMBABAN.value)
        if not (is_number(value) and is_number(humidity)):
            return current
        if value > limits.danger_temp and humidity >= limits.danger_humidity:
            return Level.DANGER
        if value >= limits.warning_temp and humidity >= limits.warning_humidity:
            return Level.WARNING
        return current

    return rule


COMPOSITE_RULES: Mapping[tuple[Domain, Metric], CompositeRule] = MappingProxyType({
    (Domain.KANDANG, Metric.SUHU): heat_stress_rule(),
})


def apply_composite_rules(
    domain: Domain,
    metric: Metric,
    value: float,
    extras: Mapping[str, object],
    current: Level,
    rules: Mapping[tuple[Domain, Metric], CompositeRule] = COMPOSITE_RULES,
) -> Level:
    """Run the rule registered for (domain, metric), if any; never lowers `current`."""
    rule = rules.get((domain, metric))
    if rule is None:
        return current
    return escalate(current, rule(value, extras, current))
