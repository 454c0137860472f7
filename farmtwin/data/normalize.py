"""
farmtwin/data/normalize.py
──────────────────────────
Reading normalisation at the boundary with the realtime store.

The store reports a missing reading as "-", "", None or a non-numeric
string. Everything downstream works with floats and treats NaN as missing.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real

MISSING_SENTINELS = frozenset({"-", ""})


def is_number(value: object) -> bool:
    """True for finite real numbers (bools excluded)."""
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def to_num(raw: object) -> float:
    """Convert a raw store value to float, NaN when missing or invalid."""
    if raw is None or isinstance(raw, bool):
        return math.nan
    if isinstance(raw, str):
        text = raw.strip()
        if text in MISSING_SENTINELS:
            return math.nan
        try:
            value = float(text)
        except ValueError:
            return math.nan
        return value if math.isfinite(value) else math.nan
    if isinstance(raw, Real):
        value = float(raw)
        return value if math.isfinite(value) else math.nan
    return math.nan


def normalize_extras(extras: Mapping[str, object] | None) -> dict[str, float]:
    """Apply to_num to every companion reading."""
    if not extras:
        return {}
    return {key: to_num(value) for key, value in extras.items()}


def is_missing(raw: object) -> bool:
    return math.isnan(to_num(raw))
