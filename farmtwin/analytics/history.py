"""
farmtwin/analytics/history.py
──────────────────────────────
Vectorised classification for historical logs and forecast horizons.

Provides:
  - classify_series : one level per observation of a single metric
  - classify_frame  : levels for every known sensor column of a domain frame
  - level_counts / worst_level : summaries for history tables and cards

Values may still carry store sentinels ("-", None); they are coerced with
pd.to_numeric and end up "unknown".
"""
from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import pandas as pd

from config.alerts import LEVEL_RANK, Level
from config.sensors import SENSOR_FIELDS
from config.thresholds import Domain, Metric, resolve_domain
from farmtwin.analytics.classifier import Classifier, default_classifier

LEVEL_ORDER = [Level.OK.value, Level.WARNING.value, Level.DANGER.value, Level.UNKNOWN.value]


def _numeric(values: pd.Series | Iterable) -> pd.Series:
    series = values if isinstance(values, pd.Series) else pd.Series(list(values))
    return pd.to_numeric(series, errors="coerce").astype(float)


def classify_series(
    domain: Domain | str,
    metric: Metric | str,
    values: pd.Series | Iterable,
    extras: pd.DataFrame | None = None,
    classifier: Classifier | None = None,
) -> pd.Series:
    """
    Classify each observation of `values`.

    Args:
        domain, metric: Registry keys, as for classify()
        values: Readings (sensor history or model forecast)
        extras: Optional companion readings aligned on the same index; column
            names are the extras keys (e.g. "ph", "suhu", "kelembaban")
        classifier: Classifier to use; the default registry if None

    Returns:
        Series of level strings with the index of `values`
    """
    clf = classifier or default_classifier
    numeric = _numeric(values)

    if extras is None:
        rows: list[dict] = [{}] * len(numeric)
    else:
        aligned = extras.reindex(numeric.index).apply(pd.to_numeric, errors="coerce")
        rows = aligned.to_dict("records")

    levels = [
        clf.klass(domain, metric, float(value), row).value
        for value, row in zip(numeric.to_numpy(), rows, strict=True)
    ]
    return pd.Series(levels, index=numeric.index, name=getattr(values, "name", None), dtype=object)


def classify_frame(
    df: pd.DataFrame,
    domain: Domain | str,
    classifier: Classifier | None = None,
) -> pd.DataFrame:
    """
    Classify every column of `df` that is a known store field of `domain`.

    Companion columns (pH/temperature for pond ammonia, humidity for pen
    temperature) are taken from the same frame.
    """
    d = resolve_domain(domain)
    fields = SENSOR_FIELDS.get(d, ()) if d is not None else ()
    out = pd.DataFrame(index=df.index)

    for field in fields:
        if field.key not in df.columns:
            continue
        companions = {
            extras_key: df[store_key]
            for extras_key, store_key in field.companions
            if store_key in df.columns
        }
        extras = pd.DataFrame(companions, index=df.index) if companions else None
        out[field.key] = classify_series(d, field.metric, df[field.key], extras, classifier)

    return out


def level_counts(levels: pd.Series | Iterable) -> pd.Series:
    """Occurrences of each level, all four levels present (zero-filled)."""
    series = levels if isinstance(levels, pd.Series) else pd.Series(list(levels), dtype=object)
    series = series.map(lambda lv: Level(lv).value)
    return series.value_counts().reindex(LEVEL_ORDER, fill_value=0).astype(int)


def worst_level(levels: pd.Series | Iterable) -> Level:
    """Most severe level present; "unknown" for an empty input."""
    members = [Level(lv) for lv in levels]
    if not members:
        return Level.UNKNOWN
    ranks = np.array([LEVEL_RANK[lv] for lv in members])
    return members[int(ranks.argmax())]
