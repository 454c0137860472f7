"""
tests/test_history.py
──────────────────────
Tests for series/frame classification of history and forecasts.
"""
import math

import numpy as np
import pandas as pd

from config.alerts import Level
from config.thresholds import BandDefinition, Domain, Metric, ThresholdRegistry
from farmtwin.analytics.classifier import Classifier
from farmtwin.analytics.history import classify_frame, classify_series, level_counts, worst_level


class TestClassifySeries:
    def test_levels_per_observation(self):
        values = pd.Series([25.0, 28.0, 31.0, 17.0], index=list("abcd"), name="suhu")
        levels = classify_series("kandang", "suhu", values)
        assert list(levels) == ["ok", "warning", "danger", "danger"]
        assert list(levels.index) == list("abcd")
        assert levels.name == "suhu"

    def test_sentinels_become_unknown(self):
        levels = classify_series("kolam", "ph", ["-", None, "7.5", "abc", 10.0])
        assert list(levels) == ["unknown", "unknown", "ok", "unknown", "danger"]

    def test_accepts_numpy_array(self):
        levels = classify_series("kolam", "oksigen", np.array([6.0, 4.0, 2.0, np.nan]))
        assert list(levels) == ["ok", "warning", "danger", "unknown"]

    def test_extras_drive_composite_rule(self):
        index = pd.date_range("2024-06-01", periods=3, freq="h")
        temps = pd.Series([29.0, 31.0, 31.0], index=index)
        extras = pd.DataFrame({"kelembaban": [72.0, 80.0, "-"]}, index=index)
        levels = classify_series("kandang", "suhu", temps, extras)
        assert list(levels) == ["warning", "danger", "danger"]

    def test_extras_drive_uia(self):
        tan = pd.Series([1.2, 1.2, 0.7])
        extras = pd.DataFrame({"ph": [8.2, 7.0, np.nan], "suhu": [28.0, 26.0, 28.0]})
        levels = classify_series("kolam", "amonia_total", tan, extras)
        assert list(levels) == ["danger", "ok", "warning"]

    def test_forecast_values_use_same_contract(self):
        forecast = pd.Series([5.6, 5.2, 4.8, 4.4], index=pd.RangeIndex(1, 5, name="step"))
        levels = classify_series(Domain.KOLAM, Metric.OKSIGEN, forecast)
        assert list(levels) == ["ok", "ok", "warning", "warning"]

    def test_custom_classifier(self):
        registry = ThresholdRegistry({Domain.KOLAM: {Metric.PH: BandDefinition(ok=(7.0, 7.2))}})
        levels = classify_series("kolam", "ph", [7.1, 7.5], classifier=Classifier(registry=registry))
        assert list(levels) == ["ok", "warning"]

    def test_empty_series(self):
        levels = classify_series("kolam", "ph", pd.Series([], dtype=float))
        assert levels.empty


class TestClassifyFrame:
    def test_known_columns_only(self):
        df = pd.DataFrame({
            "suhu": [24.0, 31.0],
            "kelembaban": [60.0, 80.0],
            "kualitas_udara": [5.0, 30.0],
            "note": ["a", "b"],
        })
        levels = classify_frame(df, "kandang")
        assert list(levels.columns) == ["suhu", "kelembaban", "kualitas_udara"]
        assert list(levels["suhu"]) == ["ok", "danger"]
        assert list(levels["kelembaban"]) == ["ok", "warning"]
        assert list(levels["kualitas_udara"]) == ["ok", "danger"]

    def test_pond_ammonia_uses_companions(self):
        df = pd.DataFrame({"suhu": [28.0], "ph": [8.2], "amonia": [1.2]})
        levels = classify_frame(df, "kolam")
        assert levels.loc[0, "amonia"] == "danger"
        assert levels.loc[0, "ph"] == "ok"

    def test_pond_ammonia_without_ph_column(self):
        df = pd.DataFrame({"suhu": [28.0], "amonia": [0.7]})
        levels = classify_frame(df, "kolam")
        assert levels.loc[0, "amonia"] == "warning"

    def test_unknown_domain_empty(self):
        df = pd.DataFrame({"suhu": [24.0]})
        assert classify_frame(df, "nonexistent").columns.empty

    def test_simulated_history(self):
        from farmtwin.data.simulator import generate_history

        history = generate_history(seed=7, days=1)
        levels = classify_frame(history["hidroponik"], Domain.HIDROPONIK)
        assert len(levels) == 24
        assert set(levels.columns) == {"ph", "suhu", "kelembaban", "intensitas_cahaya", "aliran_nutrisi"}
        assert set(np.unique(levels.to_numpy())) <= {"ok", "warning", "danger", "unknown"}


class TestSummaries:
    def test_level_counts_zero_filled(self):
        counts = level_counts(["ok", "ok", "danger"])
        assert counts.to_dict() == {"ok": 2, "warning": 0, "danger": 1, "unknown": 0}

    def test_level_counts_accepts_enum(self):
        counts = level_counts(pd.Series([Level.WARNING, Level.UNKNOWN]))
        assert counts["warning"] == 1
        assert counts["unknown"] == 1

    def test_worst_level(self):
        assert worst_level(["ok", "warning", "unknown"]) == Level.WARNING
        assert worst_level(pd.Series(["ok", "danger", "warning"])) == Level.DANGER
        assert worst_level(["unknown"]) == Level.UNKNOWN

    def test_worst_level_empty(self):
        assert worst_level([]) == Level.UNKNOWN

    def test_counts_total(self):
        levels = classify_series("kolam", "suhu", [27.0, 25.0, 23.0, math.nan])
        assert int(level_counts(levels).sum()) == 4
