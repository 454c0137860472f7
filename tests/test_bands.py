"""
tests/test_bands.py
────────────────────
Tests for the four-level banded classifier.
"""
import math

import numpy as np
import pytest

from config.alerts import Level
from config.thresholds import THRESHOLDS, BandDefinition
from farmtwin.analytics.bands import classify_by_bands


class TestWarningZones:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (20.0, Level.OK),
            (27.0, Level.OK),
            (23.5, Level.OK),
            (19.0, Level.WARNING),
            (18.0, Level.WARNING),
            (17.0, Level.DANGER),
            (28.0, Level.WARNING),
            (30.0, Level.WARNING),
            (31.0, Level.DANGER),
        ],
    )
    def test_pen_band(self, pen_band, value, expected):
        assert classify_by_bands(pen_band, value) == expected

    def test_boundaries_inclusive_for_every_registry_band(self):
        for _domain, _metric, band in THRESHOLDS.items():
            assert classify_by_bands(band, band.ok_min) == Level.OK
            if math.isfinite(band.ok_max):
                assert classify_by_bands(band, band.ok_max) == Level.OK

    def test_warn_bounds_stay_warning_for_every_registry_band(self):
        for _domain, _metric, band in THRESHOLDS.items():
            if band.warn_low is not None and band.warn_low < band.ok_min:
                assert classify_by_bands(band, band.warn_low) == Level.WARNING
            if band.warn_high is not None and band.warn_high > band.ok_max:
                assert classify_by_bands(band, band.warn_high) == Level.WARNING


class TestOpenEndedSides:
    @pytest.fixture
    def oxygen_band(self):
        return BandDefinition(ok=(5.0, math.inf), warn_low=3.0, warn_high=None, units="mg/L")

    def test_huge_value_is_ok(self, oxygen_band):
        assert classify_by_bands(oxygen_band, 100_000.0) == Level.OK

    def test_low_side_warning(self, oxygen_band):
        assert classify_by_bands(oxygen_band, 3.5) == Level.WARNING

    def test_low_side_danger(self, oxygen_band):
        assert classify_by_bands(oxygen_band, 2.0) == Level.DANGER

    def test_open_ceiling_never_escalates(self):
        band = BandDefinition(ok=(2.8, 5.0), warn_low=2.0, warn_high=None)
        assert classify_by_bands(band, 5.1) == Level.WARNING
        assert classify_by_bands(band, 1_000.0) == Level.WARNING

    def test_open_floor_never_escalates(self):
        band = BandDefinition(ok=(10.0, 20.0), warn_low=None, warn_high=25.0)
        assert classify_by_bands(band, 9.0) == Level.WARNING
        assert classify_by_bands(band, -1_000.0) == Level.WARNING
        assert classify_by_bands(band, 26.0) == Level.DANGER

    def test_no_warn_bounds_at_all(self):
        band = BandDefinition(ok=(0.0, 1.0))
        assert classify_by_bands(band, 0.5) == Level.OK
        assert classify_by_bands(band, -5.0) == Level.WARNING
        assert classify_by_bands(band, 5.0) == Level.WARNING

    def test_warn_low_equal_to_ok_min(self):
        """UIA/TAN bands set warn_low == ok.min == 0: anything negative is danger."""
        band = THRESHOLDS.get("kolam", "amonia_uia")
        assert classify_by_bands(band, 0.0) == Level.OK
        assert classify_by_bands(band, -0.01) == Level.DANGER


class TestUnknown:
    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, None, "-", "7.0", True])
    def test_non_finite_values(self, pen_band, value):
        assert classify_by_bands(pen_band, value) == Level.UNKNOWN

    def test_missing_band(self):
        assert classify_by_bands(None, 5.0) == Level.UNKNOWN

    def test_numpy_scalars_accepted(self, pen_band):
        assert classify_by_bands(pen_band, np.float64(25.0)) == Level.OK
        assert classify_by_bands(pen_band, np.int64(31)) == Level.DANGER
        assert classify_by_bands(pen_band, np.float64("nan")) == Level.UNKNOWN
