"""
farmtwin/analytics/bands.py
────────────────────────────
Four-level banded classification of a single reading.

  ok       : inside the closed `ok` interval
  warning  : between a warn bound and `ok`, or past an open side of `ok`
  danger   : beyond warn_low / warn_high
  unknown  : no band, or the reading is not a finite number
"""
from __future__ import annotations

from config.alerts import Level
from config.thresholds import BandDefinition
from farmtwin.data.normalize import is_number


def classify_by_bands(band: BandDefinition | None, value: object) -> Level:
    """
    Classify `value` against `band`.

    The checks run in a fixed order: the warning zones must be tested
    before the open-side fallbacks so that exactly warn_low / warn_high
    stay in `warning`.
    """
    if band is None or not is_number(value):
        return Level.UNKNOWN

    ok_min, ok_max = band.ok
    warn_low, warn_high = band.warn_low, band.warn_high

    if ok_min <= value <= ok_max:
        return Level.OK
    if warn_low is not None and warn_low <= value < ok_min:
        return Level.WARNING
    if warn_high is not None and ok_max < value <= warn_high:
        return Level.WARNING
    if warn_low is not None and value < warn_low:
        return Level.DANGER
    if warn_high is not None and value > warn_high:
        return Level.DANGER
    # Open side: leaving `ok` there never reaches danger
    if warn_low is None and value < ok_min:
        return Level.WARNING
    if warn_high is None and value > ok_max:
        return Level.WARNING
    return Level.UNKNOWN
