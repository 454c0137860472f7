"""
farmtwin/analytics/ammonia.py
──────────────────────────────
Un-ionized ammonia (UIA, NH3) from Total Ammonia Nitrogen.

Emerson et al. (1975), freshwater form:
  pKa   = 0.09018 + 2729.92 / (273.15 + T)
  f_NH3 = 1 / (1 + 10^(pKa − pH))
  NH3   = TAN × f_NH3          (mg/L as N)

Warmer water lowers pKa, so at a fixed pH a larger share of TAN is in the
toxic un-ionized form; f_NH3 rises monotonically with pH toward 1.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from farmtwin.data.normalize import is_number

KELVIN_OFFSET = 273.15
EMERSON_A = 0.09018
EMERSON_B = 2729.92


@dataclass(frozen=True)
class AmmoniaEquilibrium:
    f_nh3: float     # fraction of TAN present as NH3, in [0, 1]
    nh3_mgl: float   # un-ionized ammonia, mg/L NH3-N

    @property
    def is_valid(self) -> bool:
        return not (math.isnan(self.f_nh3) or math.isnan(self.nh3_mgl))


INVALID = AmmoniaEquilibrium(f_nh3=math.nan, nh3_mgl=math.nan)


def ammonia_pka(temp_c: float) -> float:
    """Dissociation constant pKa of NH4+ at `temp_c` °C (freshwater)."""
    return EMERSON_A + EMERSON_B / (KELVIN_OFFSET + temp_c)


def uia_from_tan(
    tan_mgl: float,
    ph: float,
    temp_c: float,
    salinity_ppt: float = 0.0,
) -> AmmoniaEquilibrium:
    """
    Split a TAN reading into its un-ionized fraction and concentration.

    Args:
        tan_mgl: Total Ammonia Nitrogen, mg/L as N
        ph: Water pH
        temp_c: Water temperature, °C
        salinity_ppt: Salinity in ppt; reserved, the freshwater form ignores it

    Returns:
        AmmoniaEquilibrium; both fields NaN if any of the first three inputs
        is not a finite number.
    """
    if not (is_number(tan_mgl) and is_number(ph) and is_number(temp_c)):
        return INVALID
    if temp_c <= -KELVIN_OFFSET:
        return INVALID

    pka = ammonia_pka(temp_c)
    try:
        f_nh3 = 1.0 / (1.0 + 10.0 ** (pka - ph))
    except OverflowError:
        # pH far below pKa: effectively all ammonium
        f_nh3 = 0.0
    return AmmoniaEquilibrium(f_nh3=f_nh3, nh3_mgl=tan_mgl * f_nh3)
