"""Colour maps that turn a value in [0, 1] into an RGB triple."""

from __future__ import annotations

import math


def _original(val: float) -> tuple[float, float, float]:
    nexp = 8.0
    r = math.exp(-nexp * (val - 5.0 / 6.0) ** 2) + 0.25 * math.exp(-nexp * (val + 1.0 / 6.0) ** 2)
    g = math.exp(-nexp * (val - 3.0 / 6.0) ** 2)
    b = math.exp(-nexp * (val - 1.0 / 6.0) ** 2) + 0.25 * math.exp(-nexp * (val - 7.0 / 6.0) ** 2)
    return r, g, b


def _standard(val: float) -> tuple[float, float, float]:
    if val < 0.1:
        return 0.0, 0.0, 4.0 * (val + 0.15)
    if val < 0.35:
        return 0.0, 4.0 * (val - 0.1), 1.0
    if val < 0.6:
        return 4.0 * (val - 0.35), 1.0, 4.0 * (0.6 - val)
    if val < 0.85:
        return 1.0, 4.0 * (0.85 - val), 0.0
    return 4.0 * (1.1 - val), 0.0, 0.0


def _copper(val: float) -> tuple[float, float, float]:
    return 2.0 * val, 1.2 * val, 0.8 * val


def _piecewise(val, x1, x2, x3, x4, above, mid, below):
    if val > x1:
        return above
    if val > x2:
        return (val - x1) / (x2 - x1) if mid else (val - x2) / (x1 - x2)
    return below(val)


def _rainbow(val: float) -> tuple[float, float, float]:
    gam = 0.8
    hi, lo = 0.8, 0.1
    if val > hi:
        amp = 0.3 + 0.7 * (1.0 - val) / (1.0 - hi)
    elif val < lo:
        amp = 0.3 + 0.7 * val / lo
    else:
        amp = 1.0

    x1, x2, x3, x4 = 0.5, 0.325, 0.15, 0.0
    if val > x1:
        r0 = 1.0
    elif val > x2:
        r0 = (val - x2) / (x1 - x2)
    elif val > x3:
        r0 = 0.0
    elif val > x4:
        r0 = (val - x3) / (x4 - x3)
    else:
        r0 = 1.0

    x1, x2, x3, x4 = 0.6625, 0.5, 0.275, 0.15
    if val > x1:
        g0 = 0.0
    elif val > x2:
        g0 = (val - x1) / (x2 - x1)
    elif val > x3:
        g0 = 1.0
    elif val > x4:
        g0 = (val - x4) / (x3 - x4)
    else:
        g0 = 0.0

    x1, x2 = 0.325, 0.275
    if val > x1:
        b0 = 0.0
    elif val > x2:
        b0 = (val - x1) / (x2 - x1)
    else:
        b0 = 1.0

    return (amp * r0) ** gam, (amp * g0) ** gam, (amp * b0) ** gam


def _electric(val: float) -> tuple[float, float, float]:
    if val < 0.1:
        return 0.0, 0.0, 4.0 * (val + 0.125)
    if val < 0.375:
        return 0.0, 4.0 * (val - 0.125), 1.0
    if val < 0.625:
        b = 4.0 * (0.625 - val)
        r = 4.0 * (val - 0.375)
        return r, max(r, b) if r > b else b, b
    if val < 0.875:
        return 1.0, 4.0 * (0.875 - val), 0.0
    return 4.0 * (1.125 - val), 0.0, 0.0


def _contours(val: float) -> tuple[float, float, float]:
    band = 3e-3
    levels = 16
    if any(abs(val - n / levels) < band for n in range(levels + 1)):
        return 0.0, 0.0, 0.0
    return 1.0, 1.0, 1.0


_MAPS = {
    0: _original,
    1: _standard,
    2: _copper,
    3: _rainbow,
    4: _electric,
    5: lambda v: (v, v, v),
    6: lambda v: (1.0 - v, 1.0 - v, 1.0 - v),
    7: _contours,
}


def get_rgb(val: float, colorbar: int = 0, invert: bool = False) -> tuple[float, float, float]:
    """RGB colour of val under colour map colorbar; unknown maps give white."""
    if invert:
        val = 1.0 - val
    colour_map = _MAPS.get(colorbar)
    if colour_map is None:
        return 1.0, 1.0, 1.0
    r, g, b = colour_map(val)
    return float(r), float(g), float(b)