"""Rounding of fractional cube coordinates onto grid cells.

Each component is rounded half away from zero (``2.5 -> 3``, ``-2.5 -> -3``),
unlike :func:`round`, which rounds half to even. The component with the
largest rounding error is then recomputed from the other two so the result
sums to zero. Ties fall through to recomputing ``s``.
"""

from __future__ import annotations

import math

import numpy as np

from .coords import Cube


def round_half_away(value: float) -> int:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def cube_round(q: float, r: float, s: float) -> Cube:
    rq, rr, rs = round_half_away(q), round_half_away(r), round_half_away(s)
    dq, dr, ds = abs(rq - q), abs(rr - r), abs(rs - s)
    if dq > dr and dq > ds:
        rq = -rr - rs
    elif dq > ds:
        rr = -rq - rs
    else:
        rs = -rq - rr
    return Cube(rq, rr, rs)


def round_half_away_array(values: np.ndarray) -> np.ndarray:
    values = np.asarray(values, dtype=float)
    magnitude = np.abs(values)
    whole = np.floor(magnitude)
    whole = whole + (magnitude - whole >= 0.5)
    return np.copysign(whole, values)


def cube_round_array(q, r, s) -> np.ndarray:
    """Vectorised :func:`cube_round`; returns an ``(n, 3)`` integer array."""

    q = np.asarray(q, dtype=float)
    r = np.asarray(r, dtype=float)
    s = np.asarray(s, dtype=float)
    rq, rr, rs = round_half_away_array(q), round_half_away_array(r), round_half_away_array(s)
    dq, dr, ds = np.abs(rq - q), np.abs(rr - r), np.abs(rs - s)

    fix_q = (dq > dr) & (dq > ds)
    fix_r = ~fix_q & (dq > ds)
    fix_s = ~fix_q & ~fix_r

    out_q = np.where(fix_q, -rr - rs, rq)
    out_r = np.where(fix_r, -rq - rs, rr)
    out_s = np.where(fix_s, -rq - rr, rs)
    return np.stack([out_q, out_r, out_s], axis=-1).astype(np.int64).reshape(-1, 3)
