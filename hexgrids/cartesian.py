from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CartesianPoint:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class CartesianSize:
    width: float
    height: float
