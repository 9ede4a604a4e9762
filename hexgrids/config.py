"""Validated configuration for building hex layouts."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .cartesian import CartesianPoint, CartesianSize
from .hexagonal.layout import FLAT_TOP, POINTY_TOP, Layout, Orientation

logger = logging.getLogger(__name__)


class OrientationName(str, Enum):
    """Named hex orientations available to layouts."""

    POINTY = "pointy"
    FLAT = "flat"

    @property
    def orientation(self) -> Orientation:
        return POINTY_TOP if self is OrientationName.POINTY else FLAT_TOP


class LayoutSettings(BaseModel):
    """Parameters describing how the grid sits in cartesian space."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    orientation: OrientationName = Field(default=OrientationName.POINTY)
    origin_x: float = Field(default=0.0)
    origin_y: float = Field(default=0.0)
    size_x: float = Field(default=1.0, gt=0.0)
    size_y: float = Field(default=1.0, gt=0.0)

    @field_validator("origin_x", "origin_y", "size_x", "size_y")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)

    def to_layout(self) -> Layout:
        """Instantiate the :class:`~hexgrids.hexagonal.layout.Layout` these settings describe."""

        layout = Layout(
            orientation=self.orientation.orientation,
            origin=CartesianPoint(self.origin_x, self.origin_y),
            size=CartesianSize(self.size_x, self.size_y),
        )
        logger.debug(
            "Built %s layout at (%s, %s) with size (%s, %s)",
            self.orientation.value,
            self.origin_x,
            self.origin_y,
            self.size_x,
            self.size_y,
        )
        return layout

    @classmethod
    def from_layout(cls, layout: Layout) -> LayoutSettings:
        if layout.orientation == POINTY_TOP:
            name = OrientationName.POINTY
        elif layout.orientation == FLAT_TOP:
            name = OrientationName.FLAT
        else:
            raise ValueError("Only the pointy-top and flat-top orientations have settings names")
        return cls(
            orientation=name,
            origin_x=layout.origin.x,
            origin_y=layout.origin.y,
            size_x=layout.size.width,
            size_y=layout.size.height,
        )
