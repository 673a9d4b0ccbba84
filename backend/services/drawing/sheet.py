"""
Layout normalization and sheet coordinate mapping.

``overall_dimensions`` settles the building extent in feet; ``SheetMapper``
turns feet into drawing units and places the building inside a bordered
sheet with room for the dimension chains (bottom, right) and the title block.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from schemas import Layout, Room
from .config import DrawingConfig


def derived_extent(rooms: List[Room]) -> Tuple[float, float]:
    """Furthest right and bottom room edges, never below zero."""
    max_x = 0.0
    max_y = 0.0
    for r in rooms:
        max_x = max(max_x, r.right)
        max_y = max(max_y, r.bottom)
    return max_x, max_y


def overall_dimensions(layout: Layout) -> Tuple[float, float]:
    """
    Return ``(overall_width, overall_height)`` in feet.

    A declared dimension wins (the sheet may be larger than the tightest
    fit); a missing or zero one is derived from the rooms, per axis.
    """
    max_x, max_y = derived_extent(layout.rooms or [])
    width = layout.overall_width or max_x
    height = layout.overall_height or max_y
    return width, height


@dataclass
class SheetMapper:
    """Linear foot -> drawing-unit mapping for one sheet."""

    config: DrawingConfig
    overall_width: float
    overall_height: float

    @classmethod
    def for_layout(cls, layout: Layout, config: Optional[DrawingConfig] = None) -> "SheetMapper":
        width, height = overall_dimensions(layout)
        return cls(config or DrawingConfig(), width, height)

    # ------------------------------------------------------------------
    # Sheet geometry
    # ------------------------------------------------------------------

    @property
    def draw_w(self) -> float:
        return self.config.units(self.overall_width)

    @property
    def draw_h(self) -> float:
        return self.config.units(self.overall_height)

    @property
    def ox(self) -> float:
        return self.config.sheet.margin + self.config.sheet.dim_offset

    @property
    def oy(self) -> float:
        return self.config.sheet.margin + self.config.sheet.dim_offset

    @property
    def svg_w(self) -> float:
        s = self.config.sheet
        return self.draw_w + s.margin * 2 + s.dim_offset * 2

    @property
    def svg_h(self) -> float:
        s = self.config.sheet
        return self.draw_h + s.margin * 2 + s.dim_offset * 2 + s.title_block_height

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    def length(self, feet: float) -> float:
        return self.config.units(feet)

    def x(self, feet: float) -> float:
        return self.ox + self.config.units(feet)

    def y(self, feet: float) -> float:
        return self.oy + self.config.units(feet)
