"""
Floor-plan drawing compiler.

Renders a structured room layout (feet) to a dimensioned architectural
SVG sheet at 1/4" = 1'-0".
"""

from .config import DrawingConfig, LineWeights, SheetLayout, DimensionStyle, format_dim, ft_to_units
from .diagnostics import diagnose, detect_overlaps
from .renderer import build_document, render_svg
from .sheet import SheetMapper, overall_dimensions
from .walls import InteriorWall, infer_interior_walls

__all__ = [
    "DrawingConfig",
    "LineWeights",
    "SheetLayout",
    "DimensionStyle",
    "format_dim",
    "ft_to_units",
    "diagnose",
    "detect_overlaps",
    "build_document",
    "render_svg",
    "SheetMapper",
    "overall_dimensions",
    "InteriorWall",
    "infer_interior_walls",
]
