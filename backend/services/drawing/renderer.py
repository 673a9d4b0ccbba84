"""
Floor-plan drawing compiler.

Turns a room layout into one dimensioned, scaled, annotated SVG sheet.
The pipeline is strictly linear and all state is local to one call:

  1. Normalize overall dimensions
  2. Map feet to sheet units
  3. Border and exterior envelope (hatch, then interior cleared)
  4. Room outlines and labels
  5. Inferred interior walls
  6. Door and window symbols
  7. Dimension chains
  8. Title block
"""

import logging
from typing import Optional, Union

from schemas import Layout
from .config import DrawingConfig
from .dimensions import chain_labels, detail_chain, overall_chain
from .openings import opening_primitives
from .primitives import DEFS, Rect, SvgDocument, Text
from .sheet import SheetMapper
from .title_block import title_block
from .walls import (
    exterior_envelope,
    infer_interior_walls,
    interior_wall_primitive,
    room_primitives,
)

logger = logging.getLogger(__name__)


def empty_document(config: DrawingConfig) -> SvgDocument:
    doc = SvgDocument()
    doc.add(Text(10, 20, config.empty_message))
    return doc


def build_document(layout: Layout, config: Optional[DrawingConfig] = None) -> SvgDocument:
    """Assemble every primitive of the sheet in paint order."""
    config = config or DrawingConfig()
    rooms = layout.rooms or []
    if not rooms:
        return empty_document(config)

    m = SheetMapper.for_layout(layout, config)
    doc = SvgDocument(
        width=m.svg_w,
        height=m.svg_h,
        defs=DEFS.format(hatch=config.weights.hatch, thin=config.weights.thin),
    )

    inset = config.sheet.border_inset
    doc.add(Rect(inset, inset, m.svg_w - inset * 2, m.svg_h - inset * 2,
                 stroke="#000", stroke_width=config.sheet.border_weight))
    doc.extend(exterior_envelope(m))

    for room in rooms:
        doc.extend(room_primitives(room, m))

    walls = infer_interior_walls(rooms, config.adjacency_tolerance_ft)
    doc.extend(interior_wall_primitive(w, m) for w in walls)

    for op in layout.openings or []:
        doc.extend(opening_primitives(op, m))

    doc.extend(overall_chain(m))
    doc.extend(detail_chain(rooms, m))
    doc.extend(title_block(layout, m))

    logger.debug(f"Sheet {m.svg_w:.1f}x{m.svg_h:.1f}: {len(rooms)} rooms, "
                 f"{len(walls)} interior walls, {len(layout.openings or [])} openings")
    bottom, right = chain_labels(rooms, m)
    logger.debug(f"Dimension chains: bottom {bottom}, right {right}")
    return doc


def render_svg(layout: Union[Layout, dict], config: Optional[DrawingConfig] = None) -> str:
    """
    Render a layout to a complete SVG document string.

    Args:
        layout: ``Layout`` model or a plain dict in the same wire shape.
        config: Scale, weights and sheet constants; defaults to 1:48.

    Returns:
        The SVG markup.  A layout with no rooms yields a small placeholder
        document carrying a visible message instead of an error.
    """
    if not isinstance(layout, Layout):
        layout = Layout.model_validate(layout)
    return build_document(layout, config).serialize()
