"""Title block band at the foot of the sheet."""

from typing import List

from schemas import Layout
from .config import round_half_up
from .primitives import Line, Primitive, Text, escape_xml
from .sheet import SheetMapper


def sheet_title(layout: Layout, default: str = "Floor Plan") -> str:
    return layout.title or layout.style_preset or default


def total_area(layout: Layout) -> float:
    """Sum of room areas in square feet (overlaps are not subtracted)."""
    return sum(r.area for r in layout.rooms or [])


def title_block(layout: Layout, m: SheetMapper) -> List[Primitive]:
    cfg = m.config
    s = cfg.sheet
    top = m.svg_h - s.title_block_height - s.border_inset
    note = (f"Scale: {cfg.scale_note}  |  Total: {round_half_up(total_area(layout))} SF"
            f"  |  Generated by {escape_xml(cfg.generator_credit)}")
    return [
        Line(s.border_inset, top, m.svg_w - s.border_inset, top, s.border_weight),
        Text(s.margin, top + 10, sheet_title(layout, cfg.default_title), css_class="title-text"),
        Text(s.margin, top + 18, note, css_class="title-sub", escape=False),
        Text(m.svg_w - s.margin, top + 10, cfg.disclaimer, css_class="title-sub", anchor="end"),
    ]
