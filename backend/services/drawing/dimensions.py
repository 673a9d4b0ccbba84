"""
Dimension engine: overall and detail chains along the bottom and right.

The detail chain breaks each axis at every distinct room edge and sits
closest to the building; the overall chain spans the whole building one
level further out.
"""

from dataclasses import dataclass
from typing import List, Tuple

from schemas import Room
from .config import format_dim
from .primitives import Line, Primitive, Text
from .sheet import SheetMapper


@dataclass
class DimSpan:
    start: float            # feet
    end: float

    @property
    def length(self) -> float:
        return self.end - self.start

    @property
    def label(self) -> str:
        return format_dim(self.length)


def edge_breaks(rooms: List[Room], axis: str) -> List[float]:
    """Distinct room-edge coordinates along ``axis`` ("x" or "y"), ascending."""
    if axis == "x":
        edges = [v for r in rooms for v in (r.x, r.right)]
    else:
        edges = [v for r in rooms for v in (r.y, r.bottom)]
    return sorted(set(edges))


def detail_spans(rooms: List[Room], axis: str, min_span: float = 1.0) -> List[DimSpan]:
    """Consecutive-break spans, dropping those shorter than ``min_span`` feet."""
    breaks = edge_breaks(rooms, axis)
    spans = []
    for lo, hi in zip(breaks, breaks[1:]):
        if hi - lo < min_span:
            continue
        spans.append(DimSpan(lo, hi))
    return spans


# ---------------------------------------------------------------------------
# Chains
# ---------------------------------------------------------------------------

def _horizontal_dim(x1: float, x2: float, y: float, tick: float,
                    weight: float) -> List[Primitive]:
    return [
        Line(x1, y, x2, y, weight),
        Line(x1, y - tick, x1, y + tick, weight),
        Line(x2, y - tick, x2, y + tick, weight),
    ]


def _vertical_dim(y1: float, y2: float, x: float, tick: float,
                  weight: float) -> List[Primitive]:
    return [
        Line(x, y1, x, y2, weight),
        Line(x - tick, y1, x + tick, y1, weight),
        Line(x - tick, y2, x + tick, y2, weight),
    ]


def overall_chain(m: SheetMapper) -> List[Primitive]:
    """Total width along the bottom and total height along the right."""
    style = m.config.dimensions
    weight = m.config.weights.dimension
    tick = m.config.sheet.tick
    gap = style.overall_label_gap
    out: List[Primitive] = []

    bottom_y = m.oy + m.draw_h + style.overall_offset
    out.extend(_horizontal_dim(m.ox, m.ox + m.draw_w, bottom_y, tick, weight))
    out.append(Text(m.ox + m.draw_w / 2, bottom_y + gap, format_dim(m.overall_width),
                    css_class="dim-text", escape=False))

    right_x = m.ox + m.draw_w + style.overall_offset
    out.extend(_vertical_dim(m.oy, m.oy + m.draw_h, right_x, tick, weight))
    out.append(Text(right_x + gap, m.oy + m.draw_h / 2, format_dim(m.overall_height),
                    css_class="dim-text", rotate=90, escape=False))
    return out


def detail_chain(rooms: List[Room], m: SheetMapper) -> List[Primitive]:
    """Per-segment spans between distinct room edges on both axes."""
    style = m.config.dimensions
    weight = m.config.weights.dimension
    tick = style.detail_tick
    out: List[Primitive] = []

    detail_y = m.oy + m.draw_h + style.detail_offset
    for span in detail_spans(rooms, "x", style.min_span_ft):
        x1, x2 = m.x(span.start), m.x(span.end)
        out.extend(_horizontal_dim(x1, x2, detail_y, tick, weight))
        out.append(Text((x1 + x2) / 2, detail_y - style.detail_label_gap, span.label,
                        css_class="dim-text", escape=False))

    detail_x = m.ox + m.draw_w + style.detail_offset
    for span in detail_spans(rooms, "y", style.min_span_ft):
        y1, y2 = m.y(span.start), m.y(span.end)
        out.extend(_vertical_dim(y1, y2, detail_x, tick, weight))
        out.append(Text(detail_x + style.detail_side_label_gap, (y1 + y2) / 2, span.label,
                        css_class="dim-text", rotate=90, escape=False))
    return out


def chain_labels(rooms: List[Room], m: SheetMapper) -> Tuple[List[str], List[str]]:
    """(bottom, right) chain labels, overall span first."""
    style = m.config.dimensions
    bottom = [format_dim(m.overall_width)] + [s.label for s in detail_spans(rooms, "x", style.min_span_ft)]
    right = [format_dim(m.overall_height)] + [s.label for s in detail_spans(rooms, "y", style.min_span_ft)]
    return bottom, right
