"""
Door and window symbols.

Each opening clears a white gap in its wall and draws its symbol on top:
a door leaf with a quarter-circle swing, or a window as three parallel
glazing lines.  Orientation comes from the wall side only; the symbol
always swings the same way for a given side.
"""

from typing import List

from schemas import Opening
from .primitives import Arc, Line, Primitive, Rect
from .sheet import SheetMapper


def door_primitives(op: Opening, m: SheetMapper) -> List[Primitive]:
    x, y, w = m.x(op.x), m.y(op.y), m.length(op.width)
    t = m.config.interior_wall
    weights = m.config.weights
    if op.on_vertical_wall:
        return [
            Rect(x - t, y, t * 2, w, fill="#fff"),
            Line(x, y, x, y + w, weights.outline),
            Arc(x, y, x + w, y + w, w, 1, weights.medium),
        ]
    return [
        Rect(x, y - t, w, t * 2, fill="#fff"),
        Line(x, y, x + w, y, weights.outline),
        Arc(x, y, x + w, y - w, w, 0, weights.medium),
    ]


def window_primitives(op: Opening, m: SheetMapper) -> List[Primitive]:
    x, y, w = m.x(op.x), m.y(op.y), m.length(op.width)
    t = m.config.exterior_wall
    thin = m.config.weights.thin
    offsets = m.config.window_line_offsets
    if op.on_vertical_wall:
        out = [Rect(x - t / 2, y, t, w, fill="#fff")]
        out.extend(Line(x + d, y, x + d, y + w, thin) for d in offsets)
        return out
    out = [Rect(x, y - t / 2, w, t, fill="#fff")]
    out.extend(Line(x, y + d, x + w, y + d, thin) for d in offsets)
    return out


def opening_primitives(op: Opening, m: SheetMapper) -> List[Primitive]:
    if op.type == "door":
        return door_primitives(op, m)
    return window_primitives(op, m)
