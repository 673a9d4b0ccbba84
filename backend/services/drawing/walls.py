"""
Wall compositor: exterior envelope, room outlines and inferred partitions.

The exterior wall is painted, not modelled: the full building rectangle is
cross-hatched and a white rectangle inset by the wall thickness clears the
interior, leaving only the hatched band.  Interior walls are inferred from
rooms whose edges meet within the adjacency tolerance.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from schemas import Room
from .config import round_half_up
from .primitives import Primitive, Rect, Text
from .sheet import SheetMapper


@dataclass
class InteriorWall:
    """A partition between two rooms, in feet."""

    room_a: int
    room_b: int
    orientation: str        # "V" (runs north-south) or "H" (runs east-west)
    at: float               # shared x for "V", shared y for "H"
    start: float            # span along the wall
    end: float

    @property
    def length(self) -> float:
        return self.end - self.start


# ---------------------------------------------------------------------------
# Adjacency inference
# ---------------------------------------------------------------------------

def _shared_vertical_wall(a: Room, b: Room, tol: float) -> Optional[Tuple[float, float, float]]:
    """Rooms side by side: shared x and the overlapping y-range."""
    if abs(a.right - b.x) < tol:
        shared_x = a.right
    elif abs(b.right - a.x) < tol:
        shared_x = b.right
    else:
        return None
    lo = max(a.y, b.y)
    hi = min(a.bottom, b.bottom)
    if hi > lo:
        return shared_x, lo, hi
    return None


def _shared_horizontal_wall(a: Room, b: Room, tol: float) -> Optional[Tuple[float, float, float]]:
    """Rooms stacked: shared y and the overlapping x-range."""
    if abs(a.bottom - b.y) < tol:
        shared_y = a.bottom
    elif abs(b.bottom - a.y) < tol:
        shared_y = b.bottom
    else:
        return None
    lo = max(a.x, b.x)
    hi = min(a.right, b.right)
    if hi > lo:
        return shared_y, lo, hi
    return None


def infer_interior_walls(rooms: List[Room], tolerance: float = 0.5) -> List[InteriorWall]:
    """
    Find one partition per adjacent room pair.

    Pairs are visited in ``i < j`` input order.  A side-by-side match is
    tried first; once a pair yields a wall it is done, so a pair never
    contributes a second (stacked) wall.
    """
    walls = []
    for i in range(len(rooms)):
        for j in range(i + 1, len(rooms)):
            a, b = rooms[i], rooms[j]

            hit = _shared_vertical_wall(a, b, tolerance)
            if hit:
                walls.append(InteriorWall(i, j, "V", *hit))
                continue

            hit = _shared_horizontal_wall(a, b, tolerance)
            if hit:
                walls.append(InteriorWall(i, j, "H", *hit))
    return walls


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

def exterior_envelope(m: SheetMapper) -> List[Primitive]:
    """Cross-hatched building rectangle with the interior painted out."""
    cfg = m.config
    t = cfg.exterior_wall
    return [
        Rect(m.ox, m.oy, m.draw_w, m.draw_h, fill="url(#hatch-ext)",
             stroke="#000", stroke_width=cfg.weights.cut),
        Rect(m.ox, m.oy, m.draw_w, m.draw_h, fill="url(#hatch-ext2)"),
        Rect(m.ox + t, m.oy + t, m.draw_w - t * 2, m.draw_h - t * 2, fill="#fff"),
    ]


def room_primitives(room: Room, m: SheetMapper) -> List[Primitive]:
    """Outline plus name and area labels centred in the room."""
    rx, ry = m.x(room.x), m.y(room.y)
    rw, rh = m.length(room.width), m.length(room.height)
    cx = rx + rw / 2
    cy = ry + rh / 2
    return [
        Rect(rx, ry, rw, rh, stroke="#000", stroke_width=m.config.weights.medium),
        Text(cx, cy - 2, room.name, css_class="room-label"),
        Text(cx, cy + 3, f"{round_half_up(room.area)} SF", css_class="room-area"),
    ]


def interior_wall_primitive(wall: InteriorWall, m: SheetMapper) -> Rect:
    t = m.config.interior_wall
    weight = m.config.weights.outline
    if wall.orientation == "V":
        return Rect(m.x(wall.at) - t / 2, m.y(wall.start), t, m.length(wall.length),
                    fill="url(#hatch-int)", stroke="#000", stroke_width=weight)
    return Rect(m.x(wall.start), m.y(wall.at) - t / 2, m.length(wall.length), t,
                fill="url(#hatch-int)", stroke="#000", stroke_width=weight)
