"""
Non-blocking layout diagnostics.

These checks never alter the drawing or fail a render; they produce short
human-readable warnings the API returns alongside the SVG.
"""

import logging
from typing import List, Tuple

from shapely.geometry import Point, box
from shapely.ops import unary_union

from schemas import Layout, Room
from .sheet import overall_dimensions

logger = logging.getLogger(__name__)

OVERLAP_TOLERANCE_SQFT = 0.25
EPS = 1e-6


def detect_overlaps(rooms: List[Room],
                    tolerance: float = OVERLAP_TOLERANCE_SQFT) -> List[Tuple[int, int]]:
    """
    Return ``(i, j)`` index pairs of rooms whose interiors overlap.

    Rooms that only share an edge have zero-area intersection and are
    not reported.
    """
    overlaps = []
    for i in range(len(rooms)):
        for j in range(i + 1, len(rooms)):
            inter = rooms[i].footprint.intersection(rooms[j].footprint)
            if inter.area > tolerance:
                overlaps.append((i, j))
    return overlaps


def rooms_outside_envelope(layout: Layout) -> List[int]:
    """Indices of rooms reaching past the declared overall width/height."""
    width, height = overall_dimensions(layout)
    envelope = box(0, 0, width, height).buffer(EPS)
    return [i for i, r in enumerate(layout.rooms or [])
            if not envelope.contains(r.footprint)]


def stray_openings(layout: Layout) -> List[int]:
    """Indices of openings whose anchor is off every room and the envelope edge."""
    rooms = layout.rooms or []
    if not rooms:
        return []
    width, height = overall_dimensions(layout)
    covered = unary_union([r.footprint for r in rooms] + [box(0, 0, width, height)])
    covered = covered.buffer(EPS)
    return [i for i, op in enumerate(layout.openings or [])
            if not covered.contains(Point(op.x, op.y))]


def diagnose(layout: Layout) -> List[str]:
    """Run every check and return the warnings in a stable order."""
    rooms = layout.rooms or []
    warnings = []
    for i, j in detect_overlaps(rooms):
        warnings.append(f"Rooms '{rooms[i].name}' and '{rooms[j].name}' overlap")
    for i in rooms_outside_envelope(layout):
        warnings.append(f"Room '{rooms[i].name}' extends beyond the overall dimensions")
    openings = layout.openings or []
    for i in stray_openings(layout):
        warnings.append(f"{openings[i].type.capitalize()} #{i + 1} on the "
                        f"{openings[i].wall} wall lies outside the building")
    for w in warnings:
        logger.warning(w)
    return warnings
