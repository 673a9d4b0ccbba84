"""
Drawing primitives and the SVG document builder.

The renderer appends primitives to an ``SvgDocument`` in paint order and
serializes once at the end, so z-order is exactly the order of ``add``.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union


SVG_NS = "http://www.w3.org/2000/svg"


def escape_xml(s: str) -> str:
    """Escape the characters that would break markup: & < > \"."""
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def num(v: float) -> str:
    """Shortest round-trip form of a number; integral values drop the '.0'."""
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return repr(v) if isinstance(v, float) else str(v)


def _attrs(pairs: List[Tuple[str, object]]) -> str:
    out = []
    for key, value in pairs:
        if value is None:
            continue
        if isinstance(value, (int, float)):
            value = num(value)
        out.append(f'{key}="{value}"')
    return " ".join(out)


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

@dataclass
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str = "none"
    stroke: str = "none"
    stroke_width: Optional[float] = None

    def to_svg(self) -> str:
        return "<rect " + _attrs([
            ("x", self.x), ("y", self.y),
            ("width", self.width), ("height", self.height),
            ("fill", self.fill), ("stroke", self.stroke),
            ("stroke-width", self.stroke_width),
        ]) + "/>"


@dataclass
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke_width: float
    stroke: str = "#000"

    def to_svg(self) -> str:
        return "<line " + _attrs([
            ("x1", self.x1), ("y1", self.y1),
            ("x2", self.x2), ("y2", self.y2),
            ("stroke", self.stroke), ("stroke-width", self.stroke_width),
        ]) + "/>"


@dataclass
class Arc:
    """Elliptical arc from (x1, y1) to (x2, y2) with radius r."""
    x1: float
    y1: float
    x2: float
    y2: float
    r: float
    sweep: int
    stroke_width: float
    stroke: str = "#000"

    @property
    def d(self) -> str:
        return (f"M {num(self.x1)},{num(self.y1)} "
                f"A {num(self.r)},{num(self.r)} 0 0,{self.sweep} "
                f"{num(self.x2)},{num(self.y2)}")

    def to_svg(self) -> str:
        return "<path " + _attrs([
            ("d", self.d), ("fill", "none"),
            ("stroke", self.stroke), ("stroke-width", self.stroke_width),
        ]) + "/>"


@dataclass
class Text:
    x: float
    y: float
    content: str
    css_class: Optional[str] = None
    anchor: Optional[str] = None
    rotate: Optional[float] = None        # degrees, about (x, y)
    escape: bool = True

    def to_svg(self) -> str:
        transform = None
        if self.rotate is not None:
            transform = f"rotate({num(self.rotate)}, {num(self.x)}, {num(self.y)})"
        body = escape_xml(self.content) if self.escape else self.content
        return "<text " + _attrs([
            ("x", self.x), ("y", self.y),
            ("class", self.css_class),
            ("text-anchor", self.anchor),
            ("transform", transform),
        ]) + f">{body}</text>"


Primitive = Union[Rect, Line, Arc, Text]


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

DEFS = """<defs>
  <pattern id="hatch-ext" width="2.5" height="2.5" patternUnits="userSpaceOnUse" patternTransform="rotate(45)">
    <line x1="0" y1="0" x2="0" y2="2.5" stroke="#333" stroke-width="{hatch}"/>
  </pattern>
  <pattern id="hatch-ext2" width="2.5" height="2.5" patternUnits="userSpaceOnUse" patternTransform="rotate(-45)">
    <line x1="0" y1="0" x2="0" y2="2.5" stroke="#333" stroke-width="{hatch}"/>
  </pattern>
  <pattern id="hatch-int" width="3" height="3" patternUnits="userSpaceOnUse" patternTransform="rotate(45)">
    <line x1="0" y1="0" x2="0" y2="3" stroke="#666" stroke-width="{thin}"/>
  </pattern>
  <style>
    text {{ font-family: 'Helvetica', 'Arial', sans-serif; }}
    .room-label {{ font-size: 4.5px; font-weight: 600; fill: #000; text-anchor: middle; }}
    .room-area {{ font-size: 3.8px; font-weight: 400; fill: #666; text-anchor: middle; font-family: 'Courier New', monospace; }}
    .dim-text {{ font-size: 4px; font-weight: 400; fill: #000; text-anchor: middle; font-family: 'Courier New', monospace; }}
    .title-text {{ font-size: 5px; font-weight: 700; fill: #000; }}
    .title-sub {{ font-size: 3.5px; font-weight: 400; fill: #333; }}
  </style>
</defs>"""


@dataclass
class SvgDocument:
    """Ordered list of primitives plus the sheet size and inline defs."""

    width: Optional[float] = None
    height: Optional[float] = None
    defs: str = ""
    elements: List[Primitive] = field(default_factory=list)

    def add(self, *items: Primitive):
        self.elements.extend(items)

    def extend(self, items):
        self.elements.extend(items)

    def count(self, kind) -> int:
        return sum(1 for e in self.elements if isinstance(e, kind))

    def serialize(self) -> str:
        if self.width is None or self.height is None:
            head = f'<svg xmlns="{SVG_NS}">'
        else:
            w, h = num(self.width), num(self.height)
            head = (f'<svg xmlns="{SVG_NS}" viewBox="0 0 {w} {h}" '
                    f'width="{w}" height="{h}" style="background:#fff">')
        parts = [head]
        if self.defs:
            parts.append(self.defs)
        parts.extend(e.to_svg() for e in self.elements)
        sep = "\n" if self.defs else ""
        return sep.join(parts) + sep + "</svg>"
