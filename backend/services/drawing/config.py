"""
Drawing configuration: scale, sheet layout, line weights and wall constants.

Every magic number the renderer uses lives on ``DrawingConfig`` so a caller
can draw the same layout at another scale or with other weights without
touching module state.  Defaults reproduce a 1/4" = 1'-0" (1:48) sheet.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Tuple
import json
import math


# ---------------------------------------------------------------------------
# Nested groups
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LineWeights:
    """Stroke widths in drawing units, heaviest first."""

    cut: float = 2.5                       # exterior envelope outline
    outline: float = 1.4                   # interior walls, door leaves
    medium: float = 1.0                    # room outlines, swing arcs
    dimension: float = 0.6                 # dimension lines and ticks
    hatch: float = 0.4                     # exterior hatch pattern
    thin: float = 0.3                      # window glazing, interior hatch


@dataclass(frozen=True)
class SheetLayout:
    """Sheet margins and reserved bands, in drawing units."""

    margin: float = 20.0
    title_block_height: float = 30.0
    dim_offset: float = 15.0               # room for two dimension chains
    tick: float = 2.5                      # overall-chain tick half length
    border_inset: float = 2.0
    border_weight: float = 1.5


@dataclass(frozen=True)
class DimensionStyle:
    """Placement of the two dimension-chain levels outside the building."""

    detail_offset: float = 4.0             # detail chain distance from outline
    overall_offset: float = 12.0           # overall chain distance from outline
    detail_tick: float = 1.5
    min_span_ft: float = 1.0               # shorter detail spans are skipped
    overall_label_gap: float = 5.0
    detail_label_gap: float = 2.0          # bottom chain: label above the line
    detail_side_label_gap: float = 3.0     # right chain: label right of the line


# ---------------------------------------------------------------------------
# Main config
# ---------------------------------------------------------------------------

@dataclass
class DrawingConfig:
    """All rendering constants in one place."""

    # --- Scale ---
    scale_factor: float = 6.35             # drawing units per foot (1:48)
    scale_note: str = "1/4\" = 1'-0\" (1:48)"

    # --- Walls (feet) ---
    exterior_wall_ft: float = 0.542        # 6.5"
    interior_wall_ft: float = 0.375        # 4.5"
    adjacency_tolerance_ft: float = 0.5

    # --- Openings ---
    window_line_offsets: Tuple[float, ...] = (-1.5, 0.0, 1.5)

    # --- Groups ---
    weights: LineWeights = field(default_factory=LineWeights)
    sheet: SheetLayout = field(default_factory=SheetLayout)
    dimensions: DimensionStyle = field(default_factory=DimensionStyle)

    # --- Title block text ---
    default_title: str = "Floor Plan"
    generator_credit: str = "AYN"
    disclaimer: str = "FOR REFERENCE ONLY - NOT FOR CONSTRUCTION"
    empty_message: str = "No rooms in layout"

    def units(self, feet: float) -> float:
        """Convert a length in feet to drawing units."""
        return feet * self.scale_factor

    @property
    def exterior_wall(self) -> float:
        return self.units(self.exterior_wall_ft)

    @property
    def interior_wall(self) -> float:
        return self.units(self.interior_wall_ft)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "DrawingConfig":
        """Build a config from a (possibly partial) dict; unknown keys are ignored."""
        kwargs = {k: v for k, v in d.items() if k in cls.__dataclass_fields__}
        if isinstance(kwargs.get("weights"), dict):
            kwargs["weights"] = _pick(LineWeights, kwargs["weights"])
        if isinstance(kwargs.get("sheet"), dict):
            kwargs["sheet"] = _pick(SheetLayout, kwargs["sheet"])
        if isinstance(kwargs.get("dimensions"), dict):
            kwargs["dimensions"] = _pick(DimensionStyle, kwargs["dimensions"])
        if "window_line_offsets" in kwargs:
            kwargs["window_line_offsets"] = tuple(kwargs["window_line_offsets"])
        return cls(**kwargs)

    def save(self, path: Path):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Path) -> "DrawingConfig":
        with open(path) as f:
            return cls.from_dict(json.load(f))


def _pick(cls, d: dict):
    return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


DEFAULT_CONFIG = DrawingConfig()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def ft_to_units(feet: float, config: DrawingConfig = DEFAULT_CONFIG) -> float:
    """Map a real-world length in feet to drawing units."""
    return config.units(feet)


def round_half_up(value: float) -> int:
    """Round half up (toward +inf), matching how the labels have always rounded."""
    return int(math.floor(value + 0.5))


def format_dim(feet: float) -> str:
    """
    Format a length in feet as a feet-and-inches dimension string.

    Inches are rounded to the nearest whole inch and a rounded 12" carries
    into the next foot: 6.5 -> 6'-6", 5.999 -> 6'-0", never 5'-12".
    """
    whole = math.floor(feet)
    inches = round_half_up((feet - whole) * 12)
    if inches == 12:
        return f"{whole + 1}'-0\""
    return f"{whole}'-{inches}\""
