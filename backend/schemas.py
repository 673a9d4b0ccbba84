"""Pydantic schemas for the floor-plan layout and the render API."""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from shapely.geometry import box


# ---------- Layout ----------
class Room(BaseModel):
    name: str
    x: float = Field(..., description="Top-left corner, feet")
    y: float = Field(..., description="Top-left corner, feet")
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    type: Optional[str] = None

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def footprint(self):
        """Room rectangle as a Shapely box (feet)."""
        return box(self.x, self.y, self.right, self.bottom)


class Opening(BaseModel):
    type: Literal["door", "window"]
    x: float
    y: float
    width: float = Field(..., gt=0)
    wall: Literal["north", "south", "east", "west"]
    swing_direction: Optional[str] = Field(default=None, alias="swingDirection")

    class Config:
        populate_by_name = True

    @property
    def on_vertical_wall(self) -> bool:
        return self.wall in ("east", "west")


class WallSegment(BaseModel):
    """Explicit wall geometry. Accepted for compatibility; walls are inferred."""
    x1: float
    y1: float
    x2: float
    y2: float
    thickness: Optional[float] = None
    is_exterior: bool = Field(default=False, alias="isExterior")

    class Config:
        populate_by_name = True


class Layout(BaseModel):
    rooms: Optional[List[Room]] = None
    walls: Optional[List[WallSegment]] = None
    openings: Optional[List[Opening]] = None
    overall_width: Optional[float] = Field(default=None, ge=0, alias="overallWidth")
    overall_height: Optional[float] = Field(default=None, ge=0, alias="overallHeight")
    style_preset: Optional[str] = None
    title: Optional[str] = None

    class Config:
        populate_by_name = True


# ---------- Render API ----------
class RenderRequest(BaseModel):
    layout: Optional[Layout] = None


class RenderResponse(BaseModel):
    svg: str
    warnings: List[str] = []
