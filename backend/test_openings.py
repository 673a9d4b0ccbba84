"""Door and window symbols per wall side."""
import pytest

from schemas import Opening
from services.drawing.openings import opening_primitives
from services.drawing.primitives import Arc, Line, Rect


def _op(kind, wall, x=0, y=4, width=3, **kw):
    return Opening(type=kind, x=x, y=y, width=width, wall=wall, **kw)


@pytest.mark.parametrize("wall", ["east", "west"])
def test_door_on_vertical_wall(mapper, wall):
    gap, leaf, arc = opening_primitives(_op("door", wall), mapper)
    t = mapper.config.interior_wall
    x, y, w = mapper.x(0), mapper.y(4), mapper.length(3)

    assert isinstance(gap, Rect) and gap.fill == "#fff"
    assert gap.x == pytest.approx(x - t)
    assert gap.width == pytest.approx(2 * t)
    assert gap.height == pytest.approx(w)

    assert isinstance(leaf, Line)
    assert leaf.x1 == leaf.x2 == pytest.approx(x)
    assert leaf.y2 - leaf.y1 == pytest.approx(w)
    assert leaf.stroke_width == mapper.config.weights.outline

    assert isinstance(arc, Arc)
    assert arc.r == pytest.approx(w)
    assert arc.sweep == 1
    assert (arc.x2, arc.y2) == (pytest.approx(x + w), pytest.approx(y + w))


@pytest.mark.parametrize("wall", ["north", "south"])
def test_door_on_horizontal_wall(mapper, wall):
    gap, leaf, arc = opening_primitives(_op("door", wall, x=2, y=0), mapper)
    t = mapper.config.interior_wall
    x, y, w = mapper.x(2), mapper.y(0), mapper.length(3)

    assert gap.y == pytest.approx(y - t)
    assert gap.height == pytest.approx(2 * t)
    assert gap.width == pytest.approx(w)
    assert leaf.y1 == leaf.y2 == pytest.approx(y)
    assert arc.sweep == 0
    assert (arc.x2, arc.y2) == (pytest.approx(x + w), pytest.approx(y - w))


def test_swing_direction_does_not_change_symbol(mapper):
    plain = opening_primitives(_op("door", "west"), mapper)
    flipped = opening_primitives(_op("door", "west", swingDirection="right"), mapper)
    assert plain == flipped


def test_window_on_vertical_wall(mapper):
    gap, *glazing = opening_primitives(_op("window", "east", x=12, y=2, width=4), mapper)
    t = mapper.config.exterior_wall
    x = mapper.x(12)
    assert gap.x == pytest.approx(x - t / 2)
    assert gap.width == pytest.approx(t)
    assert len(glazing) == 3
    assert [ln.x1 - x for ln in glazing] == [pytest.approx(d) for d in (-1.5, 0, 1.5)]
    assert all(ln.x1 == ln.x2 for ln in glazing)
    assert all(ln.stroke_width == mapper.config.weights.thin for ln in glazing)


def test_window_on_horizontal_wall(mapper):
    gap, *glazing = opening_primitives(_op("window", "north", x=3, y=0, width=4), mapper)
    y = mapper.y(0)
    assert gap.height == pytest.approx(mapper.config.exterior_wall)
    assert [ln.y1 - y for ln in glazing] == [pytest.approx(d) for d in (-1.5, 0, 1.5)]
    assert all(ln.x2 - ln.x1 == pytest.approx(mapper.length(4)) for ln in glazing)


def test_swing_direction_alias_and_name():
    assert Opening.model_validate(
        {"type": "door", "x": 0, "y": 0, "width": 3, "wall": "north", "swingDirection": "in"}
    ).swing_direction == "in"


def test_invalid_opening_rejected():
    from pydantic import ValidationError
    with pytest.raises(ValidationError):
        Opening(type="skylight", x=0, y=0, width=3, wall="north")
    with pytest.raises(ValidationError):
        Opening(type="door", x=0, y=0, width=0, wall="north")
    with pytest.raises(ValidationError):
        Opening(type="door", x=0, y=0, width=3, wall="up")
