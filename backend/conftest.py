"""Shared fixtures for the drawing compiler tests."""
import pytest

from schemas import Layout, Room
from services.drawing import DrawingConfig, SheetMapper


@pytest.fixture
def cfg():
    return DrawingConfig()


@pytest.fixture
def bedroom_layout():
    """Single 12x10 bedroom with a west door."""
    return Layout.model_validate({
        "rooms": [{"name": "Bedroom", "x": 0, "y": 0, "width": 12, "height": 10}],
        "openings": [{"type": "door", "x": 0, "y": 4, "width": 3, "wall": "west"}],
    })


@pytest.fixture
def side_by_side():
    """Two 10x10 rooms sharing the x=10 edge."""
    return [
        Room(name="A", x=0, y=0, width=10, height=10),
        Room(name="B", x=10, y=0, width=10, height=10),
    ]


@pytest.fixture
def apartment_layout():
    """Living room over two bedrooms, with a window and two doors."""
    return Layout.model_validate({
        "title": "Unit 4B",
        "rooms": [
            {"name": "Living", "x": 0, "y": 0, "width": 24, "height": 14, "type": "living"},
            {"name": "Bed 1", "x": 0, "y": 14, "width": 12, "height": 11},
            {"name": "Bed 2", "x": 12, "y": 14, "width": 12, "height": 11},
        ],
        "openings": [
            {"type": "window", "x": 6, "y": 0, "width": 5, "wall": "north"},
            {"type": "door", "x": 4, "y": 14, "width": 3, "wall": "south", "swingDirection": "in"},
            {"type": "door", "x": 12, "y": 18, "width": 2.5, "wall": "east"},
        ],
    })


@pytest.fixture
def mapper(bedroom_layout, cfg):
    return SheetMapper.for_layout(bedroom_layout, cfg)
