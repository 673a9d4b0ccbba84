"""End-to-end rendering: document shape, paint order, escaping, title block."""
import xml.etree.ElementTree as ET

import pytest

from schemas import Layout
from services.drawing import DrawingConfig, SheetMapper, build_document, render_svg
from services.drawing.primitives import Arc, Rect, Text

SVG = "{http://www.w3.org/2000/svg}"


def test_empty_rooms_gives_placeholder():
    svg = render_svg({"rooms": []})
    assert svg == ('<svg xmlns="http://www.w3.org/2000/svg">'
                   '<text x="10" y="20">No rooms in layout</text></svg>')


def test_placeholder_message_is_configurable():
    svg = render_svg(Layout(rooms=[]), DrawingConfig(empty_message="Nothing to draw"))
    assert "Nothing to draw" in svg


def test_bedroom_example(bedroom_layout):
    svg = render_svg(bedroom_layout)
    root = ET.fromstring(svg)
    m = SheetMapper.for_layout(bedroom_layout)

    assert float(root.get("width")) == pytest.approx(m.svg_w)
    assert float(root.get("height")) == pytest.approx(m.svg_h)
    assert root.get("viewBox") == f"0 0 {root.get('width')} {root.get('height')}"

    texts = [t.text for t in root.iter(SVG + "text")]
    assert "Bedroom" in texts
    assert "120 SF" in texts
    assert texts.count("12'-0\"") == 2        # overall + single detail span
    assert texts.count("10'-0\"") == 2

    arcs = list(root.iter(SVG + "path"))
    assert len(arcs) == 1
    assert arcs[0].get("d").startswith("M 35,")


def test_output_is_well_formed(apartment_layout):
    root = ET.fromstring(render_svg(apartment_layout))
    assert root.tag == SVG + "svg"
    ids = [p.get("id") for p in root.iter(SVG + "pattern")]
    assert ids == ["hatch-ext", "hatch-ext2", "hatch-int"]


def test_render_is_deterministic(apartment_layout):
    assert render_svg(apartment_layout) == render_svg(apartment_layout)


def test_dict_and_model_render_identically(apartment_layout):
    as_dict = apartment_layout.model_dump(by_alias=True)
    assert render_svg(as_dict) == render_svg(apartment_layout)


def test_paint_order(apartment_layout):
    els = build_document(apartment_layout).elements

    def first(pred):
        return next(i for i, e in enumerate(els) if pred(e))

    border = first(lambda e: isinstance(e, Rect) and e.stroke_width == 1.5)
    hatch = first(lambda e: isinstance(e, Rect) and e.fill == "url(#hatch-ext)")
    clear = first(lambda e: isinstance(e, Rect) and e.fill == "#fff")
    outline = first(lambda e: isinstance(e, Rect) and e.stroke_width == 1.0)
    partition = first(lambda e: isinstance(e, Rect) and e.fill == "url(#hatch-int)")
    door = first(lambda e: isinstance(e, Arc))
    dim = first(lambda e: isinstance(e, Text) and e.css_class == "dim-text")
    title = first(lambda e: isinstance(e, Text) and e.css_class == "title-text")
    assert border < hatch < clear < outline < partition < door < dim < title


def test_apartment_walls_and_openings(apartment_layout):
    doc = build_document(apartment_layout)
    partitions = [e for e in doc.elements if isinstance(e, Rect) and e.fill == "url(#hatch-int)"]
    # Living/Bed 1, Living/Bed 2, Bed 1/Bed 2
    assert len(partitions) == 3
    assert doc.count(Arc) == 2


def test_escapes_user_text():
    layout = {
        "title": 'My "Home" <draft>',
        "rooms": [{"name": "A&B<C>", "x": 0, "y": 0, "width": 10, "height": 10}],
    }
    svg = render_svg(layout)
    assert "A&amp;B&lt;C&gt;" in svg
    assert "A&B" not in svg
    assert "<C>" not in svg
    assert "My &quot;Home&quot; &lt;draft&gt;" in svg
    root = ET.fromstring(svg)
    texts = [t.text for t in root.iter(SVG + "text")]
    assert "A&B<C>" in texts


@pytest.mark.parametrize("extra, expected", [
    ({"title": "Unit 4B", "style_preset": "Modern"}, "Unit 4B"),
    ({"style_preset": "Modern"}, "Modern"),
    ({}, "Floor Plan"),
])
def test_title_fallback(extra, expected):
    layout = {"rooms": [{"name": "A", "x": 0, "y": 0, "width": 10, "height": 10}], **extra}
    root = ET.fromstring(render_svg(layout))
    titles = [t.text for t in root.iter(SVG + "text") if t.get("class") == "title-text"]
    assert titles == [expected]


def test_total_area_in_title_block():
    layout = {"rooms": [
        {"name": "A", "x": 0, "y": 0, "width": 12, "height": 10},
        {"name": "B", "x": 12, "y": 0, "width": 5.5, "height": 4},
        {"name": "C", "x": 12, "y": 4, "width": 5.5, "height": 6},
    ]}
    svg = render_svg(layout)
    assert "Total: 175 SF" in svg
    assert "Scale: 1/4\" = 1'-0\" (1:48)" in svg
    assert "Generated by AYN" in svg
    assert "FOR REFERENCE ONLY - NOT FOR CONSTRUCTION" in svg


def test_disclaimer_is_right_aligned(bedroom_layout):
    doc = build_document(bedroom_layout)
    disclaimer = doc.elements[-1]
    m = SheetMapper.for_layout(bedroom_layout)
    assert disclaimer.anchor == "end"
    assert disclaimer.x == pytest.approx(m.svg_w - 20)


def test_walls_list_is_accepted_but_not_drawn(bedroom_layout):
    with_walls = bedroom_layout.model_copy(update={"walls": [
        {"x1": 0, "y1": 0, "x2": 12, "y2": 0, "thickness": 0.5, "isExterior": True},
    ]})
    assert render_svg(with_walls) == render_svg(bedroom_layout)


def test_alternate_scale_changes_canvas(bedroom_layout):
    root = ET.fromstring(render_svg(bedroom_layout, DrawingConfig(scale_factor=10)))
    assert root.get("width") == "190"
    assert root.get("height") == "200"
