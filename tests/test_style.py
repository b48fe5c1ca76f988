from conftest import solid

from figma_simplify.models import parse_node
from figma_simplify.transformers.style import build_border_radius, build_simplified_strokes


def test_stroke_descriptor():
    node = parse_node({
        "type": "RECTANGLE",
        "strokes": [solid(0, 0, 0), solid(1, 0, 0, visible=False)],
        "strokeWeight": 2,
        "strokeDashes": [4, 2],
        "strokeAlign": "INSIDE",
        "strokeCap": "ROUND",
        "strokeJoin": "BEVEL",
    })
    stroke = build_simplified_strokes(node)
    assert stroke.to_dict() == {
        "colors": ["#000000"],
        "strokeWeight": "2px",
        "strokeDashes": [4.0, 2.0],
        "strokeAlign": "inside",
        "strokeCap": "round",
        "strokeJoin": "bevel",
    }


def test_unknown_cap_and_join_use_css_defaults():
    node = parse_node({
        "type": "VECTOR",
        "strokes": [solid(0, 0, 0)],
        "strokeCap": "ARROW_LINES",
        "strokeJoin": "WHATEVER",
    })
    stroke = build_simplified_strokes(node)
    assert stroke.stroke_cap == "butt"
    assert stroke.stroke_join == "miter"


def test_individual_stroke_weights():
    node = parse_node({
        "type": "FRAME",
        "strokes": [solid(0, 0, 0)],
        "individualStrokeWeights": {"top": 1, "right": 0, "bottom": 1, "left": 0},
    })
    assert build_simplified_strokes(node).stroke_weights == "1px 0px"


def test_no_visible_strokes():
    node = parse_node({"type": "RECTANGLE", "strokes": [solid(0, 0, 0, visible=False)], "strokeWeight": 1})
    stroke = build_simplified_strokes(node)
    assert stroke.colors == []
    assert stroke.stroke_weight is None


def test_nodes_without_stroke_traits():
    assert build_simplified_strokes(parse_node({"type": "CANVAS"})).colors == []


def test_zero_weight_is_omitted():
    node = parse_node({"type": "RECTANGLE", "strokes": [solid(0, 0, 0)], "strokeWeight": 0})
    assert build_simplified_strokes(node).stroke_weight is None


def test_border_radius_uniform():
    assert build_border_radius(parse_node({"type": "RECTANGLE", "cornerRadius": 8})) == "8px"


def test_border_radius_per_corner():
    node = parse_node({"type": "RECTANGLE", "rectangleCornerRadii": [8, 8, 0, 0]})
    assert build_border_radius(node) == "8px 8px 0px 0px"


def test_border_radius_equal_corners_collapse():
    node = parse_node({"type": "RECTANGLE", "rectangleCornerRadii": [4, 4, 4, 4]})
    assert build_border_radius(node) == "4px"


def test_border_radius_none():
    assert build_border_radius(parse_node({"type": "RECTANGLE"})) is None
    assert build_border_radius(parse_node({"type": "TEXT"})) is None
