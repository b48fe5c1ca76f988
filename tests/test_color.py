import logging
import re

from conftest import solid

from figma_simplify.models import parse_node
from figma_simplify.models.figma import Color, Paint
from figma_simplify.models.simplified import GradientFill, ImageFill, PatternFill
from figma_simplify.transformers.color import (
    DEFAULT_GRADIENT,
    build_simplified_fills,
    fill_to_css,
    format_color,
    gradient_angle,
    parse_paint,
)


RED_TO_BLUE = [
    {"position": 0, "color": {"r": 1, "g": 0, "b": 0, "a": 1}},
    {"position": 1, "color": {"r": 0, "g": 0, "b": 1, "a": 1}},
]


def paint(**data) -> Paint:
    return Paint.model_validate(data)


def test_format_color_opaque_is_hex():
    assert format_color(Color(r=1, g=0, b=0)) == "#ff0000"
    assert format_color(Color(r=0.5, g=0.5, b=0.5)) == "#808080"


def test_format_color_translucent_is_rgba():
    assert format_color(Color(r=0, g=0, b=0), 0.5) == "rgba(0, 0, 0, 0.5)"
    assert format_color(Color(r=1, g=1, b=1, a=0.5), 0.5) == "rgba(255, 255, 255, 0.25)"


def test_format_color_alpha_keeps_three_decimals():
    assert format_color(Color(r=0, g=0, b=0, a=0.12345)) == "rgba(0, 0, 0, 0.123)"


def test_format_color_missing_color_is_black():
    assert format_color(None) == "#000000"


def test_format_color_hex_round_trip():
    steps = [i / 20 for i in range(21)]
    for r in steps:
        for g in steps[::5]:
            for b in steps[::4]:
                hex_value = format_color(Color(r=r, g=g, b=b))
                assert re.fullmatch(r"#[0-9a-f]{6}", hex_value)
                decoded = [int(hex_value[i:i + 2], 16) for i in (1, 3, 5)]
                for channel, original in zip(decoded, (r, g, b)):
                    assert abs(channel - original * 255) <= 1


def test_format_color_rgba_alpha_round_trip():
    for opacity in (0.001, 0.1, 0.333, 0.5, 0.9999, 0.75):
        value = format_color(Color(r=0.2, g=0.4, b=0.6), opacity)
        if value.startswith("#"):
            assert opacity > 0.999
            continue
        alpha = float(value.rstrip(")").split(",")[-1])
        assert abs(alpha - opacity) <= 0.001


def test_gradients_linear_angle_from_transform():
    fill = parse_paint(paint(
        type="GRADIENT_LINEAR",
        gradientStops=RED_TO_BLUE,
        gradientTransform=[[0, -1, 0], [1, 0, 0]],
    ))
    assert isinstance(fill, GradientFill)
    assert fill.angle == 90
    assert fill.gradient == "linear-gradient(90deg, #ff0000 0%, #0000ff 100%)"
    assert [s.color for s in fill.stops] == ["#ff0000", "#0000ff"]


def test_gradients_angle_is_normalized():
    # atan2(-1, 0) = -90deg
    assert gradient_angle(paint(gradientTransform=[[0, 1, 0], [-1, 0, 0]])) == 270


def test_gradients_angle_from_handles_without_transform():
    angle = gradient_angle(paint(gradientHandlePositions=[{"x": 0, "y": 0.5}, {"x": 1, "y": 0.5}]))
    assert angle == 90


def test_gradients_angle_defaults_to_zero():
    assert gradient_angle(paint()) == 0


def test_gradients_radial_and_conic():
    radial = parse_paint(paint(type="GRADIENT_RADIAL", gradientStops=RED_TO_BLUE))
    assert radial.gradient == "radial-gradient(circle, #ff0000 0%, #0000ff 100%)"
    angular = parse_paint(paint(type="GRADIENT_ANGULAR", gradientStops=RED_TO_BLUE))
    assert angular.gradient == "conic-gradient(from 0deg, #ff0000 0%, #0000ff 100%)"


def test_gradients_fractional_stop_positions():
    stops = [
        {"position": 0.5, "color": {"r": 1, "g": 1, "b": 1, "a": 1}},
        {"position": 0.255, "color": {"r": 0, "g": 0, "b": 0, "a": 1}},
    ]
    fill = parse_paint(paint(type="GRADIENT_LINEAR", gradientStops=stops))
    assert "#ffffff 50%" in fill.gradient
    assert "#000000 25.5%" in fill.gradient


def test_gradients_paint_opacity_applies_to_stops():
    fill = parse_paint(paint(type="GRADIENT_LINEAR", gradientStops=RED_TO_BLUE, opacity=0.5))
    assert fill.stops[0].color == "rgba(255, 0, 0, 0.5)"


def test_gradients_no_stops_uses_default():
    fill = parse_paint(paint(type="GRADIENT_DIAMOND"))
    assert fill.gradient == DEFAULT_GRADIENT


def test_images_foreground_image():
    fill = parse_paint(paint(type="IMAGE", imageRef="abc", scaleMode="FIT"))
    assert isinstance(fill, ImageFill)
    assert fill.object_fit == "contain"
    assert fill.is_background is False
    assert fill.background_size is None


def test_images_background_image_when_node_has_children():
    fill = parse_paint(paint(type="IMAGE", imageRef="abc", scaleMode="FILL"), has_children=True)
    assert fill.background_size == "cover"
    assert fill.background_repeat == "no-repeat"
    assert fill.is_background is True


def test_images_stretch():
    assert parse_paint(paint(type="IMAGE", scaleMode="STRETCH")).object_fit == "fill"
    assert parse_paint(paint(type="IMAGE", scaleMode="STRETCH"), True).background_size == "100% 100%"


def test_images_tile_requires_dimensions():
    fill = parse_paint(paint(type="IMAGE", imageRef="abc", scaleMode="TILE", scalingFactor=0.5))
    assert fill.is_background is True
    assert fill.background_repeat == "repeat"
    assert fill.background_size == "calc(var(--original-width) * 0.5) calc(var(--original-height) * 0.5)"
    assert fill.image_download_arguments.requires_image_dimensions is True


def test_images_image_transform_needs_cropping():
    transform = [[0.5, 0, 0.25], [0, 0.5, 0.25]]
    fill = parse_paint(paint(type="IMAGE", imageRef="abc", imageTransform=transform))
    args = fill.image_download_arguments
    assert args.needs_cropping is True
    assert args.crop_transform == transform
    assert re.fullmatch(r"[0-9a-f]{6}", args.filename_suffix)
    again = parse_paint(paint(type="IMAGE", imageRef="abc", imageTransform=transform))
    assert again.image_download_arguments.filename_suffix == args.filename_suffix


def test_pattern_fill():
    fill = parse_paint(paint(
        type="PATTERN",
        sourceNodeId="5:5",
        scalingFactor=0.5,
        horizontalAlignment="CENTER",
        verticalAlignment="END",
    ))
    assert isinstance(fill, PatternFill)
    assert fill.pattern_source.node_id == "5:5"
    assert fill.background_size == "50%"
    assert fill.background_position == "center bottom"


def test_unknown_paint_type_degrades_to_black(caplog):
    with caplog.at_level(logging.WARNING):
        assert parse_paint(paint(type="VIDEO")) == "#000000"
    assert "VIDEO" in caplog.text


def test_solid_without_color_is_black():
    assert parse_paint(paint(type="SOLID")) == "#000000"


def test_fills_are_visible_and_topmost_first():
    node = parse_node({
        "type": "RECTANGLE",
        "fills": [solid(1, 0, 0), solid(0, 0, 1, visible=False), solid(0, 1, 0)],
    })
    assert build_simplified_fills(node) == ["#00ff00", "#ff0000"]


def test_fills_of_node_without_fills():
    assert build_simplified_fills(parse_node({"type": "CANVAS"})) == []


def test_fill_to_css():
    assert fill_to_css("#ffffff") == "#ffffff"
    image = parse_paint(paint(type="IMAGE", imageRef="abc"))
    assert fill_to_css(image) == "url(abc)"
