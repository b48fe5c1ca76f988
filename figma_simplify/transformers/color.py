"""
Paint → CSS-ready fill values.

Solid paints collapse to ``#rrggbb`` (opaque) or ``rgba(r, g, b, a)``,
gradients to CSS gradient strings plus their angle and stops, image and
pattern paints to background / object-fit descriptors with the metadata a
downstream image fetcher needs.
"""

import hashlib
import json
import logging
import math
from typing import Optional

from figma_simplify.models.figma import Color, Paint, RawNode
from figma_simplify.models.simplified import (
    GradientFill,
    GradientStop,
    ImageDownloadArguments,
    ImageFill,
    PatternFill,
    PatternSource,
    SimplifiedFill,
)
from figma_simplify.utils.common import format_number, is_visible
from figma_simplify.utils.identity import has_children


logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#000000"
DEFAULT_GRADIENT = "linear-gradient(0deg, #000000 0%, #ffffff 100%)"

GRADIENT_TYPES = ("GRADIENT_LINEAR", "GRADIENT_RADIAL", "GRADIENT_ANGULAR", "GRADIENT_DIAMOND")


def _channel(value: float) -> int:
    value = min(max(value, 0.0), 1.0)
    return int(value * 255 + 0.5)


def format_alpha(alpha: float) -> str:
    return f"{round(alpha, 3):g}"


def format_color(color: Optional[Color], opacity: float = 1.0) -> str:
    """Hex when fully opaque, rgba() otherwise. Alpha is ``color.a * opacity``."""
    if color is None:
        return DEFAULT_COLOR
    r, g, b = _channel(color.r), _channel(color.g), _channel(color.b)
    a = round(min(max(color.a * opacity, 0.0), 1.0), 3)
    if a >= 1.0:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"rgba({r}, {g}, {b}, {format_alpha(a)})"


# =====================================================
# Gradients
# =====================================================

def normalize_angle(degrees: float) -> float:
    angle = round(degrees % 360, 2)
    return 0.0 if angle >= 360 else angle


def gradient_angle(paint: Paint) -> float:
    transform = paint.gradient_transform
    if transform and len(transform) >= 2 and transform[0] and transform[1]:
        return normalize_angle(math.degrees(math.atan2(transform[1][0], transform[0][0])))

    handles = paint.gradient_handle_positions
    if len(handles) >= 2:
        dx = handles[1].x - handles[0].x
        dy = handles[1].y - handles[0].y
        return normalize_angle(math.degrees(math.atan2(dy, dx)) + 90)

    return 0.0


def gradient_stops(paint: Paint) -> list[GradientStop]:
    return [
        GradientStop(color=format_color(stop.color, paint.opacity), position=stop.position)
        for stop in paint.gradient_stops
    ]


def gradient_to_css(paint: Paint) -> str:
    stops = gradient_stops(paint)
    if not stops:
        return DEFAULT_GRADIENT

    stops_css = ", ".join(f"{s.color} {format_number(s.position * 100)}%" for s in stops)
    angle = format_number(gradient_angle(paint))

    if paint.type == "GRADIENT_RADIAL":
        return f"radial-gradient(circle, {stops_css})"
    if paint.type in ("GRADIENT_ANGULAR", "GRADIENT_DIAMOND"):
        return f"conic-gradient(from {angle}deg, {stops_css})"
    return f"linear-gradient({angle}deg, {stops_css})"


def _parse_gradient(paint: Paint) -> GradientFill:
    return GradientFill(
        type=paint.type,
        gradient=gradient_to_css(paint),
        angle=gradient_angle(paint),
        stops=gradient_stops(paint),
    )


# =====================================================
# Images and patterns
# =====================================================

def _translate_scale_mode(
    scale_mode: str, is_background: bool, scaling_factor: Optional[float]
) -> tuple[dict, ImageDownloadArguments]:
    if scale_mode == "TILE":
        if scaling_factor:
            factor = format_number(scaling_factor)
            size = (
                f"calc(var(--original-width) * {factor}) "
                f"calc(var(--original-height) * {factor})"
            )
        else:
            size = "auto"
        css = {"background_repeat": "repeat", "background_size": size, "is_background": True}
        return css, ImageDownloadArguments(requires_image_dimensions=True)

    background_size, object_fit = {
        "FILL": ("cover", "cover"),
        "FIT": ("contain", "contain"),
        "STRETCH": ("100% 100%", "fill"),
    }.get(scale_mode, (None, None))

    if background_size is None:
        return {}, ImageDownloadArguments()
    if is_background:
        css = {"background_size": background_size, "background_repeat": "no-repeat", "is_background": True}
    else:
        css = {"object_fit": object_fit, "is_background": False}
    return css, ImageDownloadArguments()


def _transform_suffix(transform: list[list[float]]) -> str:
    digest = hashlib.sha1(json.dumps(transform).encode("utf-8")).hexdigest()
    return digest[:6]


def _parse_image(paint: Paint, has_children: bool) -> ImageFill:
    scale_mode = paint.scale_mode or "FILL"
    is_background = has_children or scale_mode == "TILE"
    css, download = _translate_scale_mode(scale_mode, is_background, paint.scaling_factor)

    if paint.image_transform:
        download = ImageDownloadArguments(
            needs_cropping=True,
            requires_image_dimensions=download.requires_image_dimensions,
            crop_transform=paint.image_transform,
            filename_suffix=_transform_suffix(paint.image_transform),
        )

    return ImageFill(
        image_ref=paint.image_ref or "",
        scale_mode=scale_mode,
        scaling_factor=paint.scaling_factor,
        image_download_arguments=download,
        **css,
    )


_PATTERN_HORIZONTAL = {"START": "left", "CENTER": "center", "END": "right"}
_PATTERN_VERTICAL = {"START": "top", "CENTER": "center", "END": "bottom"}


def _parse_pattern(paint: Paint) -> PatternFill:
    horizontal = _PATTERN_HORIZONTAL.get(paint.horizontal_alignment or "", "left")
    vertical = _PATTERN_VERTICAL.get(paint.vertical_alignment or "", "top")
    return PatternFill(
        pattern_source=PatternSource(node_id=paint.source_node_id or ""),
        background_repeat="repeat",
        background_size=f"{round((paint.scaling_factor or 1) * 100)}%",
        background_position=f"{horizontal} {vertical}",
    )


# =====================================================
# Public API
# =====================================================

def parse_paint(paint: Paint, has_children: bool = False) -> SimplifiedFill:
    paint_type = paint.type
    if paint_type == "SOLID":
        if paint.color is None:
            return DEFAULT_COLOR
        return format_color(paint.color, paint.opacity)
    if paint_type in GRADIENT_TYPES:
        return _parse_gradient(paint)
    if paint_type == "IMAGE":
        return _parse_image(paint, has_children)
    if paint_type == "PATTERN":
        return _parse_pattern(paint)

    logger.warning("Unsupported paint type %r, falling back to %s", paint_type, DEFAULT_COLOR)
    return DEFAULT_COLOR


def build_simplified_fills(node: RawNode) -> list[SimplifiedFill]:
    """Visible fills of a node, topmost layer first (CSS background order)."""
    fills = getattr(node, "fills", None) or []
    children = has_children(node)
    return [parse_paint(fill, children) for fill in reversed(fills) if is_visible(fill)]


def fill_to_css(fill: SimplifiedFill) -> str:
    """Single CSS value for a simplified fill."""
    if isinstance(fill, str):
        return fill
    if isinstance(fill, GradientFill):
        return fill.gradient
    if isinstance(fill, ImageFill):
        return f"url({fill.image_ref})"
    return f"url({fill.pattern_source.node_id})"
