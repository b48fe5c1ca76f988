"""Structural type guards over raw nodes."""

from typing import Any, Optional

from figma_simplify.models.figma import (
    FrameTraits,
    InstanceNode,
    LayoutTraits,
    ParentTraits,
    RawNode,
    StrokeWeights,
    TextNode,
)


AUTO_LAYOUT_MODES = ("HORIZONTAL", "VERTICAL")


def is_frame(node: Any) -> bool:
    """Frame-like containers: frames, components, sections and instances."""
    return isinstance(node, FrameTraits)


def has_layout_box(node: Any) -> bool:
    return isinstance(node, LayoutTraits) and node.absolute_bounding_box is not None


def has_children(node: Any) -> bool:
    return isinstance(node, ParentTraits) and len(node.children) > 0


def is_text_node(node: Any) -> bool:
    return isinstance(node, TextNode)


def is_instance_node(node: Any) -> bool:
    return isinstance(node, InstanceNode)


def has_text_style(node: Any) -> bool:
    if not isinstance(node, TextNode) or node.style is None:
        return False
    return bool(node.style.model_dump(exclude_none=True))


def is_in_auto_layout_flow(node: RawNode, parent: Optional[RawNode]) -> bool:
    """
    True when ``parent`` is an auto-layout frame and ``node`` takes part in
    its flow, i.e. is not absolutely positioned.
    """
    return (
        is_frame(parent)
        and (parent.layout_mode or "NONE") in AUTO_LAYOUT_MODES
        and isinstance(node, LayoutTraits)
        and node.layout_positioning != "ABSOLUTE"
    )


def is_stroke_weights(value: Any) -> bool:
    if isinstance(value, StrokeWeights):
        return True
    return isinstance(value, dict) and all(k in value for k in ("top", "right", "bottom", "left"))


def is_rectangle_corner_radii(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) == 4
        and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value)
    )


def is_css_color_value(value: Any) -> bool:
    return isinstance(value, str) and (value.startswith("#") or value.startswith("rgba"))
