from .common import (
    is_visible, pixel_round, format_number, format_px,
    generate_css_shorthand, generate_style_id, remove_empty_keys,
)
from .identity import (
    is_frame, has_layout_box, has_children, is_text_node, is_instance_node,
    has_text_style, is_in_auto_layout_flow, is_stroke_weights,
    is_rectangle_corner_radii, is_css_color_value,
)

__all__ = [
    "is_visible", "pixel_round", "format_number", "format_px",
    "generate_css_shorthand", "generate_style_id", "remove_empty_keys",
    "is_frame", "has_layout_box", "has_children", "is_text_node", "is_instance_node",
    "has_text_style", "is_in_auto_layout_flow", "is_stroke_weights",
    "is_rectangle_corner_radii", "is_css_color_value",
]
