from .color import build_simplified_fills, fill_to_css, format_color, gradient_to_css, parse_paint
from .style import build_border_radius, build_simplified_strokes
from .text import extract_node_text, extract_text_style, normalize_font_weight
from .effects import build_simplified_effects, categorize_effects, convert_blend_mode, has_effects
from .layout import build_simplified_layout
from .component import extract_component_properties, simplify_component_sets, simplify_components

__all__ = [
    "build_simplified_fills", "fill_to_css", "format_color", "gradient_to_css", "parse_paint",
    "build_border_radius", "build_simplified_strokes",
    "extract_node_text", "extract_text_style", "normalize_font_weight",
    "build_simplified_effects", "categorize_effects", "convert_blend_mode", "has_effects",
    "build_simplified_layout",
    "extract_component_properties", "simplify_component_sets", "simplify_components",
]
