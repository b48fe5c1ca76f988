"""
Text content and typography.

Line height is emitted as a unitless ratio and letter spacing in ``em`` so the
values stay correct if the font size is changed downstream.
"""

from typing import Optional, Union

from figma_simplify.models.figma import RawNode, TextNode, TypeStyle
from figma_simplify.models.simplified import SimplifiedTextStyle
from figma_simplify.transformers.color import format_color
from figma_simplify.utils.common import format_number, is_visible
from figma_simplify.utils.identity import has_text_style


TEXT_CASE = {"UPPER": "uppercase", "LOWER": "lowercase", "TITLE": "capitalize"}
TEXT_DECORATION = {"UNDERLINE": "underline", "STRIKETHROUGH": "line-through"}
WEIGHT_KEYWORDS = {400: "normal", 700: "bold"}


def extract_node_text(node: RawNode) -> Optional[str]:
    if isinstance(node, TextNode) and node.characters:
        return node.characters
    return None


def normalize_font_weight(weight: Union[int, float, str]) -> str:
    """
    Numeric weights are clamped to 1..1000, snapped to the nearest hundred
    in 100..900 and 400/700 become ``normal``/``bold``.
    """
    if isinstance(weight, str):
        return weight
    clamped = min(max(float(weight), 1.0), 1000.0)
    snapped = int(min(max(round(clamped / 100) * 100, 100), 900))
    return WEIGHT_KEYWORDS.get(snapped, str(snapped))


def _line_height(style: TypeStyle) -> Optional[str]:
    if style.line_height_px and style.font_size:
        return format_number(round(style.line_height_px / style.font_size, 2))
    if style.line_height_percent_font_size:
        return format_number(round(style.line_height_percent_font_size / 100, 2))
    # lineHeightPercent is relative to the font's intrinsic line height (100 = auto)
    if style.line_height_percent and style.line_height_percent != 100:
        return format_number(round(style.line_height_percent / 100, 2))
    return None


def _letter_spacing(style: TypeStyle) -> Optional[str]:
    if not style.letter_spacing or not style.font_size:
        return None
    return f"{format_em(style.letter_spacing / style.font_size)}em"


def format_em(value: float) -> str:
    value = round(value, 3)
    return str(int(value)) if float(value).is_integer() else str(value)


def _text_color(node: TextNode) -> Optional[str]:
    for paint in node.fills:
        if is_visible(paint) and paint.type == "SOLID" and paint.color is not None:
            return format_color(paint.color, paint.opacity)
    return None


def extract_text_style(node: RawNode) -> Optional[SimplifiedTextStyle]:
    if not has_text_style(node):
        return None

    style = node.style
    result = SimplifiedTextStyle(
        font_family=style.font_family or None,
        font_size=style.font_size or None,
        line_height=_line_height(style),
        letter_spacing=_letter_spacing(style),
        color=_text_color(node),
    )

    if style.font_weight is not None and style.font_weight != "":
        result.font_weight = normalize_font_weight(style.font_weight)
    if style.italic:
        result.font_style = "italic"

    if style.text_case == "SMALL_CAPS":
        result.font_variant = "small-caps"
    elif style.text_case in TEXT_CASE:
        result.text_transform = TEXT_CASE[style.text_case]

    if style.text_decoration in TEXT_DECORATION:
        result.text_decoration = TEXT_DECORATION[style.text_decoration]

    if style.text_align_horizontal:
        align = style.text_align_horizontal.lower()
        result.text_align_horizontal = "justify" if align == "justified" else align
    if style.text_align_vertical:
        result.text_align_vertical = style.text_align_vertical.lower()

    if not result.model_dump(exclude_none=True):
        return None
    return result
