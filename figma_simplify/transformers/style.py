from typing import Optional

from figma_simplify.models.figma import RawNode, StrokeTraits
from figma_simplify.models.simplified import SimplifiedStroke
from figma_simplify.transformers.color import parse_paint
from figma_simplify.utils.common import format_px, generate_css_shorthand, is_visible
from figma_simplify.utils.identity import is_rectangle_corner_radii, is_stroke_weights


STROKE_ALIGN = {"INSIDE": "inside", "OUTSIDE": "outside", "CENTER": "center"}
STROKE_CAP = {"ROUND": "round", "SQUARE": "square"}
STROKE_JOIN = {"ROUND": "round", "BEVEL": "bevel"}


def build_simplified_strokes(node: RawNode, has_children: bool = False) -> SimplifiedStroke:
    """
    Stroke descriptor for a node.

    ``colors`` is empty when the node has no visible stroke paint; callers use
    that to decide whether the stroke is worth registering at all.
    """
    if not isinstance(node, StrokeTraits):
        return SimplifiedStroke()

    colors = [parse_paint(p, has_children) for p in node.strokes if is_visible(p)]
    stroke = SimplifiedStroke(colors=colors)
    if not colors:
        return stroke

    if node.stroke_weight and node.stroke_weight > 0:
        stroke.stroke_weight = format_px(node.stroke_weight)
    if node.stroke_dashes:
        stroke.stroke_dashes = list(node.stroke_dashes)
    if is_stroke_weights(node.individual_stroke_weights):
        stroke.stroke_weights = generate_css_shorthand(node.individual_stroke_weights.model_dump())
    if node.stroke_align:
        stroke.stroke_align = STROKE_ALIGN.get(node.stroke_align, "center")
    if node.stroke_cap:
        stroke.stroke_cap = STROKE_CAP.get(node.stroke_cap, "butt")
    if node.stroke_join:
        stroke.stroke_join = STROKE_JOIN.get(node.stroke_join, "miter")
    return stroke


def build_border_radius(node: RawNode) -> Optional[str]:
    radii = getattr(node, "rectangle_corner_radii", None)
    if is_rectangle_corner_radii(radii) and len(set(radii)) > 1:
        # CSS order matches Figma: top-left, top-right, bottom-right, bottom-left
        return " ".join(format_px(r) for r in radii)

    radius = getattr(node, "corner_radius", None)
    if radius:
        return format_px(radius)
    if is_rectangle_corner_radii(radii) and radii[0]:
        return format_px(radii[0])
    return None
