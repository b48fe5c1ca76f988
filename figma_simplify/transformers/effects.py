import logging
from typing import Optional

from figma_simplify.models.figma import BlendTraits, Effect, EffectTraits, RawNode
from figma_simplify.models.simplified import SimplifiedEffects
from figma_simplify.transformers.color import format_color
from figma_simplify.utils.common import format_px, is_visible
from figma_simplify.utils.identity import is_text_node


logger = logging.getLogger(__name__)

DEFAULT_SHADOW_COLOR = "rgba(0, 0, 0, 0.25)"

BLEND_MODES = {
    "NORMAL": "normal",
    "PASS_THROUGH": "normal",
    "MULTIPLY": "multiply",
    "SCREEN": "screen",
    "OVERLAY": "overlay",
    "DARKEN": "darken",
    "LIGHTEN": "lighten",
    "COLOR_DODGE": "color-dodge",
    "COLOR_BURN": "color-burn",
    "HARD_LIGHT": "hard-light",
    "SOFT_LIGHT": "soft-light",
    "DIFFERENCE": "difference",
    "EXCLUSION": "exclusion",
    "HUE": "hue",
    "SATURATION": "saturation",
    "COLOR": "color",
    "LUMINOSITY": "luminosity",
}

SHADOW_TYPES = ("DROP_SHADOW", "INNER_SHADOW")
BLUR_TYPES = ("LAYER_BLUR", "BACKGROUND_BLUR")


def convert_blend_mode(mode: Optional[str]) -> str:
    return BLEND_MODES.get(mode or "", "normal")


def _visible_effects(node: RawNode) -> list[Effect]:
    if not isinstance(node, EffectTraits):
        return []
    return [e for e in node.effects if is_visible(e)]


def _shadow(effect: Effect, for_text: bool = False) -> str:
    x = effect.offset.x if effect.offset else 0
    y = effect.offset.y if effect.offset else 0
    color = format_color(effect.color) if effect.color else DEFAULT_SHADOW_COLOR
    parts = [format_px(x), format_px(y), format_px(effect.radius)]
    if not for_text:
        parts.append(format_px(effect.spread))
    parts.append(color)
    shadow = " ".join(parts)
    return f"inset {shadow}" if effect.type == "INNER_SHADOW" else shadow


def _blur(effect: Effect) -> str:
    return f"blur({format_px(effect.radius)})"


def build_simplified_effects(node: RawNode) -> SimplifiedEffects:
    effects = _visible_effects(node)
    result = SimplifiedEffects()
    text = is_text_node(node)

    shadows = []
    for effect in effects:
        if effect.type not in SHADOW_TYPES:
            continue
        if text and effect.type == "INNER_SHADOW":
            # text-shadow has no inset form
            logger.debug("Skipping inner shadow on text node %s", node.id)
            continue
        shadows.append(_shadow(effect, for_text=text))
    if shadows:
        if text:
            result.text_shadow = ", ".join(shadows)
        else:
            result.box_shadow = ", ".join(shadows)

    layer_blurs = [_blur(e) for e in effects if e.type == "LAYER_BLUR"]
    if layer_blurs:
        result.filter = " ".join(layer_blurs)

    background_blurs = [_blur(e) for e in effects if e.type == "BACKGROUND_BLUR"]
    if background_blurs:
        result.backdrop_filter = " ".join(background_blurs)

    if isinstance(node, BlendTraits) and node.blend_mode:
        blend = convert_blend_mode(node.blend_mode)
        if blend != "normal":
            result.mix_blend_mode = blend

    return result


def has_effects(node: RawNode) -> bool:
    return bool(_visible_effects(node))


def categorize_effects(node: RawNode) -> dict:
    """Summary of a node's effects, grouped by kind."""
    effects = _visible_effects(node)
    blend_mode = None
    if isinstance(node, BlendTraits) and node.blend_mode:
        blend_mode = convert_blend_mode(node.blend_mode)
    return {
        "shadows": [e for e in effects if e.type in SHADOW_TYPES],
        "blurs": [e for e in effects if e.type in BLUR_TYPES],
        "blend_mode": blend_mode,
        "effect_count": len(effects),
    }
