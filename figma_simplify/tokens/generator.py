"""
Design tokens from the global variable store.

Each entry is classified by its id prefix, or by its shape when the prefix is
unknown, and projected into a ``DesignToken``. ``to_css`` renders the tokens
as one ``:root`` block of custom properties grouped by category.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, Optional

from figma_simplify.models.tokens import DesignToken, DesignTokens, TokenType
from figma_simplify.store.global_vars import GlobalVariableStore, style_prefix
from figma_simplify.utils.common import format_px
from figma_simplify.utils.identity import is_css_color_value


logger = logging.getLogger(__name__)

PREFIX_TYPES = {
    "fill": TokenType.COLOR,
    "color": TokenType.COLOR,
    "stroke": TokenType.COLOR,
    "textStyle": TokenType.TYPOGRAPHY,
    "font": TokenType.TYPOGRAPHY,
    "layout": TokenType.LAYOUT,
    "effect": TokenType.EFFECT,
    "spacing": TokenType.SPACING,
    "space": TokenType.SPACING,
    "component": TokenType.COMPONENT,
}

# category attribute on DesignTokens, css comment label
CATEGORIES = {
    TokenType.COLOR: ("colors", "Color"),
    TokenType.TYPOGRAPHY: ("typography", "Typography"),
    TokenType.LAYOUT: ("layout", "Layout"),
    TokenType.EFFECT: ("effects", "Effect"),
    TokenType.SPACING: ("spacing", "Spacing"),
    TokenType.COMPONENT: ("components", "Component"),
}

DESCRIPTIONS = {
    TokenType.TYPOGRAPHY: "Typography style with font, size and spacing properties",
    TokenType.LAYOUT: "Layout configuration for positioning and alignment",
    TokenType.EFFECT: "Visual effect such as shadows, blurs or blending",
    TokenType.SPACING: "Spacing value for margins, padding or gaps",
    TokenType.COMPONENT: "Component-specific styling",
}

LENGTH_RE = re.compile(r"^-?\d+(\.\d+)?(px|em|rem|%)$")

TYPOGRAPHY_KEYS = ("fontFamily", "fontSize", "fontWeight")
LAYOUT_KEYS = ("display", "flexDirection", "alignItems")
EFFECT_KEYS = ("boxShadow", "filter", "textShadow")


def _is_color_like(value: Any) -> bool:
    return is_css_color_value(value) or (isinstance(value, str) and value.startswith(("rgb", "hsl")))


def _is_fill(value: Any) -> bool:
    if isinstance(value, str):
        return _is_color_like(value)
    return isinstance(value, Mapping) and ("gradient" in value or "imageRef" in value or "patternSource" in value)


def infer_token_type(value: Any) -> Optional[TokenType]:
    if isinstance(value, str):
        if _is_color_like(value):
            return TokenType.COLOR
        if LENGTH_RE.match(value):
            return TokenType.SPACING
        return None
    if isinstance(value, list):
        if value and all(_is_fill(v) for v in value):
            return TokenType.COLOR
        return None
    if isinstance(value, Mapping):
        if any(value.get(k) for k in TYPOGRAPHY_KEYS):
            return TokenType.TYPOGRAPHY
        if any(value.get(k) for k in LAYOUT_KEYS):
            return TokenType.LAYOUT
        if any(value.get(k) for k in EFFECT_KEYS):
            return TokenType.EFFECT
        if "colors" in value:
            return TokenType.COLOR
    return None


def fill_css_value(fill: Any) -> Any:
    if isinstance(fill, Mapping):
        if "gradient" in fill:
            return fill["gradient"]
        if "imageRef" in fill:
            return f"url({fill['imageRef']})"
        if "patternSource" in fill:
            return f"url({fill['patternSource'].get('nodeId', '')})"
    return fill


def _pick(value: Mapping, keys: tuple) -> dict:
    return {k: value[k] for k in keys if value.get(k) is not None}


def process_value(value: Any, token_type: TokenType) -> Any:
    if isinstance(value, list):
        return [fill_css_value(v) for v in value]
    if not isinstance(value, Mapping):
        return value

    if token_type == TokenType.TYPOGRAPHY:
        processed = _pick(value, ("fontFamily", "fontWeight", "lineHeight", "letterSpacing", "color"))
        if isinstance(value.get("fontSize"), (int, float)):
            processed["fontSize"] = format_px(value["fontSize"])
        if value.get("textAlignHorizontal"):
            processed["textAlign"] = value["textAlignHorizontal"]
        return processed
    if token_type == TokenType.LAYOUT:
        return _pick(value, (
            "display", "flexDirection", "alignItems", "justifyContent",
            "gap", "padding", "width", "height",
        ))
    if token_type == TokenType.EFFECT:
        return _pick(value, ("boxShadow", "filter", "backdropFilter", "textShadow", "mixBlendMode"))
    if token_type == TokenType.COLOR and "colors" in value:
        processed = _pick(value, ("strokeWeight", "strokeDashes"))
        processed["colors"] = [fill_css_value(c) for c in value.get("colors") or []]
        return processed
    return dict(value)


def css_variable_name(style_id: str) -> str:
    return style_id.lower().replace("_", "-")


def css_value(token: DesignToken) -> Optional[str]:
    """Single CSS value for a token, or None when it has no single-value form."""
    value = token.value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        if value and all(isinstance(v, str) for v in value):
            return ", ".join(value)
        return None
    if not isinstance(value, Mapping) or not value:
        return None

    if token.type == TokenType.TYPOGRAPHY:
        if value.get("fontSize") and value.get("fontFamily"):
            weight = value.get("fontWeight") or "normal"
            line_height = f"/{value['lineHeight']}" if value.get("lineHeight") else ""
            return f"{weight} {value['fontSize']}{line_height} {value['fontFamily']}"
        return None

    colors = value.get("colors")
    if isinstance(colors, list) and len(colors) == 1 and isinstance(colors[0], str) and value.get("strokeWeight"):
        style = "dashed" if value.get("strokeDashes") else "solid"
        return f"{value['strokeWeight']} {style} {colors[0]}"

    if len(value) == 1:
        only = next(iter(value.values()))
        return only if isinstance(only, str) else None
    return None


class DesignTokenGenerator:
    def __init__(self, store: GlobalVariableStore):
        self.store = store

    def classify(self, style_id: str, value: Any) -> Optional[TokenType]:
        token_type = PREFIX_TYPES.get(style_prefix(style_id))
        if token_type is None:
            token_type = infer_token_type(value)
        return token_type

    def create_token(self, style_id: str, value: Any) -> Optional[DesignToken]:
        token_type = self.classify(style_id, value)
        if token_type is None:
            logger.warning("Could not classify style %s, skipping", style_id)
            return None

        prefix = style_prefix(style_id)
        processed = process_value(value, token_type)
        kind = "stroke" if prefix == "stroke" else token_type.value
        suffix = style_id[len(prefix) + 1:] if prefix != style_id else style_id
        return DesignToken(
            id=style_id,
            name=f"{token_type.value.title()} {suffix}",
            value=processed,
            type=token_type,
            css_variable=f"--{css_variable_name(style_id)}-{kind}",
            description=self.describe(token_type, processed),
        )

    @staticmethod
    def describe(token_type: TokenType, value: Any) -> str:
        if token_type == TokenType.COLOR:
            if isinstance(value, str):
                return f"Color value: {value}"
            if isinstance(value, list):
                return f"Color palette with {len(value)} variants"
            return "Stroke colors and weight"
        return DESCRIPTIONS[token_type]

    def generate(self) -> DesignTokens:
        tokens = DesignTokens()
        for style_id, value in self.store.styles.items():
            token = self.create_token(style_id, value)
            if token is None:
                continue
            attr, _ = CATEGORIES[TokenType(token.type)]
            getattr(tokens, attr).append(token)
        return tokens

    def to_css(self, tokens: Optional[DesignTokens] = None) -> str:
        tokens = tokens or self.generate()
        lines = [":root {"]
        for token_type, (attr, label) in CATEGORIES.items():
            declarations = []
            for token in getattr(tokens, attr):
                value = css_value(token)
                if token.css_variable and value:
                    declarations.append(f"  {token.css_variable}: {value};")
            if declarations:
                lines.append(f"  /* {label} tokens */")
                lines.extend(declarations)
        lines.append("}")
        return "\n".join(lines)


def generate_design_tokens(store: GlobalVariableStore) -> DesignTokens:
    return DesignTokenGenerator(store).generate()


def generate_css_custom_properties(store: GlobalVariableStore) -> str:
    return DesignTokenGenerator(store).to_css()
