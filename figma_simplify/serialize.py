"""
Output forms for simplified trees: JSON and a compact text outline.

The outline has one line per node, indented by depth:

    FRAME "Card" [1:2] | row, gap:8px, pad:16px | fills:#ffffff | r:8px
      TEXT "Title" [1:3] | [Inter 600 16px #111111] "Hello"

When a store is given, style references are resolved to their values;
otherwise the raw StyleIds are printed.
"""

import json
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel

from figma_simplify.models.simplified import SimplifiedNode
from figma_simplify.store.global_vars import GlobalVariableStore, to_jsonable
from figma_simplify.tokens.generator import fill_css_value


TEXT_PREVIEW_LENGTH = 80


def to_json(value: Any, indent: Optional[int] = None) -> str:
    """JSON with camelCase keys and without null fields."""
    if isinstance(value, BaseModel):
        return value.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
    return json.dumps(to_jsonable(value), indent=indent, ensure_ascii=False)


def _layout_text(layout: Mapping) -> Optional[str]:
    parts = []
    if layout.get("display") == "grid":
        parts.append(f"grid {layout.get('gridTemplateColumns')} / {layout.get('gridTemplateRows')}")
    elif layout.get("mode") in ("row", "column"):
        parts.append(layout["mode"])
    if layout.get("gap"):
        parts.append(f"gap:{layout['gap']}")
    if layout.get("padding"):
        parts.append(f"pad:{layout['padding']}")
    if layout.get("justifyContent"):
        parts.append(f"justify:{layout['justifyContent']}")
    if layout.get("alignItems"):
        parts.append(f"align:{layout['alignItems']}")
    if layout.get("wrap"):
        parts.append("wrap")
    if layout.get("position"):
        parts.append(f"abs:{layout.get('left')},{layout.get('top')}")
    if layout.get("width") and layout.get("height"):
        parts.append(f"{layout['width']}x{layout['height']}")
    return ", ".join(parts) or None


def _text_style_text(style: Mapping) -> str:
    keys = ("fontFamily", "fontWeight", "fontSize", "color", "textAlignHorizontal", "lineHeight", "letterSpacing")
    parts = []
    for key in keys:
        value = style.get(key)
        if value is None:
            continue
        if key == "fontSize":
            value = f"{value:g}px" if isinstance(value, (int, float)) else value
        elif key == "lineHeight":
            value = f"lh:{value}"
        elif key == "letterSpacing":
            value = f"ls:{value}"
        parts.append(str(value))
    return " ".join(parts)


def _node_line(node: SimplifiedNode, store: Optional[GlobalVariableStore]) -> str:
    def resolve(ref: Optional[str]) -> Any:
        if ref is None or store is None:
            return ref
        value = store.get(ref)
        return ref if value is None else value

    parts = [f'{node.type} "{node.name}" [{node.id}]']

    layout = resolve(node.layout)
    if isinstance(layout, Mapping):
        layout = _layout_text(layout)
    if layout:
        parts.append(layout)

    fills = resolve(node.fills)
    if isinstance(fills, list):
        fills = ", ".join(str(fill_css_value(f)) for f in fills)
    if fills:
        parts.append(f"fills:{fills}")

    strokes = resolve(node.strokes)
    if isinstance(strokes, Mapping):
        colors = ", ".join(str(fill_css_value(c)) for c in strokes.get("colors", []))
        strokes = f"{strokes.get('strokeWeight', '')} {colors}".strip()
    if strokes:
        parts.append(f"border:{strokes}")

    if node.border_radius:
        parts.append(f"r:{node.border_radius}")
    if node.opacity is not None:
        parts.append(f"opacity:{node.opacity:g}")

    effects = resolve(node.effects)
    if isinstance(effects, Mapping):
        effects = "; ".join(f"{k}:{v}" for k, v in effects.items())
    if effects:
        parts.append(effects)

    if node.component_id:
        parts.append(f"component:{node.component_id}")

    line = " | ".join(parts)

    if node.text:
        preview = node.text
        if len(preview) > TEXT_PREVIEW_LENGTH:
            preview = preview[:TEXT_PREVIEW_LENGTH] + "..."
        style = resolve(node.text_style)
        if isinstance(style, Mapping):
            style = _text_style_text(style)
        if style:
            line += f" | [{style}]"
        line += f' "{preview}"'
    return line


def to_outline(
    nodes: Union[SimplifiedNode, Iterable[SimplifiedNode]],
    global_vars: Optional[GlobalVariableStore] = None,
) -> str:
    if isinstance(nodes, SimplifiedNode):
        nodes = [nodes]

    lines = []
    stack = [(node, 0) for node in reversed(list(nodes))]
    while stack:
        node, depth = stack.pop()
        lines.append("  " * depth + _node_line(node, global_vars))
        for child in reversed(node.children or []):
            stack.append((child, depth + 1))
    return "\n".join(lines)
