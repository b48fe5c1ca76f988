"""
Auto-layout → flex / grid descriptors.

Frame values (direction, alignment, gap, padding, overflow) come from the node
itself; box values (sizing, position, dimensions) depend on the parent, since
it is the parent's auto-layout that decides whether a child flows or floats.
"""

from typing import Literal, Optional

from figma_simplify.models.figma import FrameTraits, LayoutTraits, RawNode
from figma_simplify.models.simplified import Dimensions, Location, SimplifiedLayout, Sizing
from figma_simplify.utils.common import format_px, generate_css_shorthand, is_visible, pixel_round
from figma_simplify.utils.identity import has_layout_box, is_frame, is_in_auto_layout_flow


LayoutMode = Literal["none", "row", "column"]

AXIS_ALIGN = {
    "MAX": "end",
    "CENTER": "center",
    "SPACE_BETWEEN": "space-between",
    "BASELINE": "baseline",
}
SELF_ALIGN = {"MAX": "end", "CENTER": "center", "STRETCH": "stretch"}
SIZING = {"FIXED": "fixed", "FILL": "fill", "HUG": "hug"}

GRID_MIN_CHILDREN = 4


def layout_mode(node: Optional[RawNode]) -> LayoutMode:
    if not is_frame(node):
        return "none"
    return {"HORIZONTAL": "row", "VERTICAL": "column"}.get(node.layout_mode or "", "none")


def _axis_direction(axis: str, mode: LayoutMode) -> str:
    if axis == "primary":
        return "horizontal" if mode == "row" else "vertical"
    return "vertical" if mode == "row" else "horizontal"


def _should_stretch(children: list, axis: str, mode: LayoutMode) -> bool:
    flowing = [
        c for c in children
        if isinstance(c, LayoutTraits) and c.layout_positioning != "ABSOLUTE"
    ]
    if not flowing:
        return False
    if _axis_direction(axis, mode) == "horizontal":
        return all(c.layout_sizing_horizontal == "FILL" for c in flowing)
    return all(c.layout_sizing_vertical == "FILL" for c in flowing)


def convert_align(align: Optional[str], children: list, axis: str, mode: LayoutMode) -> Optional[str]:
    if mode != "none" and _should_stretch(children, axis, mode):
        return "stretch"
    # MIN is the flex default
    return AXIS_ALIGN.get(align or "MIN")


def _visible_children(node: RawNode) -> list:
    return [c for c in getattr(node, "children", None) or [] if is_visible(c)]


def _frame_values(node: RawNode, layout: SimplifiedLayout) -> None:
    if not isinstance(node, FrameTraits):
        return

    overflow = []
    if "HORIZONTAL" in (node.overflow_direction or ""):
        overflow.append("x")
    if "VERTICAL" in (node.overflow_direction or ""):
        overflow.append("y")
    if overflow:
        layout.overflow_scroll = overflow

    mode = layout.mode
    if mode == "none":
        return

    children = _visible_children(node)
    layout.justify_content = convert_align(node.primary_axis_align_items, children, "primary", mode)
    layout.align_items = convert_align(node.counter_axis_align_items, children, "counter", mode)
    if node.layout_wrap == "WRAP":
        layout.wrap = True
    if node.item_spacing:
        layout.gap = format_px(node.item_spacing)
    layout.padding = generate_css_shorthand({
        "top": node.padding_top,
        "right": node.padding_right,
        "bottom": node.padding_bottom,
        "left": node.padding_left,
    })


def _dimensions(node: LayoutTraits, parent_mode: LayoutMode) -> Optional[Dimensions]:
    box = node.absolute_bounding_box
    horizontal_fixed = node.layout_sizing_horizontal in (None, "FIXED")
    vertical_fixed = node.layout_sizing_vertical in (None, "FIXED")

    if parent_mode == "row":
        keep_width = not node.layout_grow and horizontal_fixed
        keep_height = node.layout_align != "STRETCH" and vertical_fixed
    elif parent_mode == "column":
        keep_width = node.layout_align != "STRETCH" and horizontal_fixed
        keep_height = not node.layout_grow and vertical_fixed
    else:
        keep_width = horizontal_fixed
        keep_height = vertical_fixed

    dimensions = Dimensions()
    if keep_width and box.width:
        dimensions.width = pixel_round(box.width)
    if keep_height and box.height:
        dimensions.height = pixel_round(box.height)
    if dimensions.width and dimensions.height:
        dimensions.aspect_ratio = pixel_round(box.width / box.height)

    if dimensions.width is None and dimensions.height is None:
        return None
    return dimensions


def _box_values(node: RawNode, parent: Optional[RawNode], layout: SimplifiedLayout) -> None:
    if not isinstance(node, LayoutTraits):
        return

    horizontal = SIZING.get(node.layout_sizing_horizontal or "")
    vertical = SIZING.get(node.layout_sizing_vertical or "")
    if horizontal or vertical:
        layout.sizing = Sizing(horizontal=horizontal, vertical=vertical)

    parent_mode = layout_mode(parent)
    if parent_mode != "none":
        layout.align_self = SELF_ALIGN.get(node.layout_align or "")

    if is_frame(parent) and not is_in_auto_layout_flow(node, parent):
        layout.position = "absolute"
        parent_box = parent.absolute_bounding_box
        if node.absolute_bounding_box is not None and parent_box is not None:
            x = pixel_round(node.absolute_bounding_box.x - parent_box.x)
            y = pixel_round(node.absolute_bounding_box.y - parent_box.y)
            layout.location_relative_to_parent = Location(x=x, y=y)
            layout.top = format_px(y)
            layout.left = format_px(x)

    if has_layout_box(node):
        layout.dimensions = _dimensions(node, parent_mode)

    if layout.dimensions is not None:
        if layout.dimensions.width:
            layout.width = format_px(layout.dimensions.width)
        if layout.dimensions.height:
            layout.height = format_px(layout.dimensions.height)
    if horizontal == "fill":
        layout.width = "100%"
    elif horizontal == "hug":
        layout.width = "fit-content"
    if vertical == "fill":
        layout.height = "100%"
    elif vertical == "hug":
        layout.height = "fit-content"


def _grid_values(node: RawNode, layout: SimplifiedLayout) -> None:
    """
    Regular arrangements of boxes (at least 2 distinct columns and rows) are
    promoted to a grid with one ``1fr`` track per distinct coordinate.
    """
    if not is_frame(node):
        return
    boxes = [c.absolute_bounding_box for c in _visible_children(node) if has_layout_box(c)]
    if len(boxes) < GRID_MIN_CHILDREN:
        return

    xs = sorted({b.x for b in boxes})
    ys = sorted({b.y for b in boxes})
    if len(xs) < 2 or len(ys) < 2:
        return

    layout.display = "grid"
    layout.grid_template_columns = " ".join("1fr" for _ in xs)
    layout.grid_template_rows = " ".join("1fr" for _ in ys)

    first_row = sorted((b for b in boxes if b.y == ys[0]), key=lambda b: b.x)
    gap = None
    if len(first_row) >= 2:
        spacing = first_row[1].x - (first_row[0].x + first_row[0].width)
        if spacing > 0:
            gap = format_px(spacing)
    layout.grid_gap = gap or layout.gap or "0px"


def build_simplified_layout(node: RawNode, parent: Optional[RawNode] = None) -> SimplifiedLayout:
    mode = layout_mode(node)
    layout = SimplifiedLayout(mode=mode)
    if mode == "none":
        layout.display = "block"
    else:
        layout.display = "flex"
        layout.flex_direction = mode

    _frame_values(node, layout)
    _box_values(node, parent, layout)
    _grid_values(node, layout)
    return layout
