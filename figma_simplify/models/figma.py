"""
Raw design-document models.

Typed view over the node JSON returned by the Figma REST API. Each node kind
is its own model, assembled from the same trait groups the vendor schema uses
(layout box, frame/auto-layout, fills, strokes, effects, blending, corners),
and a discriminator over ``type`` picks the variant while parsing.

Parsing is lenient: a field whose value has the wrong shape falls back to its
default instead of failing the whole document, and unknown keys are kept.
"""

import logging
from collections.abc import Mapping
from typing import Annotated, Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel


logger = logging.getLogger(__name__)


def _objects_only(value: Any) -> Any:
    if isinstance(value, list):
        return [item for item in value if isinstance(item, (Mapping, BaseModel))]
    return value


class FigmaModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        allow_inf_nan=False,
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def default_on_malformed(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        try:
            return handler(value)
        except ValidationError as e:
            logger.debug(
                "Dropping malformed %s.%s (%d errors)",
                cls.__name__, info.field_name, e.error_count(),
            )
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)


# =====================================================
# Value objects
# =====================================================

class Color(FigmaModel):
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


class Vector(FigmaModel):
    x: float = 0.0
    y: float = 0.0


class Rectangle(FigmaModel):
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class ColorStop(FigmaModel):
    position: float = 0.0
    color: Optional[Color] = None


class Paint(FigmaModel):
    type: str = ""
    visible: bool = True
    opacity: float = 1.0
    blend_mode: Optional[str] = None
    color: Optional[Color] = None
    # gradients
    gradient_stops: list[ColorStop] = Field(default_factory=list)
    gradient_transform: Optional[list[list[float]]] = None
    gradient_handle_positions: list[Vector] = Field(default_factory=list)
    # images
    image_ref: Optional[str] = None
    scale_mode: Optional[str] = None
    scaling_factor: Optional[float] = None
    image_transform: Optional[list[list[float]]] = None
    # patterns
    source_node_id: Optional[str] = None
    horizontal_alignment: Optional[str] = None
    vertical_alignment: Optional[str] = None

    @field_validator("gradient_stops", "gradient_handle_positions", mode="before")
    @classmethod
    def drop_non_object_entries(cls, value: Any) -> Any:
        return _objects_only(value)


class Effect(FigmaModel):
    type: str = ""
    visible: bool = True
    color: Optional[Color] = None
    offset: Optional[Vector] = None
    radius: float = 0.0
    spread: float = 0.0


class StrokeWeights(FigmaModel):
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


class TypeStyle(FigmaModel):
    font_family: Optional[str] = None
    font_post_script_name: Optional[str] = None
    font_weight: Optional[Union[int, float, str]] = None
    font_size: Optional[float] = None
    italic: Optional[bool] = None
    line_height_px: Optional[float] = None
    line_height_percent: Optional[float] = None
    line_height_percent_font_size: Optional[float] = None
    line_height_unit: Optional[str] = None
    letter_spacing: Optional[float] = None
    text_case: Optional[str] = None
    text_decoration: Optional[str] = None
    text_align_horizontal: Optional[str] = None
    text_align_vertical: Optional[str] = None


class ComponentPropertyValue(FigmaModel):
    type: str = "TEXT"
    value: Any = None


# =====================================================
# Traits
# =====================================================

class NodeBase(FigmaModel):
    id: str = ""
    name: str = ""
    type: str = ""
    visible: bool = True


class ParentTraits(FigmaModel):
    children: list["RawNode"] = Field(default_factory=list)

    @field_validator("children", mode="before")
    @classmethod
    def drop_non_object_children(cls, value: Any) -> Any:
        return _objects_only(value)


class LayoutTraits(FigmaModel):
    absolute_bounding_box: Optional[Rectangle] = None
    layout_sizing_horizontal: Optional[str] = None
    layout_sizing_vertical: Optional[str] = None
    layout_align: Optional[str] = None
    layout_grow: Optional[float] = None
    layout_positioning: Optional[str] = None
    preserve_ratio: Optional[bool] = None


class FrameTraits(FigmaModel):
    clips_content: Optional[bool] = None
    layout_mode: Optional[str] = None
    layout_wrap: Optional[str] = None
    primary_axis_align_items: Optional[str] = None
    counter_axis_align_items: Optional[str] = None
    item_spacing: Optional[float] = None
    padding_top: Optional[float] = None
    padding_right: Optional[float] = None
    padding_bottom: Optional[float] = None
    padding_left: Optional[float] = None
    overflow_direction: Optional[str] = None


class FillTraits(FigmaModel):
    fills: list[Paint] = Field(default_factory=list)

    @field_validator("fills", mode="before")
    @classmethod
    def drop_non_object_fills(cls, value: Any) -> Any:
        return _objects_only(value)


class StrokeTraits(FigmaModel):
    strokes: list[Paint] = Field(default_factory=list)
    stroke_weight: Optional[float] = None
    stroke_dashes: list[float] = Field(default_factory=list)
    individual_stroke_weights: Optional[StrokeWeights] = None
    stroke_align: Optional[str] = None
    stroke_cap: Optional[str] = None
    stroke_join: Optional[str] = None

    @field_validator("strokes", mode="before")
    @classmethod
    def drop_non_object_strokes(cls, value: Any) -> Any:
        return _objects_only(value)


class EffectTraits(FigmaModel):
    effects: list[Effect] = Field(default_factory=list)

    @field_validator("effects", mode="before")
    @classmethod
    def drop_non_object_effects(cls, value: Any) -> Any:
        return _objects_only(value)


class BlendTraits(FigmaModel):
    opacity: Optional[float] = None
    blend_mode: Optional[str] = None


class CornerTraits(FigmaModel):
    corner_radius: Optional[float] = None
    rectangle_corner_radii: Optional[list[float]] = None


# =====================================================
# Node variants
# =====================================================

class CanvasNode(NodeBase, ParentTraits):
    """DOCUMENT and CANVAS (page) nodes."""


class FrameNode(
    NodeBase, ParentTraits, LayoutTraits, FrameTraits,
    FillTraits, StrokeTraits, EffectTraits, BlendTraits, CornerTraits,
):
    """FRAME, COMPONENT, COMPONENT_SET and SECTION nodes."""


class InstanceNode(FrameNode):
    component_id: Optional[str] = None
    component_properties: dict[str, ComponentPropertyValue] = Field(default_factory=dict)


class GroupNode(
    NodeBase, ParentTraits, LayoutTraits,
    FillTraits, StrokeTraits, EffectTraits, BlendTraits,
):
    pass


class TextNode(
    NodeBase, LayoutTraits,
    FillTraits, StrokeTraits, EffectTraits, BlendTraits,
):
    characters: Optional[str] = None
    style: Optional[TypeStyle] = None


class RectangleNode(
    NodeBase, LayoutTraits,
    FillTraits, StrokeTraits, EffectTraits, BlendTraits, CornerTraits,
):
    pass


class VectorNode(
    NodeBase, ParentTraits, LayoutTraits,
    FillTraits, StrokeTraits, EffectTraits, BlendTraits, CornerTraits,
):
    """Vector-like shapes, including boolean operations."""


class GenericNode(
    NodeBase, ParentTraits, LayoutTraits,
    FillTraits, StrokeTraits, EffectTraits, BlendTraits, CornerTraits,
):
    """Any node type without a dedicated model (SLICE, STICKY, TABLE, ...)."""


_KIND_BY_TYPE = {
    "DOCUMENT": "canvas",
    "CANVAS": "canvas",
    "FRAME": "frame",
    "COMPONENT": "frame",
    "COMPONENT_SET": "frame",
    "SECTION": "frame",
    "INSTANCE": "instance",
    "GROUP": "group",
    "TEXT": "text",
    "RECTANGLE": "rectangle",
    "VECTOR": "vector",
    "ELLIPSE": "vector",
    "LINE": "vector",
    "STAR": "vector",
    "REGULAR_POLYGON": "vector",
    "BOOLEAN_OPERATION": "vector",
}


def _node_kind(value: Any) -> str:
    if isinstance(value, Mapping):
        node_type = value.get("type")
    else:
        node_type = getattr(value, "type", None)
    if not isinstance(node_type, str):
        return "generic"
    return _KIND_BY_TYPE.get(node_type, "generic")


RawNode = Annotated[
    Union[
        Annotated[CanvasNode, Tag("canvas")],
        Annotated[FrameNode, Tag("frame")],
        Annotated[InstanceNode, Tag("instance")],
        Annotated[GroupNode, Tag("group")],
        Annotated[TextNode, Tag("text")],
        Annotated[RectangleNode, Tag("rectangle")],
        Annotated[VectorNode, Tag("vector")],
        Annotated[GenericNode, Tag("generic")],
    ],
    Discriminator(_node_kind),
]

for _model in (CanvasNode, FrameNode, InstanceNode, GroupNode, VectorNode, GenericNode):
    _model.model_rebuild()

_node_adapter: TypeAdapter = TypeAdapter(RawNode)


def parse_node(data: Any) -> RawNode:
    """Validate a raw node mapping (or pass an already parsed node through)."""
    if isinstance(data, NodeBase):
        return data
    if not isinstance(data, Mapping):
        raise TypeError(f"Expected a node mapping, got {type(data).__name__}")
    return _node_adapter.validate_python(data)


def parse_nodes(items: list) -> list[RawNode]:
    nodes = []
    for item in items:
        if isinstance(item, (Mapping, NodeBase)):
            nodes.append(parse_node(item))
        else:
            logger.debug("Skipping non-object node entry: %r", type(item).__name__)
    return nodes
