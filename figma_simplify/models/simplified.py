from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


StyleId = str


class SimplifiedModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# =====================================================
# Fills
# =====================================================

class ImageDownloadArguments(SimplifiedModel):
    needs_cropping: bool = False
    requires_image_dimensions: bool = False
    crop_transform: Optional[list[list[float]]] = None
    filename_suffix: Optional[str] = None


class ImageFill(SimplifiedModel):
    type: Literal["IMAGE"] = "IMAGE"
    image_ref: str = ""
    scale_mode: str = "FILL"
    scaling_factor: Optional[float] = None
    background_size: Optional[str] = None
    background_repeat: Optional[str] = None
    is_background: Optional[bool] = None
    object_fit: Optional[str] = None
    image_download_arguments: Optional[ImageDownloadArguments] = None


class GradientStop(SimplifiedModel):
    color: str
    position: float


class GradientFill(SimplifiedModel):
    type: Literal["GRADIENT_LINEAR", "GRADIENT_RADIAL", "GRADIENT_ANGULAR", "GRADIENT_DIAMOND"]
    gradient: str
    angle: Optional[float] = None
    stops: list[GradientStop] = Field(default_factory=list)


class PatternSource(SimplifiedModel):
    type: Literal["IMAGE-PNG"] = "IMAGE-PNG"
    node_id: str = ""


class PatternFill(SimplifiedModel):
    type: Literal["PATTERN"] = "PATTERN"
    pattern_source: PatternSource
    background_repeat: str = "repeat"
    background_size: str = "100%"
    background_position: str = "left top"


# hex / rgba string, or one of the structured fills
SimplifiedFill = Union[str, GradientFill, ImageFill, PatternFill]


# =====================================================
# Style descriptors stored in the global variable store
# =====================================================

class SimplifiedStroke(SimplifiedModel):
    colors: list[SimplifiedFill] = Field(default_factory=list)
    stroke_weight: Optional[str] = None
    stroke_dashes: Optional[list[float]] = None
    stroke_weights: Optional[str] = None
    stroke_align: Optional[str] = None
    stroke_cap: Optional[str] = None
    stroke_join: Optional[str] = None


class SimplifiedEffects(SimplifiedModel):
    box_shadow: Optional[str] = None
    text_shadow: Optional[str] = None
    filter: Optional[str] = None
    backdrop_filter: Optional[str] = None
    mix_blend_mode: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


class SimplifiedTextStyle(SimplifiedModel):
    font_family: Optional[str] = None
    font_weight: Optional[str] = None
    font_size: Optional[float] = None
    font_style: Optional[str] = None
    font_variant: Optional[str] = None
    line_height: Optional[str] = None
    letter_spacing: Optional[str] = None
    text_align_horizontal: Optional[str] = None
    text_align_vertical: Optional[str] = None
    text_transform: Optional[str] = None
    text_decoration: Optional[str] = None
    color: Optional[str] = None


class Location(SimplifiedModel):
    x: float
    y: float


class Dimensions(SimplifiedModel):
    width: Optional[float] = None
    height: Optional[float] = None
    aspect_ratio: Optional[float] = None


class Sizing(SimplifiedModel):
    horizontal: Optional[Literal["fixed", "fill", "hug"]] = None
    vertical: Optional[Literal["fixed", "fill", "hug"]] = None


class SimplifiedLayout(SimplifiedModel):
    mode: Literal["none", "row", "column"] = "none"
    display: Optional[str] = None
    flex_direction: Optional[str] = None
    justify_content: Optional[str] = None
    align_items: Optional[str] = None
    align_self: Optional[str] = None
    wrap: Optional[bool] = None
    gap: Optional[str] = None
    padding: Optional[str] = None
    overflow_scroll: Optional[list[Literal["x", "y"]]] = None
    sizing: Optional[Sizing] = None
    position: Optional[Literal["absolute"]] = None
    location_relative_to_parent: Optional[Location] = None
    top: Optional[str] = None
    left: Optional[str] = None
    dimensions: Optional[Dimensions] = None
    width: Optional[str] = None
    height: Optional[str] = None
    grid_template_columns: Optional[str] = None
    grid_template_rows: Optional[str] = None
    grid_gap: Optional[str] = None


StyleValue = Union[
    SimplifiedLayout,
    SimplifiedTextStyle,
    SimplifiedStroke,
    SimplifiedEffects,
    list[SimplifiedFill],
    str,
]


class GlobalVars(SimplifiedModel):
    styles: dict[StyleId, Any] = Field(default_factory=dict)


# =====================================================
# Nodes and components
# =====================================================

class ComponentProperty(SimplifiedModel):
    name: str
    value: str
    type: str


class ComponentDefinition(SimplifiedModel):
    id: str
    key: Optional[str] = None
    name: str
    description: str = ""
    component_set_id: Optional[str] = None
    properties: list[ComponentProperty] = Field(default_factory=list)
    variants: list[ComponentProperty] = Field(default_factory=list)


class ComponentSetDefinition(SimplifiedModel):
    id: str
    key: Optional[str] = None
    name: str
    description: str = ""
    components: dict[str, ComponentDefinition] = Field(default_factory=dict)
    variant_properties: list[str] = Field(default_factory=list)


class SimplifiedNode(SimplifiedModel):
    id: str
    name: str
    type: str
    # text
    text: Optional[str] = None
    text_style: Optional[StyleId] = None
    # appearance
    fills: Optional[StyleId] = None
    strokes: Optional[StyleId] = None
    effects: Optional[StyleId] = None
    opacity: Optional[float] = None
    border_radius: Optional[str] = None
    # layout
    layout: Optional[StyleId] = None
    # components
    component_id: Optional[str] = None
    component_properties: Optional[list[ComponentProperty]] = None
    children: Optional[list["SimplifiedNode"]] = None


class SimplifiedDesign(SimplifiedModel):
    name: str = ""
    last_modified: str = ""
    thumbnail_url: str = ""
    nodes: list[SimplifiedNode] = Field(default_factory=list)
    components: dict[str, ComponentDefinition] = Field(default_factory=dict)
    component_sets: dict[str, ComponentSetDefinition] = Field(default_factory=dict)
    global_vars: GlobalVars = Field(default_factory=GlobalVars)
