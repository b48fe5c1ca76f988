from dataclasses import dataclass, field
from typing import Optional

from figma_simplify.extractors.types import ExtractorFn, TraversalContext
from figma_simplify.models.figma import BlendTraits, RawNode
from figma_simplify.models.simplified import SimplifiedNode
from figma_simplify.transformers.color import build_simplified_fills
from figma_simplify.transformers.component import extract_component_properties
from figma_simplify.transformers.effects import build_simplified_effects
from figma_simplify.transformers.layout import build_simplified_layout
from figma_simplify.transformers.style import build_border_radius, build_simplified_strokes
from figma_simplify.transformers.text import extract_node_text, extract_text_style
from figma_simplify.utils.identity import has_children, is_instance_node


def layout_extractor(node: RawNode, result: SimplifiedNode, context: TraversalContext) -> None:
    layout = build_simplified_layout(node, context.parent)
    fields = layout.model_dump(exclude_none=True)
    if layout.mode == "none" and fields.keys() <= {"mode", "display"}:
        return
    result.layout = context.global_vars.find_or_create(layout, "layout")


def text_extractor(node: RawNode, result: SimplifiedNode, context: TraversalContext) -> None:
    text = extract_node_text(node)
    if text:
        result.text = text

    style = extract_text_style(node)
    if style is not None:
        result.text_style = context.global_vars.find_or_create(style, "textStyle")


def visuals_extractor(node: RawNode, result: SimplifiedNode, context: TraversalContext) -> None:
    store = context.global_vars

    fills = build_simplified_fills(node)
    if fills:
        result.fills = store.find_or_create(fills, "fill")

    strokes = build_simplified_strokes(node, has_children(node))
    if strokes.colors:
        result.strokes = store.find_or_create(strokes, "stroke")

    effects = build_simplified_effects(node)
    if not effects.is_empty():
        result.effects = store.find_or_create(effects, "effect")

    if isinstance(node, BlendTraits) and node.opacity is not None and node.opacity != 1:
        result.opacity = node.opacity

    border_radius = build_border_radius(node)
    if border_radius:
        result.border_radius = border_radius


def component_extractor(node: RawNode, result: SimplifiedNode, context: TraversalContext) -> None:
    if not is_instance_node(node):
        return
    if node.component_id:
        result.component_id = node.component_id
    properties = extract_component_properties(node)
    if properties:
        result.component_properties = properties


ALL_EXTRACTORS: list[ExtractorFn] = [
    layout_extractor, text_extractor, visuals_extractor, component_extractor,
]
LAYOUT_AND_TEXT: list[ExtractorFn] = [layout_extractor, text_extractor]
CONTENT_ONLY: list[ExtractorFn] = [text_extractor]
VISUALS_ONLY: list[ExtractorFn] = [visuals_extractor]
LAYOUT_ONLY: list[ExtractorFn] = [layout_extractor]


@dataclass
class ExtractorSet:
    name: str
    description: str
    extractors: list[ExtractorFn] = field(default_factory=list)


class ExtractorSetRegistry:
    _instance: Optional["ExtractorSetRegistry"] = None
    _sets: dict[str, ExtractorSet]

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._sets = {}
        return cls._instance

    def register(self, extractor_set: ExtractorSet):
        self._sets[extractor_set.name] = extractor_set

    def get(self, name: str) -> Optional[ExtractorSet]:
        return self._sets.get(name)

    def list_all(self) -> list[ExtractorSet]:
        return list(self._sets.values())


extractor_sets = ExtractorSetRegistry()


def register_extractor_sets():
    extractor_sets.register(ExtractorSet(
        "all", "Layout, text, visuals and component references", ALL_EXTRACTORS,
    ))
    extractor_sets.register(ExtractorSet(
        "layout-and-text", "Structure and content without visual styling", LAYOUT_AND_TEXT,
    ))
    extractor_sets.register(ExtractorSet(
        "content-only", "Text content and typography", CONTENT_ONLY,
    ))
    extractor_sets.register(ExtractorSet(
        "visuals-only", "Fills, strokes, effects, opacity and corner radius", VISUALS_ONLY,
    ))
    extractor_sets.register(ExtractorSet(
        "layout-only", "Flex, grid and box layout", LAYOUT_ONLY,
    ))


register_extractor_sets()
