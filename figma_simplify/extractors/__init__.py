from .types import ExtractorFn, TraversalContext, TraversalOptions
from .built_in import (
    layout_extractor, text_extractor, visuals_extractor, component_extractor,
    ALL_EXTRACTORS, LAYOUT_AND_TEXT, CONTENT_ONLY, VISUALS_ONLY, LAYOUT_ONLY,
    ExtractorSet, ExtractorSetRegistry, extractor_sets,
)
from .walker import ExtractionResult, extract_from_design, extract_from_design_nodes, process_node
from .design import simplify_raw_figma_object

__all__ = [
    "ExtractorFn", "TraversalContext", "TraversalOptions",
    "layout_extractor", "text_extractor", "visuals_extractor", "component_extractor",
    "ALL_EXTRACTORS", "LAYOUT_AND_TEXT", "CONTENT_ONLY", "VISUALS_ONLY", "LAYOUT_ONLY",
    "ExtractorSet", "ExtractorSetRegistry", "extractor_sets",
    "ExtractionResult", "extract_from_design", "extract_from_design_nodes", "process_node",
    "simplify_raw_figma_object",
]
