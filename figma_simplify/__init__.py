from .errors import ExtractionError, InvalidRootError, StyleIdExhaustedError
from .extractors import (
    ALL_EXTRACTORS, LAYOUT_AND_TEXT, CONTENT_ONLY, VISUALS_ONLY, LAYOUT_ONLY,
    ExtractionResult, TraversalContext, TraversalOptions, extractor_sets,
    extract_from_design, extract_from_design_nodes, simplify_raw_figma_object,
)
from .store import GlobalVariableStore
from .tokens import DesignTokenGenerator, generate_css_custom_properties, generate_design_tokens
from .serialize import to_json, to_outline

__version__ = "0.1.0"

__all__ = [
    "ExtractionError", "InvalidRootError", "StyleIdExhaustedError",
    "ALL_EXTRACTORS", "LAYOUT_AND_TEXT", "CONTENT_ONLY", "VISUALS_ONLY", "LAYOUT_ONLY",
    "ExtractionResult", "TraversalContext", "TraversalOptions", "extractor_sets",
    "extract_from_design", "extract_from_design_nodes", "simplify_raw_figma_object",
    "GlobalVariableStore",
    "DesignTokenGenerator", "generate_css_custom_properties", "generate_design_tokens",
    "to_json", "to_outline",
]
