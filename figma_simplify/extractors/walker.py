"""
Single-pass tree walker.

Every visited node gets all active extractors applied exactly once, before its
children are visited. The walk uses an explicit stack, so arbitrarily deep
documents do not run into the interpreter's recursion limit.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from figma_simplify.errors import InvalidRootError
from figma_simplify.extractors.types import ExtractorFn, TraversalContext, TraversalOptions
from figma_simplify.models.figma import NodeBase, RawNode, parse_node
from figma_simplify.models.simplified import GlobalVars, SimplifiedNode
from figma_simplify.settings import settings
from figma_simplify.store.global_vars import GlobalVariableStore
from figma_simplify.utils.common import is_visible


logger = logging.getLogger(__name__)

# Vendor-specific vector type, exported downstream as an SVG image
TYPE_ALIASES = {"VECTOR": "IMAGE-SVG"}

NodeInput = Union[RawNode, Mapping[str, Any]]


@dataclass
class ExtractionResult:
    nodes: list[SimplifiedNode] = field(default_factory=list)
    global_vars: GlobalVariableStore = field(default_factory=GlobalVariableStore)

    def to_dict(self) -> dict:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "globalVars": self.global_vars.to_global_vars().to_dict(),
        }


def _ensure_store(global_vars: Union[GlobalVariableStore, GlobalVars, Mapping, None]) -> GlobalVariableStore:
    if isinstance(global_vars, GlobalVariableStore):
        return global_vars
    return GlobalVariableStore(global_vars)


def _is_filtered(node: RawNode, options: TraversalOptions) -> bool:
    if not is_visible(node):
        return True
    if options.node_filter is not None and not options.node_filter(node):
        return True
    return False


def _simplify(node: RawNode, extractors: list[ExtractorFn], context: TraversalContext) -> SimplifiedNode:
    result = SimplifiedNode(
        id=node.id,
        name=node.name,
        type=TYPE_ALIASES.get(node.type, node.type),
    )
    for extractor in extractors:
        extractor(node, result, context)
    return result


def process_node(
    node: NodeInput,
    extractors: list[ExtractorFn],
    context: TraversalContext,
    options: Optional[TraversalOptions] = None,
) -> Optional[SimplifiedNode]:
    """
    Simplify ``node`` and its subtree.

    Returns None when the node itself is filtered out; filtered descendants
    are dropped together with their subtrees.
    """
    options = options or TraversalOptions()
    max_depth = options.max_depth if options.max_depth is not None else settings.default_max_depth

    root: Optional[SimplifiedNode] = None
    stack: list[tuple[Any, TraversalContext, Optional[SimplifiedNode]]] = [
        (parse_node(node), context, None)
    ]
    while stack:
        raw, ctx, parent_result = stack.pop()
        if _is_filtered(raw, options):
            logger.debug("Skipping filtered node %s (%s)", raw.id, raw.type)
            if parent_result is None:
                return None
            continue

        result = _simplify(raw, extractors, ctx)
        if parent_result is None:
            root = result
        elif parent_result.children is None:
            parent_result.children = [result]
        else:
            parent_result.children.append(result)

        if max_depth is not None and ctx.current_depth >= max_depth:
            continue
        children = getattr(raw, "children", None) or []
        child_context = ctx.child(raw)
        # reversed so siblings are popped in document order
        for child in reversed(children):
            if isinstance(child, NodeBase):
                stack.append((child, child_context, result))

    return root


def extract_from_design(
    node: NodeInput,
    extractors: list[ExtractorFn],
    global_vars: Union[GlobalVariableStore, GlobalVars, Mapping, None] = None,
    traversal_options: Optional[TraversalOptions] = None,
) -> SimplifiedNode:
    """
    Simplify exactly one node. Raises InvalidRootError if it is filtered out.

    Style references on the result point into ``global_vars``; pass a store
    to be able to resolve them.
    """
    raw = parse_node(node)
    if global_vars is None:
        logger.warning(
            "No global_vars given for node %s; its style references will not be resolvable",
            raw.id,
        )
    context = TraversalContext(global_vars=_ensure_store(global_vars))
    result = process_node(raw, extractors, context, traversal_options)
    if result is None:
        raise InvalidRootError(raw.id)
    return result


def extract_from_design_nodes(
    nodes: Iterable[NodeInput],
    extractors: list[ExtractorFn],
    options: Optional[TraversalOptions] = None,
    global_vars: Union[GlobalVariableStore, GlobalVars, Mapping, None] = None,
) -> ExtractionResult:
    store = _ensure_store(global_vars)
    context = TraversalContext(global_vars=store)

    simplified = []
    for node in nodes:
        if not isinstance(node, (Mapping, NodeBase)):
            logger.debug("Skipping non-object root entry: %r", type(node).__name__)
            continue
        result = process_node(node, extractors, context, options)
        if result is not None:
            simplified.append(result)

    logger.debug("Extracted %d root nodes, %d styles", len(simplified), len(store))
    return ExtractionResult(nodes=simplified, global_vars=store)
