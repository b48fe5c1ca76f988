import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from figma_simplify.extractors.types import ExtractorFn, TraversalOptions
from figma_simplify.extractors.walker import extract_from_design_nodes
from figma_simplify.models.simplified import GlobalVars, SimplifiedDesign
from figma_simplify.store.global_vars import GlobalVariableStore
from figma_simplify.transformers.component import simplify_component_sets, simplify_components


logger = logging.getLogger(__name__)


def _parse_response(data: Mapping[str, Any]) -> tuple[list, dict, dict]:
    """Root nodes, components and component sets of a file or nodes response."""
    components: dict = {}
    component_sets: dict = {}

    if isinstance(data.get("nodes"), Mapping):
        roots = []
        for node_id, entry in data["nodes"].items():
            if not isinstance(entry, Mapping) or not isinstance(entry.get("document"), Mapping):
                logger.debug("Node %s has no document, skipping", node_id)
                continue
            components.update(entry.get("components") or {})
            component_sets.update(entry.get("componentSets") or {})
            roots.append(entry["document"])
        return roots, components, component_sets

    components.update(data.get("components") or {})
    component_sets.update(data.get("componentSets") or {})
    document = data.get("document")
    roots = list(document.get("children") or []) if isinstance(document, Mapping) else []
    return roots, components, component_sets


def simplify_raw_figma_object(
    response: Mapping[str, Any],
    extractors: list[ExtractorFn],
    options: Optional[TraversalOptions] = None,
    global_vars: Union[GlobalVariableStore, GlobalVars, Mapping, None] = None,
) -> SimplifiedDesign:
    """
    Simplify a whole API response (``GET /v1/files/:key`` or
    ``GET /v1/files/:key/nodes``): the node trees plus component metadata.
    """
    roots, components, component_sets = _parse_response(response)
    result = extract_from_design_nodes(roots, extractors, options, global_vars)

    return SimplifiedDesign(
        name=response.get("name") or "",
        last_modified=response.get("lastModified") or "",
        thumbnail_url=response.get("thumbnailUrl") or "",
        nodes=result.nodes,
        components=simplify_components(components),
        component_sets=simplify_component_sets(component_sets, components),
        global_vars=result.global_vars.to_global_vars(),
    )
