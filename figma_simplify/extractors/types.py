from dataclasses import dataclass, replace
from typing import Callable, Optional

from figma_simplify.models.figma import RawNode
from figma_simplify.models.simplified import SimplifiedNode
from figma_simplify.store.global_vars import GlobalVariableStore


@dataclass(frozen=True)
class TraversalContext:
    global_vars: GlobalVariableStore
    current_depth: int = 0
    parent: Optional[RawNode] = None

    def child(self, parent: RawNode) -> "TraversalContext":
        return replace(self, current_depth=self.current_depth + 1, parent=parent)


@dataclass
class TraversalOptions:
    max_depth: Optional[int] = None
    node_filter: Optional[Callable[[RawNode], bool]] = None


# An extractor reads the raw node and writes fields onto the result node,
# registering shared style values in ``context.global_vars``.
ExtractorFn = Callable[[RawNode, SimplifiedNode, TraversalContext], None]
