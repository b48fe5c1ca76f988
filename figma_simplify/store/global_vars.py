"""
Global variable store.

Deduplicates style values by structure: every value is reduced to its JSON
form (camelCase keys, no nulls) and serialised with sorted keys, and that
canonical string is the identity of the value. One store instance is meant for
one writer at a time; parallel extractions use separate stores and ``merge``.
"""

import json
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel

from figma_simplify.errors import StyleIdExhaustedError
from figma_simplify.models.simplified import GlobalVars, StyleId
from figma_simplify.models.tokens import StoreStatistics
from figma_simplify.settings import settings
from figma_simplify.utils.common import generate_style_id


logger = logging.getLogger(__name__)


def to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return to_jsonable(value.model_dump(mode="json", by_alias=True, exclude_none=True))
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    # 16 and 16.0 are the same number in the document
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def canonicalize(value: Any) -> str:
    return json.dumps(to_jsonable(value), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def style_prefix(style_id: StyleId) -> str:
    prefix, sep, _ = style_id.rpartition("_")
    return prefix if sep else style_id


class GlobalVariableStore:
    def __init__(
        self,
        initial: Union[GlobalVars, Mapping, None] = None,
        id_factory: Optional[Callable[[str], str]] = None,
    ):
        self._styles: dict[StyleId, Any] = {}
        self._index: dict[str, StyleId] = {}
        self._duplicates = 0
        self._id_factory = id_factory or generate_style_id

        if initial is not None:
            styles = initial.styles if isinstance(initial, GlobalVars) else initial.get("styles", {})
            for style_id, value in styles.items():
                self._insert(style_id, value)

    def _insert(self, style_id: StyleId, value: Any) -> None:
        key = canonicalize(value)
        if key in self._index:
            logger.warning(
                "Style %s duplicates %s and was not loaded", style_id, self._index[key]
            )
            return
        self._styles[style_id] = to_jsonable(value)
        self._index[key] = style_id

    def _new_id(self, prefix: str) -> StyleId:
        attempts = settings.style_id_max_attempts
        for attempt in range(attempts):
            style_id = self._id_factory(prefix)
            if style_id not in self._styles:
                return style_id
            logger.warning("Style id collision on %s (attempt %d)", style_id, attempt + 1)
        raise StyleIdExhaustedError(prefix, attempts)

    def find_or_create(self, value: Any, prefix: str) -> StyleId:
        """Return the id of a structurally equal entry, registering ``value`` if there is none."""
        key = canonicalize(value)
        existing = self._index.get(key)
        if existing is not None:
            self._duplicates += 1
            return existing

        style_id = self._new_id(prefix)
        self._styles[style_id] = to_jsonable(value)
        self._index[key] = style_id
        logger.debug("Registered style %s", style_id)
        return style_id

    def get(self, style_id: StyleId) -> Optional[Any]:
        return self._styles.get(style_id)

    def get_by_type(self, prefix: str) -> dict[StyleId, Any]:
        return {
            style_id: value
            for style_id, value in self._styles.items()
            if style_prefix(style_id) == prefix
        }

    def clear(self) -> None:
        self._styles.clear()
        self._index.clear()
        self._duplicates = 0

    @property
    def styles(self) -> Mapping[StyleId, Any]:
        return MappingProxyType(self._styles)

    def statistics(self) -> StoreStatistics:
        by_type: dict[str, int] = {}
        for style_id in self._styles:
            prefix = style_prefix(style_id)
            by_type[prefix] = by_type.get(prefix, 0) + 1
        return StoreStatistics(
            total_variables=len(self._styles),
            variables_by_type=by_type,
            duplicates_found=self._duplicates,
            memory_usage=sum(len(key.encode("utf-8")) for key in self._index),
        )

    def merge(self, other: "GlobalVariableStore") -> dict[StyleId, StyleId]:
        """
        Fold ``other`` into this store.

        Returns a mapping from ids in ``other`` to ids in this store, so
        references in trees built against ``other`` can be rewritten.
        """
        mapping = {}
        for style_id, value in other.styles.items():
            mapping[style_id] = self.find_or_create(value, style_prefix(style_id))
        return mapping

    def to_global_vars(self) -> GlobalVars:
        return GlobalVars(styles=dict(self._styles))

    def __len__(self) -> int:
        return len(self._styles)

    def __contains__(self, style_id: object) -> bool:
        return style_id in self._styles

    def __repr__(self) -> str:
        return f"<GlobalVariableStore styles={len(self._styles)}>"
