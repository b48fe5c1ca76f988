from .global_vars import GlobalVariableStore, canonicalize, style_prefix, to_jsonable

__all__ = ["GlobalVariableStore", "canonicalize", "style_prefix", "to_jsonable"]
