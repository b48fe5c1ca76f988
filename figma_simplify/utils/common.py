import math
import secrets
from collections.abc import Mapping
from typing import Any, Optional

from figma_simplify.settings import settings


def is_visible(element: Any) -> bool:
    """Elements are visible unless ``visible`` is explicitly false."""
    if isinstance(element, Mapping):
        visible = element.get("visible", True)
    else:
        visible = getattr(element, "visible", True)
    return visible is not False


def pixel_round(num: float) -> float:
    """Round a pixel value to two decimal places."""
    if isinstance(num, bool) or not isinstance(num, (int, float)) or math.isnan(num):
        raise TypeError(f"Input must be a valid number, got {num!r}")
    return round(float(num), 2)


def format_number(value: float) -> str:
    value = pixel_round(value)
    if value.is_integer():
        return str(int(value))
    return str(value)


def format_px(value: float) -> str:
    return f"{format_number(value)}px"


def generate_css_shorthand(
    values: Mapping[str, float],
    ignore_zero: bool = True,
    suffix: str = "px",
) -> Optional[str]:
    """
    Build a CSS box shorthand from top/right/bottom/left values.

    {top: 10, right: 10, bottom: 10, left: 10} -> "10px"
    {top: 10, right: 20, bottom: 10, left: 20} -> "10px 20px"
    {top: 10, right: 20, bottom: 30, left: 40} -> "10px 20px 30px 40px"

    Returns None when every side is zero and ``ignore_zero`` is set.
    """
    top = values.get("top") or 0
    right = values.get("right") or 0
    bottom = values.get("bottom") or 0
    left = values.get("left") or 0

    if ignore_zero and top == 0 and right == 0 and bottom == 0 and left == 0:
        return None

    t, r, b, l = (f"{format_number(v)}{suffix}" for v in (top, right, bottom, left))
    if top == right == bottom == left:
        return t
    if top == bottom and right == left:
        return f"{t} {r}"
    return f"{t} {r} {b} {l}"


def generate_style_id(
    prefix: str = "var",
    length: Optional[int] = None,
    alphabet: Optional[str] = None,
) -> str:
    length = length or settings.style_id_length
    alphabet = alphabet or settings.style_id_alphabet
    suffix = "".join(secrets.choice(alphabet) for _ in range(length))
    return f"{prefix}_{suffix}"


def remove_empty_keys(value: Any) -> Any:
    """Recursively drop None values, empty lists and empty dicts."""
    if isinstance(value, list):
        return [remove_empty_keys(item) for item in value]
    if not isinstance(value, dict):
        return value

    result = {}
    for key, item in value.items():
        cleaned = remove_empty_keys(item)
        if cleaned is None:
            continue
        if isinstance(cleaned, (list, dict)) and not cleaned:
            continue
        result[key] = cleaned
    return result
