import itertools

import pytest

from figma_simplify.store.global_vars import GlobalVariableStore


def solid(r, g, b, a=1.0, **extra):
    return {"type": "SOLID", "color": {"r": r, "g": g, "b": b, "a": a}, **extra}


def box(x, y, width, height):
    return {"x": x, "y": y, "width": width, "height": height}


@pytest.fixture
def sequential_store():
    """Store whose ids are predictable: ``<prefix>_000001``, ``<prefix>_000002``, ..."""
    counter = itertools.count(1)
    return GlobalVariableStore(id_factory=lambda prefix: f"{prefix}_{next(counter):06d}")


@pytest.fixture
def card():
    return {
        "id": "1:1",
        "name": "Card",
        "type": "FRAME",
        "layoutMode": "VERTICAL",
        "itemSpacing": 8,
        "paddingTop": 16,
        "paddingRight": 16,
        "paddingBottom": 16,
        "paddingLeft": 16,
        "cornerRadius": 8,
        "absoluteBoundingBox": box(0, 0, 320, 200),
        "fills": [solid(1, 1, 1)],
        "effects": [{
            "type": "DROP_SHADOW",
            "visible": True,
            "color": {"r": 0, "g": 0, "b": 0, "a": 0.25},
            "offset": {"x": 0, "y": 4},
            "radius": 8,
            "spread": 0,
        }],
        "children": [
            {
                "id": "1:2",
                "name": "Title",
                "type": "TEXT",
                "characters": "Hello",
                "absoluteBoundingBox": box(16, 16, 288, 24),
                "style": {"fontFamily": "Inter", "fontWeight": 600, "fontSize": 16, "lineHeightPx": 24},
                "fills": [solid(0, 0, 0)],
            },
            {
                "id": "1:3",
                "name": "Body",
                "type": "TEXT",
                "characters": "World",
                "absoluteBoundingBox": box(16, 48, 288, 24),
                "style": {"fontFamily": "Inter", "fontWeight": 600, "fontSize": 16, "lineHeightPx": 24},
                "fills": [solid(0, 0, 0)],
            },
            {
                "id": "1:4",
                "name": "Hidden",
                "type": "RECTANGLE",
                "visible": False,
                "fills": [solid(1, 0, 0)],
            },
            {
                "id": "1:5",
                "name": "Icon",
                "type": "VECTOR",
                "absoluteBoundingBox": box(16, 80, 24, 24),
                "fills": [solid(0, 0, 1)],
            },
        ],
    }
