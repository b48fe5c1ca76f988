import copy
import json
import logging

import pytest

from figma_simplify.errors import InvalidRootError
from figma_simplify.extractors import (
    ALL_EXTRACTORS,
    LAYOUT_ONLY,
    TraversalContext,
    TraversalOptions,
    extract_from_design,
    extract_from_design_nodes,
    process_node,
)
from figma_simplify.models.figma import GroupNode
from figma_simplify.settings import settings
from figma_simplify.store.global_vars import GlobalVariableStore


def count_nodes(node) -> int:
    total, stack = 0, [node]
    while stack:
        current = stack.pop()
        total += 1
        stack.extend(current.children or [])
    return total


def max_depth_of(node) -> int:
    deepest, stack = 0, [(node, 0)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in current.children or [])
    return deepest


def nested(depth: int) -> dict:
    node = {"id": f"n{depth}", "name": "leaf", "type": "GROUP"}
    for level in range(depth - 1, -1, -1):
        node = {"id": f"n{level}", "name": "group", "type": "GROUP", "children": [node]}
    return node


def test_card_is_simplified(card):
    result = extract_from_design(card, ALL_EXTRACTORS)
    assert result.id == "1:1"
    assert result.layout is not None
    assert result.fills is not None
    assert result.effects is not None
    assert result.border_radius == "8px"
    assert [c.id for c in result.children] == ["1:2", "1:3", "1:5"]
    assert result.children[0].text == "Hello"


def test_vector_type_is_normalized(card):
    result = extract_from_design(card, ALL_EXTRACTORS)
    assert result.children[-1].type == "IMAGE-SVG"


def test_identical_styles_converge_to_one_entry(card):
    store = GlobalVariableStore()
    result = extract_from_design(card, ALL_EXTRACTORS, global_vars=store)
    title, body = result.children[0], result.children[1]
    assert title.text_style == body.text_style
    assert title.fills == body.fills
    assert len(store.get_by_type("textStyle")) == 1


def test_hidden_subtree_is_excluded_everywhere(card):
    card["children"][2]["type"] = "FRAME"
    card["children"][2]["children"] = [{"id": "1:9", "type": "TEXT", "characters": "secret",
                                        "style": {"fontFamily": "Secret Sans", "fontSize": 99}}]
    store = GlobalVariableStore()
    result = extract_from_design(card, ALL_EXTRACTORS, global_vars=store)
    ids = set()
    stack = [result]
    while stack:
        node = stack.pop()
        ids.add(node.id)
        stack.extend(node.children or [])
    assert "1:4" not in ids and "1:9" not in ids
    assert "#ff0000" not in str(dict(store.styles))
    assert "Secret Sans" not in str(dict(store.styles))


def test_no_children_key_when_none_survive():
    node = {"id": "1", "type": "FRAME", "children": [{"id": "2", "type": "TEXT", "visible": False}]}
    result = extract_from_design(node, [])
    assert result.children is None
    assert "children" not in result.to_dict()


def test_invisible_root_raises():
    with pytest.raises(InvalidRootError) as excinfo:
        extract_from_design({"id": "7:7", "type": "FRAME", "visible": False}, ALL_EXTRACTORS)
    assert excinfo.value.node_id == "7:7"


def test_filtered_root_raises():
    options = TraversalOptions(node_filter=lambda n: n.type != "FRAME")
    with pytest.raises(InvalidRootError):
        extract_from_design({"id": "1", "type": "FRAME"}, [], traversal_options=options)


def test_node_filter_prunes_subtrees(card):
    options = TraversalOptions(node_filter=lambda n: n.type != "TEXT")
    result = extract_from_design(card, [], traversal_options=options)
    assert [c.id for c in result.children] == ["1:5"]


def test_process_node_returns_none_for_filtered_nodes():
    context = TraversalContext(global_vars=GlobalVariableStore())
    assert process_node({"type": "FRAME", "visible": False}, [], context) is None


@pytest.mark.parametrize("limit", [0, 1, 3])
def test_depth_bound(limit):
    result = extract_from_design(nested(6), [], traversal_options=TraversalOptions(max_depth=limit))
    assert max_depth_of(result) == limit


def test_default_depth_comes_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "default_max_depth", 2)
    assert max_depth_of(extract_from_design(nested(6), [])) == 2


def test_single_pass_regardless_of_extractor_count(card):
    visits = []

    def counting(node, result, context):
        visits.append(node.id)

    def noop(node, result, context):
        pass

    result = extract_from_design(card, [counting] + [noop] * 9)
    assert len(visits) == count_nodes(result)
    assert len(visits) == len(set(visits))


def test_extractors_run_in_order_before_children(card):
    calls = []

    def first(node, result, context):
        calls.append(("first", node.id))

    def second(node, result, context):
        calls.append(("second", node.id))

    extract_from_design(card, [first, second])
    assert calls[:4] == [("first", "1:1"), ("second", "1:1"), ("first", "1:2"), ("second", "1:2")]


def test_context_tracks_depth_and_parent(card):
    seen = {}

    def record(node, result, context):
        seen[node.id] = (context.current_depth, context.parent.id if context.parent else None)

    extract_from_design(card, [record])
    assert seen["1:1"] == (0, None)
    assert seen["1:2"] == (1, "1:1")


def test_determinism(card):
    def resolved(store, node):
        data = node.to_dict()
        stack = [data]
        while stack:
            item = stack.pop()
            for key in ("layout", "fills", "strokes", "effects", "textStyle"):
                if key in item:
                    item[key] = store.get(item[key])
            stack.extend(item.get("children", []))
        return data

    first_store, second_store = GlobalVariableStore(), GlobalVariableStore()
    first = extract_from_design(copy.deepcopy(card), ALL_EXTRACTORS, global_vars=first_store)
    second = extract_from_design(copy.deepcopy(card), ALL_EXTRACTORS, global_vars=second_store)
    assert resolved(first_store, first) == resolved(second_store, second)
    assert len(first_store) == len(second_store)


def test_multi_root_skips_filtered_roots(card):
    hidden = {"id": "9:9", "type": "FRAME", "visible": False}
    result = extract_from_design_nodes([card, hidden, "junk"], LAYOUT_ONLY)
    assert [n.id for n in result.nodes] == ["1:1"]
    assert len(result.global_vars) > 0
    dumped = result.to_dict()
    assert set(dumped) == {"nodes", "globalVars"}
    assert set(dumped["globalVars"]["styles"]) == set(result.global_vars.styles)


def test_multi_root_shares_the_store(card):
    other = copy.deepcopy(card)
    other["id"] = "2:1"
    result = extract_from_design_nodes([card, other], ALL_EXTRACTORS)
    assert result.nodes[0].fills == result.nodes[1].fills


def test_deep_trees_do_not_hit_the_recursion_limit():
    depth = 5000
    node = GroupNode.model_construct(id=f"n{depth}", name="leaf", type="GROUP", children=[])
    for level in range(depth - 1, -1, -1):
        node = GroupNode.model_construct(id=f"n{level}", name="group", type="GROUP", children=[node])

    visits = []
    result = extract_from_design(node, [lambda n, r, c: visits.append(n.id)])
    assert len(visits) == depth + 1
    assert max_depth_of(result) == depth


def test_non_finite_numbers_do_not_stop_the_walk():
    document = json.loads(
        '{"id": "1", "type": "FRAME", "absoluteBoundingBox": {"x": 0, "y": 0, "width": 100, "height": 100},'
        ' "children": ['
        '  {"id": "2", "type": "RECTANGLE", "absoluteBoundingBox": {"x": 0, "y": 0, "width": NaN, "height": 10},'
        '   "fills": [{"type": "SOLID", "color": {"r": NaN, "g": 0, "b": 0}}]},'
        '  {"id": "3", "type": "RECTANGLE", "absoluteBoundingBox": {"x": 10, "y": 10, "width": 20, "height": 20}}'
        ']}'
    )
    store = GlobalVariableStore()
    result = extract_from_design_nodes([document], ALL_EXTRACTORS, global_vars=store)
    children = result.nodes[0].children
    assert [c.id for c in children] == ["2", "3"]
    assert store.get(children[0].fills) == ["#000000"]


def test_missing_store_is_reported(card, caplog):
    with caplog.at_level(logging.WARNING):
        extract_from_design(card, ALL_EXTRACTORS)
    assert "1:1" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.WARNING):
        extract_from_design(card, ALL_EXTRACTORS, global_vars=GlobalVariableStore())
    assert caplog.text == ""
