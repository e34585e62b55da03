import pytest

from algods.lcrs_tree import LCRSNode


@pytest.fixture
def root():
    nodes = {name: LCRSNode(name) for name in "ABCDEFGHIJK"}
    a = nodes["A"]
    a.add_child(nodes["B"])
    nodes["B"].add_child(nodes["C"])
    nodes["B"].add_child(nodes["D"])
    nodes["D"].add_child(nodes["E"])
    nodes["D"].add_child(nodes["F"])
    a.add_child(nodes["G"])
    nodes["G"].add_child(nodes["H"])
    a.add_child(nodes["I"])
    nodes["I"].add_child(nodes["J"])
    nodes["J"].add_child(nodes["K"])
    return a


def test_format_tree(root):
    expected = (
        "A\n"
        "+--B\n"
        "   +--C\n"
        "   +--D\n"
        "      +--E\n"
        "      +--F\n"
        "+--G\n"
        "   +--H\n"
        "+--I\n"
        "   +--J\n"
        "      +--K\n"
    )
    assert root.format_tree(0) == expected


def test_nodes_at_level_two(root):
    assert "".join(root.nodes_at_level(2)) == "CDHJ"


def test_nodes_at_levels(root):
    assert root.nodes_at_level(0) == ["A"]
    assert root.nodes_at_level(1) == ["B", "G", "I"]
    assert root.nodes_at_level(3) == ["E", "F", "K"]
    assert root.nodes_at_level(4) == []


def test_children_order(root):
    assert [child.data for child in root.children()] == ["B", "G", "I"]


def test_leaf_has_no_children():
    leaf = LCRSNode("Z")
    assert list(leaf.children()) == []
    assert leaf.format_tree(0) == "Z\n"


def test_add_child_links_siblings():
    parent = LCRSNode("P")
    first, second = LCRSNode("1"), LCRSNode("2")
    parent.add_child(first)
    parent.add_child(second)
    assert parent.left_child is first
    assert first.right_sibling is second