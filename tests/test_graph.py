import random

import networkx as nx
import pytest

from llrb import Colour, Node, RedBlackBST
from llrb.graph import black_depths, to_digraph
from llrb.node import Direction


@pytest.fixture
def tree():
    tree = RedBlackBST()
    for i, key in enumerate("SEARCHXMPL"):
        tree.put(key, i)
    yield tree


def test_empty_tree_exports_empty_graph():
    graph = to_digraph(RedBlackBST())

    assert graph.number_of_nodes() == 0
    assert black_depths(graph) == {}


def test_graph_is_arborescence(tree: RedBlackBST):
    graph = to_digraph(tree)

    assert nx.is_arborescence(graph)
    assert graph.number_of_nodes() == tree.size()
    assert graph.graph["root"] == tree.root.key
    assert graph.in_degree(tree.root.key) == 0


def test_node_and_edge_attributes(tree: RedBlackBST):
    graph = to_digraph(tree)
    root = tree.root

    assert graph.nodes[root.key]["size"] == 10
    assert graph.nodes[root.key]["colour"] == Colour.BLACK
    assert graph.nodes["M"]["value"] == 7

    left = graph.edges[root.key, root.left.key]
    assert left["direction"] == Direction.LEFT
    assert left["colour"] == root.left.colour
    assert left["black"] == int(root.left.colour == Colour.BLACK)

    # only left links can be red
    for _, _, data in graph.edges(data=True):
        if data["colour"] == Colour.RED:
            assert data["direction"] == Direction.LEFT


def test_sizes_match_descendants(tree: RedBlackBST):
    graph = to_digraph(tree)

    for key, size in graph.nodes(data="size"):
        assert size == 1 + len(nx.descendants(graph, key))


@pytest.mark.parametrize("seed", range(5))
def test_black_depths_are_equal(seed):
    rng = random.Random(seed)
    tree = RedBlackBST()
    for key in rng.sample(range(5000), 500):
        tree.put(key, key)
    for key in rng.sample(range(5000), 250):
        tree.delete(key)

    depths = black_depths(to_digraph(tree))

    assert len(set(depths.values())) == 1
    # the smallest key always has a missing left child
    assert tree.min() in depths


def test_black_depths_detect_imbalance():
    root = Node(2, "two", Colour.BLACK, 2)
    root.left = Node(1, "one", Colour.BLACK, 1)
    tree = RedBlackBST()
    tree.root = root

    depths = black_depths(to_digraph(tree))

    assert depths == {2: 1, 1: 2}
