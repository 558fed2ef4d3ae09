"""Export a RedBlackBST as a networkx graph for inspection.

Nodes of the graph are the tree's keys, so keys must be hashable to be
exported. Each edge describes the link from a parent to its child.
"""
from typing import Dict

import networkx as nx

from .node import Colour, Direction


def to_digraph(tree) -> nx.DiGraph:
    """Returns a directed graph with an edge from every node to each of its children

    Node attributes: value, size, colour.
    Edge attributes: direction, colour, and black (1 for a black link, 0 for a
    red one) which can be used as a weight to measure black depth.
    """
    graph = nx.DiGraph()
    if tree.root is None:
        return graph

    graph.graph["root"] = tree.root.key
    stack = [tree.root]
    while stack:
        node = stack.pop()
        graph.add_node(node.key, value=node.value, size=node.size, colour=node.colour)
        for direction in (Direction.LEFT, Direction.RIGHT):
            child = node.get_child(direction)
            if child is None:
                continue
            graph.add_edge(
                node.key, child.key,
                direction=direction,
                colour=child.colour,
                black=int(child.colour == Colour.BLACK),
            )
            stack.append(child)
    return graph


def black_depths(graph: nx.DiGraph, root=None) -> Dict:
    """Returns the number of black links from the root to each node missing a child

    In a balanced tree every value in the result is the same.
    """
    if graph.number_of_nodes() == 0:
        return {}
    if root is None:
        root = graph.graph["root"]
    # the root's own link is counted as black, like every other black node
    depths = nx.single_source_dijkstra_path_length(graph, root, weight="black")
    return {
        key: depth + 1
        for key, depth in depths.items()
        if graph.out_degree(key) < 2
    }
