"""Structural integrity checks for a RedBlackBST.

Each check walks the whole tree, so they are meant for tests and debugging
rather than for use after every operation in production code.
"""
import logging
from typing import Optional

from .node import Node, is_red, size

logger = logging.getLogger(__name__)


def is_bst(tree) -> bool:
    """Does the tree satisfy symmetric order?

    Order is strict, so this also ensures that no node is reachable twice.
    """
    return _is_bst(tree.root, None, None)


def _is_bst(node: Optional[Node], lo, hi) -> bool:
    # keys are never None, so None stands for a missing bound
    if node is None:
        return True
    if lo is not None and not lo < node.key:
        return False
    if hi is not None and not node.key < hi:
        return False
    return _is_bst(node.left, lo, node.key) and _is_bst(node.right, node.key, hi)


def is_size_consistent(tree) -> bool:
    return _is_size_consistent(tree.root)


def _is_size_consistent(node: Optional[Node]) -> bool:
    if node is None:
        return True
    if node.size != 1 + size(node.left) + size(node.right):
        return False
    return _is_size_consistent(node.left) and _is_size_consistent(node.right)


def is_rank_consistent(tree) -> bool:
    # select() trusts the size fields and can walk off the tree without them
    if not is_size_consistent(tree):
        return False
    for i in range(tree.size()):
        if tree.rank(tree.select(i)) != i:
            return False
    for key in tree.keys():
        rank = tree.rank(key)
        # out of order keys can rank past the end of the tree
        if rank >= tree.size() or tree.select(rank) != key:
            return False
    return True


def is_23(tree) -> bool:
    """No red right links, and at most one left-leaning red link in a row"""
    return _is_23(tree.root, tree.root)


def _is_23(node: Optional[Node], root: Optional[Node]) -> bool:
    if node is None:
        return True
    if is_red(node.right):
        return False
    if node is not root and is_red(node) and is_red(node.left):
        return False
    return _is_23(node.left, root) and _is_23(node.right, root)


def is_balanced(tree) -> bool:
    """Do all paths from the root to a missing child have the same number of black links?"""
    # count the black links on the path to the smallest key and use that as
    # the reference for every other path
    black = 0
    node = tree.root
    while node is not None:
        if not is_red(node):
            black += 1
        node = node.left
    return _is_balanced(tree.root, black)


def _is_balanced(node: Optional[Node], black: int) -> bool:
    if node is None:
        return black == 0
    if not is_red(node):
        black -= 1
    return _is_balanced(node.left, black) and _is_balanced(node.right, black)


CHECKS = (
    (is_bst, "Not in symmetric order"),
    (is_size_consistent, "Subtree counts not consistent"),
    (is_rank_consistent, "Ranks not consistent"),
    (is_23, "Not a 2-3 tree"),
    (is_balanced, "Not balanced"),
)


def check(tree) -> bool:
    """Runs every structural check, logging the ones that fail"""
    ok = True
    for predicate, message in CHECKS:
        if not predicate(tree):
            logger.warning(message)
            ok = False
    return ok
