# left-leaning red-black BST, following Sedgewick & Wayne, Algorithms 4th ed.
# section 3.3
#
# every red link leans left and no node touches two red links, so the tree is
# a 1-1 encoding of a 2-3 tree: a red link glues two BST nodes into a 3-node.
# all mutations are written as recursive helpers that take a subtree and
# return its (possibly new) root, which the caller stores back in its slot
import logging
from collections import deque
from typing import Callable, Iterable, Iterator, Optional, Tuple

from . import check as checker
from .node import Colour, Direction, Node, compare, flip, is_red, largest, size, smallest

logger = logging.getLogger(__name__)


class EmptyTreeError(Exception):
    """Raised by operations that need at least one key in the tree"""


class RedBlackBST:

    def __init__(self, items: Optional[Iterable[Tuple]] = None,
                 on_missing: Optional[Callable] = None):
        self.root: Optional[Node] = None
        # called with the key whenever delete() is asked to remove a key that
        # isn't in the table
        self._on_missing = on_missing

        if items is not None:
            for key, value in items:
                self.put(key, value)

    def size(self) -> int:
        return size(self.root)

    def is_empty(self) -> bool:
        return self.root is None

    def clear(self):
        self.root = None

    # standard BST search

    def get(self, key, default=None):
        """Returns the value stored under key, or default if there is none"""
        node = self._search(key)
        if node is None:
            return default
        return node.value

    def contains(self, key) -> bool:
        return self._search(key) is not None

    def _search(self, key) -> Optional[Node]:
        node = self.root
        while node is not None:
            cmp = compare(key, node.key)
            if cmp < 0:
                node = node.left
            elif cmp > 0:
                node = node.right
            else:
                return node
        return None

    # insertion

    def put(self, key, value):
        """Insert the key/value pair, overwriting the value if key is present"""
        if key is None:
            raise ValueError("key cannot be None")
        self.root = self._put(self.root, key, value)
        self.root.colour = Colour.BLACK

    def _put(self, node: Optional[Node], key, value) -> Node:
        # new nodes always join their parent with a red link
        if node is None:
            return Node(key, value, Colour.RED, 1)

        cmp = compare(key, node.key)
        if cmp < 0:
            node.left = self._put(node.left, key, value)
        elif cmp > 0:
            node.right = self._put(node.right, key, value)
        else:
            # overwriting a value doesn't change the shape of the tree
            node.value = value
            return node

        # fix up any right-leaning links on the way back up
        if is_red(node.right) and not is_red(node.left):
            node = self._rotate(node, Direction.LEFT)
        if is_red(node.left) and is_red(node.left.left):
            node = self._rotate(node, Direction.RIGHT)
        # split the temporary 4-node, passing the red link up to the parent
        if is_red(node.left) and is_red(node.right):
            self._flip_colours(node)
        node.size = 1 + size(node.left) + size(node.right)

        return node

    # deletion

    def delete_min(self):
        """Remove the smallest key and its value"""
        if self.is_empty():
            raise EmptyTreeError("delete_min called on an empty tree")

        # if both children of the root are black, make the root red so there is
        # a red link available to push down the left spine
        if not is_red(self.root.left) and not is_red(self.root.right):
            self.root.colour = Colour.RED

        self.root = self._delete_min(self.root)
        if self.root is not None:
            self.root.colour = Colour.BLACK

    def _delete_min(self, node: Node) -> Optional[Node]:
        # the invariant carried down guarantees this is a red leaf
        if node.left is None:
            return None

        if not is_red(node.left) and not is_red(node.left.left):
            node = self._move_red_left(node)

        node.left = self._delete_min(node.left)
        return self._balance(node)

    def delete_max(self):
        """Remove the largest key and its value"""
        if self.is_empty():
            raise EmptyTreeError("delete_max called on an empty tree")

        if not is_red(self.root.left) and not is_red(self.root.right):
            self.root.colour = Colour.RED

        self.root = self._delete_max(self.root)
        if self.root is not None:
            self.root.colour = Colour.BLACK

    def _delete_max(self, node: Node) -> Optional[Node]:
        # red links lean left, so lean this one right before descending
        if is_red(node.left):
            node = self._rotate(node, Direction.RIGHT)

        if node.right is None:
            return None

        if not is_red(node.right) and not is_red(node.right.left):
            node = self._move_red_right(node)

        node.right = self._delete_max(node.right)
        return self._balance(node)

    def delete(self, key):
        """Remove key and its value from the table. Missing keys are ignored"""
        if not self.contains(key):
            logger.debug("symbol table does not contain %r", key)
            if self._on_missing is not None:
                self._on_missing(key)
            return

        if not is_red(self.root.left) and not is_red(self.root.right):
            self.root.colour = Colour.RED

        self.root = self._delete(self.root, key)
        if self.root is not None:
            self.root.colour = Colour.BLACK

    def _delete(self, node: Node, key) -> Optional[Node]:
        # key is known to be in the tree, so the child on the search path
        # always exists
        if compare(key, node.key) < 0:
            if not is_red(node.left) and not is_red(node.left.left):
                node = self._move_red_left(node)
            node.left = self._delete(node.left, key)
        else:
            if is_red(node.left):
                node = self._rotate(node, Direction.RIGHT)
            # a match at the bottom of the tree is a red leaf, drop it
            if compare(key, node.key) == 0 and node.right is None:
                return None
            if not is_red(node.right) and not is_red(node.right.left):
                node = self._move_red_right(node)
            if compare(key, node.key) == 0:
                # swap in the successor, then remove the successor's old node
                # from the right subtree
                node.replace(smallest(node.right))
                node.right = self._delete_min(node.right)
            else:
                node.right = self._delete(node.right, key)
        return self._balance(node)

    # red-black helpers

    def _rotate(self, node: Node, direction: Direction) -> Node:
        """Rotates the subtree rooted at node towards direction

        The child on the opposite side becomes the new subtree root and
        inherits node's colour, while node is demoted through a red link.
        """
        new_root = node.get_child(Direction(1 - direction))
        node.set_child(Direction(1 - direction), new_root.get_child(direction))
        new_root.set_child(direction, node)

        new_root.colour = node.colour
        node.colour = Colour.RED

        new_root.size = node.size
        node.size = 1 + size(node.left) + size(node.right)
        return new_root

    def _flip_colours(self, node: Node):
        flip(node)
        flip(node.left)
        flip(node.right)

    # assuming node is red and both node.left and node.left.left are black,
    # make node.left or one of its children red
    def _move_red_left(self, node: Node) -> Node:
        self._flip_colours(node)
        # borrow from the right sibling if it is a 3-node
        if is_red(node.right.left):
            node.right = self._rotate(node.right, Direction.RIGHT)
            node = self._rotate(node, Direction.LEFT)
            self._flip_colours(node)
        return node

    # assuming node is red and both node.right and node.right.left are black,
    # make node.right or one of its children red
    def _move_red_right(self, node: Node) -> Node:
        self._flip_colours(node)
        if is_red(node.left.left):
            node = self._rotate(node, Direction.RIGHT)
            self._flip_colours(node)
        return node

    def _balance(self, node: Node) -> Node:
        """Restores the red-black invariants for node on the way back up"""
        if is_red(node.right) and not is_red(node.left):
            node = self._rotate(node, Direction.LEFT)
        if is_red(node.left) and is_red(node.left.left):
            node = self._rotate(node, Direction.RIGHT)
        if is_red(node.left) and is_red(node.right):
            self._flip_colours(node)

        node.size = 1 + size(node.left) + size(node.right)
        return node

    # ordered symbol table methods

    def min(self):
        if self.is_empty():
            raise EmptyTreeError("min called on an empty tree")
        return smallest(self.root).key

    def max(self):
        if self.is_empty():
            raise EmptyTreeError("max called on an empty tree")
        return largest(self.root).key

    def floor(self, key):
        """Returns the largest key less than or equal to key, or None"""
        node = self._floor(self.root, key)
        if node is None:
            return None
        return node.key

    def _floor(self, node: Optional[Node], key) -> Optional[Node]:
        if node is None:
            return None
        cmp = compare(key, node.key)
        if cmp == 0:
            return node
        if cmp < 0:
            return self._floor(node.left, key)
        # node is a candidate unless there is a closer key to its right
        candidate = self._floor(node.right, key)
        return node if candidate is None else candidate

    def ceiling(self, key):
        """Returns the smallest key greater than or equal to key, or None"""
        node = self._ceiling(self.root, key)
        if node is None:
            return None
        return node.key

    def _ceiling(self, node: Optional[Node], key) -> Optional[Node]:
        if node is None:
            return None
        cmp = compare(key, node.key)
        if cmp == 0:
            return node
        if cmp > 0:
            return self._ceiling(node.right, key)
        candidate = self._ceiling(node.left, key)
        return node if candidate is None else candidate

    def select(self, k: int):
        """Returns the key of rank k, i.e. the k-th smallest key (0-based)"""
        if not 0 <= k < self.size():
            raise IndexError(f"select index {k} out of range for tree of size {self.size()}")
        return self._select(self.root, k).key

    def _select(self, node: Node, k: int) -> Node:
        left_size = size(node.left)
        if left_size > k:
            return self._select(node.left, k)
        if left_size < k:
            return self._select(node.right, k - left_size - 1)
        return node

    def rank(self, key) -> int:
        """Returns the number of keys strictly less than key"""
        return self._rank(self.root, key)

    def _rank(self, node: Optional[Node], key) -> int:
        if node is None:
            return 0
        cmp = compare(key, node.key)
        if cmp < 0:
            return self._rank(node.left, key)
        if cmp > 0:
            return 1 + size(node.left) + self._rank(node.right, key)
        return size(node.left)

    # range search

    def keys(self, lo=None, hi=None) -> Iterator:
        """Yields the keys in [lo, hi] in ascending order

        Missing bounds default to the smallest and largest keys in the tree.
        """
        for node in self._range(lo, hi):
            yield node.key

    def values(self, lo=None, hi=None) -> Iterator:
        for node in self._range(lo, hi):
            yield node.value

    def items(self, lo=None, hi=None) -> Iterator[Tuple]:
        for node in self._range(lo, hi):
            yield node.key, node.value

    def _range(self, lo, hi) -> Iterator[Node]:
        if self.is_empty():
            return
        lo = self.min() if lo is None else lo
        hi = self.max() if hi is None else hi
        if compare(lo, hi) > 0:
            return
        yield from self._collect(self.root, lo, hi)

    def _collect(self, node: Optional[Node], lo, hi) -> Iterator[Node]:
        if node is None:
            return
        cmp_lo = compare(lo, node.key)
        cmp_hi = compare(hi, node.key)
        # only walk subtrees that can hold keys inside the range
        if cmp_lo < 0:
            yield from self._collect(node.left, lo, hi)
        if cmp_lo <= 0 and cmp_hi >= 0:
            yield node
        if cmp_hi > 0:
            yield from self._collect(node.right, lo, hi)

    def size_between(self, lo, hi) -> int:
        """Returns the number of keys in [lo, hi]"""
        if compare(lo, hi) > 0:
            return 0
        if self.contains(hi):
            return self.rank(hi) - self.rank(lo) + 1
        return self.rank(hi) - self.rank(lo)

    def level_order(self) -> Iterator:
        """Yields the keys breadth-first, starting from the root"""
        queue = deque()
        if self.root is not None:
            queue.append(self.root)
        while queue:
            node = queue.popleft()
            yield node.key
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    # utilities

    def height(self) -> int:
        """Height of the tree, where a single node has height 0"""
        return self._height(self.root)

    def _height(self, node: Optional[Node]) -> int:
        if node is None:
            return -1
        return 1 + max(self._height(node.left), self._height(node.right))

    def check(self) -> bool:
        """Verifies the BST, size, rank, 2-3 and balance invariants"""
        return checker.check(self)

    def pprint(self, node: Optional[Node], depth=0, direction=Direction.ROOT):
        if node is None:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        return ("\t" * depth + f"|_ {direction.name} | {node.key}: {node.value} {node.colour.name}\n"
                + self.pprint(node.left, depth + 1, Direction.LEFT)
                + self.pprint(node.right, depth + 1, Direction.RIGHT))

    # mapping protocol

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator:
        return self.keys()

    def __getitem__(self, key):
        node = self._search(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        if not self.contains(key):
            raise KeyError(key)
        self.delete(key)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"RedBlackBST({{{items}}})"
