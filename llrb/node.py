import enum
from typing import Any, Optional


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1


class Colour(enum.Enum):
    BLACK = 0
    RED = 1


class Node:

    def __init__(self, key, value, colour: Colour = Colour.RED, size: int = 1):
        self.key = key
        self.value = value
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None
        # colour of the link from the parent to this node
        self.colour = colour
        # number of nodes in the subtree rooted here
        self.size = size

    def get_child(self, direction: Direction):
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def replace(self, node: "Node"):
        """Take over the key and value of node, keeping links and colour"""
        self.key = node.key
        self.value = node.value

    def __repr__(self) -> str:
        return f"Node({self.key!r}: {self.value!r}, {self.colour.name}, size={self.size})"


def is_red(node: Optional[Node]) -> bool:
    # missing children are black
    if node is None:
        return False
    return node.colour == Colour.RED


def size(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return node.size


def flip(node: Node):
    node.colour = Colour.BLACK if node.colour == Colour.RED else Colour.RED


def smallest(node: Node) -> Node:
    """Returns the leftmost node in the subtree"""
    while node.left is not None:
        node = node.left
    return node


def largest(node: Node) -> Node:
    """Returns the rightmost node in the subtree"""
    while node.right is not None:
        node = node.right
    return node


def compare(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0
