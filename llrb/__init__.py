from .node import Colour, Node
from .rbtree import EmptyTreeError, RedBlackBST

__all__ = ["Colour", "EmptyTreeError", "Node", "RedBlackBST"]
