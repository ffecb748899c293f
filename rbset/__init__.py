from . import iter
from . import node
from . import tree

from .node import Color, RBNode
from .tree import Deletion, RBTree, natural_order

__all__ = [
    "Color",
    "RBNode",
    "Deletion",
    "RBTree",
    "natural_order",
]
