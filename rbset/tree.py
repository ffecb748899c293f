from __future__ import annotations

import enum
import logging
from collections.abc import Collection
from typing import Callable, Generic, Iterator, Optional, TypeVar, Union

from .iter import InorderIter
from .node import Color, RBNode

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Deletion(enum.Enum):
    """How `RBTree.remove` takes a node out of the tree.

    `REBALANCE` is the usual red/black deletion and keeps every invariant.
    `REINSERT` replaces the node by its right subtree and feeds the elements
    of its left subtree back through insertion; ordering and membership are
    kept, but red/black balance is not restored.
    """

    REBALANCE = "rebalance"
    REINSERT = "reinsert"


def natural_order(a, b) -> int:
    """Three-way comparison using the elements' own ordering."""
    return (a > b) - (a < b)


class RBTree(Generic[T], Collection):
    """An ordered multiset of elements kept in a red/black tree.

    Elements are ordered by `cmp`, which must return a negative number, zero
    or a positive number as its first argument is less than, equal to or
    greater than its second. Equal elements may be stored more than once.
    """

    def __init__(
        self,
        cmp: Callable[[T, T], int],
        deletion: Union[Deletion, str] = Deletion.REBALANCE,
    ):
        self._cmp: Callable[[T, T], int] = cmp
        self._deletion: Deletion = Deletion(deletion)
        self._root: Optional[RBNode[T]] = None
        self._len: int = 0

    @property
    def comparator(self) -> Callable[[T, T], int]:
        return self._cmp

    @property
    def deletion(self) -> Deletion:
        return self._deletion

    def get_node(self, item: T) -> RBNode[T]:
        """Directly retrieve a node holding an element equal to `item`.

        Raises KeyError if the tree does not contain such an element.
        """
        if self._root is None:
            raise KeyError(item)
        return self._root._find_node(item)

    def _attach(self, node: RBNode[T]):
        if self._root is None:
            node._make_root()
            node.color = Color.BLACK
        else:
            self._root._insert_node(node)

    def insert(self, item: T):
        """Add `item`; an equal element already present is kept alongside it."""
        if item is None:
            raise ValueError("cannot insert None into an RBTree")

        self._attach(RBNode(item, self))
        self._len += 1

    add = insert

    def remove(self, item: T) -> bool:
        """Remove one element equal to `item`.

        Returns whether an element was removed.
        """
        if item is None:
            return False

        try:
            node = self.get_node(item)
        except KeyError:
            return False

        if self._deletion is Deletion.REINSERT:
            orphans = node._splice_out()
            for orphan in orphans:
                self._attach(orphan)
        else:
            node._delete_node()

        self._len -= 1
        logger.debug("removed %r (%s)", item, self._deletion.value)
        return True

    def contains(self, item: T) -> bool:
        if item is None:
            return False

        try:
            self.get_node(item)
            return True
        except KeyError:
            return False

    def _first_node(self) -> RBNode[T]:
        if self._root is None:
            raise IndexError("Tree is empty")
        return self._root._leftmost()

    def _last_node(self) -> RBNode[T]:
        if self._root is None:
            raise IndexError("Tree is empty")
        return self._root._rightmost()

    def min(self) -> T:
        return self._first_node().item

    def max(self) -> T:
        return self._last_node().item

    def clear(self):
        self._root = None
        self._len = 0

    def nodes(self) -> Iterator[RBNode[T]]:
        return InorderIter(InorderIter.NODES, self._root)

    def print(self) -> str:
        if self._root is not None:
            return self._root._print_recursive(0)
        else:
            return "<empty tree>"

    def inorder_colors(self) -> str:
        """Render the elements in order, each tagged `r` or `b` by color."""
        return "".join(
            " {}{}".format(node.item, "r" if node.is_red else "b")
            for node in self.nodes()
        )

    def __contains__(self, item: T) -> bool:
        return self.contains(item)

    def __iter__(self) -> Iterator[T]:
        return InorderIter(InorderIter.ITEMS, self._root)

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return "RBTree([{}])".format(", ".join(repr(item) for item in self))
