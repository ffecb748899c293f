from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Generic, List, Optional, TypeVar

from .iter import InorderIter

if TYPE_CHECKING:
    from .tree import RBTree

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Color(enum.Enum):
    RED = 0
    BLACK = 1


def _is_red(node: Optional[RBNode]) -> bool:
    # absent children are the black nil leaves
    return node is not None and node.color is Color.RED


def _swap_colors(a: RBNode, b: RBNode):
    a.color, b.color = b.color, a.color


class RBNode(Generic[T]):
    """A single element of an `RBTree`.

    Children are only ever attached through `_set_left_child` and
    `_set_right_child`, which keep the child's `_parent` link and cached
    `_is_left` flag in step with the slot it occupies.
    """

    def __init__(self, item: T, tree: RBTree[T]):
        self.item: T = item
        self.color: Color = Color.RED

        self._parent: Optional[RBNode[T]] = None
        self._left: Optional[RBNode[T]] = None
        self._right: Optional[RBNode[T]] = None
        self._is_left: bool = False
        self._tree: Optional[RBTree[T]] = tree

    @property
    def is_red(self) -> bool:
        return self.color is Color.RED

    def __repr__(self) -> str:
        return "<RBNode {}>".format(self._print_node())

    def _set_left_child(self, child: Optional[RBNode[T]]):
        self._left = child
        if child is not None:
            child._parent = self
            child._is_left = True

    def _set_right_child(self, child: Optional[RBNode[T]]):
        self._right = child
        if child is not None:
            child._parent = self
            child._is_left = False

    def _make_root(self):
        self._parent = None
        self._is_left = False
        self._tree._root = self

    def _replace_in_parent(self, node: Optional[RBNode[T]]):
        """Put `node` into the slot this node occupies (or the root slot).

        This node's own links are left untouched.
        """
        parent = self._parent
        if parent is None:
            if node is not None:
                node._make_root()
            else:
                self._tree._root = None
        elif self._is_left:
            parent._set_left_child(node)
        else:
            parent._set_right_child(node)

    def _sibling(self) -> Optional[RBNode[T]]:
        parent = self._parent
        if parent is None:
            return None
        elif self._is_left:
            return parent._right
        else:
            return parent._left

    def _leftmost(self) -> RBNode[T]:
        node = self
        while node._left is not None:
            node = node._left
        return node

    def _rightmost(self) -> RBNode[T]:
        node = self
        while node._right is not None:
            node = node._right
        return node

    def _rotate_left(self):
        # The right child takes this node's place, on the same side of the
        # old parent that this node occupied.
        pivot: RBNode[T] = self._right
        logger.debug("rotate left around %r", self.item)

        self._set_right_child(pivot._left)
        self._replace_in_parent(pivot)
        pivot._set_left_child(self)

    def _rotate_right(self):
        pivot: RBNode[T] = self._left
        logger.debug("rotate right around %r", self.item)

        self._set_left_child(pivot._right)
        self._replace_in_parent(pivot)
        pivot._set_right_child(self)

    def _rotate(self):
        """Rotate this node up over its parent."""
        if self._is_left:
            self._parent._rotate_right()
        else:
            self._parent._rotate_left()

    def _find_node(self, item: T) -> RBNode[T]:
        c = self._tree._cmp(item, self.item)
        if c == 0:
            return self
        elif c < 0:
            if self._left is not None:
                return self._left._find_node(item)
        else:
            if self._right is not None:
                return self._right._find_node(item)

        raise KeyError(item)

    def _insert_node(self, node: RBNode[T]):
        # equal items descend to the right
        if self._tree._cmp(node.item, self.item) < 0:
            if self._left is not None:
                return self._left._insert_node(node)
            self._set_left_child(node)
        else:
            if self._right is not None:
                return self._right._insert_node(node)
            self._set_right_child(node)

        if self.color is Color.RED:
            node._repair_insert()

    def _repair_insert(self):
        parent: Optional[RBNode[T]] = self._parent
        if parent is None:
            self.color = Color.BLACK
            return

        if parent.color is Color.BLACK:
            return

        # a red parent is never the root, so the grandparent exists
        grandparent: RBNode[T] = parent._parent
        uncle: Optional[RBNode[T]] = parent._sibling()

        if _is_red(uncle):
            logger.debug("insert fixup: recolor at %r", grandparent.item)
            parent.color = Color.BLACK
            uncle.color = Color.BLACK
            grandparent.color = Color.RED
            return grandparent._repair_insert()

        if parent._is_left:
            if self._is_left:
                logger.debug("insert fixup: left-left at %r", grandparent.item)
                grandparent._rotate_right()
                _swap_colors(grandparent, parent)
            else:
                logger.debug("insert fixup: left-right at %r", grandparent.item)
                parent._rotate_left()
                grandparent._rotate_right()
                _swap_colors(grandparent, self)
        else:
            if not self._is_left:
                logger.debug("insert fixup: right-right at %r", grandparent.item)
                grandparent._rotate_left()
                _swap_colors(grandparent, parent)
            else:
                logger.debug("insert fixup: right-left at %r", grandparent.item)
                parent._rotate_right()
                grandparent._rotate_left()
                _swap_colors(grandparent, self)

    def _unlink(self, replace_with: Optional[RBNode[T]] = None):
        self._replace_in_parent(replace_with)

        self._tree = None
        self._parent = None
        self._left = None
        self._right = None
        self._is_left = False

    def _reset(self):
        """Detach from every link and recolor red, ready for reinsertion."""
        self.color = Color.RED
        self._parent = None
        self._left = None
        self._right = None
        self._is_left = False

    def _delete_node(self):
        if self._left is not None and self._right is not None:
            successor = self._right._leftmost()
            self.item = successor.item
            return successor._delete_node()
        return self._delete_single_child()

    def _delete_single_child(self):
        replace_with = self._left if self._left is not None else self._right
        if self.color is Color.BLACK:
            if replace_with is not None:
                replace_with.color = Color.BLACK
            else:
                self._repair_delete()
        self._unlink(replace_with)

    def _repair_delete(self):
        # The subtree under this node is one black node short of its
        # sibling's (the first call is on a black leaf about to be unlinked).
        parent: Optional[RBNode[T]] = self._parent
        if parent is None:
            return

        sibling: RBNode[T] = self._sibling()

        if _is_red(sibling):
            logger.debug("delete fixup: red sibling %r", sibling.item)
            parent.color = Color.RED
            sibling.color = Color.BLACK
            sibling._rotate()
            sibling = self._sibling()

        if self._is_left:
            near, far = sibling._left, sibling._right
        else:
            near, far = sibling._right, sibling._left

        if not _is_red(near) and not _is_red(far):
            sibling.color = Color.RED
            if parent.color is Color.RED:
                parent.color = Color.BLACK
                return
            logger.debug("delete fixup: push deficit up to %r", parent.item)
            return parent._repair_delete()

        if not _is_red(far):
            logger.debug("delete fixup: near nephew %r", near.item)
            near.color = Color.BLACK
            sibling.color = Color.RED
            near._rotate()
            far = sibling
            sibling = near

        logger.debug("delete fixup: far nephew %r", far.item)
        sibling.color = parent.color
        parent.color = Color.BLACK
        far.color = Color.BLACK
        sibling._rotate()

    def _splice_out(self) -> List[RBNode[T]]:
        """Replace this node by its right subtree.

        Returns the nodes of the detached left subtree, reset and in order,
        for the caller to feed back through insertion. If this node was the
        root and had no right subtree, the left subtree becomes the root
        instead and nothing is returned.
        """
        left, right = self._left, self._right

        if self._parent is None and right is None:
            self._unlink(left)
            if left is not None:
                left.color = Color.BLACK
            return []

        self._unlink(right)
        if right is not None and right._parent is None:
            right.color = Color.BLACK

        orphans = list(InorderIter(InorderIter.NODES, left))
        for node in orphans:
            node._reset()

        logger.debug("splice: %d nodes to reinsert", len(orphans))
        return orphans

    def _print_recursive(self, level: int) -> str:
        ret = ""
        if self._left is not None:
            ret = self._left._print_recursive(level + 1)

        ret += ("    " * level) + self._print_node() + "\n"

        if self._right is not None:
            ret += self._right._print_recursive(level + 1)

        return ret

    def _print_node(self) -> str:
        if self.color is Color.RED:
            return str(self.item) + " (R)"
        else:
            return str(self.item) + " (B)"
