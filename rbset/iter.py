from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .node import RBNode


class InorderIter(object):
    """Lazy left-self-right walk over the subtree below a node.

    The iterator is one-shot. Mutating the tree while it is being walked
    gives undefined results.
    """

    ITEMS = 0
    NODES = 1

    def __init__(self, mode: int, root: Optional[RBNode]):
        self._mode: int = mode
        self._stack: List[RBNode] = []
        self._push_left(root)

    def _push_left(self, node: Optional[RBNode]):
        while node is not None:
            self._stack.append(node)
            node = node._left

    def __iter__(self) -> InorderIter:
        return self

    def __next__(self):
        if not self._stack:
            raise StopIteration()

        cur_node = self._stack.pop()
        self._push_left(cur_node._right)

        if self._mode == InorderIter.NODES:
            return cur_node
        return cur_node.item
