import logging

import pytest

from rbset import Color, RBNode, RBTree, natural_order


def make_node(tree: RBTree, item, color=Color.BLACK) -> RBNode:
    node = RBNode(item, tree)
    node.color = color
    return node


def inorder(tree: RBTree) -> list:
    return [node.item for node in tree.nodes()]


@pytest.fixture
def tree():
    yield RBTree(natural_order)


def test_set_child_links(tree):
    parent = make_node(tree, 10)
    left = make_node(tree, 5)
    right = make_node(tree, 15)

    parent._set_left_child(left)
    parent._set_right_child(right)

    assert left._parent is parent and left._is_left
    assert right._parent is parent and not right._is_left

    # moving a node to the other side updates its cached side
    parent._set_right_child(left)
    assert parent._right is left
    assert not left._is_left


def test_clear_child_leaves_former_child(tree):
    parent = make_node(tree, 10)
    child = make_node(tree, 5)
    parent._set_left_child(child)

    parent._set_left_child(None)

    assert parent._left is None
    assert child._parent is parent


def test_rotate_left_at_root(tree):
    x = make_node(tree, 1)
    y = make_node(tree, 3)
    b = make_node(tree, 2)
    x._make_root()
    x._set_right_child(y)
    y._set_left_child(b)

    x._rotate_left()

    assert tree._root is y
    assert y._parent is None and not y._is_left
    assert y._left is x and x._is_left
    assert x._right is b and b._parent is x and not b._is_left
    assert inorder(tree) == [1, 2, 3]


def test_rotate_left_keeps_right_side(tree):
    root = make_node(tree, 10)
    x = make_node(tree, 20)
    y = make_node(tree, 30)
    b = make_node(tree, 25)
    root._make_root()
    root._set_right_child(x)
    x._set_right_child(y)
    y._set_left_child(b)

    x._rotate_left()

    assert root._right is y
    assert root._left is None
    assert y._parent is root and not y._is_left
    assert y._left is x and x._parent is y and x._is_left
    assert x._right is b and b._parent is x and not b._is_left
    assert inorder(tree) == [10, 20, 25, 30]


def test_rotate_left_keeps_left_side(tree):
    root = make_node(tree, 50)
    x = make_node(tree, 20)
    y = make_node(tree, 30)
    root._make_root()
    root._set_left_child(x)
    x._set_right_child(y)

    x._rotate_left()

    assert root._left is y and y._is_left
    assert y._left is x
    assert inorder(tree) == [20, 30, 50]


def test_rotate_right_keeps_left_side(tree):
    root = make_node(tree, 50)
    x = make_node(tree, 40)
    y = make_node(tree, 30)
    b = make_node(tree, 35)
    root._make_root()
    root._set_left_child(x)
    x._set_left_child(y)
    y._set_right_child(b)

    x._rotate_right()

    assert root._left is y and y._is_left
    assert root._right is None
    assert y._right is x and x._parent is y and not x._is_left
    assert x._left is b and b._parent is x and b._is_left
    assert inorder(tree) == [30, 35, 40, 50]


def test_rotate_right_keeps_right_side(tree):
    root = make_node(tree, 10)
    x = make_node(tree, 40)
    y = make_node(tree, 30)
    root._make_root()
    root._set_right_child(x)
    x._set_left_child(y)

    x._rotate_right()

    assert root._right is y and not y._is_left
    assert y._right is x
    assert inorder(tree) == [10, 30, 40]


def test_rotate_up(tree):
    root = make_node(tree, 2)
    child = make_node(tree, 1)
    root._make_root()
    root._set_left_child(child)

    child._rotate()

    assert tree._root is child
    assert child._right is root
    assert inorder(tree) == [1, 2]


def test_find_node(tree):
    for x in [8, 4, 12, 2, 6]:
        tree.insert(x)

    assert tree.get_node(6).item == 6
    with pytest.raises(KeyError):
        tree.get_node(7)


def test_first_insert_is_black_root(tree):
    tree.insert(1)

    assert tree._root.item == 1
    assert tree._root.color is Color.BLACK
    assert tree._root._parent is None


def test_black_parent_needs_no_fixup(tree):
    tree.insert(2)
    tree.insert(1)

    assert tree._root.item == 2
    assert tree._root._left.item == 1
    assert tree._root._left.color is Color.RED


def test_red_uncle_recolors(tree):
    for x in [2, 1, 3, 4]:
        tree.insert(x)
    root = tree._root

    assert root.item == 2 and root.color is Color.BLACK
    assert root._left.color is Color.BLACK
    assert root._right.color is Color.BLACK
    assert root._right._right.item == 4
    assert root._right._right.color is Color.RED


def test_duplicates_go_right(tree):
    tree.insert(5)
    tree.insert(5)

    assert tree._root._left is None
    assert tree._root._right.item == 5


@pytest.mark.parametrize(
    "items,case",
    [
        ([1, 2, 3], "right-right"),
        ([3, 2, 1], "left-left"),
        ([1, 3, 2], "right-left"),
        ([3, 1, 2], "left-right"),
    ],
)
def test_fixup_case_logged(tree, caplog, items, case):
    with caplog.at_level(logging.DEBUG, logger="rbset.node"):
        for x in items:
            tree.insert(x)

    assert "insert fixup: {} at {}".format(case, items[0]) in caplog.messages


def test_delete_leaf_with_red_sibling(tree):
    for x in range(1, 7):
        tree.insert(x)
    # 2(B) 1(B) 4(R) 3(B) 5(B) 6(R)
    assert tree._root._right.color is Color.RED

    assert tree.remove(1)
    assert list(tree) == [2, 3, 4, 5, 6]
    assert tree._root.color is Color.BLACK


def test_delete_node_with_two_children(tree):
    for x in [2, 1, 3]:
        tree.insert(x)

    assert tree.remove(2)
    assert tree._root.item == 3
    assert tree._root._left.item == 1
    assert tree._root._left.color is Color.RED
