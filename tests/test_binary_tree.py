from algokit.binary_tree import BinaryTreeNode


def test_new_node_has_no_links():
    node = BinaryTreeNode("a")
    assert node.value == "a"
    assert (node.parent, node.left, node.right) == (None, None, None)


def test_insert_children_sets_parent():
    root = BinaryTreeNode("r")
    left = BinaryTreeNode("l")
    right = BinaryTreeNode("x")
    root.insert_left(left)
    root.insert_right(right)
    assert root.left is left
    assert root.right is right
    assert left.parent is root
    assert right.parent is root


def test_replacing_child_detaches_old_one():
    root = BinaryTreeNode(1)
    old = BinaryTreeNode(2)
    new = BinaryTreeNode(3)
    root.insert_left(old)
    root.insert_left(new)
    assert root.left is new
    assert old.parent is None
    assert new.parent is root


def test_replacing_right_child_detaches_old_one():
    root = BinaryTreeNode(1)
    old = BinaryTreeNode(2)
    new = BinaryTreeNode(3)
    root.insert_right(old)
    root.insert_right(new)
    assert root.right is new
    assert old.parent is None