import pytest

from algokit.trees import (
    ArrayBinarySearchTree,
    TreeNode,
    bst_insert,
    build_tree,
    inorder,
    is_bst,
    largest_bst_size,
    lowest_common_ancestor,
    preorder,
    tree_size,
)

KEYS = [60, 50, 70, 40, 30, 80, 75, 65, 45, 55, 90, 67]


def make_bst(keys):
    root = None
    for key in keys:
        root = bst_insert(root, key)
    return root


def test_array_tree_inorder_is_sorted():
    tree = ArrayBinarySearchTree()
    for key in KEYS:
        tree.insert(key)
    assert tree.inorder() == sorted(KEYS)


def test_array_tree_keeps_duplicates():
    tree = ArrayBinarySearchTree()
    keys = [5, 3, 5, 8, 3]
    for key in keys:
        tree.insert(key)
    assert tree.inorder() == sorted(keys)


def test_array_tree_overflow():
    tree = ArrayBinarySearchTree(4)
    tree.insert(1)
    tree.insert(2)
    with pytest.raises(OverflowError):
        tree.insert(3)
    assert tree.inorder() == [1, 2]


def test_array_tree_empty():
    assert ArrayBinarySearchTree().inorder() == []


def test_linked_bst_inorder_is_sorted():
    root = make_bst(KEYS)
    assert inorder(root) == sorted(KEYS)
    assert tree_size(root) == len(KEYS)


def test_preorder_from_driver():
    root = make_bst(KEYS)
    assert preorder(root) == [60, 50, 40, 30, 45, 55, 70, 65, 67, 80, 75, 90]


def test_preorder_starts_with_root():
    root = make_bst(KEYS)
    assert preorder(root)[0] == KEYS[0]
    assert sorted(preorder(root)) == sorted(KEYS)


def test_empty_traversals():
    assert inorder(None) == []
    assert preorder(None) == []
    assert tree_size(None) == 0


def test_build_tree_round_trip():
    original = make_bst(KEYS)
    rebuilt = build_tree(preorder(original), inorder(original))
    assert preorder(rebuilt) == preorder(original)
    assert inorder(rebuilt) == inorder(original)


def test_build_tree_length_mismatch():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1])


def test_build_tree_inconsistent_keys():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1, 3])


def test_is_bst():
    assert is_bst(make_bst(KEYS)) is True
    assert is_bst(TreeNode(5, TreeNode(6))) is False
    assert is_bst(TreeNode(5, TreeNode(2, None, TreeNode(7)))) is False
    assert is_bst(None) is True


def test_is_bst_rejects_duplicates():
    assert is_bst(TreeNode(5, None, TreeNode(5))) is False


def test_is_bst_with_bounds():
    root = make_bst(KEYS)
    assert is_bst(root, lower=min(KEYS) - 1, upper=max(KEYS) + 1) is True
    assert is_bst(root, lower=min(KEYS)) is False


def test_largest_bst_of_whole_search_tree():
    root = make_bst(KEYS)
    assert largest_bst_size(root) == len(KEYS)


def test_largest_bst_in_driver_tree():
    pre = [70, 65, 50, 66, 67, 68, 80, 72]
    ino = [50, 65, 66, 67, 68, 80, 70, 72]
    root = build_tree(pre, ino)
    assert largest_bst_size(root) == 6
    assert largest_bst_size(root) <= tree_size(root)


def test_largest_bst_empty():
    assert largest_bst_size(None) == 0


def lca_tree():
    root = TreeNode(20, TreeNode(8), TreeNode(22))
    root.left.left = TreeNode(4)
    root.left.right = TreeNode(12, TreeNode(10), TreeNode(14))
    return root


@pytest.mark.parametrize(
    "first, second, expected",
    [(10, 14, 12), (14, 8, 8), (10, 22, 20)],
)
def test_lowest_common_ancestor(first, second, expected):
    assert lowest_common_ancestor(lca_tree(), first, second).key == expected


def test_lowest_common_ancestor_lies_between_keys():
    root = make_bst(KEYS)
    for first in KEYS:
        for second in KEYS:
            key = lowest_common_ancestor(root, first, second).key
            assert min(first, second) <= key <= max(first, second)


def test_lowest_common_ancestor_of_empty_tree():
    assert lowest_common_ancestor(None, 1, 2) is None