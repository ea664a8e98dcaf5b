import random

import pytest

from algodrills.bst import BinarySearchTree


def _random_values(seed: int, count: int = 60) -> list[int]:
    rng = random.Random(seed)
    return [rng.randint(-50, 50) for _ in range(count)]


@pytest.mark.parametrize("duplicates_left", [False, True])
@pytest.mark.parametrize("seed", [1, 2, 3])
def test_inorder_is_sorted(seed, duplicates_left):
    values = _random_values(seed)
    tree = BinarySearchTree(values, duplicates_left=duplicates_left)
    assert tree.inorder() == sorted(values)
    assert list(tree) == sorted(values)
    assert len(tree) == len(values)


@pytest.mark.parametrize("seed", [4, 5])
def test_traversals_agree_on_contents_and_root(seed):
    values = _random_values(seed)
    tree = BinarySearchTree(values)
    assert tree.preorder()[0] == values[0]
    assert tree.postorder()[-1] == values[0]
    assert sorted(tree.preorder()) == sorted(values)
    assert sorted(tree.postorder()) == sorted(values)


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.root is None
    assert tree.preorder() == []
    assert tree.inorder() == []
    assert tree.postorder() == []
    assert tree.height() == -1
    assert tree.lowest_common_ancestor(1, 2) is None
    assert 3 not in tree


def test_insert_reports_depth_along_a_chain():
    values = list(range(10))
    tree = BinarySearchTree()
    depths = [tree.insert(v) for v in values]
    assert depths == values
    assert tree.height() == len(values) - 1


def test_insert_depth_of_balanced_children():
    tree = BinarySearchTree()
    assert tree.insert(5) == 0
    assert tree.insert(3) == tree.insert(8)


def test_duplicates_go_right_by_default():
    tree = BinarySearchTree([5, 5])
    assert tree.root.left is None
    assert tree.root.right.value == 5


def test_duplicates_go_left_when_asked():
    tree = BinarySearchTree([5, 5], duplicates_left=True)
    assert tree.root.right is None
    assert tree.root.left.value == 5


def test_contains():
    values = _random_values(7)
    tree = BinarySearchTree(values)
    for v in values:
        assert v in tree
    assert 1000 not in tree
    assert -1000 not in tree


@pytest.mark.parametrize("duplicates_left", [False, True])
def test_delete_every_value_keeps_order(duplicates_left):
    values = _random_values(9)
    tree = BinarySearchTree(values, duplicates_left=duplicates_left)
    remaining = sorted(values)
    rng = random.Random(10)
    order = values[:]
    rng.shuffle(order)
    for v in order:
        assert tree.delete(v) is True
        remaining.remove(v)
        assert tree.inorder() == remaining
    assert tree.root is None


def test_delete_missing_value_changes_nothing():
    tree = BinarySearchTree([5, 3, 8])
    before = tree.preorder()
    assert tree.delete(42) is False
    assert tree.preorder() == before


def test_delete_root_with_two_children_uses_successor():
    tree = BinarySearchTree([5, 3, 8, 7, 9])
    tree.delete(5)
    assert tree.root.value == 7
    assert 5 not in tree
    assert tree.inorder() == [3, 7, 8, 9]


def test_delete_node_with_one_child():
    tree = BinarySearchTree([5, 3, 1])
    tree.delete(3)
    assert tree.root.left.value == 1
    assert tree.inorder() == [1, 5]


def test_height_of_single_node():
    assert BinarySearchTree([7]).height() == 0


@pytest.mark.parametrize("low,high", [(-10, 10), (0, 50), (-50, -20), (3, 3)])
def test_trim_keeps_only_values_in_range(low, high):
    values = _random_values(11)
    tree = BinarySearchTree(values)
    tree.trim(low, high)
    expected = [v for v in sorted(values) if low <= v <= high]
    assert tree.inorder() == expected
    assert all(low <= v <= high for v in tree.preorder())


def test_trim_everything_away():
    tree = BinarySearchTree([1, 2, 3])
    tree.trim(10, 20)
    assert tree.root is None
    assert tree.preorder() == []


def test_trim_promotes_in_range_subtree():
    tree = BinarySearchTree([1, 5, 3, 8])
    tree.trim(3, 8)
    assert tree.root.value == 5
    assert tree.inorder() == [3, 5, 8]


@pytest.mark.parametrize(
    "a,b,expected",
    [(10, 14, 12), (14, 8, 8), (10, 22, 20), (4, 14, 8)],
)
def test_lowest_common_ancestor(a, b, expected):
    tree = BinarySearchTree([20, 8, 22, 4, 12, 10, 14])
    assert tree.lowest_common_ancestor(a, b) == expected
    assert tree.lowest_common_ancestor(b, a) == expected


@pytest.mark.parametrize(
    "values,expected",
    [
        ([2, 1, 3], True),
        ([2, 1], True),
        ([2, 3], False),
        ([1, 2, 3], False),
        ([4, 2, 6, 1, 3, 5], True),
        ([4, 2, 6, 1, 3, 7], False),
        ([], True),
    ],
)
def test_is_complete(values, expected):
    assert BinarySearchTree(values).is_complete() is expected


@pytest.mark.parametrize(
    "values,expected",
    [
        ([2, 1, 3], True),
        ([2, 1], False),
        ([1], True),
        ([], True),
        ([4, 2, 6, 1, 3], True),
        ([4, 2, 6, 1], False),
    ],
)
def test_is_full(values, expected):
    assert BinarySearchTree(values).is_full() is expected