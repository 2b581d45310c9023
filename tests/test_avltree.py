import io
import math
import random

import pytest

from avlstocks.avltree import AVLTree


def _balances(tree):
    return [bal for _, bal in tree.walk_inorder()]


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert len(tree) == 0
    assert list(tree) == []
    out = io.StringIO()
    tree.inorder(out)
    assert out.getvalue() == ""


def test_three_ascending_rotates_to_root():
    tree = AVLTree([1, 2, 3])
    assert list(tree.walk_preorder()) == [(2, 0), (1, 0), (3, 0)]
    assert tree.height() == 2


def test_line_format():
    tree = AVLTree([7])
    out = io.StringIO()
    tree.inorder(out)
    assert out.getvalue() == "7\t\t(BF: 0)\n"


def test_default_output_is_stdout(capsys):
    tree = AVLTree([4])
    tree.preorder()
    assert capsys.readouterr().out == "4\t\t(BF: 0)\n"


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 42])
def test_random_inserts_keep_avl_invariants(seed):
    rng = random.Random(seed)
    values = [rng.randint(1, 5000) for _ in range(200)]
    tree = AVLTree()
    for v in values:
        tree.insert(v)
        assert all(abs(b) <= 1 for b in _balances(tree))
    assert list(tree) == sorted(values)
    assert len(tree) == len(values)
    assert tree.height() <= 1.4405 * math.log2(len(values) + 2)


def test_traversals_contain_same_nodes():
    tree = AVLTree([50, 20, 80, 10, 30, 70, 90, 25])
    ino = list(tree.walk_inorder())
    pre = list(tree.walk_preorder())
    post = list(tree.walk_postorder())
    assert sorted(pre) == sorted(ino) == sorted(post)
    assert pre[0] == post[-1]


def test_printed_orders_match_walks():
    tree = AVLTree([5, 3, 8, 1, 4])
    for printer, walker in [
        (tree.inorder, tree.walk_inorder),
        (tree.preorder, tree.walk_preorder),
        (tree.postorder, tree.walk_postorder),
    ]:
        out = io.StringIO()
        printer(out)
        expected = "".join(f"{v}\t\t(BF: {b})\n" for v, b in walker())
        assert out.getvalue() == expected


def test_duplicates_are_kept():
    tree = AVLTree([5, 5, 5])
    assert list(tree) == [5, 5, 5]
    assert len(tree) == 3
    assert tree.search(5) == 5


def test_search_and_contains():
    tree = AVLTree(range(1, 20))
    assert tree.search(7) == 7
    assert tree.search(100) is None
    assert 13 in tree
    assert 0 not in tree


def test_clear():
    tree = AVLTree([3, 1, 2])
    tree.clear()
    assert len(tree) == 0
    assert tree.height() == 0
    assert 2 not in tree
    tree.insert(9)
    assert list(tree) == [9]


def test_strings_sort():
    words = ["pear", "apple", "fig", "kiwi"]
    tree = AVLTree(words)
    assert list(tree) == sorted(words)