import pytest

from avlstocks.avltree import AVLTree
from avlstocks.stock import Stock


def test_defaults():
    s = Stock()
    assert (s.name, s.symbol, s.price) == ("", "", 0.0)


def test_str_matches_report_format():
    assert str(Stock("NVIDIA", "NVDA", 548.58)) == "NVIDIA\nNVDA\n548.58"


def test_str_uses_six_significant_digits():
    assert str(Stock("Computer Science Club", "CSC", 10101.01)) == "Computer Science Club\nCSC\n10101"


def test_equality_by_symbol_only():
    assert Stock("Apple", "AAPL", 121.73) == Stock("", "AAPL")
    assert Stock("Apple", "AAPL") != Stock("Apple", "AMD")


def test_ordering_by_symbol():
    a = Stock("Zeta", "AAA", 1.0)
    b = Stock("Alpha", "BBB", 2.0)
    assert a < b
    assert b > a
    assert a <= Stock("", "AAA")
    assert b >= Stock("", "BBB")
    assert not (a > b)


def test_hash_consistent_with_eq():
    assert hash(Stock("x", "MSFT")) == hash(Stock("y", "MSFT", 3.0))
    assert len({Stock("a", "SNE"), Stock("b", "SNE")}) == 1


def test_comparison_with_other_types():
    assert (Stock("a", "A") == "A") is False
    with pytest.raises(TypeError):
        Stock("a", "A") < "B"


def test_immutable():
    s = Stock("Intel", "INTC", 60.78)
    with pytest.raises(AttributeError):
        s.price = 1.0
    assert s.price == 60.78
    assert str(s) == "Intel\nINTC\n60.78"


def test_tree_lookup_by_symbol():
    tree = AVLTree([
        Stock("Intel", "INTC", 60.78),
        Stock("Tesla", "TSLA", 564.33),
        Stock("Apple", "AAPL", 121.73),
    ])
    found = tree.search(Stock("", "TSLA"))
    assert found.name == "Tesla"
    assert found.price == 564.33
    assert [s.symbol for s in tree] == ["AAPL", "INTC", "TSLA"]
    assert tree.search(Stock("", "abc")) is None