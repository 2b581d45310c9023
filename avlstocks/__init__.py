"""A self-balancing AVL tree, a stock record ordered by symbol, and a console stock lookup tool."""

__version__ = "0.1.0"