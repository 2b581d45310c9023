# avlstocks

`avlstocks` provides a self-balancing binary search tree (an AVL tree) and a
small console tool that keeps a collection of stocks in one.

## The tree

`avlstocks.avltree.AVLTree` holds any values that can be compared with each
other. It rebalances itself after every insertion, so its height stays
logarithmic in the number of items. Equal items are kept; a duplicate goes
into the right subtree.

```python
from avlstocks.avltree import AVLTree

tree = AVLTree([30, 10, 20, 40, 50])
tree.insert(25)

list(tree)          # in-order: [10, 20, 25, 30, 40, 50]
len(tree)           # 6
tree.height()       # 3
20 in tree          # True
tree.search(40)     # 40, or None when absent
```

`search(item)` returns the item stored in the tree that compares equal to
`item`, not `item` itself, which matters when equality looks at only part of
an object (as with stocks below).

The three depth-first orders are available in two forms:

- `walk_inorder()`, `walk_preorder()` and `walk_postorder()` yield
  `(value, balance_factor)` pairs in that order. The balance factor is the
  height of the left subtree minus the height of the right one.
- `inorder(out)`, `preorder(out)` and `postorder(out)` write one line per node
  to a text stream (standard output by default). Each line holds the value
  followed by its balance factor, for example `42\t\t(BF: -1)`.

`clear()` empties the tree.

## Stocks

`avlstocks.stock.Stock` is a frozen dataclass with a company `name`, a ticker
`symbol` and a `price`. Stocks compare and hash by symbol alone, so a `Stock`
with only a symbol set is enough to look one up in a tree:

```python
from avlstocks.avltree import AVLTree
from avlstocks.stock import Stock

tree = AVLTree()
tree.insert(Stock("NVIDIA", "NVDA", 548.58))
found = tree.search(Stock("", "NVDA"))
found.name    # 'NVIDIA'
found.price   # 548.58
```

`str(stock)` gives the name, the symbol and the price on three lines, the
price in its shortest general form (`548.58`, `10101`).

## The command

```
avlstocks
```

The same program runs with `python -m avlstocks.cli`. Options:

- `--stocks PATH` – the stock data file (default `Stock.txt`).
- `--report PATH` – the file written on quitting (default `Stock_BF.txt`).
- `--seed N` – seed for the random numbers, to make the first part repeatable.

The command first fills a tree with ten random whole numbers from 1 to 5000
and prints its in-order, pre-order and post-order traversals, together with
its height. It then reads the stock file. That file holds three lines per
stock: the company name, the symbol and the price.

```
NVIDIA
NVDA
548.58
Apple
AAPL
121.73
```

Reading stops at the first incomplete record. If the file cannot be found,
the command prints `Error: file not found` and exits with status 1.
Otherwise it shows a menu:

```
a) Display a stock's name given its symbol
b) Display a stock's price given its symbol
c) Insert a new stock
d) Display all stocks
e) Quit
```

When you insert a stock, the name must not be empty and the symbol must not be
empty or contain whitespace. The price must be a number that is not negative.
The command asks again until the input is valid. Choosing `e` writes every
stock, in symbol order and with its balance factor, to the report file before
it quits. If input runs out, the menu ends without writing the report.

The same steps are available from Python through `avlstocks.cli`:

- `read_stocks(path, tree)` inserts the stocks from a file into a tree and
  returns how many it read; a missing file raises `FileNotFoundError`.
- `traverse(tree, out)` writes the three traversals under headings.
- `run_menu(tree, stdin, stdout, stderr, report_path)` runs the menu over the
  given streams.

## What it does not do

The tree only grows: there is no way to remove a single item, only `clear()`
to empty it. Stocks added through the menu are not saved back to the stock
file; the report file is a listing, not data the command reads again.

## Running the tests

```
pip install -e .[test]
pytest
```