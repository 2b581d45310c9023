"""Command-line demonstration: a random integer tree and an interactive stock lookup menu."""

from __future__ import annotations

import argparse
import random
import re
import sys
from typing import List, Optional, TextIO

from .avltree import AVLTree
from .stock import Stock

DEFAULT_STOCKS_FILE = "Stock.txt"
DEFAULT_REPORT_FILE = "Stock_BF.txt"

MENU = (
    "\nMenu Options:\n"
    "a) Display a stock's name given its symbol\n"
    "b) Display a stock's price given its symbol\n"
    "c) Insert a new stock\n"
    "d) Display all stocks\n"
    "e) Quit\n"
    "Enter your choice: "
)

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SYMBOL_SPACE = set(" \t\n\v\f\r")


class _Console:
    """Reads a text stream word by word or line by line, as a terminal user types it."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> bool:
        if not self._pending:
            self._pending = self._stream.readline()
        return bool(self._pending)

    def _skip_space(self) -> None:
        while True:
            if not self._fill():
                raise EOFError
            stripped = self._pending.lstrip()
            if stripped:
                self._pending = stripped
                return
            self._pending = ""

    def char(self) -> str:
        """Next non-blank character."""
        self._skip_space()
        first, self._pending = self._pending[0], self._pending[1:]
        return first

    def word(self) -> str:
        """Next run of non-blank characters."""
        self._skip_space()
        match = re.match(r"\S+", self._pending)
        self._pending = self._pending[match.end():]
        return match.group()

    def number(self) -> float:
        """Next number; raises ValueError, consuming nothing, if none starts here."""
        self._skip_space()
        match = _NUMBER.match(self._pending)
        if match is None:
            raise ValueError("not a number")
        self._pending = self._pending[match.end():]
        return float(match.group())

    def line(self) -> str:
        """The rest of the current line, without its line ending."""
        if not self._fill():
            raise EOFError
        text, self._pending = self._pending, ""
        return text.rstrip("\r\n")

    def discard_line(self) -> None:
        """Drop everything up to and including the next line ending."""
        self._fill()
        self._pending = ""


def _float_prefix(text: str) -> Optional[float]:
    match = _NUMBER.match(text.lstrip())
    return None if match is None else float(match.group())


def read_stocks(path: str, tree: AVLTree) -> int:
    """Insert the stocks listed in a file into ``tree`` and return how many were read.

    Each record is a name line, a symbol line and a price; blank lines before a
    price are skipped and anything after the price on its line is ignored.
    Reading stops at the first incomplete record. A missing file raises
    FileNotFoundError.
    """
    count = 0
    with open(path, encoding="utf-8") as handle:
        lines = (line.rstrip("\r\n") for line in handle)
        for name in lines:
            symbol = next(lines, None)
            if symbol is None:
                break
            price_line = next((line for line in lines if line.strip()), None)
            if price_line is None:
                break
            price = _float_prefix(price_line)
            if price is None:
                break
            tree.insert(Stock(name, symbol, price))
            count += 1
    return count


def traverse(tree: AVLTree, out: Optional[TextIO] = None) -> None:
    """Write the tree in-order, pre-order and post-order under headings."""
    stream = sys.stdout if out is None else out
    stream.write("In-order: \n")
    tree.inorder(stream)
    stream.write("\nPre-order: \n")
    tree.preorder(stream)
    stream.write("\nPost-order: \n")
    tree.postorder(stream)


def _look_up(choice: str, tree: AVLTree, console: _Console, stdout: TextIO, stderr: TextIO) -> None:
    stdout.write("\nEnter stock symbol: ")
    symbol = console.word()
    stock = tree.search(Stock("", symbol))
    if stock is None:
        stderr.write("Error: stock not found\n")
    elif choice == "a":
        stdout.write(f"Stock name: {stock.name}\n")
    else:
        stdout.write(f"Stock price: {stock.price:g}\n")


def _add_stock(tree: AVLTree, console: _Console, stdout: TextIO, stderr: TextIO) -> None:
    console.discard_line()

    while True:
        stdout.write("\nEnter stock name: ")
        name = console.line()
        if name:
            break
        stderr.write("Error: invalid input\n")

    while True:
        stdout.write("Enter stock symbol: ")
        symbol = console.line()
        if symbol and not _SYMBOL_SPACE.intersection(symbol):
            break
        stderr.write("Error: invalid input\n\n")

    stdout.write("Enter stock price: ")
    while True:
        try:
            price = console.number()
        except ValueError:
            price = None
        if price is not None and price >= 0:
            break
        console.discard_line()
        stderr.write("Error: invalid input\n\n")
        stdout.write("Enter stock price: ")

    tree.insert(Stock(name, symbol, price))


def run_menu(
    tree: AVLTree,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    report_path: str = DEFAULT_REPORT_FILE,
) -> None:
    """Serve the stock menu until the user quits or input runs out.

    Quitting writes the tree, in order with balance factors, to ``report_path``.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    console = _Console(stdin)

    with open(report_path, "w", encoding="utf-8") as report:
        while True:
            stdout.write(MENU)
            try:
                choice = console.char().lower()
                if choice in ("a", "b"):
                    _look_up(choice, tree, console, stdout, stderr)
                elif choice == "c":
                    _add_stock(tree, console, stdout, stderr)
                elif choice == "d":
                    stdout.write("\n\tStocks\n----------------------\n")
                    tree.inorder(stdout)
                elif choice == "e":
                    tree.inorder(report)
                    return
                else:
                    stderr.write("\nError: invalid choice\n")
            except EOFError:
                return


def main(argv: Optional[List[str]] = None) -> int:
    """Show a random integer tree, then run the stock menu over a stock file."""
    parser = argparse.ArgumentParser(description="AVL tree demonstration with a stock lookup menu.")
    parser.add_argument("--stocks", default=DEFAULT_STOCKS_FILE, help="stock data file")
    parser.add_argument("--report", default=DEFAULT_REPORT_FILE, help="file written on quit")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random integers")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    numbers = AVLTree(rng.randint(1, 5000) for _ in range(10))
    traverse(numbers, sys.stdout)
    sys.stdout.write(f"\nHeight: {numbers.height()}\n")

    stocks = AVLTree()
    try:
        read_stocks(args.stocks, stocks)
    except FileNotFoundError:
        sys.stderr.write("\nError: file not found\n")
        return 1

    run_menu(stocks, sys.stdin, sys.stdout, sys.stderr, args.report)
    return 0


if __name__ == "__main__":
    sys.exit(main())