"""A stock quote, ordered and compared by its ticker symbol."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Stock:
    """A company's name, ticker symbol and share price."""

    name: str = ""
    symbol: str = ""
    price: float = 0.0

    def __str__(self) -> str:
        return f"{self.name}\n{self.symbol}\n{self.price:g}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stock):
            return NotImplemented
        return self.symbol == other.symbol

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Stock):
            return NotImplemented
        return self.symbol < other.symbol

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Stock):
            return NotImplemented
        return self.symbol > other.symbol

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Stock):
            return NotImplemented
        return self.symbol <= other.symbol

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Stock):
            return NotImplemented
        return self.symbol >= other.symbol

    def __hash__(self) -> int:
        return hash(self.symbol)