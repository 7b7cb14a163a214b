"""Best single buy-then-sell trade over a price series."""

from __future__ import annotations

from collections.abc import Iterable


def max_profit(prices: Iterable[int]) -> int:
    """Return the largest gain from buying once and selling later, or 0."""
    lowest: int | None = None
    profit = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        else:
            profit = max(profit, price - lowest)
    return profit