"""Pair and quadruple sum searches over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the indices ``(i, j)``, ``i < j``, of two values that add up to ``target``.

    The first pair found by a single left-to-right scan is returned. When a
    value occurs more than once, the latest earlier index of the partner is used.

    Raises ``ValueError`` when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        partner = seen.get(target - num)
        if partner is not None:
            return partner, index
        seen[num] = index
    raise ValueError(f"no two values add up to {target}")


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct quadruple of values from ``nums`` that sums to ``target``.

    Each quadruple is in ascending order and the quadruples come in ascending
    lexicographic order. The input is left untouched.
    """
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []

    for i in range(size - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, size - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            low, high = j + 1, size - 1
            while low < high:
                total = values[i] + values[j] + values[low] + values[high]
                if total == target:
                    result.append([values[i], values[j], values[low], values[high]])
                    low += 1
                    high -= 1
                    while low < high and values[low] == values[low - 1]:
                        low += 1
                    while low < high and values[high] == values[high + 1]:
                        high -= 1
                elif total < target:
                    low += 1
                else:
                    high -= 1

    return result