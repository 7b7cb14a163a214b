"""Counting-based questions about integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    middle = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:middle])
    right, right_count = _sort_and_count(items[middle:])

    merged: list[int] = []
    count = left_count + right_count
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            count += len(left) - li
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged, count


def count_inversions(values: Iterable[int]) -> int:
    """Return the number of pairs ``i < j`` with ``values[i] > values[j]``."""
    _, count = _sort_and_count(list(values))
    return count


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in ``n + 1`` integers drawn from ``1..n``.

    Uses cycle detection, so the input must satisfy that shape.
    """
    if not nums:
        raise ValueError("find_duplicate() needs a non-empty sequence")
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break

    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    present = set(nums)
    longest = 0
    for value in present:
        if value - 1 in present:
            continue
        length = 1
        while value + length in present:
            length += 1
        longest = max(longest, length)
    return longest


def majority_element(nums: Iterable[int]) -> int:
    """Return the candidate from Boyer-Moore voting.

    This is the majority element whenever one occurs more than half the time;
    an empty input gives 0.
    """
    candidate, count = 0, 0
    for num in nums:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    return candidate


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return, sorted, the values that occur more than ``len(nums) // 3`` times."""
    first, second = -1, -1
    first_count = second_count = 0

    for num in nums:
        if first_count == 0 and second != num:
            first, first_count = num, 1
        elif second_count == 0 and first != num:
            second, second_count = num, 1
        elif num == first:
            first_count += 1
        elif num == second:
            second_count += 1
        else:
            first_count -= 1
            second_count -= 1

    first_count = second_count = 0
    for num in nums:
        if num == first:
            first_count += 1
        elif num == second:
            second_count += 1

    threshold = len(nums) // 3
    found = []
    if first_count > threshold:
        found.append(first)
    if second_count > threshold:
        found.append(second)
    return sorted(found)


def find_error_nums(nums: Sequence[int]) -> tuple[int, int]:
    """Return ``(duplicated, missing)`` for values that should be ``1..len(nums)``.

    Either part is -1 when no such value exists. Values outside ``0..len(nums)``
    raise ``ValueError``.
    """
    size = len(nums)
    counts = Counter(nums)
    for value in counts:
        if not 0 <= value <= size:
            raise ValueError(f"value {value} is outside 0..{size}")

    duplicated = missing = -1
    for value in range(1, size + 1):
        occurrences = counts[value]
        if occurrences == 2:
            duplicated = value
        elif occurrences == 0:
            missing = value
    return duplicated, missing