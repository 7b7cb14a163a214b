"""Single-pass three-way partitioning."""

from __future__ import annotations


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place with one pass.

    Any value other than 0 or 1 is treated as 2 and moved to the end.
    """
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1