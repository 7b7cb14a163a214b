"""Lexicographic permutation stepping."""

from __future__ import annotations


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into its next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    size = len(nums)
    pivot = next((k for k in range(size - 2, -1, -1) if nums[k] < nums[k + 1]), None)
    if pivot is None:
        nums.reverse()
        return
    successor = next(k for k in range(size - 1, pivot, -1) if nums[k] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1:] = reversed(nums[pivot + 1:])