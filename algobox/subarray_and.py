"""Counting subarrays whose bitwise AND equals a value."""

from collections import Counter


def count_subarrays_with_and(nums, k):
    """Number of non-empty subarrays of ``nums`` whose bitwise AND is ``k``."""
    total = 0
    ending_here = Counter()
    for value in nums:
        following = Counter({value: 1})
        for previous, count in ending_here.items():
            following[previous & value] += count
        ending_here = following
        total += ending_here[k]
    return total