"""Closest bitwise AND of a subarray to a target."""


def _and_table(arr: list[int]) -> list[list[int]]:
    table = [list(arr)]
    width = 1
    while 2 * width <= len(arr):
        prev = table[-1]
        table.append([a & b for a, b in zip(prev, prev[width:])])
        width *= 2
    return table


def _range_and(table: list[list[int]], left: int, right: int) -> int:
    level = (right - left).bit_length() - 1
    row = table[level]
    return row[left] & row[right - (1 << level)]


def closest_to_target(arr, target):
    """Smallest ``|AND(arr[l:r]) - target|`` over all non-empty subarrays."""
    arr = list(arr)
    if not arr:
        raise ValueError("array is empty")
    table = _and_table(arr)
    n = len(arr)
    best = None
    for start in range(n):
        lo, hi = start + 1, n
        # AND over [start, end) only shrinks as end grows, so bisect for target.
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if _range_and(table, start, mid) > target:
                lo = mid
            else:
                hi = mid
        for end in (lo, hi):
            diff = abs(_range_and(table, start, end) - target)
            if best is None or diff < best:
                best = diff
    return best