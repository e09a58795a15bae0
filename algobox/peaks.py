"""Counting peaks in subarrays while the array changes."""


class _Fenwick:
    """Prefix sums with point updates."""

    def __init__(self, values):
        self._tree = [0] * (len(values) + 1)
        for index, value in enumerate(values):
            self.add(index, value)

    def add(self, index, delta):
        i = index + 1
        while i < len(self._tree):
            self._tree[i] += delta
            i += i & -i

    def prefix(self, end):
        """Sum of the first ``end`` values."""
        total = 0
        i = end
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total


def count_of_peaks(nums, queries):
    """Answer peak queries over ``nums``.

    ``(1, left, right)`` counts elements strictly inside ``[left, right]`` that
    are larger than both neighbours; any other query ``(2, index, value)``
    assigns ``value`` to ``nums[index]``. Returns the answers to the counts.
    """
    nums = list(nums)
    n = len(nums)

    def is_peak(i):
        return 0 < i < n - 1 and nums[i] > nums[i - 1] and nums[i] > nums[i + 1]

    flags = [int(is_peak(i)) for i in range(n)]
    tree = _Fenwick(flags)
    results = []
    for kind, first, second in queries:
        if kind == 1:
            if not (0 <= first < n and 0 <= second < n):
                raise IndexError(f"range [{first}, {second}] is outside [0, {n})")
            if first + 1 < second:
                results.append(tree.prefix(second) - tree.prefix(first + 1))
            else:
                results.append(0)
            continue
        if not 0 <= first < n:
            raise IndexError(f"index {first} is outside [0, {n})")
        nums[first] = second
        for position in (first - 1, first, first + 1):
            if 0 < position < n - 1:
                flag = int(is_peak(position))
                if flag != flags[position]:
                    tree.add(position, flag - flags[position])
                    flags[position] = flag
    return results