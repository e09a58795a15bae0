"""Array puzzles: schedules, digit swaps, heaps of costs, windows and card decks."""

import heapq
from collections import Counter, defaultdict, deque
from itertools import accumulate, combinations
from string import ascii_uppercase

MOD = 1_000_000_007

_TASK_LETTERS = frozenset(ascii_uppercase)


def count_days(days, meetings):
    """Days in ``[1, days]`` not covered by any ``(start, end)`` meeting."""
    free = 0
    last_end = 0
    for start, end in sorted(meetings, key=lambda meeting: meeting[0]):
        if start > last_end:
            free += start - last_end - 1
            last_end = end
        else:
            last_end = max(last_end, end)
    if last_end < days:
        free += days - last_end
    return free


def count_almost_equal_pairs(nums):
    """Pairs that are equal, or become equal by swapping two digits of one of them.

    Shorter numbers are read with leading zeros.
    """
    nums = list(nums)
    if any(value < 0 for value in nums):
        raise ValueError("values must not be negative")
    if not nums:
        return 0
    width = max(len(str(value)) for value in nums)
    padded = [str(value).zfill(width) for value in nums]
    count = 0
    for a, b in combinations(padded, 2):
        diffs = [(p, q) for p, q in zip(a, b) if p != q]
        if not diffs or (len(diffs) == 2 and diffs[0] == diffs[1][::-1]):
            count += 1
    return count


def get_final_state(nums, k, multiplier):
    """Multiply the smallest value (earliest on ties) ``k`` times, then reduce modulo 1e9+7."""
    nums = list(nums)
    if not nums:
        raise ValueError("array is empty")
    if multiplier == 1:
        return [value % MOD for value in nums]
    heap = [(value, index) for index, value in enumerate(nums)]
    heapq.heapify(heap)
    largest = max(nums)
    while k > 0:
        value, index = heap[0]
        if value * multiplier >= largest:
            break
        heapq.heapreplace(heap, (value * multiplier, index))
        k -= 1
    # Once every value has passed the largest one, the rounds repeat in the same order.
    full, extra = divmod(k, len(nums))
    base = pow(multiplier, full, MOD)
    bonus = base * multiplier % MOD
    result = list(nums)
    for rank in range(len(nums)):
        value, index = heapq.heappop(heap)
        result[index] = value * (bonus if rank < extra else base) % MOD
    return result


def k_nearest_obstacles(queries, k):
    """After each ``(x, y)`` obstacle, the ``k``-th smallest Manhattan distance, or -1."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    nearest = []  # negated distances of the k closest obstacles
    results = []
    for i, (x, y) in enumerate(queries):
        heapq.heappush(nearest, -(abs(x) + abs(y)))
        if len(nearest) > k:
            heapq.heappop(nearest)
        results.append(-nearest[0] if i >= k - 1 else -1)
    return results


def max_possible_score(start, d):
    """Largest smallest gap when picking one point from each ``[s, s + d]``."""
    start = sorted(start)
    n = len(start)
    if n < 2:
        raise ValueError("at least two intervals are needed")
    limit = (start[-1] + d - start[0]) // (n - 1)

    def place(right, left):
        """Place points in intervals ``[left, right)``; return the last position used."""
        nonlocal limit
        if right - left > 1:
            span = start[right - 1] + d - start[left]
            limit = min(limit, span // (right - 1 - left))
        last = start[left] - limit
        for i in range(left, right):
            expected = last + limit
            if expected < start[i]:
                return place(right, i)
            if expected > start[i] + d:
                last = place(i + 1, left)
            else:
                last += limit
        return last

    place(n, 0)
    return limit


def _triangle(units):
    return units * (units + 1) // 2


def min_number_of_seconds(mountain_height, worker_times):
    """Seconds for workers together to remove ``mountain_height`` units.

    A worker with time ``t`` needs ``t * (1 + 2 + ... + x)`` seconds for ``x`` units.
    """
    times = list(worker_times)
    if not times:
        raise ValueError("no workers")
    # (cost of having done one more unit, worker time, units counted so far + 1)
    heap = [(t, t, 1) for t in times]
    heapq.heapify(heap)
    for _ in range(mountain_height):
        _, t, units = heap[0]
        heapq.heapreplace(heap, (t * _triangle(units + 1), t, units + 1))
    return max((t * _triangle(units - 1) for _, t, units in heap), default=0)


def _top_sum(counts, x):
    top = heapq.nlargest(x, ((freq, value) for value, freq in counts.items()))
    return sum(freq * value for freq, value in top)


def find_x_sum(nums, k, x):
    """For every window of ``k`` values, the sum over its ``x`` most frequent values.

    Frequency ties go to the larger value; each kept value counts every occurrence.
    """
    nums = list(nums)
    if not 1 <= k <= len(nums):
        raise ValueError(f"window size {k} is outside [1, {len(nums)}]")
    window = Counter(nums[:k])
    results = [_top_sum(window, x)]
    for leaving, entering in zip(nums, nums[k:]):
        window[leaving] -= 1
        if not window[leaving]:
            del window[leaving]
        window[entering] += 1
        results.append(_top_sum(window, x))
    return results


def count_bits(n):
    """Number of set bits of every integer from 0 to ``n``."""
    if n < 0:
        raise ValueError(f"{n} is negative")
    return [i.bit_count() for i in range(n + 1)]


def check_subarray_sum(nums, k):
    """Whether a subarray of length two or more sums to a multiple of ``k``."""
    nums = list(nums)
    if not nums:
        raise ValueError("array is empty")
    if k == 0:
        raise ValueError("k must not be zero")
    first_seen = {}
    remainders = accumulate(nums, lambda acc, value: (acc + value) % k, initial=0)
    for i, remainder in enumerate(remainders):
        if remainder in first_seen:
            if first_seen[remainder] < i - 1:
                return True
        else:
            first_seen[remainder] = i
    return False


def least_interval(tasks, n):
    """Fewest time slots to run ``A``-``Z`` tasks with ``n`` slots between equal tasks."""
    counts = Counter(tasks)
    unknown = [task for task in counts if task not in _TASK_LETTERS]
    if unknown:
        raise ValueError(f"tasks {unknown} are not letters A to Z")
    hist = sorted(counts.get(letter, 0) for letter in ascii_uppercase)
    top = hist[-1]
    shortest = (top - 1) * (n + 1) + hist.count(top)
    return max(sum(counts.values()), shortest)


def kth_smallest_prime_fraction(arr, k):
    """The ``k``-th smallest fraction ``arr[i] / arr[j]`` with ``i < j``, as ``[arr[i], arr[j]]``.

    ``arr`` is sorted and starts with 1.
    """
    arr = list(arr)
    n = len(arr)
    if n < 2:
        raise ValueError("at least two values are needed")
    if not 1 <= k <= n * (n - 1) // 2:
        raise ValueError(f"k={k} is outside [1, {n * (n - 1) // 2}]")
    numerator = [0] * n
    answer = (0, n - 1)
    for _ in range(k):
        smallest = n - 1
        for denominator in range(n - 2, 0, -1):
            if (
                arr[numerator[denominator]] * arr[smallest]
                < arr[numerator[smallest]] * arr[denominator]
            ):
                smallest = denominator
            if numerator[denominator] == 0:
                break
        answer = (numerator[smallest], smallest)
        numerator[smallest] += 1
    return [arr[answer[0]], arr[answer[1]]]


def is_n_straight_hand(hand, group_size):
    """Whether ``hand`` splits into runs of ``group_size`` consecutive values."""
    if group_size < 1:
        raise ValueError(f"group size must be positive, got {group_size}")
    hand = list(hand)
    if len(hand) % group_size:
        return False
    if group_size == 1:
        return True
    pending = defaultdict(list)  # next value wanted -> cards still missing per run
    for value in sorted(hand):
        waiting = pending.get(value)
        if not waiting:
            pending[value + 1].append(group_size - 1)
            continue
        need = waiting.pop() - 1
        if not waiting:
            del pending[value]
        if need:
            pending[value + 1].append(need)
    return not pending


def mincost_to_hire_workers(quality, wage, k):
    """Least cost of hiring ``k`` workers paid in proportion to quality, each at least their wage."""
    workers = list(zip(quality, wage, strict=True))
    if not 1 <= k <= len(workers):
        raise ValueError(f"k={k} is outside [1, {len(workers)}]")
    workers.sort(key=lambda qw: (qw[1] / qw[0], qw[0]))
    hired = [-q for q, _ in workers[:k]]
    heapq.heapify(hired)
    total = sum(q for q, _ in workers[:k])
    q, w = workers[k - 1]
    best = total * (w / q)
    for q, w in workers[k:]:
        total += q
        total += heapq.heappushpop(hired, -q)
        best = min(best, total * (w / q))
    return best


def deck_revealed_increasing(deck):
    """Order ``deck`` so that revealing top, moving next to bottom, yields increasing cards."""
    deck = list(deck)
    positions = deque(range(len(deck)))
    reveal = []
    while positions:
        reveal.append(positions.popleft())
        if positions:
            positions.rotate(-1)
    result = [0] * len(deck)
    for position, card in zip(reveal, sorted(deck)):
        result[position] = card
    return result