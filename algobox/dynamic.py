"""Dynamic programming and exhaustive searches over arrays, grids and strings."""

from collections import Counter, deque
from itertools import accumulate, combinations, permutations

MAX_CELL_VALUE = 100
ROOKS = 3


def maximum_total_damage(power):
    """Largest total of chosen spells when no two chosen values differ by 1 or 2.

    Every copy of a chosen value counts.
    """
    # The three most recent distinct values and the best total up to each of them.
    history = deque([(-4, 0)] * 3, maxlen=3)
    for value, count in sorted(Counter(power).items()):
        (v3, b3), (v2, b2), (v1, b1) = history
        if v1 < value - 2:
            base = b1
        elif v2 < value - 2:
            base = b2
        else:
            base = b3
        history.append((value, max(base + value * count, b1, b2, b3)))
    return max(best for _, best in history)


def minimum_cutting_cost(m, n, horizontal_cut, vertical_cut):
    """Cost of cutting an ``m`` by ``n`` cake by greedily picking the dearest line.

    ``horizontal_cut[i]`` is the cost of the line below row ``i`` and
    ``vertical_cut[j]`` the cost of the line right of column ``j``.
    """
    if m < 1 or n < 1:
        raise ValueError("the cake needs at least one row and one column")
    h = list(horizontal_cut)
    v = list(vertical_cut)
    if len(h) != m - 1 or len(v) != n - 1:
        raise ValueError("expected m - 1 horizontal and n - 1 vertical costs")

    def cost(top, bottom, left, right):
        if bottom - top == 1:
            return sum(v[left : right - 1])
        if right - left == 1:
            return sum(h[top : bottom - 1])
        ih = max(range(top, bottom - 1), key=h.__getitem__)
        iv = max(range(left, right - 1), key=v.__getitem__)
        sum_h = sum(h[top : bottom - 1])
        sum_v = sum(v[left : right - 1])
        if v[iv] - sum_h > h[ih] - sum_v:
            return v[iv] + cost(top, bottom, left, iv + 1) + cost(top, bottom, iv + 1, right)
        return h[ih] + cost(top, ih + 1, left, right) + cost(ih + 1, bottom, left, right)

    return cost(0, m, 0, n)


def min_changes(nums, k):
    """Fewest changes so that every mirrored pair differs by the same amount.

    Values must lie in ``[0, k]``.
    """
    nums = list(nums)
    if any(not 0 <= value <= k for value in nums):
        raise ValueError(f"values must lie in [0, {k}]")
    half = len(nums) // 2
    two_changes_from = [0] * (k + 1)
    exact = Counter()
    for a, b in zip(nums[:half], reversed(nums)):
        reach = max(k - a, a, k - b, b)
        if reach + 1 <= k:
            two_changes_from[reach + 1] = 1
        exact[abs(a - b)] += 1
    costs = []
    running = half
    for diff in range(k + 1):
        running += two_changes_from[diff]
        costs.append(running - exact[diff])
    return min(costs)


def max_score_words(words, letters, score):
    """Highest score of a set of words spelled from ``letters``, each letter used once.

    ``score`` gives the value of each letter from ``a`` to ``z``.
    """
    words = list(words)
    needs = [Counter(word) for word in words]
    worth = [sum(score[ord(c) - ord("a")] for c in word) for word in words]
    available = Counter(letters)

    def best(start):
        result = 0
        for i in range(start, len(words)):
            need = needs[i]
            if all(available[c] >= count for c, count in need.items()):
                available.subtract(need)
                result = max(result, worth[i] + best(i + 1))
                available.update(need)
        return result

    return best(0)


def count_monotonic_pairs(nums):
    """Number of ways to split ``nums`` into a non-decreasing plus a non-increasing array.

    Both arrays hold non-negative integers.
    """
    nums = list(nums)
    if not nums:
        raise ValueError("array is empty")
    rise = 0
    room = nums[0]
    for prev, cur in zip(nums, nums[1:]):
        rise += max(cur - prev, 0)
        room = cur - rise
    if room < 0:
        return 0
    ways = [1] * (room + 1)
    for _ in nums:
        ways = list(accumulate(ways))
    return ways[-1]


def maximum_rook_sum(board):
    """Largest sum of three cells sharing no row and no column."""
    board = [list(row) for row in board]
    if len(board) < ROOKS or len(board[0]) < ROOKS:
        raise ValueError(f"the board needs at least {ROOKS} rows and columns")
    return max(
        sum(board[r][c] for r, c in zip(rows, cols))
        for rows in combinations(range(len(board)), ROOKS)
        for cols in permutations(range(len(board[0])), ROOKS)
    )


def max_score_distinct_rows(grid):
    """Largest sum taking one value from every row, all values distinct.

    A choice that leaves some row without an unused value scores zero.
    Values must lie in ``[0, 100]``.
    """
    grid = [list(row) for row in grid]
    if any(not 0 <= value <= MAX_CELL_VALUE for row in grid for value in row):
        raise ValueError(f"values must lie in [0, {MAX_CELL_VALUE}]")
    used = set()

    def pick(row, total):
        if row == len(grid):
            return total
        best = 0
        for value in grid[row]:
            if value in used:
                continue
            used.add(value)
            best = max(best, pick(row + 1, total + value))
            used.discard(value)
        return best

    return pick(0, 0)


def maximal_rectangle(matrix):
    """Area of the largest rectangle of ones in a grid of ``"0"`` and ``"1"`` cells."""
    rows = [[str(cell) != "0" for cell in row] for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix is empty")
    width = len(rows[0])
    heights = [0] * width
    best = 0
    for row in rows:
        heights = [h + 1 if filled else 0 for filled, h in zip(row, heights)]
        rising = [j for j, (prev, h) in enumerate(zip([0] + heights, heights)) if h > prev]
        for left in rising:
            height = heights[left]
            for right in range(left, width):
                height = min(height, heights[right])
                if height == 0:
                    break
                best = max(best, (right - left + 1) * height)
    return best


def find_rotate_steps(ring, key):
    """Fewest rotations and presses to spell ``key`` on a dial starting at ``ring[0]``."""
    n = len(ring)
    if n == 0:
        raise ValueError("ring is empty")
    missing = set(key) - set(ring)
    if missing:
        raise ValueError(f"characters {sorted(missing)} are not on the ring")
    reach = n // 2 + 1

    def nearest(steps, i):
        return min(
            steps[j] + s
            for s in range(reach)
            for j in ((i + s) % n, (i - s) % n)
            if steps[j] is not None
        )

    steps = [0] * n
    for c in reversed(key):
        steps = [nearest(steps, i) + 1 if ch == c else None for i, ch in enumerate(ring)]
    return nearest(steps, 0)


def min_distance(word1, word2):
    """Edit distance with insertions, deletions and substitutions."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        current = [i]
        for j, b in enumerate(word2, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def max_removals(source, pattern, target_indices):
    """Most sorted ``target_indices`` removable from ``source`` keeping ``pattern`` a subsequence.

    Returns -1 when ``pattern`` is not a subsequence to begin with.
    """
    targets = list(target_indices)
    m = len(pattern)
    matched = [0] * (len(targets) + 1)
    seen = 0
    for i, ch in enumerate(source):
        before = list(matched)
        for j in range(seen + 1):
            if matched[j] < m and ch == pattern[matched[j]]:
                matched[j] += 1
        if seen < len(targets) and targets[seen] == i:
            for j in range(1, seen + 1):
                matched[j] = max(matched[j], before[j - 1])
            matched[seen + 1] = before[seen]
            seen += 1
    for removed in range(len(matched) - 1, -1, -1):
        if matched[removed] == m:
            return removed
    return -1


def find_permutation(nums):
    """Permutation of indices recorded by a depth-first search on the cyclic score.

    The score of ``perm`` is the sum of ``|perm[i] - nums[perm[i + 1]]|`` around
    the cycle. Each search level, on improving its best score, records the
    current order from that level onwards.
    """
    nums = list(nums)
    n = len(nums)
    if n == 0:
        raise ValueError("array is empty")
    perm = [0] * n
    chosen = [0] * n
    used = [False] * n

    def search(depth, cost):
        if depth == n:
            return cost + abs(perm[-1] - nums[perm[0]])
        best = None
        for i in range(n):
            if used[i]:
                continue
            perm[depth] = i
            used[i] = True
            step = abs(perm[depth - 1] - nums[i]) if depth else 0
            total = search(depth + 1, cost + step)
            used[i] = False
            if best is None or total < best:
                best = total
                chosen[depth:] = perm[depth:]
        return best

    search(0, 0)
    return chosen