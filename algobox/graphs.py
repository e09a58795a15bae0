"""Tree and grid searches: centres, distance sums, diameters, locks and paths."""

import heapq
from collections import deque
from math import isqrt

INT_MAX = 2**31 - 1
PRIME_LIMIT = 10_000
LOCK_START = "0000"

_DIGITS = frozenset("0123456789")


def _adjacency(n, edges):
    adjacency = [[] for _ in range(n)]
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def _tree_order(adjacency, root=0):
    """Nodes of a tree in breadth-first order from ``root``, and each node's parent."""
    parent = [-1] * len(adjacency)
    order = [root]
    for node in order:
        for neighbour in adjacency[node]:
            if neighbour != parent[node]:
                parent[neighbour] = node
                order.append(neighbour)
    return order, parent


def _depths(adjacency, root=0):
    order, parent = _tree_order(adjacency, root)
    depth = [0] * len(adjacency)
    for node in order[1:]:
        depth[node] = depth[parent[node]] + 1
    return depth


def find_min_height_trees(n, edges):
    """Roots (one or two) that give a tree of ``n`` nodes its smallest height."""
    if n < 1:
        raise ValueError("a tree needs at least one node")
    adjacency = _adjacency(n, edges)
    degree = [len(neighbours) for neighbours in adjacency]
    height = [1 if d == 1 else 0 for d in degree]
    queue = deque(node for node, d in enumerate(degree) if d == 1)
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if height[neighbour]:
                continue
            degree[neighbour] -= 1
            if degree[neighbour] <= 1:
                height[neighbour] = height[node] + 1
                queue.append(neighbour)
    top = max(height)
    return [node for node, h in enumerate(height) if h == top][:2]


def sum_of_distances_in_tree(n, edges):
    """For every node of a tree, the sum of its distances to all other nodes."""
    if n < 1:
        raise ValueError("a tree needs at least one node")
    adjacency = _adjacency(n, edges)
    order, parent = _tree_order(adjacency)
    size = [1] * n
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]
    distances = [0] * n
    distances[0] = sum(_depths(adjacency))
    for node in order[1:]:
        distances[node] = distances[parent[node]] + n - 2 * size[node]
    return distances


def maximum_value_sum(nums, k, edges):
    """Largest node sum after XOR-ing both ends of any edges with ``k`` any number of times."""
    nums = list(nums)
    if not nums:
        raise ValueError("a tree needs at least one node")
    adjacency = _adjacency(len(nums), edges)
    order, parent = _tree_order(adjacency)
    # Best sums of a subtree with an even and with an odd number of flipped nodes.
    best = [(value, value ^ k) for value in nums]
    for node in reversed(order[1:]):
        even, odd = best[node]
        up_even, up_odd = best[parent[node]]
        best[parent[node]] = (
            max(even + up_even, odd + up_odd),
            max(even + up_odd, odd + up_even),
        )
    return best[0][0]


def _diameter(edges):
    adjacency = _adjacency(len(edges) + 1, edges)
    first = _depths(adjacency)
    farthest = first.index(max(first))
    return max(_depths(adjacency, farthest))


def minimum_diameter_after_merge(edges1, edges2):
    """Smallest diameter reachable by joining two trees with a single edge."""
    d1 = _diameter(edges1)
    d2 = _diameter(edges2)
    joined = (d1 + 1) // 2 + (d2 + 1) // 2 + 1
    return max(d1, d2, joined)


def _check_code(code):
    if len(code) != len(LOCK_START) or not set(code) <= _DIGITS:
        raise ValueError(f"{code!r} is not a {len(LOCK_START)}-digit lock code")


def _turns(state):
    for i, char in enumerate(state):
        digit = int(char)
        for step in (1, 9):
            yield state[:i] + str((digit + step) % 10) + state[i + 1 :]


def open_lock(deadends, target):
    """Fewest wheel turns from ``0000`` to ``target`` avoiding ``deadends``, or -1."""
    _check_code(target)
    blocked = set()
    for code in deadends:
        _check_code(code)
        blocked.add(code)
    if LOCK_START in blocked:
        return -1
    if target == LOCK_START:
        return 0
    blocked.add(LOCK_START)
    frontier = [LOCK_START]
    steps = 0
    while frontier:
        steps += 1
        following = []
        for state in frontier:
            for neighbour in _turns(state):
                if neighbour == target:
                    return steps
                if neighbour not in blocked:
                    blocked.add(neighbour)
                    following.append(neighbour)
        frontier = following
    return -1


def min_time_to_reach(move_time):
    """Earliest arrival at the bottom-right room when moves alternately take one and two seconds."""
    if not move_time or not move_time[0]:
        raise ValueError("grid is empty")
    rows, cols = len(move_time), len(move_time[0])
    ready = [
        [t + 2 - (i + j) % 2 for j, t in enumerate(row)]
        for i, row in enumerate(move_time)
    ]
    visited = [[-1] * cols for _ in range(rows)]
    target = (rows - 1, cols - 1)
    heap = [(0, 0, 0)]
    while heap:
        t, i, j = heapq.heappop(heap)
        if visited[i][j] >= 0 and t >= visited[i][j]:
            continue
        visited[i][j] = t
        earliest = t + 1 + (i + j) % 2
        for a, b in ((i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1)):
            if not (0 <= a < rows and 0 <= b < cols) or visited[a][b] >= 0:
                continue
            arrival = max(earliest, ready[a][b])
            heapq.heappush(heap, (arrival, a, b))
            if (a, b) == target:
                return arrival
    return visited[-1][-1]


def _prime_table(limit):
    is_prime = [True] * (limit + 1)
    is_prime[0] = is_prime[1] = False
    for p in range(2, isqrt(limit) + 1):
        if is_prime[p]:
            is_prime[p * p :: p] = [False] * len(range(p * p, limit + 1, p))
    return is_prime


_IS_PRIME = _prime_table(PRIME_LIMIT)


def min_operations(n, m):
    """Least total of visited values turning ``n`` into ``m`` digit by digit, avoiding primes.

    Returns -1 when ``m`` cannot be reached or either end is prime.
    """
    if not 0 <= n < PRIME_LIMIT:
        raise ValueError(f"{n} is outside [0, {PRIME_LIMIT})")
    if not 0 <= m <= PRIME_LIMIT:
        raise ValueError(f"{m} is outside [0, {PRIME_LIMIT}]")
    digits = len(str(n)) if n else 0
    cost = [-1] * (PRIME_LIMIT + 1)
    queue = deque()
    if not _IS_PRIME[n]:
        cost[n] = n
        queue.append(n)
    while queue:
        x = queue.popleft()
        for i in range(digits):
            place = 10**i
            digit = x // place % 10
            moves = []
            if (digit > 0 and i != digits - 1) or digit > 1:
                moves.append(x - place)
            if digit < 9:
                moves.append(x + place)
            for y in moves:
                if _IS_PRIME[y]:
                    continue
                if cost[y] == -1 or cost[x] + y < cost[y]:
                    cost[y] = cost[x] + y
                    queue.append(y)
    return cost[m]


def _box_area(grid, top, bottom, left, right):
    rows = [i for i in range(top, bottom) if any(grid[i][j] == 1 for j in range(left, right))]
    if not rows:
        return 0
    cols = [j for j in range(left, right) if any(grid[i][j] == 1 for i in range(top, bottom))]
    return (rows[-1] - rows[0] + 1) * (cols[-1] - cols[0] + 1)


def minimum_sum_of_areas(grid):
    """Smallest total area of three rectangles covering every 1, over four L-shaped splits.

    A grid with a single row or column has no such split and yields ``INT_MAX``.
    """
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    rows, cols = len(grid), len(grid[0])

    def area(top, bottom, left, right):
        return _box_area(grid, top, bottom, left, right)

    best = INT_MAX
    for i in range(1, rows):
        for j in range(1, cols):
            best = min(
                best,
                area(0, i, 0, j) + area(0, i, j, cols) + area(i, rows, 0, cols),
                area(0, i, j, cols) + area(i, rows, j, cols) + area(0, rows, 0, j),
                area(0, i, 0, cols) + area(i, rows, 0, j) + area(i, rows, j, cols),
                area(0, i, 0, j) + area(i, rows, 0, j) + area(0, rows, j, cols),
            )
    return best