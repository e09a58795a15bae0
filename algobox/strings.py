"""String puzzles: anagram periods, swaps, versions, prefix covers and palindromes."""

from collections import Counter, deque
from dataclasses import dataclass, field
from itertools import zip_longest
from typing import Optional

VOWELS = frozenset("aeiou")


def min_anagram_length(s):
    """Length of the shortest block whose anagrams, concatenated, make up ``s``."""
    n = len(s)
    if n == 0:
        raise ValueError("string is empty")
    for period in (p for p in range(1, n + 1) if n % p == 0):
        first = Counter(s[:period])
        if all(Counter(s[j : j + period]) == first for j in range(period, n, period)):
            return period
    return n


def get_smallest_string(s):
    """Swap the first adjacent pair of equal parity that is out of order, if any."""
    for p, (left, right) in enumerate(zip(s, s[1:])):
        if ord(left) % 2 == ord(right) % 2 and right < left:
            return s[:p] + right + left + s[p + 2 :]
    return s


def num_steps(s):
    """Steps to reduce a binary number to one by halving evens and incrementing odds."""
    steps = 0
    carry = False
    for bit in reversed(s[1:]):
        if not carry and bit != "0":
            carry = True
            steps += 2
        elif carry and bit == "0":
            steps += 2
        else:
            steps += 1
    if carry:
        steps += 1
    return steps


def compare_version(version1, version2):
    """Compare dotted version strings: 1 if the first is newer, -1 if older, else 0."""
    parts1 = [int(part) for part in version1.split(".")]
    parts2 = [int(part) for part in version2.split(".")]
    for a, b in zip_longest(parts1, parts2, fillvalue=0):
        if a > b:
            return 1
        if a < b:
            return -1
    return 0


def _drain(stack, high_left, high_right, low_score):
    """Empty ``stack``, scoring ``low_score`` for each ``high_left`` met above a ``high_right``."""
    if not stack:
        return 0
    score = 0
    previous = stack.pop()
    while stack:
        if previous == high_left and stack[-1] == high_right:
            score += low_score
            stack.pop()
        if stack:
            previous = stack.pop()
    return score


def _gain(s, high_left, high_right, high_score, low_score):
    score = 0
    stack = []
    for c in s:
        if c == high_right:
            if stack and stack[-1] == high_left:
                stack.pop()
                score += high_score
            else:
                stack.append(c)
        elif c == high_left:
            stack.append(c)
        else:
            score += _drain(stack, high_left, high_right, low_score)
    return score + _drain(stack, high_left, high_right, low_score)


def maximum_gain(s, x, y):
    """Points from removing ``ab`` (worth ``x``) and ``ba`` (worth ``y``), the dearer first."""
    if x >= y:
        return _gain(s, "a", "b", x, y)
    return _gain(s, "b", "a", y, x)


@dataclass(eq=False)
class _TrieNode:
    depth: int
    children: dict = field(default_factory=dict)
    suffix: Optional["_TrieNode"] = None
    is_word: bool = False


def _build_automaton(words):
    root = _TrieNode(0)
    for word in words:
        if not word:
            raise ValueError("words must not be empty")
        node = root
        for depth, c in enumerate(word):
            child = node.children.get(c)
            if child is None:
                child = node.children[c] = _TrieNode(depth)
            node = child
        node.is_word = True

    for child in root.children.values():
        child.suffix = root
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for c, child in node.children.items():
            queue.append(child)
            link = node.suffix
            while link is not None:
                if c in link.children:
                    child.suffix = link.children[c]
                    break
                link = link.suffix
    return root


def _relax(best, i, candidate):
    if best[i] is None or candidate < best[i]:
        best[i] = candidate


def min_valid_strings(words, target):
    """Fewest prefixes of ``words`` that concatenate to ``target``, or -1."""
    if not target:
        raise ValueError("target is empty")
    root = _build_automaton(words)
    best = [None] * len(target)
    node = root
    for i, c in enumerate(target):
        if c not in node.children:
            node = node.suffix
            while node is not None and c not in node.children:
                node = node.suffix
            if node is None:
                if c not in root.children:
                    return -1
                node = root
        node = node.children[c]

        if node.depth == i:
            best[i] = 1
        elif i - node.depth - 1 >= 0 and best[i - node.depth - 1] is not None:
            _relax(best, i, best[i - node.depth - 1] + 1)

        link = node.suffix
        while link is not None:
            before = i - link.depth - 1
            if link.is_word and best[before] is not None:
                _relax(best, i, best[before] + 1)
            link = link.suffix
    return -1 if best[-1] is None else best[-1]


def _prefix_function(text):
    pi = [0] * len(text)
    for i in range(1, len(text)):
        j = pi[i - 1]
        while j > 0 and text[i] != text[j]:
            j = pi[j - 1]
        if text[i] == text[j]:
            j += 1
        pi[i] = j
    return pi


def _suffix_function(text):
    n = len(text)
    pi = [0] * n
    for i in range(n - 2, -1, -1):
        j = pi[i + 1]
        while j > 0 and text[i] != text[n - 1 - j]:
            j = pi[n - j]
        if text[i] == text[n - 1 - j]:
            j += 1
        pi[i] = j
    return pi


def min_starting_index(s, pattern):
    """Smallest start of a window of ``s`` differing from ``pattern`` in at most one place, or -1."""
    ns, np_ = len(s), len(pattern)
    if np_ == 0:
        raise ValueError("pattern is empty")
    if np_ > ns:
        raise ValueError("pattern is longer than the string")
    if np_ == 1:
        return 0

    pref_p = _prefix_function(pattern)
    suff_p = _suffix_function(pattern)

    pref = [0] * ns
    pref[0] = int(pattern[0] == s[0])
    for i in range(1, ns):
        j = pref[i - 1]
        while j >= np_ or (j > 0 and s[i] != pattern[j]):
            j = pref_p[j - 1]
        if s[i] == pattern[j]:
            j += 1
        pref[i] = j

    suff = [0] * ns
    suff[-1] = int(pattern[-1] == s[-1])
    for i in range(ns - 2, -1, -1):
        j = suff[i + 1]
        while j >= np_ or (j > 0 and s[i] != pattern[np_ - 1 - j]):
            j = suff_p[np_ - j]
        if s[i] == pattern[np_ - 1 - j]:
            j += 1
        suff[i] = j

    def tail_fits(after):
        """Whether one free character followed by the matched suffix at ``after`` covers the pattern."""
        return suff[after] + 1 == np_ or (
            suff[after] > 0 and suff_p[np_ - suff[after]] + 1 == np_
        )

    if suff[0] == np_ or tail_fits(1):
        return 0
    for i in range(1, ns - 1):
        head = pref[i - 1]
        after = suff[i + 1]
        if (
            pref[i] == np_
            or head + 1 == np_
            or after + head + 1 == np_
            or (after > 0 and suff_p[np_ - after] + head + 1 == np_)
        ):
            return i - head
        if suff[i] == np_ or tail_fits(i + 1):
            return i
    if pref[-1] == np_ or pref[-2] + 1 == np_:
        return ns - np_
    return -1


def count_of_substrings(word, k):
    """Substrings holding every vowel and exactly ``k`` consonants."""
    counts = Counter()
    left = right = 0
    total = 0

    def vowels_good():
        return all(counts[v] > 0 for v in VOWELS)

    def consonants(length):
        return length - sum(counts[v] for v in VOWELS)

    for i, c in enumerate(word):
        counts[c] += 1
        while (
            vowels_good()
            and consonants(i + 1 - right) > k
            and not (word[right] in VOWELS and counts[word[right]] <= 1)
        ):
            counts[word[right]] -= 1
            right += 1
            left = right
        while (
            vowels_good()
            and consonants(i + 1 - right) == k
            and word[right] in VOWELS
            and counts[word[right]] > 1
        ):
            counts[word[right]] -= 1
            right += 1
        if vowels_good() and consonants(i + 1 - right) == k:
            total += right + 1 - left
    return total


def find_palindromic_subtrees(parent, s):
    """For each node, whether its post-order string (children by index) is a palindrome."""
    n = len(parent)
    if n == 0:
        raise ValueError("tree is empty")
    if len(s) < n:
        raise ValueError("fewer characters than nodes")
    children = [[] for _ in range(n)]
    for node, up in enumerate(parent):
        if up >= 0:
            children[up].append(node)

    chars = []
    starts = [0] * n
    answer = [False] * n
    stack = [(0, iter(children[0]))]
    while stack:
        node, pending = stack[-1]
        child = next(pending, None)
        if child is not None:
            starts[child] = len(chars)
            stack.append((child, iter(children[child])))
            continue
        stack.pop()
        chars.append(s[node])
        segment = chars[starts[node] :]
        answer[node] = segment == segment[::-1]
    return answer