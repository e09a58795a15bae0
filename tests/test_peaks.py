import pytest

from algobox.peaks import count_of_peaks


def test_first_example():
    assert count_of_peaks([3, 1, 4, 2, 5], [[2, 3, 4], [1, 0, 4]]) == [0]


def test_second_example():
    nums = [4, 1, 4, 2, 1, 5]
    assert count_of_peaks(nums, [[2, 2, 4], [1, 0, 2], [1, 0, 4]]) == [0, 1]


def test_increasing_array_has_no_peaks():
    nums = list(range(10))
    queries = [[1, 0, 9], [1, 2, 7], [1, 4, 4]]
    assert count_of_peaks(nums, queries) == [0, 0, 0]


def test_updates_match_fresh_array():
    nums = [5, 1, 4, 2, 6, 3, 7, 2]
    updates = [[2, 3, 9], [2, 0, 0], [2, 7, 10], [2, 5, 8], [2, 4, 1]]
    final = list(nums)
    for _, index, value in updates:
        final[index] = value
    ranges = [[1, 0, 7], [1, 1, 5], [1, 2, 6], [1, 3, 3]]
    assert count_of_peaks(nums, updates + ranges) == count_of_peaks(final, ranges)


def test_only_count_queries_produce_answers():
    nums = [1, 3, 1, 3, 1, 3, 1]
    queries = [[1, 0, 6], [2, 1, 0], [1, 0, 6], [2, 3, 0], [1, 0, 6]]
    results = count_of_peaks(nums, queries)
    assert len(results) == 3
    assert results[0] >= results[1] >= results[2]


def test_wider_range_never_counts_fewer():
    nums = [2, 7, 3, 8, 1, 9, 4, 6, 5]
    queries = [[1, 0, r] for r in range(len(nums))]
    results = count_of_peaks(nums, queries)
    assert results == sorted(results)


def test_endpoints_are_not_peaks():
    nums = [1, 9, 1, 9, 1]
    assert count_of_peaks(nums, [[1, 1, 3]]) == count_of_peaks(nums, [[1, 1, 2]])


def test_input_is_not_changed():
    nums = [1, 5, 2, 6, 3]
    count_of_peaks(nums, [[2, 1, 0], [1, 0, 4]])
    assert nums == [1, 5, 2, 6, 3]


def test_out_of_range_count_raises():
    with pytest.raises(IndexError):
        count_of_peaks([1, 2, 1], [[1, 0, 3]])


def test_out_of_range_update_raises():
    with pytest.raises(IndexError):
        count_of_peaks([1, 2, 1], [[2, 5, 4]])