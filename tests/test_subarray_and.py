import pytest

from algobox.subarray_and import count_subarrays_with_and


def test_all_equal_counts_every_subarray():
    nums = [1, 1, 1]
    n = len(nums)
    assert count_subarrays_with_and(nums, 1) == n * (n + 1) // 2


def test_mixed_example():
    assert count_subarrays_with_and([1, 1, 2], 1) == 3


def test_middle_value_example():
    assert count_subarrays_with_and([1, 2, 3], 2) == 2


def test_unreachable_value_gives_zero():
    assert count_subarrays_with_and([4, 8, 16], 3) == 0


def test_empty_array():
    assert count_subarrays_with_and([], 1) == 0


@pytest.mark.parametrize("nums", [[5, 7, 3, 1], [12, 6, 14, 2, 9], [0, 1, 2, 3]])
def test_counts_over_all_values_cover_every_subarray(nums):
    n = len(nums)
    total = sum(count_subarrays_with_and(nums, k) for k in range(max(nums) + 1))
    assert total == n * (n + 1) // 2


def test_single_element_matches_itself():
    assert count_subarrays_with_and([6], 6) == 1
    assert count_subarrays_with_and([6], 2) == 0