import pytest

from algobox.bitwise import closest_to_target


def test_mixed_example():
    assert closest_to_target([9, 12, 3, 7, 15], 5) == 2


def test_repeated_values():
    assert closest_to_target([1000000, 1000000, 1000000], 1) == 999999


def test_zero_reachable():
    assert closest_to_target([1, 2, 4, 8, 16], 0) == 0


@pytest.mark.parametrize("x, target", [(7, 3), (1, 10), (42, 42)])
def test_single_element(x, target):
    assert closest_to_target([x], target) == abs(x - target)


@pytest.mark.parametrize("arr", [[5, 3, 9, 6], [15, 7, 3, 1], [8, 8, 12, 14, 1]])
def test_target_in_array_gives_zero(arr):
    for target in arr:
        assert closest_to_target(arr, target) == 0


@pytest.mark.parametrize("arr, target", [([9, 12, 3, 7, 15], 11), ([6, 5, 13, 2], 4), ([31, 17, 9], 20)])
def test_never_worse_than_best_single_element(arr, target):
    result = closest_to_target(arr, target)
    assert 0 <= result <= min(abs(x - target) for x in arr)


def test_whole_array_and_bounds_result():
    arr = [14, 7, 11, 13]
    target = 0
    whole = 14 & 7 & 11 & 13
    assert closest_to_target(arr, target) <= abs(whole - target)


def test_empty_array_rejected():
    with pytest.raises(ValueError):
        closest_to_target([], 3)