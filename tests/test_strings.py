import pytest

from algobox.strings import (
    compare_version,
    count_of_substrings,
    find_palindromic_subtrees,
    get_smallest_string,
    maximum_gain,
    min_anagram_length,
    min_starting_index,
    min_valid_strings,
    num_steps,
)


# min_anagram_length

def test_min_anagram_length_repeated_block():
    assert min_anagram_length("abba") == 2


def test_min_anagram_length_distinct_letters_is_whole_string():
    s = "cdef"
    assert min_anagram_length(s) == len(s)


@pytest.mark.parametrize("s", ["abcabcbca", "aabbab", "zzzz", "xyz"])
def test_min_anagram_length_divides_length(s):
    result = min_anagram_length(s)
    assert len(s) % result == 0


def test_min_anagram_length_single_letter_run():
    assert min_anagram_length("aaaa") == 1


def test_min_anagram_length_empty_raises():
    with pytest.raises(ValueError):
        min_anagram_length("")


# get_smallest_string

def test_get_smallest_string_swaps_first_pair():
    assert get_smallest_string("45320") == "43520"


def test_get_smallest_string_no_swap():
    assert get_smallest_string("001") == "001"


def test_get_smallest_string_is_permutation():
    s = "97531"
    result = get_smallest_string(s)
    assert sorted(result) == sorted(s)
    assert result <= s


# num_steps

def test_num_steps_example():
    assert num_steps("1101") == 6


def test_num_steps_one():
    assert num_steps("1") == 0


@pytest.mark.parametrize("zeros", [1, 3, 7])
def test_num_steps_power_of_two_only_halves(zeros):
    assert num_steps("1" + "0" * zeros) == zeros


# compare_version

@pytest.mark.parametrize(
    "v1, v2, expected",
    [
        ("1.01", "1.001", 0),
        ("1.0", "1.0.0", 0),
        ("0.1", "1.1", -1),
        ("1.0.1", "1", 1),
        ("1", "1.0.1", -1),
    ],
)
def test_compare_version(v1, v2, expected):
    assert compare_version(v1, v2) == expected


def test_compare_version_is_antisymmetric():
    assert compare_version("2.3", "2.10") == -compare_version("2.10", "2.3")


def test_compare_version_empty_part_raises():
    with pytest.raises(ValueError):
        compare_version("1..2", "1.2")


# maximum_gain

def test_maximum_gain_ba_preferred():
    assert maximum_gain("cdbcbbaaabab", 4, 5) == 19


def test_maximum_gain_ab_preferred():
    assert maximum_gain("aabbaaxybbaabb", 5, 4) == 20


def test_maximum_gain_without_letters():
    assert maximum_gain("xyzxyz", 3, 7) == 0


@pytest.mark.parametrize("s", ["cdbcbbaaabab", "abab", "bbaaxab"])
def test_maximum_gain_swapping_letters_and_scores(s):
    mirrored = s.translate(str.maketrans("ab", "ba"))
    assert maximum_gain(s, 6, 2) == maximum_gain(mirrored, 2, 6)


# min_valid_strings

def test_min_valid_strings_whole_word():
    assert min_valid_strings(["abc"], "abc") == 1


def test_min_valid_strings_prefix_is_valid():
    assert min_valid_strings(["abc"], "ab") == 1


def test_min_valid_strings_two_copies():
    assert min_valid_strings(["ab"], "abab") == 2


def test_min_valid_strings_unknown_letter():
    assert min_valid_strings(["abcdef"], "xyz") == -1


def test_min_valid_strings_empty_target_raises():
    with pytest.raises(ValueError):
        min_valid_strings(["ab"], "")


# min_starting_index

def test_min_starting_index_exact_occurrence():
    assert min_starting_index("xxabc", "abc") == 2


def test_min_starting_index_change_at_end():
    assert min_starting_index("xxabd", "abc") == 2


def test_min_starting_index_change_at_start():
    assert min_starting_index("zbcxx", "abc") == 0


def test_min_starting_index_no_match():
    assert min_starting_index("xyzw", "ab") == -1


def test_min_starting_index_single_char_pattern():
    assert min_starting_index("dde", "q") == 0


def test_min_starting_index_pattern_too_long_raises():
    with pytest.raises(ValueError):
        min_starting_index("ab", "abc")


# count_of_substrings

def test_count_of_substrings_only_vowels():
    assert count_of_substrings("aeiou", 0) == 1


def test_count_of_substrings_missing_vowel():
    assert count_of_substrings("aeioqq", 1) == 0


def test_count_of_substrings_one_consonant():
    assert count_of_substrings("xaeiou", 1) == 1


def test_count_of_substrings_repeated_vowel():
    assert count_of_substrings("aaeiou", 0) == 2


# find_palindromic_subtrees

def test_find_palindromic_subtrees_example():
    result = find_palindromic_subtrees([-1, 0, 0, 1, 1, 2], "aababa")
    assert result == [True, True, False, True, True, True]


def test_find_palindromic_subtrees_uniform_chain():
    assert find_palindromic_subtrees([-1, 0, 1, 2], "zzzz") == [True] * 4


def test_find_palindromic_subtrees_leaves_are_palindromes():
    parent = [-1, 0, 0, 0]
    result = find_palindromic_subtrees(parent, "abcd")
    assert result[1:] == [True, True, True]
    assert result[0] is False


def test_find_palindromic_subtrees_empty_raises():
    with pytest.raises(ValueError):
        find_palindromic_subtrees([], "")


def test_find_palindromic_subtrees_short_string_raises():
    with pytest.raises(ValueError):
        find_palindromic_subtrees([-1, 0], "a")