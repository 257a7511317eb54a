from itertools import groupby, permutations
from math import factorial

import pytest

from algosolve.strings import (
    can_construct,
    check_inclusion,
    find_anagrams,
    first_uniq_char,
    frequency_sort,
    get_permutation,
    is_subsequence,
    num_jewels_in_stones,
    remove_k_digits,
    valid_ip_address,
)


def test_get_permutation_of_nothing():
    assert get_permutation(0, 1) == " "


@pytest.mark.parametrize("n", [1, 3, 10])
def test_get_permutation_first_is_ascending(n):
    assert get_permutation(n, 1) == "".join(str(i) for i in range(1, n + 1))


def test_get_permutation_last_is_descending():
    n = 5
    assert get_permutation(n, factorial(n)) == "".join(
        str(i) for i in range(n, 0, -1)
    )


def test_get_permutation_enumerates_in_lexicographic_order():
    n = 4
    expected = ["".join(p) for p in permutations("1234")]
    assert [get_permutation(n, k) for k in range(1, factorial(n) + 1)] == expected


@pytest.mark.parametrize("k", [0, 25])
def test_get_permutation_rejects_out_of_range_k(k):
    with pytest.raises(ValueError):
        get_permutation(4, k)


def test_get_permutation_rejects_negative_n():
    with pytest.raises(ValueError):
        get_permutation(-1, 1)


@pytest.mark.parametrize("s,t", [("abc", "ahbgdc"), ("", "x"), ("", ""), ("b", "abc")])
def test_is_subsequence_true(s, t):
    assert is_subsequence(s, t) is True


@pytest.mark.parametrize("s,t", [("axc", "ahbgdc"), ("aa", "a"), ("x", "")])
def test_is_subsequence_false(s, t):
    assert is_subsequence(s, t) is False


@pytest.mark.parametrize(
    "ip,kind",
    [
        ("192.0.2.1", "IPv4"),
        ("0.0.0.0", "IPv4"),
        ("255.255.255.255", "IPv4"),
        ("2001:0db8:85a3:0:0:8A2E:0370:7334", "IPv6"),
        ("256.256.256.256", "Neither"),
        ("01.01.01.01", "Neither"),
        ("1.1.1.1.", "Neither"),
        ("2001:0db8:85a3::8A2E:037j:7334", "Neither"),
        ("02001:0db8:85a3:0000:0000:8a2e:0370:7334", "Neither"),
        ("", "Neither"),
    ],
)
def test_valid_ip_address(ip, kind):
    assert valid_ip_address(ip) == kind


def test_num_jewels_no_match():
    assert num_jewels_in_stones("z", "ZZ") == 0


def test_num_jewels_empty_jewels():
    assert num_jewels_in_stones("", "abc") == 0


def test_num_jewels_all_stones_are_jewels():
    stones = "aAAbbbb"
    assert num_jewels_in_stones(stones, stones) == len(stones)


def test_num_jewels_is_case_sensitive():
    stones = "aAaAb"
    assert num_jewels_in_stones("a", stones) == stones.count("a")


@pytest.mark.parametrize("note,magazine", [("aa", "aab"), ("", ""), ("abc", "cba")])
def test_can_construct_true(note, magazine):
    assert can_construct(note, magazine) is True


@pytest.mark.parametrize("note,magazine", [("a", "b"), ("aa", "ab"), ("a", "")])
def test_can_construct_false(note, magazine):
    assert can_construct(note, magazine) is False


@pytest.mark.parametrize("s1,s2", [("ab", "eidbaooo"), ("", "anything"), ("abc", "cab")])
def test_check_inclusion_true(s1, s2):
    assert check_inclusion(s1, s2) is True


def test_find_anagrams_worked_example():
    assert find_anagrams("cbaebabacd", "abc") == [0, 6]


def test_find_anagrams_pattern_longer_than_text():
    assert find_anagrams("ab", "abc") == []


def test_find_anagrams_empty_pattern_matches_everywhere():
    s = "abcd"
    assert find_anagrams(s, "") == list(range(len(s) + 1))


def test_find_anagrams_indices_are_exact():
    s, p = "abababbaab", "aab"
    found = find_anagrams(s, p)
    for start in range(len(s) - len(p) + 1):
        is_anagram = sorted(s[start:start + len(p)]) == sorted(p)
        assert (start in found) == is_anagram


def test_first_uniq_char_none_unique():
    assert first_uniq_char("aabb") == -1
    assert first_uniq_char("") == -1


def test_first_uniq_char_single_unique():
    s = "aabbc"
    assert first_uniq_char(s) == s.index("c")


def test_first_uniq_char_is_first_unique():
    s = "loveleetcode"
    index = first_uniq_char(s)
    assert s.count(s[index]) == 1
    assert all(s.count(char) > 1 for char in s[:index])


def test_frequency_sort_worked_example():
    assert frequency_sort("tree") == "eetr"


@pytest.mark.parametrize("s", ["cccaaa", "Aabb", "mississippi", ""])
def test_frequency_sort_invariants(s):
    result = frequency_sort(s)
    assert sorted(result) == sorted(s)
    runs = [len(list(group)) for _, group in groupby(result)]
    assert len(runs) == len(set(s))
    assert runs == sorted(runs, reverse=True)


def test_remove_k_digits_everything():
    assert remove_k_digits("10", 2) == "0"


def test_remove_k_digits_strips_leading_zeros():
    assert remove_k_digits("10200", 1) == "200"


def test_remove_k_digits_worked_example():
    assert remove_k_digits("1432219", 3) == "1219"


def test_remove_k_digits_none_removed():
    assert remove_k_digits("12345", 0) == "12345"


def test_remove_k_digits_single_digit_to_zero():
    assert remove_k_digits("9", 1) == "0"


def test_remove_k_digits_never_larger():
    num = "987123456"
    for k in range(1, len(num)):
        result = remove_k_digits(num, k)
        assert len(result) <= len(num) - k
        assert int(result) <= int(num)


@pytest.mark.parametrize("k", [-1, 4])
def test_remove_k_digits_rejects_bad_k(k):
    with pytest.raises(ValueError):
        remove_k_digits("123", k)