from itertools import product

import pytest

from langcheck.prefix import (
    binary_divisible_by_2,
    different_first_and_last,
    does_not_start_with_a,
    ends_with_ab,
    same_first_and_last,
    second_symbol_is_a,
    starts_with_0_odd_length,
    starts_with_10,
    starts_with_a,
    starts_with_aa,
    starts_with_aab,
)


def _strings(alphabet, max_len=5):
    for n in range(max_len + 1):
        for chars in product(alphabet, repeat=n):
            yield "".join(chars)


AB_STRINGS = list(_strings("ab"))
BIN_STRINGS = list(_strings("01"))


def test_starts_with_a_examples():
    assert starts_with_a("abb")
    assert not starts_with_a("bab")
    assert not starts_with_a("")


def test_starts_with_a_rejects_foreign_symbols():
    assert not starts_with_a("ac")


def test_starts_with_aa_examples():
    assert starts_with_aa("aab")
    assert not starts_with_aa("a")
    assert not starts_with_aa("abaa")


def test_starts_with_aab_examples():
    assert starts_with_aab("aabba")
    assert not starts_with_aab("aaab")
    assert not starts_with_aab("aa")


def test_prefix_chain_implications():
    for s in AB_STRINGS:
        if starts_with_aab(s):
            assert starts_with_aa(s)
        if starts_with_aa(s):
            assert starts_with_a(s)


def test_starts_with_10_examples():
    assert starts_with_10("1011")
    assert not starts_with_10("0110")
    assert not starts_with_10("1")
    assert not starts_with_10("10a")


def test_ends_with_ab_examples():
    assert ends_with_ab("bbab")
    assert ends_with_ab("ab")
    assert not ends_with_ab("aba")
    assert not ends_with_ab("aa")


def test_ends_with_ab_is_suffix_check():
    for s in AB_STRINGS:
        assert ends_with_ab(s + "ab")
        assert not ends_with_ab(s + "b" + "a")


def test_same_first_and_last_accepts_empty_and_single():
    assert same_first_and_last("")
    assert same_first_and_last("a")
    assert same_first_and_last("abba")
    assert not same_first_and_last("ab")


def test_same_and_different_are_complements_on_nonempty():
    for s in AB_STRINGS:
        if s:
            assert same_first_and_last(s) != different_first_and_last(s)


def test_different_first_and_last_rejects_empty_and_invalid():
    assert not different_first_and_last("")
    assert not different_first_and_last("axb")
    assert different_first_and_last("ba")


def test_does_not_start_with_a_complements_starts_with_a():
    for s in AB_STRINGS:
        assert does_not_start_with_a(s) != starts_with_a(s)


def test_does_not_start_with_a_rejects_invalid():
    assert not does_not_start_with_a("ca")


@pytest.mark.parametrize("s", ["0", "010", "01111"])
def test_starts_with_0_odd_length_accepts(s):
    assert starts_with_0_odd_length(s)


@pytest.mark.parametrize("s", ["", "01", "101", "0a0"])
def test_starts_with_0_odd_length_rejects(s):
    assert not starts_with_0_odd_length(s)


def test_binary_divisible_by_2_matches_integer_value():
    for s in BIN_STRINGS:
        if s:
            assert binary_divisible_by_2(s) == (int(s, 2) % 2 == 0)


def test_binary_divisible_by_2_rejects_empty_and_invalid():
    assert not binary_divisible_by_2("")
    assert not binary_divisible_by_2("120")


def test_second_symbol_is_a_examples():
    assert second_symbol_is_a("ba")
    assert second_symbol_is_a("aab")
    assert not second_symbol_is_a("a")
    assert not second_symbol_is_a("bba")
    assert not second_symbol_is_a("xa")


def test_second_symbol_is_a_independent_of_first():
    for s in AB_STRINGS:
        if len(s) >= 2:
            flipped = ("b" if s[0] == "a" else "a") + s[1:]
            assert second_symbol_is_a(s) == second_symbol_is_a(flipped)