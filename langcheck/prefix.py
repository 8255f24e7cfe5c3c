"""Recognisers for languages defined by the first and last symbols of a string."""

from __future__ import annotations

AB = frozenset("ab")
BINARY = frozenset("01")


def _over(s: str, alphabet: frozenset[str]) -> bool:
    """Return True when every symbol of ``s`` belongs to ``alphabet``."""
    return set(s) <= alphabet


def starts_with_a(s: str) -> bool:
    """Strings over {a, b} whose first symbol is 'a'."""
    return _over(s, AB) and s.startswith("a")


def starts_with_aa(s: str) -> bool:
    """Strings over {a, b} that begin with 'aa'."""
    return _over(s, AB) and s.startswith("aa")


def starts_with_aab(s: str) -> bool:
    """Strings over {a, b} that begin with 'aab'."""
    return _over(s, AB) and s.startswith("aab")


def starts_with_10(s: str) -> bool:
    """Binary strings that begin with '10'."""
    return _over(s, BINARY) and s.startswith("10")


def ends_with_ab(s: str) -> bool:
    """Strings over {a, b} that end with 'ab'."""
    return _over(s, AB) and s.endswith("ab")


def same_first_and_last(s: str) -> bool:
    """Strings over {a, b} whose first and last symbols agree; the empty string is accepted."""
    if not _over(s, AB):
        return False
    return not s or s[0] == s[-1]


def different_first_and_last(s: str) -> bool:
    """Strings over {a, b} whose first and last symbols differ."""
    return _over(s, AB) and bool(s) and s[0] != s[-1]


def does_not_start_with_a(s: str) -> bool:
    """Strings over {a, b} that do not begin with 'a'; the empty string is accepted."""
    return _over(s, AB) and not s.startswith("a")


def starts_with_0_odd_length(s: str) -> bool:
    """Binary strings that begin with '0' and have odd length."""
    return _over(s, BINARY) and s.startswith("0") and len(s) % 2 == 1


def binary_divisible_by_2(s: str) -> bool:
    """Binary numerals whose value is even, i.e. whose last digit is '0'."""
    return _over(s, BINARY) and s.endswith("0")


def second_symbol_is_a(s: str) -> bool:
    """Strings over {a, b} whose second symbol from the left is 'a'."""
    return _over(s, AB) and len(s) >= 2 and s[1] == "a"