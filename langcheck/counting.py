"""Recognisers for languages defined by lengths and symbol counts."""

from __future__ import annotations

AB = frozenset("ab")
BINARY = frozenset("01")


def _over(s: str, alphabet: frozenset[str]) -> bool:
    """Return True when every symbol of ``s`` belongs to ``alphabet``."""
    return set(s) <= alphabet


def length_exactly_2(s: str) -> bool:
    """Strings over {a, b} of length exactly 2."""
    return _over(s, AB) and len(s) == 2


def length_at_least_2(s: str) -> bool:
    """Strings over {a, b} of length at least 2."""
    return _over(s, AB) and len(s) >= 2


def length_at_most_2(s: str) -> bool:
    """Strings over {a, b} of length at most 2, the empty string included."""
    return _over(s, AB) and len(s) <= 2


def length_even(s: str) -> bool:
    """Strings over {a, b} whose length is divisible by 2, the empty string included."""
    return _over(s, AB) and len(s) % 2 == 0


def length_odd(s: str) -> bool:
    """Strings over {a, b} whose length is not divisible by 2."""
    return _over(s, AB) and len(s) % 2 == 1


def exactly_two_a(s: str) -> bool:
    """Strings over {a, b} with exactly two a's."""
    return _over(s, AB) and s.count("a") == 2


def at_least_two_a(s: str) -> bool:
    """Strings over {a, b} with at least two a's."""
    return _over(s, AB) and s.count("a") >= 2


def at_most_two_a(s: str) -> bool:
    """Strings over {a, b} with at most two a's."""
    return _over(s, AB) and s.count("a") <= 2


def even_number_of_a(s: str) -> bool:
    """Strings over {a, b} whose number of a's is divisible by 2."""
    return _over(s, AB) and s.count("a") % 2 == 0


def odd_number_of_a(s: str) -> bool:
    """Strings over {a, b} whose number of a's is not divisible by 2."""
    return _over(s, AB) and s.count("a") % 2 == 1


def odd_a_or_ends_with_b(s: str) -> bool:
    """Strings over {a, b} with an odd number of a's or ending in 'b'."""
    return _over(s, AB) and (s.count("a") % 2 == 1 or s.endswith("b"))


def odd_a_and_ends_with_b(s: str) -> bool:
    """Strings over {a, b} with an odd number of a's that end in 'b'."""
    return _over(s, AB) and s.count("a") % 2 == 1 and s.endswith("b")


def even_1_or_odd_0(s: str) -> bool:
    """Binary strings with an even number of 1s or an odd number of 0s."""
    return _over(s, BINARY) and (s.count("1") % 2 == 0 or s.count("0") % 2 == 1)


def even_1_and_odd_0(s: str) -> bool:
    """Binary strings with an even number of 1s and an odd number of 0s."""
    return _over(s, BINARY) and s.count("1") % 2 == 0 and s.count("0") % 2 == 1