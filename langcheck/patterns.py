"""Recognisers for languages defined by substrings, neighbours and fixed shapes."""

from __future__ import annotations

from collections.abc import Iterable

from langcheck.prefix import AB, BINARY


class InvalidSymbolError(ValueError):
    """Raised when a string holds a symbol outside the recogniser's alphabet."""

    def __init__(self, symbol: str, alphabet: Iterable[str]) -> None:
        self.symbol = symbol
        self.alphabet = frozenset(alphabet)
        listed = ", ".join(sorted(self.alphabet))
        super().__init__(f"symbol {symbol!r} is not in the alphabet {{{listed}}}")


def _over(s: str, alphabet: frozenset[str]) -> bool:
    """Return True when every symbol of ``s`` belongs to ``alphabet``."""
    return set(s) <= alphabet


def _require(s: str, alphabet: frozenset[str]) -> None:
    """Raise InvalidSymbolError for the first symbol of ``s`` outside ``alphabet``."""
    for symbol in s:
        if symbol not in alphabet:
            raise InvalidSymbolError(symbol, alphabet)


def contains_ab(s: str) -> bool:
    """Strings over {a, b} that contain 'ab'."""
    return _over(s, AB) and "ab" in s


def contains_baba(s: str) -> bool:
    """Strings over {a, b} that contain 'baba'."""
    return _over(s, AB) and "baba" in s


def every_a_followed_by_b(s: str) -> bool:
    """Strings over {a, b} in which every 'a' is immediately followed by 'b'."""
    return _over(s, AB) and "aa" not in s and not s.endswith("a")


def no_a_followed_by_b(s: str) -> bool:
    """Strings over {a, b} in which no 'a' is immediately followed by 'b'."""
    return _over(s, AB) and "ab" not in s


def every_0_followed_by_1(s: str) -> bool:
    """Binary strings in which every '0' is immediately followed by '1'."""
    return _over(s, BINARY) and "00" not in s and not s.endswith("0")


def is_11_or_111(s: str) -> bool:
    """The binary strings '11' and '111' and nothing else."""
    return s in ("11", "111")


def matches_anbn(s: str) -> bool:
    """Strings derived from S -> aSb | ab, that is a^n b^n with n >= 1."""
    after_a = s.lstrip("a")
    count_a = len(s) - len(after_a)
    rest = after_a.lstrip("b")
    count_b = len(after_a) - len(rest)
    return not rest and count_a > 0 and count_a == count_b


def second_from_right_is_a(s: str) -> bool:
    """Strings over {a, b} whose second symbol from the right is 'a'.

    Raises InvalidSymbolError when ``s`` holds a symbol other than 'a' or 'b'.
    """
    _require(s, AB)
    return len(s) >= 2 and s[-2] == "a"


def third_from_right_is_a(s: str) -> bool:
    """Strings over {a, b} whose third symbol from the right is 'a'.

    Raises InvalidSymbolError when ``s`` holds a symbol other than 'a' or 'b'.
    """
    _require(s, AB)
    return len(s) >= 3 and s[-3] == "a"