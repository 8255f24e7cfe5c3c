"""Command line front end: classify strings against a named language."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from langcheck import counting, patterns, prefix
from langcheck.patterns import InvalidSymbolError

ACCEPTED = "Accepted"
REJECTED = "Rejected"
WRONG_ALPHABET = "You put wrong alphabets."
PROMPT = "Enter the string : "

_RECOGNISERS: tuple[Callable[[str], bool], ...] = (
    prefix.starts_with_a,
    prefix.starts_with_aa,
    prefix.starts_with_aab,
    prefix.starts_with_10,
    prefix.ends_with_ab,
    prefix.same_first_and_last,
    prefix.different_first_and_last,
    prefix.does_not_start_with_a,
    prefix.starts_with_0_odd_length,
    prefix.binary_divisible_by_2,
    prefix.second_symbol_is_a,
    counting.length_exactly_2,
    counting.length_at_least_2,
    counting.length_at_most_2,
    counting.length_even,
    counting.length_odd,
    counting.exactly_two_a,
    counting.at_least_two_a,
    counting.at_most_two_a,
    counting.even_number_of_a,
    counting.odd_number_of_a,
    counting.odd_a_or_ends_with_b,
    counting.odd_a_and_ends_with_b,
    counting.even_1_or_odd_0,
    counting.even_1_and_odd_0,
    patterns.contains_ab,
    patterns.contains_baba,
    patterns.every_a_followed_by_b,
    patterns.no_a_followed_by_b,
    patterns.every_0_followed_by_1,
    patterns.is_11_or_111,
    patterns.matches_anbn,
    patterns.second_from_right_is_a,
    patterns.third_from_right_is_a,
)

_LANGUAGES: dict[str, Callable[[str], bool]] = {f.__name__: f for f in _RECOGNISERS}


def language_names() -> list[str]:
    """Return the names of all known languages, sorted."""
    return sorted(_LANGUAGES)


def recognize(name: str, text: str) -> bool:
    """Return whether ``text`` belongs to the language called ``name``.

    Raises KeyError for an unknown language and InvalidSymbolError where the
    recogniser reports foreign symbols.
    """
    try:
        recogniser = _LANGUAGES[name]
    except KeyError:
        raise KeyError(f"unknown language: {name!r}") from None
    return recogniser(text)


def _verdict(name: str, text: str) -> str:
    try:
        return ACCEPTED if recognize(name, text) else REJECTED
    except InvalidSymbolError:
        return WRONG_ALPHABET


def _stdin_lines():
    interactive = sys.stdin.isatty()
    while True:
        if interactive:
            print(PROMPT, end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            return
        yield line.rstrip("\r\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Classify strings given as arguments, or read one per line from stdin."""
    parser = argparse.ArgumentParser(
        prog="langcheck",
        description="Decide whether strings belong to a formal language.",
    )
    parser.add_argument("language", choices=language_names(), help="language to test against")
    parser.add_argument("strings", nargs="*", help="strings to classify (default: read stdin)")
    args = parser.parse_args(argv)

    inputs = args.strings if args.strings else _stdin_lines()
    for text in inputs:
        print(_verdict(args.language, text))
    return 0


if __name__ == "__main__":
    sys.exit(main())