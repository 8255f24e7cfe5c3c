# langcheck

Recognisers for a collection of small formal languages: the classic
exercises on DFAs, NFAs and a simple grammar over the alphabets `{a, b}`
and `{0, 1}`. Each recogniser takes a string and tells you whether it
belongs to the language.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

The recognisers are plain functions that return `True` or `False`.

```python
from langcheck.prefix import starts_with_a, ends_with_ab
from langcheck.counting import exactly_two_a, even_1_and_odd_0
from langcheck.patterns import contains_baba, matches_anbn

starts_with_a("abb")      # True
ends_with_ab("bbab")      # True
exactly_two_a("baba")     # True
even_1_and_odd_0("0110")  # False
contains_baba("abbaba")   # True
matches_anbn("aaabbb")    # True
```

The languages are grouped into three modules:

- `langcheck.prefix`: conditions on the first or last symbols:
  `starts_with_a`, `starts_with_aa`, `starts_with_aab`, `starts_with_10`,
  `ends_with_ab`, `same_first_and_last` (accepts the empty string),
  `different_first_and_last`, `does_not_start_with_a` (accepts the empty
  string), `starts_with_0_odd_length`, `binary_divisible_by_2` (the last
  digit is `0`) and `second_symbol_is_a`.
- `langcheck.counting`: conditions on the length or on how many times a
  symbol occurs: `length_exactly_2`, `length_at_least_2`,
  `length_at_most_2`, `length_even`, `length_odd`, `exactly_two_a`,
  `at_least_two_a`, `at_most_two_a`, `even_number_of_a`,
  `odd_number_of_a`, `odd_a_or_ends_with_b`, `odd_a_and_ends_with_b`,
  `even_1_or_odd_0` and `even_1_and_odd_0`.
- `langcheck.patterns`: substrings and structure: `contains_ab`,
  `contains_baba`, `every_a_followed_by_b`, `no_a_followed_by_b`,
  `every_0_followed_by_1`, `is_11_or_111`, `matches_anbn` (the grammar
  `S -> aSb | ab`, that is a^n b^n with n >= 1), `second_from_right_is_a`
  and `third_from_right_is_a`.

A string that uses a symbol outside a language's alphabet is simply not
in the language. The two "symbol from the right" recognisers are the
exception: they raise `langcheck.patterns.InvalidSymbolError` (a subclass
of `ValueError`, with `symbol` and `alphabet` attributes) for such input,
so a caller can tell a wrong alphabet apart from a rejection.

To look a recogniser up by name, use the functions in `langcheck.cli`:

```python
from langcheck.cli import language_names, recognize

language_names()                     # sorted names that recognize() accepts
recognize("starts_with_a", "abab")   # True
```

`recognize` raises `KeyError` for an unknown name. The names are the
function names listed above.

## Command line

```
langcheck --help
langcheck starts_with_a abb bab
langcheck matches_anbn
```

The `langcheck` command takes the name of a language, then any number of
strings, and prints one verdict per string: `Accepted` or `Rejected`.
For `second_from_right_is_a` and `third_from_right_is_a`, a string with a
symbol outside `{a, b}` prints `You put wrong alphabets.` instead.

With no strings on the command line, it reads standard input one line at
a time until end of input, classifying each line (an empty line is the
empty string). When standard input is a terminal it shows the prompt
`Enter the string : ` before each line. An unknown language name is an
argument error; `langcheck --help` lists the names.