"""String helpers for splitting records and reshaping words."""

from __future__ import annotations

import string
from enum import IntEnum
from typing import Callable, Iterable

_VOWELS = frozenset("aeiou")


class WhatToCount(IntEnum):
    """Which letters :func:`count_letters` counts."""

    SMALL_LETTERS = 0
    CAPITAL_LETTERS = 1
    ALL = 3


def count_words(text: str) -> int:
    """Count the non-empty words separated by single spaces."""
    return sum(1 for word in text.split(" ") if word)


def _change_first_letters(text: str, change: Callable[[str], str]) -> str:
    out = []
    at_word_start = True
    for ch in text:
        if ch != " " and at_word_start:
            ch = change(ch)
        out.append(ch)
        at_word_start = ch == " "
    return "".join(out)


def upper_first_letter_of_each_word(text: str) -> str:
    """Upper-case the first letter of every space-separated word."""
    return _change_first_letters(text, str.upper)


def lower_first_letter_of_each_word(text: str) -> str:
    """Lower-case the first letter of every space-separated word."""
    return _change_first_letters(text, str.lower)


def upper_all(text: str) -> str:
    """Upper-case the whole text."""
    return text.upper()


def lower_all(text: str) -> str:
    """Lower-case the whole text."""
    return text.lower()


def invert_letter_case(char: str) -> str:
    """Return the character in the opposite case."""
    return char.lower() if char.isupper() else char.upper()


def invert_all_letters_case(text: str) -> str:
    """Invert the case of every character."""
    return "".join(invert_letter_case(ch) for ch in text)


def count_capital_letters(text: str) -> int:
    """Count upper-case characters."""
    return sum(1 for ch in text if ch.isupper())


def count_small_letters(text: str) -> int:
    """Count lower-case characters."""
    return sum(1 for ch in text if ch.islower())


def count_letters(text: str, what: WhatToCount = WhatToCount.ALL) -> int:
    """Count characters of the requested kind; ``ALL`` counts every character."""
    if what is WhatToCount.ALL:
        return len(text)
    if what is WhatToCount.CAPITAL_LETTERS:
        return count_capital_letters(text)
    return count_small_letters(text)


def count_specific_letter(text: str, letter: str, match_case: bool = True) -> int:
    """Count occurrences of one character, optionally ignoring case."""
    if match_case:
        return sum(1 for ch in text if ch == letter)
    wanted = letter.lower()
    return sum(1 for ch in text if ch.lower() == wanted)


def is_vowel(char: str) -> bool:
    """Tell whether the character is one of a, e, i, o, u in either case."""
    return char.lower() in _VOWELS


def count_vowels(text: str) -> int:
    """Count vowels in the text."""
    return sum(1 for ch in text if is_vowel(ch))


def split(text: str, delim: str) -> list[str]:
    """Split on ``delim``, keeping empty pieces except a trailing empty one."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    parts = text.split(delim)
    if parts[-1] == "":
        parts.pop()
    return parts


def trim_left(text: str) -> str:
    """Remove leading spaces."""
    return text.lstrip(" ")


def trim_right(text: str) -> str:
    """Remove trailing spaces."""
    return text.rstrip(" ")


def trim(text: str) -> str:
    """Remove leading and trailing spaces."""
    return trim_left(trim_right(text))


def join_string(parts: Iterable[str], delim: str) -> str:
    """Join the pieces with ``delim`` between them."""
    return delim.join(parts)


def reverse_words(text: str) -> str:
    """Reverse the order of the space-separated words."""
    return " ".join(reversed(split(text, " ")))


def replace_word(text: str, old: str, new: str, match_case: bool = True) -> str:
    """Replace whole space-separated words equal to ``old`` with ``new``."""
    if match_case:
        words = (new if word == old else word for word in split(text, " "))
    else:
        target = old.lower()
        words = (new if word.lower() == target else word for word in split(text, " "))
    return join_string(words, " ")


def remove_punctuations(text: str) -> str:
    """Drop ASCII punctuation characters."""
    return "".join(ch for ch in text if ch not in string.punctuation)