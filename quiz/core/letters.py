"""Letter frequency statistics - Pure functions.

Counts case-insensitive occurrences of characters inside a code point
window. All functions are pure with no side effects.
"""

from collections import Counter
from typing import NamedTuple


# Inclusive code point window. 'A' (65) through 'z' (122), which also
# admits the six symbols between 'Z' and 'a'.
LETTER_MIN_CODE = 65
LETTER_MAX_CODE = 122


class LetterStatistic(NamedTuple):
    """Number of occurrences of one upper-cased letter."""
    letter: str
    number_of_occurrences: int


def is_counted_character(
    char: str,
    min_code: int = LETTER_MIN_CODE,
    max_code: int = LETTER_MAX_CODE,
) -> bool:
    """Check if a character lies inside the counted code point window.

    Pure function.
    """
    return min_code <= ord(char) <= max_code


def fold_case(char: str) -> str:
    """Upper-case a character, keeping it as-is when that would expand it.

    Pure function. Some characters, like the German sharp s, upper-case
    to two characters.
    """
    folded = char.upper()
    return folded if len(folded) == 1 else char


def get_letter_statistic(
    text: str,
    min_code: int = LETTER_MIN_CODE,
    max_code: int = LETTER_MAX_CODE,
) -> list[LetterStatistic]:
    """Count the occurrences of each letter in a text.

    Pure function.

    Casing is ignored ('a' is counted as 'A'). Entries appear in the order
    in which each letter is first seen, and letters that do not occur are
    not listed.

    Args:
        text: Text to analyze
        min_code: Lowest counted code point (inclusive)
        max_code: Highest counted code point (inclusive)

    Returns:
        One LetterStatistic per distinct letter found
    """
    counts = Counter(
        fold_case(char) for char in text
        if is_counted_character(char, min_code, max_code)
    )

    return [LetterStatistic(letter, count) for letter, count in counts.items()]
