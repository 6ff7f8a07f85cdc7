"""Functional Core - Pure functions with no side effects.

This module contains all query logic as pure functions:
- Even number and square generation
- Family statistics
- Letter frequency counting
- Result formatting

All functions here are deterministic and have no I/O.
"""

from quiz.core.errors import (
    QuizError,
    InvalidArgumentError,
    SquareOverflowError,
    NullInputError,
)
from quiz.core.numbers import INT32_MAX, get_even_numbers, get_squares
from quiz.core.family import (
    Family,
    FamilySummary,
    Person,
    get_family_statistic,
    parse_families,
)
from quiz.core.letters import LetterStatistic, get_letter_statistic
from quiz.core.formatter import format_family_report, format_letter_statistic

__all__ = [
    # Errors
    "QuizError",
    "InvalidArgumentError",
    "SquareOverflowError",
    "NullInputError",
    # Numbers
    "INT32_MAX",
    "get_even_numbers",
    "get_squares",
    # Families
    "Family",
    "FamilySummary",
    "Person",
    "get_family_statistic",
    "parse_families",
    # Letters
    "LetterStatistic",
    "get_letter_statistic",
    # Formatter
    "format_family_report",
    "format_letter_statistic",
]
