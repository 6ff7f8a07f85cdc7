"""Number range queries - Pure functions.

This module generates filtered integer sequences from a bounded range.
All functions are pure with no side effects.
"""

import math

from quiz.core.errors import InvalidArgumentError, SquareOverflowError


# Largest signed 32-bit integer, used as the overflow boundary for squares
INT32_MAX = 2**31 - 1


def get_even_numbers(exclusive_upper_limit: int) -> list[int]:
    """Return all even numbers between 1 and the upper limit.

    Pure function.

    Args:
        exclusive_upper_limit: Upper limit (exclusive)

    Returns:
        Even numbers in ascending order

    Raises:
        InvalidArgumentError: If exclusive_upper_limit is lower than 1
    """
    if exclusive_upper_limit < 1:
        raise InvalidArgumentError(
            f"exclusive_upper_limit must be at least 1, got {exclusive_upper_limit}"
        )

    return [n for n in range(1, exclusive_upper_limit) if n % 2 == 0]


def get_squares(exclusive_upper_limit: int, int_max: int = INT32_MAX) -> list[int]:
    """Return squares divisible by 7 of the numbers below the upper limit.

    Pure function.

    The result is empty if exclusive_upper_limit is lower than 1, and is
    sorted in descending order otherwise.

    Args:
        exclusive_upper_limit: Upper limit (exclusive)
        int_max: Largest value a square may take

    Returns:
        Squares divisible by 7, largest first

    Raises:
        SquareOverflowError: If the square of the largest candidate could
            exceed int_max
            or int_max is lower than 1
    """
    if exclusive_upper_limit < 1:
        return []

    if int_max < 1 or math.sqrt(int_max) <= exclusive_upper_limit:
        raise SquareOverflowError(
            f"Squares below {exclusive_upper_limit} may exceed {int_max}"
        )

    squares = [n * n for n in range(1, exclusive_upper_limit)]
    return sorted((s for s in squares if s % 7 == 0), reverse=True)
