"""Unit tests for number range queries.

Pure function tests - no mocks needed.
"""

import math

import pytest

from quiz.core.errors import InvalidArgumentError, QuizError, SquareOverflowError
from quiz.core.numbers import INT32_MAX, get_even_numbers, get_squares


class TestGetEvenNumbers:
    """Tests for get_even_numbers() function."""

    def test_even_numbers_below_ten(self):
        """Should return even numbers between 1 and the limit."""
        assert get_even_numbers(10) == [2, 4, 6, 8]

    def test_limit_is_exclusive(self):
        """Limit itself is never included."""
        assert get_even_numbers(8) == [2, 4, 6]
        assert get_even_numbers(9) == [2, 4, 6, 8]

    def test_limit_one_returns_empty(self):
        """Limit of 1 is valid and yields no numbers."""
        assert get_even_numbers(1) == []

    def test_limit_two_returns_empty(self):
        """No even number lies in [1, 2)."""
        assert get_even_numbers(2) == []

    @pytest.mark.parametrize("limit", [0, -1, -100])
    def test_limit_below_one_raises(self, limit):
        """Limits below 1 are rejected."""
        with pytest.raises(InvalidArgumentError):
            get_even_numbers(limit)

    def test_error_is_value_error(self):
        """InvalidArgumentError can be caught as ValueError or QuizError."""
        with pytest.raises(ValueError):
            get_even_numbers(0)
        with pytest.raises(QuizError):
            get_even_numbers(0)

    def test_ascending_order(self):
        """Result is sorted ascending."""
        result = get_even_numbers(100)
        assert result == sorted(result)
        assert all(n % 2 == 0 for n in result)

    def test_idempotent(self):
        """Same input gives equal results."""
        assert get_even_numbers(25) == get_even_numbers(25)


class TestGetSquares:
    """Tests for get_squares() function."""

    def test_single_square_below_eight(self):
        """7 squared is the only square divisible by 7 below 64."""
        assert get_squares(8) == [49]

    def test_limit_is_exclusive(self):
        """7 itself is excluded when it is the limit."""
        assert get_squares(7) == []

    def test_descending_order(self):
        """Squares are returned largest first."""
        assert get_squares(22) == [441, 196, 49]

    def test_strictly_descending(self):
        """Result is strictly descending."""
        result = get_squares(1000)
        assert all(a > b for a, b in zip(result, result[1:]))

    def test_all_divisible_by_seven(self):
        """Every returned value is a square divisible by 7."""
        for value in get_squares(200):
            assert value % 7 == 0
            assert math.isqrt(value) ** 2 == value

    @pytest.mark.parametrize("limit", [0, -1, -50000])
    def test_limit_below_one_returns_empty(self, limit):
        """Limits below 1 yield an empty result instead of an error."""
        assert get_squares(limit) == []

    def test_limit_one_returns_empty(self):
        """No candidates below 1."""
        assert get_squares(1) == []

    def test_largest_safe_limit(self):
        """46340 is the largest limit whose squares fit 32 bits."""
        result = get_squares(46340)
        assert result[0] <= INT32_MAX
        assert result[0] == 46333 ** 2

    def test_overflow_boundary_raises(self):
        """Limit just above sqrt(INT32_MAX) is rejected."""
        with pytest.raises(SquareOverflowError):
            get_squares(46341)

    def test_large_limit_raises(self):
        """Any limit past the boundary is rejected."""
        with pytest.raises(OverflowError):
            get_squares(INT32_MAX)

    def test_custom_int_max(self):
        """Overflow boundary can be lowered."""
        assert get_squares(8, int_max=100) == [49]
        with pytest.raises(SquareOverflowError):
            get_squares(10, int_max=100)

    def test_empty_check_precedes_overflow_check(self):
        """A negative limit never reaches the overflow guard."""
        assert get_squares(-1, int_max=0) == []

    def test_idempotent(self):
        """Same input gives equal results."""
        assert get_squares(100) == get_squares(100)

    @pytest.mark.parametrize("int_max", [0, -1])
    def test_non_positive_int_max_raises(self, int_max):
        """A boundary below 1 leaves no room for any square."""
        with pytest.raises(SquareOverflowError):
            get_squares(5, int_max=int_max)
