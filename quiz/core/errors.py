"""Error taxonomy for query operations.

Each error also derives from the matching built-in exception so callers
can catch either the specific type or the usual Python one.
"""


class QuizError(Exception):
    """Base class for all query errors."""


class InvalidArgumentError(QuizError, ValueError):
    """A range bound is outside the accepted domain."""


class SquareOverflowError(QuizError, OverflowError):
    """Squaring the candidates would exceed the integer boundary."""


class NullInputError(QuizError, TypeError):
    """A required collection argument was None."""
