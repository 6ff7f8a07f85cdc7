"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from quiz.core.letters import LETTER_MAX_CODE, LETTER_MIN_CODE
from quiz.core.numbers import INT32_MAX


# Highest valid Unicode code point
MAX_CODE_POINT = 0x10FFFF

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class QuizConfig:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        int_max: Overflow boundary for generated squares
        letter_min_code: Lowest code point counted as a letter (inclusive)
        letter_max_code: Highest code point counted as a letter (inclusive)
        log_level: Logging level name for the command line
    """
    int_max: int = INT32_MAX
    letter_min_code: int = LETTER_MIN_CODE
    letter_max_code: int = LETTER_MAX_CODE
    log_level: str = "INFO"


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_code_point(code: int, field_name: str) -> list[ValidationError]:
    """Validate that a value is a Unicode code point.

    Pure function.
    """
    if not 0 <= code <= MAX_CODE_POINT:
        return [ValidationError(
            field=field_name,
            message=f"Code point {code} out of range [0, {MAX_CODE_POINT}]",
        )]

    return []


def validate_config(config: QuizConfig) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if config.int_max < 1:
        errors.append(ValidationError(
            field="int_max",
            message=f"int_max must be positive, got {config.int_max}",
        ))

    errors.extend(validate_code_point(config.letter_min_code, "letter_min_code"))
    errors.extend(validate_code_point(config.letter_max_code, "letter_max_code"))

    if config.letter_min_code > config.letter_max_code:
        errors.append(ValidationError(
            field="letter_min_code",
            message=(
                f"letter_min_code ({config.letter_min_code}) > "
                f"letter_max_code ({config.letter_max_code})"
            ),
        ))

    # Changing the window changes which characters are counted
    if (config.letter_min_code, config.letter_max_code) != (LETTER_MIN_CODE, LETTER_MAX_CODE):
        errors.append(ValidationError(
            field="letter_min_code",
            message=(
                f"Letter window [{config.letter_min_code}, {config.letter_max_code}] "
                f"differs from default [{LETTER_MIN_CODE}, {LETTER_MAX_CODE}]"
            ),
            severity="warning",
        ))

    if config.log_level.upper() not in LOG_LEVELS:
        errors.append(ValidationError(
            field="log_level",
            message=f"Unknown log level '{config.log_level}', INFO will be used",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
