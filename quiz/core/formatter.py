"""Result formatting - Pure functions.

This module renders query results as plain text for the command line.
All functions are pure with no side effects.
"""

from quiz.core.family import FamilySummary
from quiz.core.letters import LetterStatistic


def format_numbers(numbers: list[int]) -> str:
    """Format a number sequence as a comma separated line.

    Pure function.
    """
    if not numbers:
        return "(none)"

    return ", ".join(str(n) for n in numbers)


def format_family_summary(summary: FamilySummary) -> str:
    """Format a one-line summary of a family.

    Pure function.

    Args:
        summary: Family statistic to format

    Returns:
        Line like "Family 1: 2 members, average age 15.0"
    """
    noun = "member" if summary.number_of_family_members == 1 else "members"
    return (
        f"Family {summary.family_id}: "
        f"{summary.number_of_family_members} {noun}, "
        f"average age {summary.average_age:.1f}"
    )


def format_family_report(summaries: list[FamilySummary]) -> str:
    """Format all family summaries with a header line.

    Pure function.
    """
    count = len(summaries)
    header = f"{count} {'family' if count == 1 else 'families'}"
    lines = [header]
    lines.extend(format_family_summary(s) for s in summaries)
    return "\n".join(lines)


def format_letter_statistic(stats: list[LetterStatistic]) -> str:
    """Format letter counts, one "LETTER: count" line per entry.

    Pure function.
    """
    if not stats:
        return "(no letters)"

    return "\n".join(f"{s.letter}: {s.number_of_occurrences}" for s in stats)
