"""Family records and statistics - Pure functions.

This module models families and their members, parses raw record data
into typed objects, and computes per-family statistics. All functions
are pure with no side effects.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from quiz.core.errors import NullInputError


class PersonLike(Protocol):
    """Read-only shape of a family member."""

    @property
    def age(self) -> int: ...


class FamilyLike(Protocol):
    """Read-only shape of a family record."""

    @property
    def id(self) -> int: ...

    @property
    def persons(self) -> Sequence[PersonLike] | None: ...


@dataclass(frozen=True)
class Person:
    """Immutable family member.

    Attributes:
        age: Age in years
    """
    age: int


@dataclass(frozen=True)
class Family:
    """Immutable family record.

    Attributes:
        id: Family identifier (not necessarily unique in a collection)
        persons: Members of the family, None if unknown
    """
    id: int
    persons: tuple[Person, ...] | None = None


@dataclass(frozen=True)
class FamilySummary:
    """Aggregated statistic for one family identifier.

    Attributes:
        family_id: Family identifier
        number_of_family_members: Number of persons in the family
        average_age: Mean age of the persons, 0 if there are none
    """
    family_id: int
    number_of_family_members: int
    average_age: float


def parse_integer(value: Any) -> int:
    """Convert a raw number to int, rejecting non-integral floats.

    Pure function.

    Raises:
        ValueError: If value is a float with a fractional part
    """
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Expected an integer, got {value}")
    return int(value)


def parse_person(data: dict[str, Any]) -> Person:
    """Parse a single person mapping."""
    return Person(age=parse_integer(data["age"]))


def parse_family(data: dict[str, Any]) -> Family | None:
    """Parse a single family mapping into a Family.

    Pure function: takes raw dict, returns typed Family or None if invalid.

    A missing or null "persons" entry is kept as None so that an unknown
    member list stays distinguishable from an empty one.

    Args:
        data: Mapping with "id" and optional "persons" keys

    Returns:
        Family object or None if parsing fails
    """
    try:
        family_id = data.get("id")
        if family_id is None:
            return None

        persons_data = data.get("persons")
        persons = None
        if persons_data is not None:
            persons = tuple(parse_person(p) for p in persons_data)

        return Family(id=parse_integer(family_id), persons=persons)
    except (AttributeError, KeyError, TypeError, ValueError):
        return None


def parse_families(data: list[dict[str, Any]]) -> list[Family]:
    """Parse a list of family mappings.

    Pure function: skips invalid entries, keeps input order.

    Args:
        data: Raw family mappings

    Returns:
        List of valid Family objects
    """
    families = []

    for item in data:
        family = parse_family(item)
        if family is not None:
            families.append(family)

    return families


def summarize_family(family: FamilyLike) -> FamilySummary:
    """Compute member count and average age for one family.

    Pure function.
    """
    ages = [person.age for person in family.persons or ()]

    if not ages:
        return FamilySummary(
            family_id=family.id,
            number_of_family_members=0,
            average_age=0.0,
        )

    return FamilySummary(
        family_id=family.id,
        number_of_family_members=len(ages),
        average_age=sum(ages) / len(ages),
    )


def get_family_statistic(families: Iterable[FamilyLike] | None) -> list[FamilySummary]:
    """Return a statistic about families.

    Pure function.

    Produces one entry per distinct family ID, in the order each ID is first
    seen. Only the first family with a given ID is summarized; later families
    sharing that ID are ignored rather than merged.

    Args:
        families: Families to analyze

    Returns:
        One FamilySummary per distinct family ID

    Raises:
        NullInputError: If families is None
    """
    if families is None:
        raise NullInputError("families must not be None")

    # First record wins; duplicates are dropped, not merged
    first_by_id: dict[int, FamilyLike] = {}
    for family in families:
        first_by_id.setdefault(family.id, family)

    return [summarize_family(family) for family in first_by_id.values()]
