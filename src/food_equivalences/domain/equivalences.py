"""Domain models for the ingredient equivalence catalog."""

from dataclasses import dataclass
from enum import StrEnum


class EquivalenceType(StrEnum):
    """Usage an equivalence topic is written for."""

    RECIPE = "recipe"
    NUTRITION = "nutrition"


@dataclass(frozen=True)
class Alternative:
    """One concrete substitute with a prose quantity conversion."""

    name: str
    equivalence: str
    interest: str | None = None
    ideal_for: str | None = None
    remarks: str | None = None
    limits: str | None = None
    variant: str | None = None


@dataclass(frozen=True)
class Equivalence:
    """Substitution topic for one ingredient.

    ``category`` is a free-text display label, unlike the closed category
    enum of the goal catalog.
    """

    ingredient: str
    category: str
    type: EquivalenceType
    keywords: tuple[str, ...]
    alternatives: tuple[Alternative, ...]
