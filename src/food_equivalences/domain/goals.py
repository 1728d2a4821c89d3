"""Domain models for the nutrition-goal catalog."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum


class NutritionGoal(StrEnum):
    """Dietary objectives, in canonical display order."""

    WEIGHT_LOSS = "weight-loss"
    MUSCLE_GAIN = "muscle-gain"
    REBALANCING = "rebalancing"
    DIABETES = "diabetes"
    CHOLESTEROL = "cholesterol"
    DIGESTION = "digestion"
    VEGETARIAN = "vegetarian"
    ENERGY = "energy"
    HYPERTENSION = "hypertension"
    SLEEP_STRESS = "sleep-stress"


_CATEGORY_LABELS = {
    "féculents": "Féculents",
    "protéines": "Protéines",
    "matières-grasses": "Matières grasses",
    "boissons": "Boissons",
    "snacks": "Snacks",
    "desserts": "Desserts",
    "général": "Conseils généraux",
}


class EquivalenceCategory(StrEnum):
    """Sections partitioning a goal's equivalences, in canonical order."""

    FECULENTS = "féculents"
    PROTEINES = "protéines"
    MATIERES_GRASSES = "matières-grasses"
    BOISSONS = "boissons"
    SNACKS = "snacks"
    DESSERTS = "desserts"
    GENERAL = "général"

    @property
    def label(self) -> str:
        """Human-readable section title."""
        return _CATEGORY_LABELS[self.value]


@dataclass(frozen=True)
class NutritionEquivalence:
    """A goal-scoped swap of one food for another."""

    base_food: str
    substitute: str
    base_quantity: str
    substitute_quantity: str
    interest: str
    keywords: tuple[str, ...]
    context: str | None = None


CategoryEquivalences = Mapping[EquivalenceCategory, tuple[NutritionEquivalence, ...]]


@dataclass(frozen=True)
class NutritionGoalData:
    """Full record for one goal.

    ``equivalences`` is total over :class:`EquivalenceCategory`: every
    category is present, empty ones map to an empty tuple.
    """

    id: NutritionGoal
    title: str
    icon: str
    key_principles: tuple[str, ...]
    equivalences: CategoryEquivalences
    warning: str | None = None

    def categories_with_equivalences(self) -> list[EquivalenceCategory]:
        """Return non-empty categories in canonical order."""
        return [
            category
            for category in EquivalenceCategory
            if self.equivalences.get(category)
        ]
