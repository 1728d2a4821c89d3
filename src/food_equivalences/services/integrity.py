"""Startup checks on the static catalogs."""

import logging
from collections.abc import Mapping, Sequence

from food_equivalences.data.equivalences import EQUIVALENCES
from food_equivalences.data.nutrition_goals import NUTRITION_GOALS
from food_equivalences.domain.equivalences import Equivalence
from food_equivalences.domain.goals import (
    EquivalenceCategory,
    NutritionGoal,
    NutritionGoalData,
)

_logger = logging.getLogger(__name__)


class CatalogIntegrityError(ValueError):
    """Raised when a static catalog breaks one of its invariants."""

    def __init__(self, problems: Sequence[str]) -> None:
        self.problems = list(problems)
        super().__init__("Catalog integrity check failed: " + "; ".join(problems))


def equivalence_problems(catalog: Sequence[Equivalence]) -> list[str]:
    """Return a description of every defect in the equivalence catalog."""
    problems: list[str] = []
    for index, equivalence in enumerate(catalog):
        label = f"equivalence #{index} ({equivalence.ingredient!r})"
        if not equivalence.ingredient.strip():
            problems.append(f"{label}: blank ingredient")
        if not equivalence.category.strip():
            problems.append(f"{label}: blank category")
        if not equivalence.alternatives:
            problems.append(f"{label}: no alternatives")
        if not equivalence.keywords:
            problems.append(f"{label}: no keywords")
        for alt_index, alternative in enumerate(equivalence.alternatives):
            if not alternative.name.strip() or not alternative.equivalence.strip():
                problems.append(
                    f"{label}: alternative #{alt_index} lacks a name or equivalence"
                )
    return problems


def nutrition_goal_problems(
    goals: Mapping[NutritionGoal, NutritionGoalData],
) -> list[str]:
    """Return a description of every defect in the nutrition-goal catalog."""
    problems: list[str] = []
    expected_categories = set(EquivalenceCategory)
    for goal in NutritionGoal:
        goal_data = goals.get(goal)
        if goal_data is None:
            problems.append(f"goal {goal.value!r}: missing")
            continue
        if goal_data.id != goal:
            problems.append(f"goal {goal.value!r}: stored under id {goal_data.id!r}")
        categories = set(goal_data.equivalences)
        missing = expected_categories - categories
        if missing:
            names = ", ".join(sorted(category.value for category in missing))
            problems.append(f"goal {goal.value!r}: missing categories {names}")
        extra = categories - expected_categories
        if extra:
            names = ", ".join(sorted(str(category) for category in extra))
            problems.append(f"goal {goal.value!r}: unknown categories {names}")
        for category, entries in goal_data.equivalences.items():
            for index, entry in enumerate(entries):
                if not entry.keywords:
                    problems.append(
                        f"goal {goal.value!r}: {category} entry #{index} "
                        f"({entry.base_food!r}) has no keywords"
                    )
    return problems


def validate_equivalences(catalog: Sequence[Equivalence]) -> None:
    """Raise :class:`CatalogIntegrityError` if the catalog is defective."""
    problems = equivalence_problems(catalog)
    if problems:
        raise CatalogIntegrityError(problems)


def validate_nutrition_goals(goals: Mapping[NutritionGoal, NutritionGoalData]) -> None:
    """Raise :class:`CatalogIntegrityError` if the goal catalog is defective."""
    problems = nutrition_goal_problems(goals)
    if problems:
        raise CatalogIntegrityError(problems)


def validate_catalogs() -> None:
    """Check both shipped catalogs."""
    validate_equivalences(EQUIVALENCES)
    validate_nutrition_goals(NUTRITION_GOALS)
    _logger.info(
        "Catalogs validated: %s equivalences, %s goals",
        len(EQUIVALENCES),
        len(NUTRITION_GOALS),
    )
