"""Per-goal search over the nutrition-goal catalog."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from food_equivalences.data.nutrition_goals import NUTRITION_GOALS
from food_equivalences.domain.goals import (
    CategoryEquivalences,
    EquivalenceCategory,
    NutritionEquivalence,
    NutritionGoal,
    NutritionGoalData,
)
from food_equivalences.services.matching import contains_query, normalize_query

_logger = logging.getLogger(__name__)


@dataclass
class GoalSearchService:
    """Read-only lookups scoped to one nutrition goal at a time."""

    goals: Mapping[NutritionGoal, NutritionGoalData] = field(
        default_factory=lambda: NUTRITION_GOALS
    )
    debug: bool = False

    def list_goals(self) -> list[NutritionGoalData]:
        """Return every goal record in canonical order."""
        return [self.goals[goal] for goal in NutritionGoal]

    def get_goal(self, goal: NutritionGoal | str) -> NutritionGoalData:
        """Return the record for a goal id."""
        return self.goals[NutritionGoal(goal)]

    def search(
        self, goal: NutritionGoal | str, query: str | None = None
    ) -> CategoryEquivalences:
        """Filter a goal's equivalences by substring, category by category.

        A blank query returns the stored mapping itself. Every category key
        is present in the result, in canonical order.
        """
        goal_data = self.get_goal(goal)
        normalized = normalize_query(query)
        if not normalized:
            return goal_data.equivalences
        filtered = MappingProxyType(
            {
                category: tuple(
                    entry
                    for entry in goal_data.equivalences[category]
                    if _entry_matches(entry, normalized)
                )
                for category in EquivalenceCategory
            }
        )
        if self.debug:
            _logger.info(
                "Goal search: goal=%s query=%s results=%s",
                goal_data.id,
                normalized,
                sum(len(entries) for entries in filtered.values()),
            )
        return filtered

    def categories_with_equivalences(
        self, goal: NutritionGoal | str
    ) -> list[EquivalenceCategory]:
        """Return categories holding at least one stored entry."""
        return self.get_goal(goal).categories_with_equivalences()


def _entry_matches(entry: NutritionEquivalence, normalized_query: str) -> bool:
    return contains_query(
        normalized_query, (entry.base_food, entry.substitute, *entry.keywords)
    )


_default_service = GoalSearchService()


def search_nutrition_equivalences(
    goal: NutritionGoal | str, query: str | None = None
) -> CategoryEquivalences:
    """Search one goal of the shipped catalog."""
    return _default_service.search(goal, query)


def get_categories_with_equivalences(
    goal: NutritionGoal | str,
) -> list[EquivalenceCategory]:
    """List the non-empty categories of one goal of the shipped catalog."""
    return _default_service.categories_with_equivalences(goal)


def list_goals() -> list[NutritionGoalData]:
    """List the shipped goals in canonical order."""
    return _default_service.list_goals()


def get_goal(goal: NutritionGoal | str) -> NutritionGoalData:
    """Return one shipped goal record."""
    return _default_service.get_goal(goal)
