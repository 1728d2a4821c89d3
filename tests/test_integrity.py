"""Tests for catalog integrity checks."""

from types import MappingProxyType

import pytest

from food_equivalences.data.equivalences import EQUIVALENCES
from food_equivalences.data.nutrition_goals import NUTRITION_GOALS
from food_equivalences.domain.equivalences import (
    Alternative,
    Equivalence,
    EquivalenceType,
)
from food_equivalences.domain.goals import (
    EquivalenceCategory,
    NutritionEquivalence,
    NutritionGoal,
    NutritionGoalData,
)
from food_equivalences.services.integrity import (
    CatalogIntegrityError,
    equivalence_problems,
    nutrition_goal_problems,
    validate_catalogs,
    validate_equivalences,
    validate_nutrition_goals,
)


def test_shipped_catalogs_are_valid() -> None:
    validate_catalogs()
    assert equivalence_problems(EQUIVALENCES) == []
    assert nutrition_goal_problems(NUTRITION_GOALS) == []


def test_every_topic_has_alternatives_and_keywords() -> None:
    for equivalence in EQUIVALENCES:
        assert len(equivalence.alternatives) >= 1
        assert len(equivalence.keywords) >= 1


def test_every_goal_defines_every_category() -> None:
    assert set(NUTRITION_GOALS) == set(NutritionGoal)
    for goal, goal_data in NUTRITION_GOALS.items():
        assert goal_data.id == goal
        assert list(goal_data.equivalences) == list(EquivalenceCategory)


def test_equivalence_without_alternatives_is_rejected() -> None:
    broken = Equivalence(
        ingredient="margarine",
        category="Matières grasses",
        type=EquivalenceType.RECIPE,
        keywords=(),
        alternatives=(),
    )

    with pytest.raises(CatalogIntegrityError) as excinfo:
        validate_equivalences([broken])

    assert len(excinfo.value.problems) == 2
    assert "no alternatives" in str(excinfo.value)
    assert "no keywords" in str(excinfo.value)


def test_blank_alternative_is_rejected() -> None:
    broken = Equivalence(
        ingredient="miel",
        category="Édulcorants",
        type=EquivalenceType.RECIPE,
        keywords=("miel",),
        alternatives=(Alternative(name=" ", equivalence="1 → 1"),),
    )

    assert equivalence_problems([broken]) == [
        "equivalence #0 ('miel'): alternative #0 lacks a name or equivalence"
    ]


def _goal_data(
    goal: NutritionGoal, equivalences: dict[EquivalenceCategory, tuple]
) -> NutritionGoalData:
    return NutritionGoalData(
        id=goal,
        title="Test",
        icon="*",
        key_principles=(),
        equivalences=MappingProxyType(equivalences),
    )


def test_goal_missing_categories_is_rejected() -> None:
    goals = dict(NUTRITION_GOALS)
    goals[NutritionGoal.ENERGY] = _goal_data(
        NutritionGoal.ENERGY, {EquivalenceCategory.SNACKS: ()}
    )

    with pytest.raises(CatalogIntegrityError) as excinfo:
        validate_nutrition_goals(goals)

    assert "goal 'energy': missing categories" in str(excinfo.value)


def test_missing_goal_and_mismatched_id_are_reported() -> None:
    full = {category: () for category in EquivalenceCategory}
    goals = {NutritionGoal.WEIGHT_LOSS: _goal_data(NutritionGoal.DIABETES, full)}

    problems = nutrition_goal_problems(goals)

    assert any("stored under id" in problem for problem in problems)
    assert "goal 'muscle-gain': missing" in problems
    assert len(problems) == len(NutritionGoal)


def test_entry_without_keywords_is_reported() -> None:
    entry = NutritionEquivalence(
        base_food="Riz",
        substitute="Quinoa",
        base_quantity="60 g",
        substitute_quantity="60 g",
        interest="Plus de protéines",
        keywords=(),
    )
    equivalences = {category: () for category in EquivalenceCategory}
    equivalences[EquivalenceCategory.FECULENTS] = (entry,)
    goals = dict(NUTRITION_GOALS)
    goals[NutritionGoal.ENERGY] = _goal_data(NutritionGoal.ENERGY, equivalences)

    problems = nutrition_goal_problems(goals)

    assert problems == ["goal 'energy': féculents entry #0 ('Riz') has no keywords"]
