"""Tests for nutrition-goal search."""

import pytest

from food_equivalences.data.nutrition_goals import NUTRITION_GOALS
from food_equivalences.domain.goals import (
    EquivalenceCategory,
    NutritionEquivalence,
    NutritionGoal,
)
from food_equivalences.services.goals import (
    get_categories_with_equivalences,
    get_goal,
    list_goals,
    search_nutrition_equivalences,
)

_QUERIES = ["riz", "PAIN", "crème", "charcuterie", "soir", "a", "  yaourt ", "zzz"]


def _matches(entry: NutritionEquivalence, query: str) -> bool:
    needle = query.strip().lower()
    return any(
        needle in text.lower()
        for text in (entry.base_food, entry.substitute, *entry.keywords)
    )


def test_weight_loss_rice_only_hits_starches() -> None:
    results = search_nutrition_equivalences("weight-loss", "riz")

    assert list(results) == list(EquivalenceCategory)
    starches = results[EquivalenceCategory.FECULENTS]
    assert len(starches) == 1
    assert starches[0].base_food == "Riz blanc"
    assert "basmati" in starches[0].substitute
    assert "lentilles corail" in starches[0].substitute_quantity
    for category in EquivalenceCategory:
        if category is not EquivalenceCategory.FECULENTS:
            assert results[category] == ()


def test_search_matches_substitute_text() -> None:
    results = search_nutrition_equivalences(NutritionGoal.WEIGHT_LOSS, "basmati")

    assert [entry.base_food for entry in results[EquivalenceCategory.FECULENTS]] == [
        "Riz blanc"
    ]


@pytest.mark.parametrize("goal", list(NutritionGoal))
@pytest.mark.parametrize("query", [None, "", "   "])
def test_blank_query_returns_stored_mapping(goal: NutritionGoal, query: str | None) -> None:
    results = search_nutrition_equivalences(goal, query)

    assert results is NUTRITION_GOALS[goal].equivalences
    assert list(results) == list(EquivalenceCategory)


@pytest.mark.parametrize("goal", list(NutritionGoal))
def test_filtered_results_are_complete_subsequences(goal: NutritionGoal) -> None:
    stored = NUTRITION_GOALS[goal].equivalences
    for query in _QUERIES:
        results = search_nutrition_equivalences(goal, query)

        assert list(results) == list(EquivalenceCategory)
        for category in EquivalenceCategory:
            expected = tuple(entry for entry in stored[category] if _matches(entry, query))
            assert results[category] == expected


def test_no_match_keeps_every_category() -> None:
    results = search_nutrition_equivalences("diabetes", "homard")

    assert list(results) == list(EquivalenceCategory)
    assert all(entries == () for entries in results.values())


def test_muscle_gain_categories() -> None:
    categories = get_categories_with_equivalences("muscle-gain")

    assert categories == [
        EquivalenceCategory.FECULENTS,
        EquivalenceCategory.PROTEINES,
        EquivalenceCategory.SNACKS,
    ]
    for empty in ("boissons", "matières-grasses", "desserts"):
        assert empty not in categories


@pytest.mark.parametrize("goal", list(NutritionGoal))
def test_categories_follow_canonical_order_and_stored_data(goal: NutritionGoal) -> None:
    stored = NUTRITION_GOALS[goal].equivalences

    assert get_categories_with_equivalences(goal) == [
        category for category in EquivalenceCategory if len(stored[category]) > 0
    ]


def test_categories_ignore_search_filters() -> None:
    search_nutrition_equivalences("weight-loss", "riz")

    assert EquivalenceCategory.GENERAL in get_categories_with_equivalences(
        "weight-loss"
    )


def test_list_goals_in_canonical_order() -> None:
    goals = list_goals()

    assert [goal.id for goal in goals] == list(NutritionGoal)
    assert len(goals) == 10


def test_goal_warnings() -> None:
    assert get_goal("diabetes").warning
    assert get_goal("hypertension").warning
    assert get_goal("weight-loss").warning is None


def test_unknown_goal_raises() -> None:
    with pytest.raises(ValueError):
        search_nutrition_equivalences("keto", "riz")


def test_category_labels() -> None:
    assert EquivalenceCategory.GENERAL.label == "Conseils généraux"
    assert EquivalenceCategory.MATIERES_GRASSES.label == "Matières grasses"
