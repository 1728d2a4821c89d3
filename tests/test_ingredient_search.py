"""Tests for ingredient equivalence search."""

import pytest

from food_equivalences.data.equivalences import EQUIVALENCES
from food_equivalences.domain.equivalences import (
    Alternative,
    Equivalence,
    EquivalenceType,
)
from food_equivalences.services.ingredients import (
    IngredientSearchService,
    get_equivalences_for_ingredient,
    search_equivalences,
)


def _matches(equivalence: Equivalence, query: str) -> bool:
    needle = query.strip().lower()
    return needle in equivalence.ingredient.lower() or any(
        needle in keyword.lower() for keyword in equivalence.keywords
    )


def test_search_butter_for_recipes_returns_pastry_and_toast() -> None:
    results = search_equivalences("beurre", "recipe")

    assert len(results) >= 2
    assert all(item.type == EquivalenceType.RECIPE for item in results)
    categories = {item.category for item in results if item.ingredient == "beurre"}
    assert categories == {
        "Matières grasses - Pâtisserie",
        "Matières grasses - Tartines",
    }


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
@pytest.mark.parametrize("equivalence_type", [None, "recipe", "nutrition"])
def test_blank_query_returns_nothing(query: str, equivalence_type: str | None) -> None:
    assert search_equivalences(query, equivalence_type) == []


def test_search_is_case_insensitive_and_trims() -> None:
    assert search_equivalences("  BEURRE ") == search_equivalences("beurre")


def test_search_matches_keywords_only() -> None:
    results = search_equivalences("philadelphia")

    assert [item.ingredient for item in results] == ["cream cheese"]


def test_search_keeps_catalog_order_across_types() -> None:
    results = search_equivalences("riz")

    assert [item.ingredient for item in results] == ["farine riz", "riz blanc"]
    assert [item.ingredient for item in search_equivalences("riz", "nutrition")] == [
        "riz blanc"
    ]


def test_search_accepts_enum_type() -> None:
    assert search_equivalences("steak", EquivalenceType.NUTRITION) == (
        search_equivalences("steak", "nutrition")
    )


def test_search_rejects_unknown_type() -> None:
    with pytest.raises(ValueError):
        search_equivalences("beurre", "dessert")


def test_search_without_match_is_empty() -> None:
    assert search_equivalences("quinoa soufflé") == []


def test_search_is_sound_and_complete_over_catalog() -> None:
    queries = {"sucre", "crème", "pâte", "farine", "fro", "œuf", "oeuf", "a"}
    queries.update(keyword for item in EQUIVALENCES for keyword in item.keywords)
    for query in sorted(queries):
        for equivalence_type in (None, *EquivalenceType):
            expected = [
                item
                for item in EQUIVALENCES
                if (equivalence_type is None or item.type == equivalence_type)
                and _matches(item, query)
            ]
            assert search_equivalences(query, equivalence_type) == expected


def test_exact_lookup_ignores_case_and_whitespace() -> None:
    results = get_equivalences_for_ingredient("  BEURRE ")

    assert len(results) == 2
    assert {item.ingredient for item in results} == {"beurre"}


def test_exact_lookup_rejects_partial_names() -> None:
    assert search_equivalences("beur")
    assert get_equivalences_for_ingredient("beur") == []


def test_exact_lookup_ignores_keywords() -> None:
    assert search_equivalences("philadelphia")
    assert get_equivalences_for_ingredient("philadelphia") == []


def test_exact_lookup_filters_by_type() -> None:
    both = get_equivalences_for_ingredient("steak haché")
    nutrition = get_equivalences_for_ingredient("steak haché", "nutrition")

    assert [item.type for item in both] == [
        EquivalenceType.RECIPE,
        EquivalenceType.NUTRITION,
    ]
    assert [item.type for item in nutrition] == [EquivalenceType.NUTRITION]


def test_service_searches_its_own_catalog() -> None:
    catalog = (
        Equivalence(
            ingredient="Tahini",
            category="Sauces",
            type=EquivalenceType.RECIPE,
            keywords=("sésame",),
            alternatives=(Alternative(name="Purée de cajou", equivalence="1 → 1"),),
        ),
    )
    service = IngredientSearchService(catalog=catalog)

    assert service.search("SÉSAME") == list(catalog)
    assert service.for_ingredient("tahini") == list(catalog)
    assert service.search("tahini", "nutrition") == []


def test_catalog_lists_recipe_topics_before_nutrition_topics() -> None:
    types = [item.type for item in EQUIVALENCES]
    first_nutrition = types.index(EquivalenceType.NUTRITION)

    assert EquivalenceType.NUTRITION not in types[:first_nutrition]
    assert EquivalenceType.RECIPE not in types[first_nutrition:]
