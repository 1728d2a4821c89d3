"""Tests for query matching helpers."""

from food_equivalences.services.matching import contains_query, normalize_query


def test_normalize_query_trims_and_lowercases() -> None:
    assert normalize_query("  Crème Fraîche ") == "crème fraîche"


def test_normalize_query_handles_none_and_blank() -> None:
    assert normalize_query(None) == ""
    assert normalize_query("   ") == ""


def test_contains_query_is_substring_and_case_insensitive() -> None:
    assert contains_query("riz", ["Riz basmati"])
    assert contains_query("asma", ["Riz basmati"])
    assert not contains_query("riz blanc", ["riz", "blanc"])
