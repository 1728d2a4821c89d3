"""Tests for container wiring."""

from food_equivalences.config import Settings
from food_equivalences.containers import build_container
from food_equivalences.domain.goals import EquivalenceCategory


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.ingredient_search.debug is True
    snacks = container.goal_search.search("energy", "barre")[EquivalenceCategory.SNACKS]
    assert [entry.base_food for entry in snacks] == ["Grignotage sucré"]


def test_build_container_can_skip_validation(monkeypatch) -> None:
    calls: list[bool] = []
    monkeypatch.setattr(
        "food_equivalences.containers.validate_catalogs", lambda: calls.append(True)
    )

    build_container(Settings(validate_catalogs=False))
    assert calls == []

    build_container(Settings(validate_catalogs=True))
    assert calls == [True]
