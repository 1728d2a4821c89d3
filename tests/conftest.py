"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from food_equivalences.api.app import create_app
from food_equivalences.config import Settings
from food_equivalences.containers import AppContainer
from food_equivalences.services.goals import GoalSearchService
from food_equivalences.services.ingredients import IngredientSearchService


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="DEBUG", debug=True)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return AppContainer(
        settings=settings,
        ingredient_search=IngredientSearchService(debug=settings.debug),
        goal_search=GoalSearchService(debug=settings.debug),
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
