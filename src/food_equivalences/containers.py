"""Dependency container wiring for the application."""

from dataclasses import dataclass

from food_equivalences.app_logging import configure_logging
from food_equivalences.config import Settings
from food_equivalences.services.goals import GoalSearchService
from food_equivalences.services.ingredients import IngredientSearchService
from food_equivalences.services.integrity import validate_catalogs


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    ingredient_search: IngredientSearchService
    goal_search: GoalSearchService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    if resolved_settings.validate_catalogs:
        validate_catalogs()
    return AppContainer(
        settings=resolved_settings,
        ingredient_search=IngredientSearchService(debug=resolved_settings.debug),
        goal_search=GoalSearchService(debug=resolved_settings.debug),
    )
