"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Query, Request

from food_equivalences.api.models import (
    CategoryModel,
    CategorySection,
    EquivalenceModel,
    EquivalenceSearchResponse,
    GoalCategoriesResponse,
    GoalDetail,
    GoalListResponse,
    GoalSearchResponse,
    GoalSummary,
    NutritionEquivalenceModel,
)
from food_equivalences.app_logging import configure_logging
from food_equivalences.containers import AppContainer
from food_equivalences.domain.equivalences import Equivalence, EquivalenceType
from food_equivalences.domain.goals import (
    CategoryEquivalences,
    EquivalenceCategory,
    NutritionGoal,
    NutritionGoalData,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Food Equivalences")
    app.state.container = container
    logger.info("API ready (environment=%s)", container.settings.environment)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/equivalences/search")
    async def search_equivalences(
        request: Request,
        q: str = "",
        equivalence_type: EquivalenceType | None = Query(default=None, alias="type"),
    ) -> EquivalenceSearchResponse:
        """Free-text search over ingredients and their keywords."""
        state_container: AppContainer = request.app.state.container
        results = state_container.ingredient_search.search(q, equivalence_type)
        return EquivalenceSearchResponse(query=q, results=_equivalence_models(results))

    @app.get("/equivalences/ingredient/{ingredient}")
    async def equivalences_for_ingredient(
        ingredient: str,
        request: Request,
        equivalence_type: EquivalenceType | None = Query(default=None, alias="type"),
    ) -> EquivalenceSearchResponse:
        """Exact lookup by ingredient name."""
        state_container: AppContainer = request.app.state.container
        results = state_container.ingredient_search.for_ingredient(
            ingredient, equivalence_type
        )
        return EquivalenceSearchResponse(
            query=ingredient, results=_equivalence_models(results)
        )

    @app.get("/goals")
    async def list_goals(request: Request) -> GoalListResponse:
        """List goals in canonical order."""
        state_container: AppContainer = request.app.state.container
        return GoalListResponse(
            goals=[
                _goal_summary(goal_data)
                for goal_data in state_container.goal_search.list_goals()
            ]
        )

    @app.get("/goals/{goal}")
    async def goal_detail(goal: NutritionGoal, request: Request) -> GoalDetail:
        """Return a goal with its principles and every category."""
        state_container: AppContainer = request.app.state.container
        goal_data = state_container.goal_search.get_goal(goal)
        return GoalDetail(
            **_goal_summary(goal_data).model_dump(),
            key_principles=list(goal_data.key_principles),
            categories=_category_sections(goal_data.equivalences),
        )

    @app.get("/goals/{goal}/equivalences")
    async def search_goal_equivalences(
        goal: NutritionGoal, request: Request, q: str | None = None
    ) -> GoalSearchResponse:
        """Filter a goal's swaps; every category is returned."""
        state_container: AppContainer = request.app.state.container
        equivalences = state_container.goal_search.search(goal, q)
        return GoalSearchResponse(
            goal=goal, query=q, categories=_category_sections(equivalences)
        )

    @app.get("/goals/{goal}/categories")
    async def goal_categories(
        goal: NutritionGoal, request: Request
    ) -> GoalCategoriesResponse:
        """List the categories of a goal that hold swaps."""
        state_container: AppContainer = request.app.state.container
        categories = state_container.goal_search.categories_with_equivalences(goal)
        return GoalCategoriesResponse(
            goal=goal,
            categories=[
                CategoryModel(id=category, label=category.label)
                for category in categories
            ],
        )

    return app


def _equivalence_models(equivalences: list[Equivalence]) -> list[EquivalenceModel]:
    return [EquivalenceModel.model_validate(item) for item in equivalences]


def _goal_summary(goal_data: NutritionGoalData) -> GoalSummary:
    return GoalSummary(
        id=goal_data.id,
        title=goal_data.title,
        icon=goal_data.icon,
        warning=goal_data.warning,
    )


def _category_sections(equivalences: CategoryEquivalences) -> list[CategorySection]:
    """Render a category mapping as sections in canonical order."""
    return [
        CategorySection(
            id=category,
            label=category.label,
            equivalences=[
                NutritionEquivalenceModel.model_validate(entry)
                for entry in equivalences[category]
            ],
        )
        for category in EquivalenceCategory
    ]
