"""Pydantic response models for the equivalences API."""

from pydantic import BaseModel, ConfigDict

from food_equivalences.domain.equivalences import EquivalenceType
from food_equivalences.domain.goals import EquivalenceCategory, NutritionGoal


class AlternativeModel(BaseModel):
    """One substitute proposal."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    equivalence: str
    interest: str | None = None
    ideal_for: str | None = None
    remarks: str | None = None
    limits: str | None = None
    variant: str | None = None


class EquivalenceModel(BaseModel):
    """Substitution topic for one ingredient."""

    model_config = ConfigDict(from_attributes=True)

    ingredient: str
    category: str
    type: EquivalenceType
    keywords: list[str]
    alternatives: list[AlternativeModel]


class EquivalenceSearchResponse(BaseModel):
    """Ingredient search or lookup results."""

    query: str
    results: list[EquivalenceModel]


class NutritionEquivalenceModel(BaseModel):
    """Goal-scoped food swap."""

    model_config = ConfigDict(from_attributes=True)

    base_food: str
    substitute: str
    base_quantity: str
    substitute_quantity: str
    interest: str
    context: str | None = None
    keywords: list[str]


class CategoryModel(BaseModel):
    """Category id with its display label."""

    id: EquivalenceCategory
    label: str


class CategorySection(CategoryModel):
    """A category with its swaps."""

    equivalences: list[NutritionEquivalenceModel]


class GoalSummary(BaseModel):
    """Goal header shown in the goal picker."""

    id: NutritionGoal
    title: str
    icon: str
    warning: str | None = None


class GoalListResponse(BaseModel):
    """All goals in canonical order."""

    goals: list[GoalSummary]


class GoalDetail(GoalSummary):
    """Full goal record with every category."""

    key_principles: list[str]
    categories: list[CategorySection]


class GoalSearchResponse(BaseModel):
    """Per-category search results for one goal; every category is listed."""

    goal: NutritionGoal
    query: str | None
    categories: list[CategorySection]


class GoalCategoriesResponse(BaseModel):
    """Categories of a goal holding at least one swap."""

    goal: NutritionGoal
    categories: list[CategoryModel]
