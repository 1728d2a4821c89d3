"""Keyword search over the ingredient equivalence catalog."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from food_equivalences.data.equivalences import EQUIVALENCES
from food_equivalences.domain.equivalences import Equivalence, EquivalenceType
from food_equivalences.services.matching import contains_query, normalize_query

_logger = logging.getLogger(__name__)


@dataclass
class IngredientSearchService:
    """Read-only lookups over a fixed sequence of equivalence topics."""

    catalog: Sequence[Equivalence] = EQUIVALENCES
    debug: bool = False

    def search(
        self,
        query: str | None,
        equivalence_type: EquivalenceType | str | None = None,
    ) -> list[Equivalence]:
        """Return topics whose ingredient or a keyword contains the query.

        A blank query matches nothing. Results keep catalog order.
        """
        normalized = normalize_query(query)
        if not normalized:
            return []
        wanted = _coerce_type(equivalence_type)
        results = [
            equivalence
            for equivalence in self.catalog
            if _type_matches(equivalence, wanted)
            and contains_query(
                normalized, (equivalence.ingredient, *equivalence.keywords)
            )
        ]
        if self.debug:
            _logger.info(
                "Ingredient search: query=%s type=%s results=%s",
                normalized,
                wanted,
                len(results),
            )
        return results

    def for_ingredient(
        self,
        ingredient: str,
        equivalence_type: EquivalenceType | str | None = None,
    ) -> list[Equivalence]:
        """Return topics whose ingredient equals the given name, ignoring case.

        Keywords are not consulted.
        """
        normalized = normalize_query(ingredient)
        wanted = _coerce_type(equivalence_type)
        results = [
            equivalence
            for equivalence in self.catalog
            if _type_matches(equivalence, wanted)
            and equivalence.ingredient.lower() == normalized
        ]
        if self.debug:
            _logger.info(
                "Ingredient lookup: ingredient=%s type=%s results=%s",
                normalized,
                wanted,
                len(results),
            )
        return results


def _coerce_type(value: EquivalenceType | str | None) -> EquivalenceType | None:
    if value is None:
        return None
    return EquivalenceType(value)


def _type_matches(
    equivalence: Equivalence, wanted: EquivalenceType | None
) -> bool:
    return wanted is None or equivalence.type == wanted


_default_service = IngredientSearchService()


def search_equivalences(
    query: str | None, equivalence_type: EquivalenceType | str | None = None
) -> list[Equivalence]:
    """Search the shipped catalog by substring."""
    return _default_service.search(query, equivalence_type)


def get_equivalences_for_ingredient(
    ingredient: str, equivalence_type: EquivalenceType | str | None = None
) -> list[Equivalence]:
    """Look up the shipped catalog by exact ingredient name."""
    return _default_service.for_ingredient(ingredient, equivalence_type)
