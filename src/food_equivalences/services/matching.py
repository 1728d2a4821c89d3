"""Query normalisation and substring matching shared by both search engines."""

from collections.abc import Iterable


def normalize_query(query: str | None) -> str:
    """Trim and lower-case a free-text query; ``None`` becomes ``""``."""
    if query is None:
        return ""
    return query.strip().lower()


def contains_query(normalized_query: str, texts: Iterable[str]) -> bool:
    """Return True when any text contains the query, ignoring case.

    Matching is plain substring containment: no tokenising, no fuzziness.
    """
    return any(normalized_query in text.lower() for text in texts)
