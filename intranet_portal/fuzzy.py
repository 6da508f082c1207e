"""Fuzzy matching: score a query against text and rank records by their fields"""

from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar, Union


T = TypeVar("T")

# Attribute name or a callable pulling the value out of a record
FieldAccessor = Union[str, Callable[[Any], Any]]

ALWAYS_MATCH_SCORE = 1.0
EXACT_MATCH_SCORE = 2.0
NO_MATCH_SCORE = 0.0


def score(text: str, query: str) -> float:
    """
    Score how well `query` matches `text` (higher is better).

    - empty query: ALWAYS_MATCH_SCORE
    - case-insensitive substring: EXACT_MATCH_SCORE
    - all query characters found in order: matched / len(text), in (0, 1]
    - otherwise: 0
    """
    if not query:
        return ALWAYS_MATCH_SCORE

    text_lower = text.lower()
    query_lower = query.lower()

    if query_lower in text_lower:
        return EXACT_MATCH_SCORE

    # Greedy in-order subsequence walk
    query_index = 0
    for char in text_lower:
        if query_index == len(query_lower):
            break
        if char == query_lower[query_index]:
            query_index += 1

    if query_index == len(query_lower):
        return query_index / len(text_lower)

    return NO_MATCH_SCORE


def _field_value(item: Any, accessor: FieldAccessor) -> Any:
    if callable(accessor):
        return accessor(item)
    if isinstance(item, dict):
        return item.get(accessor)
    return getattr(item, accessor, None)


def score_fields(item: Any, query: str, fields: Sequence[FieldAccessor]) -> float:
    """Best score across the given fields; non-string values score 0."""
    best = NO_MATCH_SCORE
    for accessor in fields:
        value = _field_value(item, accessor)
        if isinstance(value, str):
            best = max(best, score(value, query))
    return best


def rank_objects(items: Sequence[T], query: str, fields: Sequence[FieldAccessor]) -> list[T]:
    """
    Filter and rank records by fuzzy score over `fields`.

    Records scoring 0 are dropped; ties keep their input order.
    An empty query returns the records unchanged.
    """
    if not query:
        return list(items)

    scored = [(score_fields(item, query, fields), item) for item in items]
    matched = [(s, item) for s, item in scored if s > 0]
    # sorted() is stable, so equal scores stay in collection order
    matched = sorted(matched, key=lambda pair: pair[0], reverse=True)
    return [item for _, item in matched]
