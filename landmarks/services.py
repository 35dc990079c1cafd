"""Landmark lookup used for query disambiguation and suggestion lists."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from .data import LANDMARKS
from .types import Landmark, LandmarkCategory

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
SEARCH_LIMIT = 10


def _matches_exactly(landmark: Landmark, needle: str) -> bool:
    return landmark.name.lower() == needle


def _matches_alias(landmark: Landmark, needle: str) -> bool:
    return any(alias.lower() == needle for alias in landmark.aliases)


def _find_exact(
    text: str, table: Sequence[Landmark] = LANDMARKS
) -> Landmark | None:
    needle = text.strip().lower()
    if not needle:
        return None
    for landmark in table:
        if _matches_exactly(landmark, needle):
            return landmark
    for landmark in table:
        if _matches_alias(landmark, needle):
            return landmark
    return None


def search(
    query: str,
    table: Sequence[Landmark] = LANDMARKS,
    *,
    limit: int = SEARCH_LIMIT,
) -> list[Landmark]:
    """Return landmarks whose name, city, country or alias contains `query`.

    Results keep table order and are capped at `limit` (at most 10).
    Queries shorter than two characters return nothing.
    """

    if not query or len(query) < MIN_QUERY_LENGTH:
        return []
    term = query.strip().lower()
    if not term:
        return []

    cap = max(0, min(limit, SEARCH_LIMIT))
    results: list[Landmark] = []
    for landmark in table:
        haystack = (
            landmark.name,
            landmark.city,
            landmark.country,
            *landmark.aliases,
        )
        if any(term in value.lower() for value in haystack):
            results.append(landmark)
            if len(results) >= cap:
                break
    return results


def resolve(
    text: str, table: Sequence[Landmark] = LANDMARKS
) -> Landmark | None:
    """Map free text onto a single landmark, or None.

    Order: exact name, exact alias, the same two checks on the part before
    the first comma, then the first substring search hit on the full text.
    """

    match = _find_exact(text, table)
    if match is None and "," in text:
        head = text.split(",", 1)[0]
        match = _find_exact(head, table)
    if match is None:
        hits = search(text, table)
        match = hits[0] if hits else None

    if match is not None:
        logger.debug(
            "landmarks.resolved query=%s landmark=%s", text, match.name
        )
    return match


def by_category(
    category: LandmarkCategory | str,
    table: Sequence[Landmark] = LANDMARKS,
) -> list[Landmark]:
    wanted = LandmarkCategory(category)
    return [landmark for landmark in table if landmark.category is wanted]


def random_sample(
    count: int = 5,
    table: Sequence[Landmark] = LANDMARKS,
    *,
    rng: random.Random | None = None,
) -> list[Landmark]:
    picker = rng or random.Random()  # noqa: S311
    size = max(0, min(count, len(table)))
    return picker.sample(list(table), size)
