"""Name comparison used to collapse near-duplicate results."""

import re
from collections.abc import Iterable

from food_search.domain.foods import ScoredCandidate
from food_search.domain.vocabulary import SIMILARITY_STOP_WORDS

_PARENTHETICAL = re.compile(r"\(.*?\)")
_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9\s]")
_MIN_CONTAINMENT_LENGTH = 5


def comparable_name(name: str) -> str:
    """Reduce a display name to the words that identify the food."""
    text = _PARENTHETICAL.sub(" ", name.lower())
    text = _NON_ALPHANUMERIC.sub(" ", text)
    return " ".join(word for word in text.split() if word not in SIMILARITY_STOP_WORDS)


def are_similar(first: str, second: str) -> bool:
    """Return True if two names denote the same practical food choice."""
    left = comparable_name(first)
    right = comparable_name(second)
    if left == right:
        return True
    if len(left) > _MIN_CONTAINMENT_LENGTH and len(right) > _MIN_CONTAINMENT_LENGTH:
        return left in right or right in left
    return False


def deduplicate(ranked: Iterable[ScoredCandidate]) -> list[ScoredCandidate]:
    """Keep the first candidate of every group of similar names.

    Input must already be in score order; a kept candidate is never
    replaced by a later one.
    """
    kept: list[ScoredCandidate] = []
    for candidate in ranked:
        if any(
            are_similar(candidate.simplified_name, existing.simplified_name)
            for existing in kept
        ):
            continue
        kept.append(candidate)
    return kept
