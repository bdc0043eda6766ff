"""Heuristic relevance scoring of candidate names against a query."""

import re

from food_search.domain.foods import RawCandidate
from food_search.domain.vocabulary import (
    COOKED_SIGNALS,
    DERIVATIVE_INDICATORS,
    RAW_SIGNALS,
    SPECIFICITY_INDICATORS,
    TYPICALLY_COOKED_FOODS,
)
from food_search.services.names import mentions_any
from food_search.services.normalizer import clean_query

EXACT_MATCH_BONUS = 1000
PREFIX_MATCH_BONUS = 500
PHRASE_MATCH_BONUS = 300
ALL_WORDS_BONUS = 200
PER_WORD_BONUS = 50
BREVITY_BASE = 50
BREVITY_STEP = 8
FIRST_POSITION_BONUS = 60
SECOND_POSITION_BONUS = 30
BURIED_POSITION_PENALTY = -20
DERIVATIVE_PENALTY = -100
SPECIFICITY_PENALTY = -50
COOKED_BONUS = 40
RAW_PENALTY = -20

COMPLETE_MACROS_BONUS = 30
POPULARITY_BONUS = 20
LONG_NAME_PENALTY = -30
LONG_NAME_LENGTH = 60

_NAME_TOKEN_SPLIT = re.compile(r"[\s,]+")
_WORD = re.compile(r"[^\W_]+")
_MIN_COMPOUND_STEM = 3


def tokenize_name(name: str) -> list[str]:
    """Split a candidate name into lower-cased comma/space tokens."""
    return [token for token in _NAME_TOKEN_SPLIT.split(name.lower()) if token]


def score_name(candidate_name: str, query: str) -> int:
    """Score how well a candidate name answers a query; higher is better."""
    name = candidate_name.lower().strip()
    query_text = clean_query(query)
    query_words = query_text.split()
    name_tokens = tokenize_name(name)

    score = _match_bonus(name, query_text, query_words)
    score += max(0, BREVITY_BASE - BREVITY_STEP * len(name_tokens))
    score += _position_bonus(name_tokens, query_words)
    if is_derivative(name) and not is_derivative(query_text):
        score += DERIVATIVE_PENALTY
    if mentions_any(name, SPECIFICITY_INDICATORS):
        score += SPECIFICITY_PENALTY
    score += _preparation_bonus(name, query_text)
    return score


def is_derivative(text: str) -> bool:
    """Return True if text names a derived product such as flour or soymilk.

    A word counts when it is a derivative term or a compound ending in one
    ("applesauce", "buttermilk").
    """
    for word in _WORD.findall(text.lower()):
        for term in DERIVATIVE_INDICATORS:
            if word == term:
                return True
            if word.endswith(term) and len(word) - len(term) >= _MIN_COMPOUND_STEM:
                return True
    return False


def quality_adjustment(candidate: RawCandidate) -> int:
    """Score branded-product data quality signals."""
    adjustment = 0
    if candidate.macros.is_complete:
        adjustment += COMPLETE_MACROS_BONUS
    if candidate.popular:
        adjustment += POPULARITY_BONUS
    if len(candidate.description) > LONG_NAME_LENGTH:
        adjustment += LONG_NAME_PENALTY
    return adjustment


def _match_bonus(name: str, query_text: str, query_words: list[str]) -> int:
    """Return the single highest match tier the name reaches."""
    if not query_words:
        return 0
    if name == query_text:
        return EXACT_MATCH_BONUS
    if name.startswith(query_text):
        return PREFIX_MATCH_BONUS
    if query_text in name:
        return PHRASE_MATCH_BONUS
    if all(word in name for word in query_words):
        return ALL_WORDS_BONUS
    return PER_WORD_BONUS * sum(1 for word in query_words if word in name)


def _position_bonus(name_tokens: list[str], query_words: list[str]) -> int:
    if not query_words:
        return 0
    first_word = query_words[0].strip(",")
    if not first_word:
        return 0
    index = next(
        (i for i, token in enumerate(name_tokens) if first_word in token), None
    )
    if index == 0:
        return FIRST_POSITION_BONUS
    if index == 1:
        return SECOND_POSITION_BONUS
    if index is not None and index > 2:  # noqa: PLR2004
        return BURIED_POSITION_PENALTY
    return 0


def _preparation_bonus(name: str, query_text: str) -> int:
    if not any(food in query_text for food in TYPICALLY_COOKED_FOODS):
        return 0
    if mentions_any(name, COOKED_SIGNALS):
        return COOKED_BONUS
    if mentions_any(name, RAW_SIGNALS):
        return RAW_PENALTY
    return 0
