"""Query rewriting toward reference-database naming."""

from food_search.domain.vocabulary import QUERY_DESCRIPTORS


def clean_query(query: str) -> str:
    """Lower-case a query and collapse its whitespace."""
    return " ".join(query.lower().split())


def normalize_query(query: str) -> str:
    """Move a leading descriptor behind the main food.

    Reference databases name items "Rice, white" rather than "white rice",
    so "white rice" is searched as "rice white". Queries that do not start
    with a known descriptor come back cleaned but otherwise untouched.
    """
    words = clean_query(query).split()
    if len(words) >= 2 and words[0] in QUERY_DESCRIPTORS:
        return " ".join([*words[1:], words[0]])
    return " ".join(words)
