"""Display-name cleanup for verbose reference-database descriptions."""

import re
from collections.abc import Iterable

from food_search.domain.vocabulary import (
    NAME_NOISE,
    PREFIX_DESCRIPTORS,
    PREPARATION_METHODS,
)

_DESCRIPTOR_WINDOW = 3
_MIN_EXTRA_LENGTH = 2
_MAX_EXTRA_LENGTH = 20


def simplify_name(raw_name: str) -> str:
    """Turn "Rice, white, long-grain, regular, cooked" into a short name.

    The first comma segment is the main food. Within the next three
    segments the first color/type descriptor becomes a prefix and the first
    unclassified segment is kept as an extra descriptor. The first
    preparation method anywhere after the main food is appended in
    parentheses. Noise segments are dropped.
    """
    parts = [part.strip() for part in raw_name.split(",") if part.strip()]
    if not parts:
        return title_case(raw_name) or raw_name
    if len(parts) == 1:
        return title_case(parts[0])

    main_food = parts[0]
    prefix: str | None = None
    preparation: str | None = None
    extra: str | None = None
    for index, part in enumerate(parts[1:], start=1):
        lowered = part.lower()
        in_window = index <= _DESCRIPTOR_WINDOW
        if mentions_any(lowered, NAME_NOISE):
            continue
        if in_window and prefix is None and _is_prefix_descriptor(lowered):
            prefix = part
        elif preparation is None and mentions_any(lowered, PREPARATION_METHODS):
            preparation = part
        elif (
            in_window
            and extra is None
            and _MIN_EXTRA_LENGTH < len(part) < _MAX_EXTRA_LENGTH
        ):
            extra = part

    simplified = " ".join(word for word in (prefix, main_food, extra) if word)
    if preparation:
        simplified = f"{simplified} ({preparation})"
    return title_case(simplified)


def title_case(text: str) -> str:
    """Capitalize the first letter of each word and collapse whitespace."""
    return " ".join(_capitalize(word) for word in text.lower().split())


def mentions_any(text: str, terms: Iterable[str]) -> bool:
    """Return True if any term occurs in text as a whole word or phrase."""
    return any(
        re.search(rf"(?<![a-z0-9]){re.escape(term)}(?![a-z0-9])", text)
        for term in terms
    )


def _is_prefix_descriptor(segment: str) -> bool:
    first_word = segment.split()[0]
    return (
        first_word in PREFIX_DESCRIPTORS
        or first_word.split("-")[0] in PREFIX_DESCRIPTORS
    )


def _capitalize(word: str) -> str:
    """Upper-case the first letter unless a digit comes before it."""
    for index, char in enumerate(word):
        if char.isdigit():
            return word
        if char.isalpha():
            return word[:index] + char.upper() + word[index + 1 :]
    return word
