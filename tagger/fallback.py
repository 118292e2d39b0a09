"""Deterministic keyword tags used when the model can't be used."""

import re
from typing import List

from tagger.config import (
    BASELINE_TAGS,
    KEYWORD_VOCABULARY,
    MAX_TAGS,
    MIN_NAME_TOKEN_LENGTH,
    NAME_STOPWORDS,
)

__all__ = ["fallback_tags", "match_keywords", "name_tokens"]

_TOKEN_SEPARATORS = re.compile(r"[\s\-_]+")


def match_keywords(text: str) -> List[str]:
    """Return vocabulary keywords found as substrings of ``text``, in vocabulary order."""
    haystack = text.lower()
    return [keyword for keyword in KEYWORD_VOCABULARY if keyword in haystack]


def name_tokens(name: str) -> List[str]:
    """Split a product name into lowercase tokens worth using as tags."""
    return [
        token
        for token in _TOKEN_SEPARATORS.split(name.lower())
        if len(token) > MIN_NAME_TOKEN_LENGTH and token not in NAME_STOPWORDS
    ]


def fallback_tags(name: str, description: str) -> List[str]:
    """Build tags from keyword matches and the product name.

    Pure and total: the same ``(name, description)`` always gives the same
    1 to MAX_TAGS tags, and nothing here raises for string input.

    Args:
        name: Product name
        description: Product description

    Returns:
        Vocabulary matches (or the baseline tags when nothing matches),
        topped up with tokens from the name
    """
    tags = match_keywords(f"{name} {description}")

    if not tags:
        tags = list(BASELINE_TAGS)

    for token in name_tokens(name):
        if len(tags) >= MAX_TAGS:
            break
        if token not in tags:
            tags.append(token)

    return tags[:MAX_TAGS]
