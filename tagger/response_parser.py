"""Extract tag lists from free-form model output.

Models are asked for a JSON array but frequently wrap it in prose, split it
over several lines or ignore the instruction entirely. Parsing is therefore
a short ordered list of strategies, each a pure ``text -> Optional[list]``
function; the first one that yields at least one tag wins.

1. Structured: the first single-line ``[...]`` substring decoded as JSON.
2. Permissive: every ``"quoted"`` substring, scanned line by line.

Both strategies go through the same normalisation (trim, lowercase, drop
empties, dedupe preserving order, cap at MAX_TAGS). Escaped quotes inside
quoted strings are not unescaped by the permissive scan.
"""

import json
import re
from typing import Callable, Iterable, List, Optional, Tuple

from tagger.config import MAX_TAGS

__all__ = [
    "TagParseError",
    "parse_tags",
    "parse_structured",
    "parse_quoted",
    "normalize_tags",
    "PARSE_STRATEGIES",
]

# Non-greedy and without DOTALL, so the array must sit on one line
_ARRAY_PATTERN = re.compile(r"\[.*?\]")
_QUOTED_PATTERN = re.compile(r'"([^"]+)"')


class TagParseError(ValueError):
    """No tags could be extracted from the model response."""


def normalize_tags(tags: Iterable[str], limit: int = MAX_TAGS) -> List[str]:
    """Trim, lowercase and dedupe tags, keeping first occurrences.

    Args:
        tags: Candidate tag strings in priority order
        limit: Maximum number of tags to keep

    Returns:
        At most ``limit`` distinct, non-empty tags
    """
    result: List[str] = []
    for tag in tags:
        cleaned = tag.strip().lower()
        if cleaned and cleaned not in result:
            result.append(cleaned)
            if len(result) >= limit:
                break
    return result


def parse_structured(text: str) -> Optional[List[str]]:
    """Decode the first bracketed array in ``text`` as a list of strings."""
    match = _ARRAY_PATTERN.search(text)
    if not match:
        return None

    try:
        decoded = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None

    if not isinstance(decoded, list) or not all(isinstance(tag, str) for tag in decoded):
        return None

    return normalize_tags(decoded) or None


def parse_quoted(text: str) -> Optional[List[str]]:
    """Collect double-quoted substrings from every line of ``text``."""
    candidates: List[str] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        candidates.extend(_QUOTED_PATTERN.findall(line))

    return normalize_tags(candidates) or None


ParseStrategy = Callable[[str], Optional[List[str]]]

PARSE_STRATEGIES: Tuple[ParseStrategy, ...] = (parse_structured, parse_quoted)


def parse_tags(raw_text: str, strategies: Tuple[ParseStrategy, ...] = PARSE_STRATEGIES) -> List[str]:
    """Extract a bounded tag list from raw model output.

    Args:
        raw_text: Unparsed generation result
        strategies: Parsers to try in order

    Returns:
        Between 1 and MAX_TAGS distinct tags

    Raises:
        TagParseError: If no strategy produced a tag
    """
    text = raw_text or ""
    for strategy in strategies:
        tags = strategy(text)
        if tags:
            return tags

    raise TagParseError("Could not parse tags from response")
