"""Data models for tag suggestion."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

__all__ = ["SuggestionRequest", "TagSuggestion", "SOURCE_MODEL", "SOURCE_FALLBACK"]

SOURCE_MODEL = "model"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class SuggestionRequest:
    """A validated product name/description pair.

    Validation (length limits, non-empty after trim) is done by the caller
    before the request reaches the suggester.
    """

    name: str
    description: str


@dataclass
class TagSuggestion:
    """Tags suggested for one product and the path that produced them."""

    tags: List[str] = field(default_factory=list)
    source: str = SOURCE_FALLBACK
    model: str = ""

    @property
    def used_fallback(self) -> bool:
        return self.source == SOURCE_FALLBACK

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "tags": list(self.tags),
            "source": self.source,
            "model": self.model,
        }
