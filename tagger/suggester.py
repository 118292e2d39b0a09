"""Tag suggestion orchestration.

Asks the model for tags and degrades to the keyword fallback whenever the
model is unreachable or its answer can't be parsed. Callers always get
between 1 and MAX_TAGS distinct tags back and never see an exception.
"""

import logging
from typing import List, Optional

from tagger.config import OLLAMA_MODEL, PROMPT_PREVIEW_CHARS, RESPONSE_PREVIEW_CHARS
from tagger.fallback import fallback_tags
from tagger.logging_config import get_logger, log_tag_event
from tagger.model_client import ModelUnavailableError, OllamaClient
from tagger.models import SOURCE_FALLBACK, SOURCE_MODEL, TagSuggestion
from tagger.prompts import make_tag_prompt
from tagger.response_parser import TagParseError, parse_tags

__all__ = ["TagSuggester", "suggest_tags"]

logger = get_logger("suggester")


def _preview(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


class TagSuggester:
    """Suggest product tags using a text-generation model.

    The model client only needs a ``generate(model, prompt) -> str`` method
    that raises :class:`ModelUnavailableError` on failure, so tests can pass
    a fake in place of :class:`OllamaClient`.
    """

    def __init__(self, client=None, model: str = OLLAMA_MODEL):
        self.client = client if client is not None else OllamaClient()
        self.model = model

    def suggest(self, name: str, description: str) -> TagSuggestion:
        """Suggest tags and report which path produced them."""
        prompt = make_tag_prompt(name, description)

        log_tag_event(
            "model_request",
            {
                "message": "Sending request to model",
                "url": getattr(self.client, "generate_url", None),
                "model": self.model,
                "prompt": _preview(prompt, PROMPT_PREVIEW_CHARS),
            },
            level=logging.DEBUG,
        )

        try:
            raw = self.client.generate(self.model, prompt)
            if not isinstance(raw, str):
                raise TagParseError(f"Model returned {type(raw).__name__}, expected text")
            log_tag_event(
                "model_response",
                {
                    "message": "Model response received",
                    "model": self.model,
                    "response": _preview(raw, RESPONSE_PREVIEW_CHARS),
                },
                level=logging.DEBUG,
            )
            tags = parse_tags(raw)

        except ModelUnavailableError as e:
            return self._fallback(name, description, reason="model_unavailable", error=e)

        except TagParseError as e:
            return self._fallback(name, description, reason="parse_error", error=e)

        except Exception as e:
            logger.exception("Unexpected error during tag suggestion")
            return self._fallback(name, description, reason="unexpected_error", error=e)

        log_tag_event(
            "tags_suggested",
            {"message": f"Model suggested {len(tags)} tags", "model": self.model, "tags": tags},
        )
        return TagSuggestion(tags=tags, source=SOURCE_MODEL, model=self.model)

    def suggest_tags(self, name: str, description: str) -> List[str]:
        """Suggest tags for a product; never raises."""
        return self.suggest(name, description).tags

    def _fallback(self, name: str, description: str, reason: str, error: Exception) -> TagSuggestion:
        tags = fallback_tags(name, description)
        log_tag_event(
            "fallback",
            {
                "message": f"Generating fallback tags ({reason}: {error})",
                "reason": reason,
                "error": str(error),
                "model": self.model,
                "tags": tags,
            },
            level=logging.WARNING,
        )
        return TagSuggestion(tags=tags, source=SOURCE_FALLBACK, model=self.model)


_default_suggester: Optional[TagSuggester] = None


def _get_default_suggester() -> TagSuggester:
    """Get or create the module-level suggester."""
    global _default_suggester
    if _default_suggester is None:
        _default_suggester = TagSuggester()
    return _default_suggester


def suggest_tags(name: str, description: str) -> List[str]:
    """Suggest tags using the default model configuration."""
    return _get_default_suggester().suggest_tags(name, description)
