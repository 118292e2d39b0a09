"""Product tag suggestion package."""

__version__ = "0.1.0"

from tagger.config import KEYWORD_VOCABULARY, MAX_TAGS, OLLAMA_MODEL, OLLAMA_URL
from tagger.fallback import fallback_tags
from tagger.model_client import ModelUnavailableError, OllamaClient
from tagger.models import SuggestionRequest, TagSuggestion
from tagger.response_parser import TagParseError, parse_tags
from tagger.suggester import TagSuggester, suggest_tags

__all__ = [
    # Version
    "__version__",
    # Config
    "KEYWORD_VOCABULARY",
    "MAX_TAGS",
    "OLLAMA_MODEL",
    "OLLAMA_URL",
    # Models
    "SuggestionRequest",
    "TagSuggestion",
    # Errors
    "ModelUnavailableError",
    "TagParseError",
    # Core functions
    "OllamaClient",
    "TagSuggester",
    "fallback_tags",
    "parse_tags",
    "suggest_tags",
]
