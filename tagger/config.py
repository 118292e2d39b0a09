"""Configuration and constants for tag suggestion."""

import os
from typing import Tuple

__all__ = [
    "OLLAMA_URL",
    "OLLAMA_MODEL",
    "OLLAMA_TIMEOUT",
    "GENERATE_PATH",
    "MAX_TAGS",
    "KEYWORD_VOCABULARY",
    "BASELINE_TAGS",
    "NAME_STOPWORDS",
    "MIN_NAME_TOKEN_LENGTH",
    "PROMPT_PREVIEW_CHARS",
    "RESPONSE_PREVIEW_CHARS",
    "LOG_LEVEL",
]

# Model endpoint (Ollama)
OLLAMA_URL = os.getenv("OLLAMA_URL", "http://localhost:11434")
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "mistral")
GENERATE_PATH = "/api/generate"

# Seconds to wait for the model before falling back
OLLAMA_TIMEOUT = float(os.getenv("OLLAMA_TIMEOUT", "30"))

# Upper bound on tags returned by every code path
MAX_TAGS = 5

# Log previews
PROMPT_PREVIEW_CHARS = 100
RESPONSE_PREVIEW_CHARS = 200

LOG_LEVEL = os.getenv("TAGGER_LOG_LEVEL", "INFO").upper()


# =============================================================================
# Fallback Heuristic Data
# =============================================================================
# Order matters: keywords are matched and emitted in this order.

KEYWORD_VOCABULARY: Tuple[str, ...] = (
    "electronics",
    "gadget",
    "device",
    "tech",
    "digital",
    "wireless",
    "bluetooth",
    "smart",
    "portable",
    "mobile",
    "home",
    "kitchen",
    "outdoor",
    "sports",
    "fitness",
    "clothing",
    "fashion",
    "accessory",
    "beauty",
    "health",
    "book",
    "education",
    "toy",
    "game",
    "entertainment",
    "tool",
    "automotive",
    "garden",
    "office",
    "computer",
)

# Used when no vocabulary keyword matches
BASELINE_TAGS: Tuple[str, ...] = ("product", "item", "merchandise")

NAME_STOPWORDS = frozenset({"the", "and", "for", "with"})

# Name tokens must be strictly longer than this
MIN_NAME_TOKEN_LENGTH = 2
