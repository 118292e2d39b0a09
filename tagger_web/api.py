"""API endpoints for product tag suggestions.

All routes under /api require a bearer token. Tag suggestion itself never
fails: when the model is down or answers with something unparseable the
response still carries heuristic tags, flagged with ``"source": "fallback"``.
"""

import hmac
import logging
import os
from typing import Any, Dict, List, Optional, Tuple, Union

from flask import Blueprint, Response, jsonify, request

from tagger.models import SuggestionRequest
from tagger.suggester import TagSuggester
from tagger_web.config import DEFAULT_SECRET_TOKEN, DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH
from tagger_web.logging_utils import log_interaction

__all__ = ["api"]

logger = logging.getLogger(__name__)

# Create blueprint for API
api = Blueprint("api", __name__, url_prefix="/api")

_suggester: Optional[TagSuggester] = None


def _get_suggester() -> TagSuggester:
    """Get or create the shared suggester (lazy initialization)."""
    global _suggester
    if _suggester is None:
        _suggester = TagSuggester()
    return _suggester


# ---------- BEARER AUTH ----------


def _expected_token() -> str:
    return os.getenv("SECRET_TOKEN", DEFAULT_SECRET_TOKEN)


def _unauthorized(message: str) -> Tuple[Response, int]:
    return jsonify({"error": "Unauthorized", "message": message}), 401


@api.before_request
def require_bearer_token() -> Optional[Tuple[Response, int]]:
    """Reject /api requests without a valid ``Authorization: Bearer`` header."""
    header = request.headers.get("Authorization")
    if not header:
        return _unauthorized("Authorization header is required")

    if not header.startswith("Bearer "):
        return _unauthorized('Authorization header must start with "Bearer "')

    token = header[len("Bearer "):]
    if not hmac.compare_digest(token.encode("utf-8"), _expected_token().encode("utf-8")):
        return _unauthorized("Invalid authentication token")

    return None


# ---------- VALIDATION ----------


def _validate_text_field(data: Dict[str, Any], prop: str, max_length: int) -> Optional[Dict[str, Any]]:
    """Check one required string field; return an error detail or None."""
    value = data.get(prop)
    constraints: Dict[str, str] = {}

    if not isinstance(value, str):
        constraints["isString"] = f"{prop} must be a string"
        constraints["isNotEmpty"] = f"{prop} should not be empty"
    else:
        if not value.strip():
            constraints["isNotEmpty"] = f"{prop} should not be empty"
        if len(value) > max_length:
            constraints["maxLength"] = f"{prop} must be shorter than or equal to {max_length} characters"

    if constraints:
        return {"property": prop, "constraints": constraints}
    return None


def validate_suggestion_request(data: Any) -> Tuple[Optional[SuggestionRequest], List[Dict[str, Any]]]:
    """Validate a suggest-tags request body.

    Args:
        data: Decoded JSON body (anything json.loads can return, or None)

    Returns:
        (request, errors) - request is None when errors is non-empty.
    """
    if not isinstance(data, dict):
        return None, [
            {
                "property": "body",
                "constraints": {"isObject": "request body must be a JSON object"},
            }
        ]

    errors = [
        detail
        for detail in (
            _validate_text_field(data, "name", NAME_MAX_LENGTH),
            _validate_text_field(data, "description", DESCRIPTION_MAX_LENGTH),
        )
        if detail
    ]
    if errors:
        return None, errors

    return SuggestionRequest(name=data["name"], description=data["description"]), []


# ---------- ROUTES ----------


@api.route("/suggest-tags", methods=["POST"])
def suggest_tags() -> Union[Tuple[Response, int], Response]:
    """Suggest keyword tags for a product.

    Request JSON:
        {
            "name": "Bluetooth Speaker",
            "description": "A wireless portable speaker"
        }

    Response JSON:
        {
            "suggestedTags": ["audio", "wireless", "bluetooth", "portable", "speaker"],
            "source": "model"
        }
    """
    data = request.get_json(silent=True)
    suggestion_request, errors = validate_suggestion_request(data)

    if errors:
        log_interaction("validation_error", {"endpoint": "suggest-tags", "details": errors})
        return jsonify({"error": "Validation failed", "details": errors}), 400

    log_interaction(
        "suggest_tags_request",
        {"name": suggestion_request.name, "description": suggestion_request.description},
    )

    result = _get_suggester().suggest(suggestion_request.name, suggestion_request.description)

    log_interaction("suggest_tags_result", result.to_dict())

    return jsonify({"suggestedTags": result.tags, "source": result.source})
