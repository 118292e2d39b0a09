"""Centralized configuration for the tag suggestion web service."""

import os

SERVICE_NAME = "product-tag-service"

# Flask app settings (allow env overrides; debug off by default)
# FLASK_PORT wins, then PORT (set by most container platforms), then 8080.
FLASK_HOST = os.getenv("FLASK_HOST", "0.0.0.0")
FLASK_PORT = int(os.getenv("FLASK_PORT", os.getenv("PORT", "8080")))
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "False").lower() == "true"

# Bearer token required on /api routes (read per request so it can be rotated via env)
DEFAULT_SECRET_TOKEN = "SECRET_TOKEN"

# Request limits
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000

# Logging for the tagger package (console always; JSONL file on request)
LOG_LEVEL = os.getenv("TAGGER_LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("TAGGER_LOG_TO_FILE", "False").lower() == "true"
