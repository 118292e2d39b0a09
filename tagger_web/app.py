"""Flask web app for product tag suggestions.

Serves the tag suggestion API plus unauthenticated health endpoints.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv
from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

# Load environment variables from .env file before reading any config
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

from tagger.logging_config import setup_logging  # noqa: E402
from tagger_web.api import api  # noqa: E402
from tagger_web.config import (  # noqa: E402
    FLASK_DEBUG,
    FLASK_HOST,
    FLASK_PORT,
    LOG_LEVEL,
    LOG_TO_FILE,
    SERVICE_NAME,
)

setup_logging(level=getattr(logging, LOG_LEVEL, logging.INFO), log_to_file=LOG_TO_FILE)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.register_blueprint(api)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# ---------- FLASK ROUTES ----------


@app.route("/", methods=["GET"])
def index() -> Response:
    return jsonify({
        "message": "Product tag suggestion service is running!",
        "status": "healthy",
        "timestamp": _now(),
    })


@app.route("/health", methods=["GET"])
def health() -> Response:
    return jsonify({
        "status": "healthy",
        "service": SERVICE_NAME,
        "timestamp": _now(),
    })


# ---------- ERROR HANDLERS ----------


@app.errorhandler(404)
def not_found(error: HTTPException) -> Tuple[Response, int]:
    return jsonify({
        "error": "Not Found",
        "message": f"Route {request.method} {request.path} not found",
    }), 404


@app.errorhandler(405)
def method_not_allowed(error: HTTPException) -> Tuple[Response, int]:
    return jsonify({
        "error": "Method Not Allowed",
        "message": f"Method {request.method} is not allowed for {request.path}",
    }), 405


@app.errorhandler(Exception)
def unexpected_error(error: Exception) -> Tuple[Response, int]:
    if isinstance(error, HTTPException):
        return jsonify({"error": error.name, "message": error.description}), error.code or 500

    logger.exception("Unhandled error")
    return jsonify({
        "error": "Internal Server Error",
        "message": "An unexpected error occurred",
    }), 500


def main() -> None:
    app.run(host=FLASK_HOST, port=FLASK_PORT, debug=FLASK_DEBUG)


if __name__ == "__main__":
    main()
