"""Shared test fixtures for the web test suite."""

from unittest.mock import patch

import pytest

from tagger.model_client import ModelUnavailableError
from tagger.suggester import TagSuggester

TEST_TOKEN = "test-token"


class StubModelClient:
    """Model client returning a fixed response, or failing when none is set."""

    generate_url = "http://ollama.test/api/generate"

    def __init__(self, response=None):
        self.response = response
        self.prompts = []

    def generate(self, model, prompt):
        self.prompts.append(prompt)
        if self.response is None:
            raise ModelUnavailableError("Could not connect to http://ollama.test/api/generate")
        return self.response


@pytest.fixture
def interaction_log_dir(tmp_path, monkeypatch):
    """Redirect API interaction logs to a temp directory."""
    from tagger_web import logging_utils

    monkeypatch.setattr(logging_utils, "LOG_DIR", tmp_path)
    return tmp_path


@pytest.fixture
def model_client():
    """Stub model client; set ``.response`` to simulate a healthy model."""
    return StubModelClient()


@pytest.fixture
def app(model_client, interaction_log_dir, monkeypatch):
    """Flask app wired to the stub model client."""
    monkeypatch.setenv("SECRET_TOKEN", TEST_TOKEN)

    from tagger_web.app import app as flask_app

    flask_app.config["TESTING"] = True
    suggester = TagSuggester(client=model_client, model="mistral")
    with patch("tagger_web.api._get_suggester", return_value=suggester):
        yield flask_app


@pytest.fixture
def client(app):
    """Create Flask test client."""
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
