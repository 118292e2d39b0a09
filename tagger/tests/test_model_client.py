"""Tests for the Ollama HTTP client."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from tagger.model_client import ModelUnavailableError, OllamaClient, create_session


def _make_response(status_code: int, body, reason: str = "OK") -> requests.Response:
    """Build a real requests.Response with the given status and body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.url = "http://ollama.test/api/generate"
    resp.encoding = "utf-8"
    if isinstance(body, (dict, list)):
        resp._content = json.dumps(body).encode("utf-8")
    else:
        resp._content = (body or "").encode("utf-8")
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return OllamaClient(base_url="http://ollama.test/", timeout=2.5, session=session)


class TestGenerateRequest:
    """Test the outgoing request."""

    def test_posts_expected_payload(self, client, session):
        session.post.return_value = _make_response(200, {"response": '["audio"]', "done": True})

        client.generate("mistral", "some prompt")

        session.post.assert_called_once_with(
            "http://ollama.test/api/generate",
            json={"model": "mistral", "prompt": "some prompt", "stream": False},
            timeout=2.5,
        )

    def test_trailing_slash_stripped(self, client):
        assert client.generate_url == "http://ollama.test/api/generate"

    def test_create_session_sets_json_header(self):
        sess = create_session()
        assert sess.headers["Content-Type"] == "application/json"


class TestGenerateSuccess:
    def test_returns_response_text(self, client, session):
        session.post.return_value = _make_response(200, {"response": "tags here", "done": True})
        assert client.generate("mistral", "p") == "tags here"

    def test_done_false_still_returns_text(self, client, session):
        session.post.return_value = _make_response(200, {"response": "partial", "done": False})
        assert client.generate("mistral", "p") == "partial"


class TestGenerateFailures:
    """Every failure mode surfaces as ModelUnavailableError."""

    def test_server_error_status(self, client, session):
        session.post.return_value = _make_response(500, "oops", reason="Internal Server Error")

        with pytest.raises(ModelUnavailableError) as exc_info:
            client.generate("mistral", "p")

        assert exc_info.value.status_code == 500
        assert "500" in str(exc_info.value)

    def test_not_found_status(self, client, session):
        session.post.return_value = _make_response(404, {"error": "model 'nope' not found"}, reason="Not Found")

        with pytest.raises(ModelUnavailableError) as exc_info:
            client.generate("nope", "p")

        assert exc_info.value.status_code == 404

    def test_timeout(self, client, session):
        session.post.side_effect = requests.exceptions.Timeout("read timed out")

        with pytest.raises(ModelUnavailableError, match="Timed out"):
            client.generate("mistral", "p")

    def test_connection_refused(self, client, session):
        session.post.side_effect = requests.exceptions.ConnectionError("Connection refused")

        with pytest.raises(ModelUnavailableError, match="Could not connect"):
            client.generate("mistral", "p")

    def test_other_request_error(self, client, session):
        session.post.side_effect = requests.exceptions.TooManyRedirects("loop")

        with pytest.raises(ModelUnavailableError):
            client.generate("mistral", "p")

    def test_non_json_body(self, client, session):
        session.post.return_value = _make_response(200, "<html>proxy error</html>")

        with pytest.raises(ModelUnavailableError, match="non-JSON"):
            client.generate("mistral", "p")

    @pytest.mark.parametrize(
        "body",
        [
            {"done": True},
            {"response": None, "done": True},
            {"response": 42, "done": True},
            ["not", "an", "object"],
        ],
    )
    def test_missing_response_field(self, client, session, body):
        session.post.return_value = _make_response(200, body)

        with pytest.raises(ModelUnavailableError, match="response"):
            client.generate("mistral", "p")

    def test_original_exception_chained(self, client, session):
        original = requests.exceptions.ConnectionError("Connection refused")
        session.post.side_effect = original

        with pytest.raises(ModelUnavailableError) as exc_info:
            client.generate("mistral", "p")

        assert exc_info.value.__cause__ is original
