"""Shared fixtures for the tagger test suite."""

import logging
from typing import List, Optional

import pytest

from tagger.model_client import ModelUnavailableError


class FakeModelClient:
    """Stand-in for OllamaClient that returns canned text or fails."""

    generate_url = "http://ollama.test/api/generate"

    def __init__(self, response: Optional[str] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[tuple] = []

    def generate(self, model: str, prompt: str) -> str:
        self.calls.append((model, prompt))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def restore_tagger_logger():
    """Undo handler/level changes made by setup_logging during a test."""
    logger = logging.getLogger("tagger")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def fake_client_factory():
    """Build fake model clients inline in a test."""
    return FakeModelClient


@pytest.fixture
def unavailable_client():
    """A client whose endpoint is down."""
    return FakeModelClient(error=ModelUnavailableError("Could not connect to http://ollama.test"))


@pytest.fixture
def speaker_product():
    """Name/description pair used across suggester tests."""
    return "Bluetooth Speaker", "A wireless portable speaker"
