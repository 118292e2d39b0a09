"""HTTP client for the Ollama text-generation endpoint."""

from typing import Any, Dict, Optional

import requests  # type: ignore[import-untyped]

from tagger.config import GENERATE_PATH, OLLAMA_TIMEOUT, OLLAMA_URL
from tagger.logging_config import get_logger

__all__ = ["ModelUnavailableError", "OllamaClient", "create_session"]

logger = get_logger("model_client")


class ModelUnavailableError(Exception):
    """The model endpoint could not produce a generation.

    Raised for transport errors, timeouts, non-2xx responses and bodies
    that don't carry a string ``response`` field.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def create_session() -> requests.Session:
    """Create a requests Session for talking to the model endpoint."""
    session = requests.Session()
    session.headers.update({"Content-Type": "application/json"})
    return session


class OllamaClient:
    """Minimal client for ``POST {base_url}/api/generate``.

    A single attempt is made per call; there are no retries. Callers are
    expected to treat :class:`ModelUnavailableError` as "use the fallback".
    """

    def __init__(
        self,
        base_url: str = OLLAMA_URL,
        timeout: float = OLLAMA_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or create_session()

    @property
    def generate_url(self) -> str:
        return f"{self.base_url}{GENERATE_PATH}"

    def generate(self, model: str, prompt: str) -> str:
        """Run a non-streaming generation and return the raw text.

        Args:
            model: Model identifier, e.g. "mistral"
            prompt: Full prompt string

        Returns:
            The ``response`` field of the endpoint's JSON body

        Raises:
            ModelUnavailableError: On any network, status or payload failure
        """
        payload: Dict[str, Any] = {"model": model, "prompt": prompt, "stream": False}
        url = self.generate_url

        try:
            resp = self.session.post(url, json=payload, timeout=self.timeout)
            resp.raise_for_status()

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            reason = e.response.reason if e.response is not None else "unknown"
            raise ModelUnavailableError(
                f"Ollama API error: {status_code} {reason}", status_code=status_code
            ) from e

        except requests.exceptions.Timeout as e:
            raise ModelUnavailableError(
                f"Timed out after {self.timeout}s waiting for {url}"
            ) from e

        except requests.exceptions.ConnectionError as e:
            raise ModelUnavailableError(f"Could not connect to {url}: {e}") from e

        except requests.exceptions.RequestException as e:
            raise ModelUnavailableError(f"Request to {url} failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise ModelUnavailableError(
                "Ollama returned a non-JSON body", status_code=resp.status_code
            ) from e

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise ModelUnavailableError(
                "Ollama response is missing the 'response' field", status_code=resp.status_code
            )

        if data.get("done") is False:
            logger.debug("Ollama reported done=false for a non-streaming request")

        return text
