"""Ollama LLM backend using HTTP API."""

import logging
from typing import Optional

import requests

from humanizex.llm.base import BaseLLM
from humanizex.config import LLMConfig

logger = logging.getLogger(__name__)


class OllamaBackend(BaseLLM):
    """
    Ollama LLM backend using direct HTTP requests.

    This backend communicates with a locally running Ollama server
    via its REST API. Response schemas are passed through Ollama's
    ``format`` field, which constrains generation to matching JSON.

    Example:
        >>> llm = OllamaBackend(model="qwen3:30b-a3b-instruct-2507-q4_K_M")
        >>> response = llm.generate("Rewrite this sentence: ...")
    """

    def __init__(
        self,
        model: str = "qwen3:30b-a3b-instruct-2507-q4_K_M",
        base_url: str = "http://localhost:11434",
        temperature: Optional[float] = None,
        max_tokens: int = 8192,
        timeout: int = 120,
        debug: bool = False,
    ):
        """
        Initialize the Ollama backend.

        Args:
            model: The Ollama model name to use.
            base_url: Base URL for the Ollama API.
            temperature: Default sampling temperature. None keeps the model default.
            max_tokens: Default maximum tokens to generate.
            timeout: Request timeout in seconds.
            debug: If True, log all prompts and responses.
        """
        self._model = model
        self.base_url = base_url.rstrip("/")
        self.default_temperature = temperature
        self.default_max_tokens = max_tokens
        self.timeout = timeout
        self.debug = debug

    @classmethod
    def from_config(cls, config: LLMConfig) -> "OllamaBackend":
        """Create an OllamaBackend from a configuration object."""
        return cls(
            model=config.model,
            base_url=config.base_url,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            timeout=config.timeout,
            debug=config.debug,
        )

    @property
    def model_name(self) -> str:
        """Return the model name."""
        return self._model

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        response_schema: Optional[dict] = None,
    ) -> str:
        """
        Generate text from a prompt.

        Args:
            prompt: The user prompt to send to the model.
            system: Optional system prompt.
            temperature: Optional sampling temperature (overrides default).
            max_tokens: Optional maximum tokens to generate (overrides default).
            response_schema: Optional JSON schema passed as Ollama's ``format``.

        Returns:
            The generated text response.

        Raises:
            requests.RequestException: If the API request fails.
        """
        url = f"{self.base_url}/api/generate"

        options = {"num_predict": max_tokens or self.default_max_tokens}
        temperature = temperature if temperature is not None else self.default_temperature
        if temperature is not None:
            options["temperature"] = temperature

        payload = {
            "model": self._model,
            "prompt": prompt,
            "stream": False,
            "options": options,
        }

        if system:
            payload["system"] = system
        if response_schema is not None:
            payload["format"] = response_schema

        if self.debug:
            logger.debug("=" * 60)
            logger.debug("LLM REQUEST")
            logger.debug("=" * 60)
            if system:
                logger.debug(f"SYSTEM:\n{system}")
            logger.debug(f"PROMPT:\n{prompt}")
            logger.debug("-" * 60)

        response = requests.post(url, json=payload, timeout=self.timeout)
        response.raise_for_status()

        result = response.json()
        response_text = result.get("response") or ""

        if self.debug:
            logger.debug(f"RESPONSE:\n{response_text}")
            logger.debug("=" * 60)

        return response_text

    def is_available(self) -> bool:
        """
        Check if the Ollama server is available.

        Returns:
            True if the server is reachable, False otherwise.
        """
        try:
            response = requests.get(f"{self.base_url}/api/tags", timeout=5)
            return response.status_code == 200
        except requests.RequestException:
            return False

