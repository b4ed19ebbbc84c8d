"""Gemini LLM backend using the Google Gen AI SDK."""

import logging
import os
from typing import Optional

from humanizex.llm.base import BaseLLM

logger = logging.getLogger(__name__)


def to_gemini_schema(schema: dict) -> dict:
    """
    Convert a JSON schema to the dialect accepted by ``response_schema``.

    Gemini expects upper-case type names ("ARRAY", "OBJECT", ...).
    """
    converted = {}
    for key, value in schema.items():
        if key == "type" and isinstance(value, str):
            converted[key] = value.upper()
        elif key == "properties" and isinstance(value, dict):
            converted[key] = {name: to_gemini_schema(prop) for name, prop in value.items()}
        elif key == "items" and isinstance(value, dict):
            converted[key] = to_gemini_schema(value)
        else:
            converted[key] = value
    return converted


class GeminiBackend(BaseLLM):
    """
    Gemini LLM backend using the google-genai SDK.

    Example:
        >>> llm = GeminiBackend(model="gemini-2.5-flash")
        >>> response = llm.generate("Summarize this text: ...")

    Note:
        Requires the google-genai package: pip install google-genai
        Set GEMINI_API_KEY (or GOOGLE_API_KEY) or pass api_key directly.
    """

    def __init__(
        self,
        model: str = "gemini-2.5-flash",
        api_key: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: int = 8192,
        timeout: int = 120,
        debug: bool = False,
    ):
        """
        Initialize the Gemini backend.

        Args:
            model: The Gemini model name to use.
            api_key: API key. If None, reads GEMINI_API_KEY or GOOGLE_API_KEY.
            temperature: Default sampling temperature. None keeps the model default.
            max_tokens: Default maximum tokens to generate.
            timeout: Request timeout in seconds.
            debug: If True, log all prompts and responses.
        """
        try:
            from google import genai
            from google.genai import types
        except ImportError:
            raise ImportError(
                "google-genai is required for GeminiBackend. "
                "Install it with: pip install google-genai"
            )

        self._model = model
        self._types = types
        self.default_temperature = temperature
        self.default_max_tokens = max_tokens
        self.timeout = timeout
        self.debug = debug

        resolved_api_key = (
            api_key or os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY")
        )
        if not resolved_api_key:
            raise ValueError(
                "Gemini API key is required. Set GEMINI_API_KEY environment variable "
                "or pass api_key directly."
            )

        # The SDK takes its timeout in milliseconds
        self.client = genai.Client(
            api_key=resolved_api_key,
            http_options=types.HttpOptions(timeout=timeout * 1000),
        )

    @classmethod
    def from_config(cls, config) -> "GeminiBackend":
        """Create a GeminiBackend from a configuration object."""
        return cls(
            model=config.model,
            api_key=config.api_key,
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
            response_schema: Optional JSON schema enforced with JSON output mode.

        Returns:
            The generated text response.

        Raises:
            google.genai.errors.APIError: If the API request fails.
        """
        config_kwargs = {
            "max_output_tokens": max_tokens or self.default_max_tokens,
        }
        temperature = temperature if temperature is not None else self.default_temperature
        if temperature is not None:
            config_kwargs["temperature"] = temperature
        if system:
            config_kwargs["system_instruction"] = system
        if response_schema is not None:
            config_kwargs["response_mime_type"] = "application/json"
            config_kwargs["response_schema"] = to_gemini_schema(response_schema)

        if self.debug:
            logger.debug("=" * 60)
            logger.debug("LLM REQUEST (Gemini)")
            logger.debug("=" * 60)
            if system:
                logger.debug(f"SYSTEM:\n{system}")
            logger.debug(f"PROMPT:\n{prompt}")
            logger.debug("-" * 60)

        response = self.client.models.generate_content(
            model=self._model,
            contents=prompt,
            config=self._types.GenerateContentConfig(**config_kwargs),
        )

        response_text = response.text or ""

        if self.debug:
            logger.debug(f"RESPONSE:\n{response_text}")
            logger.debug("=" * 60)

        return response_text

    def is_available(self) -> bool:
        """
        Check if the Gemini API is available.

        Returns:
            True if the model can be looked up with the configured key, False otherwise.
        """
        try:
            self.client.models.get(model=self._model)
            return True
        except Exception:
            return False
