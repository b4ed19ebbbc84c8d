"""Cerebras LLM backend using the Cerebras Cloud SDK."""

import json
import logging
import os
import time
from typing import Optional

from humanizex.llm.base import BaseLLM

logger = logging.getLogger(__name__)

SCHEMA_INSTRUCTION = """You must respond with valid JSON only. No additional text or explanation.
The response must match this JSON schema:
{schema}"""


class CerebrasBackend(BaseLLM):
    """
    Cerebras LLM backend using the Cerebras Cloud SDK.

    This backend communicates with the Cerebras Cloud API for fast inference
    on open-source models. Response schemas are passed to the model as
    instructions in the system prompt.

    Example:
        >>> llm = CerebrasBackend(model="llama-3.3-70b")
        >>> response = llm.generate("Rewrite this sentence: ...")

    Note:
        Requires the cerebras-cloud-sdk package: pip install cerebras-cloud-sdk
        Set CEREBRAS_API_KEY environment variable or pass api_key directly.
    """

    def __init__(
        self,
        model: str = "llama-3.3-70b",
        api_key: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: int = 8192,
        timeout: int = 120,
        debug: bool = False,
        rate_limit_delay: float = 0.1,
    ):
        """
        Initialize the Cerebras backend.

        Args:
            model: The Cerebras model name to use.
            api_key: Cerebras API key. If None, reads from CEREBRAS_API_KEY env var.
            temperature: Default sampling temperature. None keeps the model default.
            max_tokens: Default maximum tokens to generate.
            timeout: Request timeout in seconds.
            debug: If True, log all prompts and responses.
            rate_limit_delay: Seconds to wait after each API call.
        """
        try:
            from cerebras.cloud.sdk import Cerebras
        except ImportError:
            raise ImportError(
                "cerebras-cloud-sdk is required for CerebrasBackend. "
                "Install it with: pip install cerebras-cloud-sdk"
            )

        self._model = model
        self.default_temperature = temperature
        self.default_max_tokens = max_tokens
        self.timeout = timeout
        self.debug = debug
        self.rate_limit_delay = rate_limit_delay

        resolved_api_key = api_key or os.environ.get("CEREBRAS_API_KEY")
        if not resolved_api_key:
            raise ValueError(
                "Cerebras API key is required. Set CEREBRAS_API_KEY environment variable "
                "or pass api_key directly."
            )

        # Retries are handled by humanizex.retry, not by the SDK
        self.client = Cerebras(api_key=resolved_api_key, timeout=timeout, max_retries=0)

    @classmethod
    def from_config(cls, config) -> "CerebrasBackend":
        """Create a CerebrasBackend from a configuration object."""
        return cls(
            model=config.model,
            api_key=config.api_key,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            timeout=config.timeout,
            debug=config.debug,
            rate_limit_delay=config.rate_limit_delay,
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
            response_schema: Optional JSON schema appended to the system prompt.

        Returns:
            The generated text response.
        """
        if response_schema is not None:
            schema_system = SCHEMA_INSTRUCTION.format(
                schema=json.dumps(response_schema, indent=2)
            )
            system = f"{system}\n\n{schema_system}" if system else schema_system

        messages = []

        if system:
            messages.append({"role": "system", "content": system})

        messages.append({"role": "user", "content": prompt})

        if self.debug:
            logger.debug("=" * 60)
            logger.debug("LLM REQUEST (Cerebras)")
            logger.debug("=" * 60)
            if system:
                logger.debug(f"SYSTEM:\n{system}")
            logger.debug(f"PROMPT:\n{prompt}")
            logger.debug("-" * 60)

        request = {
            "messages": messages,
            "model": self._model,
            "max_tokens": max_tokens or self.default_max_tokens,
        }
        temperature = temperature if temperature is not None else self.default_temperature
        if temperature is not None:
            request["temperature"] = temperature

        chat_completion = self.client.chat.completions.create(**request)

        response_text = chat_completion.choices[0].message.content or ""

        if self.debug:
            logger.debug(f"RESPONSE:\n{response_text}")
            logger.debug("=" * 60)

        # Rate limit delay to avoid hitting API limits (30 req/min on free tier)
        if self.rate_limit_delay > 0:
            logger.debug(f"Rate limit delay: {self.rate_limit_delay} seconds")
            time.sleep(self.rate_limit_delay)

        return response_text

    def is_available(self) -> bool:
        """
        Check if the Cerebras API is available.

        Returns:
            True if the API is reachable and the API key is valid, False otherwise.
        """
        try:
            # Make a minimal request to verify connectivity
            self.client.chat.completions.create(
                messages=[{"role": "user", "content": "test"}],
                model=self._model,
                max_tokens=1,
            )
            return True
        except Exception:
            return False
