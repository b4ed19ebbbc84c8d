"""Abstract base class for LLM backends."""

from abc import ABC, abstractmethod
from typing import Optional


class BaseLLM(ABC):
    """
    Abstract base class for LLM backends.

    All LLM implementations should inherit from this class and implement
    the required methods. Backends raise their native exceptions; retrying
    and translating failures is left to the caller.
    """

    @abstractmethod
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
            response_schema: Optional JSON schema the response must follow.
                When given, the response is expected to be JSON text.

        Returns:
            The generated text response. Never None.
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the backend can currently serve requests."""
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the model name."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model_name})"
