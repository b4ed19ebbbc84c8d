"""LLM backend implementations."""

from humanizex.llm.base import BaseLLM
from humanizex.llm.ollama import OllamaBackend

# GeminiBackend and CerebrasBackend are imported lazily to avoid requiring
# their SDKs unless they're actually used
def __getattr__(name):
    if name == "GeminiBackend":
        from humanizex.llm.gemini import GeminiBackend
        return GeminiBackend
    if name == "CerebrasBackend":
        from humanizex.llm.cerebras import CerebrasBackend
        return CerebrasBackend
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = ["BaseLLM", "OllamaBackend", "GeminiBackend", "CerebrasBackend"]
