"""Core components: reconstruction, mode strategies and orchestration."""

from humanizex.core.reconstructor import reconstruct
from humanizex.core.modes import ModeStrategy, LLMRequest, get_strategy
from humanizex.core.orchestrator import Orchestrator

__all__ = [
    "reconstruct",
    "ModeStrategy",
    "LLMRequest",
    "get_strategy",
    "Orchestrator",
]
