"""Configuration dataclasses for humanizex."""

from dataclasses import dataclass, field
from typing import Optional, Literal

PlagiarismSensitivity = Literal["medium", "high", "strict"]
HumanizeStyle = Literal[
    "default", "casual", "formal", "simple", "creative", "technical", "enthusiastic"
]
SummaryLength = Literal["short", "medium", "long"]

PLAGIARISM_SENSITIVITIES = ("medium", "high", "strict")
HUMANIZE_STYLES = (
    "default",
    "casual",
    "formal",
    "simple",
    "creative",
    "technical",
    "enthusiastic",
)
SUMMARY_LENGTHS = ("short", "medium", "long")


@dataclass(frozen=True)
class AnalysisOptions:
    """
    Per-request options selecting prompt variants.

    Unset fields fall back to the documented defaults. Options are plain
    input: every analysis call receives its own instance.

    Example:
        >>> options = AnalysisOptions(plagiarism_sensitivity="strict")
        >>> options.humanize_style
        'default'
    """

    plagiarism_sensitivity: PlagiarismSensitivity = "medium"
    """How aggressively to flag text as unoriginal."""

    humanize_style: HumanizeStyle = "default"
    """Tone used when rewriting text."""

    summary_length: SummaryLength = "medium"
    """Target length of generated summaries."""

    def __post_init__(self):
        if self.plagiarism_sensitivity not in PLAGIARISM_SENSITIVITIES:
            raise ValueError(
                f"Unknown plagiarism sensitivity: {self.plagiarism_sensitivity!r}. "
                f"Expected one of {PLAGIARISM_SENSITIVITIES}"
            )
        if self.humanize_style not in HUMANIZE_STYLES:
            raise ValueError(
                f"Unknown humanize style: {self.humanize_style!r}. "
                f"Expected one of {HUMANIZE_STYLES}"
            )
        if self.summary_length not in SUMMARY_LENGTHS:
            raise ValueError(
                f"Unknown summary length: {self.summary_length!r}. "
                f"Expected one of {SUMMARY_LENGTHS}"
            )

    @classmethod
    def from_dict(cls, options: Optional[dict]) -> "AnalysisOptions":
        """Create options from a dictionary, ignoring None values."""
        if not options:
            return cls()
        return cls(**{k: v for k, v in options.items() if v is not None})


@dataclass
class ChunkingConfig:
    """Configuration for input limits and chunking."""

    chunk_size: int = 2000
    """Maximum number of words sent to the model in one request."""

    max_words: int = 30000
    """Documents longer than this are truncated before analysis."""

    max_chars: int = 200000
    """Character limit applied before the word limit."""


@dataclass
class RetryConfig:
    """Configuration for the retry policy around remote calls."""

    max_attempts: int = 3
    """Total number of attempts per request, including the first one."""

    initial_delay: float = 1.0
    """Delay in seconds before the first retry; doubles on each retry."""


@dataclass
class LLMConfig:
    """Configuration for LLM backend."""

    backend: Literal["ollama", "gemini", "cerebras"] = "ollama"
    """Which LLM backend to use: 'ollama' for local inference, 'gemini' or 'cerebras' for cloud APIs."""

    model: str = "qwen3:30b-a3b-instruct-2507-q4_K_M"
    """Model name. For Gemini use e.g. 'gemini-2.5-flash', for Cerebras 'llama-3.3-70b'."""

    base_url: str = "http://localhost:11434"
    """Base URL for Ollama API (only used when backend='ollama')."""

    api_key: Optional[str] = None
    """API key for cloud backends. If None, reads from environment variable."""

    temperature: Optional[float] = None
    """Sampling temperature. None keeps the backend's default."""

    max_tokens: int = 8192
    """Maximum tokens to generate. Rewritten chunks can be as long as the input."""

    timeout: int = 120
    """Request timeout in seconds."""

    debug: bool = False
    """If True, log all LLM prompts and responses."""

    rate_limit_delay: float = 0.1
    """Seconds to wait after each Cerebras API call (only used when backend='cerebras')."""

    def create_backend(self):
        """
        Create and return the appropriate LLM backend based on configuration.

        Returns:
            BaseLLM: The configured LLM backend instance.

        Raises:
            ValueError: If an unknown backend is specified.
        """
        if self.backend == "ollama":
            from humanizex.llm.ollama import OllamaBackend

            return OllamaBackend.from_config(self)
        elif self.backend == "gemini":
            from humanizex.llm.gemini import GeminiBackend

            return GeminiBackend.from_config(self)
        elif self.backend == "cerebras":
            from humanizex.llm.cerebras import CerebrasBackend

            return CerebrasBackend.from_config(self)
        else:
            raise ValueError(f"Unknown LLM backend: {self.backend}")


@dataclass
class HumanizeXConfig:
    """
    Main configuration for the analysis pipeline.

    Example:
        >>> config = HumanizeXConfig()
        >>> config.llm.backend = "gemini"
        >>> config.llm.model = "gemini-2.5-flash"
    """

    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    """Configuration for input limits and chunking."""

    retry: RetryConfig = field(default_factory=RetryConfig)
    """Configuration for retrying transient failures."""

    llm: LLMConfig = field(default_factory=LLMConfig)
    """Configuration for LLM backend."""

    verbose: bool = True
    """Whether to log progress information."""

    @classmethod
    def from_dict(cls, config_dict: dict) -> "HumanizeXConfig":
        """Create a HumanizeXConfig from a dictionary."""
        config = cls()

        sub_configs = {
            "chunking": ChunkingConfig,
            "retry": RetryConfig,
            "llm": LLMConfig,
        }

        for key, value in config_dict.items():
            if key in sub_configs and isinstance(value, dict):
                setattr(config, key, sub_configs[key](**value))
            elif hasattr(config, key):
                setattr(config, key, value)

        return config

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary."""
        from dataclasses import asdict

        return asdict(self)
