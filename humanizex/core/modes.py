"""Per-mode request building, response parsing and result assembly.

Each :class:`AnalysisMode` has one strategy object. The orchestrator looks
the strategy up by mode and never branches on the mode itself.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Union

from humanizex.config import AnalysisOptions
from humanizex.core.reconstructor import reconstruct
from humanizex.models import (
    AiDetectionFinding,
    AnalysisMode,
    AnalysisResult,
    PlagiarismFinding,
    RewriteResult,
)
from humanizex.prompts import (
    AI_DETECTION_PROMPT,
    AI_DETECTION_RESPONSE_SCHEMA,
    DETECTION_SYSTEM,
    HUMANIZE_PROMPT,
    HUMANIZE_STYLE_PROMPTS,
    PLAGIARISM_PROMPT,
    PLAGIARISM_PROMPT_INTROS,
    PLAGIARISM_RESPONSE_SCHEMA,
    REWRITE_SYSTEM,
    SUMMARIZE_PROMPT,
    SUMMARY_LENGTH_PROMPTS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LLMRequest:
    """A single request to the remote model."""

    prompt: str
    system: Optional[str] = None
    response_schema: Optional[dict] = None


def parse_json_array(response: str) -> list:
    """
    Parse a JSON array from a model response.

    Handles responses wrapped in markdown code blocks. An empty response
    is an empty array.

    Args:
        response: The raw response text.

    Returns:
        The parsed list.

    Raises:
        ValueError: If no JSON array can be extracted.
    """
    response = response.strip()
    if not response:
        return []

    candidates = [response]
    candidates.extend(
        m.strip() for m in re.findall(r"```(?:json)?\s*([\s\S]*?)```", response)
    )

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, list):
            return data
        raise ValueError(f"Expected a JSON array, got {type(data).__name__}")

    raise ValueError(f"Could not parse JSON from response: {response[:500]}...")


class ModeStrategy(ABC):
    """Prompt construction and response handling for one analysis mode."""

    mode: AnalysisMode
    progress_label: str
    """Progress message template, filled with ``index`` and ``total``."""

    @abstractmethod
    def build_request(self, chunk: str, options: AnalysisOptions) -> LLMRequest:
        """Build the request for one chunk of the document."""

    @abstractmethod
    def parse_response(self, response: str) -> Any:
        """
        Parse the model response for one chunk.

        Raises:
            ValueError: If the response does not match the expected format.
        """

    @abstractmethod
    def accumulate(self, outputs: list, parsed: Any) -> None:
        """Add one parsed chunk response to the outputs collected so far."""

    @abstractmethod
    def finalize(
        self, text: str, outputs: list, n_chunks: int
    ) -> Union[AnalysisResult, RewriteResult]:
        """Build the result for the whole document from the collected outputs."""

    def progress_message(self, index: int, total: int) -> str:
        return self.progress_label.format(index=index + 1, total=total)


class DetectionStrategy(ModeStrategy):
    """Base for modes whose responses are arrays of findings."""

    finding_type: type
    response_schema: dict

    def parse_response(self, response: str) -> list:
        return [self.finding_type.from_dict(item) for item in parse_json_array(response)]

    def accumulate(self, outputs: list, parsed: list) -> None:
        outputs.extend(parsed)

    def finalize(self, text: str, outputs: list, n_chunks: int) -> AnalysisResult:
        logger.info(f"Collected {len(outputs)} findings")
        return reconstruct(text, outputs)


class PlagiarismStrategy(DetectionStrategy):
    mode = AnalysisMode.PLAGIARISM
    progress_label = "Analyzing chunk {index} of {total}..."
    finding_type = PlagiarismFinding
    response_schema = PLAGIARISM_RESPONSE_SCHEMA

    def build_request(self, chunk: str, options: AnalysisOptions) -> LLMRequest:
        intro = PLAGIARISM_PROMPT_INTROS[options.plagiarism_sensitivity]
        return LLMRequest(
            prompt=PLAGIARISM_PROMPT.format(intro=intro, text=chunk),
            system=DETECTION_SYSTEM,
            response_schema=self.response_schema,
        )


class AiDetectionStrategy(DetectionStrategy):
    mode = AnalysisMode.AI_DETECTION
    progress_label = "Analyzing chunk {index} of {total} for AI content..."
    finding_type = AiDetectionFinding
    response_schema = AI_DETECTION_RESPONSE_SCHEMA

    def build_request(self, chunk: str, options: AnalysisOptions) -> LLMRequest:
        return LLMRequest(
            prompt=AI_DETECTION_PROMPT.format(text=chunk),
            system=DETECTION_SYSTEM,
            response_schema=self.response_schema,
        )


class RewriteStrategy(ModeStrategy):
    """Base for modes whose responses are plain rewritten text."""

    def parse_response(self, response: str) -> str:
        return response.strip()

    def accumulate(self, outputs: list, parsed: str) -> None:
        outputs.append(parsed)

    def finalize(self, text: str, outputs: list, n_chunks: int) -> RewriteResult:
        return RewriteResult(text=" ".join(outputs), n_chunks=n_chunks)


class HumanizeStrategy(RewriteStrategy):
    mode = AnalysisMode.HUMANIZE
    progress_label = "Humanizing chunk {index} of {total}..."

    def build_request(self, chunk: str, options: AnalysisOptions) -> LLMRequest:
        instructions = HUMANIZE_STYLE_PROMPTS[options.humanize_style]
        return LLMRequest(
            prompt=HUMANIZE_PROMPT.format(instructions=instructions, text=chunk),
            system=REWRITE_SYSTEM,
        )


class SummarizeStrategy(RewriteStrategy):
    mode = AnalysisMode.SUMMARIZE
    progress_label = "Summarizing chunk {index} of {total}..."

    def build_request(self, chunk: str, options: AnalysisOptions) -> LLMRequest:
        instructions = SUMMARY_LENGTH_PROMPTS[options.summary_length]
        return LLMRequest(
            prompt=SUMMARIZE_PROMPT.format(instructions=instructions, text=chunk),
            system=REWRITE_SYSTEM,
        )


STRATEGIES: dict[AnalysisMode, ModeStrategy] = {
    strategy.mode: strategy
    for strategy in (
        PlagiarismStrategy(),
        AiDetectionStrategy(),
        HumanizeStrategy(),
        SummarizeStrategy(),
    )
}


def get_strategy(mode) -> ModeStrategy:
    """
    Return the strategy registered for a mode.

    Args:
        mode: An AnalysisMode or its string value (e.g. "PLAGIARISM").

    Raises:
        ValueError: If the mode is unknown.
    """
    try:
        return STRATEGIES[AnalysisMode(mode)]
    except ValueError:
        raise ValueError(
            f"Unknown analysis mode: {mode!r}. "
            f"Expected one of {[m.value for m in AnalysisMode]}"
        ) from None
