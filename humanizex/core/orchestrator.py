"""Chunked, retried analysis of a single document."""

import logging
import time
from typing import Callable, Optional, Union

from humanizex.config import AnalysisOptions
from humanizex.core.modes import ModeStrategy, get_strategy
from humanizex.errors import INVALID_RESPONSE_MESSAGE, UserFacingError, to_user_facing_error
from humanizex.llm.base import BaseLLM
from humanizex.models import AnalysisMode, AnalysisResult, RewriteResult
from humanizex.retry import INITIAL_DELAY, MAX_ATTEMPTS, call_with_retry
from humanizex.utils import chunk_text

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float, str], None]

FINALIZING_MESSAGE = "Finalizing results..."


class _ProgressCallbackError(Exception):
    """Carries an error raised by the progress callback out of the retry loop."""

    def __init__(self, error: Exception):
        super().__init__(error)
        self.error = error


def _ignore_progress(progress: float, message: str) -> None:
    pass


class Orchestrator:
    """
    Runs one analysis over a document, one chunk at a time.

    The document is split into word-bounded chunks. Each chunk becomes one
    model request, retried on transient failures. Detection modes collect
    findings from every chunk and map them back onto the full text; rewrite
    modes join the rewritten chunks with single spaces.

    The run is all-or-nothing: a failure on any chunk raises
    :class:`UserFacingError` and discards the work done so far.

    Example:
        >>> orchestrator = Orchestrator(llm, chunk_size=2000)
        >>> result = orchestrator.run(AnalysisMode.PLAGIARISM, text)
        >>> print(result.overall_score)
    """

    def __init__(
        self,
        llm: BaseLLM,
        chunk_size: int = 2000,
        max_attempts: int = MAX_ATTEMPTS,
        initial_delay: float = INITIAL_DELAY,
        temperature: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the orchestrator.

        Args:
            llm: LLM backend shared by every request.
            chunk_size: Maximum number of words per request.
            max_attempts: Attempts per request, including the first.
            initial_delay: Seconds before the first retry; doubles each retry.
            temperature: Optional temperature override for the LLM.
            sleep: Function used to wait between retries.
        """
        self.llm = llm
        self.chunk_size = chunk_size
        self.max_attempts = max_attempts
        self.initial_delay = initial_delay
        self.temperature = temperature
        self.sleep = sleep

    def run(
        self,
        mode: Union[AnalysisMode, str],
        text: str,
        options: Optional[AnalysisOptions] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> Union[AnalysisResult, RewriteResult]:
        """
        Analyze a document.

        Args:
            mode: Which analysis to run.
            text: The full document.
            options: Prompt options. Defaults are used when omitted.
            on_progress: Called with (percent complete, status message).

        Returns:
            AnalysisResult for detection modes, RewriteResult for rewrite modes.

        Raises:
            UserFacingError: If any chunk fails or returns an unparseable response.
        """
        strategy = get_strategy(mode)
        options = options or AnalysisOptions()
        on_progress = on_progress or _ignore_progress

        chunks = chunk_text(text, self.chunk_size)
        total = len(chunks)
        outputs = []

        logger.info(f"Running {strategy.mode.value} on {total} chunk(s)")

        for i, chunk in enumerate(chunks):
            progress = (i + 1) / total * 100
            message = strategy.progress_message(i, total)
            on_progress(progress, message)

            response = self._call(strategy, chunk, options, progress, message, on_progress)

            try:
                parsed = strategy.parse_response(response)
            except ValueError as e:
                logger.error(f"Invalid response for chunk {i + 1}/{total}: {e}")
                raise UserFacingError(INVALID_RESPONSE_MESSAGE) from e

            strategy.accumulate(outputs, parsed)

        on_progress(100, FINALIZING_MESSAGE)

        return strategy.finalize(text, outputs, total)

    def _call(
        self,
        strategy: ModeStrategy,
        chunk: str,
        options: AnalysisOptions,
        progress: float,
        message: str,
        on_progress: ProgressCallback,
    ) -> str:
        """Send one chunk to the model, translating terminal failures."""
        request = strategy.build_request(chunk, options)

        def on_retry(attempt: int) -> None:
            try:
                on_progress(
                    progress,
                    f"{message} (Network issue, retrying attempt {attempt + 1}/{self.max_attempts})",
                )
            except Exception as e:
                raise _ProgressCallbackError(e) from e

        try:
            return call_with_retry(
                self.llm.generate,
                prompt=request.prompt,
                system=request.system,
                temperature=self.temperature,
                response_schema=request.response_schema,
                max_attempts=self.max_attempts,
                initial_delay=self.initial_delay,
                on_retry=on_retry,
                sleep=self.sleep,
            )
        except _ProgressCallbackError as e:
            # Errors from the progress callback propagate untranslated
            raise e.error from None
        except UserFacingError:
            raise
        except Exception as e:
            raise to_user_facing_error(e) from e

    def __repr__(self) -> str:
        return (
            f"Orchestrator(llm={self.llm!r}, chunk_size={self.chunk_size}, "
            f"max_attempts={self.max_attempts})"
        )
