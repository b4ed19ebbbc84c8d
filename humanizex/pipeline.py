"""High-level entry points for document analysis."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd
from tqdm import tqdm

from humanizex.config import AnalysisOptions, HumanizeXConfig
from humanizex.core.orchestrator import Orchestrator, ProgressCallback
from humanizex.errors import UserFacingError
from humanizex.io.loaders import extract_texts, load_texts
from humanizex.llm.base import BaseLLM
from humanizex.models import AnalysisMode, AnalysisResult, RewriteResult
from humanizex.utils import limit_text

logger = logging.getLogger(__name__)


@dataclass
class BatchItem:
    """
    Outcome of analyzing one document in a batch.

    Attributes:
        id: Identifier of the document (row ID or index).
        text: The text that was analyzed, after size limits.
        result: The analysis result, or None if the analysis failed.
        error: User-facing error message if the analysis failed.
        truncated: True if the document was cut to fit the size limits.
    """

    id: Any
    text: str
    result: Optional[Union[AnalysisResult, RewriteResult]] = None
    error: Optional[str] = None
    truncated: bool = False

    @property
    def succeeded(self) -> bool:
        return self.error is None


class HumanizeXPipeline:
    """
    Facade over the orchestrator for every analysis mode.

    The LLM backend is created once, on first use, from ``config.llm`` and
    shared by every request the pipeline makes. A ready-made backend can be
    injected instead.

    Example:
        >>> pipeline = HumanizeXPipeline()
        >>> result = pipeline.check_plagiarism(text, sensitivity="high")
        >>> print(f"{result.overall_score}% flagged")
    """

    def __init__(
        self,
        config: Optional[HumanizeXConfig] = None,
        llm: Optional[BaseLLM] = None,
        llm_model: Optional[str] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Full configuration object. If not provided, uses defaults.
            llm: Backend to use instead of creating one from the configuration.
            llm_model: Override LLM model name.
        """
        self.config = config or HumanizeXConfig()

        if llm_model:
            self.config.llm.model = llm_model

        self._llm = llm
        self._orchestrator = None

    @property
    def llm(self) -> BaseLLM:
        """Get or create LLM backend based on config."""
        if self._llm is None:
            self._llm = self.config.llm.create_backend()
            logger.info(f"Using LLM backend: {self._llm!r}")
        return self._llm

    @property
    def orchestrator(self) -> Orchestrator:
        """Get or create the orchestrator."""
        if self._orchestrator is None:
            self._orchestrator = Orchestrator(
                llm=self.llm,
                chunk_size=self.config.chunking.chunk_size,
                max_attempts=self.config.retry.max_attempts,
                initial_delay=self.config.retry.initial_delay,
            )
        return self._orchestrator

    def prepare_text(self, text: str) -> tuple[str, bool]:
        """Apply the configured document size limits."""
        text, truncated = limit_text(
            text,
            max_words=self.config.chunking.max_words,
            max_chars=self.config.chunking.max_chars,
        )
        if truncated:
            logger.warning(
                f"Document exceeds size limits; truncated to "
                f"{self.config.chunking.max_words} words / "
                f"{self.config.chunking.max_chars} characters"
            )
        return text, truncated

    def analyze(
        self,
        mode: Union[AnalysisMode, str],
        text: str,
        options: Optional[AnalysisOptions] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> Union[AnalysisResult, RewriteResult]:
        """
        Run any analysis mode on a document.

        Args:
            mode: Which analysis to run.
            text: The document text.
            options: Prompt options.
            on_progress: Called with (percent complete, status message).

        Returns:
            AnalysisResult for detection modes, RewriteResult for rewrite modes.

        Raises:
            UserFacingError: If the analysis fails.
        """
        text, _ = self.prepare_text(text)
        return self.orchestrator.run(mode, text, options=options, on_progress=on_progress)

    def check_plagiarism(
        self,
        text: str,
        sensitivity: str = "medium",
        on_progress: Optional[ProgressCallback] = None,
    ) -> AnalysisResult:
        """Check a document for text copied from web sources."""
        options = AnalysisOptions(plagiarism_sensitivity=sensitivity)
        return self.analyze(AnalysisMode.PLAGIARISM, text, options, on_progress)

    def check_ai_content(
        self,
        text: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> AnalysisResult:
        """Estimate which parts of a document were generated by AI."""
        return self.analyze(AnalysisMode.AI_DETECTION, text, None, on_progress)

    def humanize_text(
        self,
        text: str,
        style: str = "default",
        on_progress: Optional[ProgressCallback] = None,
    ) -> RewriteResult:
        """Rewrite a document in a more natural tone."""
        options = AnalysisOptions(humanize_style=style)
        return self.analyze(AnalysisMode.HUMANIZE, text, options, on_progress)

    def summarize_text(
        self,
        text: str,
        length: str = "medium",
        on_progress: Optional[ProgressCallback] = None,
    ) -> RewriteResult:
        """Summarize a document, chunk by chunk."""
        options = AnalysisOptions(summary_length=length)
        return self.analyze(AnalysisMode.SUMMARIZE, text, options, on_progress)

    def analyze_batch(
        self,
        data: Union[str, Path, pd.DataFrame],
        text_column: str,
        mode: Union[AnalysisMode, str],
        options: Optional[AnalysisOptions] = None,
        id_column: Optional[str] = None,
        verbose: bool = True,
    ) -> list[BatchItem]:
        """
        Analyze every document in a table.

        Each document is analyzed independently: a failed document is
        recorded with its error message and the batch moves on.

        Args:
            data: Path to a CSV/Excel/JSON file or a DataFrame.
            text_column: Name of column containing the documents.
            mode: Which analysis to run.
            options: Prompt options shared by every document.
            id_column: Optional name of ID column.
            verbose: If True, show a progress bar.

        Returns:
            One BatchItem per row, in order.
        """
        if isinstance(data, pd.DataFrame):
            texts, ids = extract_texts(data, text_column=text_column, id_column=id_column)
        else:
            texts, ids = load_texts(data, text_column=text_column, id_column=id_column)

        rows = zip(ids, texts)
        if verbose:
            rows = tqdm(rows, desc="  Analyzing documents", total=len(texts), unit="doc")

        items = []
        for doc_id, text in rows:
            text, truncated = self.prepare_text(text)
            item = BatchItem(id=doc_id, text=text, truncated=truncated)
            try:
                item.result = self.orchestrator.run(mode, text, options=options)
            except UserFacingError as e:
                logger.warning(f"Document {doc_id} failed: {e.message}")
                item.error = e.message
            items.append(item)

        failed = sum(1 for item in items if not item.succeeded)
        logger.info(f"Analyzed {len(items)} documents ({failed} failed)")

        return items

    def __repr__(self) -> str:
        return f"HumanizeXPipeline(backend={self.config.llm.backend}, model={self.config.llm.model})"
