"""
humanizex: plagiarism checks, AI-content detection, humanizing and summarizing with LLMs.

Long documents are split into chunks, each chunk is sent to the model with
retries, and the findings are mapped back onto the original text.
"""

__version__ = "0.1.0"

from humanizex.config import AnalysisOptions, HumanizeXConfig
from humanizex.errors import UserFacingError
from humanizex.models import (
    AnalysisMode,
    AnalysisResult,
    RewriteResult,
    Segment,
    PlagiarismFinding,
    AiDetectionFinding,
)
from humanizex.core.orchestrator import Orchestrator
from humanizex.core.reconstructor import reconstruct
from humanizex.pipeline import HumanizeXPipeline

__all__ = [
    "AnalysisOptions",
    "HumanizeXConfig",
    "HumanizeXPipeline",
    "Orchestrator",
    "UserFacingError",
    "AnalysisMode",
    "AnalysisResult",
    "RewriteResult",
    "Segment",
    "PlagiarismFinding",
    "AiDetectionFinding",
    "reconstruct",
]
