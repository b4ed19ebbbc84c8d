"""Core data models for humanizex.

This module contains the dataclasses shared by the orchestrator, the
reconstructor and the exporters: model findings, highlighted segments of
the original text, and the results returned to callers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class AnalysisMode(str, Enum):
    """The kinds of analysis a document can be submitted for."""

    PLAGIARISM = "PLAGIARISM"
    AI_DETECTION = "AI_DETECTION"
    HUMANIZE = "HUMANIZE"
    SUMMARIZE = "SUMMARIZE"


def _require(data: dict, key: str, kind):
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    if key not in data:
        raise ValueError(f"Missing required field: {key!r}")
    value = data[key]
    # bool is a subclass of int; keep booleans out of numeric fields
    if kind is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Field {key!r} must be a number, got {value!r}")
        return float(value)
    if not isinstance(value, kind):
        raise ValueError(f"Field {key!r} must be {kind.__name__}, got {value!r}")
    return value


@dataclass(frozen=True)
class Segment:
    """
    A contiguous piece of the original text.

    Attributes:
        text: The exact characters of the original text covered by this segment.
        flagged: True if a finding matched this segment.
        source: Suspected original source (plagiarism findings only).
        score: Confidence of the finding that flagged this segment.
    """

    text: str
    flagged: bool = False
    source: Optional[str] = None
    score: Optional[float] = None

    def to_dict(self) -> dict:
        d = {"text": self.text, "flagged": self.flagged}
        if self.source is not None:
            d["source"] = self.source
        if self.score is not None:
            d["score"] = self.score
        return d


@dataclass(frozen=True)
class PlagiarismFinding:
    """A passage the model believes was copied from a web source."""

    plagiarized_text: str
    source_url: str
    confidence_score: float

    @classmethod
    def from_dict(cls, data: dict) -> "PlagiarismFinding":
        """Build a finding from one object of the model's JSON array."""
        return cls(
            plagiarized_text=_require(data, "plagiarized_text", str),
            source_url=_require(data, "source_url", str),
            confidence_score=_require(data, "confidence_score", float),
        )

    @property
    def matched_text(self) -> str:
        return self.plagiarized_text

    @property
    def is_flagged(self) -> bool:
        return True

    def to_segment(self) -> Segment:
        return Segment(
            text=self.plagiarized_text,
            flagged=True,
            source=self.source_url,
            score=self.confidence_score,
        )


@dataclass(frozen=True)
class AiDetectionFinding:
    """A passage the model evaluated for signs of AI generation."""

    text_segment: str
    is_ai_generated: bool
    confidence_score: float

    @classmethod
    def from_dict(cls, data: dict) -> "AiDetectionFinding":
        """Build a finding from one object of the model's JSON array."""
        return cls(
            text_segment=_require(data, "text_segment", str),
            is_ai_generated=_require(data, "is_ai_generated", bool),
            confidence_score=_require(data, "confidence_score", float),
        )

    @property
    def matched_text(self) -> str:
        return self.text_segment

    @property
    def is_flagged(self) -> bool:
        return self.is_ai_generated

    def to_segment(self) -> Segment:
        return Segment(text=self.text_segment, flagged=True, score=self.confidence_score)


@dataclass(frozen=True)
class AnalysisResult:
    """
    Result of a detection analysis (plagiarism or AI content).

    Attributes:
        overall_score: Percentage (0-100) of the text covered by findings.
        segments: Ordered segments partitioning the original text.
    """

    overall_score: int
    segments: tuple[Segment, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        """Return the original text, rebuilt from the segments."""
        return "".join(s.text for s in self.segments)

    @property
    def flagged_segments(self) -> list[Segment]:
        """Return only the flagged segments, in order."""
        return [s for s in self.segments if s.flagged]

    def to_dict(self) -> dict:
        return {
            "overall_score": self.overall_score,
            "segments": [s.to_dict() for s in self.segments],
        }


@dataclass(frozen=True)
class RewriteResult:
    """Result of a rewrite analysis (humanize or summarize)."""

    text: str
    n_chunks: int = 1

    def __str__(self) -> str:
        return self.text

    def to_dict(self) -> dict:
        return {"text": self.text, "n_chunks": self.n_chunks}
