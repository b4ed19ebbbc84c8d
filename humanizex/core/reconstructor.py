"""Map chunk-level findings back onto the original text.

The model reports findings as verbatim quotes rather than character offsets,
so segments are rebuilt by literal substring search over the original text.
Three known limitations follow from this and are kept on purpose:

- A finding whose text does not occur verbatim (e.g. the model paraphrased
  instead of quoting) is silently dropped.
- Matched characters are counted per finding and never deduplicated, so
  overlapping or repeated findings can push the raw total above the text
  length. The score is clamped to 100 at the end.
- A finding with empty text splits every unflagged segment into single
  characters separated by empty flagged markers. It adds no matched
  characters, but later findings can no longer match across those splits.
"""

import logging
import math
from typing import Iterable, Protocol

from humanizex.models import AnalysisResult, Segment

logger = logging.getLogger(__name__)


class Finding(Protocol):
    """Shape shared by every finding type the reconstructor accepts."""

    @property
    def matched_text(self) -> str: ...

    @property
    def is_flagged(self) -> bool: ...

    def to_segment(self) -> Segment: ...


def _split_segment(segment: Segment, finding: Finding) -> tuple[list[Segment], int]:
    """
    Split one unflagged segment on every occurrence of a finding's text.

    Returns:
        Tuple of (replacement segments, number of occurrences).
    """
    needle = finding.matched_text
    if needle:
        parts = segment.text.split(needle)
    else:
        # An empty needle matches between every pair of characters
        parts = list(segment.text)
    occurrences = max(len(parts) - 1, 0)
    if occurrences == 0:
        return [segment], 0

    flagged = finding.to_segment()
    pieces = []
    for i, part in enumerate(parts):
        if part:
            pieces.append(Segment(text=part))
        if i < occurrences:
            pieces.append(flagged)
    return pieces, occurrences


def overall_score(matched_chars: int, text_length: int) -> int:
    """
    Convert a matched-character total into a 0-100 percentage.

    Halves round up, and the result is clamped to 100.
    """
    if text_length <= 0:
        return 0
    percent = min(100.0, matched_chars / text_length * 100)
    return int(math.floor(percent + 0.5))


def reconstruct(original_text: str, findings: Iterable[Finding]) -> AnalysisResult:
    """
    Build highlighted segments and an overall score from model findings.

    Findings are applied in order. Each one splits every still-unflagged
    segment on all literal, non-overlapping occurrences of its text; flagged
    segments are never matched again, so the first finding to cover a span
    wins.

    Args:
        original_text: The full document that was analyzed.
        findings: Findings from all chunks, in chunk order. Findings whose
            ``is_flagged`` is False are ignored.

    Returns:
        AnalysisResult whose segments concatenate back to ``original_text``.

    Example:
        >>> finding = PlagiarismFinding("The cat sat.", "http://x", 0.9)
        >>> result = reconstruct("The cat sat. The cat sat.", [finding])
        >>> result.overall_score
        96
    """
    active = [f for f in findings if f.is_flagged]
    if not active:
        return AnalysisResult(overall_score=0, segments=(Segment(text=original_text),))

    segments = [Segment(text=original_text)]
    matched_chars = 0
    dropped = 0

    for finding in active:
        new_segments = []
        occurrences = 0
        for segment in segments:
            if segment.flagged:
                new_segments.append(segment)
                continue
            pieces, count = _split_segment(segment, finding)
            new_segments.extend(pieces)
            occurrences += count

        if occurrences == 0:
            dropped += 1
        matched_chars += occurrences * len(finding.matched_text)
        segments = new_segments

    if dropped:
        logger.debug(f"{dropped} of {len(active)} findings did not match the text verbatim")

    return AnalysisResult(
        overall_score=overall_score(matched_chars, len(original_text)),
        segments=tuple(segments),
    )
