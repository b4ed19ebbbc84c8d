"""Result export utilities for humanizex."""

import json
import logging
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from humanizex import __version__
from humanizex.config import AnalysisOptions
from humanizex.models import AnalysisMode, AnalysisResult, RewriteResult

logger = logging.getLogger(__name__)


def export_result_json(
    result: Union[AnalysisResult, RewriteResult],
    path: Union[str, Path],
    mode: Union[AnalysisMode, str],
    original_text: str,
    options: Optional[AnalysisOptions] = None,
    indent: int = 2,
) -> Path:
    """
    Export an analysis result to JSON.

    Args:
        result: Result returned by the pipeline.
        path: Output file path.
        mode: The analysis mode that produced the result.
        original_text: The analyzed text.
        options: Options the analysis ran with.
        indent: JSON indentation.

    Returns:
        Path to exported file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "mode": AnalysisMode(mode).value,
        "original_text": original_text,
        "options": asdict(options or AnalysisOptions()),
        "result": result.to_dict(),
        "_export_info": {
            "exported_at": datetime.now().isoformat(),
            "humanizex_version": __version__,
        },
    }

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False, default=str)

    logger.info(f"Exported result to {path}")

    return path


def export_segments_csv(result: AnalysisResult, path: Union[str, Path]) -> Path:
    """
    Export the segments of a detection result, one row per segment.

    Columns: position, text, flagged, source, score, start, end. ``start``
    and ``end`` are character offsets into the original text.

    Args:
        result: Detection result.
        path: Output file path.

    Returns:
        Path to exported file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    rows = []
    offset = 0
    for position, segment in enumerate(result.segments):
        rows.append({
            "position": position,
            "text": segment.text,
            "flagged": segment.flagged,
            "source": segment.source or "",
            "score": segment.score,
            "start": offset,
            "end": offset + len(segment.text),
        })
        offset += len(segment.text)

    df = pd.DataFrame(
        rows, columns=["position", "text", "flagged", "source", "score", "start", "end"]
    )
    df.to_csv(path, index=False)

    logger.info(f"Exported {len(rows)} segments to {path}")

    return path


def export_batch_csv(items: list, path: Union[str, Path]) -> Path:
    """
    Export a batch run, one row per document.

    Detection results contribute ``overall_score`` and ``n_flagged``;
    rewrite results contribute ``output_text``.

    Args:
        items: BatchItem objects from HumanizeXPipeline.analyze_batch.
        path: Output file path.

    Returns:
        Path to exported file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    rows = []
    for item in items:
        row = {
            "id": item.id,
            "truncated": item.truncated,
            "error": item.error or "",
            "overall_score": None,
            "n_flagged": None,
            "output_text": "",
        }
        if isinstance(item.result, AnalysisResult):
            row["overall_score"] = item.result.overall_score
            row["n_flagged"] = len(item.result.flagged_segments)
        elif isinstance(item.result, RewriteResult):
            row["output_text"] = item.result.text
        rows.append(row)

    pd.DataFrame(rows).to_csv(path, index=False)

    logger.info(f"Exported {len(rows)} batch results to {path}")

    return path
