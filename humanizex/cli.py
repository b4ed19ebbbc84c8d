"""Command-line interface for humanizex."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from humanizex import HumanizeXPipeline, HumanizeXConfig
from humanizex.config import (
    HUMANIZE_STYLES,
    PLAGIARISM_SENSITIVITIES,
    SUMMARY_LENGTHS,
    AnalysisOptions,
)
from humanizex.errors import UNEXPECTED_MESSAGE, UserFacingError
from humanizex.io import (
    export_batch_csv,
    export_result_json,
    export_segments_csv,
    load_text_file,
)
from humanizex.models import AnalysisMode, AnalysisResult
from humanizex.utils import format_time, truncate_text

logger = logging.getLogger(__name__)

COMMAND_MODES = {
    "plagiarism": AnalysisMode.PLAGIARISM,
    "ai-detect": AnalysisMode.AI_DETECTION,
    "humanize": AnalysisMode.HUMANIZE,
    "summarize": AnalysisMode.SUMMARIZE,
}


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging for CLI.

    Args:
        verbose: If True, show INFO level logs.
        debug: If True, show DEBUG level logs (includes LLM prompts/responses).
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S",
    )


def create_output_dir(base_dir: Path, timestamp: datetime) -> Path:
    """Create timestamped output directory."""
    dirname = timestamp.strftime("%Y%m%d-%H%M%S")
    output_dir = base_dir / dirname
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def build_config(args: argparse.Namespace) -> HumanizeXConfig:
    """Build the pipeline configuration from parsed arguments."""
    config = HumanizeXConfig()

    config.llm.backend = args.backend
    if args.llm_model:
        config.llm.model = args.llm_model
    elif args.backend == "gemini":
        config.llm.model = "gemini-2.5-flash"
    elif args.backend == "cerebras":
        config.llm.model = "llama-3.3-70b"
    if args.base_url:
        config.llm.base_url = args.base_url
    if args.debug:
        config.llm.debug = True
    if args.chunk_size:
        config.chunking.chunk_size = args.chunk_size
    if args.max_attempts:
        config.retry.max_attempts = args.max_attempts

    return config


def build_options(args: argparse.Namespace) -> AnalysisOptions:
    """Collect the mode-specific prompt options from parsed arguments."""
    return AnalysisOptions.from_dict({
        "plagiarism_sensitivity": getattr(args, "sensitivity", None),
        "humanize_style": getattr(args, "style", None),
        "summary_length": getattr(args, "length", None),
    })


def print_result(result) -> None:
    """Print a short human-readable report to stdout."""
    if isinstance(result, AnalysisResult):
        flagged = result.flagged_segments
        print(f"Overall score: {result.overall_score}%")
        print(f"Flagged segments: {len(flagged)}")
        for segment in flagged:
            details = []
            if segment.score is not None:
                details.append(f"confidence {segment.score:.2f}")
            if segment.source:
                details.append(segment.source)
            suffix = f" ({', '.join(details)})" if details else ""
            print(f"  - {truncate_text(segment.text, 80)!r}{suffix}")
    else:
        print(result.text)


def run_single(
    args: argparse.Namespace,
    pipeline: HumanizeXPipeline,
    mode: AnalysisMode,
    options: AnalysisOptions,
    output_dir: Path,
) -> int:
    """Analyze one document read from a file or stdin."""
    try:
        text = load_text_file(args.file)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1

    text, truncated = pipeline.prepare_text(text)
    if truncated:
        print("Warning: document was truncated to fit the size limits.", file=sys.stderr)

    with tqdm(total=100, desc="  Analyzing", unit="%", disable=args.quiet) as bar:

        def on_progress(progress: float, message: str) -> None:
            bar.set_postfix_str(message)
            bar.update(max(0.0, progress - bar.n))

        result = pipeline.orchestrator.run(mode, text, options=options, on_progress=on_progress)

    print_result(result)

    json_path = export_result_json(
        result, output_dir / "result.json", mode=mode, original_text=text, options=options
    )
    logger.info(f"  Saved: {json_path.name}")

    if isinstance(result, AnalysisResult):
        csv_path = export_segments_csv(result, output_dir / "segments.csv")
        logger.info(f"  Saved: {csv_path.name}")

    return 0


def run_batch(
    args: argparse.Namespace,
    pipeline: HumanizeXPipeline,
    mode: AnalysisMode,
    options: AnalysisOptions,
    output_dir: Path,
) -> int:
    """Analyze every document in a CSV/Excel/JSON table."""
    try:
        items = pipeline.analyze_batch(
            data=args.data,
            text_column=args.text_column,
            mode=mode,
            options=options,
            id_column=args.id_column,
            verbose=not args.quiet,
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    path = export_batch_csv(items, output_dir / "batch_results.csv")
    failed = sum(1 for item in items if not item.succeeded)
    print(f"Analyzed {len(items)} documents ({failed} failed). Results: {path}")

    return 0 if failed == 0 else 1


def run_analysis(args: argparse.Namespace) -> int:
    """Run one analysis command."""
    start_time = datetime.now()

    setup_logging(verbose=args.verbose, debug=args.debug)

    mode = COMMAND_MODES[args.command]
    options = build_options(args)
    config = build_config(args)

    if args.data and not args.text_column:
        logger.error("--text-column is required with --data")
        return 1

    output_dir = create_output_dir(Path(args.output_dir), start_time)

    logger.info(f"Mode: {mode.value}")
    logger.info(f"  Backend: {config.llm.backend} ({config.llm.model})")
    logger.info(f"  Chunk size: {config.chunking.chunk_size} words")
    logger.info(f"  Output directory: {output_dir}")

    try:
        pipeline = HumanizeXPipeline(config=config)
        if not pipeline.llm.is_available():
            logger.error(f"LLM backend '{config.llm.backend}' is not available.")
            return 1

        if args.data:
            status = run_batch(args, pipeline, mode, options, output_dir)
        else:
            status = run_single(args, pipeline, mode, options, output_dir)
    except (ImportError, ValueError) as e:
        logger.error(str(e))
        return 1
    except UserFacingError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Analysis failed")
        print(f"Error: {UNEXPECTED_MESSAGE}", file=sys.stderr)
        return 1

    duration = (datetime.now() - start_time).total_seconds()
    logger.info(f"Duration: {format_time(duration)}")

    return status


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "-f", "--file",
        help="Path to a text document, or '-' to read standard input",
    )
    source.add_argument(
        "-d", "--data",
        help="Path to a table of documents (CSV, Excel, or JSON) for batch analysis",
    )
    parser.add_argument(
        "-t", "--text-column",
        help="Name of column containing the documents (required with --data)",
    )
    parser.add_argument(
        "-i", "--id-column",
        help="Name of ID column (optional, with --data)",
    )
    parser.add_argument(
        "-o", "--output-dir",
        default="./output",
        help="Output directory (default: ./output)",
    )

    parser.add_argument(
        "--backend",
        choices=["ollama", "gemini", "cerebras"],
        default="ollama",
        help="LLM backend (default: ollama)",
    )
    parser.add_argument(
        "-m", "--llm-model",
        help="LLM model name (default: depends on backend)",
    )
    parser.add_argument(
        "--base-url",
        help="Base URL of the Ollama server (default: http://localhost:11434)",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        help="Maximum words per request (default: 2000)",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        help="Attempts per request on transient failures (default: 3)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Hide progress bars",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (shows all LLM prompts and responses)",
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="humanizex",
        description="humanizex - plagiarism checks, AI-content detection, humanizing and summarizing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  humanizex plagiarism -f essay.txt --sensitivity strict
  humanizex ai-detect -f essay.txt --backend gemini
  humanizex humanize -f draft.txt --style casual
  humanizex summarize -d articles.csv -t body -i id --length short
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    plagiarism_parser = subparsers.add_parser(
        "plagiarism", help="Check a document for text copied from web sources"
    )
    _add_common_arguments(plagiarism_parser)
    plagiarism_parser.add_argument(
        "-s", "--sensitivity",
        choices=PLAGIARISM_SENSITIVITIES,
        default="medium",
        help="Plagiarism sensitivity (default: medium)",
    )

    ai_parser = subparsers.add_parser(
        "ai-detect", help="Estimate which parts of a document were written by AI"
    )
    _add_common_arguments(ai_parser)

    humanize_parser = subparsers.add_parser(
        "humanize", help="Rewrite a document in a more natural tone"
    )
    _add_common_arguments(humanize_parser)
    humanize_parser.add_argument(
        "--style",
        choices=HUMANIZE_STYLES,
        default="default",
        help="Rewrite style (default: default)",
    )

    summarize_parser = subparsers.add_parser("summarize", help="Summarize a document")
    _add_common_arguments(summarize_parser)
    summarize_parser.add_argument(
        "--length",
        choices=SUMMARY_LENGTHS,
        default="medium",
        help="Summary length (default: medium)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return run_analysis(args)


if __name__ == "__main__":
    sys.exit(main())
