#!/usr/bin/env python3
"""
Main entry point for the interview metrics tools.
Allows running the package with: python -m interview_metrics <command>

Commands:
    evaluate <input.json> [output] [--format=json|text]
    emotions <transcript.json> [output] [--text-only]
    demo [output] [--text-only]
"""
import os
import sys
import logging
from typing import List, Optional

from .config import Config, get_config, VALID_REPORT_FORMATS
from .utils.logging import setup_logging
from .evaluation import batch_evaluate, format_evaluation_report
from .interview import (
    analyze_emotions, analyze_text_emotions, create_sample_transcripts,
    format_emotion_analysis_report, format_text_emotion_analysis_report, format_combined_report
)
from .infrastructure.data import (
    EvaluationInputError, load_evaluation_file, load_transcript_file, save_json, save_text
)

logger = logging.getLogger("cli")

USAGE = """Usage:
  python -m interview_metrics evaluate <input.json> [output] [--format=json|text]
  python -m interview_metrics emotions <transcript.json> [output] [--text-only]
  python -m interview_metrics demo [output] [--text-only]"""


def _fail(message: str) -> None:
    print(f"❌ {message}")
    sys.exit(1)


def _default_report_path(input_path: str, report_format: str) -> str:
    base, _ = os.path.splitext(input_path)
    extension = ".json" if report_format == "json" else ".txt"
    return f"{base}-report{extension}"


def run_evaluate(positional: List[str], flags: List[str], config: Config) -> None:
    """Batch ROUGE/perplexity evaluation of a JSON input file."""
    if not positional:
        _fail("Missing input file for 'evaluate'")

    report_format = config.report_format
    for flag in flags:
        if flag.startswith("--format="):
            report_format = flag.split("=", 1)[1].lower()
            if report_format not in VALID_REPORT_FORMATS:
                _fail(f"Invalid format value. Use --format={' or --format='.join(VALID_REPORT_FORMATS)}")

    input_path = positional[0]
    output_path = positional[1] if len(positional) > 1 else _default_report_path(input_path, report_format)

    candidates = load_evaluation_file(input_path)
    print(f"📊 Evaluating {len(candidates)} candidate(s) from {input_path}")

    batch = batch_evaluate(candidates, ngram_order=config.ngram_order)
    report = format_evaluation_report(batch)
    print(report)

    if report_format == "json":
        save_json(batch.to_dict(), output_path)
    else:
        save_text(report, output_path)
    print(f"\n💾 Results saved to: {output_path}")


def run_emotions(positional: List[str], flags: List[str], config: Config) -> None:
    """Emotion analysis of a single transcript file."""
    if not positional:
        _fail("Missing transcript file for 'emotions'")

    text_only = "--text-only" in flags
    messages = load_transcript_file(positional[0])

    if text_only:
        report = format_text_emotion_analysis_report(analyze_text_emotions(messages))
    else:
        report = format_emotion_analysis_report(analyze_emotions(messages))
    print(report)

    if len(positional) > 1:
        save_text(report, positional[1])
        print(f"\n💾 Report saved to: {positional[1]}")


def run_demo(positional: List[str], flags: List[str], config: Config) -> None:
    """Analyze the bundled sample transcripts and write a combined report."""
    text_only = "--text-only" in flags

    if text_only:
        title = "Text-Based Emotional Analysis Test Results"
        intro = (
            "This report was generated using text-based emotion analysis.\n\n"
            "The analysis uses keyword matching, sentiment analysis, and pattern recognition to detect emotions."
        )
        default_name = "text-emotion-analysis-test-results.md"
    else:
        title = "Emotional Analysis Test Results"
        intro = None
        default_name = "emotion-analysis-test-results.md"

    named_reports = []
    for name, messages in create_sample_transcripts(with_features=not text_only):
        print(f"\n{'=' * 60}")
        print(f"Test Case: {name}")
        print('=' * 60 + "\n")

        if text_only:
            report = format_text_emotion_analysis_report(analyze_text_emotions(messages))
        else:
            report = format_emotion_analysis_report(analyze_emotions(messages))
        print(report)
        named_reports.append((name, report))

    output_path = positional[0] if positional else os.path.join(config.output_dir, default_name)
    save_text(format_combined_report(title, named_reports, intro), output_path)
    print(f"\n💾 All test results saved to: {output_path}")


COMMANDS = {
    "evaluate": run_evaluate,
    "emotions": run_emotions,
    "demo": run_demo,
}


def main(argv: Optional[List[str]] = None):
    """Command-line interface for evaluation and emotion analysis."""
    args = sys.argv[1:] if argv is None else argv

    if not args or args[0] in ("-h", "--help"):
        print(USAGE)
        sys.exit(0 if args else 1)

    command = args[0]
    if command not in COMMANDS:
        print(USAGE)
        _fail(f"Unknown command: {command}")

    # Load configuration from environment
    try:
        config = get_config()
    except ValueError as e:
        _fail(f"Configuration Error: {e}")

    setup_logging(config.log_file, console_level=config.log_level_value)
    logger.info(f"Running command '{command}'")

    positional = [arg for arg in args[1:] if not arg.startswith("--")]
    flags = [arg for arg in args[1:] if arg.startswith("--")]

    try:
        COMMANDS[command](positional, flags, config)
    except EvaluationInputError as e:
        logger.error(str(e))
        _fail(str(e))


if __name__ == "__main__":
    main()
