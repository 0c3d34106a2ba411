"""
Plain-text rendering of evaluation results.
"""
import math
from typing import List

from .models import BatchEvaluationResult, EvaluationResult, MetricsComparison
from .perplexity import PerplexityResult
from .rouge import RougeScores

_RULE_WIDTH = 80


def _format_perplexity(value: float, digits: int = 2) -> str:
    return f"{value:.{digits}f}" if math.isfinite(value) else "Infinity"


def _rouge_lines(scores: RougeScores, indent: str, digits: int) -> List[str]:
    lines = []
    for label, score in (("ROUGE-1", scores.rouge1), ("ROUGE-2", scores.rouge2), ("ROUGE-L", scores.rougeL)):
        lines.append(
            f"{indent}{label}: P={score.precision:.{digits}f}, "
            f"R={score.recall:.{digits}f}, F1={score.f1:.{digits}f}"
        )
    return lines


def _perplexity_lines(result: PerplexityResult, indent: str) -> List[str]:
    return [
        f"{indent}Perplexity: {_format_perplexity(result.perplexity)}",
        f"{indent}Token Count: {result.token_count}",
    ]


def format_evaluation_result(result: EvaluationResult) -> str:
    """Format the metrics of one evaluated text for display."""
    parts: List[str] = []
    if result.rouge_scores is not None:
        parts.append("ROUGE Scores:")
        parts.extend(_rouge_lines(result.rouge_scores, "  ", 3))
    parts.extend(_perplexity_lines(result.perplexity, ""))
    return "\n".join(parts)


def format_evaluation_report(batch: BatchEvaluationResult) -> str:
    """Format a full batch evaluation: summary, averages, then each result."""
    lines: List[str] = [
        "=" * _RULE_WIDTH,
        "AI Metrics Evaluation Report",
        "=" * _RULE_WIDTH,
        "",
        "Summary:",
        f"  Total Evaluations: {batch.total_evaluations}",
        f"  Evaluations with ROUGE: {batch.evaluations_with_rouge}",
        "",
        "Average Scores:",
    ]
    if batch.evaluations_with_rouge > 0:
        lines.append(f"  ROUGE-1 F1: {batch.average_rouge1:.4f}")
        lines.append(f"  ROUGE-2 F1: {batch.average_rouge2:.4f}")
        lines.append(f"  ROUGE-L F1: {batch.average_rougeL:.4f}")
    lines.append(f"  Perplexity: {_format_perplexity(batch.average_perplexity)}")
    lines.append("")

    lines.append("Individual Results:")
    lines.append("-" * _RULE_WIDTH)
    for result in batch.results:
        lines.append(f"\n{result.name}:")
        if result.section:
            lines.append(f"  Section: {result.section}")
        if result.rouge_scores is not None:
            lines.append("  ROUGE Scores:")
            lines.extend(_rouge_lines(result.rouge_scores, "    ", 4))
        else:
            lines.append("  ROUGE Scores: Not calculated (no reference provided)")
        lines.extend(_perplexity_lines(result.perplexity, "  "))

    return "\n".join(lines)


def format_metrics_comparison(comparison: MetricsComparison) -> str:
    """Format a comparison of several labelled runs as a table."""
    lines = [f"{'Run':<30} {'ROUGE-1':>8} {'ROUGE-2':>8} {'ROUGE-L':>8} {'PPL':>10}"]
    for row in comparison.comparison:
        lines.append(
            f"{row.name:<30} {row.rouge1:>8.4f} {row.rouge2:>8.4f} {row.rougeL:>8.4f} "
            f"{_format_perplexity(row.perplexity):>10}"
        )
    lines.append("")
    lines.append(f"Best ROUGE-1: {comparison.best_rouge1.name or '-'} ({comparison.best_rouge1.score:.4f})")
    lines.append(f"Best ROUGE-2: {comparison.best_rouge2.name or '-'} ({comparison.best_rouge2.score:.4f})")
    lines.append(f"Best ROUGE-L: {comparison.best_rougeL.name or '-'} ({comparison.best_rougeL.score:.4f})")
    lines.append(
        f"Best Perplexity: {comparison.best_perplexity.name or '-'} "
        f"({_format_perplexity(comparison.best_perplexity.score)})"
    )
    return "\n".join(lines)
