"""Evaluation metrics for AI-generated text.

ROUGE overlap scoring, n-gram self-perplexity, markdown section
extraction and batch comparison of evaluation runs.
"""

from .rouge import RougeScores, calculate_rouge
from .perplexity import (
    PerplexityResult, calculate_perplexity, calculate_perplexity_from_log_probs
)
from .schemas import EvaluationCandidate
from .models import (
    EvaluationResult, BatchEvaluationResult, LabeledScore, ComparisonRow, MetricsComparison
)
from .sections import (
    INTERVIEW_FEEDBACK_CATEGORIES, extract_markdown_section, extract_feedback_section,
    extract_correct_answer_section, extract_interview_categories,
    extract_resume_category_summary, extract_resume_category_feedback
)
from .batch import evaluate_text, evaluate_section, batch_evaluate, compare_metrics
from .reports import format_evaluation_result, format_evaluation_report, format_metrics_comparison

__all__ = [
    # Metrics
    "RougeScores", "calculate_rouge",
    "PerplexityResult", "calculate_perplexity", "calculate_perplexity_from_log_probs",
    
    # Batch evaluation
    "EvaluationCandidate", "EvaluationResult", "BatchEvaluationResult",
    "LabeledScore", "ComparisonRow", "MetricsComparison",
    "evaluate_text", "evaluate_section", "batch_evaluate", "compare_metrics",
    
    # Sections
    "INTERVIEW_FEEDBACK_CATEGORIES", "extract_markdown_section", "extract_feedback_section",
    "extract_correct_answer_section", "extract_interview_categories",
    "extract_resume_category_summary", "extract_resume_category_feedback",
    
    # Reports
    "format_evaluation_result", "format_evaluation_report", "format_metrics_comparison",
]
