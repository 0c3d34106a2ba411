"""
Interview Metrics: evaluation and emotion analysis for AI interview practice.

ROUGE and n-gram perplexity scoring of generated text, plus keyword and
feature based emotion analysis of interview transcripts.
"""

__version__ = "1.0.0"

# Main entry points
from .evaluation import (
    RougeScores, PerplexityResult, calculate_rouge, calculate_perplexity,
    calculate_perplexity_from_log_probs, batch_evaluate, compare_metrics
)
from .interview import (
    TranscriptMessage, EmotionAnalysisResult, extract_emotions,
    analyze_emotions, analyze_text_emotions, format_emotion_analysis_report
)

__all__ = [
    "RougeScores", "PerplexityResult", "calculate_rouge", "calculate_perplexity",
    "calculate_perplexity_from_log_probs", "batch_evaluate", "compare_metrics",
    "TranscriptMessage", "EmotionAnalysisResult", "extract_emotions",
    "analyze_emotions", "analyze_text_emotions", "format_emotion_analysis_report",
]
