"""
Markdown rendering of emotion analysis results.
"""
from typing import List, Optional, Sequence, Tuple

from .. import config
from .models import EmotionAnalysisResult, EmotionalTrends


def _percent(value: float) -> str:
    return f"{value * 100:.1f}%"


def _trend_line(trends: EmotionalTrends) -> str:
    if trends.improving:
        return "✅ **Improving**: Confidence increased during the interview"
    if trends.declining:
        return "⚠️ **Declining**: Confidence decreased during the interview"
    return "➡️ **Stable**: Confidence remained relatively constant"


def format_emotion_analysis_report(result: EmotionAnalysisResult,
                                   title: str = "Emotional Analysis Report") -> str:
    """
    Render an analysis result as a markdown report.

    Sections always appear in the same order: overall metrics, dominant
    emotions, trend, insights, recommendations, per-message breakdown.

    Args:
        result: Feature-based or text-based analysis result
        title: Top-level heading

    Returns:
        Markdown text ending with a newline
    """
    lines: List[str] = [f"# {title}", ""]

    lines += [
        "## Overall Metrics",
        "",
        f"- **Overall Confidence**: {_percent(result.overall_confidence)}",
        f"- **Average Calmness**: {_percent(result.average_calmness)}",
        f"- **Emotional Stability**: {_percent(result.emotional_stability)}",
        "",
    ]

    lines += ["## Dominant Emotions", ""]
    if result.dominant_emotions:
        for entry in result.dominant_emotions:
            lines.append(
                f"- **{entry.emotion}**: {_percent(entry.average_intensity)} "
                f"(appeared {entry.occurrence_count} times)"
            )
    else:
        lines.append("No dominant emotions detected.")
    lines.append("")

    lines += ["## Emotional Trends", "", _trend_line(result.emotional_trends), ""]

    lines += ["## Insights", ""]
    lines += [f"- {insight}" for insight in result.insights]
    lines.append("")

    lines += ["## Recommendations", ""]
    if result.recommendations:
        lines += [f"- {recommendation}" for recommendation in result.recommendations]
    else:
        lines.append("- No specific recommendations at this time.")
    lines.append("")

    lines += ["## Detailed Breakdown", ""]
    for entry in result.detailed_breakdown:
        lines += [
            f"### Message {entry.message_index}",
            "",
            f'**Text**: "{entry.text}"',
            "",
            f"**Emotional State**: {entry.emotional_state.value}",
            f"**Confidence Score**: {_percent(entry.confidence_score)}",
            "",
            "**Emotions**:",
        ]
        top_emotions = sorted(entry.emotions.items(), key=lambda item: item[1], reverse=True)
        for emotion, intensity in top_emotions[:config.REPORT_EMOTIONS_PER_MESSAGE]:
            lines.append(f"- {emotion}: {_percent(intensity)}")
        lines.append("")

    return "\n".join(lines) + "\n"


def format_text_emotion_analysis_report(result: EmotionAnalysisResult) -> str:
    """Render a keyword-based analysis result as a markdown report."""
    return format_emotion_analysis_report(result, title="Text-Based Emotional Analysis Report")


def format_combined_report(title: str, named_reports: Sequence[Tuple[str, str]],
                           intro: Optional[str] = None) -> str:
    """Join several named markdown reports under one heading."""
    parts = [f"# {title}\n\n"]
    if intro:
        parts.append(f"{intro}\n\n---\n\n")
    for index, (name, report) in enumerate(named_reports):
        parts.append(f"\n## Test Case {index + 1}: {name}\n\n")
        parts.append(report)
        parts.append("\n---\n")
    return "".join(parts)
