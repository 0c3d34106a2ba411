import unittest

from interview_metrics.evaluation import (
    BatchEvaluationResult, batch_evaluate, compare_metrics, format_evaluation_report,
    format_evaluation_result, format_metrics_comparison, evaluate_text
)
from interview_metrics.interview import (
    EmotionAnalysisResult, analyze_emotions, analyze_text_emotions, create_sample_transcripts,
    format_combined_report, format_emotion_analysis_report, format_text_emotion_analysis_report
)

SECTION_ORDER = [
    "## Overall Metrics",
    "## Dominant Emotions",
    "## Emotional Trends",
    "## Insights",
    "## Recommendations",
    "## Detailed Breakdown",
]


class EmotionReportTests(unittest.TestCase):
    def setUp(self) -> None:
        _, messages = create_sample_transcripts()[0]
        self.result = analyze_emotions(messages)
        self.report = format_emotion_analysis_report(self.result)

    def test_sections_in_fixed_order(self) -> None:
        self.assertTrue(self.report.startswith("# Emotional Analysis Report\n\n"))
        positions = [self.report.index(header) for header in SECTION_ORDER]
        self.assertEqual(positions, sorted(positions))

    def test_metrics_rendered_as_percentages(self) -> None:
        self.assertIn("- **Overall Confidence**: 85.0%", self.report)
        self.assertIn("➡️ **Stable**: Confidence remained relatively constant", self.report)
        self.assertIn("- No specific recommendations at this time.", self.report)
        self.assertIn("(appeared 3 times)", self.report)

    def test_breakdown_entries(self) -> None:
        self.assertIn("### Message 1", self.report)
        self.assertIn("### Message 3", self.report)
        self.assertIn("**Emotional State**: confident", self.report)
        self.assertIn("**Confidence Score**: 90.0%", self.report)

    def test_breakdown_lists_top_five_emotions(self) -> None:
        features = {name: value / 10 for value, name in enumerate("abcdefg", start=1)}
        result = analyze_emotions([{"speaker": "interviewee", "text": "hi", "emotionFeatures": features}])
        report = format_emotion_analysis_report(result)
        breakdown = report[report.index("## Detailed Breakdown"):]
        self.assertIn("- g: 70.0%", breakdown)
        self.assertIn("- c: 30.0%", breakdown)
        self.assertNotIn("- b: 20.0%", breakdown)
        self.assertLess(breakdown.index("- g:"), breakdown.index("- c:"))

    def test_empty_result(self) -> None:
        report = format_emotion_analysis_report(EmotionAnalysisResult())
        self.assertIn("No dominant emotions detected.", report)
        self.assertIn("- **Emotional Stability**: 0.0%", report)

    def test_text_report_title_and_trend(self) -> None:
        messages = [
            {"speaker": "interviewee", "text": "It was a difficult problem and the build failed"},
            {"speaker": "interviewee", "text": "I designed and delivered an excellent, great system"},
        ]
        report = format_text_emotion_analysis_report(analyze_text_emotions(messages))
        self.assertTrue(report.startswith("# Text-Based Emotional Analysis Report"))
        self.assertIn("✅ **Improving**", report)

    def test_combined_report(self) -> None:
        combined = format_combined_report("Results", [("One", "# A\n"), ("Two", "# B\n")], intro="Intro")
        self.assertTrue(combined.startswith("# Results\n\nIntro\n\n---\n\n"))
        self.assertIn("## Test Case 1: One", combined)
        self.assertIn("## Test Case 2: Two", combined)
        self.assertEqual(combined.count("\n---\n"), 3)


class EvaluationReportTests(unittest.TestCase):
    def test_single_result(self) -> None:
        text = format_evaluation_result(evaluate_text("hello world", "hello world"))
        self.assertIn("ROUGE Scores:", text)
        self.assertIn("ROUGE-1: P=1.000, R=1.000, F1=1.000", text)
        self.assertIn("Perplexity: 2.50", text)

        without_reference = format_evaluation_result(evaluate_text("hello world"))
        self.assertNotIn("ROUGE", without_reference)
        self.assertIn("Token Count: 2", without_reference)

    def test_batch_report(self) -> None:
        batch = batch_evaluate([
            {"name": "with-ref", "candidate": "the cat sat", "reference": "the cat sat"},
            {"name": "no-ref", "candidate": "hello world"},
        ])
        report = format_evaluation_report(batch)
        self.assertIn("AI Metrics Evaluation Report", report)
        self.assertIn("Total Evaluations: 2", report)
        self.assertIn("Evaluations with ROUGE: 1", report)
        self.assertIn("ROUGE-1 F1: 1.0000", report)
        self.assertIn("ROUGE Scores: Not calculated (no reference provided)", report)
        self.assertLess(report.index("with-ref:"), report.index("no-ref:"))

    def test_empty_batch_report(self) -> None:
        report = format_evaluation_report(BatchEvaluationResult())
        self.assertIn("Total Evaluations: 0", report)
        self.assertIn("Perplexity: Infinity", report)
        self.assertNotIn("ROUGE-1 F1", report)

    def test_comparison_table(self) -> None:
        comparison = compare_metrics([
            ("prompt-a", BatchEvaluationResult(average_rouge1=0.5, average_perplexity=12.0)),
            ("prompt-b", BatchEvaluationResult(average_rouge1=0.7)),
        ])
        text = format_metrics_comparison(comparison)
        self.assertIn("Best ROUGE-1: prompt-b (0.7000)", text)
        self.assertIn("Best ROUGE-2: - (0.0000)", text)
        self.assertIn("Best Perplexity: prompt-a (12.00)", text)


if __name__ == "__main__":
    unittest.main()
