import math
import unittest

from interview_metrics.evaluation import (
    BatchEvaluationResult, EvaluationCandidate, batch_evaluate, compare_metrics, evaluate_section, evaluate_text
)

FEEDBACK = """## Feedback (Rating: 8/10)
The answer covered indexing well.

## Correct Answer
Use a composite index on user id and created date.
"""


class EvaluateTextTests(unittest.TestCase):
    def test_rouge_only_with_reference(self) -> None:
        self.assertIsNone(evaluate_text("hello world").rouge_scores)
        self.assertIsNone(evaluate_text("hello world", "").rouge_scores)
        scored = evaluate_text("hello world", "hello world")
        self.assertIsNotNone(scored.rouge_scores)
        assert scored.rouge_scores is not None
        self.assertAlmostEqual(scored.rouge_scores.rouge1.f1, 1.0)

    def test_perplexity_always_present(self) -> None:
        self.assertTrue(evaluate_text("hello world").perplexity.is_finite)
        self.assertFalse(evaluate_text("").perplexity.is_finite)

    def test_section_evaluation(self) -> None:
        result = evaluate_section(FEEDBACK, "Correct Answer", "use a composite index")
        self.assertIsNotNone(result)
        assert result is not None
        self.assertEqual(result.section, "Correct Answer")
        self.assertIsNotNone(result.rouge_scores)
        self.assertIsNone(evaluate_section(FEEDBACK, "Missing Header"))

    def test_section_reference_keyword(self) -> None:
        result = evaluate_section(FEEDBACK, "Correct Answer", reference="use a composite index")
        assert result is not None
        self.assertIsNotNone(result.rouge_scores)
        self.assertEqual(result.to_dict(), evaluate_section(FEEDBACK, "Correct Answer", "use a composite index").to_dict())
        self.assertIsNone(evaluate_section(FEEDBACK, "Correct Answer", reference=None).rouge_scores)


class BatchEvaluateTests(unittest.TestCase):
    def test_averages_and_counts(self) -> None:
        batch = batch_evaluate([
            {"name": "exact", "candidate": "the cat sat on the mat", "reference": "the cat sat on the mat"},
            {"name": "disjoint", "candidate": "hello world", "reference": "goodbye universe"},
            EvaluationCandidate(text="no reference here"),
        ])
        self.assertEqual(batch.total_evaluations, 3)
        self.assertEqual(batch.evaluations_with_rouge, 2)
        self.assertAlmostEqual(batch.average_rouge1, 0.5)
        self.assertAlmostEqual(batch.average_rouge2, 0.5)
        self.assertAlmostEqual(batch.average_rougeL, 0.5)
        self.assertTrue(math.isfinite(batch.average_perplexity))
        self.assertEqual([result.name for result in batch.results], ["exact", "disjoint", "evaluation-3"])

    def test_missing_sections_are_skipped(self) -> None:
        batch = batch_evaluate([
            {"name": "answer", "candidate": FEEDBACK, "section": "Correct Answer",
             "reference": "Use a composite index on user id and created date."},
            {"name": "nothing", "candidate": FEEDBACK, "section": "Summary"},
        ])
        self.assertEqual(batch.total_evaluations, 1)
        self.assertEqual(batch.results[0].name, "answer")
        self.assertEqual(batch.results[0].section, "Correct Answer")
        self.assertAlmostEqual(batch.average_rouge1, 1.0)

    def test_malformed_candidates_are_skipped(self) -> None:
        with self.assertLogs("evaluation_batch", level="WARNING"):
            batch = batch_evaluate([{"reference": "no text"}, {"text": "fine text"}])
        self.assertEqual(batch.total_evaluations, 1)
        self.assertEqual(batch.results[0].name, "evaluation-2")

    def test_empty_batch(self) -> None:
        batch = batch_evaluate([])
        self.assertEqual(batch.total_evaluations, 0)
        self.assertEqual(batch.average_rouge1, 0.0)
        self.assertEqual(batch.average_perplexity, math.inf)

    def test_blank_candidates_leave_perplexity_average_infinite(self) -> None:
        batch = batch_evaluate([{"candidate": "   "}])
        self.assertEqual(batch.total_evaluations, 1)
        self.assertEqual(batch.average_perplexity, math.inf)

    def test_to_dict_layout(self) -> None:
        data = batch_evaluate([{"name": "a", "candidate": "hello world", "reference": "hello"}]).to_dict()
        self.assertEqual(list(data), ["individualResults", "summary"])
        self.assertEqual(data["summary"]["totalEvaluations"], 1)
        self.assertEqual(data["individualResults"][0]["name"], "a")
        self.assertIn("rougeScores", data["individualResults"][0])


class CompareMetricsTests(unittest.TestCase):
    def test_best_label_per_metric(self) -> None:
        comparison = compare_metrics([
            ("a", BatchEvaluationResult(average_rouge1=0.5, average_rouge2=0.4, average_rougeL=0.3,
                                        average_perplexity=10.0)),
            ("b", BatchEvaluationResult(average_rouge1=0.7, average_rouge2=0.2, average_rougeL=0.3,
                                        average_perplexity=math.inf)),
            ("c", BatchEvaluationResult(average_rouge1=0.1, average_rouge2=0.1, average_rougeL=0.6,
                                        average_perplexity=8.0)),
        ])
        self.assertEqual(comparison.best_rouge1.name, "b")
        self.assertEqual(comparison.best_rouge2.name, "a")
        self.assertEqual(comparison.best_rougeL.name, "c")
        self.assertEqual(comparison.best_perplexity.name, "c")
        self.assertAlmostEqual(comparison.best_perplexity.score, 8.0)
        self.assertEqual([row.name for row in comparison.comparison], ["a", "b", "c"])

    def test_ties_keep_first_label(self) -> None:
        comparison = compare_metrics([
            ("first", BatchEvaluationResult(average_rouge1=0.5)),
            ("second", BatchEvaluationResult(average_rouge1=0.5)),
        ])
        self.assertEqual(comparison.best_rouge1.name, "first")

    def test_no_runs(self) -> None:
        comparison = compare_metrics([])
        self.assertEqual(comparison.best_rouge1.name, "")
        self.assertEqual(comparison.best_perplexity.score, math.inf)
        self.assertEqual(comparison.comparison, [])


if __name__ == "__main__":
    unittest.main()
