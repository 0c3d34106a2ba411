import unittest

from interview_metrics.infrastructure.text import (
    ZERO_SCORE, generate_ngrams, harmonic_mean, lcs_length, lcs_score, overlap_score, tokenize
)


class TokenizeTests(unittest.TestCase):
    def test_lowercases_and_splits_on_punctuation(self) -> None:
        self.assertEqual(tokenize("Hello, World! Don't"), ["hello", "world", "don", "t"])

    def test_keeps_digits_and_underscores(self) -> None:
        self.assertEqual(tokenize("node_js 42%"), ["node_js", "42"])

    def test_blank_text_has_no_tokens(self) -> None:
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   \n\t"), [])
        self.assertEqual(tokenize("?!..."), [])


class NgramTests(unittest.TestCase):
    def test_bigrams_are_space_joined(self) -> None:
        self.assertEqual(generate_ngrams(["a", "b", "c"], 2), ["a b", "b c"])

    def test_unigrams_keep_order_and_duplicates(self) -> None:
        self.assertEqual(generate_ngrams(["a", "a", "b"], 1), ["a", "a", "b"])

    def test_too_few_tokens_gives_empty_list(self) -> None:
        self.assertEqual(generate_ngrams(["a"], 2), [])
        self.assertEqual(generate_ngrams([], 1), [])

    def test_order_below_one_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            generate_ngrams(["a", "b"], 0)


class OverlapTests(unittest.TestCase):
    def test_duplicates_collapse_before_matching(self) -> None:
        score = overlap_score(["a", "a", "b"], ["a", "c"])
        self.assertAlmostEqual(score.precision, 0.5)
        self.assertAlmostEqual(score.recall, 0.5)
        self.assertAlmostEqual(score.f1, 0.5)

    def test_empty_reference_scores_zero(self) -> None:
        self.assertEqual(overlap_score(["a"], []), ZERO_SCORE)

    def test_empty_candidate_has_zero_precision(self) -> None:
        score = overlap_score([], ["a"])
        self.assertEqual(score.precision, 0.0)
        self.assertEqual(score.recall, 0.0)
        self.assertEqual(score.f1, 0.0)

    def test_harmonic_mean_of_zeros(self) -> None:
        self.assertEqual(harmonic_mean(0.0, 0.0), 0.0)
        self.assertAlmostEqual(harmonic_mean(1.0, 0.5), 2 / 3)


class LcsTests(unittest.TestCase):
    def test_length_of_known_sequences(self) -> None:
        a = ["a", "b", "c", "d", "e"]
        b = ["a", "c", "e", "x"]
        self.assertEqual(lcs_length(a, b), 3)

    def test_length_is_symmetric(self) -> None:
        pairs = [
            ("the quick brown fox", "quick the fox brown"),
            ("a b a b a", "b a b"),
            ("one two three", ""),
            ("x y z", "z y x"),
        ]
        for left, right in pairs:
            a, b = tokenize(left), tokenize(right)
            self.assertEqual(lcs_length(a, b), lcs_length(b, a))

    def test_score_uses_sequence_lengths(self) -> None:
        score = lcs_score(["the", "cat", "sat"], ["the", "cat"])
        self.assertAlmostEqual(score.precision, 2 / 3)
        self.assertAlmostEqual(score.recall, 1.0)
        self.assertAlmostEqual(score.f1, 0.8)

    def test_score_with_empty_side_is_zero(self) -> None:
        self.assertEqual(lcs_score([], ["a"]).f1, 0.0)
        self.assertEqual(lcs_score(["a"], []).f1, 0.0)


if __name__ == "__main__":
    unittest.main()
