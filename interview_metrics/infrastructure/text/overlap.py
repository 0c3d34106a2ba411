"""
Overlap scoring between candidate and reference token streams.
Provides set-based n-gram precision/recall/F1 and longest common subsequence.
"""
from dataclasses import dataclass, asdict
from typing import Dict, List, Sequence


@dataclass(frozen=True)
class OverlapScore:
    """Precision, recall and F1 of a candidate against one reference."""
    precision: float = 0.0
    recall: float = 0.0
    f1: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


ZERO_SCORE = OverlapScore()


def harmonic_mean(precision: float, recall: float) -> float:
    """F1 of precision and recall, 0.0 when both are 0."""
    if precision + recall <= 0:
        return 0.0
    return (2 * precision * recall) / (precision + recall)


def overlap_score(candidate_ngrams: Sequence[str], reference_ngrams: Sequence[str]) -> OverlapScore:
    """
    Score n-gram overlap as a set intersection.
    
    Duplicates collapse on both sides, so repeated n-grams are matched once
    (no clipped counts). An empty reference scores zero across the board.
    """
    if not reference_ngrams:
        return ZERO_SCORE

    candidate_set = set(candidate_ngrams)
    reference_set = set(reference_ngrams)
    matches = len(candidate_set & reference_set)

    precision = matches / len(candidate_set) if candidate_set else 0.0
    recall = matches / len(reference_set)
    return OverlapScore(precision, recall, harmonic_mean(precision, recall))


def lcs_length(seq_a: Sequence[str], seq_b: Sequence[str]) -> int:
    """Length of the longest common subsequence of two token sequences."""
    rows = len(seq_a)
    cols = len(seq_b)
    dp: List[List[int]] = [[0] * (cols + 1) for _ in range(rows + 1)]

    for i in range(1, rows + 1):
        token_a = seq_a[i - 1]
        for j in range(1, cols + 1):
            if token_a == seq_b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])

    return dp[rows][cols]


def lcs_score(candidate_tokens: Sequence[str], reference_tokens: Sequence[str]) -> OverlapScore:
    """ROUGE-L style precision/recall/F1 derived from the LCS length."""
    lcs = lcs_length(candidate_tokens, reference_tokens)
    precision = lcs / len(candidate_tokens) if candidate_tokens else 0.0
    recall = lcs / len(reference_tokens) if reference_tokens else 0.0
    return OverlapScore(precision, recall, harmonic_mean(precision, recall))
