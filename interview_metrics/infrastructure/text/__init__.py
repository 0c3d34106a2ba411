"""Text primitives: tokenization, n-grams and overlap scoring."""

from .tokenization import tokenize, generate_ngrams
from .overlap import (
    OverlapScore, ZERO_SCORE, harmonic_mean, overlap_score, lcs_length, lcs_score
)

__all__ = [
    "tokenize", "generate_ngrams",
    "OverlapScore", "ZERO_SCORE", "harmonic_mean",
    "overlap_score", "lcs_length", "lcs_score",
]
