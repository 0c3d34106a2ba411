"""Infrastructure components for interview metrics.

This module contains low-level building blocks: text primitives used by
the metrics and file handling for inputs and reports.
"""

# Text primitives
from .text import (
    tokenize, generate_ngrams, OverlapScore, overlap_score, lcs_length, lcs_score
)

__all__ = [
    # Text primitives
    "tokenize", "generate_ngrams", "OverlapScore", "overlap_score", "lcs_length", "lcs_score",
]
