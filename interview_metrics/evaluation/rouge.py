"""
ROUGE-1, ROUGE-2 and ROUGE-L scoring of generated text against references.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Union

from ..infrastructure.text import (
    OverlapScore, ZERO_SCORE, tokenize, generate_ngrams, overlap_score, lcs_score
)

logger = logging.getLogger("rouge")

References = Union[str, Sequence[str]]


@dataclass(frozen=True)
class RougeScores:
    """Best ROUGE-1/2/L scores across all references."""
    rouge1: OverlapScore = ZERO_SCORE
    rouge2: OverlapScore = ZERO_SCORE
    rougeL: OverlapScore = ZERO_SCORE

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            "rouge1": self.rouge1.to_dict(),
            "rouge2": self.rouge2.to_dict(),
            "rougeL": self.rougeL.to_dict(),
        }


def _normalize_references(references: References) -> List[str]:
    if isinstance(references, str):
        return [references]
    return list(references)


def calculate_rouge(candidate: str, references: References) -> RougeScores:
    """
    Calculate ROUGE scores between a candidate and one or more references.
    
    Each metric keeps its own best reference (highest F1), so ROUGE-1 and
    ROUGE-L may come from different references.
    
    Args:
        candidate: The generated text to evaluate
        references: One reference text or a sequence of them
        
    Returns:
        RougeScores; all zero for a blank candidate or no references
    """
    refs = _normalize_references(references)
    if not refs or not candidate.strip():
        return RougeScores()

    candidate_tokens = tokenize(candidate)
    candidate_unigrams = generate_ngrams(candidate_tokens, 1)
    candidate_bigrams = generate_ngrams(candidate_tokens, 2)

    best_rouge1 = ZERO_SCORE
    best_rouge2 = ZERO_SCORE
    best_rougeL = ZERO_SCORE

    for reference in refs:
        ref_tokens = tokenize(reference)

        rouge1 = overlap_score(candidate_unigrams, generate_ngrams(ref_tokens, 1))
        if rouge1.f1 > best_rouge1.f1:
            best_rouge1 = rouge1

        rouge2 = overlap_score(candidate_bigrams, generate_ngrams(ref_tokens, 2))
        if rouge2.f1 > best_rouge2.f1:
            best_rouge2 = rouge2

        rougeL = lcs_score(candidate_tokens, ref_tokens)
        if rougeL.f1 > best_rougeL.f1:
            best_rougeL = rougeL

    logger.debug(
        f"ROUGE over {len(refs)} reference(s): "
        f"R1={best_rouge1.f1:.4f} R2={best_rouge2.f1:.4f} RL={best_rougeL.f1:.4f}"
    )
    return RougeScores(best_rouge1, best_rouge2, best_rougeL)
