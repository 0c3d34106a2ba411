"""
Perplexity estimation for generated text.

Two paths are provided:
    * a self-perplexity n-gram model with add-one smoothing, trained on the
      very text being scored (a relative fluency heuristic, not held-out
      evaluation);
    * direct aggregation of model log-probabilities when a caller has them.
"""
import math
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np

from ..config import DEFAULT_NGRAM_ORDER
from ..infrastructure.text import tokenize

logger = logging.getLogger("perplexity")


@dataclass(frozen=True)
class PerplexityResult:
    """Perplexity with the average log-probability it was derived from."""
    perplexity: float
    average_log_probability: float
    token_count: int

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.perplexity)

    def to_dict(self) -> Dict[str, float]:
        return {
            "perplexity": self.perplexity,
            "averageLogProbability": self.average_log_probability,
            "tokenCount": self.token_count,
        }


def _degenerate(token_count: int = 0) -> PerplexityResult:
    return PerplexityResult(math.inf, -math.inf, token_count)


def _from_average(average_log_probability: float, token_count: int) -> PerplexityResult:
    """Build a result, mapping every non-finite value to the +inf/-inf sentinels."""
    if not math.isfinite(average_log_probability):
        return _degenerate(token_count)
    try:
        perplexity = math.exp(-average_log_probability)
    except OverflowError:
        perplexity = math.inf
    return PerplexityResult(perplexity, average_log_probability, token_count)


def calculate_perplexity(text: str, ngram_order: int = DEFAULT_NGRAM_ORDER) -> PerplexityResult:
    """
    Calculate self-perplexity of text using an add-one smoothed n-gram model.
    
    Args:
        text: The text to evaluate
        ngram_order: Order of the n-gram model (3 = trigrams)
        
    Returns:
        PerplexityResult (lower perplexity = more predictable text)
        
    Raises:
        ValueError: If ngram_order is smaller than 1
    """
    if ngram_order < 1:
        raise ValueError(f"ngram_order must be at least 1, got {ngram_order}")

    if not text.strip():
        return _degenerate()

    tokens = tokenize(text)
    if len(tokens) < ngram_order:
        logger.debug(f"{len(tokens)} token(s) < order {ngram_order}, using unigram model")
        return _unigram_perplexity(tokens)

    windows = [tuple(tokens[i:i + ngram_order]) for i in range(len(tokens) - ngram_order + 1)]
    ngram_counts = Counter(windows)
    context_counts = Counter(window[:-1] for window in windows)

    # Vocabulary is the number of distinct n-grams, not distinct contexts
    vocabulary_size = len(ngram_counts)
    total_log_prob = 0.0
    for window in windows:
        prob = (ngram_counts[window] + 1) / (context_counts[window[:-1]] + vocabulary_size + 1)
        total_log_prob += math.log(prob)

    result = _from_average(total_log_prob / len(windows), len(tokens))
    logger.debug(
        f"Perplexity order={ngram_order} ngrams={len(windows)} vocab={vocabulary_size}: "
        f"{result.perplexity:.4f}"
    )
    return result


def _unigram_perplexity(tokens: List[str]) -> PerplexityResult:
    """Unigram fallback for texts shorter than the model order."""
    if not tokens:
        return _degenerate()

    word_counts = Counter(tokens)
    denominator = len(tokens) + len(word_counts) + 1
    total_log_prob = sum(math.log((word_counts[token] + 1) / denominator) for token in tokens)
    return _from_average(total_log_prob / len(tokens), len(tokens))


def calculate_perplexity_from_log_probs(log_probabilities: Sequence[float]) -> PerplexityResult:
    """
    Calculate perplexity from model log-probabilities.
    
    Non-finite entries are dropped before averaging; token_count always
    reports the full input length.
    """
    if len(log_probabilities) == 0:
        return _degenerate()

    values = np.asarray(log_probabilities, dtype=float)
    valid = values[np.isfinite(values)]
    if valid.size == 0:
        logger.debug(f"All {values.size} log-probabilities were non-finite")
        return _degenerate(int(values.size))

    return _from_average(float(np.mean(valid)), int(values.size))
