"""
Batch evaluation and comparison of generated texts.
Aggregates ROUGE and perplexity over collections of candidates.
"""
import math
import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
from pydantic import ValidationError

from ..config import DEFAULT_NGRAM_ORDER
from .models import (
    BatchEvaluationResult, ComparisonRow, EvaluationResult, LabeledScore, MetricsComparison
)
from .perplexity import calculate_perplexity
from .rouge import References, calculate_rouge
from .schemas import EvaluationCandidate
from .sections import extract_markdown_section

logger = logging.getLogger("evaluation_batch")

CandidateInput = Union[EvaluationCandidate, Mapping[str, Any]]


def _has_reference(references: Optional[References]) -> bool:
    return references is not None and references != ""


def evaluate_text(candidate: str,
                  references: Optional[References] = None,
                  ngram_order: int = DEFAULT_NGRAM_ORDER) -> EvaluationResult:
    """
    Evaluate a single text: ROUGE when a reference is given, perplexity always.
    
    Args:
        candidate: Generated text
        references: Optional reference text(s)
        ngram_order: Order of the perplexity model
        
    Returns:
        EvaluationResult for the text
    """
    rouge_scores = calculate_rouge(candidate, references) if _has_reference(references) else None
    return EvaluationResult(
        perplexity=calculate_perplexity(candidate, ngram_order),
        rouge_scores=rouge_scores,
    )


def evaluate_section(text: str,
                     section_name: str,
                     reference: Optional[References] = None,
                     ngram_order: int = DEFAULT_NGRAM_ORDER) -> Optional[EvaluationResult]:
    """Evaluate one markdown section of text, or None if the section is absent."""
    section = extract_markdown_section(text, section_name)
    if not section:
        return None
    result = evaluate_text(section, reference, ngram_order)
    result.section = section_name
    return result


def _coerce_candidate(item: CandidateInput, index: int) -> Optional[EvaluationCandidate]:
    if isinstance(item, EvaluationCandidate):
        return item
    try:
        return EvaluationCandidate.model_validate(item)
    except ValidationError as e:
        logger.warning(f"Skipping malformed evaluation candidate #{index + 1}: {e}")
        return None


def _average(values: List[float], default: float) -> float:
    return float(np.mean(values)) if values else default


def batch_evaluate(candidates: Iterable[CandidateInput],
                   ngram_order: int = DEFAULT_NGRAM_ORDER) -> BatchEvaluationResult:
    """
    Evaluate many candidates and average their scores.
    
    Candidates asking for a markdown section the text does not contain are
    skipped. ROUGE averages cover only candidates with a reference and
    default to 0; the perplexity average covers finite perplexities and
    defaults to infinity.
    """
    results: List[EvaluationResult] = []
    rouge1_scores: List[float] = []
    rouge2_scores: List[float] = []
    rougeL_scores: List[float] = []
    perplexities: List[float] = []

    for index, item in enumerate(candidates):
        candidate = _coerce_candidate(item, index)
        if candidate is None:
            continue

        text = candidate.text
        if candidate.section:
            section = extract_markdown_section(text, candidate.section)
            if not section:
                logger.info(f"Section '{candidate.section}' not found in candidate #{index + 1}, skipping")
                continue
            text = section

        evaluation = evaluate_text(text, candidate.reference, ngram_order)
        evaluation.section = candidate.section
        evaluation.name = candidate.name or f"evaluation-{index + 1}"
        results.append(evaluation)

        if evaluation.rouge_scores is not None:
            rouge1_scores.append(evaluation.rouge_scores.rouge1.f1)
            rouge2_scores.append(evaluation.rouge_scores.rouge2.f1)
            rougeL_scores.append(evaluation.rouge_scores.rougeL.f1)

        if evaluation.perplexity.is_finite:
            perplexities.append(evaluation.perplexity.perplexity)

    logger.info(f"Evaluated {len(results)} candidate(s), {len(rouge1_scores)} with references")
    return BatchEvaluationResult(
        results=results,
        average_rouge1=_average(rouge1_scores, 0.0),
        average_rouge2=_average(rouge2_scores, 0.0),
        average_rougeL=_average(rougeL_scores, 0.0),
        average_perplexity=_average(perplexities, math.inf),
    )


def compare_metrics(evaluations: Sequence[Tuple[str, BatchEvaluationResult]]) -> MetricsComparison:
    """
    Compare evaluation runs, e.g. across prompts or model configurations.
    
    Args:
        evaluations: (label, batch result) pairs in display order
        
    Returns:
        MetricsComparison with the best label per metric (highest ROUGE,
        lowest finite perplexity) and one comparison row per run
    """
    best_rouge1 = LabeledScore("", 0.0)
    best_rouge2 = LabeledScore("", 0.0)
    best_rougeL = LabeledScore("", 0.0)
    best_perplexity = LabeledScore("", math.inf)
    comparison: List[ComparisonRow] = []

    for name, metrics in evaluations:
        if metrics.average_rouge1 > best_rouge1.score:
            best_rouge1 = LabeledScore(name, metrics.average_rouge1)
        if metrics.average_rouge2 > best_rouge2.score:
            best_rouge2 = LabeledScore(name, metrics.average_rouge2)
        if metrics.average_rougeL > best_rougeL.score:
            best_rougeL = LabeledScore(name, metrics.average_rougeL)
        if math.isfinite(metrics.average_perplexity) and metrics.average_perplexity < best_perplexity.score:
            best_perplexity = LabeledScore(name, metrics.average_perplexity)

        comparison.append(ComparisonRow(
            name=name,
            rouge1=metrics.average_rouge1,
            rouge2=metrics.average_rouge2,
            rougeL=metrics.average_rougeL,
            perplexity=metrics.average_perplexity,
        ))

    return MetricsComparison(
        best_rouge1=best_rouge1,
        best_rouge2=best_rouge2,
        best_rougeL=best_rougeL,
        best_perplexity=best_perplexity,
        comparison=comparison,
    )
