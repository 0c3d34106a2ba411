"""
Result models for ROUGE/perplexity evaluation runs.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .perplexity import PerplexityResult
from .rouge import RougeScores


@dataclass
class EvaluationResult:
    """Metrics for a single candidate text."""
    perplexity: PerplexityResult
    rouge_scores: Optional[RougeScores] = None
    section: Optional[str] = None
    name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name}
        if self.rouge_scores is not None:
            data["rougeScores"] = self.rouge_scores.to_dict()
        data["perplexity"] = self.perplexity.to_dict()
        if self.section is not None:
            data["section"] = self.section
        return data


@dataclass
class BatchEvaluationResult:
    """Per-item results plus run-level averages."""
    results: List[EvaluationResult] = field(default_factory=list)
    average_rouge1: float = 0.0
    average_rouge2: float = 0.0
    average_rougeL: float = 0.0
    average_perplexity: float = float("inf")

    @property
    def total_evaluations(self) -> int:
        return len(self.results)

    @property
    def evaluations_with_rouge(self) -> int:
        return sum(1 for result in self.results if result.rouge_scores is not None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "individualResults": [result.to_dict() for result in self.results],
            "summary": {
                "totalEvaluations": self.total_evaluations,
                "evaluationsWithRouge": self.evaluations_with_rouge,
                "averageRouge1": self.average_rouge1,
                "averageRouge2": self.average_rouge2,
                "averageRougeL": self.average_rougeL,
                "averagePerplexity": self.average_perplexity,
            },
        }


@dataclass(frozen=True)
class LabeledScore:
    """Best score for one metric and the label that achieved it."""
    name: str
    score: float


@dataclass(frozen=True)
class ComparisonRow:
    """Averages of one labelled run."""
    name: str
    rouge1: float
    rouge2: float
    rougeL: float
    perplexity: float


@dataclass
class MetricsComparison:
    """Best label per metric across several evaluation runs."""
    best_rouge1: LabeledScore
    best_rouge2: LabeledScore
    best_rougeL: LabeledScore
    best_perplexity: LabeledScore
    comparison: List[ComparisonRow] = field(default_factory=list)
