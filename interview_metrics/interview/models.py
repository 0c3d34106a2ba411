"""
Data models for emotion analysis results.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class EmotionalState(str, Enum):
    """Categorical state assigned to each analysed message."""
    CONFIDENT = "confident"
    NERVOUS = "nervous"
    CALM = "calm"
    ENGAGED = "engaged"
    UNCERTAIN = "uncertain"


@dataclass(frozen=True)
class DominantEmotion:
    """An emotion ranked by its average intensity across messages."""
    emotion: str
    average_intensity: float
    occurrence_count: int


@dataclass(frozen=True)
class EmotionalTrends:
    """Direction of confidence over the interview; exactly one flag is set."""
    improving: bool = False
    declining: bool = False
    stable: bool = True

    @classmethod
    def from_difference(cls, difference: float, threshold: float) -> 'EmotionalTrends':
        """Classify the second-half minus first-half confidence difference."""
        if difference > threshold:
            return cls(improving=True, declining=False, stable=False)
        if difference < -threshold:
            return cls(improving=False, declining=True, stable=False)
        return cls()

    @property
    def label(self) -> str:
        if self.improving:
            return "improving"
        if self.declining:
            return "declining"
        return "stable"


@dataclass(frozen=True)
class MessageBreakdown:
    """Per-message analysis entry."""
    message_index: int
    text: str
    emotions: Dict[str, float]
    confidence_score: float
    emotional_state: EmotionalState


@dataclass
class EmotionAnalysisResult:
    """Aggregate emotion analysis of the interviewee side of a transcript."""
    overall_confidence: float = 0.0
    average_calmness: float = 0.0
    emotional_stability: float = 0.0
    dominant_emotions: List[DominantEmotion] = field(default_factory=list)
    emotional_trends: EmotionalTrends = field(default_factory=EmotionalTrends)
    insights: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    detailed_breakdown: List[MessageBreakdown] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary with camelCase keys."""
        return {
            "overallConfidence": self.overall_confidence,
            "averageCalmness": self.average_calmness,
            "emotionalStability": self.emotional_stability,
            "dominantEmotions": [
                {
                    "emotion": entry.emotion,
                    "averageIntensity": entry.average_intensity,
                    "occurrenceCount": entry.occurrence_count,
                }
                for entry in self.dominant_emotions
            ],
            "emotionalTrends": {
                "improving": self.emotional_trends.improving,
                "declining": self.emotional_trends.declining,
                "stable": self.emotional_trends.stable,
            },
            "insights": list(self.insights),
            "recommendations": list(self.recommendations),
            "detailedBreakdown": [
                {
                    "messageIndex": entry.message_index,
                    "text": entry.text,
                    "emotions": dict(entry.emotions),
                    "confidenceScore": entry.confidence_score,
                    "emotionalState": entry.emotional_state.value,
                }
                for entry in self.detailed_breakdown
            ],
        }


# Keyword-based analysis produces the same shape
TextEmotionAnalysisResult = EmotionAnalysisResult
