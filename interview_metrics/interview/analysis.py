"""
Emotion analysis of interview transcripts.
Aggregates per-message emotion features of the interviewee into overall
confidence, calmness and stability scores, dominant emotions, a confidence
trend, insights, recommendations and a per-message breakdown.
"""
import logging
from typing import Dict, Iterable, List, Mapping, Tuple

import numpy as np

from .. import config
from .emotion_extraction import extract_emotions
from .models import (
    DominantEmotion,
    EmotionAnalysisResult,
    EmotionalState,
    EmotionalTrends,
    MessageBreakdown,
    TextEmotionAnalysisResult,
)
from .schemas import MessageInput, TranscriptMessage, coerce_messages

logger = logging.getLogger("emotion_analysis")

# (message, emotion feature map) pairs in transcript order
AnalyzedMessages = List[Tuple[TranscriptMessage, Dict[str, float]]]


def _feature(features: Mapping[str, float], *names: str) -> float:
    """First present feature among names, else 0."""
    for name in names:
        value = features.get(name)
        if value is not None:
            return float(value)
    return 0.0


def classify_emotional_state(features: Mapping[str, float]) -> EmotionalState:
    """
    Assign a categorical state to one message's emotion features.

    Rules are checked in order and the first match wins. Nervousness falls
    back to anxiety and interest falls back to engagement when absent.
    """
    confidence = _feature(features, "confidence")
    nervousness = _feature(features, "nervousness", "anxiety")
    calmness = _feature(features, "calmness")
    interest = _feature(features, "interest", "engagement")

    if confidence >= config.CONFIDENT_MIN_CONFIDENCE and nervousness < config.CONFIDENT_MAX_NERVOUSNESS:
        return EmotionalState.CONFIDENT
    if nervousness >= config.NERVOUS_MIN_NERVOUSNESS or confidence < config.NERVOUS_MAX_CONFIDENCE:
        return EmotionalState.NERVOUS
    if calmness >= config.CALM_MIN_CALMNESS:
        return EmotionalState.CALM
    if interest > config.ENGAGED_MIN_INTEREST:
        return EmotionalState.ENGAGED
    return EmotionalState.UNCERTAIN


class EmotionAnalyzer:
    """Analyzes interviewee messages that carry externally captured emotion features."""

    no_data_insight = "No emotional data available for analysis"
    no_data_recommendation = "Ensure emotion features are captured for interviewee messages"

    def analyze(self, messages: Iterable[MessageInput]) -> EmotionAnalysisResult:
        """
        Analyze a transcript.

        Args:
            messages: Transcript messages in chronological order, either
                TranscriptMessage objects or plain mappings

        Returns:
            EmotionAnalysisResult; an empty result with a single sentinel
            insight and recommendation when nothing qualifies
        """
        analyzed = self._select(coerce_messages(messages))
        if not analyzed:
            logger.info("No qualifying interviewee messages, returning empty analysis")
            return self._empty_result()

        confidence_scores = np.array([_feature(features, "confidence") for _, features in analyzed])
        calmness_scores = np.array([_feature(features, "calmness") for _, features in analyzed])

        overall_confidence = float(np.mean(confidence_scores))
        average_calmness = float(np.mean(calmness_scores))
        # np.var is the population variance around the mean
        variance = float(np.var(confidence_scores))
        emotional_stability = 1.0 - min(config.STABILITY_VARIANCE_SCALE * variance, 1.0)

        trends = self._analyze_trends(confidence_scores)

        result = EmotionAnalysisResult(
            overall_confidence=overall_confidence,
            average_calmness=average_calmness,
            emotional_stability=emotional_stability,
            dominant_emotions=self._dominant_emotions(analyzed),
            emotional_trends=trends,
            insights=self._generate_insights(overall_confidence, average_calmness, emotional_stability, trends),
            recommendations=self._generate_recommendations(
                overall_confidence, average_calmness, emotional_stability, trends
            ),
            detailed_breakdown=self._build_breakdown(analyzed),
        )

        logger.info(
            f"Analyzed {len(analyzed)} message(s): confidence={overall_confidence:.3f}, "
            f"calmness={average_calmness:.3f}, stability={emotional_stability:.3f}, trend={trends.label}"
        )
        return result

    def _select(self, messages: List[TranscriptMessage]) -> AnalyzedMessages:
        """Interviewee messages with a non-empty feature map."""
        selected = [
            (message, dict(message.emotion_features))
            for message in messages
            if message.is_interviewee and message.has_emotion_features
        ]
        logger.debug(f"Selected {len(selected)} of {len(messages)} message(s) with emotion features")
        return selected

    def _empty_result(self) -> EmotionAnalysisResult:
        return EmotionAnalysisResult(
            insights=[self.no_data_insight],
            recommendations=[self.no_data_recommendation],
        )

    def _dominant_emotions(self, analyzed: AnalyzedMessages) -> List[DominantEmotion]:
        """Rank every emotion key by its mean intensity over the messages it appears in."""
        totals: Dict[str, List[float]] = {}
        for _, features in analyzed:
            for emotion, intensity in features.items():
                running = totals.setdefault(emotion, [0.0, 0])
                running[0] += intensity
                running[1] += 1

        ranked = [
            DominantEmotion(emotion=emotion, average_intensity=total / count, occurrence_count=int(count))
            for emotion, (total, count) in totals.items()
        ]
        # sorted() is stable, so ties keep first-seen order
        ranked = sorted(ranked, key=lambda entry: entry.average_intensity, reverse=True)
        return ranked[:config.TOP_EMOTION_COUNT]

    def _analyze_trends(self, confidence_scores: np.ndarray) -> EmotionalTrends:
        """Compare mean confidence of the second half against the first half."""
        midpoint = len(confidence_scores) // 2
        first_half = confidence_scores[:midpoint]
        second_half = confidence_scores[midpoint:]
        if len(first_half) == 0 or len(second_half) == 0:
            return EmotionalTrends()

        difference = float(np.mean(second_half)) - float(np.mean(first_half))
        return EmotionalTrends.from_difference(difference, config.TREND_THRESHOLD)

    def _generate_insights(self, confidence: float, calmness: float, stability: float,
                           trends: EmotionalTrends) -> List[str]:
        insights = []

        if confidence >= config.HIGH_SCORE_THRESHOLD:
            insights.append("High confidence level detected throughout the interview")
        elif confidence >= config.MODERATE_SCORE_THRESHOLD:
            insights.append("Moderate confidence level with room for improvement")
        else:
            insights.append("Low confidence detected - candidate may need more preparation")

        if calmness >= config.HIGH_SCORE_THRESHOLD:
            insights.append("Candidate maintained good composure during the interview")
        elif calmness < config.MODERATE_SCORE_THRESHOLD:
            insights.append("Signs of nervousness or stress detected")

        if stability >= config.HIGH_SCORE_THRESHOLD:
            insights.append("Emotional state remained stable throughout")
        else:
            insights.append("Significant emotional fluctuations observed")

        if trends.improving:
            insights.append("Confidence improved as the interview progressed")
        elif trends.declining:
            insights.append("Confidence decreased during the interview")

        return insights

    def _generate_recommendations(self, confidence: float, calmness: float, stability: float,
                                  trends: EmotionalTrends) -> List[str]:
        recommendations = []

        if confidence < config.RECOMMENDATION_THRESHOLD:
            recommendations.append("Practice more to build confidence in answering questions")
        if calmness < config.RECOMMENDATION_THRESHOLD:
            recommendations.append("Work on stress management and relaxation techniques")
        if stability < config.RECOMMENDATION_THRESHOLD:
            recommendations.append("Focus on maintaining consistent emotional state")
        if trends.declining:
            recommendations.append("Prepare for longer interviews to maintain energy and confidence")

        return recommendations

    def _build_breakdown(self, analyzed: AnalyzedMessages) -> List[MessageBreakdown]:
        breakdown = []
        for index, (message, features) in enumerate(analyzed):
            text = message.text
            if len(text) > config.BREAKDOWN_TEXT_LIMIT:
                text = text[:config.BREAKDOWN_TEXT_LIMIT] + "..."
            breakdown.append(MessageBreakdown(
                message_index=index + 1,
                text=text,
                emotions=features,
                confidence_score=_feature(features, "confidence"),
                emotional_state=classify_emotional_state(features),
            ))
        return breakdown


class TextEmotionAnalyzer(EmotionAnalyzer):
    """Analyzes interviewee messages using keyword-based emotion extraction."""

    no_data_insight = "No interviewee messages available for analysis"
    no_data_recommendation = "Ensure interview transcript contains interviewee responses"

    def _select(self, messages: List[TranscriptMessage]) -> AnalyzedMessages:
        """Every interviewee message, with features extracted from its text."""
        selected = [
            (message, extract_emotions(message.text))
            for message in messages
            if message.is_interviewee
        ]
        logger.debug(f"Extracted emotions for {len(selected)} of {len(messages)} message(s)")
        return selected


def analyze_emotions(messages: Iterable[MessageInput]) -> EmotionAnalysisResult:
    """Feature-based analysis of the interviewee side of a transcript."""
    return EmotionAnalyzer().analyze(messages)


def analyze_text_emotions(messages: Iterable[MessageInput]) -> TextEmotionAnalysisResult:
    """Keyword-based analysis of the interviewee side of a transcript."""
    return TextEmotionAnalyzer().analyze(messages)
