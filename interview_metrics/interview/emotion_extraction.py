"""
Keyword and pattern based emotion extraction from interview text.
Works without any audio or external emotion service: keyword categories,
a lightweight sentiment pass and behavioural regexes are fused into a
0-1 intensity per emotion.
"""
import re
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from ..config import BASELINE_EMOTIONS

logger = logging.getLogger("emotion_extraction")


@dataclass(frozen=True)
class EmotionCategory:
    """Keyword list and weight of one emotion category."""
    words: Tuple[str, ...]
    weight: float


@dataclass(frozen=True)
class SentimentScore:
    """Sentiment in roughly [-1, 1] and the amount of evidence behind it."""
    score: float = 0.0
    magnitude: float = 0.0


EMOTION_KEYWORDS: Mapping[str, EmotionCategory] = MappingProxyType({
    "confidence": EmotionCategory(
        words=(
            "confident", "sure", "certain", "definitely", "absolutely", "expertise",
            "experience", "successful", "accomplished", "achieved", "led", "built",
            "implemented", "designed", "developed", "expert", "proficient", "skilled",
            "strong", "solid", "deep", "comprehensive", "thorough", "extensive",
        ),
        weight=1.0,
    ),
    "nervousness": EmotionCategory(
        words=(
            "um", "uh", "well", "maybe", "perhaps", "not sure", "uncertain",
            "think", "guess", "probably", "might", "could", "hesitate", "stumble",
            "unsure", "doubt", "worry", "anxious", "nervous", "afraid", "scared",
        ),
        weight=1.0,
    ),
    "calmness": EmotionCategory(
        words=(
            "calm", "relaxed", "comfortable", "at ease", "peaceful", "steady",
            "composed", "collected", "clear", "focused", "balanced", "stable",
        ),
        weight=0.8,
    ),
    "engagement": EmotionCategory(
        words=(
            "interested", "excited", "curious", "eager", "enthusiastic", "passionate",
            "motivated", "inspired", "fascinated", "engaged", "involved", "active",
            "questions", "wonder", "explore", "learn", "discover",
        ),
        weight=0.9,
    ),
    "interest": EmotionCategory(
        words=(
            "interesting", "curious", "wonder", "want to know", "would like",
            "fascinated", "intrigued", "attracted", "appealing", "appeal", "drawn",
        ),
        weight=0.8,
    ),
    "anxiety": EmotionCategory(
        # "pressure" is listed twice; the list length is part of the intensity scale
        words=(
            "anxious", "worried", "concerned", "stressed", "pressure", "pressure",
            "nervous", "tense", "uneasy", "apprehensive", "fearful", "panicked",
        ),
        weight=1.0,
    ),
    "enthusiasm": EmotionCategory(
        words=(
            "excited", "enthusiastic", "thrilled", "eager", "passionate", "energetic",
            "vibrant", "dynamic", "lively", "animated", "zealous", "ardent",
        ),
        weight=0.9,
    ),
})

POSITIVE_WORDS = (
    "excellent", "great", "good", "amazing", "wonderful", "fantastic",
    "successful", "achieved", "accomplished", "improved", "increased",
    "solved", "optimized", "enhanced", "delivered", "exceeded",
)

NEGATIVE_WORDS = (
    "difficult", "challenging", "problem", "issue", "failed", "struggled",
    "hard", "tough", "complex", "complicated", "error", "bug", "broken",
)

UNCERTAINTY_WORDS = (
    "maybe", "perhaps", "might", "could", "possibly", "probably",
    "think", "guess", "not sure", "uncertain", "unsure",
)

SENTIMENT_THRESHOLD = 0.3

QUESTION_PATTERN = re.compile(r"\b(?:what|how|why|when|where|can|could|would|should)\b", re.IGNORECASE)

CONFIDENT_PATTERNS = (
    re.compile(r"\b(?:I (?:have|built|created|designed|implemented|led|achieved|accomplished))\b", re.IGNORECASE),
    re.compile(r"\b(?:I (?:am|was) (?:an|a) (?:expert|senior|lead|experienced))\b", re.IGNORECASE),
    re.compile(r"\b(?:years? of experience)\b", re.IGNORECASE),
    re.compile(r"\b(?:successfully|effectively|efficiently)\b", re.IGNORECASE),
)

FILLER_PATTERN = re.compile(r"\b(?:um|uh|well|like|you know)\b", re.IGNORECASE)


def _count_present(words: Tuple[str, ...], lower_text: str) -> int:
    """Number of list entries occurring as a substring (each counted once)."""
    return sum(1 for word in words if word in lower_text)


def _existing_or(emotions: Dict[str, float], key: str, default: float) -> float:
    """Current value of key, or default when it is missing or zero."""
    return emotions.get(key) or default


def analyze_sentiment(text: str) -> SentimentScore:
    """
    Score text sentiment from positive, negative and uncertainty word lists.

    Uncertainty words count half against the score.
    """
    lower_text = text.lower()
    positive = _count_present(POSITIVE_WORDS, lower_text)
    negative = _count_present(NEGATIVE_WORDS, lower_text)
    uncertain = _count_present(UNCERTAINTY_WORDS, lower_text)

    total = positive + negative + uncertain
    if total == 0:
        return SentimentScore()

    score = (positive - negative - uncertain * 0.5) / max(total, 1)
    magnitude = min(total / 10, 1.0)
    return SentimentScore(score=score, magnitude=magnitude)


def apply_filler_penalty(emotions: Dict[str, float], filler_count: int) -> None:
    """
    Raise nervousness and lower confidence for filler words.

    The confidence penalty starts from the current confidence or 0.5 when
    none is set (or it is exactly 0), so a confidence capped lower by
    negative sentiment can end up higher than that cap.
    """
    if filler_count <= 0:
        return
    emotions["nervousness"] = max(emotions.get("nervousness", 0.0), min(filler_count * 0.2, 0.8))
    emotions["confidence"] = max(0.0, _existing_or(emotions, "confidence", 0.5) - filler_count * 0.1)


def extract_emotions(text: str) -> Dict[str, float]:
    """
    Extract emotion intensities (0-1) from a piece of interview text.

    Args:
        text: Raw message text

    Returns:
        Mapping of emotion name to intensity; never empty
    """
    lower_text = text.lower()
    emotions: Dict[str, float] = {}

    # Keyword categories
    for emotion, category in EMOTION_KEYWORDS.items():
        count = _count_present(category.words, lower_text)
        if count > 0:
            emotions[emotion] = min((count / len(category.words)) * category.weight, 1.0)

    # Sentiment shifts confidence/calmness or nervousness/anxiety
    sentiment = analyze_sentiment(text)
    if sentiment.score > SENTIMENT_THRESHOLD:
        emotions["confidence"] = max(emotions.get("confidence", 0.0), 0.6 + sentiment.score * 0.3)
        emotions["calmness"] = max(emotions.get("calmness", 0.0), 0.5 + sentiment.score * 0.2)
    elif sentiment.score < -SENTIMENT_THRESHOLD:
        strength = abs(sentiment.score)
        emotions["nervousness"] = max(emotions.get("nervousness", 0.0), 0.5 + strength * 0.3)
        emotions["anxiety"] = max(emotions.get("anxiety", 0.0), 0.4 + strength * 0.2)
        emotions["confidence"] = min(_existing_or(emotions, "confidence", 0.5), 0.4 - strength * 0.2)

    # Questions signal engagement
    if QUESTION_PATTERN.search(text):
        emotions["engagement"] = max(emotions.get("engagement", 0.0), 0.6)
        emotions["interest"] = max(emotions.get("interest", 0.0), 0.5)

    # Confident statements
    if any(pattern.search(text) for pattern in CONFIDENT_PATTERNS):
        emotions["confidence"] = max(emotions.get("confidence", 0.0), 0.7)

    apply_filler_penalty(emotions, len(FILLER_PATTERN.findall(text)))

    for key, value in emotions.items():
        emotions[key] = min(max(value, 0.0), 1.0)

    if not emotions:
        emotions.update(BASELINE_EMOTIONS)

    logger.debug(f"Extracted {len(emotions)} emotion(s), sentiment={sentiment.score:.3f}")
    return emotions
