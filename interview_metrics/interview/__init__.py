"""Interview emotion analysis.

This module contains keyword-based emotion extraction, feature-based and
text-based aggregation of interviewee emotions, result models and
markdown reporting.
"""

# Transcript schemas
from .schemas import Speaker, TranscriptMessage, coerce_messages

# Result models
from .models import (
    EmotionalState, DominantEmotion, EmotionalTrends, MessageBreakdown,
    EmotionAnalysisResult, TextEmotionAnalysisResult
)

# Keyword and pattern extraction
from .emotion_extraction import (
    EMOTION_KEYWORDS, SentimentScore, analyze_sentiment, apply_filler_penalty, extract_emotions
)

# Aggregation
from .analysis import (
    EmotionAnalyzer, TextEmotionAnalyzer, classify_emotional_state,
    analyze_emotions, analyze_text_emotions
)

# Reports
from .reports import (
    format_emotion_analysis_report, format_text_emotion_analysis_report, format_combined_report
)

# Sample data
from .testing import create_sample_transcripts

__all__ = [
    # Schemas
    "Speaker", "TranscriptMessage", "coerce_messages",
    
    # Models
    "EmotionalState", "DominantEmotion", "EmotionalTrends", "MessageBreakdown",
    "EmotionAnalysisResult", "TextEmotionAnalysisResult",
    
    # Extraction
    "EMOTION_KEYWORDS", "SentimentScore", "analyze_sentiment", "apply_filler_penalty",
    "extract_emotions",
    
    # Analysis
    "EmotionAnalyzer", "TextEmotionAnalyzer", "classify_emotional_state",
    "analyze_emotions", "analyze_text_emotions",
    
    # Reports
    "format_emotion_analysis_report", "format_text_emotion_analysis_report",
    "format_combined_report",
    
    # Sample data
    "create_sample_transcripts",
]
