"""
Interview Metrics Configuration System
======================================

This file contains ALL configuration for the interview metrics engine.
- User settings at the top (things users might want to change)
- Internal constants at the bottom (scoring thresholds and defaults)
"""
import os
import logging
from dataclasses import dataclass


# =============================================================================
# USER SETTINGS - Edit these to customize reports and evaluation
# =============================================================================

# Perplexity model
DEFAULT_NGRAM_ORDER = 3

# Reports
REPORT_FORMAT = "json"  # json or text, used for evaluation reports
OUTPUT_DIR = "./_reports"

# Logging
LOG_FILE = "./_reports/interview_metrics.log"
LOG_LEVEL = "WARNING"


# =============================================================================
# INTERNAL CONSTANTS - Don't change these unless you know what you're doing
# =============================================================================

# Speaker labels
INTERVIEWEE_SPEAKER = "interviewee"
INTERVIEWER_SPEAKER = "interviewer"
VALID_SPEAKERS = (INTERVIEWEE_SPEAKER, INTERVIEWER_SPEAKER)

# Emotion aggregation
TREND_THRESHOLD = 0.1
STABILITY_VARIANCE_SCALE = 4.0
TOP_EMOTION_COUNT = 5
BREAKDOWN_TEXT_LIMIT = 100
REPORT_EMOTIONS_PER_MESSAGE = 5

# Insight ladder
HIGH_SCORE_THRESHOLD = 0.7
MODERATE_SCORE_THRESHOLD = 0.5
RECOMMENDATION_THRESHOLD = 0.6

# Per-message emotional state
CONFIDENT_MIN_CONFIDENCE = 0.7
CONFIDENT_MAX_NERVOUSNESS = 0.3
NERVOUS_MIN_NERVOUSNESS = 0.5
NERVOUS_MAX_CONFIDENCE = 0.4
CALM_MIN_CALMNESS = 0.7
ENGAGED_MIN_INTEREST = 0.6

# Keyword extraction baseline
BASELINE_EMOTIONS = {"confidence": 0.5, "calmness": 0.5}

# Environment variable prefix for overrides
ENV_PREFIX = "INTERVIEW_METRICS_"

VALID_REPORT_FORMATS = ("json", "text")


# =============================================================================
# MAIN CONFIG OBJECT
# =============================================================================

@dataclass
class Config:
    """Main configuration object."""
    ngram_order: int = DEFAULT_NGRAM_ORDER
    report_format: str = REPORT_FORMAT
    output_dir: str = OUTPUT_DIR
    log_file: str = LOG_FILE
    log_level: str = LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for the configured level name."""
        return logging.getLevelName(self.log_level)


def _env(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name) or default


def get_config() -> Config:
    """
    Load configuration, applying INTERVIEW_METRICS_* environment overrides.

    Raises:
        ValueError: If an override has an invalid value
    """
    raw_order = _env("NGRAM_ORDER", str(DEFAULT_NGRAM_ORDER))
    try:
        ngram_order = int(raw_order)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}NGRAM_ORDER must be an integer, got {raw_order!r}")
    if ngram_order < 1:
        raise ValueError(f"{ENV_PREFIX}NGRAM_ORDER must be at least 1, got {ngram_order}")

    report_format = _env("REPORT_FORMAT", REPORT_FORMAT).lower()
    if report_format not in VALID_REPORT_FORMATS:
        raise ValueError(
            f"{ENV_PREFIX}REPORT_FORMAT must be one of {', '.join(VALID_REPORT_FORMATS)}, "
            f"got {report_format!r}"
        )

    log_level = _env("LOG_LEVEL", LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"{ENV_PREFIX}LOG_LEVEL is not a valid logging level: {log_level!r}")

    return Config(
        ngram_order=ngram_order,
        report_format=report_format,
        output_dir=_env("OUTPUT_DIR", OUTPUT_DIR),
        log_file=_env("LOG_FILE", LOG_FILE),
        log_level=log_level,
    )
