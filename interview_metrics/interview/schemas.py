"""
Structured transcript schemas for emotion analysis.
"""
import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, FiniteFloat, ValidationError

logger = logging.getLogger("transcripts")


class Speaker(str, Enum):
    """Who produced a transcript message."""
    INTERVIEWEE = "interviewee"
    INTERVIEWER = "interviewer"


class TranscriptMessage(BaseModel):
    """A single message of an interview transcript, in chronological order."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)

    speaker: Speaker
    text: str = ""
    emotion_features: Optional[Dict[str, FiniteFloat]] = Field(
        default=None,
        validation_alias=AliasChoices("emotion_features", "emotionFeatures"),
    )

    @property
    def is_interviewee(self) -> bool:
        return self.speaker == Speaker.INTERVIEWEE

    @property
    def has_emotion_features(self) -> bool:
        return bool(self.emotion_features)


MessageInput = Union[TranscriptMessage, Mapping[str, Any]]


def coerce_messages(messages: Iterable[MessageInput]) -> List[TranscriptMessage]:
    """
    Validate raw transcript entries, keeping their order.
    
    Malformed entries (missing or unknown speaker, non-numeric or
    non-finite features) are logged and excluded rather than raised.
    
    Args:
        messages: TranscriptMessage objects or plain mappings
        
    Returns:
        List of valid TranscriptMessage objects
    """
    valid: List[TranscriptMessage] = []
    for index, message in enumerate(messages):
        if isinstance(message, TranscriptMessage):
            valid.append(message)
            continue
        try:
            valid.append(TranscriptMessage.model_validate(message))
        except ValidationError as e:
            logger.warning(f"Skipping malformed transcript message #{index + 1}: {e.error_count()} error(s)")
            logger.debug(f"Validation details for message #{index + 1}: {e}")
    return valid
