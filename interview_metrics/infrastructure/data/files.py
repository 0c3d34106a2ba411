"""
Loading evaluation inputs and transcripts from JSON files, and saving reports.
"""
import os
import math
import json
import logging
from typing import Any, List

from pydantic import ValidationError

from ...evaluation.schemas import EvaluationCandidate
from ...interview.schemas import TranscriptMessage, coerce_messages

logger = logging.getLogger("data_files")


class EvaluationInputError(ValueError):
    """Raised when an input file is unreadable or has the wrong shape."""


def _read_json(path: str) -> Any:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except OSError as e:
        raise EvaluationInputError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise EvaluationInputError(f"Invalid JSON in {path}: {e}") from e


def load_evaluation_file(path: str) -> List[EvaluationCandidate]:
    """
    Load evaluation candidates from a JSON file.

    Expected shape: {"evaluations": [{"name", "candidate", "reference"?, "section"?}]}

    Raises:
        EvaluationInputError: If the file cannot be read or an entry is invalid
    """
    data = _read_json(path)
    if not isinstance(data, dict) or not isinstance(data.get("evaluations"), list):
        raise EvaluationInputError(f"{path} must contain an object with an 'evaluations' list")

    candidates = []
    for index, entry in enumerate(data["evaluations"]):
        try:
            candidates.append(EvaluationCandidate.model_validate(entry))
        except ValidationError as e:
            raise EvaluationInputError(f"Invalid evaluation #{index + 1} in {path}: {e}") from e

    logger.info(f"Loaded {len(candidates)} evaluation(s) from {path}")
    return candidates


def load_transcript_file(path: str) -> List[TranscriptMessage]:
    """
    Load a transcript from a JSON file.

    Accepts {"messages": [...]} or a bare list of messages. Malformed
    messages are skipped with a warning.

    Raises:
        EvaluationInputError: If the file cannot be read or has the wrong shape
    """
    data = _read_json(path)
    if isinstance(data, dict):
        data = data.get("messages")
    if not isinstance(data, list):
        raise EvaluationInputError(f"{path} must contain a list of messages or an object with 'messages'")

    messages = coerce_messages(data)
    logger.info(f"Loaded {len(messages)} message(s) from {path}")
    return messages


def _ensure_parent(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _to_json_types(obj: Any) -> Any:
    """Replace non-finite floats with None so the output stays strict JSON."""
    if isinstance(obj, dict):
        return {k: _to_json_types(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [_to_json_types(item) for item in obj]
    elif isinstance(obj, float) and not math.isfinite(obj):
        return None
    else:
        return obj


def save_json(data: Any, path: str) -> str:
    """
    Write data as indented JSON, creating parent directories.

    Infinite perplexities and other non-finite numbers are written as null.

    Returns:
        The path written
    """
    _ensure_parent(path)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(_to_json_types(data), f, indent=2, ensure_ascii=False, allow_nan=False)
    logger.info(f"Saved JSON to {path}")
    return path


def save_text(text: str, path: str) -> str:
    """Write text, creating parent directories. Returns the path."""
    _ensure_parent(path)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)
    logger.info(f"Saved report to {path}")
    return path
