"""
Data infrastructure for evaluation inputs, transcripts and saved reports.
"""

from .files import (
    EvaluationInputError, load_evaluation_file, load_transcript_file, save_json, save_text
)

__all__ = [
    'EvaluationInputError',
    'load_evaluation_file',
    'load_transcript_file',
    'save_json',
    'save_text'
]
