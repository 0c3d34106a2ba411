"""
Validated input structures for batch evaluation.
"""
from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class EvaluationCandidate(BaseModel):
    """One text to score, with optional reference(s), markdown section and label."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = Field(validation_alias=AliasChoices("text", "candidate"))
    reference: Optional[Union[str, List[str]]] = None
    section: Optional[str] = None
    name: Optional[str] = None
