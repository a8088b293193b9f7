from pydantic import BaseModel, ConfigDict, Field
from typing import List


class AnalysisResult(BaseModel):
    """Classification of a story, produced by the model before the script is written."""
    model_config = ConfigDict(frozen=True)

    topic: str
    relationship: str
    conflict_type: str
    emotion_curve: str
    safety_score: float = Field(..., ge=0, le=100, description="100 means safe to broadcast as is.")
    risks: List[str] = Field(..., description="Personal details or other broadcast risks found in the story.")
