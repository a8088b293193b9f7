from pydantic import BaseModel, Field
from backend.schemas.options import Emotion, Intensity, Relationship, TitleMode


class TitleGeneratorInput(BaseModel):
    """User input for the title generator."""
    m_mode: TitleMode = TitleMode.LONG
    m_category: str = Field(..., description="Topic category, usually a TOPIC_PRESETS label.")
    m_emotion: Emotion
    m_relationship: Relationship
    m_input: str = Field("", description="Optional free-text premise. Blank lets the model invent one.")
    m_intensity: Intensity = Intensity.REALISTIC
