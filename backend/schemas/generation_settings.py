from pydantic import BaseModel, ConfigDict, Field
from backend.schemas.options import AgeGroup, Intensity, ScriptFormat, ScriptLength, Tone


class GenerationSettings(BaseModel):
    """Broadcast settings picked by the user. Embedded by value in every generated script."""
    model_config = ConfigDict(frozen=True)

    m_age_group: AgeGroup = Field(..., description="Target listener age band.")
    m_format: ScriptFormat
    m_length: ScriptLength = Field(..., description="Target runtime.")
    m_tone: Tone
    m_intensity: Intensity
