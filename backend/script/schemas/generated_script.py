from pydantic import BaseModel, ConfigDict, Field
from typing import List, Tuple
from backend.schemas.generation_settings import GenerationSettings


class ScriptComment(BaseModel):
    """Host's closing comment."""
    model_config = ConfigDict(frozen=True)

    empathy: str
    advice: str
    outro: str


class ScriptDraft(BaseModel):
    """What the model returns for a script request. Ids and settings are added afterwards."""
    opening: str
    intro: str
    body: str = Field(..., description="Main story, one sentence or utterance per line.")
    climax: str = Field(..., description="Climax, one sentence or utterance per line.")
    ending: str
    comment: ScriptComment
    captions: List[str] = Field(..., description="Short caption lines for the video.")
    thumbnails: List[str] = Field(..., description="Three curiosity-driven thumbnail captions.")
    hashtags: List[str] = Field(..., description="About twenty hashtags.")


class GeneratedScript(BaseModel):
    """A finished script as stored in history."""
    model_config = ConfigDict(frozen=True)

    m_id: str
    m_opening: str
    m_intro: str
    m_body: str
    m_climax: str
    m_ending: str
    m_comment: ScriptComment
    m_captions: Tuple[str, ...]
    m_thumbnails: Tuple[str, ...]
    m_hashtags: Tuple[str, ...]
    m_settings: GenerationSettings
    m_timestamp: int = Field(..., description="Creation time, epoch milliseconds.")

    def export_plain_text(self) -> str:
        """
        The full script as one block of text, section by section.
        Each section is a [heading] line followed by its text; blank line between sections.
        """
        blocks = [
            ("Opening", self.m_opening),
            ("Intro", self.m_intro),
            ("Story", self.m_body),
            ("Climax", self.m_climax),
            ("Ending", self.m_ending),
            ("Comment", f"{self.m_comment.empathy}\n{self.m_comment.advice}\n{self.m_comment.outro}"),
        ]
        return "\n\n".join(f"[{name}]\n{text.strip()}" for name, text in blocks)

    def export_captions(self) -> str:
        return "\n".join(c.strip() for c in self.m_captions if c.strip())

    def spoken_lines(self) -> List[str]:
        """Non-empty lines of body and climax, in order."""
        out = []
        for section in (self.m_body, self.m_climax):
            out.extend(line.strip() for line in section.split("\n") if line.strip())
        return out
