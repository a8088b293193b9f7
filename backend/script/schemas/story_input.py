from pydantic import BaseModel, Field
from typing import List
from backend.errors import PreconditionError
from backend.schemas.options import TOPIC_PRESETS, InputMode


class StoryInput(BaseModel):
    """The story premise as entered by the user."""
    m_mode: InputMode = InputMode.SUMMARY
    m_content: str = Field("", description="Full story text (paste mode).")
    m_keywords: List[str] = Field(default_factory=list, description="Seed keywords (auto mode).")
    m_topic: str = Field("", description="TOPIC_PRESETS id or a free topic label (auto mode).")
    m_characters: str = Field("", description="Who is in the story, e.g. 'mother and adult son'.")
    m_conflict: str = Field("", description="Core conflict in one line.")
    m_twist: str = Field("", description="Twist or realization.")

    def topic_label(self) -> str:
        topic = self.m_topic.strip()
        return TOPIC_PRESETS.get(topic, topic)

    def source_text(self) -> str:
        """
        The story text. Without one, a request for a moving story on the chosen topic
        and/or the comma-joined keywords.
        """
        if self.m_content:
            return self.m_content
        keywords = ", ".join(self.m_keywords)
        label = self.topic_label()
        if not label:
            return keywords
        seed = f"Write a moving story on the topic: {label}"
        return f"{seed}. Keywords: {keywords}" if keywords else seed

    def ensure_ready(self) -> None:
        """Raise PreconditionError if the current mode is missing its required field."""
        if self.m_mode == InputMode.PASTE:
            if not self.m_content.strip():
                raise PreconditionError("Paste mode needs the story text.")
        elif self.m_mode == InputMode.SUMMARY:
            if not self.m_conflict.strip():
                raise PreconditionError("Summary mode needs the core conflict.")
        elif self.m_mode == InputMode.AUTO:
            return
        else:
            raise ValueError(f"Unsupported input mode: {self.m_mode!r}")
