from pydantic import BaseModel, ConfigDict, Field
from typing import List
from backend.schemas.options import InputMode
from backend.script.schemas.story_input import StoryInput


class TitleResult(BaseModel):
    """One title candidate with the scenario it implies."""
    model_config = ConfigDict(frozen=True)

    title: str
    score: float = Field(..., ge=0, le=100, description="Weighted click-appeal score.")
    tags: List[str]
    hook_type: str = Field(..., description="Which hook template the title uses.")
    characters: str = Field(..., description="Cast that fits this title, e.g. 'mother in her 50s and job-seeking son'.")
    twist: str = Field(..., description="The twist or realization behind this title, one sentence.")

    def apply_to(self, story: StoryInput) -> StoryInput:
        """Return a summary-mode copy of `story` seeded from this title."""
        return story.model_copy(
            update={
                "m_mode": InputMode.SUMMARY,
                "m_conflict": self.title,
                "m_characters": self.characters,
                "m_twist": self.twist,
            },
            deep=True,
        )


class TitleResponse(BaseModel):
    titles: List[TitleResult]
