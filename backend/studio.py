from __future__ import annotations
import logging
from typing import Tuple
from backend.history.script_history import ScriptHistory
from backend.schemas.generation_settings import GenerationSettings
from backend.script.schemas.analysis_result import AnalysisResult
from backend.script.schemas.generated_script import GeneratedScript
from backend.script.schemas.story_input import StoryInput
from backend.script.script_builder import ScriptBuilder

logger = logging.getLogger(__name__)


class ScriptStudio:
    """Main flow: check input, build the script, then record it. History only changes on success."""

    def __init__(self, builder: ScriptBuilder, history: ScriptHistory):
        self.m_builder = builder
        self.m_history = history

    def generate(self, settings: GenerationSettings, story: StoryInput) -> Tuple[AnalysisResult, GeneratedScript]:
        story.ensure_ready()
        analysis, script = self.m_builder.build(settings, story)
        self.m_history.append(script)
        logger.info("Saved script %s (%d in history)", script.m_id, len(self.m_history))
        return analysis, script

    def delete(self, script_id: str) -> bool:
        return self.m_history.remove(script_id)
