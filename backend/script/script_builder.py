from __future__ import annotations
import logging
from typing import Tuple
from backend.generation.client import GenerationClient, GeneratorConfig, ModelTier
from backend.schemas.generation_settings import GenerationSettings
from backend.script.assembler import assemble_script
from backend.script.prompt_builder import build_analysis_prompt, build_script_prompt
from backend.script.schemas.analysis_result import AnalysisResult
from backend.script.schemas.generated_script import GeneratedScript, ScriptDraft
from backend.script.schemas.story_input import StoryInput

logger = logging.getLogger(__name__)


# ---------- Builder ----------
class ScriptBuilder:
    def __init__(self, i_client: GenerationClient | None = None, i_config: GeneratorConfig | None = None):
        if i_client is None:
            i_client = GenerationClient(i_config)
        self.m_client = i_client
        self.m_config = i_client.m_config

    # ===== Public API =====
    def build(self, i_settings: GenerationSettings, i_story: StoryInput) -> Tuple[AnalysisResult, GeneratedScript]:
        """
        1) analyze the story (light model)
        2) draft the script from settings + story + analysis (heavy model)
        3) attach id / timestamp / settings snapshot
        Steps run strictly in order; any failure aborts the whole build.
        """
        story = i_story.model_copy(deep=True)
        analysis = self.analyze(story)                            # (1)
        draft = self.draft_script(i_settings, story, analysis)    # (2)
        script = assemble_script(draft, i_settings)               # (3)
        logger.info("Built script %s (%d captions, %d thumbnails, %d hashtags)",
                    script.m_id, len(script.m_captions), len(script.m_thumbnails), len(script.m_hashtags))
        return analysis, script

    # ===== Step 1 =====
    def analyze(self, story: StoryInput) -> AnalysisResult:
        prompt = build_analysis_prompt(story, language=self.m_config.language)
        analysis: AnalysisResult = self.m_client.invoke(prompt, ModelTier.LIGHT)
        if analysis.risks:
            logger.warning("Story flagged %d risk(s), safety score %.0f", len(analysis.risks), analysis.safety_score)
        return analysis

    # ===== Step 2 =====
    def draft_script(self, settings: GenerationSettings, story: StoryInput, analysis: AnalysisResult) -> ScriptDraft:
        prompt = build_script_prompt(settings, story, analysis, language=self.m_config.language)
        draft: ScriptDraft = self.m_client.invoke(prompt, ModelTier.HEAVY)
        # Counts are advisory; pass through but note the drift.
        if len(draft.thumbnails) != 3:
            logger.debug("Expected 3 thumbnails, got %d", len(draft.thumbnails))
        return draft
