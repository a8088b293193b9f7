from __future__ import annotations
import logging
from typing import List, Optional
from backend.generation.client import GenerationClient, GeneratorConfig, ModelTier
from backend.titles.prompt_builder import TITLE_COUNT, build_title_prompt
from backend.titles.schemas.title_request import TitleGeneratorInput
from backend.titles.schemas.title_result import TitleResponse, TitleResult

logger = logging.getLogger(__name__)


class TitleBuilder:
    """Title candidates for a category / emotion / relationship. Same call for plain, filtered and 'more' runs."""

    def __init__(self, i_client: GenerationClient | None = None, i_config: GeneratorConfig | None = None):
        if i_client is None:
            i_client = GenerationClient(i_config)
        self.m_client = i_client
        self.m_config = i_client.m_config

    def generate(self, i_request: TitleGeneratorInput, override_filter: Optional[str] = None) -> List[TitleResult]:
        prompt = build_title_prompt(i_request, override_filter, language=self.m_config.language)
        resp: TitleResponse = self.m_client.invoke(prompt, ModelTier.LIGHT)
        if len(resp.titles) != TITLE_COUNT:
            logger.info("Asked for %d titles, got %d", TITLE_COUNT, len(resp.titles))
        return list(resp.titles)
