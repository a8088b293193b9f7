from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Type

from openai import OpenAI, OpenAIError
from pydantic import BaseModel, ValidationError

from backend.errors import GenerationError

logger = logging.getLogger(__name__)


# ---------- Config ----------
@dataclass
class GeneratorConfig:
    light_model: str = "gpt-4.1-mini"   # analysis + titles
    heavy_model: str = "gpt-4.1"        # full script
    temperature: float = 0.8
    max_output_tokens: int = 8000
    language: str = "Korean"

    @classmethod
    def from_dict(cls, block: Optional[Dict[str, Any]]) -> "GeneratorConfig":
        """Build from a YAML `builder_config` block; unknown keys are ignored."""
        block = block or {}
        base = cls()
        return cls(
            light_model=str(block.get("light_model", base.light_model)),
            heavy_model=str(block.get("heavy_model", base.heavy_model)),
            temperature=float(block.get("temperature", base.temperature)),
            max_output_tokens=int(block.get("max_output_tokens", base.max_output_tokens)),
            language=str(block.get("language", base.language)),
        )


class ModelTier(str, Enum):
    LIGHT = "light"
    HEAVY = "heavy"


@dataclass(frozen=True)
class Prompt:
    """An instruction plus the response model the answer must fit."""
    system: str
    instruction: str
    response_model: Type[BaseModel]


# ---------- Client ----------
class GenerationClient:
    """One blocking structured-output call per invoke(). No retries."""

    def __init__(self, i_config: GeneratorConfig | None = None, i_client: Any = None):
        self.m_config = i_config or GeneratorConfig()
        if i_client is None:
            try:
                i_client = OpenAI()
            except OpenAIError as e:  # usually a missing OPENAI_API_KEY
                raise GenerationError(f"Could not create the OpenAI client: {e}") from e
        self.m_client = i_client

    def model_for(self, tier: ModelTier) -> str:
        if tier == ModelTier.LIGHT:
            return self.m_config.light_model
        if tier == ModelTier.HEAVY:
            return self.m_config.heavy_model
        raise ValueError(f"Unknown model tier: {tier!r}")

    def invoke(self, prompt: Prompt, tier: ModelTier = ModelTier.LIGHT) -> BaseModel:
        """
        Send the prompt and return an instance of prompt.response_model.
        Any failure (network, status, refusal, schema mismatch) raises GenerationError.
        """
        model = self.model_for(tier)
        logger.info("Requesting %s from %s (%s tier)", prompt.response_model.__name__, model, tier.value)
        started = time.monotonic()
        try:
            resp = self.m_client.responses.parse(
                model=model,
                input=[{"role": "system", "content": prompt.system},
                       {"role": "user", "content": prompt.instruction}],
                temperature=self.m_config.temperature,
                max_output_tokens=self.m_config.max_output_tokens,
                text_format=prompt.response_model,
            )
        except OpenAIError as e:
            raise GenerationError(f"Model call failed: {e}") from e
        except ValidationError as e:
            raise GenerationError(f"Response did not match {prompt.response_model.__name__}: {e}") from e

        parsed = getattr(resp, "output_parsed", None)
        if parsed is None:
            raise GenerationError(f"Model returned no parsable {prompt.response_model.__name__} (refusal or empty output)")

        # The endpoint is a black box: check the shape again on our side.
        try:
            if isinstance(parsed, BaseModel):
                parsed = parsed.model_dump()
            result = prompt.response_model.model_validate(parsed)
        except ValidationError as e:
            raise GenerationError(f"Response did not match {prompt.response_model.__name__}: {e}") from e

        logger.info("Got %s in %.1fs", prompt.response_model.__name__, time.monotonic() - started)
        return result
