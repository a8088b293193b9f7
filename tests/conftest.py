from types import SimpleNamespace

import pytest

from backend.generation.client import GenerationClient, GeneratorConfig
from backend.schemas.generation_settings import GenerationSettings
from backend.schemas.options import AgeGroup, Intensity, InputMode, ScriptFormat, ScriptLength, Tone
from backend.script.schemas.analysis_result import AnalysisResult
from backend.script.schemas.story_input import StoryInput


class Raw:
    """Handed back as output_parsed without validation, to simulate a misbehaving endpoint."""

    def __init__(self, value):
        self.value = value


class FakeResponses:
    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def parse(self, **kwargs):
        self.calls.append(kwargs)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if reply is None:
            return SimpleNamespace(output_parsed=None)
        if isinstance(reply, Raw):
            return SimpleNamespace(output_parsed=reply.value)
        # same as the SDK: parse into the requested model (raises ValidationError on mismatch)
        return SimpleNamespace(output_parsed=kwargs["text_format"].model_validate(reply))


class FakeOpenAI:
    def __init__(self, replies):
        self.responses = FakeResponses(replies)


@pytest.fixture
def make_client():
    def _make(*replies, config=None):
        return GenerationClient(config or GeneratorConfig(), FakeOpenAI(replies))
    return _make


@pytest.fixture
def settings():
    return GenerationSettings(
        m_age_group=AgeGroup.FORTIES,
        m_format=ScriptFormat.RADIO_STORY,
        m_length=ScriptLength.M2_3,
        m_tone=Tone.WARM,
        m_intensity=Intensity.REALISTIC,
    )


@pytest.fixture
def summary_story():
    return StoryInput(
        m_mode=InputMode.SUMMARY,
        m_characters="mother and adult son",
        m_conflict="son quit his job without telling her",
        m_twist="she had already found out and forgave him",
    )


@pytest.fixture
def analysis_payload():
    return {
        "topic": "family",
        "relationship": "parent-child",
        "conflict_type": "concealment",
        "emotion_curve": "conflict-to-reconciliation",
        "safety_score": 95,
        "risks": [],
    }


@pytest.fixture
def analysis(analysis_payload):
    return AnalysisResult(**analysis_payload)


@pytest.fixture
def draft_payload():
    return {
        "opening": "[BGM: soft piano]\nGood evening, listeners.",
        "intro": "Tonight's letter comes from a mother in her 50s.",
        "body": "Narrator: He came home early that Tuesday.\nSon: Mom, I need to tell you something.",
        "climax": "Mother: I already knew.\nSon: ...You knew?",
        "ending": "[SFX: kettle whistling]\nThey had tea together.",
        "comment": {"empathy": "That silence must have hurt.", "advice": "Talk first.", "outro": "See you tomorrow."},
        "captions": ["He quit his job", "and said nothing", "but Mom knew"],
        "thumbnails": ["She knew all along", "The son's secret", "One cup of tea"],
        "hashtags": ["#family", "#radio", "#story"],
    }


@pytest.fixture
def title_payload():
    def _make(n=20):
        return {
            "titles": [
                {
                    "title": f"Title {i}",
                    "score": 90 - i,
                    "tags": ["family"],
                    "hook_type": "after-that-day",
                    "characters": "wife in her 40s and husband",
                    "twist": "He had been saving for her all along.",
                }
                for i in range(n)
            ]
        }
    return _make


@pytest.fixture
def raw_reply():
    return Raw
