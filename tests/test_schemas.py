import pytest
from pydantic import ValidationError

from backend.errors import PreconditionError
from backend.schemas.generation_settings import GenerationSettings
from backend.schemas.options import (
    AgeGroup, EMOTION_CURVES, Emotion, InputMode, Relationship, ScriptFormat, ScriptLength, TOPIC_PRESETS, Tone,
)
from backend.script.assembler import assemble_script
from backend.script.schemas.generated_script import ScriptDraft
from backend.script.schemas.story_input import StoryInput


def test_option_sets_match_product_lists():
    assert [a.value for a in AgeGroup] == ["30s", "40s", "50s", "60s"]
    assert len(ScriptFormat) == 6
    assert len(ScriptLength) == 9
    assert ScriptLength.S20.value == "20s" and ScriptLength.M30.value == "30min"
    assert len(Tone) == 6
    assert len(Emotion) == 9
    assert len(Relationship) == 9
    assert len(TOPIC_PRESETS) == 16
    assert len(EMOTION_CURVES) == 6


def test_settings_reject_values_outside_the_option_sets():
    with pytest.raises(ValidationError):
        GenerationSettings(m_age_group="70s", m_format="radio-story", m_length="2-3min",
                           m_tone="warm", m_intensity="realistic")


def test_settings_accept_plain_strings():
    s = GenerationSettings(m_age_group="40s", m_format="radio-story", m_length="2-3min",
                           m_tone="warm", m_intensity="realistic")
    assert s.m_age_group is AgeGroup.FORTIES


def test_settings_are_frozen(settings):
    with pytest.raises(ValidationError):
        settings.m_tone = Tone.WITTY


def test_unknown_input_mode_is_rejected():
    with pytest.raises(ValidationError):
        StoryInput(m_mode="dictation")


@pytest.mark.parametrize("story", [
    StoryInput(m_mode=InputMode.PASTE, m_content="a story"),
    StoryInput(m_mode=InputMode.SUMMARY, m_conflict="a conflict"),
    StoryInput(m_mode=InputMode.AUTO),
])
def test_ready_stories(story):
    story.ensure_ready()


@pytest.mark.parametrize("story", [
    StoryInput(m_mode=InputMode.PASTE, m_content=""),
    StoryInput(m_mode=InputMode.SUMMARY, m_conflict="  "),
])
def test_unready_stories(story):
    with pytest.raises(PreconditionError):
        story.ensure_ready()


def test_source_text_prefers_content():
    assert StoryInput(m_content="text", m_keywords=["a", "b"]).source_text() == "text"
    assert StoryInput(m_keywords=["a", "b"]).source_text() == "a, b"


def test_plain_text_export(settings, draft_payload):
    script = assemble_script(ScriptDraft(**draft_payload), settings)
    text = script.export_plain_text()
    assert text.startswith("[Opening]\n[BGM: soft piano]")
    for heading in ("[Intro]", "[Story]", "[Climax]", "[Ending]", "[Comment]"):
        assert heading in text
    assert text.endswith("That silence must have hurt.\nTalk first.\nSee you tomorrow.")
    assert script.export_captions() == "He quit his job\nand said nothing\nbut Mom knew"


def test_spoken_lines_skip_blank_lines(settings, draft_payload):
    payload = {**draft_payload, "body": "Narrator: one.\n\n  \nSon: two.", "climax": "Mother: three."}
    script = assemble_script(ScriptDraft(**payload), settings)
    assert script.spoken_lines() == ["Narrator: one.", "Son: two.", "Mother: three."]


def test_topic_preset_resolves_to_label():
    assert StoryInput(m_topic="money").topic_label() == TOPIC_PRESETS["money"]
    assert StoryInput(m_topic="  free topic ").topic_label() == "free topic"
    assert StoryInput(m_content="text", m_topic="money").source_text() == "text"
