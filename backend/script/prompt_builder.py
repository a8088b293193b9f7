from __future__ import annotations
from backend.generation.client import Prompt
from backend.schemas.generation_settings import GenerationSettings
from backend.schemas.options import EMOTION_CURVES, InputMode
from backend.script.schemas.analysis_result import AnalysisResult
from backend.script.schemas.generated_script import ScriptDraft
from backend.script.schemas.story_input import StoryInput

MASK = "○○"


def _source_label(mode: InputMode) -> str:
    if mode == InputMode.PASTE:
        return "Original story"
    if mode == InputMode.SUMMARY:
        return "Story summary"
    if mode == InputMode.AUTO:
        return "Story seed (build the story from this)"
    raise ValueError(f"Unsupported input mode: {mode!r}")


def build_analysis_prompt(story: StoryInput, language: str = "Korean") -> Prompt:
    """Classify topic, relationship, conflict and emotion curve; flag personal details."""
    story = story.model_copy(deep=True)
    label = _source_label(story.m_mode)

    system = (
        "You are a story editor for a radio program aimed at listeners in their 30s to 60s.\n"
        "Classify the listener's story and check it is safe to broadcast.\n"
        "Return strict JSON that matches the response schema."
    )
    instruction = (
        "Analyze the story below and classify its topic, relationship, conflict type and emotion curve.\n"
        f"Pick emotion_curve from: {', '.join(EMOTION_CURVES)}.\n"
        "If it contains personal details (real names, phone numbers, specific places, employers), "
        "list each as a risk and lower safety_score accordingly (0-100, 100 = safe).\n\n"
        f"{label}: {story.source_text()}\n"
        f"Supplementary context: {story.m_conflict}, {story.m_twist}\n\n"
        f"Write the values in {language}."
    )
    return Prompt(system=system, instruction=instruction, response_model=AnalysisResult)


def build_script_prompt(
    settings: GenerationSettings,
    story: StoryInput,
    analysis: AnalysisResult,
    language: str = "Korean",
) -> Prompt:
    """Full broadcast script with captions, thumbnails and hashtags."""
    story = story.model_copy(deep=True)
    label = _source_label(story.m_mode)

    system = (
        "You are a veteran radio writer for listeners in their 30s to 60s.\n"
        "Write a professional broadcast script from the listener's story.\n"
        "Return strict JSON that matches the response schema."
    )
    instruction = (
        "[Settings]\n"
        f"- Target age: {settings.m_age_group.value}\n"
        f"- Format: {settings.m_format.value}\n"
        f"- Length: {settings.m_length.value}\n"
        f"- Tone: {settings.m_tone.value}\n"
        f"- Intensity: {settings.m_intensity.value}\n"
        f"- Topic: {analysis.topic}\n"
        f"- Relationship: {analysis.relationship}\n"
        f"- Conflict type: {analysis.conflict_type}\n"
        f"- Emotion curve: {analysis.emotion_curve}\n\n"
        "[Story]\n"
        f"- {label}: {story.source_text()}\n"
        f"- Characters: {story.m_characters}\n"
        f"- Core conflict: {story.m_conflict}\n"
        f"- Twist: {story.m_twist}\n\n"
        "[Rules]\n"
        f"1. Mask every real name, employer and school as \"{MASK}\".\n"
        "2. Put sound cues inline, e.g. [BGM: soft piano] or [SFX: door closing].\n"
        "3. In body and climax, break the line after every sentence or utterance.\n"
        "4. Prefix every line of dialogue with its speaker, e.g. \"Narrator: ...\", \"Husband: ...\", one speaker per line.\n"
        "5. captions: 8-12 lines, each 12-18 characters.\n"
        "6. thumbnails: exactly 3 curiosity-driven captions.\n"
        "7. hashtags: about 20.\n"
    )
    if analysis.risks:
        instruction += f"8. Keep these flagged details out of the script: {', '.join(analysis.risks)}.\n"
    instruction += f"\nWrite everything in {language}."
    return Prompt(system=system, instruction=instruction, response_model=ScriptDraft)
