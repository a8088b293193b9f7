from __future__ import annotations
from typing import Optional
from backend.generation.client import Prompt
from backend.schemas.options import TitleMode
from backend.titles.schemas.title_request import TitleGeneratorInput
from backend.titles.schemas.title_result import TitleResponse

TITLE_COUNT = 20

HOOK_TEMPLATES = [
    '"All because of one {word}, {result}"',
    '"The day my {relationship} {action}, I {decision}"',
    '"I never said a word, yet {twist}"',
    '"After that day, my {relationship} was never the same"',
]


def _mode_rules(mode: TitleMode) -> tuple:
    """(description, length rule) per mode."""
    if mode == TitleMode.SHORTS:
        return ("Shorts (15-60s)",
                "12-22 characters; short, imperative and decisive, lead with a strong verb or reversal.")
    if mode == TitleMode.LONG:
        return ("Long-form (3-10min)",
                "18-32 characters; evocative and atmospheric, let the setting, relationship and feeling linger.")
    raise ValueError(f"Unsupported title mode: {mode!r}")


def build_title_prompt(
    req: TitleGeneratorInput,
    override_filter: Optional[str] = None,
    language: str = "Korean",
) -> Prompt:
    """
    Ask for TITLE_COUNT title candidates, each with a cast and a twist.
    `override_filter` adds one extra constraint line; everything else is unchanged.
    """
    req = req.model_copy(deep=True)
    mode_label, length_rule = _mode_rules(req.m_mode)
    core = req.m_input.strip() or (
        "No specific incident given. Invent the most common, most relatable and highest-engagement "
        "conflict for the chosen category, emotion and relationship, and title that."
    )

    system = (
        "You are a title specialist for YouTube and radio aimed at viewers in their 30s to 60s.\n"
        "Return strict JSON that matches the response schema."
    )
    lines = [
        f"Create {TITLE_COUNT} click-worthy title candidates for the conditions below.",
        "For each title also give the cast that fits it (characters) and its twist or realization (twist).",
        "",
        "[Input]",
        f"- Mode: {mode_label}",
        f"- Category: {req.m_category}",
        f"- Emotion: {req.m_emotion.value}",
        f"- Relationship: {req.m_relationship.value}",
        f"- Core content: {core}",
        f"- Intensity: {req.m_intensity.value}",
    ]
    if override_filter and override_filter.strip():
        lines.append(f"- Extra filter: {override_filter.strip()}")
    lines += [
        "",
        "[Guidance]",
        f"Even when the core content is vague, combine category ({req.m_category}), "
        f"emotion ({req.m_emotion.value}) and relationship ({req.m_relationship.value}) "
        "into the situation that happens most often and draws the most views, and build titles from it. "
        "Never leave a title empty.",
        "",
        "[Title algorithm]",
        f"1. Hook templates: {', '.join(HOOK_TEMPLATES)}. Record the template used in hook_type.",
        f"2. Length rule: {length_rule}",
        "3. No real names or business names (mask as ○○). No profanity.",
        "",
        "[Score (0-100)]",
        "- HookPower (30): strong opening",
        "- Clarity (25): relationship and incident are clear",
        "- Emotion (20): emotional pull",
        "- CuriosityGap (15): twist or open question",
        "- LengthFit (10): fits the length rule",
        "",
        f"Write everything in {language}.",
    ]
    return Prompt(system=system, instruction="\n".join(lines), response_model=TitleResponse)
