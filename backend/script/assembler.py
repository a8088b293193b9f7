import time
import uuid
from typing import Optional
from backend.schemas.generation_settings import GenerationSettings
from backend.script.schemas.generated_script import GeneratedScript, ScriptDraft


def new_script_id() -> str:
    return uuid.uuid4().hex


def assemble_script(draft: ScriptDraft, settings: GenerationSettings, now_ms: Optional[int] = None) -> GeneratedScript:
    """Attach a fresh id, the creation time and a copy of the settings to a model draft."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return GeneratedScript(
        m_id=new_script_id(),
        m_opening=draft.opening,
        m_intro=draft.intro,
        m_body=draft.body,
        m_climax=draft.climax,
        m_ending=draft.ending,
        m_comment=draft.comment.model_copy(),
        m_captions=tuple(draft.captions),
        m_thumbnails=tuple(draft.thumbnails),
        m_hashtags=tuple(draft.hashtags),
        m_settings=settings.model_copy(deep=True),
        m_timestamp=now_ms,
    )
