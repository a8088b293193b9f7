from __future__ import annotations
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import ValidationError

from backend.errors import HistoryError
from backend.script.schemas.generated_script import GeneratedScript

logger = logging.getLogger(__name__)

HISTORY_KEY = "radio_scripts_history"
HISTORY_LIMIT = 50
DEFAULT_HISTORY_PATH = "radio_scripts_history.json"
FILE_MODE = 0o644


class ScriptHistory:
    """
    Most-recent-first list of generated scripts, capped at `limit`, mirrored to a JSON file.

    The file holds a single object: {"radio_scripts_history": [record, ...]}.
    Every append/remove rewrites the whole file atomically, so a crash never leaves a half-written list.
    """

    def __init__(self, path: str | Path = DEFAULT_HISTORY_PATH, limit: int = HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.m_path = Path(path)
        self.m_limit = limit
        self._items: List[GeneratedScript] = []

    # ===== Public API =====
    def load(self) -> Tuple[GeneratedScript, ...]:
        """Read the file (missing file = empty history)."""
        if not self.m_path.exists():
            self._items = []
            return self.list()
        try:
            with self.m_path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
            records = raw.get(HISTORY_KEY, []) if isinstance(raw, dict) else None
            if not isinstance(records, list):
                raise HistoryError(f"{self.m_path}: expected an object with a '{HISTORY_KEY}' list")
            items = [GeneratedScript.model_validate(r) for r in records]
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise HistoryError(f"Could not read history from {self.m_path}: {e}") from e
        self._items = items[: self.m_limit]
        logger.info("Loaded %d script(s) from %s", len(self._items), self.m_path)
        return self.list()

    def list(self) -> Tuple[GeneratedScript, ...]:
        return tuple(self._items)

    def get(self, script_id: str) -> Optional[GeneratedScript]:
        for item in self._items:
            if item.m_id == script_id:
                return item
        return None

    def append(self, record: GeneratedScript) -> None:
        """Insert at the front; the oldest entries beyond the cap are dropped."""
        updated = [record] + self._items
        evicted = updated[self.m_limit:]
        updated = updated[: self.m_limit]
        self._write(updated)
        self._items = updated
        if evicted:
            logger.info("History full, dropped %d oldest script(s)", len(evicted))

    def remove(self, script_id: str) -> bool:
        """Delete by id. Returns False (and writes nothing) if no such record."""
        updated = [item for item in self._items if item.m_id != script_id]
        if len(updated) == len(self._items):
            return False
        self._write(updated)
        self._items = updated
        logger.info("Removed script %s from history", script_id)
        return True

    def __len__(self) -> int:
        return len(self._items)

    # ===== Storage =====
    def _write(self, items: List[GeneratedScript]) -> None:
        payload = {HISTORY_KEY: [item.model_dump(mode="json") for item in items]}
        directory = self.m_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=".history-", suffix=".json", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, ensure_ascii=False, indent=2)
                # mkstemp creates 0600; keep the mode a plain open("w") would give
                os.chmod(tmp_path, FILE_MODE)
                os.replace(tmp_path, self.m_path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise HistoryError(f"Could not write history to {self.m_path}: {e}") from e
