from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from backend.errors import StudioError
from backend.generation.client import GenerationClient, GeneratorConfig
from backend.history.script_history import DEFAULT_HISTORY_PATH, ScriptHistory
from backend.schemas.generation_settings import GenerationSettings
from backend.schemas.options import TITLE_FILTER_PRESETS, TOPIC_PRESETS
from backend.script.schemas.generated_script import GeneratedScript
from backend.script.schemas.story_input import StoryInput
from backend.script.script_builder import ScriptBuilder
from backend.studio import ScriptStudio
from backend.titles.schemas.title_request import TitleGeneratorInput
from backend.titles.title_builder import TitleBuilder

logger = logging.getLogger("radio_script_studio")


# ---------- helpers ----------
def _maybe_map_user_friendly_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    YAML files may use plain keys (age_group, conflict, ...). Map them to m_* model fields.
    Keys already in m_* form pass through.
    """
    mapped = {}
    for k, v in (data or {}).items():
        mapped[k if k.startswith("m_") else f"m_{k}"] = v
    return mapped


def _load_yaml(path: str) -> Dict[str, Any]:
    cfg_path = Path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(f"YAML config not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{cfg_path}: top level must be a mapping")
    return raw


def _history_from(raw: Dict[str, Any]) -> ScriptHistory:
    path = raw.get("history_path") or os.getenv("SCRIPT_HISTORY_PATH") or DEFAULT_HISTORY_PATH
    history = ScriptHistory(path)
    history.load()
    return history


def _write_json(path: str, data: Any) -> None:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def _preview(script: GeneratedScript, lines: int = 6) -> str:
    head = script.spoken_lines()[:lines]
    return "\n".join([
        f"id: {script.m_id}",
        f"opening: {script.m_opening.strip()[:120]}",
        *head,
        f"thumbnails: {' | '.join(script.m_thumbnails)}",
        f"hashtags: {' '.join(script.m_hashtags)}",
    ])


# ---------- commands ----------
def cmd_script(args: argparse.Namespace) -> int:
    raw = _load_yaml(args.config)
    config = GeneratorConfig.from_dict(raw.get("builder_config"))
    settings = GenerationSettings(**_maybe_map_user_friendly_keys(raw.get("settings")))
    story = StoryInput(**_maybe_map_user_friendly_keys(raw.get("story")))

    history = _history_from(raw)
    studio = ScriptStudio(ScriptBuilder(GenerationClient(config)), history)
    analysis, script = studio.generate(settings, story)

    _write_json(args.out, script.model_dump(mode="json"))
    print(f"Saved script {script.m_id} to {args.out} (safety score {analysis.safety_score:.0f})")
    if analysis.risks:
        print("Risks: " + "; ".join(analysis.risks))
    if args.preview:
        print("\n--- Preview ---")
        print(_preview(script))
    return 0


def cmd_titles(args: argparse.Namespace) -> int:
    raw = _load_yaml(args.config)
    config = GeneratorConfig.from_dict(raw.get("builder_config"))
    data = _maybe_map_user_friendly_keys(raw.get("title"))
    if data.get("m_category") in TOPIC_PRESETS:
        data["m_category"] = TOPIC_PRESETS[data["m_category"]]
    request = TitleGeneratorInput(**data)

    override = args.filter
    if args.preset:
        override = TITLE_FILTER_PRESETS[args.preset]

    titles = TitleBuilder(GenerationClient(config)).generate(request, override)
    for i, t in enumerate(titles, start=1):
        print(f"{i:2d}. [{t.score:5.1f}] {t.title}  ({t.hook_type})")
        print(f"    {t.characters} / {t.twist}")

    if args.apply is not None:
        if not 1 <= args.apply <= len(titles):
            raise ValueError(f"--apply must be between 1 and {len(titles)}")
        story = titles[args.apply - 1].apply_to(StoryInput())
        out_path = Path(args.story_out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("w", encoding="utf-8") as f:
            yaml.safe_dump({"story": story.model_dump(mode="json")}, f, allow_unicode=True, sort_keys=False)
        print(f"Wrote story for title {args.apply} to {out_path}")
    return 0


def cmd_history(args: argparse.Namespace) -> int:
    raw = {"history_path": args.history} if args.history else {}
    history = _history_from(raw)

    if args.action == "list":
        for item in history.list():
            s = item.m_settings
            print(f"{item.m_id}  {item.m_timestamp}  {s.m_format.value}/{s.m_length.value}/{s.m_tone.value}  "
                  f"{(item.m_thumbnails or [''])[0]}")
        return 0

    if not args.id:
        raise ValueError(f"history {args.action} needs a script id")
    if args.action == "show":
        item = history.get(args.id)
        if item is None:
            print(f"No script with id {args.id}", file=sys.stderr)
            return 1
        print(item.export_plain_text())
        print("\n[Captions]\n" + item.export_captions())
        return 0

    if not history.remove(args.id):
        print(f"No script with id {args.id}", file=sys.stderr)
        return 1
    print(f"Deleted {args.id}")
    return 0


# ---------- main ----------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn a story premise into a radio/YouTube script.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...).")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("script", help="Analyze a story and write the full script.")
    p.add_argument("--config", required=True, help="YAML with settings, story and optional builder_config.")
    p.add_argument("--out", default="script.json", help="Where to write the resulting script JSON.")
    p.add_argument("--preview", action="store_true", help="Print a short preview to stdout.")
    p.set_defaults(func=cmd_script)

    p = sub.add_parser("titles", help="Generate title candidates.")
    p.add_argument("--config", required=True, help="YAML with a title block and optional builder_config.")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--filter", help="Extra free-text constraint for this run.")
    group.add_argument("--preset", choices=sorted(TITLE_FILTER_PRESETS), help="Canned extra constraint.")
    p.add_argument("--apply", type=int, help="Turn title N (1-based) into a story YAML.")
    p.add_argument("--story-out", default="story.yaml", help="Where --apply writes the story.")
    p.set_defaults(func=cmd_titles)

    p = sub.add_parser("history", help="List, show or delete saved scripts.")
    p.add_argument("action", choices=["list", "show", "delete"])
    p.add_argument("id", nargs="?")
    p.add_argument("--history", help=f"History file (default: $SCRIPT_HISTORY_PATH or {DEFAULT_HISTORY_PATH}).")
    p.set_defaults(func=cmd_history)
    return parser


def main(argv: List[str] | None = None) -> int:
    """
    Usage:
      python main.py script --config request.yaml --out script.json [--preview]
      python main.py titles --config titles.yaml [--preset tears-only] [--apply 3]
      python main.py history list
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    load_dotenv()

    try:
        return args.func(args)
    except (StudioError, ValidationError, ValueError, FileNotFoundError, yaml.YAMLError) as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
