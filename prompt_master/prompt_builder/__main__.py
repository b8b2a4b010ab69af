"""Command line entry point: compile a scene file into a prompt."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from prompt_master.config_service.config_service import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_ENV_PREFIX,
    ConfigError,
    load_config,
)
from prompt_master.path_utils import get_state_path
from prompt_master.session.models import snapshot
from prompt_master.session.store import SessionStore

from .localization import LANGUAGES
from .models import OUTPUT_FORMATS
from .services import PromptCompilerService, UIIntegrationHooks, load_scene_file, parse_scene


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compile a Prompt Master scene into a prompt")
    parser.add_argument("--scene", required=True, help="Path to a JSON or YAML scene file")
    parser.add_argument("--language", choices=sorted(LANGUAGES), help="Output language (overrides the scene)")
    parser.add_argument("--format", dest="fmt", choices=list(OUTPUT_FORMATS), help="Output format (overrides the scene)")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to the engine defaults config file")
    parser.add_argument("--sections", action="store_true", help="Print the full result with sections as JSON")
    parser.add_argument("--publish", action="store_true", help="Write the compiled prompt bundle to disk")
    parser.add_argument("--bundle-path", dest="bundle_path", help="Override the prompt bundle destination")
    parser.add_argument("--history", action="store_true", help="Record the compiled scene in session history")
    parser.add_argument("--state", help="Override the session state file used by --history")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        loaded = load_config(args.config, DEFAULT_ENV_PREFIX, [])
        payload = load_scene_file(Path(args.scene))
        if args.language:
            payload["language"] = args.language
        if args.fmt:
            payload["format"] = args.fmt
        scene = parse_scene(payload, defaults=loaded.data)
    except (ConfigError, ValueError, OSError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    for note in loaded.warnings:
        print(f"[warn] {note}", file=sys.stderr)

    bundle_path = args.bundle_path or loaded.data.get("publish", {}).get("bundle_path") or None
    hooks = UIIntegrationHooks(bundle_path=Path(bundle_path) if bundle_path else None)
    preflight_error = hooks.preflight_scene(scene)
    if preflight_error:
        print(f"[error] {preflight_error}", file=sys.stderr)
        return 1

    result = PromptCompilerService().compile_scene(scene)
    if args.sections:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(result.full_text)

    if args.publish:
        hooks.publish_prompt(scene, result)
        print(f"[info] Published prompt bundle to {hooks.bundle_path}", file=sys.stderr)
    if args.history:
        store = SessionStore(
            Path(args.state) if args.state else get_state_path(),
            max_history=loaded.data["history"]["max_items"],
        ).load()
        state = snapshot(scene.subjects, scene.global_config)
        if store.add_to_history(state, prompt=result.full_text) is not None:
            store.save()
    return 0


if __name__ == "__main__":
    sys.exit(main())
