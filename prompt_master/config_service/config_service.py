#!/usr/bin/env python3
"""Configuration service for Prompt Master.

Loads and saves the engine defaults file (JSON or YAML). Missing keys fall back
to the bundled defaults; environment and command line overrides are validated
before use. An env-style export serves shell consumers.
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import yaml

from prompt_master.path_utils import get_config_file
from prompt_master.prompt_builder.catalog import DEFAULT_NEGATIVE_PROMPT, DEFAULT_QUALITY
from prompt_master.prompt_builder.localization import LANGUAGES
from prompt_master.prompt_builder.models import OUTPUT_FORMATS, TASK_MODES


class ConfigError(Exception):
    pass


DEFAULT_CONFIG_PATH = str(get_config_file())
DEFAULT_ENV_PREFIX = "PROMPT_MASTER_"
CURRENT_VERSION = 1
DEFAULT_MAX_HISTORY = 50


DEFAULT_CONFIG: Dict[str, Any] = {
    "version": CURRENT_VERSION,
    "output": {
        "language": "en",
        "format": "text",
    },
    "generation": {
        "task_mode": "generation",
        "quality": list(DEFAULT_QUALITY),
        "negative_prompt": DEFAULT_NEGATIVE_PROMPT,
        "use_negative_prompt": True,
    },
    "history": {
        "max_items": DEFAULT_MAX_HISTORY,
    },
    "publish": {
        "bundle_path": "",
    },
}


@dataclass
class LoadedConfig:
    data: Dict[str, Any]
    warnings: List[str]


def ensure_config_root(path: str) -> None:
    root = os.path.dirname(path)
    if root and not os.path.exists(root):
        os.makedirs(root, exist_ok=True)


def coerce_value(value: Any) -> Any:
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in {"true", "1", "yes", "on"}:
            return True
        if lower in {"false", "0", "no", "off"}:
            return False
        if lower.isdigit():
            try:
                return int(lower)
            except ValueError:
                return value
    return value


def deep_get(data: Dict[str, Any], path: str) -> Any:
    current: Any = data
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


def deep_set(data: Dict[str, Any], path: str, value: Any) -> None:
    current = data
    parts = path.split(".")
    for key in parts[:-1]:
        if key not in current or not isinstance(current[key], dict):
            current[key] = {}
        current = current[key]
    current[parts[-1]] = value


def merge_defaults(data: Dict[str, Any], defaults: Dict[str, Any] = DEFAULT_CONFIG) -> Dict[str, Any]:
    merged = deepcopy(defaults)
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_defaults(value, merged[key])
        else:
            merged[key] = deepcopy(value)
    return merged


def load_raw_config(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return deepcopy(DEFAULT_CONFIG)

    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    stripped = text.lstrip()
    if not stripped:
        return deepcopy(DEFAULT_CONFIG)

    try:
        if stripped.startswith("{") or stripped.startswith("["):
            data = json.loads(text)
        else:
            data = yaml.safe_load(text) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse configuration at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be an object/dictionary.")
    return data


def validate(config: Dict[str, Any], warnings: List[str]) -> Dict[str, Any]:
    def validate_enum(path: str, allowed: List[str]) -> None:
        value = deep_get(config, path)
        default = deep_get(DEFAULT_CONFIG, path)
        if value is None:
            deep_set(config, path, default)
        elif value not in allowed:
            warnings.append(f"Invalid {path} '{value}' replaced with '{default}'. Allowed: {sorted(allowed)}")
            deep_set(config, path, default)

    validate_enum("output.language", list(LANGUAGES))
    validate_enum("output.format", list(OUTPUT_FORMATS))
    validate_enum("generation.task_mode", list(TASK_MODES))

    def validate_bool(path: str) -> None:
        value = deep_get(config, path)
        if value is None:
            return
        if isinstance(value, bool):
            return
        warnings.append(f"Field {path} expected boolean; coerced from '{value}'.")
        deep_set(config, path, bool(coerce_value(str(value))))

    validate_bool("generation.use_negative_prompt")

    quality = deep_get(config, "generation.quality")
    if isinstance(quality, str):
        deep_set(config, "generation.quality", [tag.strip() for tag in quality.split(",") if tag.strip()])
    elif quality is not None and not isinstance(quality, list):
        warnings.append("Field generation.quality expected a list; default quality tags restored.")
        deep_set(config, "generation.quality", list(DEFAULT_QUALITY))

    max_items = deep_get(config, "history.max_items")
    if max_items is None:
        deep_set(config, "history.max_items", DEFAULT_MAX_HISTORY)
    elif isinstance(max_items, bool) or not isinstance(max_items, int) or max_items < 1:
        warnings.append(f"Field history.max_items must be a positive integer; received '{max_items}'.")
        deep_set(config, "history.max_items", DEFAULT_MAX_HISTORY)

    return config


def save_config(data: Dict[str, Any], path: str) -> None:
    ensure_config_root(path)
    ext = os.path.splitext(path)[1].lower()
    if ext in {".yaml", ".yml"}:
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
    else:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


def flatten_for_env(config: Dict[str, Any]) -> Dict[str, Any]:
    quality = deep_get(config, "generation.quality")
    flattened = {
        "language": deep_get(config, "output.language"),
        "format": deep_get(config, "output.format"),
        "task_mode": deep_get(config, "generation.task_mode"),
        "quality": ",".join(quality) if isinstance(quality, list) else None,
        "negative_prompt": deep_get(config, "generation.negative_prompt"),
        "use_negative_prompt": deep_get(config, "generation.use_negative_prompt"),
        "history_max_items": deep_get(config, "history.max_items"),
        "bundle_path": deep_get(config, "publish.bundle_path") or None,
        "config_version": config.get("version", CURRENT_VERSION),
    }
    return {k: v for k, v in flattened.items() if v is not None}


def apply_overrides(config: Dict[str, Any], overrides: List[str]) -> None:
    for override in overrides:
        if "=" not in override:
            raise ConfigError(f"Override '{override}' must use key=value format")
        key, raw_value = override.split("=", 1)
        deep_set(config, key.strip(), coerce_value(raw_value.strip()))


def apply_env_overrides(config: Dict[str, Any], prefix: str, warnings: List[str]) -> None:
    if not prefix:
        return
    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        path = key[len(prefix) :].lower().replace("__", ".")
        # Path variables share the prefix but are not configuration keys.
        if "." not in path:
            continue
        warnings.append(f"Environment override {key} applied to {path}")
        deep_set(config, path, coerce_value(value))


def load_config(path: str, env_prefix: str, overrides: List[str]) -> LoadedConfig:
    warnings: List[str] = []
    raw = load_raw_config(path)
    config = merge_defaults(raw)
    config["version"] = CURRENT_VERSION
    apply_env_overrides(config, env_prefix, warnings)
    if overrides:
        apply_overrides(config, overrides)
    validated = validate(config, warnings)
    return LoadedConfig(validated, warnings)


def export_env(config: Dict[str, Any]) -> str:
    lines = []
    for key, value in flatten_for_env(config).items():
        if isinstance(value, bool):
            value = "true" if value else "false"
        lines.append(f"{key}={value}")
    return "\n".join(lines)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Prompt Master configuration service")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to the JSON/YAML config file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Export configuration")
    export_parser.add_argument("--format", choices=["json", "yaml", "env"], default="env")
    export_parser.add_argument(
        "--env-prefix", default=DEFAULT_ENV_PREFIX, help="Environment variable prefix for overrides"
    )
    export_parser.add_argument("--set", dest="overrides", action="append", default=[], help="Override key=value pairs")

    save_parser = subparsers.add_parser("save", help="Persist configuration changes")
    save_parser.add_argument("--set", dest="overrides", action="append", default=[], help="Updated key=value pairs")
    return parser


def command_export(args: argparse.Namespace) -> int:
    loaded = load_config(args.config, args.env_prefix, args.overrides)
    if args.format == "json":
        json.dump(loaded.data, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    elif args.format == "yaml":
        yaml.safe_dump(loaded.data, sys.stdout, sort_keys=False, allow_unicode=True)
    else:
        sys.stdout.write(export_env(loaded.data) + "\n")
    for note in loaded.warnings:
        print(f"[warn] {note}", file=sys.stderr)
    return 0


def command_save(args: argparse.Namespace) -> int:
    loaded = load_config(args.config, env_prefix="", overrides=args.overrides)
    save_config(loaded.data, args.config)
    for note in loaded.warnings:
        print(f"[warn] {note}", file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "export":
            return command_export(args)
        if args.command == "save":
            return command_save(args)
    except ConfigError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
