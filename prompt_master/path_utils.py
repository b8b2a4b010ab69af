"""Platform-aware path utilities for Prompt Master.

Provides a single source of truth for the config, session state, and prompt
bundle paths so Windows entry points can map to APPDATA while Unix-like
platforms continue to use XDG-style defaults.
"""
from __future__ import annotations

import os
import platform
from pathlib import Path


def _is_windows() -> bool:
    return platform.system().lower().startswith("windows")


def get_config_root() -> Path:
    """Return the base configuration directory.

    Environment overrides (PROMPT_MASTER_CONFIG_DIR) take precedence. On Windows we
    align with %APPDATA%\\PromptMaster; otherwise ~/.config/prompt_master is used.
    """

    override = os.environ.get("PROMPT_MASTER_CONFIG_DIR")
    if override:
        return Path(override).expanduser()

    if _is_windows():
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "PromptMaster"

    return Path.home() / ".config" / "prompt_master"


def get_config_file() -> Path:
    """Return the engine defaults configuration file path."""

    override = os.environ.get("PROMPT_MASTER_CONFIG_FILE")
    if override:
        return Path(override).expanduser()
    return get_config_root() / "config.yaml"


def get_state_path() -> Path:
    """Return the session state file (history, favorites, profiles)."""

    override = os.environ.get("PROMPT_MASTER_STATE_FILE")
    if override:
        return Path(override).expanduser()
    return get_config_root() / "session.json"


def get_bundle_path() -> Path:
    """Return where published prompt bundles are written."""

    override = os.environ.get("PROMPT_BUNDLE_PATH")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".cache" / "prompt_master" / "prompt_bundle.json"

