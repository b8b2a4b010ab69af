"""Prompt composition engine.

Importing the package registers the bundled category catalog so resolvers and
composers can look options up by category id.
"""
from __future__ import annotations

from .compiler import build_prompt, compose
from .models import GlobalConfig, PromptResult, ReferenceImage, Section, SubjectConfig
from .registry import load_default_catalog

load_default_catalog()

__all__ = [
    "GlobalConfig",
    "PromptResult",
    "ReferenceImage",
    "Section",
    "SubjectConfig",
    "build_prompt",
    "compose",
    "load_default_catalog",
]
