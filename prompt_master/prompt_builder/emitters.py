"""Format emitters: render one Composition as text, markdown, JSON, or YAML."""
from __future__ import annotations

import json
from typing import Callable, Dict, List, Sequence

from yaml.nodes import ScalarNode
from yaml.resolver import Resolver

from .arbiter import instruction_block
from .localization import require_language
from .models import Composition, OUTPUT_FORMATS, Section

SECTION_LABELS: Dict[str, Dict[str, str]] = {
    "subject": {"en": "Subject {}", "zh": "主體 {}"},
    "instructions": {"en": "Instructions {}", "zh": "指令 {}"},
    "global": {"en": "Scene & Style", "zh": "場景與風格"},
    "global_instructions": {"en": "Editing Instructions", "zh": "編輯指令"},
    "negative": {"en": "Negative Prompt", "zh": "負面提示詞"},
    "reference": {"en": "Reference {}", "zh": "參考圖 {}"},
}

YAML_SIGNIFICANT = set(":#[]{},*!")
_YAML_RESERVED = {"true", "false", "yes", "no", "on", "off", "null", "~", "y", "n"}
_RESOLVER = Resolver()
_STR_TAG = "tag:yaml.org,2002:str"
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def section_label(kind: str, language: str, index: int = 0) -> str:
    return SECTION_LABELS[kind][language].format(index)


def emit_text(composition: Composition) -> str:
    """Plain prompt text with the reference list and ``--no`` negative suffix."""

    profile = require_language(composition.language)
    if composition.task_mode == "editing":
        body = instruction_block(composition.instructions)
    else:
        body = profile.join_fields(composition.slots)

    parts: List[str] = [body]
    if composition.task_mode == "generation" and composition.reference_images:
        urls = ", ".join(image.url for image in composition.reference_images)
        parts.append(f"[References: {urls}]")
    if composition.negative_prompt:
        parts.append(f"--no {composition.negative_prompt}")
    return "\n\n".join(part for part in parts if part)


def emit_markdown(composition: Composition) -> str:
    """One bold-labeled blockquote per non-empty section."""

    blocks = [f"**{section.label}**\n> {section.content}" for section in composition.sections if section.content]
    return "\n\n".join(blocks)


def emit_json(composition: Composition) -> str:
    return json.dumps(composition.payload, indent=2, ensure_ascii=False)


def _prune(value: object) -> object:
    """Drop empty strings, empty collections, and ``None`` recursively."""

    if value is None:
        return None
    if isinstance(value, str):
        return value if value.strip() else None
    if isinstance(value, dict):
        pruned = {}
        for key, child in value.items():
            kept = _prune(child)
            if kept is not None:
                pruned[key] = kept
        return pruned or None
    if isinstance(value, (list, tuple)):
        items = [kept for kept in (_prune(child) for child in value) if kept is not None]
        return items or None
    return value


def _needs_quotes(text: str) -> bool:
    if any(char in YAML_SIGNIFICANT for char in text):
        return True
    if text != text.strip() or any(ord(char) < 32 or ord(char) == 127 for char in text) or "\\" in text:
        return True
    if text[0] in "-?&|>%@`\"'":
        return True
    if text.lower() in _YAML_RESERVED:
        return True
    # Plain scalars a YAML 1.1 loader would not read back as strings.
    return _RESOLVER.resolve(ScalarNode, text, (True, False)) != _STR_TAG


def _escape(text: str) -> str:
    escaped = []
    for char in text:
        if char in _ESCAPES:
            escaped.append(_ESCAPES[char])
        elif ord(char) < 32 or ord(char) == 127:
            escaped.append(f"\\x{ord(char):02x}")
        else:
            escaped.append(char)
    return "".join(escaped)


def yaml_scalar(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    text = str(value)
    if not text:
        return '""'
    if not _needs_quotes(text):
        return text
    return f'"{_escape(text)}"'


def _yaml_lines(value: object, indent: int) -> List[str]:
    pad = "  " * indent
    lines: List[str] = []
    if isinstance(value, dict):
        for key, child in value.items():
            if isinstance(child, (dict, list)):
                lines.append(f"{pad}{key}:")
                lines.extend(_yaml_lines(child, indent + 1))
            else:
                lines.append(f"{pad}{key}: {yaml_scalar(child)}")
    elif isinstance(value, list):
        for child in value:
            if isinstance(child, dict):
                nested = _yaml_lines(child, indent + 1)
                nested[0] = f"{pad}- " + nested[0][len(pad) + 2 :]
                lines.extend(nested)
            elif isinstance(child, list):
                lines.append(f"{pad}-")
                lines.extend(_yaml_lines(child, indent + 1))
            else:
                lines.append(f"{pad}- {yaml_scalar(child)}")
    else:
        lines.append(f"{pad}{yaml_scalar(value)}")
    return lines


def to_yaml(data: Dict[str, object]) -> str:
    """Serialize a JSON-compatible mapping as block-style YAML, omitting empties."""

    pruned = _prune(data)
    if not pruned:
        return ""
    return "\n".join(_yaml_lines(pruned, 0))


def emit_yaml(composition: Composition) -> str:
    return to_yaml(composition.payload)


EMITTERS: Dict[str, Callable[[Composition], str]] = {
    "text": emit_text,
    "markdown": emit_markdown,
    "json": emit_json,
    "yaml": emit_yaml,
}


def require_format(fmt: str) -> Callable[[Composition], str]:
    emitter = EMITTERS.get(fmt)
    if emitter is None:
        raise ValueError(f"format must be one of {list(OUTPUT_FORMATS)}; received {fmt!r}")
    return emitter


def build_sections(
    subject_contents: Sequence[Section],
    global_content: str,
    composition: Composition,
) -> List[Section]:
    """Assemble the ordered section list: subjects, global, negative, references."""

    language = composition.language
    kind = "global_instructions" if composition.task_mode == "editing" else "global"
    sections = list(subject_contents)
    sections.append(Section(id="global", type="global", label=section_label(kind, language), content=global_content))
    if composition.negative_prompt:
        sections.append(
            Section(
                id="negative",
                type="negative",
                label=section_label("negative", language),
                content=composition.negative_prompt,
            )
        )
    for index, image in enumerate(composition.reference_images, start=1):
        sections.append(
            Section(
                id=image.id,
                type="reference",
                label=section_label("reference", language, index),
                content=f"{image.url} ({image.intent})",
            )
        )
    return sections
