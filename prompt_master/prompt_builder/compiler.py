"""Prompt Builder compiler: the resolve → compose → arbitrate → emit pipeline.

The pipeline is a pure function of its inputs. Identical subjects, global
settings, language, and format always produce byte-identical output.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from . import arbiter, composer, emitters, registry
from .localization import require_language, resolve_field
from .models import Composition, GlobalConfig, PromptResult, Section, SubjectConfig

logger = logging.getLogger(__name__)

ENGINES = {"video_generation": "veo/sora"}
DEFAULT_ENGINE = "gemini_nano_banana_pro"


def _subject_sections(subjects: Sequence[SubjectConfig], config: GlobalConfig, language: str) -> List[Section]:
    sections: List[Section] = []
    for index, subject in enumerate(subjects, start=1):
        if config.task_mode == "editing":
            own = arbiter.subject_instructions(subject, config, language)
            own.extend(arbiter.mood_instruction(subject, language))
            content = arbiter.instruction_block(own)
            label = emitters.section_label("instructions", language, index)
        else:
            content = composer.subject_phrase(subject, config.task_mode, language)
            label = emitters.section_label("subject", language, index)
        sections.append(Section(id=subject.id, type="subject", label=label, content=content))
    return sections


def _global_content(subjects: Sequence[SubjectConfig], config: GlobalConfig, language: str) -> str:
    profile = require_language(language)
    scenery_only = composer.is_scenery_only(subjects)
    if config.task_mode == "editing":
        parts = arbiter.intent_instructions(config, language)
        parts.extend(arbiter.preservation_instruction(config, language))
        parts.extend(arbiter.scene_instructions(config, language, scenery_only))
        parts.extend(arbiter.tone_instructions(config, language))
        return arbiter.instruction_block(parts)
    slots = composer.global_slots(config, language, scenery_only)
    if len(subjects) > 1:
        interaction = profile.join_fields(registry.normalize_values(config.interaction))
        if interaction:
            slots.insert(0, interaction)
    return profile.join_fields(slots)


def _payload(
    subjects: Sequence[SubjectConfig],
    config: GlobalConfig,
    language: str,
    instructions: List[str],
    prompt_text: str,
    negative: str,
) -> Dict[str, object]:
    scenery_only = composer.is_scenery_only(subjects)
    global_fields: Dict[str, object] = {
        key: value
        for key, value in composer.compose_global(config, language, scenery_only).items()
        if not composer.category_excluded(key, config.task_mode)
    }
    global_fields["preservation"] = resolve_field("preservation", config.preservation, language)
    return {
        "meta": {
            "language": language,
            "task_mode": config.task_mode,
            "engine": ENGINES.get(config.task_mode, DEFAULT_ENGINE),
            "subject_count": len(subjects),
        },
        "input_images": [
            {"id": image.id, "url": image.url, "intent": image.intent} for image in config.reference_images
        ],
        "subjects": [
            {
                "id": subject.id,
                "subject_type": subject.subject_type,
                "gender": subject.gender or "",
                "fields": composer.compose_subject(subject, language),
            }
            for subject in subjects
        ],
        "global": global_fields,
        "instructions": list(instructions),
        "prompt": prompt_text,
        "negative_prompt": negative,
    }


def compose(subjects: Sequence[SubjectConfig], config: GlobalConfig, language: str = "en") -> Composition:
    """Build the format-independent Composition for a scene snapshot."""

    profile = require_language(language)
    subjects = list(subjects)
    negative = config.active_negative_prompt

    composition = Composition(
        language=language,
        task_mode=config.task_mode,
        negative_prompt=negative,
        reference_images=list(config.reference_images),
    )
    if config.task_mode == "editing":
        composition.instructions = arbiter.build_scene_instructions(subjects, config, language)
        prompt_text = arbiter.instruction_block(composition.instructions)
    else:
        composition.slots = composer.compose_slots(subjects, config, language)
        prompt_text = profile.join_fields(composition.slots)

    composition.sections = emitters.build_sections(
        _subject_sections(subjects, config, language),
        _global_content(subjects, config, language),
        composition,
    )
    composition.payload = _payload(subjects, config, language, composition.instructions, prompt_text, negative)
    return composition


def build_prompt(
    subjects: Sequence[SubjectConfig],
    config: GlobalConfig,
    language: str = "en",
    fmt: str = "text",
) -> PromptResult:
    """Compile a scene snapshot into the requested output format.

    Unsupported ``language`` or ``fmt`` values raise ``ValueError`` before any work
    is done; every other input degrades gracefully.
    """

    require_language(language)
    emitter = emitters.require_format(fmt)
    composition = compose(subjects, config, language)
    full_text = emitter(composition)
    logger.debug(
        "Compiled %d subject(s) in %s mode as %s/%s (%d chars)",
        len(composition.payload.get("subjects", [])),
        composition.task_mode,
        language,
        fmt,
        len(full_text),
    )
    return PromptResult(full_text=full_text, sections=list(composition.sections))
