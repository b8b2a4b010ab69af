"""Pure state transitions over subject and global snapshots.

Every function returns new config objects; inputs are never mutated. Chip clicks
toggle membership while randomize and custom input replace the whole selection.
"""
from __future__ import annotations

import dataclasses
import random
from typing import Dict, List, Optional, Sequence, Tuple

from . import registry
from .catalog import DEFAULT_NEGATIVE_PROMPT, DEFAULT_QUALITY, SUBJECT_CATEGORY_CONFIG, THEME_KEYWORDS
from .composer import category_excluded
from .models import (
    EDITING_INTENTS,
    GENDERS,
    SUBJECT_TYPES,
    TASK_MODES,
    GlobalConfig,
    ReferenceImage,
    SubjectConfig,
)


def default_subject(subject_id: str = "subject-1", subject_type: str = "human") -> SubjectConfig:
    if subject_type not in SUBJECT_TYPES:
        raise ValueError(f"subject_type must be one of {list(SUBJECT_TYPES)}; received {subject_type!r}")
    gender = "female" if subject_type == "human" else None
    return SubjectConfig(id=subject_id, subject_type=subject_type, gender=gender)


def default_global(defaults: Optional[Dict[str, object]] = None) -> GlobalConfig:
    """Return the session-start global settings.

    ``defaults`` is the ``generation`` section of the engine configuration file; keys
    it omits fall back to the bundled quality tags and negative prompt.
    """

    defaults = defaults or {}
    quality = defaults.get("quality")
    config = GlobalConfig(
        task_mode=str(defaults.get("task_mode") or "generation"),
        quality=registry.normalize_values(quality) if quality is not None else list(DEFAULT_QUALITY),
        negative_prompt=str(defaults.get("negative_prompt", DEFAULT_NEGATIVE_PROMPT) or ""),
        use_negative_prompt=bool(defaults.get("use_negative_prompt", True)),
    )
    if config.task_mode not in TASK_MODES:
        raise ValueError(f"task_mode must be one of {list(TASK_MODES)}; received {config.task_mode!r}")
    return config


def select(config, category_id: str, value: str, toggle: bool = True):
    """Apply one selection to the config that owns ``category_id``.

    Multi-select categories toggle membership when ``toggle`` is true and are
    replaced by ``[value]`` otherwise. Scalar categories clear when the same value is
    toggled again and are set outright otherwise.
    """

    spec = registry.require_category(category_id)
    current = spec.read(config)
    if spec.shape is registry.FieldShape.LIST:
        if not toggle:
            values = [value]
        elif value in current:
            values = [item for item in current if item != value]
        else:
            values = current + [value]
    else:
        values = [] if toggle and current == [value] else [value]
    return spec.write(config, values)


def _toggle(values: Sequence[str], value: str) -> List[str]:
    if value in values:
        return [item for item in values if item != value]
    return list(values) + [value]


def toggle_gender(subject: SubjectConfig, gender: str) -> SubjectConfig:
    if gender not in GENDERS:
        raise ValueError(f"gender must be one of {list(GENDERS)}; received {gender!r}")
    return dataclasses.replace(subject, gender=None if subject.gender == gender else gender)


def set_task_mode(
    config: GlobalConfig, task_mode: str, subjects: Sequence[SubjectConfig] = ()
) -> Tuple[GlobalConfig, List[SubjectConfig]]:
    """Switch task mode; entering editing mode leaves every subject's gender unset."""

    if task_mode not in TASK_MODES:
        raise ValueError(f"task_mode must be one of {list(TASK_MODES)}; received {task_mode!r}")
    updated = dataclasses.replace(config, task_mode=task_mode)
    if task_mode == "editing":
        return updated, [dataclasses.replace(subject, gender=None) for subject in subjects]
    return updated, list(subjects)


def toggle_quality_tag(config: GlobalConfig, tag: str) -> GlobalConfig:
    return dataclasses.replace(config, quality=_toggle(config.quality, tag))


def toggle_preservation(config: GlobalConfig, value: str) -> GlobalConfig:
    return dataclasses.replace(config, preservation=_toggle(config.preservation, value))


def set_negative_prompt(config: GlobalConfig, text: str) -> GlobalConfig:
    return dataclasses.replace(config, negative_prompt=text)


def toggle_use_negative_prompt(config: GlobalConfig) -> GlobalConfig:
    return dataclasses.replace(config, use_negative_prompt=not config.use_negative_prompt)


def toggle_negative_tag(config: GlobalConfig, tag: str) -> GlobalConfig:
    """Add or remove one comma-separated tag from the negative prompt text."""

    tags = [part.strip() for part in (config.negative_prompt or "").split(",") if part.strip()]
    return dataclasses.replace(config, negative_prompt=", ".join(_toggle(tags, tag.strip())))


def _candidates(spec: registry.CategorySpec, gender: Optional[str], keywords: Sequence[str]) -> List[str]:
    options = [option for option in spec.options if option.allowed_for(gender)]
    if keywords:
        themed = [option for option in options if any(word in option.value.lower() for word in keywords)]
        if themed:
            options = themed
    return [option.value for option in options]


def randomize(
    subject: SubjectConfig,
    config: GlobalConfig,
    rng: Optional[random.Random] = None,
    theme: Optional[str] = None,
) -> Tuple[SubjectConfig, GlobalConfig]:
    """Pick one option per eligible category, replacing existing selections.

    Subject categories outside the subject type's allowed set and global categories
    excluded by the task mode are left untouched. Theme keywords narrow the options
    when at least one option matches; otherwise the full gender-compatible set is used.
    """

    if theme is not None and theme not in THEME_KEYWORDS:
        raise ValueError(f"theme must be one of {sorted(THEME_KEYWORDS)}; received {theme!r}")
    rng = rng or random.Random()
    keywords = THEME_KEYWORDS.get(theme, []) if theme else []
    allowed = set(SUBJECT_CATEGORY_CONFIG.get(subject.subject_type, []))

    for spec in registry.list_categories():
        if spec.scope == "subject" and spec.id not in allowed:
            continue
        if spec.scope == "global" and category_excluded(spec.id, config.task_mode):
            continue
        candidates = _candidates(spec, subject.gender, keywords)
        if not candidates:
            continue
        choice = rng.choice(candidates)
        if spec.scope == "subject":
            subject = spec.write(subject, [choice])
        else:
            config = spec.write(config, [choice])
    return subject, config


def clear(subject: SubjectConfig, config: GlobalConfig) -> Tuple[SubjectConfig, GlobalConfig]:
    """Reset every selection while keeping identity, subject type, gender, and task mode."""

    cleared_subject = SubjectConfig(id=subject.id, subject_type=subject.subject_type, gender=subject.gender)
    cleared_config = GlobalConfig(task_mode=config.task_mode, quality=list(DEFAULT_QUALITY))
    return cleared_subject, cleared_config


def add_reference_image(config: GlobalConfig, image: ReferenceImage) -> GlobalConfig:
    """Prepend ``image`` so the newest reference is listed first."""

    if image.intent not in EDITING_INTENTS:
        raise ValueError(f"intent must be one of {list(EDITING_INTENTS)}; received {image.intent!r}")
    return dataclasses.replace(config, reference_images=[image] + list(config.reference_images))


def update_reference_image(config: GlobalConfig, image_id: str, **updates: str) -> GlobalConfig:
    unknown = set(updates) - {"url", "intent"}
    if unknown:
        raise ValueError(f"unsupported reference image fields: {sorted(unknown)}")
    if "intent" in updates and updates["intent"] not in EDITING_INTENTS:
        raise ValueError(f"intent must be one of {list(EDITING_INTENTS)}; received {updates['intent']!r}")
    images = [
        dataclasses.replace(image, **updates) if image.id == image_id else image for image in config.reference_images
    ]
    return dataclasses.replace(config, reference_images=images)


def remove_reference_image(config: GlobalConfig, image_id: str) -> GlobalConfig:
    images = [image for image in config.reference_images if image.id != image_id]
    return dataclasses.replace(config, reference_images=images)
