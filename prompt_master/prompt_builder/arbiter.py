"""Conflict arbiter for editing mode.

Turns a resolved field set, the preservation flags, and reference-image intents
into ordered imperative instructions. A preservation flag silently removes the
change instructions that would contradict it; nothing is raised.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .composer import compose_global, global_values, is_scenery_only, subject_values
from .localization import require_language, resolve_field
from .models import GlobalConfig, SubjectConfig

FACIAL_FEATURES = "facial features"
HAIR_STYLE = "hair style"
CLOTHING = "clothing"
BACKGROUND = "background environment"
COMPOSITION = "image composition"
LIGHTING = "lighting conditions"
COLOR_PALETTE = "color palette"

# (english, chinese) sentence templates keyed by instruction kind.
TEMPLATES: Dict[str, Dict[str, str]] = {
    "high_denoising": {"en": "Completely reimagine the image.", "zh": "完全重新構想這張圖片。"},
    "keep_subject": {"en": "Keep the facial features unchanged.", "zh": "保持臉部特徵不變。"},
    "keep_composition": {"en": "Retain the original composition and pose.", "zh": "保留原始構圖與姿勢。"},
    "preserve": {"en": "Ensure the {} remain unchanged.", "zh": "確保{}保持不變。"},
    "identity": {"en": "Change the character's appearance to be {}.", "zh": "將角色外觀改為{}。"},
    "subject_identity": {"en": "Change the subject to {}.", "zh": "將主體改為{}。"},
    "role": {"en": "Change the role to a {}.", "zh": "將角色改為{}。"},
    "hair": {"en": "Change hair to {}.", "zh": "將髮型改為{}。"},
    "clothing": {"en": "Change the outfit to {}.", "zh": "將服裝更換為{}。"},
    "accessories": {"en": "Add {} to the character.", "zh": "為角色添加{}。"},
    "action": {"en": "Change pose to {}.", "zh": "將姿勢改為{}。"},
    "hands": {"en": "Character is {}.", "zh": "角色{}。"},
    "background": {"en": "Change the background to {}.", "zh": "將背景改為{}。"},
    "composition": {"en": "Adjust composition to {}.", "zh": "將構圖調整為{}。"},
    "art_style": {"en": "Transform the style to {}.", "zh": "將風格轉換為{}。"},
    "mood": {"en": "Make the character look {}.", "zh": "讓角色看起來{}。"},
    "lighting": {"en": "Apply {}.", "zh": "應用{}。"},
    "color_palette": {"en": "Use a {}.", "zh": "使用{}。"},
    "subject_locator": {"en": "For subject {}:", "zh": "針對第{}個主體："},
}

INTENT_ORDER = ("high_denoising", "keep_subject", "keep_composition")


def _sentence(kind: str, language: str, value: Optional[str] = None) -> str:
    template = TEMPLATES[kind][language]
    return template.format(value) if value is not None else template


def intent_instructions(config: GlobalConfig, language: str) -> List[str]:
    """One fixed sentence per reference image whose intent is not ``general``."""

    require_language(language)
    return [_sentence(image.intent, language) for image in config.reference_images if image.intent in INTENT_ORDER]


def preservation_instruction(config: GlobalConfig, language: str) -> List[str]:
    preserved = resolve_field("preservation", config.preservation, language)
    if not preserved:
        return []
    return [_sentence("preserve", language, preserved)]


def subject_instructions(subject: SubjectConfig, config: GlobalConfig, language: str) -> List[str]:
    """Gated change instructions that concern one subject's own attributes."""

    profile = require_language(language)
    preserved = set(config.preservation)
    instructions: List[str] = []

    def field(category_id: str) -> str:
        return resolve_field(category_id, subject_values(subject, category_id), language)

    if FACIAL_FEATURES not in preserved:
        if subject.subject_type == "human":
            parts = [field("nationality"), field("age")]
            if subject.gender:
                parts.append(profile.gender_term(subject.gender))
            parts.extend([field("face_shape"), field("body_type")])
            identity = profile.join_words(parts)
            if identity:
                instructions.append(_sentence("identity", language, identity))
        else:
            identity = profile.join_words(
                [
                    field("animal_fur"),
                    field("animal_species"),
                    field("vehicle_color"),
                    field("vehicle_type"),
                    field("infographic_style"),
                    field("chart_type"),
                ]
            )
            if identity:
                instructions.append(_sentence("subject_identity", language, identity))

    role = field("role")
    if role:
        instructions.append(_sentence("role", language, role))

    hair = profile.join_words([field("hair_color"), field("hair_style")])
    if hair and HAIR_STYLE not in preserved:
        instructions.append(_sentence("hair", language, hair))

    outfit = profile.join_words([field("clothing"), field("clothing_detail")])
    if outfit and CLOTHING not in preserved:
        instructions.append(_sentence("clothing", language, outfit))

    accessories = field("accessories")
    if accessories:
        instructions.append(_sentence("accessories", language, accessories))

    action = field("action")
    if action and COMPOSITION not in preserved:
        instructions.append(_sentence("action", language, action))

    hands = field("hands")
    if hands:
        instructions.append(_sentence("hands", language, hands))

    return instructions


def scene_instructions(config: GlobalConfig, language: str, scenery_only: bool = False) -> List[str]:
    """Gated change instructions that concern global scene and style settings."""

    profile = require_language(language)
    preserved = set(config.preservation)
    fields = compose_global(config, language, scenery_only)
    instructions: List[str] = []

    background = profile.join_words([fields["environment"], fields["era"]])
    if background and BACKGROUND not in preserved:
        instructions.append(_sentence("background", language, background))

    composition = profile.join_words([fields["composition"], fields["camera"], fields["aspect_ratio"]])
    if composition and COMPOSITION not in preserved:
        instructions.append(_sentence("composition", language, composition))

    if fields["art_style"]:
        instructions.append(_sentence("art_style", language, fields["art_style"]))
    return instructions


def mood_instruction(subject: SubjectConfig, language: str) -> List[str]:
    mood = resolve_field("mood", subject_values(subject, "mood"), language)
    return [_sentence("mood", language, mood)] if mood else []


def tone_instructions(config: GlobalConfig, language: str) -> List[str]:
    preserved = set(config.preservation)
    instructions: List[str] = []
    lighting = resolve_field("lighting", global_values(config, "lighting"), language)
    if lighting and LIGHTING not in preserved:
        instructions.append(_sentence("lighting", language, lighting))
    palette = resolve_field("color_palette", global_values(config, "color_palette"), language)
    if palette and COLOR_PALETTE not in preserved:
        instructions.append(_sentence("color_palette", language, palette))
    return instructions


def build_instructions(subject: Optional[SubjectConfig], config: GlobalConfig, language: str) -> List[str]:
    """Return the ordered editing instructions for a single-subject scene."""

    scenery_only = subject is not None and subject.subject_type == "scenery"
    instructions = intent_instructions(config, language)
    instructions.extend(preservation_instruction(config, language))
    if subject is not None:
        instructions.extend(subject_instructions(subject, config, language))
    instructions.extend(scene_instructions(config, language, scenery_only))
    if subject is not None:
        instructions.extend(mood_instruction(subject, language))
    instructions.extend(tone_instructions(config, language))
    return instructions


def build_scene_instructions(subjects: Sequence[SubjectConfig], config: GlobalConfig, language: str) -> List[str]:
    """Return editing instructions for any number of subjects.

    Intents and preservation are stated once; each subject's own instructions follow
    a locator sentence, then the scene-wide instructions close the list.
    """

    if len(subjects) <= 1:
        return build_instructions(subjects[0] if subjects else None, config, language)

    instructions = intent_instructions(config, language)
    instructions.extend(preservation_instruction(config, language))
    for index, subject in enumerate(subjects, start=1):
        own = subject_instructions(subject, config, language) + mood_instruction(subject, language)
        if own:
            instructions.append(_sentence("subject_locator", language, str(index)))
            instructions.extend(own)
    instructions.extend(scene_instructions(config, language, is_scenery_only(subjects)))
    instructions.extend(tone_instructions(config, language))
    return instructions


def instruction_block(instructions: Sequence[str]) -> str:
    return " ".join(instruction for instruction in instructions if instruction)
