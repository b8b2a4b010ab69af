"""Field composer: resolve subject and global fields and order them into prompt slots.

Slot order is a fixed sequence per task mode because generative models weight
earlier tokens more heavily. Aspect ratio closes image prompts; camera movement
opens video prompts.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from . import registry
from .catalog import SCENERY_FRAMING_BLACKLIST, SCENERY_MOOD_BLACKLIST, SUBJECT_CATEGORY_CONFIG
from .localization import LanguageProfile, require_language, resolve_field
from .models import GlobalConfig, SubjectConfig

HEADLINE = "headline"
QUALITY = "quality"
INTERACTION = "interaction"

GENERATION_ORDER = (
    HEADLINE,
    "action",
    "environment",
    "clothing",
    "clothing_detail",
    "appearance",
    "accessories",
    "body_type",
    "face_shape",
    "hair_color",
    "hair_style",
    "eye_gaze",
    "hands",
    "composition",
    "camera",
    "lighting",
    "era",
    "art_style",
    "mood",
    "color_palette",
    QUALITY,
    "aspect_ratio",
)

VIDEO_ORDER = (
    "camera_movement",
    HEADLINE,
    "environment",
    "action",
    "motion_strength",
    "clothing",
    "clothing_detail",
    "appearance",
    "hair_color",
    "hair_style",
    "eye_gaze",
    "composition",
    "camera",
    "lighting",
    "era",
    "art_style",
    "mood",
    "color_palette",
    QUALITY,
)

GLOBAL_KEYS = (
    "composition",
    "camera",
    "environment",
    "era",
    "lighting",
    "color_palette",
    "art_style",
    "aspect_ratio",
    "camera_movement",
    "motion_strength",
)

VIDEO_ONLY_CATEGORIES = {"camera_movement", "motion_strength"}
IMAGE_ONLY_CATEGORIES = {"aspect_ratio"}

# Categories folded into the headline phrase rather than emitted as their own slot.
HEADLINE_CATEGORIES: Dict[str, Sequence[str]] = {
    "human": ("nationality", "age", "role"),
    "animal": ("animal_fur", "animal_species"),
    "vehicle": ("vehicle_color", "vehicle_type"),
    "scenery": (),
    "infographic": ("infographic_style", "chart_type"),
}

_FRAMING_CATEGORIES = {"composition", "camera"}


def allowed_categories(subject_type: str) -> List[str]:
    return list(SUBJECT_CATEGORY_CONFIG.get(subject_type, []))


def category_excluded(category_id: str, task_mode: str) -> bool:
    """Return True when ``category_id`` has no meaning in ``task_mode``."""

    if task_mode == "video_generation":
        return category_id in IMAGE_ONLY_CATEGORIES
    return category_id in VIDEO_ONLY_CATEGORIES


def subject_values(subject: SubjectConfig, category_id: str) -> List[str]:
    """Return the raw values of a subject category that survive filtering.

    Categories outside the subject type's allowed set read as empty, options whose
    gender constraint contradicts the subject's gender are dropped, and scenery
    subjects never keep moods that presuppose a facial expression.
    """

    if category_id not in SUBJECT_CATEGORY_CONFIG.get(subject.subject_type, []):
        return []
    spec = registry.get_category(category_id)
    if spec is None:
        return []
    values = spec.read(subject)
    if subject.gender:
        kept = []
        for value in values:
            option = spec.find_option(value)
            if option is None or option.allowed_for(subject.gender):
                kept.append(value)
        values = kept
    if subject.subject_type == "scenery" and category_id == "mood":
        values = [value for value in values if value not in SCENERY_MOOD_BLACKLIST]
    return values


def global_values(config: GlobalConfig, category_id: str, scenery_only: bool = False) -> List[str]:
    """Return the raw values of a global category honoring mode exclusivity."""

    if category_excluded(category_id, config.task_mode):
        return []
    spec = registry.get_category(category_id)
    if spec is None:
        return []
    values = spec.read(config)
    if scenery_only and category_id in _FRAMING_CATEGORIES:
        values = [value for value in values if value not in SCENERY_FRAMING_BLACKLIST]
    return values


def is_scenery_only(subjects: Sequence[SubjectConfig]) -> bool:
    return bool(subjects) and all(subject.subject_type == "scenery" for subject in subjects)


def _resolved(subject: SubjectConfig, category_id: str, language: str) -> str:
    return resolve_field(category_id, subject_values(subject, category_id), language)


def build_headline(subject: SubjectConfig, language: str) -> str:
    """Build the article-prefixed identity phrase for a subject."""

    profile = require_language(language)
    subject_type = subject.subject_type
    if subject_type == "human":
        words = [
            _resolved(subject, "nationality", language),
            _resolved(subject, "age", language),
            profile.gender_term(subject.gender),
            _resolved(subject, "role", language),
        ]
        return profile.with_article(profile.join_words(words))
    if subject_type == "animal":
        species = _resolved(subject, "animal_species", language) or profile.nouns["animal"]
        return profile.with_article(profile.join_words([_resolved(subject, "animal_fur", language), species]))
    if subject_type == "vehicle":
        vehicle = _resolved(subject, "vehicle_type", language) or profile.nouns["vehicle"]
        return profile.with_article(profile.join_words([_resolved(subject, "vehicle_color", language), vehicle]))
    if subject_type == "scenery":
        return profile.with_article(profile.nouns["scenery"])
    if subject_type == "infographic":
        chart = _resolved(subject, "chart_type", language) or profile.nouns["infographic"]
        phrase = profile.join_words([_resolved(subject, "infographic_style", language), chart])
        topic = (subject.infographic_content or "").strip()
        if topic:
            phrase = profile.topic_template.format(subject=phrase, topic=topic)
        return profile.with_article(phrase)
    return ""


def compose_subject(subject: SubjectConfig, language: str) -> Dict[str, str]:
    """Resolve every allowed category of ``subject`` plus its headline.

    Keys are stable for a given subject type; unset categories map to ``""``.
    """

    require_language(language)
    fields: Dict[str, str] = {HEADLINE: build_headline(subject, language)}
    folded = HEADLINE_CATEGORIES.get(subject.subject_type, ())
    for category_id in allowed_categories(subject.subject_type):
        if category_id in folded:
            continue
        fields[category_id] = _resolved(subject, category_id, language)
    return fields


def compose_global(config: GlobalConfig, language: str, scenery_only: bool = False) -> Dict[str, str]:
    """Resolve every global category, quality tags, and interaction text."""

    profile = require_language(language)
    fields: Dict[str, str] = {}
    for category_id in GLOBAL_KEYS:
        fields[category_id] = resolve_field(category_id, global_values(config, category_id, scenery_only), language)
    fields[QUALITY] = resolve_field("quality", config.quality, language)
    fields[INTERACTION] = profile.join_fields(registry.normalize_values(config.interaction))
    return fields


def order_fields(field_map: Dict[str, str], task_mode: str, subject_type: Optional[str] = None) -> List[str]:
    """Return the non-empty slots of ``field_map`` in the task mode's fixed order.

    When ``subject_type`` is given, subject-scope slots outside its allowed set are
    skipped even if present in the map.
    """

    sequence = VIDEO_ORDER if task_mode == "video_generation" else GENERATION_ORDER
    allowed = set(allowed_categories(subject_type)) if subject_type else None
    ordered: List[str] = []
    for slot in sequence:
        value = field_map.get(slot)
        if not value:
            continue
        if category_excluded(slot, task_mode):
            continue
        if allowed is not None:
            spec = registry.get_category(slot)
            if spec is not None and spec.scope == "subject" and slot not in allowed:
                continue
        ordered.append(value)
    return ordered


def subject_phrase(subject: SubjectConfig, task_mode: str, language: str) -> str:
    """Ordered subject-only phrase used for multi-subject prompts and sections."""

    profile = require_language(language)
    return profile.join_fields(order_fields(compose_subject(subject, language), task_mode, subject.subject_type))


def global_slots(config: GlobalConfig, language: str, scenery_only: bool = False) -> List[str]:
    return order_fields(compose_global(config, language, scenery_only), config.task_mode)


def compose_slots(subjects: Sequence[SubjectConfig], config: GlobalConfig, language: str) -> List[str]:
    """Return the ordered prompt slots for the whole scene.

    A single subject interleaves with the global slots. Several subjects are each
    phrased on their own and joined with the language conjunction. Camera movement
    still opens video prompts, followed by the interaction text, the joined
    subjects, and the remaining global slots.
    """

    profile: LanguageProfile = require_language(language)
    scenery_only = is_scenery_only(subjects)
    global_map = compose_global(config, language, scenery_only)

    if len(subjects) == 1:
        subject = subjects[0]
        merged = {**global_map, **compose_subject(subject, language)}
        return order_fields(merged, config.task_mode, subject.subject_type)

    # Global slots ordered ahead of the headline still open the prompt.
    sequence = VIDEO_ORDER if config.task_mode == "video_generation" else GENERATION_ORDER
    leading = set(sequence[: sequence.index(HEADLINE)])
    slots = order_fields({key: global_map[key] for key in leading if key in global_map}, config.task_mode)
    if len(subjects) > 1:
        if global_map[INTERACTION]:
            slots.append(global_map[INTERACTION])
        phrases = [subject_phrase(subject, config.task_mode, language) for subject in subjects]
        joined = profile.conjunction.join(phrase for phrase in phrases if phrase)
        if joined:
            slots.append(joined)
    trailing = {key: value for key, value in global_map.items() if key not in leading}
    slots.extend(order_fields(trailing, config.task_mode))
    return slots
