"""Shared data models for the Prompt Builder module.

- Purpose: define the snapshot structures the composition engine reads (subjects,
  global settings, reference images) and the values it returns (sections, results).
- Assumptions: multi-select categories hold ordered lists, single-select categories
  hold a string where ``""`` means unset.
- Side effects: none; classes are passive containers.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Union

from . import registry

SUBJECT_TYPES = ("human", "animal", "vehicle", "scenery", "infographic")
TASK_MODES = ("generation", "editing", "video_generation")
EDITING_INTENTS = ("general", "keep_subject", "keep_composition", "high_denoising")
OUTPUT_FORMATS = ("text", "markdown", "json", "yaml")
GENDERS = ("female", "male")

FieldValue = Union[str, List[str]]


@dataclass
class ReferenceImage:
    id: str
    url: str
    intent: str = "general"


@dataclass
class SubjectConfig:
    """One described entity; only categories allowed for ``subject_type`` are read."""

    id: str = "subject-1"
    subject_type: str = "human"
    gender: Optional[str] = None
    nationality: List[str] = field(default_factory=list)
    age: List[str] = field(default_factory=list)
    body_type: List[str] = field(default_factory=list)
    role: List[str] = field(default_factory=list)
    face_shape: List[str] = field(default_factory=list)
    eye_gaze: List[str] = field(default_factory=list)
    hair_color: List[str] = field(default_factory=list)
    hair_style: List[str] = field(default_factory=list)
    appearance: List[str] = field(default_factory=list)
    clothing: List[str] = field(default_factory=list)
    clothing_detail: List[str] = field(default_factory=list)
    accessories: List[str] = field(default_factory=list)
    action: List[str] = field(default_factory=list)
    hands: List[str] = field(default_factory=list)
    mood: List[str] = field(default_factory=list)
    animal_species: str = ""
    animal_fur: List[str] = field(default_factory=list)
    vehicle_type: str = ""
    vehicle_color: str = ""
    chart_type: str = ""
    infographic_style: str = ""
    infographic_content: str = ""

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "SubjectConfig":
        """Create a SubjectConfig from a JSON-compatible dict."""

        if not isinstance(payload, dict):
            raise ValueError("subject must be a dictionary")
        subject = cls(
            id=str(payload.get("id") or "subject-1"),
            subject_type=str(payload.get("subject_type") or "human"),
            gender=payload.get("gender") or None,
            infographic_content=str(payload.get("infographic_content") or ""),
        )
        subject = _apply_category_values(subject, payload, scope="subject")
        validate_subject(subject)
        return subject


@dataclass
class GlobalConfig:
    """Scene, style, and output settings shared by every subject."""

    task_mode: str = "generation"
    composition: List[str] = field(default_factory=list)
    camera: List[str] = field(default_factory=list)
    environment: List[str] = field(default_factory=list)
    era: str = ""
    lighting: List[str] = field(default_factory=list)
    color_palette: str = ""
    art_style: List[str] = field(default_factory=list)
    aspect_ratio: List[str] = field(default_factory=list)
    camera_movement: List[str] = field(default_factory=list)
    motion_strength: List[str] = field(default_factory=list)
    quality: List[str] = field(default_factory=list)
    preservation: List[str] = field(default_factory=list)
    negative_prompt: str = ""
    use_negative_prompt: bool = True
    reference_images: List[ReferenceImage] = field(default_factory=list)
    interaction: FieldValue = ""

    @property
    def active_negative_prompt(self) -> str:
        """Negative prompt text as seen by every emitter; the flag overrides the text."""

        if not self.use_negative_prompt:
            return ""
        return (self.negative_prompt or "").strip()

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "GlobalConfig":
        """Create a GlobalConfig from a JSON-compatible dict."""

        if not isinstance(payload, dict):
            raise ValueError("global must be a dictionary")

        images_payload = payload.get("reference_images", []) or []
        if not isinstance(images_payload, list):
            raise ValueError("reference_images must be a list")
        images: List[ReferenceImage] = []
        for idx, image in enumerate(images_payload):
            if not isinstance(image, dict):
                raise ValueError(f"reference_images[{idx}] must be a dictionary")
            images.append(
                ReferenceImage(
                    id=str(image.get("id") or f"ref-{idx + 1}"),
                    url=str(image.get("url") or ""),
                    intent=str(image.get("intent") or "general"),
                )
            )

        interaction = payload.get("interaction", "")
        if isinstance(interaction, list):
            interaction = [str(item) for item in interaction]
        else:
            interaction = str(interaction or "")

        config = cls(
            task_mode=str(payload.get("task_mode") or "generation"),
            quality=registry.normalize_values(payload.get("quality", [])),
            preservation=registry.normalize_values(payload.get("preservation", [])),
            negative_prompt=str(payload.get("negative_prompt") or ""),
            use_negative_prompt=bool(payload.get("use_negative_prompt", True)),
            reference_images=images,
            interaction=interaction,
        )
        config = _apply_category_values(config, payload, scope="global")
        validate_global(config)
        return config


@dataclass
class Section:
    """A labeled fragment of the final result used for highlighting and structured output."""

    id: str
    type: str
    label: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class PromptResult:
    full_text: str = ""
    sections: List[Section] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {"full_text": self.full_text, "sections": [section.to_dict() for section in self.sections]}


def _apply_category_values(config, payload: Dict[str, object], scope: str):
    for spec in registry.list_categories(scope=scope):
        if spec.id not in payload:
            continue
        config = spec.write(config, registry.normalize_values(payload.get(spec.id)))
    return config


def validate_subject(subject: SubjectConfig) -> None:
    """Validate the enumerated fields of a SubjectConfig."""

    if not isinstance(subject.id, str) or not subject.id.strip():
        raise ValueError("subject.id must be a non-empty string")
    if subject.subject_type not in SUBJECT_TYPES:
        raise ValueError(f"subject_type must be one of {list(SUBJECT_TYPES)}; received {subject.subject_type!r}")
    if subject.gender is not None and subject.gender not in GENDERS:
        raise ValueError(f"gender must be one of {list(GENDERS)} or None; received {subject.gender!r}")


def validate_global(config: GlobalConfig) -> None:
    """Validate the enumerated fields of a GlobalConfig and its reference images."""

    if config.task_mode not in TASK_MODES:
        raise ValueError(f"task_mode must be one of {list(TASK_MODES)}; received {config.task_mode!r}")
    for idx, image in enumerate(config.reference_images):
        if image.intent not in EDITING_INTENTS:
            raise ValueError(
                f"reference_images[{idx}].intent must be one of {list(EDITING_INTENTS)}; received {image.intent!r}"
            )


@dataclass
class Composition:
    """Intermediate value shared by every emitter.

    ``slots`` holds the ordered prompt fragments for generation and video modes,
    ``instructions`` the arbitrated sentences for editing mode, and ``payload`` the
    structured object graph rendered by the JSON and YAML emitters.
    """

    language: str
    task_mode: str
    slots: List[str] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)
    sections: List[Section] = field(default_factory=list)
    payload: Dict[str, object] = field(default_factory=dict)
    negative_prompt: str = ""
    reference_images: List[ReferenceImage] = field(default_factory=list)
