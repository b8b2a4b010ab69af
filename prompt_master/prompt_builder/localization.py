"""Localization resolver: map canonical option values to display terms per language."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from . import registry
from .catalog import PRESERVATION_OPTIONS, QUALITY_TAGS
from .registry import OptionRecord

RANDOM_MARKER = "random "
RANDOM_PLACEHOLDER = "隨機"

_GLOSS_SPLIT = re.compile(r"[(（]")


@dataclass(frozen=True)
class LanguageProfile:
    code: str
    separator: str
    conjunction: str
    article: str
    word_joiner: str
    gender_terms: Dict[str, str]
    nouns: Dict[str, str]
    topic_template: str

    def with_article(self, phrase: str) -> str:
        return self.article.format(phrase) if phrase else ""

    def join_words(self, words: Iterable[str]) -> str:
        return self.word_joiner.join(word for word in words if word)

    def join_fields(self, parts: Iterable[str]) -> str:
        return self.separator.join(part for part in parts if part)

    def gender_term(self, gender: Optional[str]) -> str:
        return self.gender_terms.get(gender or "", self.gender_terms[""])


LANGUAGES: Dict[str, LanguageProfile] = {
    "en": LanguageProfile(
        code="en",
        separator=", ",
        conjunction=" AND ",
        article="A {}",
        word_joiner=" ",
        gender_terms={"female": "woman", "male": "man", "": "person"},
        nouns={"animal": "animal", "vehicle": "vehicle", "infographic": "infographic", "scenery": "scenic landscape"},
        topic_template="{subject} about {topic}",
    ),
    "zh": LanguageProfile(
        code="zh",
        separator="，",
        conjunction=" 以及 ",
        article="一個{}",
        word_joiner="",
        gender_terms={"female": "女性", "male": "男性", "": "人物"},
        nouns={"animal": "動物", "vehicle": "車輛", "infographic": "資訊圖表", "scenery": "風景畫面"},
        topic_template="關於{topic}的{subject}",
    ),
}

# Pseudo-categories with their own option catalogs.
_PSEUDO_CATALOGS: Dict[str, Tuple[OptionRecord, ...]] = {
    "quality": QUALITY_TAGS,
    "preservation": PRESERVATION_OPTIONS,
}


def require_language(language: str) -> LanguageProfile:
    """Return the profile for ``language`` or fail fast for unsupported codes."""

    profile = LANGUAGES.get(language)
    if profile is None:
        raise ValueError(f"language must be one of {sorted(LANGUAGES)}; received {language!r}")
    return profile


def extract_label(full_label: str) -> str:
    """Return the label text before any parenthesised gloss."""

    return _GLOSS_SPLIT.split(full_label, maxsplit=1)[0].strip()


def _lookup(category_id: str, value: str) -> Optional[OptionRecord]:
    pseudo = _PSEUDO_CATALOGS.get(category_id)
    if pseudo is not None:
        for option in pseudo:
            if option.value == value:
                return option
        return None
    return registry.find_option(category_id, value)


def resolve(category_id: str, value: str, language: str) -> str:
    """Resolve one raw value to its display term; lookup misses echo the value."""

    require_language(language)
    if not value:
        return ""
    if language == "en":
        return value
    if value.startswith(RANDOM_MARKER):
        return RANDOM_PLACEHOLDER
    option = _lookup(category_id, value)
    if option is None:
        return value
    return extract_label(option.label) or value


def resolve_field(category_id: str, value: object, language: str) -> str:
    """Resolve a scalar or list field and join it once with the language separator."""

    profile = require_language(language)
    values = registry.normalize_values(value)
    return profile.join_fields(resolve(category_id, item, language) for item in values)
