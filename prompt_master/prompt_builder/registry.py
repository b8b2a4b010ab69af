"""Category registry backing the Prompt Builder catalog.

Every selectable category is described by a :class:`CategorySpec` that declares
its scope, its field shape, and the options a user can pick. Composer and
resolver code reads configuration values through ``CategorySpec.read`` so no
caller needs to know whether a category stores a scalar or a list.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

SCOPES = {"subject", "global"}
GENDERS = {"male", "female"}


class FieldShape(str, Enum):
    SCALAR = "scalar"
    LIST = "list"


@dataclass(frozen=True)
class OptionRecord:
    """One selectable value within a category."""

    value: str
    label: str
    gender: Optional[str] = None
    image: Optional[str] = None

    def allowed_for(self, gender: Optional[str]) -> bool:
        return not self.gender or not gender or self.gender == gender


@dataclass
class CategorySpec:
    """Describe a catalog category and how its values live on a config object."""

    id: str
    label: str
    scope: str
    multi_select: bool = False
    options: Tuple[OptionRecord, ...] = field(default_factory=tuple)
    description: str = ""

    @property
    def shape(self) -> FieldShape:
        return FieldShape.LIST if self.multi_select else FieldShape.SCALAR

    def find_option(self, value: str) -> Optional[OptionRecord]:
        for option in self.options:
            if option.value == value:
                return option
        return None

    def read(self, config: object) -> List[str]:
        """Return the selected values on ``config`` as an ordered list."""

        raw = getattr(config, self.id, None)
        return normalize_values(raw)

    def write(self, config: object, values: Sequence[str]):
        """Return a copy of ``config`` holding ``values`` in this category's shape."""

        cleaned = normalize_values(list(values))
        if self.shape is FieldShape.LIST:
            stored: object = cleaned
        else:
            stored = cleaned[0] if cleaned else ""
        return dataclasses.replace(config, **{self.id: stored})

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "label": self.label,
            "scope": self.scope,
            "multi_select": self.multi_select,
            "description": self.description,
            "options": [dataclasses.asdict(option) for option in self.options],
        }


def normalize_values(raw: object) -> List[str]:
    """Coerce a stored scalar or list into a list of non-empty strings."""

    if raw is None:
        return []
    if isinstance(raw, str):
        return [raw] if raw.strip() else []
    if isinstance(raw, (list, tuple)):
        return [str(item) for item in raw if isinstance(item, str) and item.strip()]
    return []


categories: Dict[str, CategorySpec] = {}


def register_category(spec: CategorySpec) -> CategorySpec:
    """Register a category, replacing any earlier definition with the same id."""

    if spec.scope not in SCOPES:
        raise ValueError(f"category {spec.id} has invalid scope {spec.scope!r}; expected one of {sorted(SCOPES)}")
    for option in spec.options:
        if option.gender is not None and option.gender not in GENDERS:
            raise ValueError(f"option {option.value!r} in {spec.id} has invalid gender {option.gender!r}")
    if spec.id in categories:
        logger.warning("Category %s registered twice; keeping the latest definition", spec.id)
    categories[spec.id] = spec
    return spec


def get_category(category_id: str) -> Optional[CategorySpec]:
    return categories.get(category_id)


def require_category(category_id: str) -> CategorySpec:
    spec = categories.get(category_id)
    if spec is None:
        raise ValueError(f"Unknown category id: {category_id}")
    return spec


def list_categories(scope: Optional[str] = None) -> List[CategorySpec]:
    registered = list(categories.values())
    if scope:
        registered = [spec for spec in registered if spec.scope == scope]
    return registered


def find_option(category_id: str, value: str) -> Optional[OptionRecord]:
    spec = categories.get(category_id)
    if spec is None:
        return None
    return spec.find_option(value)


def reset_registry() -> None:
    categories.clear()


def register_all(specs: Iterable[CategorySpec]) -> None:
    for spec in specs:
        register_category(spec)


def load_default_catalog() -> None:
    """Populate the registry from the bundled catalog when it is empty."""

    if categories:
        return
    # catalog imports this module.
    from .catalog import PROMPT_CATEGORIES

    register_all(PROMPT_CATEGORIES)
