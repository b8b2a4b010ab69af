"""Session models and serialization helpers."""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Tuple

from prompt_master.prompt_builder.models import GlobalConfig, SubjectConfig


def new_id() -> str:
    return uuid.uuid4().hex[:12]


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def snapshot(subjects: List[SubjectConfig], config: GlobalConfig) -> Dict[str, object]:
    """Capture a scene as a JSON-compatible state mapping."""

    return {"subjects": [subject.to_dict() for subject in subjects], "global": config.to_dict()}


def restore(state: Dict[str, object]) -> Tuple[List[SubjectConfig], GlobalConfig]:
    """Rebuild subject and global configs from a stored state mapping."""

    if not isinstance(state, dict):
        raise ValueError("stored state must be a dictionary")
    subjects_payload = state.get("subjects", []) or []
    if not isinstance(subjects_payload, list):
        raise ValueError("stored subjects must be a list")
    subjects = [SubjectConfig.from_dict(payload) for payload in subjects_payload]
    return subjects, GlobalConfig.from_dict(state.get("global", {}) or {})


@dataclass
class HistoryItem:
    """One compiled scene remembered by the session."""

    state: Dict[str, object]
    prompt: str = ""
    id: str = field(default_factory=new_id)
    timestamp: str = field(default_factory=utc_timestamp)
    is_favorite: bool = False

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "HistoryItem":
        return cls(
            state=dict(payload.get("state", {}) or {}),
            prompt=str(payload.get("prompt") or ""),
            id=str(payload.get("id") or new_id()),
            timestamp=str(payload.get("timestamp") or utc_timestamp()),
            is_favorite=bool(payload.get("is_favorite", False)),
        )


@dataclass
class SavedProfile:
    """A named scene the user can reload later."""

    name: str
    state: Dict[str, object]
    id: str = field(default_factory=new_id)
    created_at: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "SavedProfile":
        return cls(
            name=str(payload.get("name") or ""),
            state=dict(payload.get("state", {}) or {}),
            id=str(payload.get("id") or new_id()),
            created_at=str(payload.get("created_at") or utc_timestamp()),
        )
