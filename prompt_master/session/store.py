"""JSON-backed store for prompt history, favorites, and saved profiles.

The composition engine never reads or writes this store; callers decide when a
compiled scene is worth remembering.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from prompt_master.path_utils import get_state_path

from .models import HistoryItem, SavedProfile

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY = 50
STORE_VERSION = 1


class SessionStore:
    """Keep history (newest first), favorites, and profiles in one JSON file."""

    def __init__(self, path: Optional[Path] = None, max_history: int = DEFAULT_MAX_HISTORY) -> None:
        if max_history < 1:
            raise ValueError(f"max_history must be positive; received {max_history}")
        self.path = Path(path) if path else get_state_path()
        self.max_history = max_history
        self.history: List[HistoryItem] = []
        self.favorites: List[HistoryItem] = []
        self.profiles: List[SavedProfile] = []

    def load(self) -> "SessionStore":
        """Read the store from disk; a missing or unreadable file leaves it empty."""

        self.history, self.favorites, self.profiles = [], [], []
        if not self.path.exists():
            return self
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(payload, dict):
                raise ValueError("session file root must be an object")
            self.history = [HistoryItem.from_dict(item) for item in payload.get("history", [])]
            self.favorites = [HistoryItem.from_dict(item) for item in payload.get("favorites", [])]
            self.profiles = [SavedProfile.from_dict(item) for item in payload.get("profiles", [])]
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("Failed to load session state from %s: %s", self.path, exc)
            self.history, self.favorites, self.profiles = [], [], []
        self.history = self.history[: self.max_history]
        return self

    def save(self) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"version": STORE_VERSION, **self.to_dict()}
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        return self.path

    # -- history ---------------------------------------------------------

    def add_to_history(self, state: Dict[str, object], prompt: str = "") -> Optional[HistoryItem]:
        """Record ``state`` unless it is identical to the most recent entry."""

        if self.history and self.history[0].state == state:
            logger.debug("Skipping duplicate history snapshot")
            return None
        item = HistoryItem(state=copy.deepcopy(state), prompt=prompt)
        self.history = [item] + self.history[: self.max_history - 1]
        return item

    def clear_history(self) -> None:
        self.history = []

    def find_history(self, item_id: str) -> Optional[HistoryItem]:
        for item in self.history:
            if item.id == item_id:
                return item
        return None

    # -- favorites -------------------------------------------------------

    def _mark_history(self, item_id: str, favorite: bool) -> None:
        for item in self.history:
            if item.id == item_id:
                item.is_favorite = favorite

    def toggle_favorite(self, item_id: str) -> bool:
        """Flip the favorite status of a history or favorite entry; return the new status."""

        if any(item.id == item_id for item in self.favorites):
            self.remove_favorite(item_id)
            return False
        item = self.find_history(item_id)
        if item is None:
            raise ValueError(f"No history entry with id {item_id}")
        favorite = copy.deepcopy(item)
        favorite.is_favorite = True
        self.favorites = [favorite] + self.favorites
        self._mark_history(item_id, True)
        return True

    def remove_favorite(self, item_id: str) -> None:
        self.favorites = [item for item in self.favorites if item.id != item_id]
        self._mark_history(item_id, False)

    # -- profiles --------------------------------------------------------

    def save_profile(self, name: str, state: Dict[str, object]) -> SavedProfile:
        if not name or not name.strip():
            raise ValueError("profile name must be a non-empty string")
        profile = SavedProfile(name=name.strip(), state=copy.deepcopy(state))
        self.profiles = [profile] + self.profiles
        return profile

    def delete_profile(self, profile_id: str) -> bool:
        remaining = [profile for profile in self.profiles if profile.id != profile_id]
        deleted = len(remaining) != len(self.profiles)
        self.profiles = remaining
        return deleted

    def get_profile(self, profile_id: str) -> SavedProfile:
        for profile in self.profiles:
            if profile.id == profile_id:
                return profile
        raise ValueError(f"No saved profile with id {profile_id}")

    def to_dict(self) -> Dict[str, object]:
        return {
            "history": [item.to_dict() for item in self.history],
            "favorites": [item.to_dict() for item in self.favorites],
            "profiles": [profile.to_dict() for profile in self.profiles],
        }
