"""Session persistence: prompt history, favorites, and saved profiles."""

from .models import HistoryItem, SavedProfile
from .store import SessionStore

__all__ = ["HistoryItem", "SavedProfile", "SessionStore"]
