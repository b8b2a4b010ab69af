"""CLI utilities to inspect prompt history, favorites, and saved profiles."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable

from prompt_master.path_utils import get_state_path
from prompt_master.prompt_builder.services import load_scene_file, parse_scene

from .models import restore, snapshot
from .store import DEFAULT_MAX_HISTORY, SessionStore


def _open_store(args: argparse.Namespace) -> SessionStore:
    return SessionStore(Path(args.state), max_history=args.max_history).load()


def _summary(text: str, width: int = 60) -> str:
    line = " ".join(text.split())
    return line if len(line) <= width else line[: width - 3] + "..."


def show_history(args: argparse.Namespace) -> None:
    store = _open_store(args)
    if not store.history:
        print("History is empty.")
        return
    for item in store.history[: args.limit]:
        marker = "*" if item.is_favorite else " "
        print(f"{marker} {item.id}  {item.timestamp}  {_summary(item.prompt)}")


def show_favorites(args: argparse.Namespace) -> None:
    store = _open_store(args)
    if not store.favorites:
        print("No favorites saved.")
        return
    for item in store.favorites:
        print(f"{item.id}  {item.timestamp}  {_summary(item.prompt)}")


def toggle_favorite(args: argparse.Namespace) -> None:
    store = _open_store(args)
    is_favorite = store.toggle_favorite(args.id)
    store.save()
    print(f"{'Added' if is_favorite else 'Removed'} favorite {args.id}")


def show_profiles(args: argparse.Namespace) -> None:
    store = _open_store(args)
    if not store.profiles:
        print("No profiles saved.")
        return
    for profile in store.profiles:
        print(f"{profile.id}: {profile.name} ({profile.created_at})")


def save_profile(args: argparse.Namespace) -> None:
    scene = parse_scene(load_scene_file(Path(args.scene)))
    store = _open_store(args)
    profile = store.save_profile(args.name, snapshot(scene.subjects, scene.global_config))
    destination = store.save()
    print(f"Saved profile {profile.id} ({profile.name}) to {destination}")


def delete_profile(args: argparse.Namespace) -> None:
    store = _open_store(args)
    if not store.delete_profile(args.id):
        raise ValueError(f"No saved profile with id {args.id}")
    store.save()
    print(f"Deleted profile {args.id}")


def show_profile(args: argparse.Namespace) -> None:
    store = _open_store(args)
    profile = store.get_profile(args.id)
    # Round-trip through the models so stale or hand-edited states are rejected.
    subjects, config = restore(profile.state)
    state = {"subjects": [subject.to_dict() for subject in subjects], "global": config.to_dict()}
    print(json.dumps({"id": profile.id, "name": profile.name, "state": state}, indent=2, ensure_ascii=False))


def clear_history(args: argparse.Namespace) -> None:
    store = _open_store(args)
    store.clear_history()
    store.save()
    print("History cleared.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage Prompt Master history, favorites, and profiles")
    parser.add_argument("--state", default=str(get_state_path()), help="Path to the session state JSON file")
    parser.add_argument("--max-history", dest="max_history", type=int, default=DEFAULT_MAX_HISTORY)
    subparsers = parser.add_subparsers(dest="command", required=True)

    history = subparsers.add_parser("history", help="List recent prompts, newest first")
    history.add_argument("--limit", type=int, default=DEFAULT_MAX_HISTORY, help="Maximum entries to show")
    history.set_defaults(func=show_history)

    favorites = subparsers.add_parser("favorites", help="List favorite prompts")
    favorites.set_defaults(func=show_favorites)

    favorite = subparsers.add_parser("favorite", help="Toggle the favorite flag on a history entry")
    favorite.add_argument("id", help="History entry id")
    favorite.set_defaults(func=toggle_favorite)

    profiles = subparsers.add_parser("profiles", help="List saved profiles")
    profiles.set_defaults(func=show_profiles)

    save = subparsers.add_parser("save-profile", help="Save a scene file as a named profile")
    save.add_argument("name", help="Profile display name")
    save.add_argument("--scene", required=True, help="Path to a JSON or YAML scene file")
    save.set_defaults(func=save_profile)

    delete = subparsers.add_parser("delete-profile", help="Delete a saved profile")
    delete.add_argument("id", help="Profile id")
    delete.set_defaults(func=delete_profile)

    show = subparsers.add_parser("show-profile", help="Show a saved profile as JSON")
    show.add_argument("id", help="Profile id")
    show.set_defaults(func=show_profile)

    clear = subparsers.add_parser("clear-history", help="Remove every history entry")
    clear.set_defaults(func=clear_history)

    return parser


def main(argv: Iterable[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        args.func(args)
    except ValueError as exc:
        raise SystemExit(f"[error] {exc}") from exc


if __name__ == "__main__":
    main()
