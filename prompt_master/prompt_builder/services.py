"""Service facade for the Prompt Builder module."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
import json
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from prompt_master.path_utils import get_bundle_path

from . import compiler
from .emitters import require_format
from .localization import require_language
from .models import GlobalConfig, PromptResult, SubjectConfig
from .selection import default_global


@dataclass
class Scene:
    """A complete compile request: subjects, global settings, and output options."""

    subjects: List[SubjectConfig] = field(default_factory=list)
    global_config: GlobalConfig = field(default_factory=GlobalConfig)
    language: str = "en"
    fmt: str = "text"


def parse_scene(payload: Dict[str, object], defaults: Optional[Dict[str, object]] = None) -> Scene:
    """Build a Scene from a ``{subjects, global, language, format}`` mapping.

    ``defaults`` is the loaded engine configuration; its ``output`` section supplies
    the language and format when the payload omits them, and its ``generation``
    section seeds the global settings before the payload's own keys are applied.
    """

    if not isinstance(payload, dict):
        raise ValueError("scene must be a dictionary")
    defaults = defaults or {}
    output_defaults = defaults.get("output") or {}

    subjects_payload = payload.get("subjects")
    if subjects_payload is None:
        subjects_payload = []
    if not isinstance(subjects_payload, list):
        raise ValueError("subjects must be a list")
    subjects: List[SubjectConfig] = []
    for idx, subject_payload in enumerate(subjects_payload):
        if not isinstance(subject_payload, dict):
            raise ValueError(f"subjects[{idx}] must be a dictionary")
        subjects.append(SubjectConfig.from_dict({"id": f"subject-{idx + 1}", **subject_payload}))

    global_payload = payload.get("global")
    if global_payload is None:
        global_payload = {}
    if not isinstance(global_payload, dict):
        raise ValueError("global must be a dictionary")
    seeded = {**default_global(defaults.get("generation")).to_dict(), **global_payload}
    global_config = GlobalConfig.from_dict(seeded)

    language = str(payload.get("language") or output_defaults.get("language") or "en")
    fmt = str(payload.get("format") or output_defaults.get("format") or "text")
    require_language(language)
    require_format(fmt)
    return Scene(subjects=subjects, global_config=global_config, language=language, fmt=fmt)


def load_scene_file(path: Path) -> Dict[str, object]:
    """Read a scene description from a JSON or YAML file."""

    text = Path(path).read_text(encoding="utf-8")
    if Path(path).suffix.lower() in {".yaml", ".yml"}:
        try:
            loaded = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"scene file {path} is not valid YAML: {exc}") from exc
    else:
        loaded = json.loads(text)
    if not isinstance(loaded, dict):
        raise ValueError(f"scene file {path} must contain a mapping")
    return loaded


class PromptCompilerService:
    """Facade to compile scenes into prompt results."""

    def compile_scene(self, scene: Scene) -> PromptResult:
        return compiler.build_prompt(scene.subjects, scene.global_config, scene.language, scene.fmt)


class UIIntegrationHooks:
    """Hooks for UI layers to coordinate prompt compilation and delivery.

    When a prompt is published the compiled bundle is written to disk so downstream
    tools can ingest the latest prompt payload without additional RPC plumbing.
    """

    def __init__(self, bundle_path: Optional[Path] = None) -> None:
        self.bundle_path = Path(bundle_path) if bundle_path else get_bundle_path()

    def preflight_scene(self, scene: Scene) -> Optional[str]:
        """Validate a scene before compilation.

        Returns a string message when the scene is rejected; otherwise returns ``None``.
        """

        if not scene.subjects:
            return "Provide at least one subject before compiling."
        return None

    def publish_prompt(self, scene: Scene, result: PromptResult) -> Dict:
        """Persist a compiled prompt for consumption by other tools."""

        payload = {
            "language": scene.language,
            "format": scene.fmt,
            "task_mode": scene.global_config.task_mode,
            "prompt": result.full_text,
            "sections": [section.to_dict() for section in result.sections],
        }
        self._write_bundle(payload)
        return payload

    def _write_bundle(self, payload: Dict) -> None:
        """Write the prompt bundle to disk."""

        bundle_dir = self.bundle_path.parent
        bundle_dir.mkdir(parents=True, exist_ok=True)

        enriched_payload = {
            **payload,
            "compiled_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "bundle_path": str(self.bundle_path),
        }
        self.bundle_path.write_text(json.dumps(enriched_payload, indent=2, ensure_ascii=False), encoding="utf-8")
