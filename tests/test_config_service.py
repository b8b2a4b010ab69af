import json
import sys
from pathlib import Path

import yaml

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from prompt_master.config_service import config_service
from prompt_master.prompt_builder.catalog import DEFAULT_QUALITY


def _export_json(config_path, capsys, *extra):
    code = config_service.main(["--config", str(config_path), "export", "--format", "json", *extra])
    captured = capsys.readouterr()
    return code, json.loads(captured.out), captured.err


def test_missing_file_exports_defaults(tmp_path, capsys):
    code, payload, _ = _export_json(tmp_path / "config.yaml", capsys)
    assert code == 0
    assert payload["output"] == {"language": "en", "format": "text"}
    assert payload["generation"]["quality"] == DEFAULT_QUALITY
    assert payload["history"]["max_items"] == 50
    assert not (tmp_path / "config.yaml").exists()


def test_partial_file_is_merged_onto_defaults(tmp_path, capsys):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("output:\n  language: zh\nhistory:\n  max_items: 10\n", encoding="utf-8")

    code, payload, _ = _export_json(config_path, capsys)
    assert code == 0
    assert payload["version"] == config_service.CURRENT_VERSION
    assert payload["output"] == {"language": "zh", "format": "text"}
    assert payload["generation"]["quality"] == DEFAULT_QUALITY
    assert payload["history"]["max_items"] == 10
    assert yaml.safe_load(config_path.read_text(encoding="utf-8"))["output"] == {"language": "zh"}


def test_key_value_file_is_rejected(tmp_path, capsys):
    config_path = tmp_path / "prompt.conf"
    config_path.write_text("language=zh\nformat=markdown\n", encoding="utf-8")
    assert config_service.main(["--config", str(config_path), "export"]) == 1
    assert "object/dictionary" in capsys.readouterr().err


def test_invalid_enums_are_replaced_with_warnings(tmp_path, capsys):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("output:\n  language: fr\n  format: html\n", encoding="utf-8")

    code, payload, err = _export_json(config_path, capsys)
    assert code == 0
    assert payload["output"] == {"language": "en", "format": "text"}
    assert "output.language" in err
    assert "output.format" in err


def test_environment_overrides(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("PROMPT_MASTER_OUTPUT__FORMAT", "yaml")
    monkeypatch.setenv("PROMPT_MASTER_STATE_FILE", str(tmp_path / "session.json"))

    code, payload, err = _export_json(tmp_path / "config.yaml", capsys)
    assert code == 0
    assert payload["output"]["format"] == "yaml"
    assert "PROMPT_MASTER_OUTPUT__FORMAT" in err
    assert "state_file" not in payload


def test_set_overrides_are_validated(tmp_path, capsys):
    code, payload, err = _export_json(
        tmp_path / "config.yaml",
        capsys,
        "--set",
        "history.max_items=0",
        "--set",
        "generation.use_negative_prompt=off",
    )
    assert code == 0
    assert payload["history"]["max_items"] == 50
    assert payload["generation"]["use_negative_prompt"] is False
    assert "history.max_items" in err


def test_malformed_override_reports_error(tmp_path, capsys):
    code = config_service.main(["--config", str(tmp_path / "config.yaml"), "export", "--set", "history"])
    assert code == 1
    assert "key=value" in capsys.readouterr().err


def test_save_writes_yaml(tmp_path):
    config_path = tmp_path / "nested" / "config.yaml"
    code = config_service.main(["--config", str(config_path), "save", "--set", "output.language=zh"])
    assert code == 0
    saved = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    assert saved["output"]["language"] == "zh"
    assert saved["generation"]["negative_prompt"]


def test_unparseable_file_reports_error(tmp_path, capsys):
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json", encoding="utf-8")
    assert config_service.main(["--config", str(config_path), "export"]) == 1
    assert "[error]" in capsys.readouterr().err


def test_env_export(tmp_path, capsys):
    code = config_service.main(["--config", str(tmp_path / "config.yaml"), "export", "--set", "output.language=zh"])
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert "language=zh" in lines
    assert "use_negative_prompt=true" in lines
    assert "history_max_items=50" in lines
