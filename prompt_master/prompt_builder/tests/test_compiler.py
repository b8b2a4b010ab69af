import importlib
import json
import sys
from pathlib import Path

import pytest
import yaml

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from prompt_master.prompt_builder import compiler
from prompt_master.prompt_builder.models import GlobalConfig, ReferenceImage, SubjectConfig


def _subject():
    return SubjectConfig(
        gender="female",
        nationality=["Taiwanese"],
        age=["20 years old"],
        clothing=["white button-up shirt"],
    )


def _config(**overrides):
    values = dict(
        environment=["beach"],
        lighting=["golden hour"],
        aspect_ratio=["aspect ratio 16:9"],
        quality=["masterpiece"],
        negative_prompt="blurry, lowres",
    )
    values.update(overrides)
    return GlobalConfig(**values)


def test_text_prompt_for_single_subject():
    result = compiler.build_prompt([_subject()], _config(), "en", "text")
    assert result.full_text == (
        "A Taiwanese 20 years old woman, beach, white button-up shirt, golden hour, masterpiece, aspect ratio 16:9"
        "\n\n--no blurry, lowres"
    )


def test_text_prompt_in_chinese():
    result = compiler.build_prompt([_subject()], _config(negative_prompt=""), "zh", "text")
    assert result.full_text == "一個台灣20歲女性，海灘，白襯衫，黃金時刻，傑作，16:9"


def test_reference_urls_listed_before_negative_in_generation():
    config = _config(reference_images=[ReferenceImage(id="r1", url="https://example.com/a.png")])
    text = compiler.build_prompt([_subject()], config).full_text
    assert text.endswith("\n\n[References: https://example.com/a.png]\n\n--no blurry, lowres")


def test_negative_gate_applies_to_every_format():
    config = _config(use_negative_prompt=False)
    for fmt in ("text", "markdown", "json", "yaml"):
        result = compiler.build_prompt([_subject()], config, "en", fmt)
        assert "blurry" not in result.full_text
        assert all(section.type != "negative" for section in result.sections)


def test_sections_order_and_labels():
    config = _config(reference_images=[ReferenceImage(id="r1", url="https://example.com/a.png", intent="keep_subject")])
    result = compiler.build_prompt([_subject()], config)
    assert [section.type for section in result.sections] == ["subject", "global", "negative", "reference"]
    subject, scene, negative, reference = result.sections
    assert subject.id == "subject-1"
    assert subject.label == "Subject 1"
    assert subject.content == "A Taiwanese 20 years old woman, white button-up shirt"
    assert scene.label == "Scene & Style"
    assert scene.content == "beach, golden hour, masterpiece, aspect ratio 16:9"
    assert negative.content == "blurry, lowres"
    assert reference.content == "https://example.com/a.png (keep_subject)"


def test_markdown_blocks_follow_sections():
    result = compiler.build_prompt([_subject()], _config(), "en", "markdown")
    assert result.full_text == (
        "**Subject 1**\n> A Taiwanese 20 years old woman, white button-up shirt\n\n"
        "**Scene & Style**\n> beach, golden hour, masterpiece, aspect ratio 16:9\n\n"
        "**Negative Prompt**\n> blurry, lowres"
    )


def test_json_payload():
    result = compiler.build_prompt([_subject()], _config(), "en", "json")
    payload = json.loads(result.full_text)
    assert payload["meta"] == {
        "language": "en",
        "task_mode": "generation",
        "engine": "gemini_nano_banana_pro",
        "subject_count": 1,
    }
    fields = payload["subjects"][0]["fields"]
    assert fields["headline"] == "A Taiwanese 20 years old woman"
    assert fields["clothing"] == "white button-up shirt"
    assert fields["hair_style"] == ""
    assert payload["global"]["aspect_ratio"] == "aspect ratio 16:9"
    assert "camera_movement" not in payload["global"]
    assert "motion_strength" not in payload["global"]
    assert payload["negative_prompt"] == "blurry, lowres"
    assert payload["prompt"].startswith("A Taiwanese 20 years old woman, beach")


def test_json_keeps_chinese_characters_unescaped():
    result = compiler.build_prompt([_subject()], _config(), "zh", "json")
    assert "一個台灣20歲女性" in result.full_text


def test_video_mode_engine_and_exclusivity():
    config = _config(task_mode="video_generation", camera_movement=["camera dolly in"])
    text = compiler.build_prompt([_subject()], config).full_text
    assert text.startswith("camera dolly in, A Taiwanese 20 years old woman")
    assert "aspect ratio" not in text
    payload = json.loads(compiler.build_prompt([_subject()], config, "en", "json").full_text)
    assert payload["meta"]["engine"] == "veo/sora"
    assert "aspect_ratio" not in payload["global"]
    assert payload["global"]["camera_movement"] == "camera dolly in"


def test_generation_mode_drops_video_only_fields():
    config = _config(camera_movement=["camera dolly in"], motion_strength=["slow motion"])
    text = compiler.build_prompt([_subject()], config).full_text
    assert "dolly" not in text
    assert "slow motion" not in text
    payload = json.loads(compiler.build_prompt([_subject()], config, "en", "json").full_text)
    assert "camera_movement" not in payload["global"]
    assert "slow motion" not in json.dumps(payload)


def test_yaml_output_parses_and_omits_empty_values():
    result = compiler.build_prompt([_subject()], _config(negative_prompt=""), "en", "yaml")
    data = yaml.safe_load(result.full_text)
    assert data["meta"]["subject_count"] == 1
    assert data["meta"]["engine"] == "gemini_nano_banana_pro"
    fields = data["subjects"][0]["fields"]
    assert fields["headline"] == "A Taiwanese 20 years old woman"
    assert "hair_style" not in fields
    assert "negative_prompt" not in data
    assert "instructions" not in data
    assert data["global"]["aspect_ratio"] == "aspect ratio 16:9"
    assert data["prompt"] == "A Taiwanese 20 years old woman, beach, white button-up shirt, golden hour, masterpiece, aspect ratio 16:9"


def test_yaml_output_in_chinese_parses():
    config = _config(reference_images=[ReferenceImage(id="r1", url="https://example.com/a.png")])
    data = yaml.safe_load(compiler.build_prompt([_subject()], config, "zh", "yaml").full_text)
    assert data["subjects"][0]["fields"]["headline"] == "一個台灣20歲女性"
    assert data["input_images"] == [{"id": "r1", "url": "https://example.com/a.png", "intent": "general"}]


def test_editing_mode_text_and_sections():
    subject = SubjectConfig(hair_style=["long straight hair"], clothing=["leather jacket"])
    config = GlobalConfig(
        task_mode="editing",
        preservation=["facial features"],
        environment=["forest"],
        reference_images=[ReferenceImage(id="r1", url="https://example.com/a.png", intent="keep_composition")],
    )
    result = compiler.build_prompt([subject], config)
    assert result.full_text == (
        "Retain the original composition and pose. Ensure the facial features remain unchanged. "
        "Change hair to long straight hair. Change the outfit to leather jacket. Change the background to forest."
    )
    subject_section, global_section, reference = result.sections
    assert subject_section.label == "Instructions 1"
    assert subject_section.content == "Change hair to long straight hair. Change the outfit to leather jacket."
    assert global_section.label == "Editing Instructions"
    assert global_section.content == (
        "Retain the original composition and pose. Ensure the facial features remain unchanged. "
        "Change the background to forest."
    )
    assert reference.type == "reference"


def test_editing_json_lists_instructions():
    config = GlobalConfig(task_mode="editing", lighting=["neon lighting"])
    payload = json.loads(compiler.build_prompt([SubjectConfig()], config, "en", "json").full_text)
    assert payload["instructions"] == ["Apply neon lighting."]
    assert payload["prompt"] == "Apply neon lighting."


def test_multi_subject_sections_and_interaction():
    subjects = [
        SubjectConfig(id="a", gender="male", role=["warrior"]),
        SubjectConfig(id="b", subject_type="animal", animal_species="wolf"),
    ]
    config = GlobalConfig(interaction="fighting side by side", environment=["abandoned ruins"])
    result = compiler.build_prompt(subjects, config)
    assert result.full_text == "fighting side by side, A man warrior AND A wolf, abandoned ruins"
    assert [section.label for section in result.sections] == ["Subject 1", "Subject 2", "Scene & Style"]
    assert result.sections[2].content == "fighting side by side, abandoned ruins"


def test_output_is_byte_identical_for_identical_inputs():
    for fmt in ("text", "markdown", "json", "yaml"):
        first = compiler.build_prompt([_subject()], _config(), "zh", fmt)
        second = compiler.build_prompt([_subject()], _config(), "zh", fmt)
        assert first.full_text == second.full_text
        assert first.to_dict() == second.to_dict()


def test_inputs_are_not_mutated():
    subject = _subject()
    config = _config()
    before = (subject.to_dict(), config.to_dict())
    compiler.build_prompt([subject], config, "zh", "yaml")
    assert (subject.to_dict(), config.to_dict()) == before


def test_unsupported_language_and_format_fail_fast():
    with pytest.raises(ValueError):
        compiler.build_prompt([_subject()], _config(), "fr")
    with pytest.raises(ValueError):
        compiler.build_prompt([_subject()], _config(), "en", "xml")


def test_empty_scene_yields_empty_text():
    result = compiler.build_prompt([], GlobalConfig())
    assert result.full_text == ""
    assert [section.type for section in result.sections] == ["global"]


@pytest.mark.parametrize(
    "module_name",
    [
        "prompt_master.prompt_builder",
        "prompt_master.prompt_builder.composer",
        "prompt_master.prompt_builder.arbiter",
        "prompt_master.prompt_builder.__main__",
        "prompt_master.session.cli",
        "prompt_master.config_service.config_service",
    ],
)
def test_entry_point_modules_import(module_name):
    assert importlib.import_module(module_name) is not None
