import sys
from pathlib import Path

import pytest
import yaml

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from prompt_master.prompt_builder import emitters
from prompt_master.prompt_builder.models import Composition, ReferenceImage, Section


def test_yaml_scalar_quoting():
    assert emitters.yaml_scalar("golden hour") == "golden hour"
    assert emitters.yaml_scalar("aspect ratio 16:9") == '"aspect ratio 16:9"'
    assert emitters.yaml_scalar("peaceful, serene") == '"peaceful, serene"'
    assert emitters.yaml_scalar("yes") == '"yes"'
    assert emitters.yaml_scalar("1920") == '"1920"'
    assert emitters.yaml_scalar('say "hi"\nnow') == '"say \\"hi\\"\\nnow"'
    assert emitters.yaml_scalar("- item") == '"- item"'
    assert emitters.yaml_scalar(3) == "3"
    assert emitters.yaml_scalar(True) == "true"


@pytest.mark.parametrize(
    "text",
    ["2024-01-01", ".inf", "0x1F", "1_000", "<<", "=", "line\rbreak", "bell\x07", "tab\there", "n"],
)
def test_yaml_scalar_keeps_implicitly_typed_text_as_strings(text):
    rendered = emitters.to_yaml({"negative_prompt": text})
    assert yaml.safe_load(rendered) == {"negative_prompt": text}


def test_to_yaml_block_style_round_trips_through_a_parser():
    data = {
        "meta": {"language": "en", "subject_count": 2},
        "subjects": [
            {"id": "a", "fields": {"headline": "A cat", "mood": ""}},
            {"id": "b", "fields": {"headline": "A dog"}},
        ],
        "tags": ["8k", "HDR", "aspect ratio 1:1"],
        "empty": [],
        "blank": "  ",
    }
    text = emitters.to_yaml(data)
    assert text.splitlines()[:3] == ["meta:", "  language: en", "  subject_count: 2"]
    assert "  - id: a" in text.splitlines()
    assert yaml.safe_load(text) == {
        "meta": {"language": "en", "subject_count": 2},
        "subjects": [
            {"id": "a", "fields": {"headline": "A cat"}},
            {"id": "b", "fields": {"headline": "A dog"}},
        ],
        "tags": ["8k", "HDR", "aspect ratio 1:1"],
    }


def test_to_yaml_of_empty_mapping_is_empty():
    assert emitters.to_yaml({"a": "", "b": [], "c": {}}) == ""


def test_emit_text_skips_empty_parts():
    composition = Composition(language="zh", task_mode="generation", slots=["一個貓", "", "海灘"])
    assert emitters.emit_text(composition) == "一個貓，海灘"


def test_emit_text_lists_references_only_in_generation():
    images = [ReferenceImage(id="r1", url="https://a"), ReferenceImage(id="r2", url="https://b")]
    generation = Composition(language="en", task_mode="generation", slots=["A cat"], reference_images=images)
    assert emitters.emit_text(generation) == "A cat\n\n[References: https://a, https://b]"
    video = Composition(language="en", task_mode="video_generation", slots=["A cat"], reference_images=images)
    assert emitters.emit_text(video) == "A cat"


def test_emit_markdown_skips_empty_sections():
    composition = Composition(
        language="en",
        task_mode="generation",
        sections=[
            Section(id="s1", type="subject", label="Subject 1", content="A cat"),
            Section(id="global", type="global", label="Scene & Style", content=""),
        ],
    )
    assert emitters.emit_markdown(composition) == "**Subject 1**\n> A cat"


def test_section_labels_localized():
    assert emitters.section_label("subject", "zh", 2) == "主體 2"
    assert emitters.section_label("negative", "en") == "Negative Prompt"


def test_build_sections_in_editing_mode():
    composition = Composition(
        language="zh",
        task_mode="editing",
        negative_prompt="blurry",
        reference_images=[ReferenceImage(id="r1", url="https://a", intent="high_denoising")],
    )
    sections = emitters.build_sections([], "應用霓虹燈光。", composition)
    assert [(section.type, section.label) for section in sections] == [
        ("global", "編輯指令"),
        ("negative", "負面提示詞"),
        ("reference", "參考圖 1"),
    ]
    assert sections[2].content == "https://a (high_denoising)"


def test_require_format():
    assert emitters.require_format("json") is emitters.emit_json
    with pytest.raises(ValueError):
        emitters.require_format("html")
